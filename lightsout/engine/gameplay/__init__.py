from lightsout.engine.gameplay.replay import ReplayError, replay

__all__ = ["ReplayError", "replay"]

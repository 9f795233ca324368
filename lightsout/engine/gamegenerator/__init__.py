from lightsout.engine.gamegenerator.generator import GameGenerator

__all__ = ["GameGenerator"]

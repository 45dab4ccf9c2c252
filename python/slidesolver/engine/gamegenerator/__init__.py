from slidesolver.engine.gamegenerator.generator import GameGenerator

__all__ = ["GameGenerator"]

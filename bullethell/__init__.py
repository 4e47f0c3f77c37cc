"""An arcade bullet-hell game: dodge hostile projectiles, collect healing ones."""

__version__ = "0.1.0"
__all__ = ["__version__"]
from .rng import RngManager

__all__ = ["RngManager"]

from .linear_scale import LinearScale

__all__ = ["LinearScale"]

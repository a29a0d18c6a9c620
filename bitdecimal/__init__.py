"""A 128-bit decimal value with bit-level access, scale alignment and magnitude comparison."""

__version__ = "0.1.0"
__all__ = ["decimal", "scale"]
"""A console desk for registering, prioritising and attending tickets."""

__version__ = "0.1.0"
__all__ = ["__version__"]
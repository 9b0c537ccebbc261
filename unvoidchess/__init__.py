"""A terminal chess variant with Product Owners, Developers and Designers."""

__version__ = "0.1.0"
__all__ = ["__version__"]
"""Threaded news-broadcast pipeline of producers, a dispatcher, co-editors and a screen manager."""

__version__ = "0.1.0"
__all__ = ["__version__"]
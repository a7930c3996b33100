# Routers package for the quote service

from . import quotes

__all__ = ["quotes"]

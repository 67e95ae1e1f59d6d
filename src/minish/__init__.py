"""minish - a minimal interactive command shell."""

from .core import Shell

__version__ = "0.1.0"

__all__ = ["Shell"]

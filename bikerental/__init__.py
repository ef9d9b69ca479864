"""Script-driven bike rental system: members, bikes, a login session and rentals."""

__version__ = "1.0.0"
__all__ = ["__version__"]
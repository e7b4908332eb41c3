"""Client for a small chat service: registration, login and friend lists."""

__version__ = "0.1.0"

__all__ = ["__version__"]
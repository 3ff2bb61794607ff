"""Smart-home scenario note manager."""

__version__ = "0.1.0"

"""Export MySQL table and view structure and sample data to SQL files."""

__version__ = "0.1.0"
__all__ = ["__version__"]
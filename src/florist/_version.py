__version__ = "2024.6.1"

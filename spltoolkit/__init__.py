"""Collections, option parsing, random numbers, directed graphs and shape models."""

__version__ = "0.1.0"
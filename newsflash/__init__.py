"""NewsFlash - news headlines and search client."""

__version__ = "0.1.0"

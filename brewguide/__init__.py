"""BrewGuide — a guided pour-over coffee timer."""

__version__ = "0.1.0"

"""passforge — password generator CLI with light/dark terminal themes."""

__version__ = "0.1.0"

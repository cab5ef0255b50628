"""Unity Mod Manager integration for a game mod manager host."""

__version__ = "0.1.0"

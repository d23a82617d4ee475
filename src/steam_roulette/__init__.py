"""Steam Roulette - launch a random game from your Steam library."""

__version__ = "0.3.0"

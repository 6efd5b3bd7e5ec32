"""wordcrawl - deadline-aware concurrent word-frequency crawler."""

__version__ = "0.1.0"

"""Review sentiment: train and score a binary text-sentiment classifier."""

__version__ = '0.1.0'

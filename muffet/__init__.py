"""A three-lane arcade dodging game for pygame with a persistent highscore table."""

__version__ = "1.0.1"
__all__ = ["__version__"]
"""evscore - composite Ethereum Validator Score."""

__version__ = "0.1.0"

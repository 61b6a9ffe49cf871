"""
Custom exception classes for the indicator pipeline.
"""


class CandleSignalsError(Exception):
    """Base exception for all candlesignals errors."""
    pass


class InvalidArgumentError(CandleSignalsError):
    """Raised when an indicator is called with an unusable parameter."""
    pass


class IndicatorNotFoundError(CandleSignalsError):
    """Raised when a requested indicator module does not exist."""
    pass


class DataFormatError(CandleSignalsError):
    """Raised when bar data cannot be parsed."""
    pass


class ConfigurationError(CandleSignalsError):
    """Raised when configuration is invalid or missing."""
    pass

"""Exception hierarchy for the ADF converter."""


class AdfConverterError(Exception):
    """Base exception for all adf-converter errors."""


class ParseError(AdfConverterError):
    """Raised when input text or a saved IR cannot be read."""


class GenerationError(AdfConverterError):
    """Raised when ADF serialization or writing the output fails."""


class ConfigError(AdfConverterError):
    """Raised when configuration is invalid or missing."""

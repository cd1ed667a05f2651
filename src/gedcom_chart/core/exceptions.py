class ConversionError(Exception):
    """Base exception for conversion failures raised by gedcom_chart itself."""


class InvalidInputError(ConversionError):
    """Raised when the converted chart data has no individuals or no families."""

    MESSAGE = "Failed to read GEDCOM file"

    def __init__(self, message: str = MESSAGE):
        super().__init__(message)


class ImageSourceError(ConversionError, ValueError):
    """Raised when an image source is neither a directory nor a zip archive."""

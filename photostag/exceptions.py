"""Exception classes for the processing engine.

Every user-facing failure is a :class:`ProcessingError`. The dispatcher
turns these into structured ``success=False`` results; they never escape
:func:`photostag.engine.process`.
"""


class ProcessingError(Exception):
    """Base exception for processing errors."""

    error_type: str = "processing_error"


class DecodeError(ProcessingError):
    """Raised when input bytes are not a recognized or intact image."""

    error_type = "decode_error"


class EncodeError(ProcessingError):
    """Raised when the target format cannot represent the result."""

    error_type = "encode_error"


class UnknownOperationError(ProcessingError):
    """Raised when a catalog lookup fails."""

    error_type = "unknown_operation"


class UnknownFilterError(UnknownOperationError):
    """Raised for a filter name that is not in the filter catalog."""

    error_type = "unknown_filter"


class UnknownEffectError(UnknownOperationError):
    """Raised for an effect name that is not in the effect catalog."""

    error_type = "unknown_effect"


class InvalidRegionError(ProcessingError):
    """Raised for crop/resize geometry outside the image or non-positive."""

    error_type = "invalid_region"


class InvalidParameterError(ProcessingError):
    """Raised for values outside their documented range or malformed requests."""

    error_type = "invalid_parameter"


class BatchCancelledError(ProcessingError):
    """Recorded for batch items that had not started when the batch was cancelled."""

    error_type = "cancelled"

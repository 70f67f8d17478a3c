"""Result data models returned by the engine and the batch orchestrator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .exceptions import ProcessingError


@dataclass
class ImageMetadata:
    """Facts about an encoded output image.

    :param width: Output width in pixels
    :param height: Output height in pixels
    :param format: Container format ('png', 'jpeg', 'webp')
    :param size_bytes: Length of the encoded output
    :param processing_time_ms: Time spent from decode to encode
    """

    width: int
    height: int
    format: str
    size_bytes: int
    processing_time_ms: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for API response."""
        return {
            "width": self.width,
            "height": self.height,
            "format": self.format,
            "size_bytes": self.size_bytes,
            "processing_time_ms": self.processing_time_ms,
        }


@dataclass
class ProcessingResult:
    """Outcome of processing a single image.

    Either ``encoded_bytes`` and ``metadata`` are set (success) or
    ``error`` is (failure), never both.
    """

    success: bool
    encoded_bytes: bytes | None = None
    metadata: ImageMetadata | None = None
    error: str | None = None
    error_type: str | None = None

    @classmethod
    def ok(cls, encoded_bytes: bytes, metadata: ImageMetadata) -> ProcessingResult:
        return cls(success=True, encoded_bytes=encoded_bytes, metadata=metadata)

    @classmethod
    def failure(cls, error: ProcessingError | str) -> ProcessingResult:
        """Build a failed result from an exception or a plain message."""
        if isinstance(error, ProcessingError):
            return cls(success=False, error=str(error), error_type=error.error_type)
        return cls(success=False, error=str(error), error_type="processing_error")

    @classmethod
    def internal_error(cls, error: Exception) -> ProcessingResult:
        """Build a failed result from an exception outside the error taxonomy."""
        return cls(success=False, error=f"Internal error: {error}", error_type="internal_error")


@dataclass
class BatchResult:
    """Aggregated outcome of a batch run.

    ``results`` mirrors the order of the inputs.
    """

    processed: int
    successful: int
    failed: int
    results: list[ProcessingResult] = field(default_factory=list)
    total_time_ms: float = 0.0

    @classmethod
    def from_results(cls, results: list[ProcessingResult], total_time_ms: float) -> BatchResult:
        """Derive the counts from the filled result slots."""
        successful = sum(1 for r in results if r.success)
        return cls(
            processed=len(results),
            successful=successful,
            failed=len(results) - successful,
            results=list(results),
            total_time_ms=total_time_ms,
        )

    @property
    def has_failures(self) -> bool:
        return self.failed > 0

    def failure_summary(self) -> str | None:
        """Message for hosts that treat any failed item as a failed batch."""
        if not self.has_failures:
            return None
        return f"Batch processing failed for {self.failed} out of {self.processed} images"


@dataclass
class ValidationResult:
    """Outcome of inspecting an input without transforming it."""

    valid: bool
    width: int | None = None
    height: int | None = None
    size_estimate: int | None = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for API response, omitting unset fields."""
        data: dict[str, Any] = {"valid": self.valid}
        if self.width is not None:
            data["width"] = self.width
        if self.height is not None:
            data["height"] = self.height
        if self.size_estimate is not None:
            data["size_estimate"] = self.size_estimate
        if self.error is not None:
            data["error"] = self.error
        return data

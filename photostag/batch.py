"""
Batch orchestrator: one descriptor applied to many images in parallel.

Each item goes through :func:`photostag.engine.process` on a worker
thread. A failing item is recorded in its own slot and never affects the
others; the counts are derived once every slot is filled.

Usage:
    from photostag.batch import BatchProcessor

    processor = BatchProcessor({"operation": "filter", "filter": "sepia"}, max_workers=4)
    result = processor.run(images_as_base64)
    if result.has_failures:
        print(result.failure_summary())
"""

from __future__ import annotations

import logging
import os
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any

from .config import settings
from .descriptor import OperationDescriptor, parse_request
from .engine import process
from .exceptions import BatchCancelledError, InvalidParameterError
from .results import BatchResult, ProcessingResult

logger = logging.getLogger(__name__)


def check_inputs(inputs: Any) -> list[str]:
    """
    Ensures the batch is a list of string-encoded images.

    :raises InvalidParameterError: If the batch is not a list or any item
        is not a string
    """
    if isinstance(inputs, (str, bytes)) or not isinstance(inputs, (list, tuple)):
        raise InvalidParameterError(
            f"Batch input must be a list of images, got {type(inputs).__name__}"
        )
    for index, item in enumerate(inputs):
        if not isinstance(item, str):
            raise InvalidParameterError(
                f"Batch item {index} must be a base64 string or data URL, "
                f"got {type(item).__name__}"
            )
    return list(inputs)


class BatchProcessor:
    """Runs one descriptor over a list of images on a thread pool.

    :param descriptor: Descriptor or request mapping applied to every item
    :param max_workers: Parallel workers, defaults to
        ``settings.BATCH_MAX_WORKERS`` or the CPU count
    :param cancel_event: Optional event shared with the caller; setting it
        has the same effect as :meth:`cancel`
    """

    def __init__(
        self,
        descriptor: OperationDescriptor | dict[str, Any],
        max_workers: int | None = None,
        cancel_event: threading.Event | None = None,
    ):
        self._descriptor = parse_request(descriptor)
        workers = max_workers or settings.BATCH_MAX_WORKERS or os.cpu_count() or 4
        if workers < 1:
            raise InvalidParameterError(f"max_workers must be positive, got {workers}")
        self._max_workers = workers
        self._cancel_event = cancel_event or threading.Event()

    @property
    def max_workers(self) -> int:
        return self._max_workers

    @property
    def cancelled(self) -> bool:
        return self._cancel_event.is_set()

    def cancel(self) -> None:
        """Stops items that have not started yet. Running items complete."""
        self._cancel_event.set()

    def _process_one(self, index: int, source: str) -> ProcessingResult:
        if self._cancel_event.is_set():
            return ProcessingResult.failure(
                BatchCancelledError("Batch cancelled before this item started")
            )
        try:
            result = process(source, self._descriptor)
        except Exception as e:
            logger.exception("Batch item %d raised", index)
            result = ProcessingResult.internal_error(e)
        if not result.success:
            logger.warning("Batch item %d failed: %s", index, result.error)
        return result

    def run(self, inputs: list[str]) -> BatchResult:
        """Process all inputs, preserving order.

        :param inputs: Base64 strings or data URLs
        :return: Aggregated result, ``results[i]`` belongs to ``inputs[i]``
        :raises InvalidParameterError: If the inputs are not all strings.
            Nothing is processed in that case.
        """
        items = check_inputs(inputs)
        start = time.perf_counter()
        slots: list[ProcessingResult | None] = [None] * len(items)

        if items:
            with ThreadPoolExecutor(max_workers=min(self._max_workers, len(items))) as executor:
                futures: list[Future] = [
                    executor.submit(self._process_one, index, source)
                    for index, source in enumerate(items)
                ]
                for index, future in enumerate(futures):
                    slots[index] = future.result()

        total_ms = round((time.perf_counter() - start) * 1000.0, 3)
        batch = BatchResult.from_results(slots, total_ms)  # type: ignore[arg-type]
        logger.debug(
            "Batch of %d finished: %d ok, %d failed in %.1f ms",
            batch.processed, batch.successful, batch.failed, total_ms,
        )
        return batch


def process_batch(
    inputs: list[str],
    descriptor: OperationDescriptor | dict[str, Any],
    max_workers: int | None = None,
    cancel_event: threading.Event | None = None,
) -> BatchResult:
    """
    Applies one descriptor to every input.

    :raises InvalidParameterError: For a malformed descriptor or non-string
        inputs, before any item runs
    """
    return BatchProcessor(descriptor, max_workers, cancel_event).run(inputs)


__all__ = ["BatchProcessor", "process_batch", "check_inputs"]

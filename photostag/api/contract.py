"""
Boundary contract for automation hosts: plain dicts in, plain dicts out.

Every function here is safe to call with untrusted input. Failures are
reported in the returned dict and never raised.

Usage:
    from photostag.api.contract import process_image

    response = process_image(data_url, {"operation": "filter", "filter": "noir"})
    if response["success"]:
        data_url = response["image_data"]
"""

from __future__ import annotations

import json
import logging
from typing import Any

from photostag import codec
from photostag.batch import process_batch
from photostag.descriptor import parse_request
from photostag.effects import available_effects, describe_effects
from photostag.engine import process
from photostag.exceptions import InvalidParameterError, ProcessingError
from photostag.filters import available_filters, describe_filters
from photostag.results import BatchResult, ProcessingResult

logger = logging.getLogger(__name__)


def _response(result: ProcessingResult, output_as_binary: bool) -> dict[str, Any]:
    if not result.success:
        return {"success": False, "error": result.error}
    data = result.encoded_bytes
    response: dict[str, Any] = {"success": True}
    if output_as_binary:
        response["image_data"] = codec.to_base64(data)
        response["binary_data"] = list(data)
    else:
        response["image_data"] = codec.to_data_url(data, result.metadata.format)
    response["metadata"] = result.metadata.to_dict()
    return response


def process_image(image: Any, request: dict[str, Any]) -> dict[str, Any]:
    """
    Processes one image.

    :param image: Base64 text, a data URL, raw bytes or a list of byte values
    :param request: ``{operation, <variant fields>, output_format, quality?,
        output_as_binary?}``
    :return: ``{success, image_data?, binary_data?, metadata?, error?}``
    """
    try:
        descriptor = parse_request(request)
    except InvalidParameterError as e:
        return {"success": False, "error": str(e)}
    return _response(process(image, descriptor), descriptor.output_as_binary)


def _rejected_batch(count: int, error: str) -> dict[str, Any]:
    return {
        "processed": 0,
        "successful": 0,
        "failed": count,
        "results": [
            {"success": False, "error": f"Batch processing failed: {error}"}
            for _ in range(count)
        ],
        "total_time_ms": 0,
    }


def _batch_response(batch: BatchResult, output_as_binary: bool) -> dict[str, Any]:
    return {
        "processed": batch.processed,
        "successful": batch.successful,
        "failed": batch.failed,
        "results": [_response(r, output_as_binary) for r in batch.results],
        "total_time_ms": batch.total_time_ms,
    }


def process_image_batch(images: Any, request: dict[str, Any]) -> dict[str, Any]:
    """
    Processes many images with one request.

    :param images: List of base64 strings / data URLs, or a JSON array of them
    :param request: As for :func:`process_image`
    :return: ``{processed, successful, failed, results, total_time_ms}``.
        A rejected batch reports ``processed = 0`` and every item failed.
    """
    if isinstance(images, str):
        try:
            images = json.loads(images)
        except json.JSONDecodeError as e:
            return _rejected_batch(0, f"Invalid JSON image list: {e.msg}")
    count = len(images) if isinstance(images, (list, tuple)) else 0
    try:
        descriptor = parse_request(request)
        batch = process_batch(images, descriptor)
    except ProcessingError as e:
        logger.warning("Batch of %d rejected: %s", count, e)
        return _rejected_batch(count, str(e))
    return _batch_response(batch, descriptor.output_as_binary)


def validate_image(image: Any) -> dict[str, Any]:
    """
    Checks whether an input decodes.

    :return: ``{valid, width?, height?, size_estimate?, error?}``
    """
    return codec.inspect(image).to_dict()


def get_available_filters() -> list[str]:
    return available_filters()


def get_available_effects() -> list[str]:
    return available_effects()


def get_filter_catalog() -> list[dict[str, Any]]:
    """Filter entries with display name, description and category."""
    return describe_filters()


def get_effect_catalog() -> list[dict[str, Any]]:
    """Effect entries with display name, description and category."""
    return describe_effects()


def get_version() -> str:
    from photostag import __version__

    return __version__


__all__ = [
    "process_image", "process_image_batch", "validate_image",
    "get_available_filters", "get_available_effects",
    "get_filter_catalog", "get_effect_catalog", "get_version",
]

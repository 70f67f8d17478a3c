"""
Codec: the boundary between encoded images and :class:`.RasterImage`.

Hosts hand over images in three representations: raw bytes, raw base64
strings and ``data:<mime>;base64,<data>`` URLs. :func:`normalize_input`
turns all of them into one byte sequence, so nothing past this module
ever branches on the representation.

Usage:
    from photostag.codec import decode, encode

    image = decode("data:image/png;base64,iVBORw0KGgo...")
    jpeg_bytes = encode(image, "jpeg", quality=80)
"""

from __future__ import annotations

import base64
import binascii
import io
import logging
from collections.abc import Sequence
from typing import Any

import filetype
import PIL.Image

from .config import settings
from .exceptions import DecodeError, EncodeError, InvalidParameterError
from .raster import RasterImage
from .results import ValidationResult

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("png", "jpeg", "webp")
"Container formats the encoder can produce"

FORMAT_ALIASES = {"jpg": "jpeg"}

# Signature MIME type -> format name
_MIME_FORMATS = {
    "image/png": "png",
    "image/apng": "png",
    "image/jpeg": "jpeg",
    "image/webp": "webp",
}

_PIL_FORMATS = {"png": "PNG", "jpeg": "JPEG", "webp": "WEBP"}

WEBP_MAX_DIMENSION = 16383
JPEG_MAX_DIMENSION = 65535

DATA_URL_PREFIX = "data:"


# ============================================================================
# Input normalization
# ============================================================================

def normalize_input(source: Any) -> bytes:
    """Normalize any supported input representation to raw image bytes.

    :param source: bytes-like object, sequence of byte values, raw base64
        string or base64 data URL
    :return: The encoded image bytes
    :raises DecodeError: If the payload is empty or not valid base64
    """
    if isinstance(source, (bytes, bytearray, memoryview)):
        data = bytes(source)
    elif isinstance(source, str):
        data = _decode_base64_text(source)
    elif isinstance(source, Sequence):
        try:
            data = bytes(source)
        except (TypeError, ValueError) as e:
            raise DecodeError(f"Invalid byte sequence: {e}") from e
    else:
        raise DecodeError(f"Unsupported image input type: {type(source).__name__}")

    if not data:
        raise DecodeError("Image data is empty")
    return data


def _decode_base64_text(text: str) -> bytes:
    text = text.strip()
    if text.startswith(DATA_URL_PREFIX):
        if "," not in text:
            raise DecodeError("Invalid data URL format - missing comma separator")
        header, text = text.split(",", 1)
        if not header.endswith(";base64"):
            raise DecodeError("Data URL must be base64 encoded")

    # Line breaks and blanks are common in pasted base64
    compact = "".join(text.split())
    if not compact:
        raise DecodeError("Image data is empty")
    try:
        return base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"Failed to decode base64: {e}") from e


def normalize_format(format: str) -> str:
    """Return the canonical output format name, e.g. 'jpg' -> 'jpeg'.

    :raises EncodeError: If the format is not supported
    """
    name = str(format).lstrip(".").lower()
    name = FORMAT_ALIASES.get(name, name)
    if name not in OUTPUT_FORMATS:
        raise EncodeError(f"Unsupported output format: {format}")
    return name


# ============================================================================
# Decoding
# ============================================================================

def detect_format(data: bytes) -> str:
    """Detect the container format from the byte signature.

    :param data: Encoded image bytes
    :return: 'png', 'jpeg' or 'webp'
    :raises DecodeError: For any other or unknown signature
    """
    kind = filetype.guess(data)
    if kind is None or kind.mime not in _MIME_FORMATS:
        detected = kind.mime if kind is not None else "unknown"
        raise DecodeError(f"Unrecognized image signature ({detected})")
    return _MIME_FORMATS[kind.mime]


def decode(source: Any) -> RasterImage:
    """Decode an image in any supported representation into an RGBA raster.

    :param source: See :func:`normalize_input`
    :return: A freshly allocated raster
    :raises DecodeError: If the input is unrecognized, malformed or too large
    """
    data = normalize_input(source)
    fmt = detect_format(data)
    try:
        with PIL.Image.open(io.BytesIO(data), formats=[_PIL_FORMATS[fmt]]) as pil_img:
            width, height = pil_img.size
            if width * height > settings.MAX_IMAGE_PIXELS:
                raise DecodeError(
                    f"Image too large: {width}x{height} exceeds "
                    f"{settings.MAX_IMAGE_PIXELS} pixels"
                )
            pil_img.load()
            image = RasterImage.from_pil(pil_img)
    except DecodeError:
        raise
    except (OSError, ValueError, SyntaxError, PIL.Image.DecompressionBombError) as e:
        raise DecodeError(f"Failed to load image: {e}") from e

    logger.debug("Decoded %s image %dx%d (%d bytes)", fmt, image.width, image.height, len(data))
    return image


def inspect(source: Any) -> ValidationResult:
    """Check whether an input decodes, without transforming it.

    ``size_estimate`` is the length of the input as supplied: characters for
    strings, bytes for binary input.

    :param source: See :func:`normalize_input`
    :return: The validation result, never raises for bad input
    """
    try:
        image = decode(source)
    except DecodeError as e:
        return ValidationResult(valid=False, error=str(e))
    try:
        size_estimate = len(source)
    except TypeError:
        size_estimate = None
    return ValidationResult(
        valid=True,
        width=image.width,
        height=image.height,
        size_estimate=size_estimate,
    )


# ============================================================================
# Encoding
# ============================================================================

def encode(image: RasterImage, format: str = "png", quality: int | None = None) -> bytes:
    """Encode a raster into a container format.

    :param image: The raster to encode
    :param format: 'png' (lossless), 'jpeg' or 'webp' (lossless)
    :param quality: JPEG quality 1 (lowest) to 100 (highest), defaults to
        ``settings.DEFAULT_JPEG_QUALITY``. Ignored for other formats.
    :return: The encoded bytes
    :raises EncodeError: If the format cannot represent the image
    :raises InvalidParameterError: If quality is out of range
    """
    fmt = normalize_format(format)
    width, height = image.size
    if width < 1 or height < 1:
        raise EncodeError(f"Cannot encode empty image ({width}x{height})")

    params: dict[str, Any] = {}
    pil_img = image.to_pil()
    if fmt == "jpeg":
        quality = settings.DEFAULT_JPEG_QUALITY if quality is None else quality
        if not 1 <= quality <= 100:
            raise InvalidParameterError(f"JPEG quality must be between 1 and 100, got {quality}")
        if max(width, height) > JPEG_MAX_DIMENSION:
            raise EncodeError(f"JPEG cannot store images larger than {JPEG_MAX_DIMENSION} pixels per side")
        params["quality"] = int(quality)
        pil_img = _flatten(pil_img, image.is_transparent())
    elif fmt == "webp":
        if max(width, height) > WEBP_MAX_DIMENSION:
            raise EncodeError(f"WebP cannot store images larger than {WEBP_MAX_DIMENSION} pixels per side")
        params["lossless"] = True
        params["exact"] = True

    output_stream = io.BytesIO()
    try:
        pil_img.save(output_stream, format=_PIL_FORMATS[fmt], **params)
    except (OSError, ValueError, KeyError) as e:
        raise EncodeError(f"{fmt.upper()} encoding failed: {e}") from e
    data = output_stream.getvalue()
    if not data:
        raise EncodeError(f"{fmt.upper()} encoding produced no data")
    return data


def _flatten(pil_img: PIL.Image.Image, transparent: bool) -> PIL.Image.Image:
    """Composite RGBA onto white for formats without alpha."""
    if not transparent:
        return pil_img.convert("RGB")
    background = PIL.Image.new("RGB", pil_img.size, (255, 255, 255))
    background.paste(pil_img, (0, 0), pil_img.getchannel("A"))
    return background


# ============================================================================
# Output representations
# ============================================================================

def to_base64(data: bytes) -> str:
    """Raw base64 text of the given bytes."""
    return base64.b64encode(data).decode("ascii")


def to_data_url(data: bytes, format: str) -> str:
    """Data URL like 'data:image/png;base64,...'."""
    return f"data:image/{normalize_format(format)};base64,{to_base64(data)}"


__all__ = [
    "OUTPUT_FORMATS",
    "normalize_input", "normalize_format", "detect_format",
    "decode", "inspect", "encode",
    "to_base64", "to_data_url",
]

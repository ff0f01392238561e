#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2confluence/utils/encoding.py
"""Character encoding detection and handling utilities.

Markdown sources arrive as bytes or text. Bytes are decoded as UTF-8 when
possible, then with the encoding chardet detects, and finally with the
remaining fallback encodings.
"""

from __future__ import annotations

import logging
from typing import Sequence, Union

import chardet

from md2confluence.constants import DEFAULT_FALLBACK_ENCODINGS

logger = logging.getLogger(__name__)


def detect_encoding(
    data: bytes,
    sample_size: int = 8192,
    confidence_threshold: float = 0.7,
) -> str | None:
    """Detect character encoding of binary data using chardet.

    Parameters
    ----------
    data : bytes
        Binary data to analyze
    sample_size : int, default 8192
        Number of bytes to sample for detection (uses first N bytes)
    confidence_threshold : float, default 0.7
        Minimum confidence level (0.0-1.0) required to trust detection

    Returns
    -------
    str | None
        Detected encoding name, or None if detection fails or confidence is
        below the threshold

    """
    sample = data[:sample_size] if len(data) > sample_size else data
    result = chardet.detect(sample)

    if not result or not result.get("encoding"):
        logger.debug("chardet: No encoding detected")
        return None

    encoding = result["encoding"]
    confidence = result.get("confidence") or 0.0

    logger.debug(f"chardet detected encoding: {encoding} (confidence: {confidence:.2f})")

    if confidence >= confidence_threshold:
        return encoding

    logger.debug(f"chardet confidence {confidence:.2f} below threshold {confidence_threshold}")
    return None


def read_text_with_encoding_detection(
    data: bytes,
    fallback_encodings: Sequence[str] = DEFAULT_FALLBACK_ENCODINGS,
    chardet_sample_size: int = 8192,
    chardet_confidence_threshold: float = 0.7,
) -> str:
    """Read binary data as text with automatic encoding detection.

    Attempts to decode binary data using multiple strategies:
    1. Strict UTF-8
    2. chardet-based detection
    3. Fallback encodings in order
    4. Final fallback with error replacement

    Parameters
    ----------
    data : bytes
        Binary data to decode
    fallback_encodings : sequence of str, default ("utf-8", "utf-8-sig", "latin-1")
        Encodings to try in order when detection fails
    chardet_sample_size : int, default 8192
        Number of bytes to sample for chardet detection
    chardet_confidence_threshold : float, default 0.7
        Minimum confidence for chardet detection

    Returns
    -------
    str
        Decoded text content

    Examples
    --------
    >>> read_text_with_encoding_detection(b"Hello, world!")
    'Hello, world!'

    """
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        logger.debug("Input is not valid UTF-8, detecting encoding")

    detected_encoding = detect_encoding(
        data,
        sample_size=chardet_sample_size,
        confidence_threshold=chardet_confidence_threshold,
    )
    if detected_encoding:
        try:
            text = data.decode(detected_encoding)
            logger.debug(f"Successfully decoded with chardet-detected encoding: {detected_encoding}")
            return text
        except (UnicodeDecodeError, LookupError) as e:
            logger.debug(f"Failed to decode with chardet-detected encoding {detected_encoding}: {e}")

    for encoding in fallback_encodings:
        try:
            text = data.decode(encoding)
            logger.debug(f"Successfully decoded with encoding: {encoding}")
            return text
        except UnicodeDecodeError as e:
            logger.debug(f"Failed to decode with {encoding}: {e}")
            continue
        except LookupError as e:
            logger.debug(f"Unknown encoding {encoding}: {e}")
            continue

    logger.warning("All encoding attempts failed, using utf-8 with error replacement")
    return data.decode("utf-8", errors="replace")


def ensure_text(source: Union[str, bytes, bytearray]) -> str:
    """Return ``source`` as text, decoding bytes with detection.

    Parameters
    ----------
    source : str, bytes or bytearray
        Markdown source

    Returns
    -------
    str
        Source text

    Raises
    ------
    TypeError
        If ``source`` is neither text nor bytes

    """
    if isinstance(source, str):
        return source
    if isinstance(source, (bytes, bytearray)):
        return read_text_with_encoding_detection(bytes(source))
    raise TypeError(f"Markdown source must be str or bytes, got {type(source).__name__}")

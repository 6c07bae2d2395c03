"""
Contract Program Codec

Encodes a compiled contract ``program`` (an arbitrary JSON value) into the
gzip + base64 string the gateway expects under
``contract_definition.program``, and decodes it back.

Encoding is deterministic: keys are sorted, separators are compact and the
gzip header carries no timestamp or file name.
"""

from __future__ import annotations

import base64
import binascii
import gzip
import io
import json
import logging
import zlib
from dataclasses import dataclass
from typing import Any, Optional

logger = logging.getLogger(__name__)


class CodecError(RuntimeError):
    """Raised when a program cannot be encoded or decoded."""

    stage = "codec"


class EncodeError(CodecError):
    pass


class SerializationFailedError(EncodeError):
    """Program is not representable as JSON."""

    stage = "serialization"


class CompressionFailedError(EncodeError):
    """The gzip stream could not be written."""

    stage = "compression"


class DecodeError(CodecError):
    pass


class InvalidBase64Error(DecodeError):
    stage = "base64"


class InvalidCompressedStreamError(DecodeError):
    stage = "decompression"


class InvalidJSONError(DecodeError):
    stage = "json"


@dataclass(frozen=True)
class CompressionOptions:
    """
    Codec configuration options.

    Attributes:
        level: gzip compression level 0-9, or -1 for the zlib default
    """
    level: int = zlib.Z_DEFAULT_COMPRESSION

    def __post_init__(self) -> None:
        if not -1 <= self.level <= 9:
            raise CompressionFailedError(f"Compression level must be -1..9, got: {self.level}")


@dataclass
class CompressionResult:
    """
    Result of encoding a program.

    Attributes:
        encoded: base64 string of the gzip stream
        original_size: Size of the serialized JSON in bytes
        compressed_size: Size of the gzip stream in bytes
    """
    encoded: str
    original_size: int
    compressed_size: int

    @property
    def compression_ratio(self) -> float:
        """Ratio of compressed to original size (lower is better)."""
        if self.original_size == 0:
            return 1.0
        return self.compressed_size / self.original_size

    @property
    def space_saved_percent(self) -> float:
        return (1.0 - self.compression_ratio) * 100


def serialize_program(program: Any) -> bytes:
    """
    Serialize a program to canonical JSON bytes.

    Non-ASCII characters are escaped, so every Python str (lone surrogates
    included) survives the round trip.

    Raises:
        SerializationFailedError: If the value contains members JSON cannot
            represent (objects, cycles, NaN/Infinity, non-string-like keys).
    """
    try:
        text = json.dumps(
            program,
            sort_keys=True,
            separators=(",", ":"),
            allow_nan=False,
        )
    except (TypeError, ValueError, RecursionError) as exc:
        raise SerializationFailedError(f"Program is not JSON-serializable: {exc}") from exc
    return text.encode("utf-8")


GZIP_MAGIC = b"\x1f\x8b"


def _gzip(data: bytes, level: int) -> bytes:
    buf = io.BytesIO()
    try:
        with gzip.GzipFile(filename="", mode="wb", compresslevel=level, fileobj=buf, mtime=0) as zw:
            zw.write(data)
    except (OSError, ValueError, zlib.error) as exc:
        raise CompressionFailedError(f"gzip compression failed: {exc}") from exc
    return buf.getvalue()


def compress_program_with_stats(
    program: Any,
    options: Optional[CompressionOptions] = None,
) -> CompressionResult:
    """
    Encode a program and report size statistics.

    Args:
        program: Any JSON-serializable value
        options: Codec configuration (default: zlib default level)

    Returns:
        CompressionResult with the encoded string and sizes

    Raises:
        SerializationFailedError: If the program is not JSON-serializable
        CompressionFailedError: If the gzip stream fails
    """
    options = options or CompressionOptions()
    payload = serialize_program(program)
    compressed = _gzip(payload, options.level)
    encoded = base64.b64encode(compressed).decode("ascii")

    logger.debug(
        "Encoded program: %d bytes JSON -> %d bytes gzip -> %d chars base64",
        len(payload),
        len(compressed),
        len(encoded),
    )
    return CompressionResult(
        encoded=encoded,
        original_size=len(payload),
        compressed_size=len(compressed),
    )


def compress_program(program: Any, options: Optional[CompressionOptions] = None) -> str:
    """Encode a program as base64(gzip(json))."""
    return compress_program_with_stats(program, options).encoded


def decompress_program(encoded: str) -> Any:
    """
    Decode a base64(gzip(json)) string back into a program.

    Args:
        encoded: String produced by :func:`compress_program`

    Returns:
        The decoded JSON value

    Raises:
        InvalidBase64Error: If the string is not strict padded base64
        InvalidCompressedStreamError: If the bytes are not a gzip stream
        InvalidJSONError: If the decompressed bytes are not UTF-8 JSON
    """
    try:
        compressed = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError, TypeError) as exc:
        raise InvalidBase64Error(f"Invalid base64 payload: {exc}") from exc

    if not compressed.startswith(GZIP_MAGIC):
        raise InvalidCompressedStreamError("Invalid gzip stream: missing gzip header")

    try:
        payload = gzip.decompress(compressed)
    except (OSError, EOFError, zlib.error) as exc:
        raise InvalidCompressedStreamError(f"Invalid gzip stream: {exc}") from exc

    try:
        return json.loads(payload.decode("utf-8"))
    except (ValueError, RecursionError) as exc:
        raise InvalidJSONError(f"Invalid program JSON: {exc}") from exc

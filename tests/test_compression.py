"""Unit tests for the contract program codec."""

from __future__ import annotations

import base64
import gzip
import json
import zlib
from unittest.mock import patch

import pytest

from starkgw.codec.compression import (
    CodecError,
    CompressionFailedError,
    CompressionOptions,
    DecodeError,
    EncodeError,
    InvalidBase64Error,
    InvalidCompressedStreamError,
    InvalidJSONError,
    SerializationFailedError,
    compress_program,
    compress_program_with_stats,
    decompress_program,
    serialize_program,
)


PROGRAM = {
    "prime": "0x800000000000011000000000000000000000000000000000000000000000001",
    "builtins": ["pedersen", "range_check"],
    "data": ["0x40780017fff7fff", "0x1", "0x208b7fff7fff7ffe"] * 200,
    "identifiers": {
        "__main__.increase_balance": {"type": "function", "pc": 12, "decorators": ["external"]},
        "__main__.get_balance": {"type": "function", "pc": 30, "decorators": ["view"]},
    },
    "hints": {},
    "main_scope": "__main__",
    "attributes": [],
    "debug_info": None,
}


class TestRoundTrip:
    def test_simple_object(self) -> None:
        encoded = compress_program({"a": 1, "b": [1, 2, 3]})
        assert encoded
        assert decompress_program(encoded) == {"a": 1, "b": [1, 2, 3]}

    def test_empty_object(self) -> None:
        assert decompress_program(compress_program({})) == {}

    def test_program_like_payload(self) -> None:
        assert decompress_program(compress_program(PROGRAM)) == PROGRAM

    @pytest.mark.parametrize(
        "value",
        [None, True, 0, -7, 3.5, "", "felt", [], [None, "x", {"k": [1.25]}], {"ünïcödé": "✓"}],
    )
    def test_scalars_and_nesting(self, value: object) -> None:
        assert decompress_program(compress_program(value)) == value

    def test_key_order_is_not_significant(self) -> None:
        a = compress_program({"x": 1, "y": 2})
        b = compress_program({"y": 2, "x": 1})
        assert a == b

    def test_lone_surrogate(self) -> None:
        program = {"s": "\ud800", "t": "\udfff tail"}
        assert decompress_program(compress_program(program)) == program

    def test_non_ascii_is_escaped(self) -> None:
        payload = serialize_program({"k": "\u00e9"})
        assert payload == b'{"k":"\\u00e9"}'


class TestEncoding:
    def test_is_standard_padded_base64_of_gzip(self) -> None:
        encoded = compress_program({"a": 1})
        raw = base64.b64decode(encoded, validate=True)
        assert raw[:2] == b"\x1f\x8b"
        assert len(encoded) % 4 == 0

    def test_canonical_json_inside(self) -> None:
        encoded = compress_program({"b": [1, 2], "a": "x"})
        payload = gzip.decompress(base64.b64decode(encoded))
        assert payload == b'{"a":"x","b":[1,2]}'

    def test_deterministic(self) -> None:
        assert compress_program(PROGRAM) == compress_program(PROGRAM)

    def test_gzip_header_has_no_timestamp(self) -> None:
        raw = base64.b64decode(compress_program(PROGRAM))
        # bytes 4..8 of the gzip header hold MTIME
        assert raw[4:8] == b"\x00\x00\x00\x00"

    def test_compresses_repetitive_program(self) -> None:
        raw_json = json.dumps(PROGRAM).encode("utf-8")
        assert len(compress_program(PROGRAM)) < len(base64.b64encode(raw_json))

    def test_stats(self) -> None:
        result = compress_program_with_stats(PROGRAM)
        assert result.original_size == len(serialize_program(PROGRAM))
        assert result.compressed_size == len(base64.b64decode(result.encoded))
        assert result.compression_ratio < 1.0
        assert result.space_saved_percent > 0

    def test_stats_empty_input_ratio(self) -> None:
        result = compress_program_with_stats({})
        assert result.original_size == 2
        assert result.encoded == compress_program({})

    @pytest.mark.parametrize("level", [0, 1, 9])
    def test_levels_round_trip(self, level: int) -> None:
        encoded = compress_program(PROGRAM, CompressionOptions(level=level))
        assert decompress_program(encoded) == PROGRAM

    def test_invalid_level(self) -> None:
        with pytest.raises(CompressionFailedError):
            CompressionOptions(level=10)


class TestEncodeErrors:
    def test_non_json_member(self) -> None:
        with pytest.raises(SerializationFailedError) as excinfo:
            compress_program({"a": object()})
        assert excinfo.value.stage == "serialization"
        assert isinstance(excinfo.value, EncodeError)

    def test_nan_rejected(self) -> None:
        with pytest.raises(SerializationFailedError):
            compress_program({"a": float("nan")})

    def test_cycle_rejected(self) -> None:
        cyclic: dict[str, object] = {}
        cyclic["self"] = cyclic
        with pytest.raises(SerializationFailedError):
            compress_program(cyclic)

    def test_bytes_rejected(self) -> None:
        with pytest.raises(SerializationFailedError):
            compress_program([b"raw"])

    def test_compression_failure_surfaces(self) -> None:
        with patch("starkgw.codec.compression.gzip.GzipFile.write", side_effect=OSError("disk gone")):
            with pytest.raises(CompressionFailedError) as excinfo:
                compress_program({"a": 1})
        assert excinfo.value.stage == "compression"
        assert isinstance(excinfo.value.__cause__, OSError)

    def test_zlib_failure_surfaces(self) -> None:
        with patch("starkgw.codec.compression.gzip.GzipFile.write", side_effect=zlib.error("boom")):
            with pytest.raises(CompressionFailedError):
                compress_program({"a": 1})


class TestDecodeErrors:
    def test_invalid_base64(self) -> None:
        with pytest.raises(InvalidBase64Error) as excinfo:
            decompress_program("not-base64!!")
        assert excinfo.value.stage == "base64"

    def test_non_ascii_is_invalid_base64(self) -> None:
        with pytest.raises(InvalidBase64Error):
            decompress_program("é")

    def test_invalid_gzip(self) -> None:
        encoded = base64.b64encode(b"not gzip data").decode("ascii")
        with pytest.raises(InvalidCompressedStreamError) as excinfo:
            decompress_program(encoded)
        assert excinfo.value.stage == "decompression"

    def test_truncated_gzip(self) -> None:
        raw = base64.b64decode(compress_program(PROGRAM))
        encoded = base64.b64encode(raw[: len(raw) // 2]).decode("ascii")
        with pytest.raises(InvalidCompressedStreamError):
            decompress_program(encoded)

    def test_invalid_json(self) -> None:
        encoded = base64.b64encode(gzip.compress(b"not json")).decode("ascii")
        with pytest.raises(InvalidJSONError) as excinfo:
            decompress_program(encoded)
        assert excinfo.value.stage == "json"

    def test_invalid_utf8(self) -> None:
        encoded = base64.b64encode(gzip.compress(b"\xff\xfe")).decode("ascii")
        with pytest.raises(InvalidJSONError):
            decompress_program(encoded)

    def test_deeply_nested_json(self) -> None:
        depth = 100_000
        raw = gzip.compress(b"[" * depth + b"]" * depth)
        encoded = base64.b64encode(raw).decode("ascii")
        with pytest.raises(InvalidJSONError):
            decompress_program(encoded)

    def test_empty_string(self) -> None:
        with pytest.raises(InvalidCompressedStreamError) as excinfo:
            decompress_program("")
        assert excinfo.value.stage == "decompression"

    def test_hierarchy(self) -> None:
        for exc_type in (InvalidBase64Error, InvalidCompressedStreamError, InvalidJSONError):
            assert issubclass(exc_type, DecodeError)
            assert issubclass(exc_type, CodecError)
        assert issubclass(CodecError, RuntimeError)

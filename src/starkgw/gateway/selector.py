"""
Entry point selectors.

A StarkNet selector is the Keccak-256 of the entry point name, truncated to
the low 250 bits so it fits in a field element.
"""

from __future__ import annotations

from eth_hash.auto import keccak

MASK_250 = 2**250 - 1

DEFAULT_ENTRY_POINT_NAME = "__default__"
DEFAULT_L1_ENTRY_POINT_NAME = "__l1_default__"
DEFAULT_ENTRY_POINT_SELECTOR = 0


def starknet_keccak(data: bytes) -> int:
    # NOTE: Keccak-256 != SHA3-256 (NIST). Never use hashlib.sha3_256 here.
    return int.from_bytes(keccak(data), "big") & MASK_250


def get_selector_from_name(name: str) -> int:
    if name in (DEFAULT_ENTRY_POINT_NAME, DEFAULT_L1_ENTRY_POINT_NAME):
        return DEFAULT_ENTRY_POINT_SELECTOR
    return starknet_keccak(name.encode("utf-8"))


def big_to_hex(value: int) -> str:
    return hex(value)


def selector_hex(name: str) -> str:
    """Hex selector for an entry point name, as sent on the wire."""
    return big_to_hex(get_selector_from_name(name))

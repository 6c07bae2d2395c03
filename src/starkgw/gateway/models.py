"""
Request and response models for the gateway HTTP API.

Field names follow the gateway's JSON wire format. Empty ``calldata``,
``signature`` and ``constructor_calldata`` are always serialized as ``[]``;
the gateway rejects requests where they are missing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

INVOKE = "INVOKE_FUNCTION"
DEPLOY = "DEPLOY"


@dataclass(frozen=True)
class FunctionCall:
    """
    Read-only contract call.

    Attributes:
        contract_address: 0x-prefixed contract address
        entry_point_selector: Entry point name, replaced by its selector on send
        calldata: Felt arguments as decimal or hex strings
        signature: Optional signature felts
    """
    contract_address: str
    entry_point_selector: str
    calldata: Optional[list[str]] = None
    signature: Optional[list[str]] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "contract_address": self.contract_address,
            "entry_point_selector": self.entry_point_selector,
            "calldata": list(self.calldata or []),
            "signature": list(self.signature or []),
        }


@dataclass(frozen=True)
class InvokeTransaction:
    """
    ``INVOKE_FUNCTION`` transaction.

    The signature must already be computed; this package does not sign.
    """
    contract_address: str
    entry_point_selector: str
    calldata: Optional[list[str]] = None
    signature: Optional[list[str]] = None
    max_fee: Optional[str] = None
    nonce: Optional[str] = None
    version: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "type": INVOKE,
            "contract_address": self.contract_address,
            "entry_point_selector": self.entry_point_selector,
            "calldata": list(self.calldata or []),
            "signature": list(self.signature or []),
        }
        for key in ("max_fee", "nonce", "version"):
            value = getattr(self, key)
            if value is not None:
                payload[key] = value
        return payload


@dataclass(frozen=True)
class DeployRequest:
    """
    ``DEPLOY`` transaction.

    ``contract_definition`` is filled in by :meth:`Gateway.deploy` from the
    compiled contract file.
    """
    contract_address_salt: str = "0x0"
    constructor_calldata: Optional[list[str]] = None
    contract_definition: Optional[dict[str, Any]] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": DEPLOY,
            "contract_address_salt": self.contract_address_salt,
            "constructor_calldata": list(self.constructor_calldata or []),
            "contract_definition": self.contract_definition or {},
        }


@dataclass(frozen=True)
class AddTxResponse:
    code: str
    transaction_hash: str
    address: Optional[str] = None

    @classmethod
    def from_json(cls, payload: dict[str, Any]) -> "AddTxResponse":
        return cls(
            code=payload.get("code", ""),
            transaction_hash=payload.get("transaction_hash", ""),
            address=payload.get("address"),
        )


@dataclass(frozen=True)
class ContractDefinition:
    """ABI, entry points and encoded program, as embedded in a deploy."""
    abi: list[dict[str, Any]]
    entry_points_by_type: dict[str, list[dict[str, Any]]]
    program: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "abi": self.abi,
            "entry_points_by_type": self.entry_points_by_type,
            "program": self.program,
        }


__all__ = [
    "AddTxResponse",
    "ContractDefinition",
    "DeployRequest",
    "FunctionCall",
    "InvokeTransaction",
    "DEPLOY",
    "INVOKE",
]

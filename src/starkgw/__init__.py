__all__ = [
    # Codec
    "CodecError",
    "EncodeError",
    "DecodeError",
    "SerializationFailedError",
    "CompressionFailedError",
    "InvalidBase64Error",
    "InvalidCompressedStreamError",
    "InvalidJSONError",
    "CompressionOptions",
    "CompressionResult",
    "compress_program",
    "compress_program_with_stats",
    "decompress_program",
    # Gateway
    "Gateway",
    "GatewayConfig",
    "GatewayError",
    "GatewayTransportError",
    "GOERLI",
    "MAINNET",
    # Models
    "AddTxResponse",
    "ContractDefinition",
    "DeployRequest",
    "FunctionCall",
    "InvokeTransaction",
    "CompiledContract",
    # Selectors
    "get_selector_from_name",
    "starknet_keccak",
    # Schema
    "SchemaValidationError",
    "SchemaRegistry",
]

from .codec.compression import (
    CodecError,
    CompressionFailedError,
    CompressionOptions,
    CompressionResult,
    DecodeError,
    EncodeError,
    InvalidBase64Error,
    InvalidCompressedStreamError,
    InvalidJSONError,
    SerializationFailedError,
    compress_program,
    compress_program_with_stats,
    decompress_program,
)
from .gateway.client import GOERLI, MAINNET, Gateway, GatewayConfig, GatewayError, GatewayTransportError
from .gateway.models import AddTxResponse, ContractDefinition, DeployRequest, FunctionCall, InvokeTransaction
from .gateway.selector import get_selector_from_name, starknet_keccak
from .spec.models import CompiledContract
from .spec.schemas import SchemaRegistry, SchemaValidationError

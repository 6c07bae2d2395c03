"""
Gateway Client for StarkNet-style sequencers.

Thin httpx wrapper around the gateway HTTP JSON API:
- ``call_contract`` on the feeder gateway for read-only calls
- ``add_transaction`` on the gateway for invoke and deploy transactions

Requests are sent once. Retries, signing and caching are left to the caller.
"""

from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

import httpx

from ..codec.compression import CompressionOptions
from ..spec.models import CompiledContract
from .models import AddTxResponse, DeployRequest, FunctionCall, InvokeTransaction
from .selector import selector_hex

logger = logging.getLogger(__name__)

GOERLI_BASE_URL = "https://alpha4.starknet.io"
MAINNET_BASE_URL = "https://alpha-mainnet.starknet.io"
GOERLI_ID = "SN_GOERLI"
MAINNET_ID = "SN_MAIN"

DEFAULT_TIMEOUT = 30.0


class GatewayError(RuntimeError):
    """
    Raised when the gateway answers with an error status or an unreadable body.

    Attributes:
        status_code: HTTP status code (0 when no response was received)
        body: Raw response body
        code: Gateway error code, e.g. ``StarknetErrorCode.UNINITIALIZED_CONTRACT``
    """

    def __init__(
        self,
        message: str,
        status_code: int = 0,
        body: str = "",
        code: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.code = code

    @classmethod
    def from_response(cls, response: httpx.Response) -> "GatewayError":
        body = response.text
        code = None
        message = body
        try:
            payload = response.json()
        except ValueError:
            payload = None
        if isinstance(payload, dict):
            code = payload.get("code")
            message = payload.get("message", body)
        return cls(
            f"Gateway error {response.status_code}: {message}",
            status_code=response.status_code,
            body=body,
            code=code,
        )


class GatewayTransportError(GatewayError):
    """Raised when the request never produced a response."""


@dataclass(frozen=True)
class GatewayConfig:
    """
    Immutable gateway configuration.

    Attributes:
        base_url: Sequencer base URL (without /gateway or /feeder_gateway)
        chain_id: Chain identifier returned by :meth:`Gateway.chain_id`
        timeout: HTTP timeout in seconds
    """
    base_url: str = GOERLI_BASE_URL
    chain_id: str = GOERLI_ID
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @property
    def feeder_gateway_url(self) -> str:
        return f"{self.base_url}/feeder_gateway"

    @property
    def gateway_url(self) -> str:
        return f"{self.base_url}/gateway"

    @classmethod
    def from_env(cls) -> "GatewayConfig":
        """Build a config from STARKNET_* environment variables, falling back to Goerli."""
        return cls(
            base_url=os.environ.get("STARKNET_GATEWAY_URL", GOERLI_BASE_URL),
            chain_id=os.environ.get("STARKNET_CHAIN_ID", GOERLI_ID),
            timeout=float(os.environ.get("STARKNET_GATEWAY_TIMEOUT", str(DEFAULT_TIMEOUT))),
        )


GOERLI = GatewayConfig()
MAINNET = GatewayConfig(base_url=MAINNET_BASE_URL, chain_id=MAINNET_ID)


class Gateway:
    """
    Client for the gateway and feeder gateway endpoints.

    Args:
        config: Gateway configuration (default: Goerli)
        client: Optional pre-built httpx client; the caller keeps ownership
    """

    def __init__(
        self,
        config: Optional[GatewayConfig] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.config = config or GOERLI
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=self.config.timeout)

    def __enter__(self) -> "Gateway":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def chain_id(self) -> str:
        return self.config.chain_id

    def call(self, call: FunctionCall, block_hash_or_tag: str = "") -> list[str]:
        """
        Call a contract function without creating a transaction.

        Args:
            call: Function call; ``entry_point_selector`` holds the function name
            block_hash_or_tag: Block hash or tag to query at (default: latest)

        Returns:
            Result felts as returned by the gateway
        """
        call = dataclasses.replace(
            call,
            entry_point_selector=selector_hex(call.entry_point_selector),
        )
        params = {"blockHash": block_hash_or_tag} if block_hash_or_tag else None

        data = self._post("/call_contract", call.to_dict(), params=params)
        return data.get("result", [])

    def invoke(self, tx: InvokeTransaction) -> AddTxResponse:
        """
        Submit an ``INVOKE_FUNCTION`` transaction.

        The transaction's ``entry_point_selector`` holds the function name and
        is replaced by its hashed selector. Signing happens upstream.
        """
        tx = dataclasses.replace(
            tx,
            entry_point_selector=selector_hex(tx.entry_point_selector),
        )
        data = self._post("/add_transaction", tx.to_dict())
        return AddTxResponse.from_json(data)

    def deploy(
        self,
        file_path: Union[str, Path],
        request: Optional[DeployRequest] = None,
        options: Optional[CompressionOptions] = None,
    ) -> AddTxResponse:
        """
        Compress and deploy a compiled contract.

        Args:
            file_path: Path to the compiled contract JSON
            request: Salt and constructor calldata (definition is filled in here)
            options: Program codec options

        Returns:
            AddTxResponse with transaction hash and contract address

        Raises:
            SchemaValidationError: If the file is not a compiled contract
            EncodeError: If the program cannot be encoded
            GatewayError: If the gateway rejects the request
        """
        contract = CompiledContract.from_path(Path(file_path))
        definition = contract.to_definition(options)

        request = dataclasses.replace(
            request or DeployRequest(),
            contract_definition=definition.to_dict(),
        )
        data = self._post("/add_transaction", request.to_dict())
        return AddTxResponse.from_json(data)

    def _url(self, endpoint: str) -> str:
        if endpoint.endswith("add_transaction"):
            return self.config.gateway_url + endpoint
        return self.config.feeder_gateway_url + endpoint

    def _post(
        self,
        endpoint: str,
        body: dict[str, Any],
        params: Optional[dict[str, str]] = None,
    ) -> dict[str, Any]:
        url = self._url(endpoint)
        logger.debug("POST %s params=%s", url, params)

        try:
            response = self._client.post(url, json=body, params=params)
        except httpx.HTTPError as exc:
            raise GatewayTransportError(f"Request to {url} failed: {exc}") from exc

        if response.status_code >= 300:
            logger.warning("Gateway returned %d for %s", response.status_code, url)
            raise GatewayError.from_response(response)

        try:
            data = response.json()
        except ValueError as exc:
            raise GatewayError(
                f"Gateway returned invalid JSON for {url}",
                status_code=response.status_code,
                body=response.text,
            ) from exc

        if not isinstance(data, dict):
            raise GatewayError(
                f"Unexpected gateway response for {url}: {data!r}",
                status_code=response.status_code,
                body=response.text,
            )
        return data

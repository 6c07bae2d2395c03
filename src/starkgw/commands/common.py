"""Options shared by the commands that talk to a gateway."""

from __future__ import annotations

from typing import Any, Callable

import click

from ..gateway.client import DEFAULT_TIMEOUT, GOERLI_BASE_URL, GOERLI_ID, Gateway, GatewayConfig


def gateway_options(func: Callable[..., Any]) -> Callable[..., Any]:
    func = click.option(
        "--timeout",
        envvar="STARKNET_GATEWAY_TIMEOUT",
        default=DEFAULT_TIMEOUT,
        type=float,
        show_default=True,
        help="HTTP timeout in seconds",
    )(func)
    func = click.option(
        "--chain-id",
        envvar="STARKNET_CHAIN_ID",
        default=GOERLI_ID,
        show_default=True,
        help="Chain identifier",
    )(func)
    func = click.option(
        "--gateway-url",
        envvar="STARKNET_GATEWAY_URL",
        default=GOERLI_BASE_URL,
        show_default=True,
        help="Sequencer base URL",
    )(func)
    return func


def build_gateway(gateway_url: str, chain_id: str, timeout: float) -> Gateway:
    return Gateway(GatewayConfig(base_url=gateway_url, chain_id=chain_id, timeout=timeout))

"""
Call - Read contract state through the feeder gateway.
"""

from __future__ import annotations

import sys

import click

from ..gateway.client import GatewayError
from ..gateway.models import FunctionCall
from ..utils import parse_felt_list
from .common import build_gateway, gateway_options


@click.command()
@click.option("--contract", required=True, help="Target contract address")
@click.option("--function", "func_name", required=True, help="Function name to call")
@click.option("--calldata", "calldata_json", default="[]", help="Calldata as JSON array")
@click.option("--block", "block", default="", help="Block hash or tag (default: latest)")
@gateway_options
def call(
    contract: str,
    func_name: str,
    calldata_json: str,
    block: str,
    gateway_url: str,
    chain_id: str,
    timeout: float,
) -> None:
    """Call a contract function without sending a transaction."""
    try:
        calldata = parse_felt_list(calldata_json)
    except ValueError as exc:
        click.secho(f"ERROR: Invalid calldata: {exc}", fg="red")
        sys.exit(1)

    try:
        with build_gateway(gateway_url, chain_id, timeout) as gateway:
            result = gateway.call(
                FunctionCall(
                    contract_address=contract,
                    entry_point_selector=func_name,
                    calldata=calldata,
                ),
                block_hash_or_tag=block,
            )
    except GatewayError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        sys.exit(1)

    for value in result:
        click.echo(value)

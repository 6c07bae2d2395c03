"""
Invoke - Submit an invoke transaction.

The transaction must already be signed; pass the signature felts with
``--signature``.
"""

from __future__ import annotations

import sys
from typing import Optional

import click

from ..gateway.client import GatewayError
from ..gateway.models import InvokeTransaction
from ..utils import parse_felt_list
from .common import build_gateway, gateway_options


@click.command()
@click.option("--contract", required=True, help="Target contract address")
@click.option("--function", "func_name", required=True, help="Function name to invoke")
@click.option("--calldata", "calldata_json", default="[]", help="Calldata as JSON array")
@click.option("--signature", "signature_json", default="[]", help="Signature felts as JSON array")
@click.option("--max-fee", default=None, help="Max fee (hex or decimal string)")
@click.option("--nonce", default=None, help="Account nonce")
@click.option("--tx-version", "tx_version", default=None, help="Transaction version")
@gateway_options
def invoke(
    contract: str,
    func_name: str,
    calldata_json: str,
    signature_json: str,
    max_fee: Optional[str],
    nonce: Optional[str],
    tx_version: Optional[str],
    gateway_url: str,
    chain_id: str,
    timeout: float,
) -> None:
    """Submit an INVOKE_FUNCTION transaction."""
    try:
        calldata = parse_felt_list(calldata_json)
        signature = parse_felt_list(signature_json, name="signature")
    except ValueError as exc:
        click.secho(f"ERROR: Invalid arguments: {exc}", fg="red")
        sys.exit(1)

    click.echo(f"  Target: {contract}")
    click.echo(f"  Function: {func_name}")
    click.echo(f"  Calldata: {calldata}")
    click.echo("")

    tx = InvokeTransaction(
        contract_address=contract,
        entry_point_selector=func_name,
        calldata=calldata,
        signature=signature,
        max_fee=max_fee,
        nonce=nonce,
        version=tx_version,
    )

    try:
        with build_gateway(gateway_url, chain_id, timeout) as gateway:
            resp = gateway.invoke(tx)
    except GatewayError as exc:
        click.secho(f"Transaction failed: {exc}", fg="red")
        sys.exit(1)

    click.secho(f"SUCCESS: {resp.code}", fg="green")
    click.echo(f"  TX: {resp.transaction_hash}")

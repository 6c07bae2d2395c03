"""
Deploy - Compress and deploy a compiled contract.

Reads the compiled contract JSON, validates it, gzip+base64 encodes its
program and submits a DEPLOY transaction.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from ..codec.compression import CodecError
from ..gateway.client import GatewayError
from ..gateway.models import DeployRequest
from ..spec.schemas import SchemaValidationError
from ..utils import parse_felt_list
from .common import build_gateway, gateway_options


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--salt", default="0x0", show_default=True, help="Contract address salt")
@click.option("--calldata", "calldata_json", default="[]", help="Constructor calldata as JSON array")
@gateway_options
def deploy(
    path: Path,
    salt: str,
    calldata_json: str,
    gateway_url: str,
    chain_id: str,
    timeout: float,
) -> None:
    """Deploy a compiled contract from PATH."""
    try:
        constructor_calldata = parse_felt_list(calldata_json)
    except ValueError as exc:
        click.secho(f"ERROR: Invalid calldata: {exc}", fg="red")
        sys.exit(1)

    request = DeployRequest(
        contract_address_salt=salt,
        constructor_calldata=constructor_calldata,
    )

    click.echo(f"  Contract: {path}")
    click.echo(f"  Chain: {chain_id}")
    click.echo("")

    try:
        with build_gateway(gateway_url, chain_id, timeout) as gateway:
            resp = gateway.deploy(path, request)
    except SchemaValidationError as exc:
        click.secho(f"ERROR: {exc}", fg="red")
        for err in exc.errors:
            click.echo(f"  - {err}")
        sys.exit(1)
    except CodecError as exc:
        click.secho(f"ERROR: program {exc.stage} failed: {exc}", fg="red")
        sys.exit(1)
    except GatewayError as exc:
        click.secho(f"Deploy failed: {exc}", fg="red")
        sys.exit(1)

    click.secho(f"SUCCESS: {resp.code}", fg="green")
    click.echo(f"  TX: {resp.transaction_hash}")
    if resp.address:
        click.echo(f"  Address: {resp.address}")

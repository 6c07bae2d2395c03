"""
starkgw CLI

Command-line interface for the StarkNet gateway client.

Transactions must be signed before they reach this tool; it only builds
requests, compresses contract programs and talks to the gateway.

Commands:
  chain-id    - Show the configured chain identifier
  call        - Read contract state
  invoke      - Submit an invoke transaction
  deploy      - Compress and deploy a compiled contract
  compress    - Encode a contract program (offline)
  decompress  - Decode an encoded contract program (offline)
"""

from __future__ import annotations

import logging
import sys

import click

from .commands.common import build_gateway, gateway_options


# ============ Constants ============

VERSION = "0.3.0"


# ============ Main CLI Group ============


@click.group()
@click.version_option(version=VERSION, prog_name="starkgw")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """starkgw: StarkNet gateway client."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# ============ Top-level Commands ============

from .commands.call import call
from .commands.invoke import invoke
from .commands.deploy import deploy
from .commands.program import compress, decompress

cli.add_command(call)
cli.add_command(invoke)
cli.add_command(deploy)
cli.add_command(compress)
cli.add_command(decompress)


# ============ Chain ============


@cli.command("chain-id")
@gateway_options
def show_chain_id(gateway_url: str, chain_id: str, timeout: float) -> None:
    """Show the chain identifier of the configured gateway."""
    with build_gateway(gateway_url, chain_id, timeout) as gateway:
        click.echo(gateway.chain_id())


# ============ Entry Points ============


def main() -> None:
    """starkgw CLI entry point."""
    # Ensure UTF-8 output on Windows
    if sys.platform == "win32":
        try:
            sys.stdout.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
            sys.stderr.reconfigure(encoding="utf-8")  # type: ignore[union-attr]
        except (AttributeError, OSError):
            pass  # Fallback: non-tty
    cli()


if __name__ == "__main__":
    main()

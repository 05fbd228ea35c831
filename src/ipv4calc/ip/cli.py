"""
IPv4 calculator CLI.
"""

import json
import logging
from dataclasses import asdict

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ipv4calc.config import get_config
from ipv4calc.logging_config import configure_logging
from ipv4calc.ip.core import AddressError, get_address_info

logger = logging.getLogger(__name__)


@click.command()
@click.argument("address")
@click.option("--json", "-j", "output_json", is_flag=True, help="Output as JSON")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--log-file", type=click.Path(dir_okay=False), help="Also write logs to this file")
def main(address: str, output_json: bool, debug: bool, log_file: str | None):
    """Show network details for an IPv4 address or CIDR.

    Examples:
        ipv4calc 192.168.0.1/24
        ipv4calc 10.20.30.40/10 --json
        ipv4calc 127.0.0.1
    """
    config = get_config()
    configure_logging(debug=debug, log_file=log_file or config.log_file or None, level=config.log_level)

    output_json = output_json or config.output_json

    try:
        info = get_address_info(address)
    except AddressError as e:
        logger.debug(f"Rejected {address!r}: {e!r}")
        Console(stderr=True).print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        raise SystemExit(1)

    if output_json:
        click.echo(json.dumps(asdict(info), indent=2))
        return

    if info.first_host is not None and info.last_host is not None:
        usable = f"{info.first_host} to {info.last_host}"
    else:
        usable = "N/A"

    table = Table(show_header=False, box=None)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    table.add_row("Address", info.address)
    table.add_row("CIDR", info.cidr)
    table.add_row("Netmask", info.netmask)
    table.add_row("Network", info.network)
    table.add_row("Broadcast", info.broadcast)
    table.add_row("Range", usable)
    table.add_row("Class", info.class_name or "N/A")

    Console().print(table)

"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
VCUtils, a product of Garudex Labs

CLI command for issuing a single HTTP request.
"""

import json
import sys
from typing import Any, List, Optional, Tuple

import click

from vcutils.cli.context import CLIContext, pass_context
from vcutils.exceptions import VCUtilsError
from vcutils.http_client.outcome import Failure

CLI_CLIENT_NAME = "vcutils.cli"


def parse_header(value: str) -> Tuple[str, str]:
    """
    Parse a ``Name: value`` header argument.

    Raises:
        click.BadParameter: If the header has no colon or an empty name
    """
    name, sep, header_value = value.partition(":")
    if not sep or not name.strip():
        raise click.BadParameter(f"Invalid header '{value}', expected 'Name: value'")
    return name.strip(), header_value.strip()


def render_body(body: Any) -> str:
    """Render an outcome body for terminal output."""
    if body is None:
        return ""
    if isinstance(body, (bytes, bytearray)):
        return bytes(body).decode("utf-8", errors="replace")
    if isinstance(body, str):
        return body
    return json.dumps(body, indent=2, default=repr)


@click.command('request')
@click.argument('method')
@click.argument('url')
@click.option(
    '--header',
    '-H',
    'headers',
    multiple=True,
    help="Request header as 'Name: value' (repeatable)",
)
@click.option(
    '--data',
    '-d',
    default=None,
    help='Request body, sent as-is unless --json is given',
)
@click.option(
    '--json',
    'as_json',
    is_flag=True,
    help='Parse --data as JSON and send it through the serializer',
)
@click.option(
    '--timeout',
    type=float,
    default=None,
    help='Request timeout in seconds',
)
@click.option(
    '--adapter',
    '-a',
    default=None,
    help='Adapter name or import path (default: from configuration)',
)
@pass_context
def request_command(
    ctx: CLIContext,
    method: str,
    url: str,
    headers: Tuple[str, ...],
    data: Optional[str],
    as_json: bool,
    timeout: Optional[float],
    adapter: Optional[str],
):
    """Send METHOD to URL and print the normalized outcome."""
    try:
        header_pairs: List[Tuple[str, str]] = [parse_header(h) for h in headers]
    except click.BadParameter as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(2)

    body: Any = data
    if as_json and data is not None:
        try:
            body = json.loads(data)
        except json.JSONDecodeError as e:
            click.echo(f"Error: --data is not valid JSON: {e}", err=True)
            sys.exit(2)

    overrides = {"adapter": adapter} if adapter else {}
    options = {"timeout": timeout} if timeout is not None else {}

    try:
        client = ctx.client(CLI_CLIENT_NAME, **overrides)
    except VCUtilsError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    with client:
        outcome = client.request(method, url, body, header_pairs, options)

    if isinstance(outcome, Failure):
        click.echo(f"✗ {outcome.kind.value} failure", err=True)
        click.echo(f"Status:  {outcome.status if outcome.status is not None else '-'}")
        if outcome.message:
            click.echo(f"Message: {outcome.message}")
        rendered = render_body(outcome.body)
        if rendered:
            click.echo("Body:")
            click.echo(rendered)
        sys.exit(1)

    click.echo(f"Status:  {outcome.status}")
    rendered = render_body(outcome.body)
    if rendered:
        click.echo("Body:")
        click.echo(rendered)

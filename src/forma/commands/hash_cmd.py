"""Deterministic input hash command."""

import json

import click

from ..utils.hashing import generate_input_hash, generate_input_hash_fallback


def _parse_value(raw: str):
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


@click.command(name="hash")
@click.argument("params", nargs=-1, required=True)
@click.option("--fast", is_flag=True, help="Use the 32-bit non-cryptographic hash")
def hash_params(params: tuple[str, ...], fast: bool):
    """Print the deterministic hash of KEY=VALUE parameters.

    Values are parsed as JSON when possible, so lists and numbers work.
    Parameter order does not affect the result.

    Example:

        forma hash 'goals=["hypertrophy"]' days=4
    """
    data = {}
    for item in params:
        if "=" not in item:
            raise click.BadParameter(f"Expected KEY=VALUE, got {item!r}", param_hint="PARAMS")
        key, value = item.split("=", 1)
        data[key] = _parse_value(value)

    click.echo(generate_input_hash_fallback(data) if fast else generate_input_hash(data))

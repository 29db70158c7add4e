"""Operators command for prefixeval CLI - list the registry."""

import json

import click

from prefixeval.operators import default_registry


@click.command()
@click.option('--json', '-j', 'json_output', is_flag=True, help='Output as JSON')
def operators_command(json_output):
    """List registered operators."""
    registry = default_registry()
    operators = registry.describe()

    if json_output:
        click.echo(json.dumps({
            "registry_id": registry.registry_id,
            "version": registry.version,
            "operators": operators,
        }, indent=2))
        return

    click.echo(f"Registry: {registry.registry_id} v{registry.version}")
    click.echo(f"  Operators: {len(operators)}")
    for op in operators:
        click.echo(f"    {op['name']:<10} {op['handler']:<10} {op['description']}")

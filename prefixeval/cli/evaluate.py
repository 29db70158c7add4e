"""Evaluate command for prefixeval CLI."""

import json

import click

from prefixeval.operators import default_registry
from prefixeval.runtime.interpreter import ExecutionConfig, Interpreter
from prefixeval.runtime.tokenizer import MAX_DEPTH_LIMIT

MISSING_ARGUMENT = "Please provide 1 argument."


@click.command()
@click.argument('expression', nargs=-1)
@click.option('--max-depth', type=click.IntRange(min=1, max=MAX_DEPTH_LIMIT), default=None, help='Maximum group nesting depth')
@click.option('--json', '-j', 'json_output', is_flag=True, help='Output as JSON')
@click.pass_context
def evaluate_command(ctx, expression, max_depth, json_output):
    """Evaluate EXPRESSION and print the result or the error message."""
    if len(expression) != 1:
        click.echo(MISSING_ARGUMENT)
        ctx.exit(1)

    config = ExecutionConfig.from_options({"max_depth": max_depth})
    interpreter = Interpreter(registry=default_registry(), config=config)
    result = interpreter.interpret(expression[0])

    if json_output:
        click.echo(json.dumps(result.to_dict(), indent=2))
    elif result.success:
        click.echo(result.value)
    else:
        click.echo(result.error)

    ctx.exit(0 if result.success else 1)

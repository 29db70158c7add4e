"""Tokens command for prefixeval CLI - show the parsed token tree."""

import json

import click

from prefixeval.errors import ExpressionSyntaxError
from prefixeval.operators import default_registry
from prefixeval.runtime.tokenizer import Tokenizer


@click.command()
@click.argument('expression')
@click.option('--lexemes', is_flag=True, help='Show raw lexemes instead of the tree')
@click.pass_context
def tokens_command(ctx, expression, lexemes):
    """Print the token tree of EXPRESSION as JSON."""
    tokenizer = Tokenizer(default_registry())
    try:
        if lexemes:
            output = tokenizer.lex(expression)
        else:
            output = tokenizer.tokenize(expression).to_data()
    except ExpressionSyntaxError as e:
        click.echo(str(e))
        ctx.exit(1)

    click.echo(json.dumps(output))

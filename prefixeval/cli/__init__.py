"""prefixeval CLI package."""

import logging

import click

from prefixeval.cli.evaluate import evaluate_command
from prefixeval.cli.tokens import tokens_command
from prefixeval.cli.operators import operators_command


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def main(verbose):
    """prefixeval - evaluate prefix expressions such as (add 1 (multiply 2 3))."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        )


main.add_command(evaluate_command, "evaluate")
main.add_command(tokens_command, "tokens")
main.add_command(operators_command, "operators")

__all__ = [
    "main",
    "evaluate_command",
    "tokens_command",
    "operators_command",
]

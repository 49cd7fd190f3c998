import sys
from typing import TextIO

import click

from tally.evaluator import evaluate_tokens
from tally.helper import render_error
from tally.scanner import scan
from tally.utils import Err, format_int


def evaluate_line(expression: str, output: TextIO, verbose: bool) -> bool:
    if verbose:
        click.echo(f"Evaluating: {expression}", file=output)
    scanned = scan(expression)
    if isinstance(scanned, Err):
        click.echo(render_error(expression, scanned.error), err=True, nl=False)
        return False
    if verbose:
        click.echo(f"Scanner output: {scanned.value}", file=output)
    result = evaluate_tokens(scanned.value)
    if isinstance(result, Err):
        click.echo(render_error(expression, result.error), err=True, nl=False)
        return False
    if verbose:
        click.echo(f"Evaluator output: {format_int(result.value)}", file=output)
    else:
        click.echo(format_int(result.value), file=output)
    return True


@click.command()
@click.argument("filename", type=click.File("r"), default="-")
@click.option("-o", "--output", type=click.File("w"), default="-")
@click.option("-v", "--verbose", is_flag=True, help="Trace each pipeline stage.")
def main(filename: TextIO, output: TextIO, verbose: bool):
    """Evaluate one expression per line of FILENAME (stdin by default)."""
    failed = False
    for line in filename:
        expression = line.rstrip("\n")
        if not expression:
            continue
        if not evaluate_line(expression, output, verbose):
            failed = True
    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()

import typer

from tally.evaluator import evaluate_tokens
from tally.helper import render_error
from tally.scanner import scan
from tally.utils import Err, format_int

app = typer.Typer()


@app.command(context_settings={"ignore_unknown_options": True})
def main(
    expression: str,
    tokens: bool = typer.Option(False, "--tokens", help="Print the tokens only."),
):
    scanned = scan(expression)
    if isinstance(scanned, Err):
        typer.echo(render_error(expression, scanned.error), err=True, nl=False)
        raise typer.Exit(1)
    if tokens:
        typer.echo(scanned.value)
        return
    result = evaluate_tokens(scanned.value)
    if isinstance(result, Err):
        typer.echo(render_error(expression, result.error), err=True, nl=False)
        raise typer.Exit(1)
    typer.echo(format_int(result.value))


if __name__ == "__main__":
    app()

"""CLI interface for labeled-vector.

Requires the 'cli' extra: pip install labeled-vector[cli]
"""

from __future__ import annotations

import importlib
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

try:
    import typer
    from rich.console import Console
    from rich.markup import escape
    from rich.table import Table
except ImportError:
    print(
        "CLI dependencies not installed. Install with: pip install labeled-vector[cli]",
        file=sys.stderr,
    )
    sys.exit(1)

from labeled_vector import __version__
from labeled_vector.exceptions import VectorError
from labeled_vector.vector import Vector

app = typer.Typer(
    name="labeled-vector",
    help="Norms, dot products and cosine similarities of labeled vectors.",
    add_completion=False,
)
console = Console()

_COEFFS_HELP = "Comma-separated coefficients, e.g. 1,2,3"


def parse_coefficients(raw: str) -> list[Any]:
    """Split a comma-separated string into coefficients.

    Tokens that are not floats are kept as strings so that vector
    validation reports them with their position.
    """
    tokens = [token.strip() for token in raw.split(",")]
    values: list[Any] = []
    for token in tokens:
        if not token:
            continue
        try:
            values.append(float(token))
        except ValueError:
            values.append(token)
    return values


@contextmanager
def _vector_errors() -> Iterator[None]:
    try:
        yield
    except VectorError as exc:
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc


@app.callback()
def main(
    version: bool = typer.Option(False, "--version", "-v", help="Show version"),
) -> None:
    if version:
        console.print(f"labeled-vector {__version__}")
        raise typer.Exit()


@app.command()
def info() -> None:
    """Show information about the labeled-vector installation."""
    table = Table(title="labeled-vector info")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Version", __version__)
    table.add_row("Python", sys.version.split()[0])

    for dep_name in ["pydantic", "typer", "rich"]:
        try:
            mod = importlib.import_module(dep_name)
            ver = getattr(mod, "__version__", "installed")
            table.add_row(dep_name, str(ver))
        except ImportError:
            table.add_row(dep_name, "[red]not installed[/red]")

    console.print(table)


@app.command()
def norm(
    coefficients: str = typer.Argument(..., help=_COEFFS_HELP),
) -> None:
    """Print the Euclidean (L2) norm of a vector."""
    with _vector_errors():
        vector = Vector("cli", parse_coefficients(coefficients))
    console.print(str(vector.get_norm()))


@app.command()
def dot(
    a: str = typer.Argument(..., help=_COEFFS_HELP),
    b: str = typer.Argument(..., help=_COEFFS_HELP),
) -> None:
    """Print the dot product of two vectors."""
    with _vector_errors():
        result = Vector("a", parse_coefficients(a)).get_dot_product(
            Vector("b", parse_coefficients(b))
        )
    console.print(str(result))


@app.command()
def similarity(
    a: str = typer.Argument(..., help=_COEFFS_HELP),
    b: str = typer.Argument(..., help=_COEFFS_HELP),
) -> None:
    """Print the cosine similarity of two vectors."""
    with _vector_errors():
        result = Vector("a", parse_coefficients(a)).get_cosine_similarity(
            Vector("b", parse_coefficients(b))
        )
    console.print(str(result))


@app.command()
def inspect(
    label: str = typer.Argument(..., help="Vector label"),
    coefficients: str = typer.Argument(..., help=_COEFFS_HELP),
) -> None:
    """Show a vector's label, dimension, coefficients and norm."""
    with _vector_errors():
        snapshot = Vector(label, parse_coefficients(coefficients)).snapshot()

    table = Table(title=escape(snapshot.label))
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("Label", escape(snapshot.label))
    table.add_row("Dimension", str(snapshot.dimension))
    table.add_row("Coefficients", escape(", ".join(str(c) for c in snapshot.coefficients)))
    table.add_row("Norm", str(snapshot.norm))
    console.print(table)


if __name__ == "__main__":
    app()

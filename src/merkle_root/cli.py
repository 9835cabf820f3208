#!/usr/bin/env python3
"""
Merkle Root CLI

Command-line interface for computing balanced binary Merkle tree roots
from text, files or standard input.
"""

import json
import logging
import sys
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from .config import TreeSettings
from .constants import ALGORITHM_DIGEST_SIZES, ALGORITHM_MAX_DIGEST_SIZES, SUPPORTED_ALGORITHMS
from .main import RootResult, compute_file_root, compute_text_root
from .tree import EmptyInputPolicy, MerkleTreeError, pad_base_layer, tokenize_words
from .utils.hex_helpers import bytes_to_hex, digest_to_int

# Configure rich console
console = Console()
logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def read_input_text(text: Optional[str], file_path: Optional[str]) -> str:
    """
    Resolve the input text from an argument, a file, or stdin.

    A TEXT argument of "-" reads standard input.
    """
    if text is not None and file_path is not None:
        raise click.UsageError("Provide either TEXT or --file, not both")
    if file_path is not None:
        with open(file_path, "r", encoding="utf-8") as f:
            return f.read()
    if text is None or text == "-":
        return click.get_text_stream("stdin").read()
    return text


def print_root_result(result: RootResult, format_output: str = "table"):
    """Print root results in various formats."""
    if format_output == "hex":
        click.echo(result.root.hex())
        return

    if format_output == "json":
        output = {
            "root": bytes_to_hex(result.root),
            "leaf_count": result.leaf_count,
            "padded_count": result.padded_count,
            "depth": result.depth,
            "algorithm": result.algorithm,
            "digest_size": result.digest_size,
            "metadata": result.metadata,
        }
        console.print_json(json.dumps(output, indent=2))
        return

    # Table format (default)
    table = Table(title="Merkle Root")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Root", bytes_to_hex(result.root))
    table.add_row("Root (uint)", str(digest_to_int(result.root)))
    table.add_row("Algorithm", f"{result.algorithm} ({result.digest_size * 8}-bit)")
    table.add_row("Blocks", str(result.leaf_count))
    table.add_row("Filler Blocks", str(result.filler_count))
    table.add_row("Leaves", str(result.padded_count))
    table.add_row("Depth", str(result.depth))

    for key, value in result.metadata.items():
        table.add_row(key.replace("_", " ").title(), str(value) or '""')

    console.print(table)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx, verbose: bool):
    """
    Merkle Root CLI - Compute balanced binary Merkle tree roots.

    Input is split into whitespace-delimited words, padded with filler
    blocks to a power-of-two length, hashed into leaves, and reduced
    pairwise to a single root digest.
    """
    setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@cli.command()
@click.argument("text", required=False)
@click.option("--file", "-f", "file_path", type=click.Path(exists=True, dir_okay=False), help="Read text from a file")
@click.option(
    "--algorithm",
    "-a",
    type=click.Choice(SUPPORTED_ALGORITHMS, case_sensitive=False),
    help="Hash algorithm (defaults to MERKLE_HASH_ALGORITHM or sha256)",
)
@click.option("--digest-size", "-s", type=int, help="Digest width in bytes")
@click.option("--allow-empty", is_flag=True, help="Treat empty input as a single filler leaf")
@click.option("--workers", "-w", type=int, help="Thread pool size for per-round hashing")
@click.option(
    "--format",
    "format_output",
    type=click.Choice(["table", "json", "hex"]),
    default="table",
    help="Output format",
)
@click.pass_context
def root(
    ctx,
    text: Optional[str],
    file_path: Optional[str],
    algorithm: Optional[str],
    digest_size: Optional[int],
    allow_empty: bool,
    workers: Optional[int],
    format_output: str,
):
    """
    Compute the Merkle root of TEXT.

    TEXT: Words to commit to. Use "-" or omit to read standard input.
    """
    try:
        settings = TreeSettings.from_env()
        if algorithm is not None:
            settings = settings.override(algorithm=algorithm.lower())
            if digest_size is None:
                settings = settings.override(digest_size=ALGORITHM_DIGEST_SIZES[settings.algorithm])
        settings = settings.override(
            digest_size=digest_size,
            max_workers=workers,
            empty_policy=EmptyInputPolicy.FILLER if allow_empty else None,
        )

        if file_path is not None:
            if text is not None:
                raise click.UsageError("Provide either TEXT or --file, not both")
            result = compute_file_root(file_path, settings)
        else:
            result = compute_text_root(read_input_text(text, None), settings)
        print_root_result(result, format_output)

    except (MerkleTreeError, ValueError, OSError) as e:
        logger.debug("Root computation failed", exc_info=True)
        raise click.ClickException(str(e))


@cli.command()
@click.argument("text", required=False)
@click.option("--file", "-f", "file_path", type=click.Path(exists=True, dir_okay=False), help="Read text from a file")
def pad(text: Optional[str], file_path: Optional[str]):
    """
    Show the padded base layer for TEXT.

    TEXT: Words to pad. Use "-" or omit to read standard input.
    """
    try:
        settings = TreeSettings.from_env()
        blocks = tokenize_words(read_input_text(text, file_path))
        padded = pad_base_layer(blocks, settings.filler)
    except (ValueError, OSError) as e:
        raise click.ClickException(str(e))

    console.print(f"{len(blocks)} blocks -> {len(padded)} leaves")
    table = Table(title="Base Layer")
    table.add_column("Index", style="cyan", justify="right")
    table.add_column("Block", style="green")
    table.add_column("Kind", style="yellow")

    for i, block in enumerate(padded):
        kind = "data" if i < len(blocks) else "filler"
        table.add_row(str(i), block.decode("utf-8", errors="replace") or '""', kind)

    console.print(table)


@cli.command()
def algorithms():
    """List supported hash algorithms."""
    table = Table(title="Hash Algorithms")
    table.add_column("Algorithm", style="cyan")
    table.add_column("Default Width", style="green")
    table.add_column("Max Width", style="green")

    for name in SUPPORTED_ALGORITHMS:
        table.add_row(
            name,
            f"{ALGORITHM_DIGEST_SIZES[name]} bytes",
            f"{ALGORITHM_MAX_DIGEST_SIZES[name]} bytes",
        )

    console.print(table)


@cli.command()
@click.option("--host", default="127.0.0.1", help="Host to bind to")
@click.option("--port", default=8000, type=int, help="Port to bind to")
@click.option("--dev", is_flag=True, help="Enable development mode with auto-reload")
@click.pass_context
def serve(ctx, host: str, port: int, dev: bool):
    """Start the REST API server."""
    from .api.rest_api import run_server

    try:
        console.print(f"[cyan]Starting Merkle Root API on http://{host}:{port}[/cyan]")
        console.print(f"[cyan]API docs at http://{host}:{port}/docs[/cyan]")
        run_server(host=host, port=port, dev=dev)
    except KeyboardInterrupt:
        console.print("\n[yellow]Server stopped by user[/yellow]")
    except Exception as e:
        console.print(f"[red]Server error: {e}[/red]", style="bold")
        if ctx.obj.get("verbose"):
            console.print_exception()
        sys.exit(1)


if __name__ == "__main__":
    cli()

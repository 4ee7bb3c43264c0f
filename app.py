"""Command-line front end for the anagram utilities.

Commands:
- `demo`: run every operation against fixed sample input.
- `check`, `generate`, `count`, `key`, `group`, `shuffle`: one per library operation.
- `examples`: print the reference table of Italian anagram pairs.
"""

from __future__ import annotations

import logging
import random
from typing import Annotated

import typer

from models import ITALIAN_ANAGRAM_EXAMPLES, DEFAULT_WARN_THRESHOLD, AnagramPair, DemoReport, GenerateOptions
from solver import (
    are_anagrams,
    build_demo_report,
    count_anagrams,
    generate_anagrams,
    group_anagrams,
    random_anagram,
    shuffle_letters,
)
from utils import anagram_key, setup_logging

app = typer.Typer(
    name="anagramma",
    no_args_is_help=True,
    help="Italian anagram generator and checker.",
)

logger = logging.getLogger(__name__)


def _make_rng(seed: int | None) -> random.Random | None:
    return random.Random(seed) if seed is not None else None


def _yes_no(flag: bool) -> str:
    return "yes" if flag else "no"


def echo_examples(examples: tuple[AnagramPair, ...]) -> None:
    """Print one `original <-> anagram` line per pair."""
    for pair in examples:
        typer.echo(f"  {pair.original} <-> {pair.anagram}")


def echo_groups(groups: dict[str, list[str]]) -> None:
    """Print one `key: word, word` line per anagram group."""
    for key, words in groups.items():
        typer.echo(f"  {key}: {', '.join(words)}")


def echo_demo_report(report: DemoReport) -> None:
    """Render the demo report section by section."""
    typer.echo("=== Italian Anagram Generator ===")
    typer.echo("")
    for result in report.comparisons:
        typer.echo(f'Are "{result.first}" and "{result.second}" anagrams? {_yes_no(result.are_anagrams)}')

    typer.echo("")
    typer.echo("--- Anagram generation ---")
    typer.echo(f'Anagrams of "{report.sample_word}": {", ".join(report.sample_anagrams)}')
    typer.echo(f"Total unique anagrams: {report.sample_count}")

    typer.echo("")
    typer.echo("--- Random anagram ---")
    typer.echo(f'Random anagram of "{report.shuffle_source}": {report.shuffled}')

    typer.echo("")
    typer.echo("--- Anagram groups ---")
    echo_groups(report.groups)

    typer.echo("")
    typer.echo("--- Famous examples ---")
    echo_examples(report.examples)


@app.callback()
def _root(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging."),
    ] = False,
) -> None:
    setup_logging(logging.DEBUG if verbose else logging.INFO)


@app.command("demo")
def demo_command(
    seed: Annotated[
        int | None,
        typer.Option("--seed", help="Seed for the random anagram."),
    ] = None,
) -> None:
    """Run every operation against fixed sample words."""
    echo_demo_report(build_demo_report(_make_rng(seed)))


@app.command("check")
def check_command(
    first: Annotated[str, typer.Argument(help="First word.")],
    second: Annotated[str, typer.Argument(help="Second word.")],
) -> None:
    """Report whether two words are anagrams of each other."""
    result = are_anagrams(first, second)
    typer.echo(f'Are "{first}" and "{second}" anagrams? {_yes_no(result)}')


@app.command("generate")
def generate_command(
    word: Annotated[str, typer.Argument(help="Word to rearrange.")],
    all_permutations: Annotated[
        bool,
        typer.Option("--all", help="Keep repeated strings from repeated letters."),
    ] = False,
    warn_threshold: Annotated[
        int,
        typer.Option("--warn-threshold", min=0, help="Warn above this many letters."),
    ] = DEFAULT_WARN_THRESHOLD,
) -> None:
    """Print every anagram of WORD, one per line."""
    options = GenerateOptions(unique=not all_permutations, warn_threshold=warn_threshold)
    anagrams = generate_anagrams(word, options=options)
    logger.debug("Generated %d anagrams for %r", len(anagrams), word)
    for anagram in anagrams:
        typer.echo(anagram)


@app.command("count")
def count_command(word: Annotated[str, typer.Argument(help="Word to analyse.")]) -> None:
    """Print the number of distinct anagrams of WORD."""
    typer.echo(str(count_anagrams(word)))


@app.command("key")
def key_command(word: Annotated[str, typer.Argument(help="Word to convert.")]) -> None:
    """Print the sorted-letter anagram key of WORD."""
    typer.echo(anagram_key(word))


@app.command("group")
def group_command(
    words: Annotated[list[str], typer.Argument(help="Words to group.")],
) -> None:
    """Print groups of two or more words that are anagrams of each other."""
    groups = group_anagrams(words)
    if not groups:
        typer.echo("No anagram groups found.")
        return
    echo_groups(groups)


@app.command("shuffle")
def shuffle_command(
    word: Annotated[str, typer.Argument(help="Word to shuffle.")],
    seed: Annotated[
        int | None,
        typer.Option("--seed", help="Seed for a reproducible shuffle."),
    ] = None,
    normalize_first: Annotated[
        bool,
        typer.Option("--normalize", help="Normalize before shuffling (random anagram)."),
    ] = False,
) -> None:
    """Print WORD with its letters shuffled."""
    rng = _make_rng(seed)
    shuffled = random_anagram(word, rng) if normalize_first else shuffle_letters(word, rng)
    typer.echo(shuffled)


@app.command("examples")
def examples_command() -> None:
    """Print the reference table of Italian anagram pairs."""
    echo_examples(ITALIAN_ANAGRAM_EXAMPLES)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()

"""CLI for FizzBuzz - print or inspect the classified sequence."""

from __future__ import annotations

import logging

import click

from fizzbuzz.classifier import InvalidArgumentError, make_rules
from fizzbuzz.rules import DEFAULT_BOUND, RuleSet

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _rules_from_options(fizz: str | None, buzz: str | None) -> RuleSet:
    """Turn --fizz/--buzz into a rule set, reporting bad markers as usage errors."""
    try:
        return make_rules(fizz=fizz, buzz=buzz)
    except InvalidArgumentError as e:
        raise click.BadParameter(str(e)) from e


bound_option = click.option(
    "--bound", "-n",
    default=DEFAULT_BOUND,
    show_default=True,
    type=click.IntRange(min=1),
    help="Inclusive upper limit of the sequence",
)
fizz_option = click.option("--fizz", default=None, help="Marker for multiples of 3 (default: Fizz)")
buzz_option = click.option("--buzz", default=None, help="Marker for multiples of 5 (default: Buzz)")


@click.group()
@click.version_option(version="0.1.0", prog_name="fizzbuzz")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging on stderr")
def main(verbose: bool) -> None:
    """FizzBuzz - classify the integers 1..N as Fizz, Buzz, FizzBuzz or the number.

    Multiples of 3 become Fizz, multiples of 5 become Buzz, multiples of both
    become FizzBuzz.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


@main.command()
@bound_option
@fizz_option
@buzz_option
def run(bound: int, fizz: str | None, buzz: str | None) -> None:
    """Print the banner line followed by one label per line.

    \b
    Example:
        fizzbuzz run
        fizzbuzz run --bound 15
        fizzbuzz run -n 30 --fizz Foo --buzz Bar
    """
    from fizzbuzz.runner import run_fizzbuzz

    rules = _rules_from_options(fizz, buzz)
    run_fizzbuzz(bound, rules=rules)


@main.command()
@bound_option
@fizz_option
@buzz_option
@click.option(
    "--raw",
    is_flag=True,
    help="Output raw JSON instead of one label per line",
)
def classify(bound: int, fizz: str | None, buzz: str | None, raw: bool) -> None:
    """Print the labels for 1..N without the banner.

    \b
    Example:
        fizzbuzz classify --bound 15
        fizzbuzz classify --bound 100 --raw
    """
    from fizzbuzz.classifier import summarize

    rules = _rules_from_options(fizz, buzz)
    result = summarize(bound, rules)

    if raw:
        import json
        click.echo(json.dumps(result.model_dump(), indent=2))
        return

    for label in result.labels:
        click.echo(label)


@main.command()
def mcp() -> None:
    """Run the MCP server exposing the fizzbuzz tool.

    \b
    Configure in .mcp.json:
        {
            "mcpServers": {
                "fizzbuzz": {
                    "command": "fizzbuzz",
                    "args": ["mcp"]
                }
            }
        }
    """
    from mcp_fizzbuzz.server import mcp as mcp_server
    mcp_server.run()


if __name__ == "__main__":
    main()

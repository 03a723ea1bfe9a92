"""Factory for constructing the CLI argument parser."""

import argparse

from .types import Gender


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argparse parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="namegen",
        description="namegen - themed fantasy name generators",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--data-dir",
        dest="data_dirs",
        action="append",
        default=[],
        metavar="DIR",
        help="Extra data root holding <category>/<generator>.json files (repeatable, searched first)",
    )

    parser.add_argument(
        "--no-color",
        dest="no_color",
        action="store_true",
        help="Disable colored output",
    )

    parser.add_argument(
        "--verbose",
        dest="verbose",
        action="store_true",
        help="Log debug diagnostics to stderr",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    list_parser = subparsers.add_parser("list", help="List categories, or generators in a category")
    list_parser.add_argument("category", nargs="?", help="Category to list generators for")

    show_parser = subparsers.add_parser("show", help="Show the pools of a generator")
    _add_generator_arguments(show_parser)

    generate_parser = subparsers.add_parser("generate", help="Draw random names from a generator")
    _add_generator_arguments(generate_parser)
    generate_parser.add_argument(
        "--gender",
        choices=[g.value for g in Gender],
        help="First-name pool for character generators (default: male)",
    )
    generate_parser.add_argument(
        "--type",
        dest="name_type",
        metavar="POOL",
        help="Pool for location generators, e.g. cityNames (default: first pool)",
    )
    generate_parser.add_argument(
        "-n",
        "--count",
        type=int,
        default=None,
        help="Number of names to draw (default: 10)",
    )
    generate_parser.add_argument(
        "--describe",
        action="store_true",
        help="Print the description of each generated name",
    )

    describe_parser = subparsers.add_parser("describe", help="Look up the description of a name")
    _add_generator_arguments(describe_parser)
    describe_parser.add_argument("name", help="Name to look up, e.g. 'Aran Oakheart'")

    return parser


def _add_generator_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("category", help="Category, e.g. fantasy")
    parser.add_argument("generator", help="Generator, e.g. elven-ranger")

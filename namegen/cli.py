"""Command-line interface for namegen."""

import argparse
import asyncio
import sys
from typing import Optional

from rich.text import Text

from .catalog import Catalog
from .cli_builder import build_arg_parser
from .config import NamegenConfig
from .discriminator import is_character_name_data
from .formatters import NO_DESCRIPTION, OutputFormatter
from .log_setup import configure_logging
from .loader import load_name_data
from .lookup import get_name_description
from .models import NameData
from .sampler import generate_names
from .types import Gender


class CLI:
    """Command-line interface for namegen."""

    def __init__(self):
        self.parser = build_arg_parser()

    def run(self, argv: Optional[list[str]] = None) -> int:
        """Run the CLI.

        Args:
            argv: Command-line arguments (defaults to sys.argv[1:])

        Returns:
            Exit code
        """
        args = self.parser.parse_args(argv)
        configure_logging(verbose=args.verbose, no_color=args.no_color)
        output = OutputFormatter(no_color=args.no_color)

        config = NamegenConfig.from_env(extra_dirs=args.data_dirs)
        catalog = Catalog(config)

        handlers = {
            "list": self._list,
            "show": self._show,
            "generate": self._generate,
            "describe": self._describe,
        }

        try:
            return handlers[args.command](args, config, catalog, output)
        except ValueError as err:
            output.print_error(str(err))
            return 1

    def _load(self, args: argparse.Namespace, config: NamegenConfig, catalog: Catalog) -> NameData:
        """Load the generator named on the command line.

        Raises:
            ValueError: If the catalog has no such generator
        """
        if not catalog.has(args.category, args.generator):
            available = ", ".join(catalog.generators(args.category))
            hint = f" Available in '{args.category}': {available}" if available else ""
            raise ValueError(f"Unknown generator '{args.category}/{args.generator}'.{hint}")

        return asyncio.run(load_name_data(args.category, args.generator, config))

    def _kind_label(self, data: NameData) -> str:
        return "character names" if is_character_name_data(data) else "location names"

    def _list(self, args, config, catalog, output: OutputFormatter) -> int:
        if args.category:
            generators = catalog.generators(args.category)
            if not generators:
                raise ValueError(f"Unknown category '{args.category}'")
            output.print_heading(output.symbols.Folder, args.category, f"({len(generators)} generators)")
            for generator in generators:
                output.print(f"  {generator}")
            return 0

        categories = catalog.categories()
        if not categories:
            output.print_warning("No datasets found in: " + ", ".join(str(d) for d in config.data_dirs))
            return 1

        output.print_heading(output.symbols.Book, "Categories")
        for category in categories:
            output.print(f"  {category} ({len(catalog.generators(category))})")
        return 0

    def _show(self, args, config, catalog, output: OutputFormatter) -> int:
        data = self._load(args, config, catalog)
        symbol = output.symbols.Person if is_character_name_data(data) else output.symbols.Castle
        output.print_heading(symbol, f"{args.category}/{args.generator}", f"({self._kind_label(data)})")

        if not any(data.pools.values()):
            output.print_warning("Dataset has no names")
            return 1

        for pool_name, entries in data.pools.items():
            output.print(output.pool_table(pool_name, entries, config.preview_limit))
        return 0

    def _generate(self, args, config, catalog, output: OutputFormatter) -> int:
        count = args.count if args.count is not None else config.default_count
        if count < 0:
            raise ValueError(f"Count must be non-negative, got {count}")

        data = self._load(args, config, catalog)

        if is_character_name_data(data):
            if args.name_type is not None:
                raise ValueError(
                    f"'{args.category}/{args.generator}' is a character generator; "
                    "--type applies to location generators, use --gender"
                )
            gender = args.gender or Gender.MALE.value
            name_type = None
            subtitle = f"({gender} {self._kind_label(data)})"
        else:
            if args.gender is not None:
                raise ValueError(
                    f"'{args.category}/{args.generator}' is a location generator; "
                    "--gender applies to character generators, use --type"
                )
            gender = None
            name_type = args.name_type or next(iter(data.pools), None)
            subtitle = f"({name_type})"

        names = generate_names(data, count, gender=gender, name_type=name_type)
        if count > 0 and not names:
            raise ValueError(f"No names generated for '{args.category}/{args.generator}' {subtitle}")

        output.print_heading(output.symbols.Sparkles, f"{args.category}/{args.generator}", subtitle)
        descriptions = None
        if args.describe:
            descriptions = [get_name_description(data, name) for name in names]
        output.print_names(names, descriptions)
        return 0

    def _describe(self, args, config, catalog, output: OutputFormatter) -> int:
        data = self._load(args, config, catalog)
        description = get_name_description(data, args.name)
        if description is None:
            output.print_warning(f"{NO_DESCRIPTION} for '{args.name}'")
            return 1

        output.print_heading(output.symbols.Scroll, args.name)
        output.print(Text(f"  {description}"))
        return 0


def main() -> int:
    """Main entry point."""
    cli = CLI()
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())

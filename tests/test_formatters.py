"""Tests for terminal formatters."""

import io

from rich.console import Console

from namegen.formatters import NO_DESCRIPTION, OutputFormatter, Symbols, SymbolsFormatter
from namegen.formatters.symbols import Symbol
from namegen.models import NameEntry


def _formatter() -> tuple[OutputFormatter, io.StringIO]:
    buffer = io.StringIO()
    console = Console(file=buffer, no_color=True, width=100, highlight=False)
    return OutputFormatter(no_color=True, console=console), buffer


class TestSymbolsFormatter:
    def test_no_color_uses_ascii(self) -> None:
        symbols = SymbolsFormatter(no_color=True)

        assert symbols.supports_emoji is False
        assert symbols.Cross == Symbols.Cross.ascii
        assert symbols.Sparkles == "*"

    def test_get_resolves_any_symbol(self) -> None:
        assert SymbolsFormatter(no_color=True).get(Symbols.Castle) == "#"

    def test_each_symbol_has_a_property(self) -> None:
        symbols = SymbolsFormatter(no_color=True)
        defined = {name for name, value in vars(Symbols).items() if isinstance(value, Symbol)}

        assert defined == {"Cross", "Warning", "Book", "Folder", "Scroll", "Person", "Castle", "Sparkles"}
        for name in defined:
            assert getattr(symbols, name) == getattr(Symbols, name).ascii


class TestOutputFormatter:
    def test_print_names_numbers_each_name(self) -> None:
        output, buffer = _formatter()

        output.print_names(["Aran Oakheart", "Lira Oakheart"])

        lines = buffer.getvalue().splitlines()
        assert lines == ["  1. Aran Oakheart", "  2. Lira Oakheart"]

    def test_print_names_with_descriptions(self) -> None:
        output, buffer = _formatter()

        output.print_names(["Aran Oakheart", "Nobody"], ["Swift.. Strong..", None])

        text = buffer.getvalue()
        assert "Swift.. Strong.." in text
        assert NO_DESCRIPTION in text

    def test_pool_table_limits_rows(self) -> None:
        output, buffer = _formatter()
        entries = [NameEntry(f"Name{i}", f"Desc{i}") for i in range(5)]

        output.print(output.pool_table("cityNames", entries, limit=3))

        text = buffer.getvalue()
        assert "cityNames" in text
        assert "Name2" in text
        assert "Name3" not in text
        assert "showing 3 of 5" in text

    def test_pool_table_without_caption_when_complete(self) -> None:
        output, buffer = _formatter()

        output.print(output.pool_table("cityNames", [NameEntry("Mirepool", "")], limit=20))

        text = buffer.getvalue()
        assert "showing" not in text
        assert NO_DESCRIPTION in text

    def test_markup_in_names_is_not_interpreted(self) -> None:
        output, buffer = _formatter()

        output.print_names(["[bold]Aran[/bold]"])

        assert "[bold]Aran[/bold]" in buffer.getvalue()

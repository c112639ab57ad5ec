# formatters.py
from typing import Iterable

from .parser import Currency


def _quote(val: str) -> str:
    """Double-quoted string literal; backslashes and quotes escaped."""
    return '"' + val.replace("\\", "\\\\").replace('"', '\\"') + '"'


def fmt_currency_entry(cur: Currency) -> str:
    """
    Render one table entry:
      tuple(
        "USD",
        Currency(
          code: "USD",
          ...
        ),
      ),
    """
    return (
        "  tuple(\n"
        f"    {_quote(cur.code)},\n"
        "    Currency(\n"
        f"      code: {_quote(cur.code)},\n"
        f"      symbol: {_quote(cur.symbol)},\n"
        f"      numeric_code: {cur.numeric_code:d},\n"
        f"      minor_units: {cur.minor_units:d},\n"
        f"      name: {_quote(cur.name)},\n"
        "    ),\n"
        "  ),\n"
    )


def fmt_currency_table(currencies: Iterable[Currency]) -> str:
    return "".join(fmt_currency_entry(cur) for cur in currencies)

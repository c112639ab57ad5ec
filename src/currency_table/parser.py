# parser.py
import logging
import re
from dataclasses import dataclass
from typing import Iterator, List, Optional, Pattern, Tuple

from .errors import CurrencyParseError

logger = logging.getLogger(__name__)


# ----------------------------------------------------------------
# Data model
# ----------------------------------------------------------------
@dataclass(frozen=True)
class Currency:
    code: str
    name: str
    symbol: str
    numeric_code: int    # ISO 4217 number, e.g. 840
    minor_units: int     # decimal places, e.g. 2


# ----------------------------------------------------------------
# Field patterns (each located independently inside a line)
# ----------------------------------------------------------------
_RX_CODE = re.compile(r"^\s*([A-Z]{3}):")
_RX_NAME = re.compile(r'name:\s"([^"]+)"')
_RX_SYMBOL = re.compile(r'symbol:\s"([^"]+)"')
_RX_EXPONENT = re.compile(r"exponent:\s(\d+)")
_RX_NUMBER = re.compile(r"number:\s(\d+)")


def _extract(rx: Pattern[str], field: str, line: str, lineno: Optional[int]) -> str:
    m = rx.search(line)
    if not m:
        raise CurrencyParseError(field, line, lineno)
    return m.group(1)


# ----------------------------------------------------------------
# Parsing
# ----------------------------------------------------------------
def parse_currency_line(line: str, lineno: Optional[int] = None) -> Currency:
    """
    Parse a single currency definition line.
    Example:
        USD: name: "US Dollar", symbol: "$", exponent: 2, number: 840
    Raises CurrencyParseError if any field is missing.
    """
    return Currency(
        code=_extract(_RX_CODE, "code", line, lineno),
        name=_extract(_RX_NAME, "name", line, lineno),
        symbol=_extract(_RX_SYMBOL, "symbol", line, lineno),
        numeric_code=int(_extract(_RX_NUMBER, "number", line, lineno)),
        minor_units=int(_extract(_RX_EXPONENT, "exponent", line, lineno)),
    )


def iter_currency_lines(text: str) -> Iterator[Tuple[int, str]]:
    """Yield (lineno, line) for every non-blank line; line numbers are 1-based."""
    for lineno, line in enumerate(text.split("\n"), start=1):
        if not line.strip():
            logger.debug("Skipping blank line %d", lineno)
            continue
        yield lineno, line


def parse_currencies(text: str) -> List[Currency]:
    """Parse all currency lines in order. The first malformed line aborts."""
    return [parse_currency_line(line, lineno) for lineno, line in iter_currency_lines(text)]


def load_currencies(path: str) -> List[Currency]:
    """
    Read a currency definition file and parse every line.
    Missing file -> OSError from open(), not an empty list.
    """
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    currencies = parse_currencies(text)
    logger.debug("Loaded %d currencies from %s", len(currencies), path)
    return currencies

# generator.py
import logging
import sys
from typing import Optional, TextIO

from .formatters import fmt_currency_table
from .parser import load_currencies

logger = logging.getLogger(__name__)


def generate_table(input_path: str) -> str:
    """
    Build the generated source for every currency in `input_path`.

    The whole file is parsed before anything is rendered, so a malformed
    line raises CurrencyParseError without producing partial output.
    """
    currencies = load_currencies(input_path)
    return fmt_currency_table(currencies)


def write_table(input_path: str, out: Optional[TextIO] = None) -> None:
    """Write the generated table for `input_path` to `out` (stdout by default)."""
    text = generate_table(input_path)
    stream = out if out is not None else sys.stdout
    stream.write(text)
    stream.flush()
    logger.debug("Wrote %d characters", len(text))

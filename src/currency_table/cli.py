# cli.py
import argparse
import io
import logging
import sys

from .errors import CurrencyParseError
from .generator import write_table


def _force_utf8(stream) -> None:
    # generated source is UTF-8 regardless of locale / PYTHONIOENCODING
    if isinstance(stream, io.TextIOWrapper):
        stream.reconfigure(encoding="utf-8")


# ----------------------------------------------------------------
# CLI entry point
# ----------------------------------------------------------------
def main():
    ap = argparse.ArgumentParser(
        description="Generate currency table entries from a currency definition file"
    )
    ap.add_argument(
        "input",
        nargs="?",
        default="currencies.txt",
        help="Path to the currency definition file (default: 'currencies.txt')",
    )
    ap.add_argument("--verbose", action="store_true", help="Log debug details to stderr")
    args = ap.parse_args()

    _force_utf8(sys.stdout)
    _force_utf8(sys.stderr)

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        write_table(args.input)
    except (CurrencyParseError, OSError, UnicodeDecodeError) as e:
        print(f"error: {e}", file=sys.stderr)
        raise SystemExit(1) from e


if __name__ == "__main__":
    main()

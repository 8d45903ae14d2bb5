"""Main entry point for the romanus command-line tool."""
import sys
import argparse
from importlib.metadata import PackageNotFoundError, version
from typing import Optional

from .common import config
from .common.console import ConsolePrinter
from .common.errors import RomanNumeralError
from .common.validators import parse_unsigned_integer
from .integer_to_roman import extract_atoms, integer_to_roman
from .roman_to_integer import decompose_numeral, normalize_numeral, roman_to_integer


def get_version() -> str:
    """Return the installed version of the romanus distribution."""
    try:
        return version("romanus")
    except PackageNotFoundError:
        return "unknown"


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="romanus",
        description="Convert between integers and Roman numerals",
    )
    conversion = parser.add_mutually_exclusive_group(required=True)
    conversion.add_argument('-i', '--integer', metavar='NUMBER', type=parse_unsigned_integer,
                            help='Convert the given integer value to a Roman numeral')
    conversion.add_argument('-r', '--roman', metavar='NUMERAL',
                            help='Convert the given Roman numeral to an integer value')
    parser.add_argument('-d', '--debug', action='store_true', default=config.ROMANUS_DEBUG,
                        help='Debugging output')
    parser.add_argument('-b', '--bare', action='store_true', help='Only output the result')
    parser.add_argument('--no-color', action='store_true', default=config.ROMANUS_NO_COLOR,
                        help='Disable coloured output')
    parser.add_argument('-V', '--version', action='version', version=f"%(prog)s {get_version()}")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Run one conversion and return the process exit status.
    
    Args:
        argv: Command-line arguments, defaults to sys.argv[1:]
        
    Returns:
        0 on success, 1 if the conversion failed. Usage errors exit
        with status 2 from argparse.
    """
    args = build_parser().parse_args(argv)
    printer = ConsolePrinter(bare=args.bare, debug=args.debug, color=not args.no_color)

    try:
        if args.integer is not None:
            result = run_integer_to_roman(args.integer, printer)
        else:
            result = run_roman_to_integer(args.roman, printer)
    except RomanNumeralError as e:
        printer.debug(f"{e.kind.name}: {e.value!r}")
        printer.error(str(e))
        return 1

    printer.result(result)
    return 0


def run_integer_to_roman(value: int, printer: ConsolePrinter) -> str:
    """Convert an integer, printing the extracted atoms when debugging."""
    printer.debug(f"Converting integer {value} to a Roman numeral")
    result = integer_to_roman(value)
    if printer.debug_enabled:
        printer.debug("Atoms: " + " + ".join(f"{atom.symbol}={atom.value}" for atom in extract_atoms(value)))
    return result


def run_roman_to_integer(numeral: str, printer: ConsolePrinter) -> int:
    """Convert a numeral, printing the decomposed digits when debugging."""
    printer.debug(f"Converting Roman numeral {numeral!r} to an integer")
    result = roman_to_integer(numeral)
    if printer.debug_enabled:
        normalized = normalize_numeral(numeral)
        printer.debug(f"Normalized: {normalized}")
        printer.debug("Digits: " + " + ".join(str(digit) for digit in decompose_numeral(normalized)))
    return result


if __name__ == "__main__":
    sys.exit(main())

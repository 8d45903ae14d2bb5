"""Convert Roman numerals into integers.

Decoding runs in three stages:
1. Normalize: trim surrounding whitespace and upper-case the letters
2. Check the format: only the seven numeral letters are accepted
3. Decompose: walk the symbol table once, top to bottom, consuming atoms
   from the front of the numeral

The table pointer never moves backwards and each atom may only be consumed
up to its ``max_group`` times in a row, so out-of-order numerals ("IM"),
over-long groups ("IIII") and repeated single-use atoms ("VV", "XLXL") all
leave unconsumed text behind and are rejected.
"""
import re
import string

from .common.errors import ErrorKind, RomanNumeralError
from .common.symbols import ATOMS


NUMERAL_FORMAT_PATTERN = re.compile(r"[IVXLCDM]+")

# Only ASCII letters are upper-cased; other characters are left for the
# format check to reject
_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def roman_to_integer(numeral: str) -> int:
    """Convert a Roman numeral string to an integer.
    
    Input is case-insensitive and surrounding whitespace is stripped.
    Whitespace inside the numeral is not allowed.
    
    Args:
        numeral: Roman numeral string (e.g., "MCXLII", " cv\\n")
        
    Returns:
        Sum of the atom values. Canonical numerals decode to 1..3999, but
        the table walk also accepts some non-canonical sequences such as
        "CMDCD" (1800), so a result above MAX_VALUE is possible
        
    Raises:
        RomanNumeralError: EMPTY_STRING if nothing is left after trimming,
                           UNPARSABLE if the numeral contains invalid
                           characters or is not a well-formed numeral
        
    Examples:
        >>> roman_to_integer("MCXLII")
        1142
        >>> roman_to_integer(" cv\\n")
        105
        >>> roman_to_integer("mcmxl")
        1940
    """
    normalized = normalize_numeral(numeral)
    check_numeral_format(normalized)
    return sum(decompose_numeral(normalized))


def normalize_numeral(numeral: str) -> str:
    """Strip surrounding whitespace and upper-case ASCII letters."""
    return numeral.strip().translate(_ASCII_UPPER)


def check_numeral_format(numeral: str) -> None:
    """Validate that a normalized numeral only uses numeral letters.
    
    Args:
        numeral: Normalized numeral (see normalize_numeral)
        
    Raises:
        RomanNumeralError: EMPTY_STRING if numeral is empty,
                           UNPARSABLE if it contains any other character
    """
    if not numeral:
        raise RomanNumeralError(ErrorKind.EMPTY_STRING)
    if not NUMERAL_FORMAT_PATTERN.fullmatch(numeral):
        raise RomanNumeralError(ErrorKind.UNPARSABLE, numeral)


def decompose_numeral(numeral: str) -> list[int]:
    """Split a normalized numeral into the values of its atoms.
    
    Args:
        numeral: Normalized numeral that passed check_numeral_format
        
    Returns:
        Atom values in the order they were consumed (e.g., [1000, 100, 40, 1, 1]
        for "MCXLII")
        
    Raises:
        RomanNumeralError: UNPARSABLE if the numeral cannot be fully consumed
    """
    digits = []
    remaining = numeral
    atom_index = 0
    group_size = 0

    while atom_index < len(ATOMS):
        atom = ATOMS[atom_index]
        if remaining.startswith(atom.symbol):
            digits.append(atom.value)
            remaining = remaining[len(atom.symbol):]
            group_size += 1
            if group_size < atom.max_group:
                continue
        atom_index += 1
        group_size = 0

    if remaining:
        raise RomanNumeralError(ErrorKind.UNPARSABLE, numeral)

    return digits

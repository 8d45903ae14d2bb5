"""Convert integers into Roman numerals.

The conversion is a greedy digit extraction over the symbol table: the
largest atom that still fits into the remaining value is emitted until
nothing is left. Because the table contains the subtractive pairs, this
always yields the shortest canonical numeral.
"""
from .common.errors import ErrorKind, RomanNumeralError
from .common.symbols import ATOMS, MAX_VALUE, MIN_VALUE


def integer_to_roman(value: int) -> str:
    """Convert an integer to an upper-case Roman numeral string.
    
    Args:
        value: Integer between MIN_VALUE (1) and MAX_VALUE (3999), inclusive
        
    Returns:
        Roman numeral without separators (e.g., "MCXLII")
        
    Raises:
        TypeError: If value is not an integer
        RomanNumeralError: VALUE_TOO_SMALL if value < MIN_VALUE,
                           VALUE_TOO_LARGE if value > MAX_VALUE
        
    Examples:
        >>> integer_to_roman(1142)
        'MCXLII'
        >>> integer_to_roman(48)
        'XLVIII'
        >>> integer_to_roman(3999)
        'MMMCMXCIX'
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected integer, got {type(value).__name__}")
    if value < MIN_VALUE:
        raise RomanNumeralError(ErrorKind.VALUE_TOO_SMALL, value)
    if value > MAX_VALUE:
        raise RomanNumeralError(ErrorKind.VALUE_TOO_LARGE, value)

    return "".join(atom.symbol for atom in extract_atoms(value))


def extract_atoms(value: int) -> list:
    """Split a positive value into the atoms that make up its numeral.
    
    Args:
        value: Positive integer to decompose
        
    Returns:
        List of Atom objects, highest value first, whose values sum to value
    """
    result = []
    remainder = value

    while remainder > 0:
        # ATOMS is sorted descending, so the first fit is the largest
        atom = next(atom for atom in ATOMS if atom.value <= remainder)
        result.append(atom)
        remainder -= atom.value

    return result

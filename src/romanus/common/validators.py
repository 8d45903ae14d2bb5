"""Validation utilities for command-line arguments."""
import argparse

from .config import MAX_INTEGER_ARGUMENT


def parse_unsigned_integer(text: str) -> int:
    """Parse an --integer argument as an unsigned 32-bit integer.
    
    Range checks against the Roman numeral bounds are left to the encoder,
    so "0" and "4000" are accepted here and reported as conversion errors.
    
    Args:
        text: Raw argument text (e.g., "1142")
        
    Returns:
        Parsed integer between 0 and MAX_INTEGER_ARGUMENT
        
    Raises:
        argparse.ArgumentTypeError: If text is not made of decimal digits
                                    or does not fit in 32 bits
        
    Example:
        >>> parse_unsigned_integer(" 48 ")
        48
    """
    text = text.strip()
    if not text.isascii() or not text.isdigit():
        raise argparse.ArgumentTypeError(f"'{text}' is not an unsigned integer")

    value = int(text)
    if value > MAX_INTEGER_ARGUMENT:
        raise argparse.ArgumentTypeError(f"{value} does not fit in 32 bits")
    return value

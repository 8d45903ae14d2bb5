"""Roman numeral symbol table shared by the encoder and the decoder.

The table lists every atom (a symbol together with its value) in strictly
descending order of value, including the six subtractive pairs (CM, CD, XC,
XL, IX, IV). Both conversion directions walk this table from top to bottom.
"""
from pydantic import BaseModel, ConfigDict, Field


# Supported range of values
MIN_VALUE = 1
MAX_VALUE = 3999


class Atom(BaseModel):
    """One entry of the Roman numeral symbol table.
    
    Attributes:
        value: Integer value of the symbol (e.g., 900 for "CM")
        symbol: Upper-case symbol text, one or two characters
        max_group: How many times the symbol may appear back to back
                   (3 for M, C, X and I, 1 for everything else)
    """
    model_config = ConfigDict(frozen=True)

    value: int = Field(gt=0)
    symbol: str = Field(min_length=1, max_length=2, pattern=r"^[IVXLCDM]+$")
    max_group: int = Field(default=1, ge=1, le=3)

    @property
    def repeatable(self) -> bool:
        """Whether the symbol may appear more than once in a row."""
        return self.max_group > 1


ATOMS: tuple[Atom, ...] = (
    Atom(value=1000, symbol="M", max_group=3),
    Atom(value=900, symbol="CM"),
    Atom(value=500, symbol="D"),
    Atom(value=400, symbol="CD"),
    Atom(value=100, symbol="C", max_group=3),
    Atom(value=90, symbol="XC"),
    Atom(value=50, symbol="L"),
    Atom(value=40, symbol="XL"),
    Atom(value=10, symbol="X", max_group=3),
    Atom(value=9, symbol="IX"),
    Atom(value=5, symbol="V"),
    Atom(value=4, symbol="IV"),
    Atom(value=1, symbol="I", max_group=3),
)

from datetime import MAXYEAR, MINYEAR
from enum import Enum


class Field(Enum):
    """Calendar fields addressable in a literal, in evaluation order.

    The value of each member is the single-letter symbol used in literals.
    """
    YEAR = "y"
    MONTH = "M"
    DAY = "d"
    HOUR = "H"
    MINUTE = "m"
    SECOND = "s"
    MILLISECOND = "f"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def unit(self) -> str:
        """Plural name of the field, e.g. ``"days"``."""
        return _UNITS[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> "Field":
        return _BY_SYMBOL[symbol]

    @classmethod
    def is_symbol(cls, symbol: str) -> bool:
        return symbol in _BY_SYMBOL


_UNITS = {
    Field.YEAR: "years",
    Field.MONTH: "months",
    Field.DAY: "days",
    Field.HOUR: "hours",
    Field.MINUTE: "minutes",
    Field.SECOND: "seconds",
    Field.MILLISECOND: "milliseconds",
}

_BY_SYMBOL = {field.value: field for field in Field}

# Static domains; DAY depends on the current year and month and is resolved
# by utils.days_in_month.
FIELD_BOUNDS = {
    Field.YEAR: (MINYEAR, MAXYEAR),
    Field.MONTH: (1, 12),
    Field.HOUR: (0, 23),
    Field.MINUTE: (0, 59),
    Field.SECOND: (0, 59),
    Field.MILLISECOND: (0, 999),
}

"""
Expression model for relative date-time literals.

A :class:`RelativeDateTime` holds, for each calendar field, either an absolute
value to set ("8H" sets the hour to 8) or a signed delta to add ("-1d" moves
one day back). Fields that a literal does not mention are relative deltas of
zero and leave the reference untouched.

Example::

    >>> from datetime import datetime
    >>> expr = RelativeDateTime.parse("-1d @ 8H 30m 0s")
    >>> str(expr)
    '-1d 8H 30m 0s'
    >>> expr.evaluate(datetime(2023, 6, 15, 12, 30, 30))
    datetime.datetime(2023, 6, 14, 8, 30)
"""

from dataclasses import dataclass, field as dataclass_field
from datetime import datetime
from typing import Optional

from relativedatetime.conf import apply_settings
from relativedatetime.fields import Field
from relativedatetime.integers import int_to_str


@dataclass(frozen=True)
class FieldValue:
    """Value of a single field; a signed delta unless ``fixed`` is set."""
    value: int = 0
    fixed: bool = False

    @property
    def is_noop(self) -> bool:
        return not self.fixed and self.value == 0

    def render(self, symbol: str) -> str:
        if self.fixed or self.value < 0:
            return f"{int_to_str(self.value)}{symbol}"
        return f"+{int_to_str(self.value)}{symbol}"


@dataclass
class RelativeDateTime:
    """A point in time expressed relative to (or partly fixed against) a reference."""
    year: FieldValue = dataclass_field(default_factory=FieldValue)
    month: FieldValue = dataclass_field(default_factory=FieldValue)
    day: FieldValue = dataclass_field(default_factory=FieldValue)
    hour: FieldValue = dataclass_field(default_factory=FieldValue)
    minute: FieldValue = dataclass_field(default_factory=FieldValue)
    second: FieldValue = dataclass_field(default_factory=FieldValue)
    millisecond: FieldValue = dataclass_field(default_factory=FieldValue)

    def __getitem__(self, field: Field) -> FieldValue:
        return getattr(self, field.name.lower())

    def __setitem__(self, field: Field, field_value: FieldValue) -> None:
        setattr(self, field.name.lower(), field_value)

    def set(self, field: Field, value: int, fixed: bool = False) -> None:
        self[field] = FieldValue(value=value, fixed=fixed)

    @classmethod
    def parse(cls, literal: str) -> "RelativeDateTime":
        from relativedatetime.parser import relativedatetime_parser

        return relativedatetime_parser.parse(literal)

    # Explicit counterpart of an implicit string conversion.
    from_string = parse

    @classmethod
    def try_parse(cls, literal: str) -> Optional["RelativeDateTime"]:
        from relativedatetime.parser import relativedatetime_parser

        return relativedatetime_parser.try_parse(literal)

    @apply_settings
    def evaluate(self, reference: Optional[datetime] = None, settings=None) -> datetime:
        """
        Evaluate against ``reference``, or against the ambient clock when omitted.

        :raises FieldOutOfRangeError: a fixed value is outside its field's domain
            at the point it is applied, or a delta leaves the supported range.
        """
        from relativedatetime.evaluator import evaluator

        return evaluator.evaluate(self, reference, settings=settings)

    def __str__(self) -> str:
        return " ".join(
            self[field].render(field.symbol)
            for field in Field
            if not self[field].is_noop
        )

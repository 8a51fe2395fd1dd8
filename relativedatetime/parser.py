"""
Scanner for relative date-time literals such as ``"-1d @ 8H 30m 0s"``.

A literal is a sequence of tokens ``[sign] digits letter``. A token without a
sign sets its field to an absolute value, a signed token adds a delta. Any
other character between tokens is skipped one at a time.

Field symbols are case sensitive:

    ====  ===========
    y     year
    M     month
    d     day
    H     hour
    m     minute
    s     second
    f     millisecond
    ====  ===========
"""

import logging
from typing import Optional

import regex as re

from relativedatetime.errors import InvalidLiteralError, UnsupportedFieldSymbolError
from relativedatetime.expression import RelativeDateTime
from relativedatetime.fields import Field
from relativedatetime.integers import digits_to_int

logger = logging.getLogger(__name__)

# Always matches, possibly empty, so the scanner can step over filler.
TOKEN_PATTERN = re.compile(r"(?P<sign>[+-])?(?P<digits>[0-9]*)(?P<symbol>\p{L})?")


class RelativeDateTimeParser:
    """Parses literals like "+1y", "-1d 8H" and "2023y 1M 1d" into a RelativeDateTime"""

    def parse(self, literal):
        if literal is None or not isinstance(literal, str) or not literal.strip():
            raise InvalidLiteralError(
                "The provided literal is None, empty or white space: %r" % (literal,)
            )

        expression = RelativeDateTime()
        position = 0
        length = len(literal)

        while position < length:
            match = TOKEN_PATTERN.match(literal, position)
            sign, digits, symbol = match.group("sign", "digits", "symbol")

            if digits and symbol:
                self._apply_token(expression, literal, sign, digits_to_int(digits), symbol)
            elif digits:
                logger.debug(f"Discarding value {digits!r} without a field symbol in {literal!r}")

            # A symbol is consumed by the match itself; otherwise step over the
            # character that ended the token.
            position = match.end() if symbol else match.end() + 1

        return expression

    def try_parse(self, literal) -> Optional[RelativeDateTime]:
        try:
            return self.parse(literal)
        except (InvalidLiteralError, UnsupportedFieldSymbolError) as e:
            logger.debug(f"Could not parse {literal!r}: {e}")
            return None

    def _apply_token(self, expression, literal, sign, value, symbol):
        if not Field.is_symbol(symbol):
            raise UnsupportedFieldSymbolError(symbol, literal)

        if sign == "-":
            value = -value

        expression.set(Field.from_symbol(symbol), value, fixed=sign is None)


relativedatetime_parser = RelativeDateTimeParser()

__version__ = "1.0.0"

from .conf import apply_settings, Settings, SettingValidationError
from .errors import (
    RelativeDateTimeError,
    InvalidLiteralError,
    UnsupportedFieldSymbolError,
    FieldOutOfRangeError,
)
from .fields import Field
from .expression import RelativeDateTime, FieldValue
from .parser import RelativeDateTimeParser, relativedatetime_parser
from .evaluator import RelativeDateTimeEvaluator, evaluator


def parse(literal):
    """Parse a relative date-time literal and return a :class:`RelativeDateTime`.

    The literal is a sequence of tokens made of an optional sign, digits and a
    field symbol (``y``, ``M``, ``d``, ``H``, ``m``, ``s`` or ``f``). Unsigned
    tokens set a field to an absolute value; signed tokens add a delta.

    :param literal:
        A string such as ``"-1d @ 8H 30m 0s"``.
    :type literal: str

    :return: The parsed expression. Fields the literal does not mention are
        left as zero deltas.
    :rtype: :class:`RelativeDateTime`

    :raises:
        ``InvalidLiteralError``: the literal is None, empty or white space,
        ``UnsupportedFieldSymbolError``: a token ends with an unknown letter.

    Example usage::

        >>> import relativedatetime
        >>> expr = relativedatetime.parse("+1y")
        >>> expr.year
        FieldValue(value=1, fixed=False)
    """
    return relativedatetime_parser.parse(literal)


def try_parse(literal):
    """Like :func:`parse`, but return None instead of raising on a bad literal."""
    return relativedatetime_parser.try_parse(literal)


@apply_settings
def evaluate(expression, reference=None, settings=None):
    """Evaluate an expression (or a literal) against a reference datetime.

    :param expression:
        A :class:`RelativeDateTime`, or a literal which is parsed first.
    :type expression: :class:`RelativeDateTime` or str

    :param reference:
        The datetime the expression is applied to. Defaults to
        ``RELATIVE_BASE`` from settings, or the current time.
    :type reference: :class:`datetime.datetime`

    :param settings:
        Configure customized behavior using settings defined in :mod:`relativedatetime.conf.Settings`.
    :type settings: dict

    :return: The resulting datetime.
    :rtype: :class:`datetime.datetime`

    :raises:
        ``FieldOutOfRangeError``: a fixed value is outside the valid range of
        its field, ``SettingValidationError``: a provided setting is not valid,
        ``TypeError``: expression is neither a RelativeDateTime nor a string.
    """
    if isinstance(expression, str):
        expression = parse(expression)
    return evaluator.evaluate(expression, reference, settings=settings)

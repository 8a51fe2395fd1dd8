from relativedatetime.integers import int_to_str


class RelativeDateTimeError(ValueError):
    """Base class for errors raised while parsing or evaluating a literal."""


class InvalidLiteralError(RelativeDateTimeError):
    """The literal is missing, empty or made of white space only."""


class UnsupportedFieldSymbolError(RelativeDateTimeError):
    def __init__(self, symbol, literal=None):
        self.symbol = symbol
        self.literal = literal
        message = "Field symbol %r is not supported" % symbol
        if literal is not None:
            message += " (in literal %r)" % literal
        super().__init__(message)


class FieldOutOfRangeError(RelativeDateTimeError):
    """A field value falls outside the domain it may take on a date.

    ``minimum`` and ``maximum`` are left as ``None`` when the failure comes from
    a relative shift leaving the representable calendar rather than from a
    fixed value.
    """

    def __init__(self, field, value, minimum=None, maximum=None):
        self.field = field
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        name = field.name.lower()
        if minimum is None or maximum is None:
            message = "Shifting by %s %s moves the date out of the supported range" % (
                int_to_str(value),
                field.unit,
            )
        else:
            message = "%s value %s is not within the valid range (%d - %d)" % (
                name.capitalize(),
                int_to_str(value),
                minimum,
                maximum,
            )
        super().__init__(message)

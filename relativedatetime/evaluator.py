import logging

from relativedatetime.conf import apply_settings
from relativedatetime.expression import RelativeDateTime
from relativedatetime.fields import Field
from relativedatetime.integers import int_to_str
from relativedatetime.utils import change_field, now, shift_field

logger = logging.getLogger(__name__)


class RelativeDateTimeEvaluator:
    """Applies a RelativeDateTime to a reference datetime, one field at a time.

    Fields are applied from year down to millisecond, each step working on the
    result of the previous one: a fixed day is validated against the month and
    year already set by the earlier steps.
    """

    @apply_settings
    def evaluate(self, expression, reference=None, settings=None):
        if not isinstance(expression, RelativeDateTime):
            raise TypeError(
                "expression must be a RelativeDateTime (%r given)" % type(expression)
            )

        if reference is None:
            reference = now(settings)

        date_obj = reference
        for field in Field:
            date_obj = self._apply_field(date_obj, field, expression[field])

        return date_obj

    def _apply_field(self, date_obj, field, field_value):
        if field_value.fixed:
            logger.debug(
                f"Setting {field.name.lower()} of {date_obj!r} to {int_to_str(field_value.value)}"
            )
            return change_field(date_obj, field, field_value.value)

        if field_value.value:
            logger.debug(f"Adding {int_to_str(field_value.value)} {field.unit} to {date_obj!r}")
            return shift_field(date_obj, field, field_value.value)

        return date_obj


evaluator = RelativeDateTimeEvaluator()

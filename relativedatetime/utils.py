import calendar
import logging
from datetime import datetime, time, timedelta

from dateutil.relativedelta import MO, relativedelta, weekdays
from tzlocal import get_localzone

from relativedatetime.errors import FieldOutOfRangeError
from relativedatetime.fields import FIELD_BOUNDS, Field
from relativedatetime.integers import int_to_str

logger = logging.getLogger(__name__)


def days_in_month(year, month):
    return calendar.monthrange(year, month)[1]


def get_field(date_obj, field):
    if field is Field.MILLISECOND:
        return date_obj.microsecond // 1000
    return getattr(date_obj, field.name.lower())


def field_bounds(date_obj, field):
    """Return the inclusive ``(minimum, maximum)`` a fixed value may take on ``date_obj``."""
    if field is Field.DAY:
        return 1, days_in_month(date_obj.year, date_obj.month)
    return FIELD_BOUNDS[field]


def _delta(field, amount):
    if field is Field.MILLISECOND:
        return relativedelta(microseconds=amount * 1000)
    return relativedelta(**{field.unit: amount})


def shift_field(date_obj, field, amount):
    """Add ``amount`` units of ``field`` to ``date_obj``.

    Calendar arithmetic follows ``relativedelta``: adding months or years
    clamps the day to the end of the target month.
    """
    try:
        return date_obj + _delta(field, amount)
    except (OverflowError, ValueError) as e:
        logger.debug(f"Shifting {date_obj!r} by {int_to_str(amount)} {field.unit} failed: {e}")
        raise FieldOutOfRangeError(field, amount) from e


def change_field(date_obj, field, value):
    minimum, maximum = field_bounds(date_obj, field)
    if not minimum <= value <= maximum:
        raise FieldOutOfRangeError(field, value, minimum, maximum)
    return shift_field(date_obj, field, value - get_field(date_obj, field))


def add_years(date_obj, years):
    return shift_field(date_obj, Field.YEAR, years)


def add_months(date_obj, months):
    return shift_field(date_obj, Field.MONTH, months)


def add_days(date_obj, days):
    return shift_field(date_obj, Field.DAY, days)


def add_hours(date_obj, hours):
    return shift_field(date_obj, Field.HOUR, hours)


def add_minutes(date_obj, minutes):
    return shift_field(date_obj, Field.MINUTE, minutes)


def add_seconds(date_obj, seconds):
    return shift_field(date_obj, Field.SECOND, seconds)


def add_milliseconds(date_obj, milliseconds):
    return shift_field(date_obj, Field.MILLISECOND, milliseconds)


def change_year(date_obj, year):
    return change_field(date_obj, Field.YEAR, year)


def change_month(date_obj, month):
    return change_field(date_obj, Field.MONTH, month)


def change_day(date_obj, day):
    return change_field(date_obj, Field.DAY, day)


def change_hour(date_obj, hour):
    return change_field(date_obj, Field.HOUR, hour)


def change_minute(date_obj, minute):
    return change_field(date_obj, Field.MINUTE, minute)


def change_second(date_obj, second):
    return change_field(date_obj, Field.SECOND, second)


def change_millisecond(date_obj, millisecond):
    return change_field(date_obj, Field.MILLISECOND, millisecond)


def add_weeks(date_obj, weeks):
    return shift_field(date_obj, Field.DAY, weeks * 7)


_START_OF_DAY = relativedelta(hour=0, minute=0, second=0, microsecond=0)
_END_OF_DAY = relativedelta(hour=23, minute=59, second=59, microsecond=999999)
_ONE_DAY = timedelta(days=1)


def at(date_obj, hour, minute=0, second=0, millisecond=0):
    """Return ``date_obj`` on the same day at the given time of day."""
    for field, value in (
        (Field.HOUR, hour),
        (Field.MINUTE, minute),
        (Field.SECOND, second),
        (Field.MILLISECOND, millisecond),
    ):
        minimum, maximum = FIELD_BOUNDS[field]
        if not minimum <= value <= maximum:
            raise FieldOutOfRangeError(field, value, minimum, maximum)

    return date_obj + relativedelta(
        hour=hour, minute=minute, second=second, microsecond=millisecond * 1000
    )


def at_time(date_obj, time_of_day):
    """Return ``date_obj`` on the same day at ``time_of_day``.

    ``time_of_day`` is a :class:`datetime.time` or a :class:`datetime.timedelta`
    since midnight shorter than a day.
    """
    if isinstance(time_of_day, time):
        return date_obj + relativedelta(
            hour=time_of_day.hour,
            minute=time_of_day.minute,
            second=time_of_day.second,
            microsecond=time_of_day.microsecond,
        )

    if not timedelta(0) <= time_of_day < _ONE_DAY:
        raise ValueError(
            "Time of day must be within one day of midnight, got %r" % time_of_day
        )
    return date_obj + _START_OF_DAY + time_of_day


def at_start_of_day(date_obj):
    return date_obj + _START_OF_DAY


at_midnight = at_start_of_day


def at_noon(date_obj):
    return date_obj + relativedelta(hour=12, minute=0, second=0, microsecond=0)


def at_end_of_day(date_obj):
    return date_obj + _END_OF_DAY


def _as_weekday(first_day_of_week):
    if isinstance(first_day_of_week, int):
        return weekdays[first_day_of_week]
    return weekdays[first_day_of_week.weekday]


def on_start_of_week(date_obj, first_day_of_week=MO):
    """Midnight of the most recent ``first_day_of_week``, today included.

    ``first_day_of_week`` is a ``dateutil.relativedelta`` weekday (``MO`` ...
    ``SU``) or its index, Monday being 0.
    """
    first_day = _as_weekday(first_day_of_week)
    return date_obj + relativedelta(weekday=first_day(-1)) + _START_OF_DAY


def on_end_of_week(date_obj, first_day_of_week=MO):
    return on_start_of_week(date_obj, first_day_of_week) + relativedelta(days=6) + _END_OF_DAY


def on_start_of_month(date_obj):
    return date_obj + relativedelta(day=1) + _START_OF_DAY


def on_end_of_month(date_obj):
    # day=31 is clamped to the last day of the month
    return date_obj + relativedelta(day=31) + _END_OF_DAY


def get_current_quarter(date_obj):
    return (date_obj.month - 1) // 3 + 1


def on_start_of_quarter(date_obj):
    first_month = (get_current_quarter(date_obj) - 1) * 3 + 1
    return date_obj + relativedelta(month=first_month, day=1) + _START_OF_DAY


def on_end_of_quarter(date_obj):
    last_month = get_current_quarter(date_obj) * 3
    return date_obj + relativedelta(month=last_month, day=31) + _END_OF_DAY


def on_start_of_year(date_obj):
    return date_obj + relativedelta(month=1, day=1) + _START_OF_DAY


def on_end_of_year(date_obj):
    return date_obj + relativedelta(month=12, day=31) + _END_OF_DAY


def is_leap_year(date_obj):
    return calendar.isleap(date_obj.year)


def is_weekday(date_obj):
    return date_obj.weekday() < 5


def is_weekend(date_obj):
    return date_obj.weekday() >= 5


def _comparable(date_obj, reference):
    """Pair ``date_obj`` with ``reference`` in a form the two can be compared in.

    A ``datetime`` reference is compared as is; a ``time`` or a ``timedelta``
    since midnight is compared against the time of day of ``date_obj``.
    """
    if isinstance(reference, datetime):
        return date_obj, reference

    time_of_day = date_obj - (date_obj + _START_OF_DAY)
    if isinstance(reference, time):
        reference = timedelta(
            hours=reference.hour,
            minutes=reference.minute,
            seconds=reference.second,
            microseconds=reference.microsecond,
        )
    if not isinstance(reference, timedelta):
        raise TypeError(
            "reference must be a datetime, time or timedelta (%r given)" % type(reference)
        )
    return time_of_day, reference


def is_before(date_obj, reference):
    value, reference = _comparable(date_obj, reference)
    return value < reference


def is_after(date_obj, reference):
    value, reference = _comparable(date_obj, reference)
    return value > reference


def is_on_or_before(date_obj, reference):
    value, reference = _comparable(date_obj, reference)
    return value <= reference


def is_on_or_after(date_obj, reference):
    value, reference = _comparable(date_obj, reference)
    return value >= reference


# Time-of-day spelling of the same comparisons.
is_at_or_before = is_on_or_before
is_at_or_after = is_on_or_after


def is_between(date_obj, start, end, inclusive=True):
    value, start = _comparable(date_obj, start)
    _, end = _comparable(date_obj, end)
    if inclusive:
        return start <= value <= end
    return start < value < end


def now(settings=None):
    """Return the reference used when the caller does not supply one."""
    if settings is not None and settings.RELATIVE_BASE:
        return settings.RELATIVE_BASE
    if settings is not None and settings.RETURN_AS_TIMEZONE_AWARE:
        return datetime.now(get_localzone())
    return datetime.now()

"""Calendar arithmetic on UTC datetimes for each time unit."""

import calendar
from datetime import UTC, datetime, timedelta

from .data_models import TimeUnit

EARLIEST_MOMENT = datetime.min.replace(tzinfo=UTC)
LATEST_MOMENT = datetime.max.replace(tzinfo=UTC)
EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

FIXED_UNIT_LENGTHS = {
    TimeUnit.SECOND: timedelta(seconds=1),
    TimeUnit.MINUTE: timedelta(minutes=1),
    TimeUnit.HOUR: timedelta(hours=1),
    TimeUnit.DAY: timedelta(days=1),
}


def to_utc(moment: datetime) -> datetime:
    """Convert to an aware UTC datetime, reading naive values as UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)


def floor_time(moment: datetime, unit: TimeUnit) -> datetime:
    """Truncate a moment to the start of its unit."""
    if unit == TimeUnit.SECOND:
        return moment.replace(microsecond=0)
    elif unit == TimeUnit.MINUTE:
        return moment.replace(second=0, microsecond=0)
    elif unit == TimeUnit.HOUR:
        return moment.replace(minute=0, second=0, microsecond=0)
    elif unit == TimeUnit.DAY:
        return moment.replace(hour=0, minute=0, second=0, microsecond=0)
    elif unit == TimeUnit.MONTH:
        return moment.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
    elif unit == TimeUnit.YEAR:
        return moment.replace(
            month=1, day=1, hour=0, minute=0, second=0, microsecond=0
        )
    msg = f"Unsupported time unit: {unit}"
    raise ValueError(msg)


def offset_time(moment: datetime, unit: TimeUnit, amount: int) -> datetime:
    """Advance a moment by a number of units.

    Month and year offsets keep the day of month, clamped to the length of
    the target month. Results beyond the representable range saturate at
    `EARLIEST_MOMENT` or `LATEST_MOMENT`.
    """
    fixed_length = FIXED_UNIT_LENGTHS.get(unit)
    if fixed_length is not None:
        try:
            return moment + fixed_length * amount
        except OverflowError:
            return LATEST_MOMENT if amount > 0 else EARLIEST_MOMENT

    if unit == TimeUnit.MONTH:
        months = amount
    elif unit == TimeUnit.YEAR:
        months = amount * 12
    else:
        msg = f"Unsupported time unit: {unit}"
        raise ValueError(msg)

    total_months = moment.year * 12 + (moment.month - 1) + months
    year, month_index = divmod(total_months, 12)
    if year > LATEST_MOMENT.year:
        return LATEST_MOMENT
    if year < EARLIEST_MOMENT.year:
        return EARLIEST_MOMENT
    month = month_index + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def unit_number(moment: datetime, unit: TimeUnit) -> int:
    """Position of the moment inside its parent unit, used for step alignment.

    Seconds, minutes and hours count from zero within their parent. Days and
    months also count from zero, so that a step of 3 months lands on January,
    April, July and October. Years use the calendar year itself.
    """
    if unit == TimeUnit.SECOND:
        return moment.second
    elif unit == TimeUnit.MINUTE:
        return moment.minute
    elif unit == TimeUnit.HOUR:
        return moment.hour
    elif unit == TimeUnit.DAY:
        return moment.day - 1
    elif unit == TimeUnit.MONTH:
        return moment.month - 1
    elif unit == TimeUnit.YEAR:
        return moment.year
    msg = f"Unsupported time unit: {unit}"
    raise ValueError(msg)


def ceil_time(moment: datetime, unit: TimeUnit) -> datetime:
    """Round a moment up to the next unit boundary, if not already on one."""
    floored = floor_time(moment, unit)
    if floored < moment:
        return offset_time(floored, unit, 1)
    return floored


def enumerate_ticks(
    unit: TimeUnit,
    step: int,
    start: datetime,
    end: datetime,
) -> list[datetime]:
    """List unit boundaries inside `[start, end]` aligned to the step."""
    if step <= 0:
        msg = "Tick step must be positive"
        raise ValueError(msg)

    ticks: list[datetime] = []
    moment = ceil_time(start, unit)
    while moment <= end:
        if unit_number(moment, unit) % step == 0:
            ticks.append(moment)
        following = offset_time(moment, unit, 1)
        if following <= moment or following == LATEST_MOMENT:
            # no further boundary is representable
            break
        moment = following
    return ticks

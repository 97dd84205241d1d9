"""Work week and calendar period calculations.

The work week runs Thursday through Sunday. Its start is found the same way
a "start of week" with a custom anchor day is computed: step back from the
reference date to the most recent Thursday (or stay on it). Its end is three
days later, so Monday to Wednesday never fall inside any window.
"""

from datetime import date, timedelta

from dateutil.relativedelta import relativedelta

# Weekday indices run Sunday=0 .. Saturday=6
WEEK_ANCHOR_DAY = 4  # Thursday
WORK_WEEK_LENGTH = 4  # Thursday, Friday, Saturday, Sunday

MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def weekday_index(day: date) -> int:
    """Return the weekday with Sunday as 0 and Saturday as 6."""
    return day.isoweekday() % 7


def week_window(reference_date: date) -> tuple[date, date]:
    """Get the (start, end) work week window for a reference date.

    Args:
        reference_date: Any calendar date

    Returns:
        Tuple of the anchoring Thursday and the Sunday three days later,
        both inclusive
    """
    offset = (weekday_index(reference_date) - WEEK_ANCHOR_DAY + 7) % 7
    start = reference_date - timedelta(days=offset)
    end = start + timedelta(days=WORK_WEEK_LENGTH - 1)
    return start, end


def weeks_spanning(min_date: date, max_date: date) -> list[date]:
    """List every week start from the window of min_date up to max_date.

    Args:
        min_date: Earliest date of the range
        max_date: Latest date of the range (inclusive)

    Returns:
        Ascending list of Thursdays, seven days apart
    """
    week_starts = []
    current, _ = week_window(min_date)
    while current <= max_date:
        week_starts.append(current)
        current += timedelta(days=7)
    return week_starts


def months_of_year(year: int) -> list[tuple[date, date]]:
    """Get (first day, last day) pairs for January through December."""
    months = []
    for month in range(1, 13):
        month_start = date(year, month, 1)
        month_end = month_start + relativedelta(months=1) - timedelta(days=1)
        months.append((month_start, month_end))
    return months


def month_label(month: date) -> str:
    """Abbreviated month name, independent of the process locale."""
    return MONTH_ABBREVIATIONS[month.month - 1]


def format_week_period(start: date, end: date) -> str:
    """Human-readable window label, e.g. '2 May - 5 May'."""
    return (
        f"{start.day} {month_label(start)} - {end.day} {month_label(end)}"
    )


def format_week_label(week_start: date) -> str:
    """Short chart label for a week, e.g. '02/05'."""
    return week_start.strftime("%d/%m")

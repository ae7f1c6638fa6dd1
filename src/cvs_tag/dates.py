"""Locale-independent date formatting with Java-style date patterns.

Tag templates and the rtag `-D` argument both describe dates with the pattern
letters of java.text.SimpleDateFormat (e.g. "yyyy_MM_dd"). This module renders
those patterns with fixed US English names so that output never depends on the
process locale.
"""

from datetime import datetime

_MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

# Pattern letters understood by format_java_date
SUPPORTED_PATTERN_LETTERS = frozenset("yMdHhmsSaEz")


class DatePatternError(ValueError):
    """Raised when a date pattern contains unsupported letters or quoting."""


def _render_field(letter: str, count: int, when: datetime) -> str:
    if letter == "y":
        if count == 2:
            return f"{when.year % 100:02d}"
        return str(when.year).zfill(count)
    if letter == "M":
        if count >= 4:
            return _MONTH_NAMES[when.month - 1]
        if count == 3:
            return _MONTH_NAMES[when.month - 1][:3]
        return str(when.month).zfill(count)
    if letter == "d":
        return str(when.day).zfill(count)
    if letter == "H":
        return str(when.hour).zfill(count)
    if letter == "h":
        hour = when.hour % 12
        return str(12 if hour == 0 else hour).zfill(count)
    if letter == "m":
        return str(when.minute).zfill(count)
    if letter == "s":
        return str(when.second).zfill(count)
    if letter == "S":
        return str(when.microsecond // 1000).zfill(count)
    if letter == "a":
        return "AM" if when.hour < 12 else "PM"
    if letter == "E":
        name = _DAY_NAMES[when.weekday()]
        return name if count >= 4 else name[:3]
    if letter == "z":
        return when.tzname() or ""
    raise DatePatternError(f"unsupported pattern letter '{letter}'")


def format_java_date(pattern: str, when: datetime) -> str:
    """Format `when` using a SimpleDateFormat-style pattern.

    Letters are pattern fields, runs of the same letter set the width, text
    between single quotes is copied verbatim ('' is a literal quote) and every
    other character is copied as is.

    Args:
        pattern: Pattern such as "yyyy_MM_dd" or "EEEE, MMMM d, yyyy"
        when: Datetime to render

    Returns:
        The formatted date string

    Raises:
        DatePatternError: On unknown pattern letters or an unterminated quote

    Examples:
        >>> format_java_date("yyyy_MM_dd", datetime(2024, 3, 5))
        '2024_03_05'
    """
    out: list[str] = []
    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == "'":
            if pattern.startswith("''", i):
                out.append("'")
                i += 2
                continue
            end = pattern.find("'", i + 1)
            if end == -1:
                raise DatePatternError(f"unterminated quote in date pattern '{pattern}'")
            out.append(pattern[i + 1 : end])
            i = end + 1
            continue
        if ch.isascii() and ch.isalpha():
            if ch not in SUPPORTED_PATTERN_LETTERS:
                raise DatePatternError(f"unsupported pattern letter '{ch}' in '{pattern}'")
            run_end = i
            while run_end < n and pattern[run_end] == ch:
                run_end += 1
            out.append(_render_field(ch, run_end - i, when))
            i = run_end
            continue
        out.append(ch)
        i += 1
    return "".join(out)

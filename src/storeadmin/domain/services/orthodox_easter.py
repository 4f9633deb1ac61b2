"""Orthodox Easter date (Meeus Julian computus)."""

from datetime import date, timedelta


def julian_to_gregorian_offset(year: int) -> int:
    """Days to add to a Julian calendar date to get the Gregorian date."""
    if year >= 2100:
        return 14
    if year >= 1900:
        return 13
    if year >= 1800:
        return 12
    if year >= 1700:
        return 11
    if year >= 1582:
        return 10
    return 0


def orthodox_easter(year: int) -> date:
    """Orthodox Easter Sunday for year, in the Gregorian calendar."""
    a = year % 4
    b = year % 7
    c = year % 19
    d = (19 * c + 15) % 30
    e = (2 * a + 4 * b - d + 34) % 7
    month = (d + e + 114) // 31
    day = ((d + e + 114) % 31) + 1
    return date(year, month, day) + timedelta(days=julian_to_gregorian_offset(year))

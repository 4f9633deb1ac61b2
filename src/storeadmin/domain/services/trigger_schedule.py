"""Calendar matching for notification template triggers."""

import calendar
from datetime import date

from storeadmin.domain.services.orthodox_easter import orthodox_easter
from storeadmin.domain.value_objects import TemplateTrigger


def birthday_matches(birth_date: date | None, event_date: date) -> bool:
    """Same month and day; Feb 29 birthdays fall on Feb 28 in non-leap years."""
    if birth_date is None:
        return False
    if (birth_date.month, birth_date.day) == (event_date.month, event_date.day):
        return True
    return (
        not calendar.isleap(event_date.year)
        and (event_date.month, event_date.day) == (2, 28)
        and (birth_date.month, birth_date.day) == (2, 29)
    )


def matches_trigger(
    trigger: TemplateTrigger | str,
    event_date: date,
    custom_month: int | None = None,
    custom_day: int | None = None,
) -> bool:
    """Whether a date-wide trigger fires on event_date.

    BIRTHDAY is per user (see birthday_matches) and never matches here.
    custom_month is 1-indexed.
    """
    try:
        trigger = TemplateTrigger(trigger)
    except ValueError:
        return False

    if trigger is TemplateTrigger.CHRISTMAS:
        return (event_date.month, event_date.day) == (12, 25)
    if trigger is TemplateTrigger.NEW_YEAR:
        return (event_date.month, event_date.day) == (1, 1)
    if trigger is TemplateTrigger.ORTHODOX_EASTER:
        return orthodox_easter(event_date.year) == event_date
    if trigger is TemplateTrigger.CUSTOM_DATE:
        if not custom_month or not custom_day:
            return False
        return (event_date.month, event_date.day) == (custom_month, custom_day)
    return False

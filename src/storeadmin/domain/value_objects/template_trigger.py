"""Calendar triggers for notification templates."""

from enum import StrEnum


class TemplateTrigger(StrEnum):
    """When a notification template fires."""

    BIRTHDAY = "birthday"
    CHRISTMAS = "christmas"
    NEW_YEAR = "new_year"
    ORTHODOX_EASTER = "orthodox_easter"
    CUSTOM_DATE = "custom_date"

    @property
    def notification_type(self) -> str:
        return _NOTIFICATION_TYPES[self]

    @property
    def coupon_prefix(self) -> str:
        return _COUPON_PREFIXES[self]


_NOTIFICATION_TYPES = {
    TemplateTrigger.BIRTHDAY: "auto_birthday",
    TemplateTrigger.CHRISTMAS: "auto_christmas",
    TemplateTrigger.NEW_YEAR: "auto_new_year",
    TemplateTrigger.ORTHODOX_EASTER: "auto_easter",
    TemplateTrigger.CUSTOM_DATE: "auto_custom",
}

_COUPON_PREFIXES = {
    TemplateTrigger.BIRTHDAY: "BDAY",
    TemplateTrigger.CHRISTMAS: "XMAS",
    TemplateTrigger.NEW_YEAR: "NEWYEAR",
    TemplateTrigger.ORTHODOX_EASTER: "EASTER",
    TemplateTrigger.CUSTOM_DATE: "TMPL",
}

# Notification types eligible for the coupon expiry reminder.
REMINDABLE_NOTIFICATION_TYPES: tuple[str, ...] = (*_NOTIFICATION_TYPES.values(), "coupon")

COUPON_REMINDER_TYPE = "coupon_reminder"

"""Coupon discount kinds and expiry modes."""

from enum import StrEnum


class CouponType(StrEnum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"


class CouponExpiryMode(StrEnum):
    """DURATION counts days from issue; DATE uses a fixed expiry timestamp."""

    DURATION = "duration"
    DATE = "date"

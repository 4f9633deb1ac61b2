"""Auto-generated coupon codes, display values and expiry."""

from datetime import datetime, timedelta
from decimal import Decimal

from storeadmin.domain.value_objects import CouponExpiryMode, CouponType, TemplateTrigger

DEFAULT_COUPON_DURATION_DAYS = 30
DEFAULT_CURRENCY = "EUR"


def coupon_code(trigger: TemplateTrigger, user_id: str, year: int, test: bool = False) -> str:
    """PREFIX-USERSUFFIX-YEAR, with a trailing T for test sends."""
    code = f"{trigger.coupon_prefix}-{user_id[-6:].upper()}-{year}"
    return f"{code}T" if test else code


def format_coupon_value(
    coupon_type: CouponType | str, value: Decimal | int | float, currency: str | None = None
) -> str:
    if CouponType(coupon_type) is CouponType.PERCENTAGE:
        return f"{_plain(value)}%"
    return f"{_plain(value)} {currency or DEFAULT_CURRENCY}"


def _plain(value: Decimal | int | float) -> str:
    """10.00 -> 10, 12.50 -> 12.5."""
    d = Decimal(str(value))
    if d == d.to_integral_value():
        return str(d.quantize(Decimal(1)))
    return format(d.normalize(), "f")


def coupon_expiry(
    now: datetime,
    expiry_mode: CouponExpiryMode | str | None,
    fixed_expires_at: datetime | None,
    duration_days: int | None,
) -> datetime:
    if expiry_mode == CouponExpiryMode.DATE and fixed_expires_at is not None:
        return fixed_expires_at
    return now + timedelta(days=duration_days or DEFAULT_COUPON_DURATION_DAYS)


def format_expiry(expires_at: datetime) -> str:
    """DD/MM/YYYY."""
    return expires_at.strftime("%d/%m/%Y")

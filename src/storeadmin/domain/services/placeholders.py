"""Template placeholder rendering."""

PLACEHOLDERS = ("name", "couponCode", "couponValue", "expiresAt")


def resolve_placeholders(
    template: str,
    *,
    name: str | None = None,
    coupon_code: str | None = None,
    coupon_value: str | None = None,
    expires_at: str | None = None,
) -> str:
    """Substitute {name}, {couponCode}, {couponValue}, {expiresAt}; missing values render empty."""
    values = {
        "name": name,
        "couponCode": coupon_code,
        "couponValue": coupon_value,
        "expiresAt": expires_at,
    }
    result = template
    for key in PLACEHOLDERS:
        result = result.replace("{" + key + "}", values[key] or "")
    return result


def render_localized(texts: dict[str, str], **values: str | None) -> dict[str, str]:
    """Apply resolve_placeholders to every language variant."""
    return {lang: resolve_placeholders(text, **values) for lang, text in texts.items()}

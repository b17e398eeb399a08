from decimal import Decimal, InvalidOperation

from django import template

register = template.Library()


@register.filter
def price(value):
    """
    1200    -> "$1,200"
    19.5    -> "$19.50"
    "abc"   -> "$0"
    """
    try:
        v = Decimal(str(value if value not in (None, "") else 0))
    except (InvalidOperation, ValueError):
        v = Decimal(0)
    if not v.is_finite():
        v = Decimal(0)

    if v == v.to_integral_value():
        return f"${int(v):,}"
    return f"${v:,.2f}"


@register.filter
def excerpt(value, length=100):
    text = str(value or "").strip()
    try:
        length = int(length)
    except (TypeError, ValueError):
        length = 100
    if len(text) <= length:
        return text
    return text[:length].rstrip() + "..."

# marketplace/validators.py
import math
import re

from marketplace.constants import (
    DEFAULT_CATEGORY,
    LISTING_CATEGORIES,
    MAX_DESCRIPTION_LENGTH,
    MAX_PRICE,
    MAX_TITLE_LENGTH,
    MIN_PASSWORD_LENGTH,
)
from marketplace.exceptions import ValidationError

# Very simple pattern; the service has the last word
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def require_text(value, message):
    """Return ``value`` trimmed, or raise if it is missing/blank."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(message)
    return value.strip()


def parse_price(value):
    """
    Returns (price, error). Accepts numbers and numeric strings.
    NaN is not a valid price.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return None, "Price is required"
    if isinstance(value, bool):
        return None, "Price must be a valid number"

    try:
        price = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        return None, "Price must be a valid number"

    if math.isnan(price):
        return None, "Price must be a valid number"
    if price < 0:
        return None, "Price cannot be negative"
    if price > MAX_PRICE:
        return None, "Price is too large"
    return price, None


def validate_listing_data(data):
    """
    Check listing input and return the payload to send.
    All problems are collected, the first one is what the UI shows.
    """
    if not isinstance(data, dict):
        raise ValidationError("Invalid listing data provided")

    errors = []

    title = data.get("title")
    if not isinstance(title, str) or not title.strip():
        errors.append("Title is required")
    elif len(title.strip()) > MAX_TITLE_LENGTH:
        errors.append(f"Title must be less than {MAX_TITLE_LENGTH} characters")

    description = data.get("description")
    if not isinstance(description, str) or not description.strip():
        errors.append("Description is required")
    elif len(description.strip()) > MAX_DESCRIPTION_LENGTH:
        errors.append(f"Description must be less than {MAX_DESCRIPTION_LENGTH} characters")

    price, price_error = parse_price(data.get("price"))
    if price_error:
        errors.append(price_error)

    category = data.get("category") or DEFAULT_CATEGORY
    if category not in LISTING_CATEGORIES:
        errors.append(f"Category must be one of: {', '.join(LISTING_CATEGORIES)}")

    if errors:
        raise ValidationError(errors)

    image_url = data.get("imageUrl") or ""
    return {
        "title": title.strip(),
        "description": description.strip(),
        "price": price,
        "category": category,
        "imageUrl": image_url.strip() if isinstance(image_url, str) else "",
    }


def validate_password(password):
    """Return a list of problems (empty when the password is acceptable)."""
    errors = []
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        errors.append(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")
    if password and not re.search(r"[A-Z]", password):
        errors.append("Password must contain at least one uppercase letter")
    if password and not re.search(r"[a-z]", password):
        errors.append("Password must contain at least one lowercase letter")
    if password and not re.search(r"[0-9]", password):
        errors.append("Password must contain at least one number")
    return errors


def validate_email(email):
    email = require_text(email, "Email is required")
    if not EMAIL_PATTERN.match(email):
        raise ValidationError("Enter a valid email address")
    return email

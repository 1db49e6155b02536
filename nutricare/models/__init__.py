class ValidationError(ValueError):
    """Raised when a request payload cannot be turned into a record."""


def require_number(data, key, positive=False):
    """Return data[key] as a float (None when absent); reject non-numbers."""
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{key} must be a number")
    if positive and value <= 0:
        raise ValidationError(f"{key} must be a positive number")
    return value


def require_choice(data, key, choices):
    value = data.get(key)
    if value is not None and value not in choices:
        raise ValidationError(f"Invalid {key}")
    return value

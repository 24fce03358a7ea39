import math

from server.eazepark.errors import ValidationError

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72

# ids are stored in signed 64-bit integer columns
MAX_ID = 2 ** 63 - 1


def is_missing(value, strip=True):
    """None and blank strings are missing; 0 and False are real values."""
    if value is None:
        return True
    if isinstance(value, str):
        return not (value.strip() if strip else value)
    return False


def require_fields(data, fields, message="All fields are required", unstripped=()):
    missing = [
        field for field in fields
        if is_missing(data.get(field), strip=field not in unstripped)
    ]
    if missing:
        raise ValidationError(message)


def password_bytes(password):
    """UTF-8 encoded password cut to what bcrypt will hash."""
    return str(password).encode("utf-8")[:BCRYPT_MAX_BYTES]


def parse_coordinate(value, field, limit):
    # bool is an int subclass, reject it explicitly
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} must be a number")

    if not math.isfinite(number) or abs(number) > limit:
        raise ValidationError(f"{field} must be between -{limit} and {limit}")
    return number


def parse_latitude(value, field):
    return parse_coordinate(value, field, 90)


def parse_longitude(value, field):
    return parse_coordinate(value, field, 180)


def parse_id(value, field):
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be an integer")
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"{field} must be an integer")

    if abs(number) > MAX_ID:
        raise ValidationError(f"{field} is out of range")
    return number

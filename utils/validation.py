import base64
import binascii
from datetime import datetime
from school_mis.errors import ValidationError


def clean_text(data, field, required=True):
    value = data.get(field)
    if value is None:
        if required:
            raise ValidationError(f"{field} is required")
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be text")
    value = value.strip()
    if required and not value:
        raise ValidationError(f"{field} is required")
    return value or None


def parse_date(value, field="date"):
    if not value:
        raise ValidationError(f"{field} is required")
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {field} format, use YYYY-MM-DD")


def parse_int(value, field, minimum=None, maximum=None):
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be an integer")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} must be an integer")
    if isinstance(value, float) and not value.is_integer():
        raise ValidationError(f"{field} must be an integer")
    if minimum is not None and number < minimum:
        raise ValidationError(f"{field} must be at least {minimum}")
    if maximum is not None and number > maximum:
        raise ValidationError(f"{field} must be at most {maximum}")
    return number


def parse_score(value, field="score"):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError("Score must be a number")
    if value < 0 or value > 100:
        raise ValidationError("Score must be between 0 and 100")
    return float(value)


def decode_base64(value, field="file_content"):
    if not value or not isinstance(value, str):
        raise ValidationError(f"{field} is required")
    if "," in value and value.startswith("data:"):
        # data URLs as produced by FileReader.readAsDataURL
        value = value.split(",", 1)[1]
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError):
        raise ValidationError(f"{field} must be base64 encoded")

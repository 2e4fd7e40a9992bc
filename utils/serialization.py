import base64
from enum import Enum
from datetime import datetime, date
from sqlalchemy.inspection import inspect


def encode_binary(value):
    return base64.b64encode(value).decode("ascii") if value is not None else None


def to_dict(model_instance, exclude=(), include_binary=True):
    """Plain-JSON snapshot of a model row.

    Enums are written by value, dates in ISO format and binary columns as
    base64 text. The result shares nothing with the session.
    """
    output = {}
    mapper = inspect(model_instance.__class__)

    for column in mapper.columns:
        key = column.key
        if key in exclude:
            continue
        value = getattr(model_instance, key)

        if isinstance(value, Enum):
            output[key] = value.value
        elif isinstance(value, (datetime, date)):
            output[key] = value.isoformat()
        elif isinstance(value, bytes):
            if include_binary:
                output[key] = encode_binary(value)
        elif isinstance(value, list):
            output[key] = list(value)
        else:
            output[key] = value

    return output

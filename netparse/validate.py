## Decoded JSON -> shape validation
import json
from typing import Any

from pydantic import TypeAdapter

def validate(shape: Any, value: Any) -> Any:
    """
    Narrow an already-decoded JSON value to `shape`.

    Validation runs in pydantic's JSON mode so values arrive the way the model
    sent them: IP addresses, datetimes and enums as strings, tuples as arrays.
    Still strict: "3600" is not a number and 1 is not a string.
    Raises pydantic.ValidationError on any mismatch.
    """
    return TypeAdapter(shape).validate_json(json.dumps(value), strict=True)

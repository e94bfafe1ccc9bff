import re
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator
from pydantic_core import PydanticCustomError


REQUIRED = "The {field} field is required."
MUST_BE_STRING = "The {field} field must be a string."
MUST_BE_INTEGER = "The {field} field must be an integer."

# products.price is a signed 64-bit column
INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1
# sign, leading zeros, then at most 19 significant digits
INTEGER_PATTERN = re.compile(r"([+-]?)0*([0-9]{1,19})")


def parse_integer(raw: str) -> Optional[int]:
    """Parse a plain decimal integer string, or return None if it is not one
    or falls outside the 64-bit range."""
    match = INTEGER_PATTERN.fullmatch(raw.strip())
    if match is None:
        return None
    value = int(match.group(1) + match.group(2))
    if not INT_MIN <= value <= INT_MAX:
        return None
    return value


class ProductCreate(BaseModel):
    # unknown keys are dropped so only name/price reach the store
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    name: str = Field(..., min_length=1)
    price: int = Field(..., ge=INT_MIN, le=INT_MAX)

    @model_validator(mode="before")
    @classmethod
    def drop_blank_values(cls, data: Any) -> Any:
        # null and blank strings count as absent
        if not isinstance(data, dict):
            return {}
        return {
            key: value
            for key, value in data.items()
            if value is not None and not (isinstance(value, str) and not value.strip())
        }

    @field_validator("price", mode="before")
    @classmethod
    def reject_non_integers(cls, v: Any) -> Any:
        if isinstance(v, bool):
            raise PydanticCustomError("int_type", "Input should be a valid integer")
        if isinstance(v, str):
            value = parse_integer(v)
            if value is None:
                raise PydanticCustomError("int_parsing", "Input should be a valid integer")
            return value
        return v


def _message_for(field: str, error_type: str) -> str:
    if error_type in ("missing", "string_too_short"):
        return REQUIRED.format(field=field)
    if error_type.startswith("int_") or error_type in ("greater_than_equal", "less_than_equal", "finite_number"):
        return MUST_BE_INTEGER.format(field=field)
    if error_type.startswith("string_"):
        return MUST_BE_STRING.format(field=field)
    return f"The {field} field is invalid."


def field_errors(exc: ValidationError) -> Dict[str, List[str]]:
    errors: Dict[str, List[str]] = {}
    for err in exc.errors():
        field = str(err["loc"][0]) if err["loc"] else "payload"
        message = _message_for(field, err["type"])
        bucket = errors.setdefault(field, [])
        if message not in bucket:
            bucket.append(message)
    return errors


def error_payload(errors: Dict[str, List[str]]) -> Dict[str, Any]:
    """Build the 422 body: a summary message plus per-field messages."""
    messages = [m for field_messages in errors.values() for m in field_messages]
    message = messages[0] if messages else "The given data was invalid."
    extra = len(messages) - 1
    if extra > 0:
        message += f" (and {extra} more error{'s' if extra > 1 else ''})"
    return {"message": message, "errors": errors}

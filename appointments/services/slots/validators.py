"""
Request parameter validators for the slots endpoint.

Raise ValidationError (HTTP 400) instead of letting FastAPI answer 422,
so that parameter problems are reported in the same shape as every other
slots error.
"""

import re
from datetime import date

from .errors import ValidationError

_DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
_ID_RE = re.compile(r"^[0-9]+$")


def validate_date_param(value: str | None, field_name: str = "date") -> date:
    if not value:
        raise ValidationError(
            f"missing_{field_name}",
            f"Missing required parameter: {field_name} (YYYY-MM-DD format)",
        )

    value = value.strip()
    if not _DATE_RE.match(value):
        raise ValidationError(
            f"invalid_{field_name}",
            f"Invalid {field_name} format. Use YYYY-MM-DD",
        )

    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ValidationError(
            f"invalid_{field_name}",
            f"Invalid {field_name}: {value}",
        ) from None


def validate_id_param(
    value: str | None,
    field_name: str,
    code_name: str,
    required: bool = True,
) -> int | None:
    """
    Parse a positive integer id.

    Args:
        field_name: query parameter name used in messages ("serviceId").
        code_name: snake_case name used in error codes ("service_id").
    """
    if value is None or not value.strip():
        if required:
            raise ValidationError(
                f"missing_{code_name}",
                f"Missing required parameter: {field_name}",
            )
        return None

    value = value.strip()
    if not _ID_RE.match(value) or int(value) <= 0:
        raise ValidationError(
            f"invalid_{code_name}",
            f"Invalid {field_name}: {value}",
        )
    return int(value)

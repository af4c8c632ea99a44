import re
from typing import Any

from mondo.exceptions import InvalidArgumentError

# Content ids are int4 serial columns
MAX_CONTENT_ID = 2_147_483_647

_ID_RE = re.compile(r"[0-9]+")


def parse_content_id(raw: Any, resource_type: str = "Content") -> int:
    """Parse a numeric content identifier.

    Only ASCII digits are accepted, and the value must fit the id column.

    Raises:
        InvalidArgumentError: if ``raw`` is not an integer in 1..MAX_CONTENT_ID.
    """
    message = f"Invalid {resource_type.lower()} id '{raw}'"
    if isinstance(raw, bool):
        raise InvalidArgumentError(message, field="id", value=str(raw))
    if isinstance(raw, int):
        value = raw
    else:
        text = str(raw).strip()
        if not _ID_RE.fullmatch(text):
            raise InvalidArgumentError(message, field="id", value=str(raw))
        value = int(text)
    if not 0 < value <= MAX_CONTENT_ID:
        raise InvalidArgumentError(message, field="id", value=str(raw))
    return value

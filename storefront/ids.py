import re

from storefront.upstream.errors import ProductNotFoundError

# Leading integer, the rest of the string is ignored ("12abc" -> 12).
_LEADING_INT = re.compile(r"\s*([+-]?\d+)", re.ASCII)


def parse_id_number(value: str) -> int | None:
    """Positive product id from a path segment, or None."""
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    numeric_id = int(match.group(1))
    if numeric_id <= 0:
        return None
    return numeric_id


def require_id_number(value: str) -> int:
    numeric_id = parse_id_number(value)
    if numeric_id is None:
        raise ProductNotFoundError(value)
    return numeric_id


def is_valid_id(value: str) -> bool:
    return parse_id_number(value) is not None

"""
Naming and serialisation conventions of the Stark Bank API
"""

import re
from datetime import date
from typing import Any, Dict, Optional

from .dates import check_date
from .errors import TransportError

_WORD_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def snake_to_camel(name: str) -> str:
    """'boleto_ids' -> 'boletoIds', 'street_line_1' -> 'streetLine1'"""
    first, *rest = name.split("_")
    return first + "".join(word.capitalize() for word in rest)


def endpoint(resource_name: str) -> str:
    """
    Derive the URL path of a resource from its name

    'DictKey' -> 'dict-key', 'BoletoLog' -> 'boleto/log'
    """
    kebab = _WORD_BOUNDARY.sub("-", resource_name).lower()
    if kebab.endswith("-log"):
        kebab = kebab[:-len("-log")] + "/log"
    return kebab


def last_name(resource_name: str) -> str:
    """Key wrapping a single object in API responses: 'BoletoLog' -> 'log'"""
    words = _WORD_BOUNDARY.split(resource_name)
    return words[-1][0].lower() + words[-1][1:]


def last_name_plural(resource_name: str) -> str:
    """Key wrapping a list of objects in API responses: 'DictKey' -> 'keys'"""
    base = last_name(resource_name)
    if base.endswith("s"):
        return base
    if base.endswith("y") and not base.endswith("ey"):
        return base[:-1] + "ies"
    return base + "s"


def cast_query(options: Dict[str, Any]) -> Dict[str, str]:
    """
    Convert python query options into API query parameters

    None values are dropped, keys are camel cased, lists are comma joined
    and dates are written as YYYY-MM-DD.
    """
    params = {}
    for key, value in options.items():
        if value is None:
            continue
        params[snake_to_camel(key)] = _cast_value(value)
    return params


def _cast_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, date):
        return check_date(value)
    if isinstance(value, (list, tuple)):
        return ",".join(str(_cast_value(item)) for item in value)
    return str(value)


def unwrap(body: Optional[Dict[str, Any]], key: str) -> Any:
    """Extract an envelope key from a decoded response body"""
    if not isinstance(body, dict) or key not in body:
        raise TransportError(f"Malformed API response: missing '{key}'")
    return body[key]

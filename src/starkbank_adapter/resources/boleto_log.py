"""
BoletoLog resource

Every time a Boleto is updated a corresponding log is generated. Logs are
never created by the user but can be retrieved to check additional
information on the Boleto.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..context import CallerContext
from ..dates import check_datetime
from ..resource import Resource, ResourceDescriptor, hydrate, register
from ..rest import Rest
from . import boleto
from .boleto import Boleto


@dataclass
class BoletoLog(Resource):
    """
    Attributes:
        id: unique id of the log, e.g. "5656565656565656"
        boleto: Boleto snapshot the log refers to
        errors: errors linked to this Boleto event
        type: event that triggered the log, e.g. "registered" or "paid"
        created: creation datetime of the log
    """
    created: datetime
    type: str
    errors: List[str]
    boleto: Boleto


def _make_boleto_log(raw: Dict[str, Any]) -> BoletoLog:
    return hydrate(BoletoLog, "BoletoLog", raw, converters={
        "created": check_datetime,
        "boleto": boleto.resource.maker,
    })


resource = register(ResourceDescriptor(name="BoletoLog", maker=_make_boleto_log))


def get(rest: Rest, id: str, context: CallerContext) -> BoletoLog:
    """
    Retrieve a specific BoletoLog by its id

    Args:
        rest: Rest instance performing the request
        id: log unique id, e.g. "5656565656565656"
        context: caller context with the credentials to use

    Returns:
        BoletoLog with its embedded Boleto
    """
    return rest.get_id(resource, id, context)


def query(rest: Rest, context: CallerContext, limit: Optional[int] = None,
          after: Any = None, before: Any = None, types: Optional[List[str]] = None,
          boleto_ids: Optional[List[str]] = None) -> Iterator[BoletoLog]:
    """
    Enumerate BoletoLogs, requesting further pages as the iterator is consumed

    Args:
        rest: Rest instance performing the requests
        context: caller context with the credentials to use
        limit: maximum number of logs to retrieve, unlimited if None
        after: only logs created after this date, e.g. "2020-04-03"
        before: only logs created before this date, e.g. "2020-04-03"
        types: log event types, e.g. ["paid", "registered"]
        boleto_ids: only logs of these Boletos

    Returns:
        Iterator of BoletoLog
    """
    return rest.get_list(resource, context, limit=limit, after=after, before=before,
                         types=types, boleto_ids=boleto_ids)


def page(rest: Rest, context: CallerContext, cursor: Optional[str] = None,
         limit: Optional[int] = None, after: Any = None, before: Any = None,
         types: Optional[List[str]] = None,
         boleto_ids: Optional[List[str]] = None) -> Tuple[List[BoletoLog], Optional[str]]:
    """
    Retrieve up to 100 BoletoLogs and the cursor of the next page

    Use this instead of query to control paging manually. Filters are the
    same as query, with limit between 1 and 100 (default 100).

    Returns:
        Tuple of (list of BoletoLog, cursor of the next page or None)
    """
    return rest.get_page(resource, context, cursor=cursor, limit=limit, after=after,
                         before=before, types=types, boleto_ids=boleto_ids)

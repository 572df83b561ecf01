"""
DepositLog resource, generated every time a Deposit is updated
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..context import CallerContext
from ..dates import check_datetime
from ..resource import Resource, ResourceDescriptor, hydrate, register
from ..rest import Rest
from . import deposit
from .deposit import Deposit


@dataclass
class DepositLog(Resource):
    created: datetime
    type: str
    errors: List[str]
    deposit: Deposit


def _make_deposit_log(raw: Dict[str, Any]) -> DepositLog:
    return hydrate(DepositLog, "DepositLog", raw, converters={
        "created": check_datetime,
        "deposit": deposit.resource.maker,
    })


resource = register(ResourceDescriptor(name="DepositLog", maker=_make_deposit_log))


def get(rest: Rest, id: str, context: CallerContext) -> DepositLog:
    return rest.get_id(resource, id, context)


def query(rest: Rest, context: CallerContext, limit: Optional[int] = None,
          after: Any = None, before: Any = None, types: Optional[List[str]] = None,
          deposit_ids: Optional[List[str]] = None) -> Iterator[DepositLog]:
    """Enumerate DepositLogs, optionally filtered by event types and Deposit ids"""
    return rest.get_list(resource, context, limit=limit, after=after, before=before,
                         types=types, deposit_ids=deposit_ids)


def page(rest: Rest, context: CallerContext, cursor: Optional[str] = None,
         limit: Optional[int] = None, after: Any = None, before: Any = None,
         types: Optional[List[str]] = None,
         deposit_ids: Optional[List[str]] = None) -> Tuple[List[DepositLog], Optional[str]]:
    return rest.get_page(resource, context, cursor=cursor, limit=limit, after=after,
                         before=before, types=types, deposit_ids=deposit_ids)

"""
UtilityPaymentLog resource, generated every time a UtilityPayment is modified
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..context import CallerContext
from ..dates import check_datetime
from ..resource import Resource, ResourceDescriptor, hydrate, register
from ..rest import Rest
from . import utility_payment
from .utility_payment import UtilityPayment


@dataclass
class UtilityPaymentLog(Resource):
    created: datetime
    type: str
    errors: List[str]
    payment: UtilityPayment


def _make_utility_payment_log(raw: Dict[str, Any]) -> UtilityPaymentLog:
    return hydrate(UtilityPaymentLog, "UtilityPaymentLog", raw, converters={
        "created": check_datetime,
        "payment": utility_payment.resource.maker,
    })


resource = register(ResourceDescriptor(name="UtilityPaymentLog", maker=_make_utility_payment_log))


def get(rest: Rest, id: str, context: CallerContext) -> UtilityPaymentLog:
    """Retrieve a specific UtilityPaymentLog by its id"""
    return rest.get_id(resource, id, context)


def query(rest: Rest, context: CallerContext, limit: Optional[int] = None,
          after: Any = None, before: Any = None, types: Optional[List[str]] = None,
          payment_ids: Optional[List[str]] = None) -> Iterator[UtilityPaymentLog]:
    """
    Enumerate UtilityPaymentLogs

    Args:
        types: log event types, e.g. ["processing", "success"]
        payment_ids: only logs of these UtilityPayments
    """
    return rest.get_list(resource, context, limit=limit, after=after, before=before,
                         types=types, payment_ids=payment_ids)


def page(rest: Rest, context: CallerContext, cursor: Optional[str] = None,
         limit: Optional[int] = None, after: Any = None, before: Any = None,
         types: Optional[List[str]] = None,
         payment_ids: Optional[List[str]] = None) -> Tuple[List[UtilityPaymentLog], Optional[str]]:
    """Retrieve up to 100 UtilityPaymentLogs and the cursor of the next page"""
    return rest.get_page(resource, context, cursor=cursor, limit=limit, after=after,
                         before=before, types=types, payment_ids=payment_ids)

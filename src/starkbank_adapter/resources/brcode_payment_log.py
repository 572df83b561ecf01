"""
BrcodePaymentLog resource, generated every time a BrcodePayment is updated
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..context import CallerContext
from ..dates import check_datetime
from ..resource import Resource, ResourceDescriptor, hydrate, register
from ..rest import Rest
from . import brcode_payment
from .brcode_payment import BrcodePayment


@dataclass
class BrcodePaymentLog(Resource):
    created: datetime
    type: str
    errors: List[str]
    payment: BrcodePayment


def _make_brcode_payment_log(raw: Dict[str, Any]) -> BrcodePaymentLog:
    return hydrate(BrcodePaymentLog, "BrcodePaymentLog", raw, converters={
        "created": check_datetime,
        "payment": brcode_payment.resource.maker,
    })


resource = register(ResourceDescriptor(name="BrcodePaymentLog", maker=_make_brcode_payment_log))


def get(rest: Rest, id: str, context: CallerContext) -> BrcodePaymentLog:
    """Retrieve a specific BrcodePaymentLog by its id"""
    return rest.get_id(resource, id, context)


def query(rest: Rest, context: CallerContext, limit: Optional[int] = None,
          after: Any = None, before: Any = None, types: Optional[List[str]] = None,
          payment_ids: Optional[List[str]] = None) -> Iterator[BrcodePaymentLog]:
    """
    Enumerate BrcodePaymentLogs

    Args:
        limit: maximum number of logs to retrieve, unlimited if None
        after: only logs created after this date, e.g. "2020-04-03"
        before: only logs created before this date, e.g. "2020-04-03"
        types: log event types, e.g. ["success", "failed"]
        payment_ids: only logs of these BrcodePayments
    """
    return rest.get_list(resource, context, limit=limit, after=after, before=before,
                         types=types, payment_ids=payment_ids)


def page(rest: Rest, context: CallerContext, cursor: Optional[str] = None,
         limit: Optional[int] = None, after: Any = None, before: Any = None,
         types: Optional[List[str]] = None,
         payment_ids: Optional[List[str]] = None) -> Tuple[List[BrcodePaymentLog], Optional[str]]:
    """Retrieve up to 100 BrcodePaymentLogs and the cursor of the next page"""
    return rest.get_page(resource, context, cursor=cursor, limit=limit, after=after,
                         before=before, types=types, payment_ids=payment_ids)

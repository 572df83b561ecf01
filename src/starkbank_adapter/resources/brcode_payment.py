"""
BrcodePayment entity, embedded in BrcodePaymentLog records
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..dates import check_datetime
from ..resource import Resource, ResourceDescriptor, hydrate, register


@dataclass
class BrcodePayment(Resource):
    """Payment of a PIX BR Code"""
    brcode: Optional[str] = None
    tax_id: Optional[str] = None
    description: Optional[str] = None
    amount: Optional[int] = None
    scheduled: Optional[datetime] = None
    tags: List[str] = field(default_factory=list)
    name: Optional[str] = None
    status: Optional[str] = None
    type: Optional[str] = None
    transaction_ids: List[str] = field(default_factory=list)
    fee: Optional[int] = None
    updated: Optional[datetime] = None
    created: Optional[datetime] = None


def _make_brcode_payment(raw: Dict[str, Any]) -> BrcodePayment:
    return hydrate(BrcodePayment, "BrcodePayment", raw, converters={
        "scheduled": check_datetime,
        "updated": check_datetime,
        "created": check_datetime,
    })


resource = register(ResourceDescriptor(name="BrcodePayment", maker=_make_brcode_payment))

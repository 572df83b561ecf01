"""
UtilityPayment entity, embedded in UtilityPaymentLog records
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..dates import check_datetime
from ..resource import Resource, ResourceDescriptor, hydrate, register


@dataclass
class UtilityPayment(Resource):
    """Payment of a utility bill identified by its line or bar code"""
    line: Optional[str] = None
    bar_code: Optional[str] = None
    description: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    scheduled: Optional[datetime] = None
    amount: Optional[int] = None
    fee: Optional[int] = None
    type: Optional[str] = None
    status: Optional[str] = None
    transaction_ids: List[str] = field(default_factory=list)
    updated: Optional[datetime] = None
    created: Optional[datetime] = None


def _make_utility_payment(raw: Dict[str, Any]) -> UtilityPayment:
    return hydrate(UtilityPayment, "UtilityPayment", raw, converters={
        "scheduled": check_datetime,
        "updated": check_datetime,
        "created": check_datetime,
    })


resource = register(ResourceDescriptor(name="UtilityPayment", maker=_make_utility_payment))

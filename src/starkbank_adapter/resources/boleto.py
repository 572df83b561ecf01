"""
Boleto entity, embedded in BoletoLog records
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..dates import check_datetime
from ..resource import Resource, ResourceDescriptor, hydrate, register


@dataclass
class Boleto(Resource):
    """
    Boleto snapshot as returned by the API

    Attributes:
        amount: value in cents, e.g. 1234 (= R$ 12.34)
        name: payer full name
        tax_id: payer CPF or CNPJ
        due: payment due date
        line: generated boleto line for payment
        bar_code: generated boleto bar code for payment
        status: current status, e.g. "registered" or "paid"
    """
    amount: Optional[int] = None
    name: Optional[str] = None
    tax_id: Optional[str] = None
    street_line_1: Optional[str] = None
    street_line_2: Optional[str] = None
    district: Optional[str] = None
    city: Optional[str] = None
    state_code: Optional[str] = None
    zip_code: Optional[str] = None
    due: Optional[datetime] = None
    fine: Optional[float] = None
    interest: Optional[float] = None
    overdue_limit: Optional[int] = None
    receiver_name: Optional[str] = None
    receiver_tax_id: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    descriptions: List[Dict[str, Any]] = field(default_factory=list)
    discounts: List[Dict[str, Any]] = field(default_factory=list)
    fee: Optional[int] = None
    line: Optional[str] = None
    bar_code: Optional[str] = None
    status: Optional[str] = None
    transaction_ids: List[str] = field(default_factory=list)
    workspace_id: Optional[str] = None
    our_number: Optional[str] = None
    created: Optional[datetime] = None


def _make_boleto(raw: Dict[str, Any]) -> Boleto:
    return hydrate(Boleto, "Boleto", raw, converters={
        "due": check_datetime,
        "created": check_datetime,
    })


resource = register(ResourceDescriptor(name="Boleto", maker=_make_boleto))

"""
Deposit entity, embedded in DepositLog records
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..dates import check_datetime
from ..resource import Resource, ResourceDescriptor, hydrate, register


@dataclass
class Deposit(Resource):
    """
    Transfer received into the workspace account

    Attributes:
        name: payer name
        tax_id: payer tax ID (CPF or CNPJ) with or without formatting
        bank_code: payer bank code in Brazil
        branch_code: payer bank account branch
        account_number: payer bank account number
        account_type: payer bank account type, e.g. "checking"
        amount: deposit value in cents
        type: type of settlement that originated the deposit, e.g. "pix" or "ted"
        status: current deposit status, e.g. "created"
    """
    name: Optional[str] = None
    tax_id: Optional[str] = None
    bank_code: Optional[str] = None
    branch_code: Optional[str] = None
    account_number: Optional[str] = None
    account_type: Optional[str] = None
    amount: Optional[int] = None
    type: Optional[str] = None
    status: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    fee: Optional[int] = None
    transaction_ids: List[str] = field(default_factory=list)
    created: Optional[datetime] = None
    updated: Optional[datetime] = None


def _make_deposit(raw: Dict[str, Any]) -> Deposit:
    return hydrate(Deposit, "Deposit", raw, converters={
        "created": check_datetime,
        "updated": check_datetime,
    })


resource = register(ResourceDescriptor(name="Deposit", maker=_make_deposit))

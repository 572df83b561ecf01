"""
DictKey resource: a PIX key registered in Bacen's DICT system
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Iterator, List, Optional, Tuple

from ..context import CallerContext
from ..dates import check_datetime
from ..resource import Resource, ResourceDescriptor, hydrate, register
from ..rest import Rest


@dataclass
class DictKey(Resource):
    """
    The id of a DictKey is the PIX key itself, e.g. "tony@starkbank.com",
    "+5511988887777" or an EVP uuid.

    Attributes:
        type: key type, e.g. "email", "cpf", "cnpj", "phone" or "evp"
        name: key owner full name
        tax_id: key owner tax ID (CNPJ or masked CPF)
        owner_type: "naturalPerson" or "legalPerson"
        bank_name: bank associated with the key
        ispb: bank ISPB associated with the key
        branch_code: account branch code associated with the key
        account_number: account number associated with the key
        account_type: e.g. "checking", "saving", "salary" or "payment"
        status: e.g. "created", "registered", "canceled" or "failed"
        account_created: creation datetime of the associated account
        owned: datetime since when the current owner holds the key
        created: creation datetime of the key
    """
    type: Optional[str] = None
    name: Optional[str] = None
    tax_id: Optional[str] = None
    owner_type: Optional[str] = None
    bank_name: Optional[str] = None
    ispb: Optional[str] = None
    branch_code: Optional[str] = None
    account_number: Optional[str] = None
    account_type: Optional[str] = None
    status: Optional[str] = None
    account_created: Optional[datetime] = None
    owned: Optional[datetime] = None
    created: Optional[datetime] = None


def _make_dict_key(raw: Dict[str, Any]) -> DictKey:
    return hydrate(DictKey, "DictKey", raw, converters={
        "account_created": check_datetime,
        "owned": check_datetime,
        "created": check_datetime,
    })


resource = register(ResourceDescriptor(name="DictKey", maker=_make_dict_key))


def get(rest: Rest, id: str, context: CallerContext) -> DictKey:
    """
    Retrieve a DictKey by the PIX key itself

    Args:
        id: the PIX key, e.g. "tony@starkbank.com" or "722.461.430-04"
    """
    return rest.get_id(resource, id, context)


def query(rest: Rest, context: CallerContext, limit: Optional[int] = None,
          type: Optional[str] = None, after: Any = None, before: Any = None,
          ids: Optional[List[str]] = None, status: Optional[str] = None) -> Iterator[DictKey]:
    """
    Enumerate the DictKeys associated with the workspace

    Args:
        limit: maximum number of keys to retrieve, unlimited if None
        type: key type, e.g. "cpf", "cnpj", "phone", "email" or "evp"
        after: only keys created after this date, e.g. "2020-04-03"
        before: only keys created before this date, e.g. "2020-04-03"
        ids: only these keys
        status: only keys in this status, e.g. "registered"
    """
    return rest.get_list(resource, context, limit=limit, type=type, after=after,
                         before=before, ids=ids, status=status)


def page(rest: Rest, context: CallerContext, cursor: Optional[str] = None,
         limit: Optional[int] = None, type: Optional[str] = None, after: Any = None,
         before: Any = None, ids: Optional[List[str]] = None,
         status: Optional[str] = None) -> Tuple[List[DictKey], Optional[str]]:
    """Retrieve up to 100 DictKeys and the cursor of the next page"""
    return rest.get_page(resource, context, cursor=cursor, limit=limit, type=type,
                         after=after, before=before, ids=ids, status=status)

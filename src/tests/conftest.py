"""
Shared fixtures: raw API records and a scripted transport stub
"""

import copy
import pytest
from typing import Any, Dict, List, Optional

from starkbank_adapter.context import CallerContext
from starkbank_adapter.http_client import APIResponse


RAW_BOLETO = {
    "id": "5656565656565656",
    "amount": 400000,
    "name": "Iron Bank S.A.",
    "taxId": "20.018.183/0001-80",
    "streetLine1": "Av. Faria Lima, 1844",
    "streetLine2": "CJ 13",
    "district": "Itaim Bibi",
    "city": "São Paulo",
    "stateCode": "SP",
    "zipCode": "01500-000",
    "due": "2020-05-20T02:59:59.999999+00:00",
    "fine": 2.5,
    "interest": 1.3,
    "overdueLimit": 5,
    "receiverName": "Tony Stark",
    "receiverTaxId": "012.345.678-90",
    "tags": ["war supply", "invoice #1234"],
    "descriptions": [{"text": "product A", "amount": 123}],
    "discounts": [],
    "fee": 0,
    "line": "34191.09008 61207.727308 71444.640008 5 81310001234321",
    "barCode": "34195819600001234321090086120772730714446400",
    "status": "registered",
    "transactionIds": [],
    "workspaceId": "5078376503050240",
    "ourNumber": "10028",
    "created": "2020-04-03T15:03:01.012345Z",
}


def make_boleto_log(log_id: str, boleto_overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Build a raw BoletoLog record embedding a raw Boleto"""
    boleto = copy.deepcopy(RAW_BOLETO)
    boleto.update(boleto_overrides or {})
    return {
        "id": log_id,
        "created": "2020-04-03T15:03:01.012345+00:00",
        "type": "registered",
        "errors": [],
        "boleto": boleto,
    }


class ScriptedTransport:
    """
    Transport stub serving list pages keyed by cursor

    ``pages`` maps the requested cursor (None for the first page) to a
    tuple of (records, next_cursor). Every call is recorded.
    """

    def __init__(self, plural_key: str = "logs", pages: Optional[Dict[Optional[str], Any]] = None,
                 single: Optional[Dict[str, Any]] = None, error: Optional[Exception] = None):
        self.plural_key = plural_key
        self.pages = pages or {}
        self.single = single
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def request(self, method, path, query, context):
        self.calls.append({"method": method, "path": path, "query": query, "context": context})
        if self.error is not None:
            raise self.error
        if self.single is not None:
            return APIResponse(raw_data=copy.deepcopy(self.single), metadata={}, status_code=200)

        cursor = (query or {}).get("cursor")
        records, next_cursor = self.pages[cursor]
        limit = int((query or {}).get("limit", 100))
        return APIResponse(
            raw_data={self.plural_key: copy.deepcopy(records[:limit]), "cursor": next_cursor},
            metadata={},
            status_code=200,
        )


def paged_logs(total: int, page_size: int) -> Dict[Optional[str], Any]:
    """Split ``total`` raw BoletoLogs into pages chained by cursors"""
    records = [make_boleto_log(f"log-{index}") for index in range(total)]
    pages = {}
    cursor = None
    for start in range(0, max(total, 1), page_size):
        next_cursor = f"cursor-{start + page_size}" if start + page_size < total else None
        pages[cursor] = (records[start:start + page_size], next_cursor)
        cursor = next_cursor
    return pages


@pytest.fixture
def context():
    return CallerContext(credentials={"type": "access_token", "token": "test-token"})


@pytest.fixture
def never_called_transport():
    transport = ScriptedTransport()
    transport.request = lambda *args, **kwargs: pytest.fail("transport must not be called")
    return transport


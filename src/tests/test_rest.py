"""
Test suite for the Rest core: single fetch, paging and lazy enumeration
Following AAA pattern and descriptive naming
"""

import pytest
from datetime import date, datetime

from conftest import ScriptedTransport, make_boleto_log, paged_logs
from starkbank_adapter.errors import (
    AuthorizationError, NotFound, SchemaError, TransportError, ValidationError
)
from starkbank_adapter.resources import boleto_log, dict_key
from starkbank_adapter.resources.boleto import Boleto
from starkbank_adapter.resources.boleto_log import BoletoLog
from starkbank_adapter.rest import Rest


class TestGetId:
    """Test suite for single object fetch"""

    def test_get_id_with_existing_log_returns_hydrated_log(self, context):
        """
        Test that fetching by id requests the singular path and hydrates with the descriptor's maker
        """
        # Arrange
        transport = ScriptedTransport(single={"log": make_boleto_log("log-1")})
        rest = Rest(transport)

        # Act
        result = rest.get_id(boleto_log.resource, "log-1", context)

        # Assert
        assert isinstance(result, BoletoLog)
        assert result.id == "log-1"
        assert isinstance(result.boleto, Boleto)
        assert len(transport.calls) == 1
        assert transport.calls[0]["method"] == "GET"
        assert transport.calls[0]["path"] == "boleto/log/log-1"

    def test_get_id_escapes_id_in_path(self, context):
        """
        Test that PIX keys with reserved characters are quoted in the URL path
        """
        # Arrange
        raw_key = {"id": "tony@starkbank.com/x", "type": "email"}
        transport = ScriptedTransport(single={"key": raw_key})
        rest = Rest(transport)

        # Act
        result = rest.get_id(dict_key.resource, "tony@starkbank.com/x", context)

        # Assert
        assert result.id == "tony@starkbank.com/x"
        assert transport.calls[0]["path"] == "dict-key/tony%40starkbank.com%2Fx"

    def test_get_id_with_empty_id_raises_validation_error_without_request(self, context, never_called_transport):
        """
        Test that an empty id is rejected before the transport is used
        """
        # Arrange
        rest = Rest(never_called_transport)

        # Act & Assert
        with pytest.raises(ValidationError):
            rest.get_id(boleto_log.resource, "  ", context)

    def test_get_id_without_context_raises_authorization_error(self, never_called_transport):
        """
        Test that a missing caller context fails before any request
        """
        # Arrange
        rest = Rest(never_called_transport)

        # Act & Assert
        with pytest.raises(AuthorizationError):
            rest.get_id(boleto_log.resource, "log-1", None)

    def test_get_id_propagates_not_found_from_transport(self, context):
        """
        Test that a not found outcome from the transport reaches the caller unchanged
        """
        # Arrange
        transport = ScriptedTransport(error=NotFound("no such log"))
        rest = Rest(transport)

        # Act & Assert
        with pytest.raises(NotFound):
            rest.get_id(boleto_log.resource, "missing", context)

    def test_get_id_with_unknown_field_raises_schema_error(self, context):
        """
        Test that a record with an unrecognised key never yields a partially hydrated object
        """
        # Arrange
        raw = make_boleto_log("log-1")
        raw["surprise"] = True
        transport = ScriptedTransport(single={"log": raw})
        rest = Rest(transport)

        # Act & Assert
        with pytest.raises(SchemaError) as exc_info:
            rest.get_id(boleto_log.resource, "log-1", context)

        assert exc_info.value.key == "surprise"

    def test_get_id_with_missing_envelope_raises_transport_error(self, context):
        """
        Test that a body without the singular key is reported as a malformed response
        """
        # Arrange
        transport = ScriptedTransport(single={"unexpected": {}})
        rest = Rest(transport)

        # Act & Assert
        with pytest.raises(TransportError):
            rest.get_id(boleto_log.resource, "log-1", context)


class TestGetPage:
    """Test suite for cursor based paging"""

    def test_get_page_returns_elements_and_next_cursor(self, context):
        """
        Test that one page request returns hydrated elements and the cursor of the next page
        """
        # Arrange
        transport = ScriptedTransport(pages=paged_logs(total=5, page_size=3))
        rest = Rest(transport)

        # Act
        elements, cursor = rest.get_page(boleto_log.resource, context, limit=3)

        # Assert
        assert [element.id for element in elements] == ["log-0", "log-1", "log-2"]
        assert cursor == "cursor-3"
        assert len(transport.calls) == 1
        assert transport.calls[0]["path"] == "boleto/log"

    def test_get_page_on_last_page_returns_none_cursor(self, context):
        """
        Test that the final page reports no further cursor
        """
        # Arrange
        transport = ScriptedTransport(pages=paged_logs(total=5, page_size=3))
        rest = Rest(transport)

        # Act
        elements, cursor = rest.get_page(boleto_log.resource, context, cursor="cursor-3")

        # Assert
        assert [element.id for element in elements] == ["log-3", "log-4"]
        assert cursor is None
        assert transport.calls[0]["query"]["cursor"] == "cursor-3"

    def test_get_page_without_limit_requests_default_of_100(self, context):
        """
        Test that the default page size is 100
        """
        # Arrange
        transport = ScriptedTransport(pages=paged_logs(total=1, page_size=1))
        rest = Rest(transport)

        # Act
        rest.get_page(boleto_log.resource, context)

        # Assert
        assert transport.calls[0]["query"]["limit"] == "100"
        assert "cursor" not in transport.calls[0]["query"]

    @pytest.mark.parametrize("limit", [0, 101, -1, 2.5, "10", True])
    def test_get_page_with_out_of_range_limit_raises_validation_error(self, context, never_called_transport, limit):
        """
        Test that limits outside [1, 100] are rejected before any request
        """
        # Arrange
        rest = Rest(never_called_transport)

        # Act & Assert
        with pytest.raises(ValidationError):
            rest.get_page(boleto_log.resource, context, limit=limit)

    @pytest.mark.parametrize("limit", [1, 100])
    def test_get_page_with_boundary_limit_succeeds(self, context, limit):
        """
        Test that the inclusive bounds of the limit range are accepted
        """
        # Arrange
        transport = ScriptedTransport(pages=paged_logs(total=150, page_size=100))
        rest = Rest(transport)

        # Act
        elements, _ = rest.get_page(boleto_log.resource, context, limit=limit)

        # Assert
        assert len(elements) == limit
        assert transport.calls[0]["query"]["limit"] == str(limit)

    def test_get_page_serialises_filters_for_the_api(self, context):
        """
        Test that date filters are normalised and list filters are comma joined with camel cased keys
        """
        # Arrange
        transport = ScriptedTransport(pages=paged_logs(total=1, page_size=1))
        rest = Rest(transport)

        # Act
        rest.get_page(
            boleto_log.resource, context,
            after="2020-04-03", before=date(2020, 4, 30),
            types=["paid", "registered"], boleto_ids=["1", "2"]
        )

        # Assert
        query = transport.calls[0]["query"]
        assert query["after"] == "2020-04-03"
        assert query["before"] == "2020-04-30"
        assert query["types"] == "paid,registered"
        assert query["boletoIds"] == "1,2"

    def test_get_page_with_malformed_date_raises_validation_error_without_request(self, context, never_called_transport):
        """
        Test that an unparseable date filter fails before the transport is used
        """
        # Arrange
        rest = Rest(never_called_transport)

        # Act & Assert
        with pytest.raises(ValidationError):
            rest.get_page(boleto_log.resource, context, after="not-a-date")


class TestGetList:
    """Test suite for lazy enumeration across pages"""

    def test_get_list_yields_every_element_across_pages(self, context):
        """
        Test that enumeration concatenates pages in order until the cursor runs out
        """
        # Arrange
        transport = ScriptedTransport(pages=paged_logs(total=7, page_size=3))
        rest = Rest(transport)

        # Act
        result = [log.id for log in rest.get_list(boleto_log.resource, context)]

        # Assert
        assert result == [f"log-{index}" for index in range(7)]
        assert len(transport.calls) == 3

    def test_get_list_is_lazy_until_consumed(self, context):
        """
        Test that no request is made before the first element is pulled
        """
        # Arrange
        transport = ScriptedTransport(pages=paged_logs(total=7, page_size=3))
        rest = Rest(transport)

        # Act
        iterator = rest.get_list(boleto_log.resource, context)

        # Assert
        assert transport.calls == []
        next(iterator)
        assert len(transport.calls) == 1

    @pytest.mark.parametrize("limit, expected_count, expected_requests", [
        (1, 1, 1),
        (3, 3, 1),
        (4, 4, 2),
        (6, 6, 2),
        (7, 7, 3),
        (50, 7, 3),
    ])
    def test_get_list_with_limit_yields_min_of_limit_and_total_without_extra_requests(
            self, context, limit, expected_count, expected_requests):
        """
        Test that a limit caps the number of elements and no page beyond the limit is requested
        """
        # Arrange
        transport = ScriptedTransport(pages=paged_logs(total=7, page_size=3))
        rest = Rest(transport)

        # Act
        result = list(rest.get_list(boleto_log.resource, context, limit=limit))

        # Assert
        assert len(result) == expected_count
        assert len(transport.calls) == expected_requests

    def test_get_list_requests_page_limit_no_larger_than_remaining(self, context):
        """
        Test that each page asks only for the elements still needed
        """
        # Arrange
        transport = ScriptedTransport(pages=paged_logs(total=7, page_size=3))
        rest = Rest(transport)

        # Act
        list(rest.get_list(boleto_log.resource, context, limit=5))

        # Assert
        assert [call["query"]["limit"] for call in transport.calls] == ["5", "2"]

    def test_get_list_abandoned_mid_sequence_issues_no_further_requests(self, context):
        """
        Test that stopping consumption stops paging
        """
        # Arrange
        transport = ScriptedTransport(pages=paged_logs(total=9, page_size=3))
        rest = Rest(transport)
        iterator = rest.get_list(boleto_log.resource, context)

        # Act
        for _ in range(3):
            next(iterator)
        iterator.close()

        # Assert
        assert len(transport.calls) == 1

    def test_get_list_matches_concatenated_pages(self, context):
        """
        Test that following cursors page by page yields the same elements as enumeration
        """
        # Arrange
        pages = paged_logs(total=8, page_size=3)
        page_rest = Rest(ScriptedTransport(pages=pages))
        list_rest = Rest(ScriptedTransport(pages=pages))

        # Act
        paged_ids = []
        cursor = None
        while True:
            elements, cursor = page_rest.get_page(boleto_log.resource, context, cursor=cursor)
            paged_ids.extend(element.id for element in elements)
            if not cursor:
                break
        listed_ids = [log.id for log in list_rest.get_list(boleto_log.resource, context)]

        # Assert
        assert paged_ids == listed_ids
        assert len(listed_ids) == 8

    def test_get_list_with_empty_result_yields_nothing(self, context):
        """
        Test that an empty first page with no cursor ends enumeration normally
        """
        # Arrange
        transport = ScriptedTransport(pages=paged_logs(total=0, page_size=3))
        rest = Rest(transport)

        # Act
        result = list(rest.get_list(boleto_log.resource, context))

        # Assert
        assert result == []
        assert len(transport.calls) == 1

    def test_get_list_error_on_later_page_surfaces_after_partial_results(self, context):
        """
        Test that a failing page request raises at that point, keeping earlier elements valid
        """
        # Arrange
        pages = paged_logs(total=6, page_size=3)
        transport = ScriptedTransport(pages=pages)
        original_request = transport.request

        def failing_request(method, path, query, ctx):
            if query.get("cursor"):
                raise TransportError("connection reset")
            return original_request(method, path, query, ctx)

        transport.request = failing_request
        rest = Rest(transport)
        received = []

        # Act & Assert
        with pytest.raises(TransportError):
            for log in rest.get_list(boleto_log.resource, context):
                received.append(log.id)

        assert received == ["log-0", "log-1", "log-2"]

    @pytest.mark.parametrize("options", [
        {"after": "2020-13-45"},
        {"before": "yesterday"},
        {"after": 20200403},
        {"limit": 0},
        {"limit": -5},
        {"cursor": "cursor-3"},
    ])
    def test_get_list_with_invalid_options_raises_validation_error_before_iteration(
            self, context, never_called_transport, options):
        """
        Test that invalid options fail when the enumeration is created, not on first iteration
        """
        # Arrange
        rest = Rest(never_called_transport)

        # Act & Assert
        with pytest.raises(ValidationError):
            rest.get_list(boleto_log.resource, context, **options)

    def test_get_list_normalises_datetime_filter_to_date(self, context):
        """
        Test that datetime filters are sent as plain dates
        """
        # Arrange
        transport = ScriptedTransport(pages=paged_logs(total=1, page_size=1))
        rest = Rest(transport)

        # Act
        list(rest.get_list(boleto_log.resource, context, after=datetime(2020, 4, 3, 15, 30)))

        # Assert
        assert transport.calls[0]["query"]["after"] == "2020-04-03"

    def test_concurrent_enumerations_keep_independent_cursors(self, context):
        """
        Test that two interleaved enumerations over the same resource do not interfere
        """
        # Arrange
        transport = ScriptedTransport(pages=paged_logs(total=6, page_size=2))
        rest = Rest(transport)
        first = rest.get_list(boleto_log.resource, context)
        second = rest.get_list(boleto_log.resource, context)

        # Act
        result_first = []
        result_second = []
        for _ in range(6):
            result_first.append(next(first).id)
            result_second.append(next(second).id)

        # Assert
        assert result_first == result_second == [f"log-{index}" for index in range(6)]

import json
from unittest.mock import patch

import pytest

from chargebee import EntityResult, ListResult, MalformedResponseError, Resource
from chargebee.models.results import _ResourceLookup


class TestEntityResult:
    def test_exposes_field(self):
        result = EntityResult(200, json.dumps({"customer": {"id": "c1"}}))

        assert result.status_code == 200
        assert result.get("customer") == {"id": "c1"}
        assert result["customer"] == {"id": "c1"}
        assert "customer" in result
        assert result.kinds() == ["customer"]

    def test_missing_field(self):
        result = EntityResult(200, json.dumps({"customer": {"id": "c1"}}))

        assert result.get("card") is None
        with pytest.raises(KeyError):
            result["card"]

    def test_typed_access(self):
        result = EntityResult(
            201,
            json.dumps({"customer": {"id": "c1", "object": "customer", "email": "a@b.com"}}),
        )

        customer = result.get("customer", Resource)

        assert isinstance(customer, Resource)
        assert customer.id == "c1"
        assert customer.object == "customer"
        assert customer.email == "a@b.com"  # type: ignore[attr-defined]
        assert result.status_code == 201

    def test_decoded_values_are_cached(self):
        result = EntityResult(
            200, json.dumps({"customer": {"id": "c1"}, "card": {"id": "card_1"}})
        )

        with patch("chargebee.models.results.json.loads", wraps=json.loads) as loads:
            first = result.get("customer", Resource)
            second = result.get("customer", Resource)
            result.get("card")
            result.get("card")

        assert first is second
        assert loads.call_count == 1

    def test_body_is_parsed_lazily(self):
        result = EntityResult(200, "OK")

        assert result.body == "OK"
        with pytest.raises(MalformedResponseError):
            result.get("customer")


class TestResourceLookup:
    def test_base_lookup_is_abstract(self):
        with pytest.raises(TypeError):
            _ResourceLookup()  # type: ignore[abstract]


class TestListResult:
    def test_single_page(self):
        result = ListResult(
            200, json.dumps({"list": [{"invoice": {"id": "i1"}}], "next_offset": None})
        )

        assert len(result) == 1
        assert result[0].get("invoice") == {"id": "i1"}
        assert result.next_offset is None
        assert result.has_next_page is False

    def test_cursor_is_opaque(self):
        result = ListResult(
            200, json.dumps({"list": [], "next_offset": '["1517489354000","2"]'})
        )

        assert len(result) == 0
        assert result.next_offset == '["1517489354000","2"]'
        assert result.has_next_page is True

    def test_missing_next_offset_is_last_page(self):
        result = ListResult(200, json.dumps({"list": []}))

        assert result.has_next_page is False

    def test_entry_with_several_kinds(self):
        body = {
            "list": [
                {
                    "subscription": {"id": "s1"},
                    "customer": {"id": "c1"},
                    "card": {"id": "card_1"},
                },
                {"subscription": {"id": "s2"}, "customer": {"id": "c2"}},
            ],
            "next_offset": None,
        }
        result = ListResult(200, json.dumps(body))

        first, second = list(result)
        assert first.kinds() == ["subscription", "customer", "card"]
        assert first.get("card", Resource).id == "card_1"
        assert second.get("customer")["id"] == "c2"
        assert second.get("card") is None
        assert "card" not in second

    def test_malformed_body(self):
        with pytest.raises(MalformedResponseError):
            ListResult(200, "<html></html>").entries

        with pytest.raises(MalformedResponseError):
            ListResult(200, json.dumps({"list": "nope"})).entries

        with pytest.raises(MalformedResponseError):
            ListResult(200, json.dumps({"list": [1, 2]})).entries

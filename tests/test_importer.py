"""
Tests for the bulk import (POST /api/import and the MenuImporter service).
Imports are best-effort: bad sections are reported, good ones are kept.
"""

import pytest

from menuboard.core.exceptions import ValidationFailed
from menuboard.services.menu.importer import collect_item_names, import_menu


def _import(client, auth_headers, payload):
    res = client.post("/api/import", json=payload, headers=auth_headers)
    assert res.status_code == 200, res.text
    return res.json()["results"]


class TestImportEndpoint:

    def test_non_array_items_skips_section_with_error(self, client, auth_headers):
        """A section whose items is not a list is not created and yields one error."""
        payload = [
            {"name": "Drinks", "items": [{"name": "Cola", "price": 3}]},
            {"name": "BadSection", "items": "not-an-array"},
        ]
        results = _import(client, auth_headers, payload)

        assert results["sections"] == 1
        assert results["items"] == 1
        assert len(results["errors"]) == 1
        assert results["errors"][0].startswith("BadSection")

        menu = client.get("/api/menu").json()
        assert [s["name"] for s in menu] == ["Drinks"]
        assert menu[0]["items"][0]["name"] == "Cola"
        assert menu[0]["items"][0]["price"] == 3

    def test_round_trip(self, client, auth_headers):
        items = [
            {"name": "Burger", "price": 5, "description": "Beef",
             "options": [{"name": "Size", "choices": [{"name": "Small", "price": 0},
                                                      {"name": "Large", "price": 2.5}]}]},
            {"name": "Fries", "price": 2.5},
            {"name": "Wings", "price": 7,
             "options": [{"name": "Sauce", "choices": [{"name": "BBQ", "price": 0},
                                                       {"name": "BBQ", "price": 0}]}]},
        ]
        results = _import(client, auth_headers, [{"name": "Fast Food", "items": items}])
        assert results == {"sections": 1, "items": 3, "errors": []}

        section = client.get("/api/menu").json()[0]
        assert section["name"] == "Fast Food"
        assert len(section["items"]) == len(items)
        for got, sent in zip(section["items"], items):
            assert got["name"] == sent["name"]
            assert got["price"] == sent["price"]
            assert got["options"] == sent.get("options", [])

    def test_options_keep_unknown_keys(self, client, auth_headers):
        options = [{"name": "Size", "required": True,
                    "choices": [{"name": "L", "price": 2, "sku": "L1"}]}]
        _import(client, auth_headers, [{"name": "Drinks", "items": [{"name": "Cola", "options": options}]}])

        item = client.get("/api/menu").json()[0]["items"][0]
        assert item["options"] == options

    def test_defaults_for_missing_fields(self, client, auth_headers):
        _import(client, auth_headers, [{"name": "Drinks", "items": [{"name": "Water"}]}])
        item = client.get("/api/menu").json()[0]["items"][0]
        assert item["description"] == ""
        assert item["price"] == 0
        assert item["image_url"] == ""
        assert item["options"] == []
        assert item["available"] is True

    def test_names_seeded_once(self, client, auth_headers):
        client.post("/api/names", json={"name": "Cola"}, headers=auth_headers)
        payload = [
            {"name": "Drinks", "items": [{"name": "Cola", "price": 3}, {"name": "Water"}]},
            {"name": "More drinks", "items": [{"name": "Cola", "price": 4}, {"name": " Juice "}]},
        ]
        results = _import(client, auth_headers, payload)

        assert results["errors"] == []
        names = [row["name"] for row in client.get("/api/names").json()]
        assert names == ["Cola", "Juice", "Water"]

    def test_missing_items_is_empty_section(self, client, auth_headers):
        results = _import(client, auth_headers, [{"name": "Soon"}, {"name": "Later", "items": None}])
        assert results == {"sections": 2, "items": 0, "errors": []}
        assert [s["items"] for s in client.get("/api/menu").json()] == [[], []]

    def test_missing_section_name_uses_placeholder(self, client, auth_headers):
        _import(client, auth_headers, [{"items": [{"name": "Mystery"}]}])
        assert client.get("/api/menu").json()[0]["name"] == "Untitled Section"

    def test_sections_keep_input_order(self, client, auth_headers):
        _import(client, auth_headers, [{"name": "B"}, {"name": "A"}, {"name": "C"}])
        assert [s["name"] for s in client.get("/api/menu").json()] == ["B", "A", "C"]

    def test_bad_item_stops_its_section_but_not_the_next(self, client, auth_headers):
        payload = [
            {"name": "Mains", "items": [
                {"name": "Burger", "price": 5},
                {"name": "Broken", "price": -1},
                {"name": "Never", "price": 1},
            ]},
            {"name": "Drinks", "items": [{"name": "Cola", "price": 3}]},
        ]
        results = _import(client, auth_headers, payload)

        assert results["sections"] == 2
        assert results["items"] == 2
        assert len(results["errors"]) == 1
        assert results["errors"][0].startswith("Mains: item 2")

        menu = client.get("/api/menu").json()
        assert [i["name"] for i in menu[0]["items"]] == ["Burger"]
        assert [i["name"] for i in menu[1]["items"]] == ["Cola"]

    def test_non_object_entries_are_reported(self, client, auth_headers):
        payload = ["oops", {"name": "Drinks", "items": ["cola"]}]
        results = _import(client, auth_headers, payload)
        assert results["sections"] == 1
        assert results["items"] == 0
        assert results["errors"] == [
            "Section #1: section must be an object",
            "Drinks: item 1: item must be an object",
        ]

    def test_invalid_options_are_reported(self, client, auth_headers):
        payload = [{"name": "Mains", "items": [{"name": "Burger", "options": "{nope"}]}]
        results = _import(client, auth_headers, payload)
        assert results["items"] == 0
        assert "options must be valid JSON" in results["errors"][0]

    def test_top_level_must_be_array(self, client, auth_headers):
        res = client.post("/api/import", json={"name": "Drinks", "items": []}, headers=auth_headers)
        assert res.status_code == 400
        assert res.json() == {"error": "Import data must be an array of sections"}
        assert client.get("/api/menu").json() == []

    def test_requires_token(self, client):
        res = client.post("/api/import", json=[{"name": "Drinks"}])
        assert res.status_code == 401
        assert client.get("/api/menu").json() == []

    def test_response_envelope(self, client, auth_headers):
        res = client.post("/api/import", json=[], headers=auth_headers)
        assert res.json() == {
            "message": "Import finished",
            "results": {"sections": 0, "items": 0, "errors": []},
        }


class TestImporterService:

    def test_rejects_non_list_before_writing(self, run_db):
        with pytest.raises(ValidationFailed):
            run_db(import_menu, {"name": "Drinks"})

    def test_collect_item_names(self):
        payload = [
            {"items": [{"name": "Cola"}, {"name": ""}, {"name": "  Cola "}, {"price": 2}]},
            {"items": "nope"},
            "nope",
            {"items": [{"name": "Water"}, "x", {"name": 7}]},
        ]
        assert collect_item_names(payload) == ["Cola", "Water"]

"""
Tests for the grouped menu read path (GET /api/menu).
"""

from menuboard.models.menu import Item, Section
from menuboard.services.menu import get_grouped_menu


class TestGroupedMenu:

    def test_empty_menu(self, client):
        res = client.get("/api/menu")
        assert res.status_code == 200
        assert res.json() == []

    def test_sections_ordered_by_display_order_then_id(self, client, make_section):
        make_section("Desserts", display_order=2)
        make_section("Starters", display_order=0)
        make_section("Mains", display_order=1)
        make_section("Sides", display_order=1)

        names = [s["name"] for s in client.get("/api/menu").json()]
        assert names == ["Starters", "Mains", "Sides", "Desserts"]

    def test_empty_section_is_kept(self, client, make_section, make_item):
        mains = make_section("Mains")
        make_section("Desserts")
        make_item(mains["id"], "Burger", 5)

        menu = client.get("/api/menu").json()
        assert [s["name"] for s in menu] == ["Mains", "Desserts"]
        assert menu[1]["items"] == []

    def test_items_sorted_by_insertion(self, client, make_section, make_item):
        mains = make_section("Mains")
        drinks = make_section("Drinks")
        first = make_item(mains["id"], "Zucchini fries", 4)
        make_item(drinks["id"], "Cola", 3)
        second = make_item(mains["id"], "Apple pie", 6)

        menu = client.get("/api/menu").json()
        ids = [item["id"] for item in menu[0]["items"]]
        assert ids == [first["id"], second["id"]]
        assert ids == sorted(ids)

    def test_item_shape(self, client, make_section, make_item):
        mains = make_section("Mains")
        options = [{"name": "Size", "choices": [{"name": "Large", "price": 1.5}]}]
        make_item(mains["id"], "Burger", 5, description="Beef", options=options)

        item = client.get("/api/menu").json()[0]["items"][0]
        assert item["name"] == "Burger"
        assert item["description"] == "Beef"
        assert item["price"] == 5
        assert item["available"] is True
        assert item["options"] == options

    def test_malformed_options_read_as_empty(self, client, run_db):
        """A broken options column must not break the menu."""
        async def seed(db):
            section = Section(name="Mains", display_order=0)
            db.add(section)
            await db.flush()
            db.add(Item(section_id=section.id, name="Broken", price=4, options="{not json"))
            db.add(Item(section_id=section.id, name="Odd", price=4, options='{"name": "Size"}'))
            await db.commit()

        run_db(seed)
        items = client.get("/api/menu").json()[0]["items"]
        assert [item["options"] for item in items] == [[], []]

    def test_service_returns_models(self, make_section, make_item, run_db):
        mains = make_section("Mains")
        make_item(mains["id"], "Burger", 5)

        menu = run_db(get_grouped_menu)
        assert menu[0].name == "Mains"
        assert menu[0].items[0].name == "Burger"


class TestMenuSearchEndpoint:

    def test_query_filters_menu(self, client, make_section, make_item):
        mains = make_section("Mains")
        drinks = make_section("Drinks")
        make_item(mains["id"], "Burger", 5)
        make_item(mains["id"], "Cheeseburger", 15)
        make_item(drinks["id"], "Cola", 3)

        menu = client.get("/api/menu", params={"q": "5"}).json()
        assert [s["name"] for s in menu] == ["Mains"]
        assert [i["name"] for i in menu[0]["items"]] == ["Burger"]

    def test_blank_query_returns_everything(self, client, make_section):
        make_section("Mains")
        assert len(client.get("/api/menu", params={"q": "  "}).json()) == 1

"""Application tests for item creation, update and deletion."""

import pytest
from factories import make_category, make_item, reload_item
from protean import current_domain

from pos.catalogue import service
from pos.catalogue.item.item import Item
from pos.catalogue.item.management import CreateItem, UpdateItem
from pos.errors import BlobStoreFailure, CategoryNotFound, InvalidRequest, ItemNotFound
from pos.inventory.locks import item_locks
from pos.media.storage import get_blob_store


def _create_item(category, **overrides):
    defaults = {
        "name": "Croissant",
        "price": 2.25,
        "category_id": category.id,
        "stock": 12,
    }
    defaults.update(overrides)
    return current_domain.process(CreateItem(**defaults), asynchronous=False)


class TestCreateItem:
    def test_create_persists_item(self):
        category = make_category("Bakery")
        item = current_domain.repository_for(Item).get(_create_item(category))
        assert item.name == "Croissant"
        assert item.stock == 12

    def test_absent_stock_becomes_zero(self):
        category = make_category()
        item = current_domain.repository_for(Item).get(_create_item(category, stock=None))
        assert item.stock == 0

    def test_unknown_category(self):
        with pytest.raises(CategoryNotFound):
            current_domain.process(
                CreateItem(name="Croissant", price=2.0, category_id="nope"),
                asynchronous=False,
            )

    def test_missing_category(self):
        with pytest.raises(InvalidRequest):
            current_domain.process(CreateItem(name="Croissant", price=2.0), asynchronous=False)

    @pytest.mark.parametrize(
        "overrides",
        [{"name": ""}, {"price": 0.0}, {"price": -1.0}, {"stock": -3}],
    )
    def test_invalid_fields_rejected(self, overrides):
        category = make_category()
        with pytest.raises(InvalidRequest):
            _create_item(category, **overrides)


class TestUpdateItem:
    def test_partial_update(self):
        item = make_item(name="Latte", price=3.5, stock=20)
        current_domain.process(UpdateItem(item_id=item.id, price=3.9), asynchronous=False)
        updated = reload_item(item)
        assert updated.price == 3.9
        assert updated.name == "Latte"
        assert updated.stock == 20

    def test_update_stock(self):
        item = make_item(stock=20)
        updated = service.update_item(item.id, stock=4)
        assert updated.stock == 4

    def test_update_releases_lock(self):
        item = make_item()
        service.update_item(item.id, name="Cortado")
        assert len(item_locks) == 0

    def test_move_to_unknown_category(self):
        item = make_item()
        with pytest.raises(CategoryNotFound):
            service.update_item(item.id, category_id="missing")

    def test_update_unknown_item(self):
        with pytest.raises(ItemNotFound):
            service.update_item("missing", name="Nothing")

    def test_new_image_replaces_url(self):
        item = make_item()
        updated = service.update_item(item.id, image=service.ImageUpload(data=b"jpg"))
        assert updated.img_url in get_blob_store().blobs

    def test_new_image_removes_previous_blob(self):
        store = get_blob_store()
        old_url = store.upload(b"old")
        item = make_item(img_url=old_url)

        updated = service.update_item(item.id, image=service.ImageUpload(data=b"new"))

        assert updated.img_url != old_url
        assert old_url not in store.blobs
        assert updated.img_url in store.blobs

    def test_update_without_image_keeps_blob(self):
        store = get_blob_store()
        url = store.upload(b"img")
        item = make_item(img_url=url)

        updated = service.update_item(item.id, name="Renamed")

        assert updated.img_url == url
        assert url in store.blobs

    def test_failed_cleanup_keeps_update(self):
        store = get_blob_store()
        old_url = store.upload(b"old")
        item = make_item(img_url=old_url)
        store.fail_deletes = True

        updated = service.update_item(item.id, image=service.ImageUpload(data=b"new"))

        assert updated.img_url != old_url
        assert old_url in store.blobs


class TestListItems:
    def test_filter_by_category(self):
        drinks = make_category("Drinks")
        bakery = make_category("Bakery")
        make_item(drinks, name="Latte")
        make_item(bakery, name="Bagel")

        assert [i.name for i in service.list_items(bakery.id)] == ["Bagel"]
        assert [i.name for i in service.list_items()] == ["Bagel", "Latte"]


class TestDeleteItem:
    def test_delete_removes_item_and_image(self):
        store = get_blob_store()
        url = store.upload(b"img")
        item = make_item(img_url=url)

        service.delete_item(item.id)

        assert service.list_items() == []
        assert url not in store.blobs

    def test_delete_unknown_item(self):
        with pytest.raises(ItemNotFound):
            service.delete_item("missing")

    def test_blob_failure_surfaces(self):
        store = get_blob_store()
        item = make_item(img_url=store.upload(b"img"))
        store.fail_deletes = True

        with pytest.raises(BlobStoreFailure):
            service.delete_item(item.id)
        assert reload_item(item).name == item.name

"""Application tests for category creation, listing and deletion."""

import pytest
from factories import make_category, make_item
from protean import current_domain

from pos.catalogue import service
from pos.catalogue.category.category import Category
from pos.catalogue.category.management import CreateCategory, DeleteCategory
from pos.errors import BlobStoreFailure, CategoryNotFound, InvalidRequest
from pos.media.storage import get_blob_store


class TestCreateCategory:
    def test_create_returns_id(self):
        category_id = current_domain.process(CreateCategory(name="Snacks"), asynchronous=False)
        category = current_domain.repository_for(Category).get(category_id)
        assert category.name == "Snacks"

    def test_blank_name_rejected(self):
        with pytest.raises(InvalidRequest):
            current_domain.process(CreateCategory(name="   "), asynchronous=False)

    def test_create_with_image_stores_blob(self):
        image = service.ImageUpload(data=b"png-bytes", filename="snacks.png", content_type="image/png")
        summary = service.create_category("Snacks", image=image)
        assert summary.category.img_url in get_blob_store().blobs

    def test_failed_upload_saves_without_image(self):
        get_blob_store().fail_uploads = True
        image = service.ImageUpload(data=b"png-bytes", filename="snacks.png")
        summary = service.create_category("Snacks", image=image)
        assert summary.category.img_url is None
        assert current_domain.repository_for(Category).get(summary.category.id).name == "Snacks"


class TestListCategories:
    def test_lists_item_counts(self):
        drinks = make_category("Drinks")
        make_category("Bakery")
        make_item(drinks, name="Latte")
        make_item(drinks, name="Mocha")

        counts = {s.category.name: s.item_count for s in service.list_categories()}
        assert counts == {"Bakery": 0, "Drinks": 2}


class TestDeleteCategory:
    def test_delete_removes_category(self):
        category = make_category()
        current_domain.process(DeleteCategory(category_id=category.id), asynchronous=False)
        assert service.list_categories() == []

    def test_delete_unknown_category(self):
        with pytest.raises(CategoryNotFound):
            current_domain.process(DeleteCategory(category_id="missing"), asynchronous=False)

    def test_delete_refused_while_items_reference_it(self):
        category = make_category()
        make_item(category)
        with pytest.raises(InvalidRequest):
            current_domain.process(DeleteCategory(category_id=category.id), asynchronous=False)
        assert current_domain.repository_for(Category).get(category.id)

    def test_delete_removes_image(self):
        store = get_blob_store()
        url = store.upload(b"img")
        category = make_category(img_url=url)
        service.delete_category(category.id)
        assert url not in store.blobs

    def test_blob_failure_keeps_category(self):
        store = get_blob_store()
        url = store.upload(b"img")
        category = make_category(img_url=url)
        store.fail_deletes = True

        with pytest.raises(BlobStoreFailure):
            service.delete_category(category.id)
        assert current_domain.repository_for(Category).get(category.id)

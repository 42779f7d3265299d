"""Catalogue operations that span the blob store and the domain.

Image uploads happen before the write command runs. A failed upload is
logged and the record is saved without an image. When a record is deleted its
image is removed first, and a failed blob delete keeps the record.
"""

from dataclasses import dataclass

from protean.utils.globals import current_domain

from pos.catalogue.category.category import Category
from pos.catalogue.category.management import CreateCategory, DeleteCategory
from pos.catalogue.item.item import Item
from pos.catalogue.item.management import CreateItem, DeleteItem, UpdateItem, load_item
from pos.errors import BlobStoreFailure
from pos.inventory.locks import item_locks
from pos.media.storage import get_blob_store
from pos.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ImageUpload:
    data: bytes
    filename: str | None = None
    content_type: str | None = None


@dataclass(frozen=True)
class CategorySummary:
    category: Category
    item_count: int


def store_image(image: ImageUpload | None) -> str | None:
    if image is None or not image.data:
        return None
    try:
        return get_blob_store().upload(image.data, filename=image.filename, content_type=image.content_type)
    except BlobStoreFailure as exc:
        logger.warning("image_upload_failed", filename=image.filename, error=exc.message)
        return None


def discard_image(url: str) -> None:
    """Remove a replaced image; the record already points at its successor."""
    try:
        get_blob_store().delete(url)
    except BlobStoreFailure as exc:
        logger.warning("image_delete_failed", url=url, error=exc.message)


def list_categories() -> list[CategorySummary]:
    items = current_domain.repository_for(Item)
    categories = current_domain.repository_for(Category)._dao.query.order_by("name").all().items
    return [CategorySummary(category, items.count_in_category(category.id)) for category in categories]


def create_category(name, description=None, bg_color=None, image: ImageUpload | None = None) -> CategorySummary:
    category_id = current_domain.process(
        CreateCategory(
            name=name,
            description=description,
            bg_color=bg_color,
            img_url=store_image(image),
        ),
        asynchronous=False,
    )
    return CategorySummary(current_domain.repository_for(Category).get(category_id), 0)


def delete_category(category_id) -> None:
    current_domain.process(DeleteCategory(category_id=category_id), asynchronous=False)


def list_items(category_id=None) -> list[Item]:
    return current_domain.repository_for(Item).find_all(category_id=category_id)


def create_item(
    name,
    price,
    category_id,
    description=None,
    stock=None,
    image: ImageUpload | None = None,
) -> Item:
    item_id = current_domain.process(
        CreateItem(
            name=name,
            description=description,
            price=price,
            category_id=category_id,
            stock=stock,
            img_url=store_image(image),
        ),
        asynchronous=False,
    )
    return current_domain.repository_for(Item).get(item_id)


def update_item(item_id, image: ImageUpload | None = None, **changes) -> Item:
    """Apply ``changes`` (name, description, price, category_id, stock) to an item."""
    img_url = store_image(image)
    with item_locks.hold([item_id]):
        previous_url = load_item(item_id).img_url
        current_domain.process(UpdateItem(item_id=item_id, img_url=img_url, **changes), asynchronous=False)

    if img_url and previous_url and previous_url != img_url:
        discard_image(previous_url)
    return current_domain.repository_for(Item).get(item_id)


def delete_item(item_id) -> None:
    with item_locks.hold([item_id]):
        current_domain.process(DeleteItem(item_id=item_id), asynchronous=False)

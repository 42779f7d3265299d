"""Item management: create, update and delete catalogue items.

Updates that touch ``stock`` race with purchases and checkouts, so callers
hold the item's lock around ``UpdateItem`` the same way checkout does.
"""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from pos.catalogue.category.management import load_category
from pos.catalogue.item.item import Item
from pos.domain import pos
from pos.errors import InvalidRequest, ItemNotFound
from pos.media.storage import get_blob_store
from pos.utils.logging import get_logger

logger = get_logger(__name__)


@pos.command(part_of="Item")
class CreateItem:
    name = String(max_length=100)
    description = Text()
    price = Float()
    category_id = Identifier()
    stock = Integer()
    img_url = String(max_length=500)


@pos.command(part_of="Item")
class UpdateItem:
    item_id = Identifier(required=True)
    name = String(max_length=100)
    description = Text()
    price = Float()
    category_id = Identifier()
    stock = Integer()
    img_url = String(max_length=500)


@pos.command(part_of="Item")
class DeleteItem:
    item_id = Identifier(required=True)


def load_item(item_id):
    try:
        return current_domain.repository_for(Item).get(item_id)
    except ObjectNotFoundError:
        raise ItemNotFound(item_id) from None


def _validate_fields(name=None, price=None, stock=None, creating=False):
    if creating or name is not None:
        if not name or not name.strip():
            raise InvalidRequest("name", "Name is required")
    if creating or price is not None:
        if price is None or price <= 0:
            raise InvalidRequest("price", "Price must be greater than 0")
    if stock is not None and stock < 0:
        raise InvalidRequest("stock", "Stock cannot be negative")


@pos.command_handler(part_of=Item)
class ManageItemHandler:
    @handle(CreateItem)
    def create_item(self, command):
        _validate_fields(command.name, command.price, command.stock, creating=True)
        if not command.category_id:
            raise InvalidRequest("category_id", "Category is required")
        load_category(command.category_id)

        item = Item.create(
            name=command.name.strip(),
            description=command.description,
            price=command.price,
            category_id=command.category_id,
            stock=command.stock,
            img_url=command.img_url,
        )
        current_domain.repository_for(Item).add(item)
        logger.info("item_created", item_id=str(item.id), category_id=str(item.category_id))
        return str(item.id)

    @handle(UpdateItem)
    def update_item(self, command):
        _validate_fields(command.name, command.price, command.stock)
        item = load_item(command.item_id)
        if command.category_id and command.category_id != item.category_id:
            load_category(command.category_id)

        item.update_details(
            name=command.name.strip() if command.name else None,
            description=command.description,
            price=command.price,
            category_id=command.category_id,
            stock=command.stock,
            img_url=command.img_url,
        )
        current_domain.repository_for(Item).add(item)
        logger.info("item_updated", item_id=str(item.id), stock=item.stock)

    @handle(DeleteItem)
    def delete_item(self, command):
        item = load_item(command.item_id)
        if item.img_url:
            get_blob_store().delete(item.img_url)

        current_domain.repository_for(Item)._dao.delete(item)
        logger.info("item_deleted", item_id=str(item.id))

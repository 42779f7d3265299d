"""Category management: commands and handlers."""

from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String, Text

from pos.catalogue.category.category import Category
from pos.domain import pos
from pos.errors import CategoryNotFound, InvalidRequest
from pos.media.storage import get_blob_store
from pos.utils.logging import get_logger

logger = get_logger(__name__)


@pos.command(part_of="Category")
class CreateCategory:
    name: String(required=True, max_length=100)
    description: Text()
    bg_color: String(max_length=20)
    img_url: String(max_length=500)


@pos.command(part_of="Category")
class DeleteCategory:
    category_id: Identifier(required=True)


def load_category(category_id):
    from protean.utils.globals import current_domain

    try:
        return current_domain.repository_for(Category).get(category_id)
    except ObjectNotFoundError:
        raise CategoryNotFound(category_id) from None


@pos.command_handler(part_of=Category)
class ManageCategoryHandler:
    @handle(CreateCategory)
    def create_category(self, command):
        from protean.utils.globals import current_domain

        if not command.name or not command.name.strip():
            raise InvalidRequest("name", "Category name is required")

        category = Category.create(
            name=command.name.strip(),
            description=command.description,
            bg_color=command.bg_color,
            img_url=command.img_url,
        )
        current_domain.repository_for(Category).add(category)
        logger.info("category_created", category_id=str(category.id), name=category.name)
        return str(category.id)

    @handle(DeleteCategory)
    def delete_category(self, command):
        from protean.utils.globals import current_domain

        from pos.catalogue.item.item import Item

        category = load_category(command.category_id)

        in_use = current_domain.repository_for(Item).count_in_category(category.id)
        if in_use:
            raise InvalidRequest(
                "category_id",
                f"Category '{category.name}' still has {in_use} item(s)",
            )

        if category.img_url:
            get_blob_store().delete(category.img_url)

        current_domain.repository_for(Category)._dao.delete(category)
        logger.info("category_deleted", category_id=str(category.id))

"""Category aggregate root for grouping menu items."""

from datetime import UTC, datetime

from protean.fields import DateTime, String, Text

from pos.catalogue.category.events import CategoryCreated
from pos.domain import pos


@pos.aggregate
class Category:
    """A named group of items shown as a tile on the POS screen.

    Every item points at exactly one category, so a category cannot be removed
    while items still reference it.
    """

    name: String(required=True, max_length=100)
    description: Text()
    bg_color: String(max_length=20)
    img_url: String(max_length=500)
    created_at: DateTime()
    updated_at: DateTime()

    @classmethod
    def create(cls, name, description=None, bg_color=None, img_url=None):
        now = datetime.now(UTC)
        category = cls(
            name=name,
            description=description,
            bg_color=bg_color,
            img_url=img_url,
            created_at=now,
            updated_at=now,
        )
        category.raise_(
            CategoryCreated(
                category_id=category.id,
                name=name,
                has_image=img_url is not None,
            )
        )
        return category

"""Domain events for the Category aggregate."""

from protean.fields import Boolean, Identifier, String

from pos.domain import pos


@pos.event(part_of="Category")
class CategoryCreated:
    """A new category was added to the catalogue."""

    __version__ = 1

    category_id: Identifier(required=True)
    name: String(required=True)
    has_image: Boolean(default=False)

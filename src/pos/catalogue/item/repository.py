"""Repository for the Item aggregate."""

from pos.catalogue.item.item import Item
from pos.domain import pos

PAGE_SIZE = 500


@pos.repository(part_of=Item)
class ItemRepository:
    def find_all(self, category_id=None) -> list[Item]:
        """All items, optionally restricted to one category, ordered by name."""
        query = self._dao.query.order_by("name")
        if category_id:
            query = query.filter(category_id=str(category_id))

        items = []
        offset = 0
        while True:
            page = query.offset(offset).limit(PAGE_SIZE).all().items
            items.extend(page)
            if len(page) < PAGE_SIZE:
                return items
            offset += PAGE_SIZE

    def count_in_category(self, category_id) -> int:
        return self._dao.query.filter(category_id=str(category_id)).all().total

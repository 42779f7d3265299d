"""Loads every domain element module of the pos domain.

Domain discovery only walks ``pos/`` and its direct subpackages. Aggregates,
handlers and repositories sit one level deeper, so they are imported here to
be registered before ``pos.init()`` resolves them.
"""

from pos.catalogue.category import category, events as category_events, management as category_management  # noqa: F401
from pos.catalogue.item import (  # noqa: F401
    events as item_events,
    item,
    management as item_management,
    repository as item_repository,
)
from pos.inventory import purchase  # noqa: F401
from pos.ordering.order import (  # noqa: F401
    deletion,
    events as order_events,
    order,
    payment,
    placement,
    repository as order_repository,
)

"""Shared builders for catalogue records used across the test layers."""

from protean import current_domain

from pos.catalogue.category.category import Category
from pos.catalogue.item.item import Item


def make_category(name="Drinks", **overrides):
    category = Category.create(name=name, **overrides)
    current_domain.repository_for(Category).add(category)
    return category


def make_item(category=None, name="Latte", price=3.5, stock=20, **overrides):
    category = category or make_category()
    item = Item.create(name=name, price=price, category_id=category.id, stock=stock, **overrides)
    current_domain.repository_for(Item).add(item)
    return item


def reload_item(item):
    return current_domain.repository_for(Item).get(item.id)

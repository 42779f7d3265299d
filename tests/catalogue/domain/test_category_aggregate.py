"""Tests for the Category aggregate."""

import pytest
from protean.exceptions import ValidationError

from pos.catalogue.category.category import Category
from pos.catalogue.category.events import CategoryCreated


class TestCategoryCreation:
    def test_create_sets_fields(self):
        category = Category.create(name="Bakery", description="Fresh daily", bg_color="#ffcc00")
        assert category.name == "Bakery"
        assert category.description == "Fresh daily"
        assert category.bg_color == "#ffcc00"
        assert category.created_at is not None

    def test_create_raises_event(self):
        category = Category.create(name="Bakery", img_url="memory://pos-media/abc")
        event = category._events[0]
        assert isinstance(event, CategoryCreated)
        assert event.name == "Bakery"
        assert event.has_image is True

    def test_name_required(self):
        with pytest.raises(ValidationError):
            Category.create(name=None)

    def test_name_length_limited(self):
        with pytest.raises(ValidationError):
            Category.create(name="x" * 101)

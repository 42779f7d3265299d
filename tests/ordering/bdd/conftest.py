"""Shared BDD fixtures and step definitions for checkout."""

import pytest
from factories import make_category, make_item, reload_item
from pytest_bdd import given, parsers, then

from pos.errors import InvalidRequest


@pytest.fixture()
def catalogue():
    """Items created by the scenario, keyed by name."""
    return {}


@pytest.fixture()
def checkout():
    """The last order placed and the last refusal seen."""
    return {"order": None, "exc": None}


@given(parsers.cfparse('an item "{name}" priced {price:f} with {stock:d} in stock'))
def an_item(catalogue, name, price, stock):
    category = catalogue.get("__category__") or make_category("Menu")
    catalogue["__category__"] = category
    catalogue[name] = make_item(category, name=name, price=price, stock=stock)


@then(parsers.cfparse('"{name}" has {stock:d} in stock'))
def item_stock(catalogue, name, stock):
    assert reload_item(catalogue[name]).stock == stock


@then(parsers.cfparse('the checkout is refused with "{fragment}"'))
def refused(checkout, fragment):
    assert isinstance(checkout["exc"], InvalidRequest)
    assert fragment in str(checkout["exc"].messages)

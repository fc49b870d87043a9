"""Pytest configuration and fixtures."""

import logging

import pytest

from models import SelectionPolicy
from services.lot_collection_service import LotCollection
from tests.fixtures import EXAMPLE_BUYS, buy


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Keep root logger level and handlers from leaking between tests."""
    root = logging.getLogger()
    level, handlers = root.level, root.handlers[:]
    yield
    root.setLevel(level)
    root.handlers[:] = handlers


@pytest.fixture
def fifo_collection() -> LotCollection:
    return LotCollection(SelectionPolicy.FIFO)


@pytest.fixture
def hifo_collection() -> LotCollection:
    return LotCollection(SelectionPolicy.HIFO)


@pytest.fixture(params=[SelectionPolicy.FIFO, SelectionPolicy.HIFO], ids=["fifo", "hifo"])
def any_collection(request) -> LotCollection:
    """A fresh collection under each selection policy."""
    return LotCollection(request.param)


@pytest.fixture
def example_fifo(fifo_collection: LotCollection) -> LotCollection:
    """FIFO collection holding the three example purchases."""
    for on, price, quantity in EXAMPLE_BUYS:
        fifo_collection.buy(buy(on, price, quantity))
    return fifo_collection


@pytest.fixture
def example_hifo(hifo_collection: LotCollection) -> LotCollection:
    """HIFO collection holding the three example purchases."""
    for on, price, quantity in EXAMPLE_BUYS:
        hifo_collection.buy(buy(on, price, quantity))
    return hifo_collection

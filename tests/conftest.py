"""Shared test fixtures."""

from unittest.mock import MagicMock

import pytest

from models import Product, ProductSet
from product_search import ProductSearchService
from resource_names import ResourceLocation
from settings import Settings


@pytest.fixture
def location():
    return ResourceLocation("demo", "us-east1")


@pytest.fixture
def settings():
    return Settings(project_id="demo", region="us-east1")


@pytest.fixture
def api():
    """Service double that records calls instead of reaching Google."""
    return MagicMock(spec=ProductSearchService)


@pytest.fixture
def sample_product_sets():
    return [
        ProductSet(
            name=f"projects/demo/locations/us-east1/productSets/set{i}",
            display_name=f"Set {i}",
            index_time_seconds=1700000000 + i,
            index_time_nanos=i * 1000,
        )
        for i in range(1, 4)
    ]


@pytest.fixture
def sample_product():
    return Product(
        name="projects/demo/locations/us-east1/products/shoe-1",
        display_name="Red Shoe",
        description="Leather running shoe",
        product_category="apparel-v2",
        labels=[("color", "red"), ("style", "sport")],
    )

"""Tests for src/product_search.py"""

import datetime
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest
from google.api_core import exceptions
from google.api_core.datetime_helpers import DatetimeWithNanoseconds
from google.auth.exceptions import DefaultCredentialsError

from errors import RemoteCallError
from models import Product, ProductSet
from product_search import ProductSearchService, _timestamp_parts

SET_PATH = "projects/demo/locations/us-east1/productSets/set1"


def _remote_set(name=SET_PATH, display_name="Demo Set", index_time=None):
    return SimpleNamespace(name=name, display_name=display_name, index_time=index_time)


def _remote_product(product_id, labels=()):
    return SimpleNamespace(
        name=f"projects/demo/locations/us-east1/products/{product_id}",
        display_name=product_id.title(),
        description="desc",
        product_category="homegoods-v2",
        product_labels=[SimpleNamespace(key=k, value=v) for k, v in labels],
    )


@pytest.fixture
def client():
    return MagicMock()


@pytest.fixture
def service(client):
    return ProductSearchService(client)


class TestTimestampParts:
    def test_none_is_zero(self):
        assert _timestamp_parts(None) == (0, 0)

    def test_datetime_with_nanoseconds(self):
        value = DatetimeWithNanoseconds(
            2024, 1, 2, 3, 4, 5, tzinfo=datetime.timezone.utc, nanosecond=123456789
        )
        seconds, nanos = _timestamp_parts(value)
        assert seconds == 1704164645
        assert nanos == 123456789

    def test_protobuf_like(self):
        assert _timestamp_parts(SimpleNamespace(seconds=42, nanos=7)) == (42, 7)

    def test_plain_datetime(self):
        value = datetime.datetime(1970, 1, 1, 0, 0, 10, 5, tzinfo=datetime.timezone.utc)
        assert _timestamp_parts(value) == (10, 5000)


class TestCreateProductSet:
    def test_sends_parent_display_name_and_id(self, service, client, location):
        client.create_product_set.return_value = _remote_set()

        result = service.create_product_set(location, "Demo Set", "set1")

        kwargs = client.create_product_set.call_args.kwargs
        assert kwargs["parent"] == "projects/demo/locations/us-east1"
        assert kwargs["product_set_id"] == "set1"
        assert kwargs["product_set"].display_name == "Demo Set"
        assert result == ProductSet(name=SET_PATH, display_name="Demo Set")

    def test_translates_api_errors(self, service, client, location):
        client.create_product_set.side_effect = exceptions.AlreadyExists("set1 exists")

        with pytest.raises(RemoteCallError) as excinfo:
            service.create_product_set(location, "Demo Set", "set1")

        assert excinfo.value.code == 409
        assert excinfo.value.message == "set1 exists"


class TestGetProductSet:
    def test_uses_full_name(self, service, client, location):
        client.get_product_set.return_value = _remote_set(
            index_time=SimpleNamespace(seconds=100, nanos=5)
        )

        result = service.get_product_set(location.product_set("set1"))

        client.get_product_set.assert_called_once_with(name=SET_PATH)
        assert result.index_time_seconds == 100
        assert result.index_time_nanos == 5

    def test_not_found(self, service, client, location):
        client.get_product_set.side_effect = exceptions.NotFound("Product set not found")

        with pytest.raises(RemoteCallError) as excinfo:
            service.get_product_set(location.product_set("missing"))

        assert excinfo.value.code == 404
        assert str(excinfo.value) == "404 Product set not found"

    def test_retry_error_has_no_code(self, service, client, location):
        client.get_product_set.side_effect = exceptions.RetryError("Deadline exceeded", cause=None)

        with pytest.raises(RemoteCallError) as excinfo:
            service.get_product_set(location.product_set("set1"))

        assert excinfo.value.code is None
        assert str(excinfo.value) == "Deadline exceeded"

    def test_unrelated_errors_propagate(self, service, client, location):
        client.get_product_set.side_effect = KeyError("bug")

        with pytest.raises(KeyError):
            service.get_product_set(location.product_set("set1"))


class TestListProductSets:
    def test_is_lazy(self, service, client, location):
        client.list_product_sets.return_value = iter([_remote_set()])

        items = service.list_product_sets(location)
        client.list_product_sets.assert_not_called()

        first = next(items)
        client.list_product_sets.assert_called_once_with(parent="projects/demo/locations/us-east1")
        assert first.name == SET_PATH

    def test_yields_in_order(self, service, client, location):
        names = [f"projects/demo/locations/us-east1/productSets/s{i}" for i in range(3)]
        client.list_product_sets.return_value = iter([_remote_set(name=n) for n in names])

        assert [ps.name for ps in service.list_product_sets(location)] == names

    def test_error_while_paging(self, service, client, location):
        def pages():
            yield _remote_set()
            raise exceptions.ServiceUnavailable("backend down")

        client.list_product_sets.return_value = pages()
        items = service.list_product_sets(location)

        assert next(items).name == SET_PATH
        with pytest.raises(RemoteCallError, match="backend down"):
            next(items)


class TestListProducts:
    def test_converts_products(self, service, client, location):
        client.list_products_in_product_set.return_value = iter(
            [_remote_product("lamp", labels=[("color", "white")])]
        )

        products = list(service.list_products(location.product_set("set1")))

        client.list_products_in_product_set.assert_called_once_with(name=SET_PATH)
        assert products == [
            Product(
                name="projects/demo/locations/us-east1/products/lamp",
                display_name="Lamp",
                description="desc",
                product_category="homegoods-v2",
                labels=[("color", "white")],
            )
        ]


class TestAddAndDelete:
    def test_add_product_to_set(self, service, client, location):
        service.add_product_to_set(location.product_set("set1"), location.product("lamp"))

        client.add_product_to_product_set.assert_called_once_with(
            name=SET_PATH, product="projects/demo/locations/us-east1/products/lamp"
        )

    def test_delete_product_set(self, service, client, location):
        service.delete_product_set(location.product_set("set1"))

        client.delete_product_set.assert_called_once_with(name=SET_PATH)

    def test_delete_permission_denied(self, service, client, location):
        client.delete_product_set.side_effect = exceptions.PermissionDenied("nope")

        with pytest.raises(RemoteCallError) as excinfo:
            service.delete_product_set(location.product_set("set1"))

        assert excinfo.value.code == 403


class TestClientConstruction:
    def test_client_created_lazily(self):
        with patch("product_search.vision_v1.ProductSearchClient") as factory:
            service = ProductSearchService()
            factory.assert_not_called()

            assert service.client is factory.return_value
            assert service.client is factory.return_value
            factory.assert_called_once_with()

    def test_missing_credentials(self, location):
        with patch(
            "product_search.vision_v1.ProductSearchClient",
            side_effect=DefaultCredentialsError("Could not find default credentials"),
        ):
            service = ProductSearchService()
            with pytest.raises(RemoteCallError, match="default credentials"):
                service.get_product_set(location.product_set("set1"))

"""Product Search service wrapper.

`ProductSearchService` is the only object that talks to Google Cloud Vision.
Commands receive it as a parameter, which lets tests substitute a double for
the whole remote side.

Failures from the client library (API errors, exhausted retries, missing or
invalid credentials) are re-raised as `RemoteCallError`.
"""
from contextlib import contextmanager
import calendar
import logging
from typing import Any, Iterator, Optional, Tuple

from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud import vision_v1

from errors import RemoteCallError
from models import Product, ProductSet
from resource_names import ProductRef, ProductSetRef, ResourceLocation


logger = logging.getLogger(__name__)


def _status_code(exc: Exception) -> Optional[int]:
    code = getattr(exc, "code", None)
    if code is None:
        return None
    try:
        return int(code)
    except (TypeError, ValueError):
        return None


@contextmanager
def _remote_call(operation: str, resource: str):
    logger.debug("%s %s", operation, resource)
    try:
        yield
    except (GoogleAPIError, GoogleAuthError) as exc:
        message = getattr(exc, "message", None) or str(exc)
        raise RemoteCallError(message, code=_status_code(exc)) from exc


def _timestamp_parts(value: Any) -> Tuple[int, int]:
    """Split a protobuf timestamp (or the datetime proto-plus maps it to)
    into whole seconds and nanoseconds. Unset timestamps are (0, 0)."""
    if value is None:
        return 0, 0
    if hasattr(value, "timestamp_pb"):
        pb = value.timestamp_pb()
        return pb.seconds, pb.nanos
    if hasattr(value, "seconds"):
        return int(value.seconds), int(value.nanos)
    return calendar.timegm(value.utctimetuple()), value.microsecond * 1000


def _to_product_set(remote: Any) -> ProductSet:
    seconds, nanos = _timestamp_parts(remote.index_time)
    return ProductSet(
        name=remote.name,
        display_name=remote.display_name,
        index_time_seconds=seconds,
        index_time_nanos=nanos,
    )


def _to_product(remote: Any) -> Product:
    return Product(
        name=remote.name,
        display_name=remote.display_name,
        description=remote.description,
        product_category=remote.product_category,
        labels=[(label.key, label.value) for label in remote.product_labels],
    )


class ProductSearchService:
    """Product set operations backed by `vision_v1.ProductSearchClient`.

    The client is created on first use so that building the service never
    touches credentials.
    """

    def __init__(self, client: Optional[Any] = None):
        self._client = client

    @property
    def client(self) -> Any:
        if self._client is None:
            with _remote_call("connect", "ProductSearchClient"):
                self._client = vision_v1.ProductSearchClient()
        return self._client

    def create_product_set(
        self, location: ResourceLocation, display_name: str, product_set_id: str
    ) -> ProductSet:
        with _remote_call("create_product_set", location.path):
            response = self.client.create_product_set(
                parent=location.path,
                product_set=vision_v1.ProductSet(display_name=display_name),
                product_set_id=product_set_id,
            )
            return _to_product_set(response)

    def list_product_sets(self, location: ResourceLocation) -> Iterator[ProductSet]:
        """Yield every product set under `location`, fetching pages as needed."""
        with _remote_call("list_product_sets", location.path):
            for remote in self.client.list_product_sets(parent=location.path):
                yield _to_product_set(remote)

    def get_product_set(self, ref: ProductSetRef) -> ProductSet:
        with _remote_call("get_product_set", ref.path):
            return _to_product_set(self.client.get_product_set(name=ref.path))

    def list_products(self, set_ref: ProductSetRef) -> Iterator[Product]:
        """Yield every product in a product set, fetching pages as needed."""
        with _remote_call("list_products_in_product_set", set_ref.path):
            for remote in self.client.list_products_in_product_set(name=set_ref.path):
                yield _to_product(remote)

    def add_product_to_set(self, set_ref: ProductSetRef, product_ref: ProductRef) -> None:
        with _remote_call("add_product_to_product_set", set_ref.path):
            self.client.add_product_to_product_set(
                name=set_ref.path, product=product_ref.path
            )

    def delete_product_set(self, ref: ProductSetRef) -> None:
        with _remote_call("delete_product_set", ref.path):
            self.client.delete_product_set(name=ref.path)


__all__ = ["ProductSearchService"]

"""Text formatting shared by the product set commands."""

from typing import List

from models import Product, ProductSet
from resource_names import resource_id


def format_product_set(product_set: ProductSet) -> List[str]:
    return [
        f"Product set name: {product_set.name}",
        f"Product set id: {resource_id(product_set.name)}",
        f"Product set display name: {product_set.display_name}",
        "Product set index time:",
        f"\tseconds: {product_set.index_time_seconds}",
        f"\tnanos: {product_set.index_time_nanos}",
    ]


def format_labels(product: Product) -> str:
    return "[" + ", ".join(f"{key}={value}" for key, value in product.labels) + "]"


def format_product(product: Product) -> List[str]:
    return [
        f"Product name: {product.name}",
        f"Product id: {resource_id(product.name)}",
        f"Product display name: {product.display_name}",
        f"Product description: {product.description}",
        f"Product category: {product.product_category}",
        f"Product labels: {format_labels(product)}",
        "",
    ]

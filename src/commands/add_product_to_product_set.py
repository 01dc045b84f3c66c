"""add_product_to_product_set command - Add an existing product to a product set."""

from commands.base import BaseCommand
from product_search import ProductSearchService
from resource_names import ResourceLocation


class AddProductToProductSetCommand(BaseCommand):
    params = ("productSetId", "productId")

    @property
    def name(self) -> str:
        return "add_product_to_product_set"

    @property
    def help_text(self) -> str:
        return "Add an existing product to a product set"

    def execute(
        self,
        api: ProductSearchService,
        location: ResourceLocation,
        product_set_id: str,
        product_id: str,
    ) -> None:
        api.add_product_to_set(location.product_set(product_set_id), location.product(product_id))
        print("Product added to product set.")

"""create_product_set command - Create a product set in the configured location."""

from commands.base import BaseCommand
from product_search import ProductSearchService
from resource_names import ResourceLocation


class CreateProductSetCommand(BaseCommand):
    params = ("productSetId", "productSetDisplayName")

    @property
    def name(self) -> str:
        return "create_product_set"

    @property
    def help_text(self) -> str:
        return "Create a new product set"

    def execute(
        self,
        api: ProductSearchService,
        location: ResourceLocation,
        product_set_id: str,
        display_name: str,
    ) -> None:
        product_set = api.create_product_set(location, display_name, product_set_id)
        print(f"Product set name: {product_set.name}")

"""list_products_in_product_set command - List the products in a product set."""

from commands.base import BaseCommand
from commands.display import format_product
from product_search import ProductSearchService
from resource_names import ResourceLocation


class ListProductsInProductSetCommand(BaseCommand):
    params = ("productSetId",)

    @property
    def name(self) -> str:
        return "list_products_in_product_set"

    @property
    def help_text(self) -> str:
        return "List the products in a product set"

    def execute(self, api: ProductSearchService, location: ResourceLocation, product_set_id: str) -> None:
        for product in api.list_products(location.product_set(product_set_id)):
            print("\n".join(format_product(product)), flush=True)

"""get_product_set command - Show one product set."""

from commands.base import BaseCommand
from commands.display import format_product_set
from product_search import ProductSearchService
from resource_names import ResourceLocation


class GetProductSetCommand(BaseCommand):
    params = ("productSetId",)

    @property
    def name(self) -> str:
        return "get_product_set"

    @property
    def help_text(self) -> str:
        return "Show a product set's metadata"

    def execute(self, api: ProductSearchService, location: ResourceLocation, product_set_id: str) -> None:
        product_set = api.get_product_set(location.product_set(product_set_id))
        print("\n".join(format_product_set(product_set)))

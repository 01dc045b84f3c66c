"""list_product_sets command - List every product set in the configured location."""

from commands.base import BaseCommand
from commands.display import format_product_set
from product_search import ProductSearchService
from resource_names import ResourceLocation


class ListProductSetsCommand(BaseCommand):
    @property
    def name(self) -> str:
        return "list_product_sets"

    @property
    def help_text(self) -> str:
        return "List all product sets"

    def execute(self, api: ProductSearchService, location: ResourceLocation) -> None:
        for product_set in api.list_product_sets(location):
            print("\n".join(format_product_set(product_set)), flush=True)

"""delete_product_set command - Delete a product set. Its products are kept."""

from commands.base import BaseCommand
from product_search import ProductSearchService
from resource_names import ResourceLocation


class DeleteProductSetCommand(BaseCommand):
    params = ("productSetId",)

    @property
    def name(self) -> str:
        return "delete_product_set"

    @property
    def help_text(self) -> str:
        return "Delete a product set (products inside are not deleted)"

    def execute(self, api: ProductSearchService, location: ResourceLocation, product_set_id: str) -> None:
        api.delete_product_set(location.product_set(product_set_id))
        print("Product set deleted")

"""Resource name helpers for ProductSetManager.

Product Search resources are addressed by hierarchical names:

- projects/{project}/locations/{region}
- projects/{project}/locations/{region}/productSets/{product_set_id}
- projects/{project}/locations/{region}/products/{product_id}

Names are built by plain interpolation. Ids are not escaped or validated;
whatever the caller passes ends up in the path.
"""
from dataclasses import dataclass


def build_location_path(project: str, region: str) -> str:
    """Return the parent path that scopes product sets and products."""
    return f"projects/{project}/locations/{region}"


def build_product_set_path(project: str, region: str, product_set_id: str) -> str:
    """Return the full resource name of a product set."""
    return f"{build_location_path(project, region)}/productSets/{product_set_id}"


def build_product_path(project: str, region: str, product_id: str) -> str:
    """Return the full resource name of a product."""
    return f"{build_location_path(project, region)}/products/{product_id}"


def resource_id(name: str) -> str:
    """Return the trailing segment of a resource name."""
    return name.rsplit("/", 1)[-1]


@dataclass(frozen=True)
class ResourceLocation:
    """The (project, region) pair all resource paths live under."""
    project_id: str
    region: str

    @property
    def path(self) -> str:
        return build_location_path(self.project_id, self.region)

    def product_set(self, product_set_id: str) -> "ProductSetRef":
        return ProductSetRef(self, product_set_id)

    def product(self, product_id: str) -> "ProductRef":
        return ProductRef(self, product_id)


@dataclass(frozen=True)
class ProductSetRef:
    location: ResourceLocation
    product_set_id: str

    @property
    def path(self) -> str:
        return build_product_set_path(
            self.location.project_id, self.location.region, self.product_set_id
        )


@dataclass(frozen=True)
class ProductRef:
    location: ResourceLocation
    product_id: str

    @property
    def path(self) -> str:
        return build_product_path(
            self.location.project_id, self.location.region, self.product_id
        )


__all__ = [
    "ResourceLocation",
    "ProductSetRef",
    "ProductRef",
    "build_location_path",
    "build_product_set_path",
    "build_product_path",
    "resource_id",
]

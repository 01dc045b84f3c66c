"""
Product Search data models.

Read-only views of the entities returned by the remote service.
No business logic - only data structure definitions.
"""

from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass
class ProductSet:
    """A named collection of products that visual search queries run against."""
    name: str
    display_name: str = ""
    index_time_seconds: int = 0
    index_time_nanos: int = 0


@dataclass
class Product:
    """A catalog item with reference images."""
    name: str
    display_name: str = ""
    description: str = ""
    product_category: str = ""
    labels: List[Tuple[str, str]] = field(default_factory=list)

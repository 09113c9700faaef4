"""In-memory catalog provider."""
import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from ordergen.core.exceptions import CatalogError
from ordergen.services.catalog.base import (
    Catalog,
    CatalogProvider,
    CategorySpec,
    PropertySpec,
)

logger = logging.getLogger(__name__)


DEFAULT_CATALOG = Catalog(
    categories=[
        CategorySpec(
            name="Burger",
            properties=[
                PropertySpec(key="Size", values=["Small", "Large"]),
                PropertySpec(key="Extras", values=["Cheese", "Bacon", "Lettuce"]),
            ],
        ),
        CategorySpec(
            name="Pizza",
            properties=[
                PropertySpec(key="Size", values=["Small", "Medium", "Large"]),
                PropertySpec(key="Toppings", values=["Pepperoni", "Mushrooms", "Olives"]),
                PropertySpec(key="Crust", values=["Thin", "Thick"]),
            ],
        ),
        CategorySpec(
            name="Shake",
            properties=[
                PropertySpec(key="Flavor", values=["Chocolate", "Vanilla", "Strawberry"]),
                PropertySpec(key="Size", values=["Small", "Medium", "Large"]),
            ],
        ),
        CategorySpec(
            name="Salad",
            properties=[
                PropertySpec(key="Dressing", values=["Ranch", "Caesar", "Balsamic"]),
                PropertySpec(key="Protein", values=["Chicken", "Tofu", "None"]),
            ],
        ),
        CategorySpec(
            name="Pasta",
            properties=[
                PropertySpec(key="Type", values=["Spaghetti", "Fettuccine", "Penne"]),
                PropertySpec(key="Sauce", values=["Marinara", "Alfredo", "Pesto"]),
            ],
        ),
    ],
)


class InMemoryCatalogProvider(CatalogProvider):
    """In-memory catalog provider using YAML configuration."""

    def __init__(self, catalog_file: Optional[str] = None):
        """Initialize with optional catalog file path."""
        if catalog_file is None:
            catalog_file = Path(__file__).parent / "data" / "catalog.yaml"
        self.catalog_file = Path(catalog_file)
        self._catalog: Optional[Catalog] = None

    def _load_catalog(self) -> Catalog:
        """Load catalog from YAML file."""
        if self._catalog is None:
            if not self.catalog_file.exists():
                logger.warning(
                    f"[CATALOG] Catalog file {self.catalog_file} not found, using built-in catalog"
                )
                self._catalog = DEFAULT_CATALOG
            else:
                with open(self.catalog_file, "r") as f:
                    try:
                        data = yaml.safe_load(f) or {}
                    except yaml.YAMLError as e:
                        raise CatalogError(
                            f"Invalid YAML in catalog file {self.catalog_file}: {e}"
                        ) from e
                if not isinstance(data, dict):
                    raise CatalogError(
                        f"Catalog file {self.catalog_file} must contain a mapping"
                    )
                try:
                    self._catalog = Catalog(**data)
                except ValidationError as e:
                    raise CatalogError(
                        f"Invalid catalog in {self.catalog_file}: {e}"
                    ) from e
                logger.info(
                    f"[CATALOG] Loaded {len(self._catalog.categories)} categories "
                    f"from {self.catalog_file}"
                )
        return self._catalog

    def get_catalog(self) -> Catalog:
        """Get the full catalog."""
        return self._load_catalog()

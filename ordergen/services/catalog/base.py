"""Catalog models and provider interface."""
from abc import ABC, abstractmethod
from typing import List, Optional

from pydantic import BaseModel, Field


class PropertySpec(BaseModel):
    """A property key and the values it may take."""

    key: str
    values: List[str] = Field(min_length=1)


class CategorySpec(BaseModel):
    """A food category and the properties its items carry."""

    name: str
    properties: List[PropertySpec] = []


class Catalog(BaseModel):
    """Food categories with their property vocabularies."""

    categories: List[CategorySpec] = Field(min_length=1)
    # Used for any category the catalog does not know
    default_properties: List[PropertySpec] = [
        PropertySpec(key="Custom", values=["Unknown item"]),
    ]

    @property
    def category_names(self) -> List[str]:
        """Names of all known categories, in catalog order."""
        return [category.name for category in self.categories]

    def get_category(self, name: str) -> Optional[CategorySpec]:
        """Get a category by exact name, falling back to a case-insensitive match."""
        for category in self.categories:
            if category.name == name:
                return category
        name_lower = name.lower().strip()
        for category in self.categories:
            if category.name.lower() == name_lower:
                return category
        return None

    def properties_for(self, name: str) -> List[PropertySpec]:
        """Get the property vocabulary for a category (default row if unknown)."""
        category = self.get_category(name)
        if category is None:
            return self.default_properties
        return category.properties


class CatalogProvider(ABC):
    """Abstract base class for catalog providers."""

    @abstractmethod
    def get_catalog(self) -> Catalog:
        """Get the full catalog."""
        pass

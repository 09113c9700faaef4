"""Order models."""
from datetime import datetime
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field

# Field aliases follow the consuming service's JSON contract
_MODEL_CONFIG = ConfigDict(populate_by_name=True, frozen=True)


class ItemProperty(BaseModel):
    """A single attribute of an order item, such as its size."""

    model_config = _MODEL_CONFIG

    key: str = Field(alias="Key")
    value: str = Field(alias="Value")


class OrderItem(BaseModel):
    """One food product within an order."""

    model_config = _MODEL_CONFIG

    name: str = Field(alias="Name")
    properties: List[ItemProperty] = Field(default_factory=list, alias="Properties")


class Order(BaseModel):
    """Synthetic purchase record sent to the order endpoint."""

    model_config = _MODEL_CONFIG

    id: Union[int, str] = Field(alias="Id")
    customer_name: str = Field(alias="CustomerName")
    timestamp: datetime = Field(alias="Timestamp")
    users_id: int = Field(alias="Users_id")
    items: List[OrderItem] = Field(default_factory=list, alias="Items")

    def to_json(self) -> str:
        """Serialize the order as wire JSON."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, data: Union[str, bytes]) -> "Order":
        """Parse an order from wire JSON."""
        return cls.model_validate_json(data)

    def get_summary(self) -> str:
        """Get a one-line text summary of the order items."""
        parts = []
        for item in self.items:
            props = ", ".join(f"{p.key}: {p.value}" for p in item.properties)
            parts.append(f"{item.name} ({props})" if props else item.name)
        return "; ".join(parts)

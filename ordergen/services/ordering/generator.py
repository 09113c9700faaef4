"""Random order generation."""
import logging
import random
from datetime import datetime
from typing import List, Optional

from faker import Faker

from ordergen.services.catalog.base import Catalog
from ordergen.services.catalog.in_memory_catalog import DEFAULT_CATALOG
from ordergen.services.ordering.ids import CounterIdStrategy, OrderIdStrategy
from ordergen.services.ordering.models import ItemProperty, Order, OrderItem

logger = logging.getLogger(__name__)

MIN_ITEMS_PER_ORDER = 1
MAX_ITEMS_PER_ORDER = 3


def generate_properties(
    category: str,
    catalog: Optional[Catalog] = None,
    rng: Optional[random.Random] = None,
) -> List[ItemProperty]:
    """
    Generate a random property set for a food category.

    Each property key of the category gets one value chosen uniformly from
    its allowed values. Unknown categories get the catalog's default row.
    """
    catalog = catalog or DEFAULT_CATALOG
    rng = rng or random
    return [
        ItemProperty(key=prop.key, value=rng.choice(prop.values))
        for prop in catalog.properties_for(category)
    ]


def generate_item(
    catalog: Optional[Catalog] = None,
    rng: Optional[random.Random] = None,
) -> OrderItem:
    """Pick a random category and attach a random property set to it."""
    catalog = catalog or DEFAULT_CATALOG
    rng = rng or random
    name = rng.choice(catalog.category_names)
    return OrderItem(name=name, properties=generate_properties(name, catalog, rng))


def generate_items(
    catalog: Optional[Catalog] = None,
    rng: Optional[random.Random] = None,
) -> List[OrderItem]:
    """Generate the item list for one order; categories may repeat."""
    rng = rng or random
    count = rng.randint(MIN_ITEMS_PER_ORDER, MAX_ITEMS_PER_ORDER)
    return [generate_item(catalog, rng) for _ in range(count)]


class OrderGenerator:
    """Builds fully populated synthetic orders."""

    def __init__(
        self,
        id_strategy: Optional[OrderIdStrategy] = None,
        faker: Optional[Faker] = None,
        catalog: Optional[Catalog] = None,
        rng: Optional[random.Random] = None,
    ):
        self.id_strategy = id_strategy or CounterIdStrategy()
        self.faker = faker or Faker()
        self.catalog = catalog or DEFAULT_CATALOG
        self.rng = rng or random.Random()

    def generate(self, users_id: int) -> Order:
        """
        Generate one order for a user.

        Args:
            users_id: Identifier of the user placing the order

        Returns:
            A new order with a fresh customer name, timestamp and 1-3 items
        """
        order = Order(
            id=self.id_strategy.next_id(),
            customer_name=self.faker.name(),
            timestamp=datetime.now(),
            users_id=users_id,
            items=generate_items(self.catalog, self.rng),
        )
        logger.debug(f"[GENERATOR] Generated order {order.id}: {order.get_summary()}")
        return order

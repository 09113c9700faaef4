"""Shared test fixtures and configuration."""
import random
from datetime import datetime
from unittest.mock import AsyncMock, Mock

import pytest
import yaml
from faker import Faker
from websockets.protocol import State

from ordergen.core.config import Settings
from ordergen.services.catalog.in_memory_catalog import DEFAULT_CATALOG
from ordergen.services.ordering.generator import OrderGenerator
from ordergen.services.ordering.ids import CounterIdStrategy
from ordergen.services.ordering.models import ItemProperty, Order, OrderItem


@pytest.fixture
def test_settings():
    """Settings with fast timings, ignoring any local .env file."""
    return Settings(
        _env_file=None,
        websocket_url="ws://localhost:9999/wss/orders",
        interactive=False,
        min_send_delay=0.01,
        max_send_delay=0.01,
        idle_poll_interval=0.01,
    )


@pytest.fixture
def seeded_rng():
    """Deterministic random source."""
    return random.Random(1234)


@pytest.fixture
def catalog():
    """Built-in catalog."""
    return DEFAULT_CATALOG


@pytest.fixture
def order_generator(seeded_rng):
    """Order generator with a counter id and seeded randomness."""
    Faker.seed(1234)
    return OrderGenerator(
        id_strategy=CounterIdStrategy(),
        faker=Faker("en_US"),
        catalog=DEFAULT_CATALOG,
        rng=seeded_rng,
    )


@pytest.fixture
def sample_order():
    """A fixed, fully populated order."""
    return Order(
        id=7,
        customer_name="Jane Doe",
        timestamp=datetime(2024, 5, 17, 12, 30, 45, 123456),
        users_id=4,
        items=[
            OrderItem(
                name="Pizza",
                properties=[
                    ItemProperty(key="Size", value="Large"),
                    ItemProperty(key="Toppings", value="Olives"),
                    ItemProperty(key="Crust", value="Thin"),
                ],
            ),
            OrderItem(
                name="Shake",
                properties=[
                    ItemProperty(key="Flavor", value="Vanilla"),
                    ItemProperty(key="Size", value="Small"),
                ],
            ),
        ],
    )


@pytest.fixture
def mock_connection():
    """Mock open WebSocket connection."""
    connection = Mock()
    connection.state = State.OPEN
    connection.send = AsyncMock()
    connection.close = AsyncMock()
    return connection


@pytest.fixture
def mock_transport():
    """Mock order transport that accepts every order."""
    transport = Mock()
    transport.is_open = True
    transport.send_order = AsyncMock(return_value=True)
    return transport


@pytest.fixture
def catalog_file(tmp_path):
    """Write a small custom catalog YAML file and return its path."""
    path = tmp_path / "catalog.yaml"
    data = {
        "categories": [
            {
                "name": "Taco",
                "properties": [
                    {"key": "Shell", "values": ["Hard", "Soft"]},
                    {"key": "Filling", "values": ["Beef", "Beans"]},
                ],
            },
        ],
    }
    with open(path, "w") as f:
        yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
    return path

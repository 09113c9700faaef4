"""WebSocket transport for outbound orders."""
import asyncio
import logging
import ssl
from typing import Optional

import websockets
from websockets.exceptions import WebSocketException
from websockets.protocol import State

from ordergen.core.exceptions import TransportError
from ordergen.services.ordering.models import Order

logger = logging.getLogger(__name__)


class OrderTransport:
    """Owns the single outbound connection and sends orders over it."""

    def __init__(
        self,
        url: str,
        ssl_verify: bool = True,
        open_timeout: Optional[float] = 10.0,
    ):
        self.url = url
        self.ssl_verify = ssl_verify
        self.open_timeout = open_timeout
        self._connection = None

    def _ssl_context(self) -> Optional[ssl.SSLContext]:
        """Build an SSL context that skips certificate checks, if requested."""
        if self.ssl_verify or not self.url.startswith("wss://"):
            return None
        context = ssl.create_default_context()
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE
        return context

    @property
    def is_open(self) -> bool:
        """Whether the connection is established and still open."""
        return self._connection is not None and self._connection.state is State.OPEN

    async def connect(self) -> None:
        """
        Open the connection to the order endpoint.

        Raises:
            TransportError: If the connection cannot be established
        """
        kwargs = {"open_timeout": self.open_timeout}
        context = self._ssl_context()
        if context is not None:
            kwargs["ssl"] = context

        logger.info(f"[TRANSPORT] Connecting to {self.url}")
        try:
            self._connection = await websockets.connect(self.url, **kwargs)
        except (OSError, asyncio.TimeoutError, WebSocketException) as e:
            raise TransportError(
                f"Could not connect to {self.url}: {type(e).__name__}: {e}"
            ) from e
        logger.info("[TRANSPORT] Connected to WebSocket server. Generating orders...")

    async def send_order(self, order: Order) -> bool:
        """
        Serialize an order and send it as one text frame.

        Failures are logged and reported through the return value; nothing
        is retried.

        Returns:
            True if the frame was handed to the connection
        """
        if not self.is_open:
            logger.error(
                f"[TRANSPORT] Cannot send order {order.id}: connection is not open"
            )
            return False

        try:
            payload = order.to_json()
            await self._connection.send(payload)
        except Exception as e:
            logger.error(
                f"[TRANSPORT] Failed to send order {order.id} - "
                f"Error: {type(e).__name__}: {str(e)}"
            )
            return False

        logger.info(f"[TRANSPORT] Sent order {order.id} at {order.timestamp}")
        return True

    async def close(self) -> None:
        """Close the connection if it is open."""
        if self._connection is not None:
            await self._connection.close()
            logger.info("[TRANSPORT] Connection closed")
            self._connection = None

    async def __aenter__(self) -> "OrderTransport":
        if self._connection is None:
            await self.connect()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

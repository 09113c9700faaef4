"""Dispatch loop: decides when orders are generated and sent."""
import asyncio
import logging
import random
from typing import Optional

from ordergen.services.dispatch.constants import RANDOM_USERS_ID_RANGE
from ordergen.services.dispatch.states import Command, DispatchState
from ordergen.services.dispatch.transitions import DispatchTransitionHandler
from ordergen.services.ordering.generator import OrderGenerator
from ordergen.services.transport.websocket import OrderTransport

logger = logging.getLogger(__name__)


class DispatchLoop:
    """
    Sends orders on a randomized timer or on operator request.

    Commands arrive on an asyncio queue and are drained without blocking at
    the top of every iteration. All sends happen on this loop's task, so it
    is the only writer of the transport.
    """

    def __init__(
        self,
        generator: OrderGenerator,
        transport: OrderTransport,
        users_id: Optional[int] = None,
        initial_state: DispatchState = DispatchState.WAITING_FOR_INPUT,
        min_send_delay: float = 3.0,
        max_send_delay: float = 8.0,
        idle_poll_interval: float = 0.5,
        stop_when_closed: bool = False,
        rng: Optional[random.Random] = None,
    ):
        self.generator = generator
        self.transport = transport
        self.users_id = users_id
        self.state = initial_state
        self.min_send_delay = min_send_delay
        self.max_send_delay = max_send_delay
        self.idle_poll_interval = idle_poll_interval
        self.stop_when_closed = stop_when_closed
        self.rng = rng or random.Random()
        self.sent_count = 0
        self._commands: asyncio.Queue = asyncio.Queue()

    def submit(self, command: Command) -> None:
        """Queue a command. Must be called on the event loop thread."""
        self._commands.put_nowait(command)

    async def run(self) -> int:
        """
        Run until the loop reaches the EXITING state.

        Returns:
            Number of orders sent successfully
        """
        logger.info(f"[DISPATCH] Starting in state {self.state.value}")

        while True:
            await self._drain_commands()
            if self.state == DispatchState.EXITING:
                break

            if self.stop_when_closed and not self.transport.is_open:
                logger.info("[DISPATCH] Connection is no longer open, stopping")
                self.state = DispatchState.EXITING
                break

            if self.state == DispatchState.AUTO_SENDING:
                await self.send_order()
                delay = self.rng.uniform(self.min_send_delay, self.max_send_delay)
            else:
                delay = self.idle_poll_interval
            await self._suspend(delay)

        logger.info(f"[DISPATCH] Exiting after sending {self.sent_count} orders")
        return self.sent_count

    async def handle_command(self, command: Command) -> bool:
        """
        Apply one operator command.

        Returns:
            True if the command changed the loop state
        """
        old_state = self.state
        self.state = DispatchTransitionHandler.next_state(self.state, command)

        if command == Command.SEND_ONE and self.state != DispatchState.EXITING:
            logger.info("[DISPATCH] Immediate send requested")
            await self.send_order()

        return self.state != old_state

    async def send_order(self) -> bool:
        """Generate one order and transmit it. Generation failures skip the send."""
        users_id = self.users_id
        if users_id is None:
            users_id = self.rng.randint(*RANDOM_USERS_ID_RANGE)

        try:
            order = self.generator.generate(users_id)
        except Exception as e:
            logger.error(
                f"[DISPATCH] Order generation failed, skipping - "
                f"Error: {type(e).__name__}: {str(e)}",
                exc_info=True,
            )
            return False

        sent = await self.transport.send_order(order)
        if sent:
            self.sent_count += 1
        return sent

    async def _drain_commands(self) -> None:
        """Apply every queued command without waiting for new ones."""
        while True:
            try:
                command = self._commands.get_nowait()
            except asyncio.QueueEmpty:
                return
            await self.handle_command(command)

    async def _suspend(self, delay: float) -> None:
        """
        Wait for up to `delay` seconds while serving incoming commands.

        SEND_ONE is served in place and the wait resumes; a command that
        changes state ends the wait so the next iteration acts on it.
        """
        loop = asyncio.get_running_loop()
        deadline = loop.time() + delay
        while True:
            remaining = deadline - loop.time()
            if remaining <= 0:
                return
            try:
                command = await asyncio.wait_for(self._commands.get(), timeout=remaining)
            except asyncio.TimeoutError:
                return
            if await self.handle_command(command):
                return

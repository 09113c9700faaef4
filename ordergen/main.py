"""Order generator entrypoint."""
import asyncio
import logging
import sys
from contextlib import ExitStack
from typing import Optional

from faker import Faker

from ordergen.core.config import Settings, settings
from ordergen.core.exceptions import CatalogError, TransportError
from ordergen.core.logging import setup_logging
from ordergen.services.catalog.in_memory_catalog import InMemoryCatalogProvider
from ordergen.services.console.prompt import prompt_user_id
from ordergen.services.dispatch.constants import HELP_TEXT
from ordergen.services.dispatch.input_listener import operator_console
from ordergen.services.dispatch.loop import DispatchLoop
from ordergen.services.dispatch.states import DispatchState
from ordergen.services.ordering.generator import OrderGenerator
from ordergen.services.ordering.ids import create_id_strategy
from ordergen.services.transport.websocket import OrderTransport

logger = logging.getLogger(__name__)


def build_generator(config: Settings) -> OrderGenerator:
    """Build the order generator for the configured catalog and id mode."""
    catalog = InMemoryCatalogProvider(config.catalog_file).get_catalog()
    return OrderGenerator(
        id_strategy=create_id_strategy(config.id_mode),
        faker=Faker(config.faker_locale),
        catalog=catalog,
    )


async def run(config: Settings, users_id: Optional[int] = None) -> int:
    """
    Connect and dispatch orders until the operator quits.

    Args:
        config: Application settings
        users_id: User id stamped on every order; random per order if None

    Returns:
        Process exit code
    """
    try:
        generator = build_generator(config)
    except CatalogError as e:
        logger.error(f"[MAIN] {e}")
        return 1

    transport = OrderTransport(
        config.websocket_url,
        ssl_verify=config.ssl_verify,
        open_timeout=config.open_timeout,
    )
    try:
        await transport.connect()
    except TransportError as e:
        logger.error(f"[MAIN] {e}")
        return 1

    async with transport:
        dispatch_loop = DispatchLoop(
            generator,
            transport,
            users_id=users_id,
            initial_state=(
                DispatchState.WAITING_FOR_INPUT
                if config.interactive
                else DispatchState.AUTO_SENDING
            ),
            min_send_delay=config.min_send_delay,
            max_send_delay=config.max_send_delay,
            idle_poll_interval=config.idle_poll_interval,
            stop_when_closed=not config.interactive,
        )

        with ExitStack() as stack:
            if config.interactive:
                print(HELP_TEXT)
                stack.enter_context(
                    operator_console(dispatch_loop, asyncio.get_running_loop())
                )
            await dispatch_loop.run()

    return 0


def main() -> int:
    """Console entrypoint."""
    setup_logging()

    users_id = None
    if settings.interactive:
        users_id = settings.user_id
        if users_id is None:
            try:
                users_id = prompt_user_id()
            except (EOFError, KeyboardInterrupt):
                logger.error("[MAIN] No user id entered, aborting")
                return 1

    try:
        return asyncio.run(run(settings, users_id))
    except KeyboardInterrupt:
        logger.info("[MAIN] Interrupted, shutting down")
        return 0


if __name__ == "__main__":
    sys.exit(main())

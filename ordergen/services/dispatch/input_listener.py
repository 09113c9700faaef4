"""Background listener turning operator keystrokes into dispatch commands."""
import asyncio
import logging
import threading
from contextlib import contextmanager
from typing import Callable, Dict, Iterator, Optional, TextIO

from ordergen.services.console import keys
from ordergen.services.dispatch.constants import KEY_BINDINGS
from ordergen.services.dispatch.loop import DispatchLoop
from ordergen.services.dispatch.states import Command

logger = logging.getLogger(__name__)


class InputListener:
    """Reads single keystrokes on a daemon thread and forwards mapped commands."""

    def __init__(
        self,
        on_command: Callable[[Command], None],
        read_key: Optional[Callable[[], str]] = None,
        key_bindings: Optional[Dict[str, Command]] = None,
    ):
        self.on_command = on_command
        self.read_key = read_key or keys.read_key
        self.key_bindings = key_bindings or KEY_BINDINGS
        self._stopped = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @classmethod
    def for_dispatch_loop(
        cls,
        dispatch_loop: DispatchLoop,
        loop: asyncio.AbstractEventLoop,
        read_key: Optional[Callable[[], str]] = None,
    ) -> "InputListener":
        """Create a listener that hands commands to a dispatch loop on its event loop."""

        def _forward(command: Command) -> None:
            loop.call_soon_threadsafe(dispatch_loop.submit, command)

        return cls(_forward, read_key=read_key)

    def start(self) -> None:
        """Start listening on a daemon thread."""
        self._thread = threading.Thread(
            target=self.listen, name="input-listener", daemon=True
        )
        self._thread.start()

    def stop(self) -> None:
        """Ask the listener to stop after the current keystroke."""
        self._stopped.set()

    def listen(self) -> None:
        """Read keys until QUIT is issued, input ends, or the listener is stopped."""
        while not self._stopped.is_set():
            try:
                key = self.read_key()
            except (OSError, ValueError) as e:
                logger.error(
                    f"[INPUT] Failed to read from console - Error: {type(e).__name__}: {str(e)}"
                )
                key = ""

            if key == "":
                logger.info("[INPUT] End of input, requesting exit")
                command = Command.QUIT
            else:
                command = self.key_bindings.get(key.lower())
                if command is None:
                    continue

            if self._stopped.is_set():
                return
            logger.debug(f"[INPUT] Key {key!r} -> {command.value}")
            self.on_command(command)
            if command == Command.QUIT:
                self._stopped.set()
                return


@contextmanager
def operator_console(
    dispatch_loop: DispatchLoop,
    loop: asyncio.AbstractEventLoop,
    stream: Optional[TextIO] = None,
) -> Iterator[InputListener]:
    """
    Feed keystrokes from the console to a dispatch loop for the block.

    The terminal stays in cbreak mode while the listener runs and is restored
    on exit, including Ctrl+C, even if the listener thread is still blocked
    on a read.
    """
    with keys.cbreak_terminal(stream):
        listener = InputListener.for_dispatch_loop(
            dispatch_loop, loop, read_key=lambda: keys.read_key(stream)
        )
        listener.start()
        try:
            yield listener
        finally:
            listener.stop()

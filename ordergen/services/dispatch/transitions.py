"""State transition logic for the dispatch loop."""
import logging

from ordergen.services.dispatch.states import Command, DispatchState

logger = logging.getLogger(__name__)


class DispatchTransitionHandler:
    """Maps operator commands onto dispatch state changes."""

    @staticmethod
    def next_state(state: DispatchState, command: Command) -> DispatchState:
        """
        Return the state the loop moves to when a command arrives.

        TOGGLE_AUTO flips between waiting and auto-sending, QUIT ends the
        loop from any state, SEND_ONE never changes state. EXITING is
        terminal.
        """
        if state == DispatchState.EXITING:
            return state

        if command == Command.QUIT:
            new_state = DispatchState.EXITING
        elif command == Command.TOGGLE_AUTO:
            if state == DispatchState.AUTO_SENDING:
                new_state = DispatchState.WAITING_FOR_INPUT
            else:
                new_state = DispatchState.AUTO_SENDING
        else:
            new_state = state

        if new_state != state:
            logger.info(
                f"[DISPATCH TRANSITION] State changed: {state.value} -> {new_state.value}"
            )
        return new_state

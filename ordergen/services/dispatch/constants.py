"""Constants for the operator console and dispatch timing."""
from ordergen.services.dispatch.states import Command

# Single-key operator commands (matched case-insensitively)
KEY_BINDINGS = {
    "s": Command.SEND_ONE,
    "a": Command.TOGGLE_AUTO,
    "q": Command.QUIT,
}

HELP_TEXT = (
    "Commands:\n"
    "  s - send one order now\n"
    "  a - toggle automatic order generation\n"
    "  q - quit"
)

# Users drawn for orders when no user id was given
RANDOM_USERS_ID_RANGE = (1, 10)

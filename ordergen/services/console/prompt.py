"""Operator prompts."""
import logging
from typing import Callable

logger = logging.getLogger(__name__)

USER_ID_PROMPT = "Enter your user id: "


def parse_user_id(raw: str) -> int:
    """
    Parse a user id typed by the operator.

    Raises:
        ValueError: If the text is not a positive integer
    """
    user_id = int(raw.strip())
    if user_id <= 0:
        raise ValueError(f"user id must be positive, got {user_id}")
    return user_id


def prompt_user_id(
    input_func: Callable[[str], str] = input,
    output: Callable[[str], None] = print,
) -> int:
    """
    Ask for a numeric user id until a valid one is entered.

    EOFError and KeyboardInterrupt from the input function propagate.
    """
    while True:
        raw = input_func(USER_ID_PROMPT)
        try:
            return parse_user_id(raw)
        except ValueError:
            logger.debug(f"[PROMPT] Rejected user id input: {raw!r}")
            output(f"'{raw.strip()}' is not a valid user id. Please enter a positive number.")

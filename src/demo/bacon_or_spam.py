"""
Console demo: the breakfast menu.

Asks for a single-character choice until the user exits, showing the
retry-until-valid prompt in action.
"""

from __future__ import annotations

import logging

from validation.cancellation import CancellationToken
from validation.error_handler import init_logging
from validation.errors import OperationCancelledError
from validation.prompt_validator import PromptValidator
from validation.sources import ConsoleLineSource, LineSource, MessageSink

logger = logging.getLogger(__name__)

PROMPT = "Would you like [B]acon or [S]pam, or [E]xit? "
ERROR_MESSAGE = "Invalid input. Please enter 'B', 'S', or 'E'."

RESPONSES = {
    "B": "You chose bacon, excellent choice!",
    "S": "You chose the infamous potted meat product. I would have gone with the bacon.",
}
FAREWELL = "I hope you enjoyed your breakfast!"


def run(source: LineSource | None = None, sink: MessageSink | None = None, out: MessageSink | None = None) -> None:
    """
    Run the menu loop until the user chooses E or input ends.

    Args:
        source: Line source; defaults to stdin, cancelled at end of input
        sink: Receives validation error messages
        out: Receives menu responses; defaults to print()
    """
    cancel_token = CancellationToken()
    validator = PromptValidator(source or ConsoleLineSource(cancel_token=cancel_token), sink)
    show = out.show if out is not None else print

    try:
        while True:
            choice = validator.get_char(PROMPT, "BSE", ERROR_MESSAGE, cancel_token=cancel_token)
            if choice == "E":
                show(FAREWELL)
                return
            show(RESPONSES[choice])
    except OperationCancelledError:
        logger.debug("Input closed, leaving the menu")


def main() -> int:
    init_logging("WARNING")
    try:
        run()
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""Interactive colour selection."""
import logging
from typing import Callable

from prettifier.models.itinerary import COLOR_CODES, RESET

logger = logging.getLogger(__name__)


def color_for_choice(value) -> str:
    """
    Resolve a menu number to its colour directive.

    Raises:
        ValueError: if value is not a number from 1 to 5
    """
    choice = int(str(value).strip())
    if choice not in COLOR_CODES:
        raise ValueError(f"no colour numbered {choice}")
    return COLOR_CODES[choice][1]


def menu_text() -> str:
    return "\n".join(f"{number}. {name}" for number, (name, _) in COLOR_CODES.items())


def ask_for_color(input_func: Callable[[str], str] = input,
                  output: Callable[[str], None] = print) -> str:
    """
    Prompt until a valid colour number is entered.

    Raises EOFError / KeyboardInterrupt from input_func untouched.
    """
    while True:
        output("\nPlease choose your preferred color by number: ")
        output(f"\n{menu_text()}\n")

        answer = input_func("").strip()
        try:
            choice = int(answer)
        except ValueError:
            output("Invalid input. Please enter a number from 1 to 5.")
            continue

        if choice not in COLOR_CODES:
            output("Invalid choice. Please choose a number from 1 to 5.")
            continue

        name, color = COLOR_CODES[choice]
        logger.debug(f"Colour selected: {name}")
        output(f"{color}You chose this color.{RESET}")
        return color

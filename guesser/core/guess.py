import random
import re
from enum import Enum
from typing import Callable

from guesser.core.exceptions import InvalidGuess

LOWER_BOUND = 1
UPPER_BOUND = 100

# largest value an unsigned 32-bit guess can hold
MAX_GUESS = 2**32 - 1

_GUESS_PATTERN = re.compile(r"\+?[0-9]+")


class Verdict(Enum):
    TOO_SMALL = "Too small!"
    TOO_BIG = "Too big!"
    CORRECT = "You win!"


def draw_secret(randint: Callable[[int, int], int] = random.randint) -> int:
    return randint(LOWER_BOUND, UPPER_BOUND)


def parse_guess(text: str) -> int:
    """
    Parse one line of user input into a non-negative integer.

    Surrounding whitespace is ignored. Only ASCII digits with an optional leading "+" are
    accepted, so "3.5", "-1", "1_000" and values that do not fit into 32 unsigned bits
    are all rejected with InvalidGuess.
    """
    stripped = text.strip()

    if not _GUESS_PATTERN.fullmatch(stripped):
        raise InvalidGuess(f"'{stripped}' is not a non-negative integer", text=text)

    value = int(stripped)
    if value > MAX_GUESS:
        raise InvalidGuess(f"'{stripped}' is too large", text=text)

    return value


def compare(guess: int, secret: int) -> Verdict:
    if guess < secret:
        return Verdict.TOO_SMALL

    if guess > secret:
        return Verdict.TOO_BIG

    return Verdict.CORRECT

import logging
import random
import sys
from enum import Enum
from typing import Callable, Optional, TextIO

import click

from guesser.core.exceptions import InputReadError, InvalidGuess, SessionFinished
from guesser.core.guess import LOWER_BOUND, UPPER_BOUND, Verdict, compare, draw_secret, parse_guess

log = logging.getLogger("guesser.core.session")

INVALID_INPUT_MESSAGE = "THAT WAS NOT A PROPER NUMBER"

VERDICT_COLORS = {
    Verdict.TOO_SMALL: "yellow",
    Verdict.TOO_BIG: "yellow",
    Verdict.CORRECT: "green",
}


class State(Enum):
    AWAITING_INPUT = "awaiting_input"
    EVALUATING = "evaluating"
    DONE = "done"


class Session:
    """
    A single game: one secret value and the loop that reads guesses until it is found.

    The input buffer collects whatever read_line appends and is cleared after every
    evaluation, so each guess is parsed on its own.
    """

    def __init__(
        self,
        secret: Optional[int] = None,
        randint: Callable[[int, int], int] = random.randint,
        stream: Optional[TextIO] = None,
    ):
        if secret is None:
            secret = draw_secret(randint)

        if not LOWER_BOUND <= secret <= UPPER_BOUND:
            raise ValueError(f"secret {secret} is outside of [{LOWER_BOUND}, {UPPER_BOUND}]")

        self._secret = secret
        self.stream = stream
        self.state = State.AWAITING_INPUT
        self.buffer = ""
        self.attempts = 0

        log.debug(f"Session created (secret={self._secret})")

    @property
    def secret(self) -> int:
        return self._secret

    @property
    def finished(self) -> bool:
        return self.state == State.DONE

    def read_line(self) -> str:
        if self.finished:
            raise SessionFinished("Session is already finished")

        stream = self.stream if self.stream is not None else sys.stdin

        try:
            line = stream.readline()
        except (OSError, UnicodeDecodeError) as e:
            raise InputReadError(str(e)) from e

        if line == "":
            raise InputReadError("reached end of input")

        self.buffer += line
        self.state = State.EVALUATING
        return line

    def evaluate(self) -> Optional[Verdict]:
        if self.state != State.EVALUATING:
            if self.finished:
                raise SessionFinished("Session is already finished")
            raise RuntimeError("Nothing to evaluate, read a line first")

        try:
            guess = parse_guess(self.buffer)
        except InvalidGuess as e:
            log.debug(f"Invalid guess: {e}")
            click.secho(INVALID_INPUT_MESSAGE, fg="red")
            self.state = State.AWAITING_INPUT
            return None
        finally:
            self.buffer = ""

        self.attempts += 1
        verdict = compare(guess, self._secret)
        log.debug(f"Attempt #{self.attempts}: {guess} -> {verdict.name}")

        click.secho(verdict.value, fg=VERDICT_COLORS[verdict])

        if verdict == Verdict.CORRECT:
            self.state = State.DONE
        else:
            self.state = State.AWAITING_INPUT

        return verdict

    def feed(self, line: str) -> Optional[Verdict]:
        if self.finished:
            raise SessionFinished("Session is already finished")

        self.buffer += line
        self.state = State.EVALUATING
        return self.evaluate()

    def play(self) -> int:
        while not self.finished:
            self.read_line()
            self.evaluate()

        log.debug(f"Session finished after {self.attempts} attempts")
        return self.attempts

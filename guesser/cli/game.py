import logging

import click

from guesser.core.exceptions import InputReadError
from guesser.core.session import Session

log = logging.getLogger("guesser.cli.game")


class GameCommand:
    def play(self) -> int:
        log.debug("play")

        click.echo("Guess a number!")
        click.echo("Your input: ")

        session = Session(stream=click.get_text_stream("stdin"))

        try:
            attempts = session.play()
        except InputReadError as e:
            click.secho(f"Failed to read line: {e}", fg="red", err=True)
            return 1

        log.debug(f"won after {attempts} attempts")
        return 0

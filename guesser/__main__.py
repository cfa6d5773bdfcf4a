import logging
import os
import sys

import click
import fire

from guesser.cli.game import GameCommand

# Init logging
logging.basicConfig(level=os.environ.get("LOGLEVEL", "INFO").upper())

log = logging.getLogger("guesser.main")


def main():
    try:
        # if the command returns an int, then we serialize it as none to prevent fire from printing it
        # (this does not change the actual return value, so it's still good to use as an exit code)
        ret = fire.Fire(GameCommand().play, serialize=lambda r: None if isinstance(r, int) else r)

        if isinstance(ret, int):
            sys.exit(ret)

    except KeyboardInterrupt:
        click.secho("\n[Ctrl-C] Aborting.", fg="red")
        sys.exit(2)


if __name__ == "__main__":
    main()

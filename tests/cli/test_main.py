import contextlib
import io
import unittest
from unittest import mock
from unittest.mock import MagicMock

import fire

from guesser import __main__ as guesser
from guesser.cli.game import GameCommand
from guesser.core.exceptions import InputReadError


class TestCLIEntrypoint(unittest.TestCase):
    @mock.patch("guesser.__main__.fire.Fire")
    def test_exits_with_command_return_code(self, mock_fire: MagicMock):
        for code in [0, 1]:
            with self.subTest(code=code):
                mock_fire.return_value = code

                with self.assertRaises(SystemExit) as e:
                    guesser.main()

                self.assertEqual(code, e.exception.code)

    @mock.patch("guesser.__main__.click.secho")
    @mock.patch("guesser.__main__.fire.Fire")
    def test_aborts_on_keyboard_interrupt(self, mock_fire: MagicMock, mock_secho: MagicMock):
        mock_fire.side_effect = KeyboardInterrupt

        with self.assertRaises(SystemExit) as e:
            guesser.main()

        self.assertEqual(2, e.exception.code)
        mock_secho.assert_called_once_with("\n[Ctrl-C] Aborting.", fg="red")

    @mock.patch("guesser.cli.game.Session")
    def test_plays_without_arguments(self, mock_session: MagicMock):
        mock_session.return_value.play.return_value = 1

        stdout = io.StringIO()
        with contextlib.redirect_stdout(stdout):
            ret = fire.Fire(GameCommand().play, [])

        self.assertEqual(0, ret)
        mock_session.return_value.play.assert_called_once_with()


class TestGameCommand(unittest.TestCase):
    @mock.patch("guesser.cli.game.click.get_text_stream")
    @mock.patch("guesser.core.session.draw_secret")
    @mock.patch("guesser.core.session.click.secho")
    @mock.patch("guesser.cli.game.click.echo")
    def test_play_until_win(
        self,
        mock_echo: MagicMock,
        mock_session_secho: MagicMock,
        mock_draw_secret: MagicMock,
        mock_get_text_stream: MagicMock,
    ):
        mock_get_text_stream.return_value = io.StringIO("10\n90\nabc\n42\n")
        mock_draw_secret.return_value = 42

        self.assertEqual(0, GameCommand().play())

        mock_get_text_stream.assert_called_once_with("stdin")
        self.assertEqual(
            [mock.call("Guess a number!"), mock.call("Your input: ")],
            mock_echo.call_args_list,
        )
        self.assertEqual(
            ["Too small!", "Too big!", "THAT WAS NOT A PROPER NUMBER", "You win!"],
            [c.args[0] for c in mock_session_secho.call_args_list],
        )

    @mock.patch("guesser.cli.game.click.secho")
    @mock.patch("guesser.cli.game.click.echo")
    @mock.patch("guesser.cli.game.Session")
    def test_read_failure_returns_error(self, mock_session: MagicMock, mock_echo: MagicMock, mock_secho: MagicMock):
        mock_session.return_value.play.side_effect = InputReadError("reached end of input")

        self.assertEqual(1, GameCommand().play())

        mock_secho.assert_called_once_with("Failed to read line: reached end of input", fg="red", err=True)

"""
应用程序与命令行测试
Application and CLI Tests
"""
import io

import pytest

from fair_rps.app import Application
from fair_rps.game import ConsoleUI, FairnessProtocol, GameState, MoveSet
from fair_rps.main import main, parse_args
from fair_rps.utils import (
    CryptoUnavailable, ErrorHandler, EXIT_OK, EXIT_USAGE, EXIT_CRYPTO, EXIT_INTERRUPTED
)

from conftest import FixedMoveCrypto, RPS, RPSLS, RecordingUI


class BrokenDigestCrypto(FixedMoveCrypto):
    def keyed_digest(self, key, message):
        raise CryptoUnavailable("digest failed", operation="keyed_digest")


def make_app(answers, crypto=None, **kwargs):
    ui = RecordingUI(answers=answers)
    errors = io.StringIO()
    app = Application(ui=ui, crypto=crypto, error_handler=ErrorHandler(stream=errors), **kwargs)
    return app, ui, errors


def test_full_round_user_wins():
    app, ui, _ = make_app(["1"], crypto=FixedMoveCrypto(4))
    assert app.run(RPSLS) == EXIT_OK
    result, url = ui.results[0]
    assert result.message == "You win!"
    assert url == "https://www.lddgo.net/en/encrypt/hmac"
    assert app.session.state == GameState.RESOLVED


def test_invalid_moves_exit_before_commit():
    app, ui, errors = make_app(["1"], crypto=FixedMoveCrypto(1))
    assert app.run(["Rock", "Paper"]) == EXIT_USAGE
    assert ui.digests == []
    assert app.session is None
    assert "Invalid arguments" in errors.getvalue()


def test_exit_token():
    app, ui, _ = make_app(["0"])
    assert app.run(RPS) == EXIT_OK
    assert app.session.state == GameState.ABORTED
    assert ui.results == []


def test_end_of_input_is_interrupt():
    app, ui, _ = make_app([])
    assert app.run(RPS) == EXIT_INTERRUPTED
    assert app.session.state == GameState.ABORTED


def test_crypto_failure_exit_code():
    app, ui, errors = make_app(["1"], crypto=BrokenDigestCrypto(1))
    assert app.run(RPS) == EXIT_CRYPTO
    assert ui.digests == []
    assert "fair round" in errors.getvalue()


def test_configured_rounds(tmp_path):
    config = tmp_path / "config.yaml"
    config.write_text("game:\n  rounds: 2\n", encoding="utf-8")
    app, ui, _ = make_app(["2", "1"], crypto=FixedMoveCrypto(2), config_path=str(config))
    assert app.run(RPS) == EXIT_OK
    assert [r.message for r, _ in ui.results] == ["It's a tie!", "PC wins!"]


def test_bad_config_path():
    app, _, errors = make_app(["1"], config_path="/nonexistent/config.yaml")
    assert app.run(RPS) == EXIT_USAGE
    assert "Configuration error" in errors.getvalue()


def test_verify_round_trip():
    protocol = FairnessProtocol()
    app, ui, _ = make_app([])
    commitment = protocol.commit(MoveSet.build(RPS))
    revelation = protocol.reveal(commitment)

    assert app.verify(revelation.secret_key, revelation.label, commitment.digest) == EXIT_OK
    wrong = next(label for label in RPS if label != revelation.label)
    assert app.verify(revelation.secret_key, wrong, commitment.digest) == EXIT_USAGE


def test_console_ui_output():
    out = io.StringIO()
    ui = ConsoleUI(stream=out)
    ui.show_digest("abc")
    ui.show_menu([("1", "Rock"), ("0", "exit"), ("?", "help")])
    assert out.getvalue() == "HMAC: abc\nAvailable moves:\n1 - Rock\n0 - exit\n? - help\n"


def test_parse_args():
    args = parse_args(["--log-level", "DEBUG", "Rock", "Paper", "Scissors"])
    assert args.moves == ["Rock", "Paper", "Scissors"]
    assert args.log_level == "DEBUG"
    assert args.verify is None

    args = parse_args(["--verify", "key", "Rock", "digest"])
    assert args.verify == ["key", "Rock", "digest"]
    assert args.moves == []

    with pytest.raises(SystemExit):
        parse_args(["--verify", "key", "Rock", "digest", "Paper"])


def test_main_rejects_even_moves(capsys):
    assert main(["Rock", "Paper", "Scissors", "Lizard"]) == EXIT_USAGE
    assert "odd number" in capsys.readouterr().err


def test_main_plays_a_round(monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", lambda prompt="": "2")
    assert main(RPS) == EXIT_OK
    out = capsys.readouterr().out
    assert out.startswith("HMAC: ")
    assert "Your move: Paper" in out
    assert "HMAC key: " in out


def test_error_handler_custom_and_generic():
    stream = io.StringIO()
    handler = ErrorHandler(stream=stream)
    assert handler.handle(RuntimeError("boom")) == EXIT_USAGE
    assert "Unexpected error: boom" in stream.getvalue()

    handler.register_handler(RuntimeError, lambda exc, context: 42)
    assert handler.handle(RuntimeError("again")) == 42

"""
Tests for the process entry point and configuration.
"""

import os
import sys
from unittest.mock import MagicMock

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import config  # noqa: E402
import run_bot  # noqa: E402
from domain import ConnectionUnavailable, NoValidMove, Position  # noqa: E402


@pytest.fixture
def fake_bot(monkeypatch):
    """Replace the connection and client so main() never touches the network."""
    bot = MagicMock()
    bot_class = MagicMock(return_value=bot)
    monkeypatch.setattr(run_bot, "BotClient", bot_class)
    monkeypatch.setattr(run_bot, "HttpConnection", MagicMock())
    monkeypatch.delenv("BOT_SEED", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    return bot_class, bot


class TestArguments:

    def test_missing_name_exits_1(self, capsys):
        with pytest.raises(SystemExit) as exc:
            run_bot.main([])
        assert exc.value.code == 1
        assert "usage" in capsys.readouterr().err

    def test_extra_arguments_exit_1(self, capsys):
        with pytest.raises(SystemExit) as exc:
            run_bot.main(["alexa", "extra"])
        assert exc.value.code == 1
        assert "usage" in capsys.readouterr().err

    def test_parses_name(self):
        assert run_bot.parse_args(["alexa"]).bot_name == "alexa"

    @pytest.mark.parametrize("name", ["-bot", "-h", "--help", "--fast"])
    def test_dash_prefixed_name_is_a_name(self, name):
        assert run_bot.parse_args([name]).bot_name == name

    def test_dash_prefixed_name_with_extra_argument_exits_1(self, capsys):
        with pytest.raises(SystemExit) as exc:
            run_bot.parse_args(["-bot", "extra"])
        assert exc.value.code == 1
        assert "usage" in capsys.readouterr().err


class TestMain:

    def test_normal_round_exits_0(self, fake_bot):
        bot_class, bot = fake_bot

        assert run_bot.main(["alexa"]) == 0

        assert bot_class.call_args.args[0] == "alexa"
        bot.run.assert_called_once()

    def test_dash_prefixed_name_runs_bot(self, fake_bot):
        bot_class, bot = fake_bot

        assert run_bot.main(["-bot"]) == 0

        assert bot_class.call_args.args[0] == "-bot"
        bot.run.assert_called_once()

    def test_connection_unavailable_exits_1(self, fake_bot):
        _, bot = fake_bot
        bot.run.side_effect = ConnectionUnavailable("alexa: Connection failed")

        assert run_bot.main(["alexa"]) == 1

    def test_no_valid_move_exits_1(self, fake_bot):
        _, bot = fake_bot
        bot.run.side_effect = NoValidMove("alexa", Position(0, 0))

        assert run_bot.main(["alexa"]) == 1

    def test_seed_makes_rng_reproducible(self, fake_bot, monkeypatch):
        bot_class, _ = fake_bot
        monkeypatch.setenv("BOT_SEED", "17")

        run_bot.main(["alexa"])
        first = bot_class.call_args.kwargs["rng"].random()
        run_bot.main(["alexa"])
        second = bot_class.call_args.kwargs["rng"].random()

        assert first == second

    def test_bad_config_exits_1(self, fake_bot, monkeypatch, capsys):
        monkeypatch.setenv("BOT_SEED", "not-a-number")

        assert run_bot.main(["alexa"]) == 1
        assert "BOT_SEED" in capsys.readouterr().err


class TestConfig:

    def test_server_url_preferred(self, monkeypatch):
        monkeypatch.setenv("CYCLES_SERVER_URL", "http://game.test/api/")
        monkeypatch.setenv("CYCLES_HOST", "ignored")
        assert config.get_server_url() == "http://game.test/api"

    def test_host_and_port(self, monkeypatch):
        monkeypatch.delenv("CYCLES_SERVER_URL", raising=False)
        monkeypatch.setenv("CYCLES_HOST", "10.0.0.5")
        monkeypatch.setenv("CYCLES_PORT", "8080")
        assert config.get_server_url() == "http://10.0.0.5:8080"

    def test_default_address(self, monkeypatch):
        for name in ("CYCLES_SERVER_URL", "CYCLES_HOST", "CYCLES_PORT"):
            monkeypatch.delenv(name, raising=False)
        assert config.get_server_url() == "http://localhost:50051"

    def test_invalid_port(self, monkeypatch):
        monkeypatch.delenv("CYCLES_SERVER_URL", raising=False)
        monkeypatch.setenv("CYCLES_PORT", "eighty")
        with pytest.raises(ValueError):
            config.get_server_url()

    def test_timeouts(self, monkeypatch):
        monkeypatch.setenv("CYCLES_REQUEST_TIMEOUT", "3.5")
        monkeypatch.setenv("CYCLES_POLL_TIMEOUT", "")
        assert config.get_request_timeout() == 3.5
        assert config.get_poll_timeout() == config.DEFAULT_POLL_TIMEOUT

    def test_log_level_and_seed(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", " debug ")
        monkeypatch.delenv("BOT_SEED", raising=False)
        assert config.get_log_level() == "DEBUG"
        assert config.get_seed() is None

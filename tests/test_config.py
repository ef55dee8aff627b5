"""
Tests for settings loading.
"""
from lane_defense.config import Settings
from lane_defense.constants import DEFAULT_BOARD_WIDTH, MAX_FRAME_DT, STARTING_BALANCE
from lane_defense.game import Game


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LANE_DEFENSE_SEED", raising=False)
        settings = Settings(_env_file=None)
        assert settings.board_width == DEFAULT_BOARD_WIDTH
        assert settings.max_frame_dt == MAX_FRAME_DT
        assert settings.starting_balance == STARTING_BALANCE
        assert settings.seed is None

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("LANE_DEFENSE_SEED", "7")
        monkeypatch.setenv("LANE_DEFENSE_STARTING_BALANCE", "500")
        settings = Settings(_env_file=None)
        assert settings.seed == 7
        assert settings.starting_balance == 500

    def test_game_uses_settings(self):
        game = Game(settings=Settings(_env_file=None, starting_balance=250, board_width=1800))
        assert game.balance == 250
        assert game.state.geometry.width == 1800

"""Unit tests for the batch entry point wiring."""

import pytest  # type: ignore

from apps.analytics import main as entrypoint
from apps.analytics.main import EXIT_FATAL, build_analytics_config, parse_args
from config.config import Config
from internal.review.constant import Platform


class TestBuildAnalyticsConfig:
    def test_booking_limits(self):
        config = build_analytics_config(Config(), Platform.BOOKING)
        assert config.keyword_limit == 10
        assert config.rating_drop_threshold == 1.0

    def test_five_star_limits(self):
        config = build_analytics_config(Config(), Platform.TRIPADVISOR)
        assert config.keyword_limit == 20
        assert config.rating_drop_threshold == 0.5
        assert config.milestones == [50, 100, 250, 500, 1000]

    def test_settings_are_copied(self):
        base = Config()
        base.analytics.keyword.extra_stop_words = ["hotel"]
        config = build_analytics_config(base, Platform.GOOGLE)
        config.extra_stop_words.append("room")
        assert base.analytics.keyword.extra_stop_words == ["hotel"]


class TestParseArgs:
    def test_process_by_default(self):
        args = parse_args(["--platform", "facebook", "--business-profile-id", "p-1"])
        assert args.platform == "facebook"
        assert args.business_profile_id == "p-1"
        assert not args.show and not args.delete

    def test_unknown_platform(self):
        with pytest.raises(SystemExit):
            parse_args(["--platform", "yelp", "--business-profile-id", "p-1"])

    def test_show_and_delete_exclusive(self):
        with pytest.raises(SystemExit):
            parse_args(
                ["--platform", "google", "--business-profile-id", "p-1", "--show", "--delete"]
            )


class TestMainStartup:
    """Tests for failures before the service runs."""

    @pytest.fixture(autouse=True)
    def quiet_config(self, monkeypatch):
        config = Config()
        config.logging.colorize = False
        monkeypatch.setattr(entrypoint, "load_config", lambda: config)

    @pytest.mark.asyncio
    async def test_blank_profile_id_exits_fatal(self, monkeypatch, capsys):
        async def must_not_connect(config, logger):
            raise AssertionError("database must not be opened")

        monkeypatch.setattr(entrypoint, "init_dependencies", must_not_connect)

        code = await entrypoint.main(["--platform", "google", "--business-profile-id", "  "])

        assert code == EXIT_FATAL
        assert "must not be blank" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_unreachable_database_exits_fatal(self, monkeypatch, capsys):
        async def unreachable(config, logger):
            raise RuntimeError("PostgreSQL health check failed")

        monkeypatch.setattr(entrypoint, "init_dependencies", unreachable)

        code = await entrypoint.main(["--platform", "booking", "--business-profile-id", "p-1"])

        assert code == EXIT_FATAL
        assert "PostgreSQL health check failed" in capsys.readouterr().out

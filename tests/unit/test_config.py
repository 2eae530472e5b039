"""Tests for settings parsing, logging setup and the error hierarchy."""

import logging

import pytest

from fpair.config import (
    ENV_LOG_LEVEL,
    ENV_LOG_VIOLATIONS,
    LOGGER_NAME,
    LogLevel,
    Settings,
    configure_logging,
    get_settings,
    parse_bool_env,
    reset_settings,
    settings_or_default,
)
from fpair.core.either import Left, Right
from fpair.errors import ConfigurationError, FpairError, TypeConstraintError


@pytest.fixture
def fpair_logger():
    """Restore the fpair logger after a test reconfigures it."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


class TestSettings:
    def test_defaults(self):
        settings = get_settings()

        assert settings == Settings()
        assert settings.log_level is LogLevel.WARNING
        assert settings.log_violations is True

    def test_create_validates_level(self):
        assert Settings.create("debug", False) == Right(
            Settings(log_level=LogLevel.DEBUG, log_violations=False)
        )
        assert Settings.create("verbose", True) == Left("Invalid log level: verbose")

    def test_create_rejects_non_string_level(self):
        result = Settings.create(None, True)  # type: ignore[arg-type]

        assert result == Left("Invalid log level: None")
        assert Settings.create(10, True).is_left()  # type: ignore[arg-type]

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv(ENV_LOG_LEVEL, "info")
        monkeypatch.setenv(ENV_LOG_VIOLATIONS, "no")

        result = Settings.from_env()

        assert result == Right(Settings(log_level=LogLevel.INFO, log_violations=False))

    def test_get_settings_is_cached(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv(ENV_LOG_LEVEL, "ERROR")

        assert get_settings() is first

        reset_settings()
        assert get_settings().log_level is LogLevel.ERROR

    def test_invalid_env_raises(self, monkeypatch):
        monkeypatch.setenv(ENV_LOG_LEVEL, "LOUD")

        with pytest.raises(ConfigurationError, match="Invalid log level: LOUD"):
            get_settings()

    def test_settings_or_default_tolerates_invalid_env(self, monkeypatch):
        monkeypatch.setenv(ENV_LOG_LEVEL, "LOUD")

        assert settings_or_default() == Settings()

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("true", True),
            ("1", True),
            ("YES", True),
            ("on", True),
            ("false", False),
            ("0", False),
            ("", True),
        ],
    )
    def test_parse_bool_env(self, monkeypatch, raw, expected):
        monkeypatch.setenv("FPAIR_TEST_FLAG", raw)

        assert parse_bool_env("FPAIR_TEST_FLAG", default=True) is expected

    def test_parse_bool_env_missing_uses_default(self):
        assert parse_bool_env("FPAIR_UNSET_FLAG", default=False) is False


class TestConfigureLogging:
    def test_sets_level_and_adds_handler(self, fpair_logger):
        fpair_logger.handlers = [logging.NullHandler()]

        logger = configure_logging(Settings(log_level=LogLevel.DEBUG))

        assert logger is fpair_logger
        assert logger.level == logging.DEBUG
        stream_handlers = [
            h for h in logger.handlers if isinstance(h, logging.StreamHandler)
        ]
        assert len(stream_handlers) == 1

    def test_does_not_duplicate_handlers(self, fpair_logger):
        fpair_logger.handlers = [logging.NullHandler()]

        configure_logging(Settings())
        configure_logging(Settings())

        assert len(fpair_logger.handlers) == 2


class TestErrors:
    def test_type_constraint_error_hierarchy(self):
        error = TypeConstraintError("Pair.map", "Function required", 3)

        assert isinstance(error, FpairError)
        assert isinstance(error, TypeError)
        assert str(error) == "Pair.map: Function required"

    def test_error_context(self):
        error = TypeConstraintError("Pair.map", "Function required", 3)
        context = error.get_error_context()

        assert context["error_type"] == "TypeConstraintError"
        assert context["error_code"] == "TypeConstraintError"
        assert context["operation"] == "Pair.map"
        assert context["received"] == "int"

    def test_configuration_error_is_value_error(self):
        error = ConfigurationError("bad", context={"source": "environment"})

        assert isinstance(error, ValueError)
        assert error.get_error_context()["context"] == "{'source': 'environment'}"

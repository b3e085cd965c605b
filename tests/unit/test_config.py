import logging

import pytest

from selkit.config import Settings, resolve_level


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, mocker):
    for name in ('SELKIT_LOG_LEVEL', 'SELKIT_LOG_TO_FILE', 'LOGFIRE_TOKEN'):
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's .env out of the tests
    mocker.patch('selkit.config.load_dotenv')


def test_defaults():
    settings = Settings.from_env()
    assert settings.log_level == 'WARNING'
    assert settings.log_to_file is False
    assert settings.logfire_token is None


def test_from_env(monkeypatch):
    monkeypatch.setenv('SELKIT_LOG_LEVEL', 'debug')
    monkeypatch.setenv('SELKIT_LOG_TO_FILE', 'Yes')
    monkeypatch.setenv('LOGFIRE_TOKEN', 'tok')

    settings = Settings.from_env()
    assert settings.log_level == 'debug'
    assert settings.log_to_file is True
    assert settings.logfire_token == 'tok'


def test_from_env_loads_dotenv():
    import selkit.config

    Settings.from_env()
    selkit.config.load_dotenv.assert_called_once()


def test_invalid_level(monkeypatch):
    monkeypatch.setenv('SELKIT_LOG_LEVEL', 'chatty')
    with pytest.raises(ValueError, match='Unknown log level'):
        Settings.from_env()


@pytest.mark.parametrize(
    ('name', 'expected'),
    [
        ('DEBUG', logging.DEBUG),
        ('info', logging.INFO),
        ('ALL', logging.NOTSET),
        ('error', logging.ERROR),
    ],
)
def test_resolve_level(name, expected):
    assert resolve_level(name) == expected

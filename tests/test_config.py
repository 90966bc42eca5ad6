import pytest
from pydantic import ValidationError

from gibberish import DEFAULT_ALPHABET, DEFAULT_SMOOTHING, Settings, get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv('GIBBERISH_SMOOTHING', raising=False)
    monkeypatch.delenv('GIBBERISH_ALPHABET', raising=False)

    settings = get_settings()

    assert settings.smoothing == DEFAULT_SMOOTHING
    assert settings.alphabet == DEFAULT_ALPHABET


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv('GIBBERISH_SMOOTHING', '2.5')
    monkeypatch.setenv('GIBBERISH_ALPHABET', 'abc')

    settings = get_settings()

    assert settings.smoothing == 2.5
    assert settings.alphabet == 'abc'


@pytest.mark.parametrize('smoothing', [0, -10])
def test_smoothing_must_be_positive(smoothing):
    with pytest.raises(ValidationError):
        Settings(smoothing=smoothing)

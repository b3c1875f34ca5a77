import pytest

from dna_translator.settings import Settings


def test_defaults():
    config = Settings()
    assert config.gc_window_size == 10
    assert config.default_reading_frame == 0
    assert config.default_notation == "three"
    assert config.default_sequence == "ATGGCCCTGAAGATCGCACAATAG"


def test_environment_override(monkeypatch):
    monkeypatch.setenv("GC_WINDOW_SIZE", "5")
    monkeypatch.setenv("default_notation", "one")
    config = Settings()
    assert config.gc_window_size == 5
    assert config.default_notation == "one"


@pytest.mark.parametrize(
    "overrides",
    [
        {"gc_window_size": 0},
        {"default_reading_frame": 3},
        {"default_input_type": "protein"},
        {"default_notation": "two"},
    ],
)
def test_invalid_settings(overrides):
    with pytest.raises(ValueError):
        Settings(**overrides)

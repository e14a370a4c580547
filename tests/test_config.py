import pytest

from minirex.config import DEFAULT_MAX_DEPTH, DEFAULT_MAX_STEPS, EngineConfig


def test_defaults():
    config = EngineConfig()
    assert config.max_steps == DEFAULT_MAX_STEPS
    assert config.max_depth == DEFAULT_MAX_DEPTH


def test_from_empty_environment():
    assert EngineConfig.from_env({}) == EngineConfig()


@pytest.mark.parametrize("raw,expected", [
    ("10", 10),
    (" 500 ", 500),
    ("0", None),
    ("none", None),
    ("NONE", None),
    ("", DEFAULT_MAX_STEPS),
    ("  ", DEFAULT_MAX_STEPS),
])
def test_max_steps_from_environment(raw, expected):
    config = EngineConfig.from_env({"MINIREX_MAX_STEPS": raw})
    assert config.max_steps == expected
    assert config.max_depth == DEFAULT_MAX_DEPTH


def test_max_depth_from_environment():
    config = EngineConfig.from_env({"MINIREX_MAX_DEPTH": "8"})
    assert config.max_depth == 8


def test_non_integer_is_rejected():
    with pytest.raises(ValueError, match="MINIREX_MAX_STEPS"):
        EngineConfig.from_env({"MINIREX_MAX_STEPS": "lots"})


@pytest.mark.parametrize("kwargs", [{"max_steps": 0}, {"max_depth": -1}])
def test_non_positive_limits_are_rejected(kwargs):
    with pytest.raises(ValueError):
        EngineConfig(**kwargs)


def test_negative_environment_value_is_rejected():
    with pytest.raises(ValueError):
        EngineConfig.from_env({"MINIREX_MAX_DEPTH": "-3"})


def test_config_is_frozen():
    config = EngineConfig()
    with pytest.raises(AttributeError):
        config.max_steps = 5


@pytest.mark.parametrize("raw", ["off", "OFF", "false", "-"])
def test_only_zero_or_none_disable_the_ceiling(raw):
    with pytest.raises(ValueError):
        EngineConfig.from_env({"MINIREX_MAX_STEPS": raw})

import pytest

from fileserve.config import ServerConfig, BINARY_TYPES, CONTENT_TYPES


def test_defaults():
    config = ServerConfig()
    assert config.server_name == "JFS Server"
    assert config.timeout == 20
    assert config.linger == 2
    assert config.binary_types == BINARY_TYPES
    assert config.content_types == CONTENT_TYPES
    assert config.content_types is not CONTENT_TYPES


@pytest.mark.parametrize("timeout", [None, 0, 0.5])
def test_accepted_timeouts(timeout):
    assert ServerConfig(timeout=timeout).timeout == timeout


@pytest.mark.parametrize("kwargs", [{"timeout": -1}, {"timeout": -0.1}, {"linger": -1}])
def test_negative_durations_rejected(kwargs):
    with pytest.raises(ValueError):
        ServerConfig(**kwargs)

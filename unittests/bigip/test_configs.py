import pytest
import yaml

from bigip.exceptions import ConfigError
from bigip.utils import configs


@pytest.fixture(autouse=True)
def reset_cache():
    configs.CONFIG = None
    yield
    configs.CONFIG = None


def write_config(tmp_path, content):
    path = tmp_path / "bigip.yaml"
    path.write_text(yaml.safe_dump(content))
    return str(path)


def test_device_config(tmp_path):
    path = write_config(
        tmp_path,
        {"device": {"address": "10.1.1.245", "username": "ops", "password": "pw", "port": "8443"}},
    )

    configs.get_configs(path)
    device = configs.get_device_config()

    assert device == {
        "address": "10.1.1.245",
        "username": "ops",
        "password": "pw",
        "port": 8443,
        "verify": False,
    }


def test_device_defaults(tmp_path):
    configs.get_configs(write_config(tmp_path, {"device": {"address": "bigip.lab"}}))
    device = configs.get_device_config()

    assert device["username"] == "admin"
    assert device["port"] == 443


def test_configs_are_cached(tmp_path):
    first = configs.get_configs(write_config(tmp_path, {"device": {"address": "a"}}))
    assert configs.get_configs("/does/not/exist") is first


def test_missing_file():
    with pytest.raises(ConfigError):
        configs.get_configs("/does/not/exist.yaml")


def test_invalid_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("device: [unclosed")
    with pytest.raises(ConfigError):
        configs.get_configs(str(path))


@pytest.mark.parametrize(
    "content",
    [
        {"devices": {}},
        {"device": {"username": "admin"}},
        {"device": {"address": "bigip.lab", "port": "https"}},
    ],
)
def test_invalid_device(tmp_path, content):
    configs.get_configs(write_config(tmp_path, content))
    with pytest.raises(ConfigError):
        configs.get_device_config()


def test_device_without_config():
    with pytest.raises(ConfigError):
        configs.get_device_config()

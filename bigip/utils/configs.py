import os

import yaml

from bigip.exceptions import ConfigError
from utility.log import Log

log = Log(__name__)

DEFAULT_CONFIG_PATH = os.path.join(os.path.expanduser("~"), ".bigip.yaml")
DEFAULT_PORT = 443
DEFAULT_USERNAME = "admin"
CONFIG = None


def get_configs(config=None, reload=False):
    """Read configurations from yaml

    Args:
        config (str): Config file path
        reload (bool): Drop the cached configuration first
    """
    global CONFIG
    if CONFIG and not reload:
        return CONFIG

    # Check for default config
    config = config if config else DEFAULT_CONFIG_PATH

    log.info(f"Loading config file - {config}")
    try:
        with open(config, "r") as _stream:
            CONFIG = yaml.safe_load(_stream)
    except yaml.YAMLError:
        raise ConfigError(f"Invalid configuration file '{config}'")
    except OSError as e:
        raise ConfigError(f"Unable to read configuration file '{config}': {e}")

    if not isinstance(CONFIG, dict):
        CONFIG = None
        raise ConfigError(f"Configuration file '{config}' is not a mapping")

    return CONFIG


def get_device_config():
    """Get BIG-IP device connection details from config"""
    if not CONFIG:
        raise ConfigError("Configuration is not passed")

    try:
        _device = CONFIG["device"]
    except KeyError:
        raise ConfigError("Device configurations are missing from config")

    if not isinstance(_device, dict) or not _device.get("address"):
        raise ConfigError("Device address is missing from config")

    _dict = {}
    _dict["address"] = _device["address"]
    _dict["username"] = _device.get("username", DEFAULT_USERNAME)
    _dict["password"] = _device.get("password", "")
    _dict["verify"] = bool(_device.get("verify", False))
    try:
        _dict["port"] = int(_device.get("port", DEFAULT_PORT))
    except (TypeError, ValueError):
        raise ConfigError(f"Invalid device port '{_device.get('port')}'")

    log.info(f"Loaded device details for '{_dict['address']}:{_dict['port']}'")
    return _dict

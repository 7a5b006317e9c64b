"""
Provider: device connection settings and the resources it serves.
"""

from bigip.exceptions import ConfigError
from bigip.resource_bigip_ltm_node import resource_bigip_ltm_node
from bigip.schema import TYPE_INT, TYPE_STRING, Schema
from rest.common.utils.rest import rest
from rest.endpoints.ltm.node import LTMNode
from utility.log import Log

log = Log(__name__)


class Provider:
    schema = {
        "address": Schema(
            type=TYPE_STRING,
            required=True,
            description="Domain name/IP of the BigIP",
        ),
        "username": Schema(
            type=TYPE_STRING,
            optional=True,
            default="admin",
            description="Username with API access to the BigIP",
        ),
        "password": Schema(
            type=TYPE_STRING,
            optional=True,
            sensitive=True,
            default="",
            description="The user's password",
        ),
        "port": Schema(
            type=TYPE_INT,
            optional=True,
            default=443,
            description="Management Port to connect to Bigip",
        ),
    }

    def __init__(self):
        self.resources_map = {
            "bigip_ltm_node": resource_bigip_ltm_node(),
        }
        self.meta = None

    def resource(self, type_name):
        try:
            return self.resources_map[type_name]
        except KeyError:
            raise ConfigError(f"Unsupported resource type '{type_name}'")

    def configure(self, config):
        """Build the device client handed to resource callbacks as meta.

        Args:
            config (dict): address, username, password and port of the device
        """
        if not config.get("address"):
            raise ConfigError("Provider address is required")

        device = {
            key: config.get(key, sch.default) for key, sch in self.schema.items()
        }
        device["verify"] = config.get("verify", False)
        log.info(f"Configuring provider for {device['address']}:{device['port']}")
        self.meta = LTMNode(rest=rest(device=device))
        return self.meta

from bigip.models import Node
from bigip.store import NodeStore
from rest.common.config.config import Config
from rest.common.utils.exceptions import ResourceNotFoundError


def refined_name(name):
    """
    Return the name as used in iControl REST URLs, /Common/node1 -> ~Common~node1
    """
    return name.replace("/", "~")


class LTMNode(NodeStore):
    def __init__(self, rest):
        """
        Constructor for LTM node related REST endpoints
        """
        self._config = Config()
        self._rest = rest
        config_file_reader = self._config.get_config()
        self._node = config_file_reader["endpoints"]["ltm"]["NODE"]
        self._node_by_name = config_file_reader["endpoints"]["ltm"]["NODE_BY_NAME"]

    def add_node(self, node):
        """
        REST POST endpoint /mgmt/tm/ltm/node

        POST Request data details
        {
            "name": "/Common/node1",
            "address": "10.10.10.10",
            "connectionLimit": 0,
            "dynamicRatio": 1,
            "monitor": "/Common/icmp",
            "rateLimit": "disabled",
            "ratio": 1,
            "session": "user-enabled",
            "state": "user-up",
            "description": "STRING",
            "fqdn": {
                "addressFamily": "ipv4",
                "autopopulate": "enabled",
                "downInterval": 5,
                "interval": "3600",
                "tmName": "node1.example.com"
            }
        }
        Args:
            node(Node): node to create
        """
        return self._rest.post(relative_url=self._node, data=node.to_payload())

    def get_node(self, name):
        """
        REST GET endpoint /mgmt/tm/ltm/node/{node_name}

        Args:
            name(str): node name, e.g. /Common/node1
        Returns:
            Node, or None when the device answers 404
        """
        endpoint = self._node_by_name.format(node_name=refined_name(name))
        try:
            response = self._rest.get(relative_url=endpoint)
        except ResourceNotFoundError:
            return None
        return Node.from_payload(response)

    def modify_node(self, name, node):
        """
        REST PUT endpoint /mgmt/tm/ltm/node/{node_name}

        Args:
            name(str): node name
            node(Node): fields to change, empty ones are left out
        """
        endpoint = self._node_by_name.format(node_name=refined_name(name))
        return self._rest.put(relative_url=endpoint, data=node.to_payload())

    def delete_node(self, name):
        """
        REST DELETE endpoint /mgmt/tm/ltm/node/{node_name}

        Args:
            name(str): node name
        """
        endpoint = self._node_by_name.format(node_name=refined_name(name))
        return self._rest.delete(relative_url=endpoint)

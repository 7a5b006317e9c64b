from dataclasses import replace

import pytest

from bigip.models import FQDN, Node
from bigip.resource_bigip_ltm_node import resource_bigip_ltm_node
from bigip.store import NodeStore


class FakeNodeStore(NodeStore):
    """In-memory device keeping nodes the way a BIG-IP reports them back."""

    def __init__(self):
        self.nodes = {}
        self.calls = []
        self.failures = {}

    def _check(self, operation):
        if operation in self.failures:
            raise self.failures[operation]

    def add_node(self, node):
        self.calls.append(("add", node))
        self._check("add")
        stored = replace(node, fqdn=replace(node.fqdn))
        stored.session = stored.session or "user-enabled"
        stored.state = stored.state or "unchecked"
        stored.rate_limit = stored.rate_limit or "disabled"
        stored.ratio = stored.ratio or 1
        stored.dynamic_ratio = stored.dynamic_ratio or 1
        # the device pads the monitor rule
        stored.monitor = f"{stored.monitor or '/Common/icmp'} "
        if stored.fqdn.name:
            stored.address = "any6"
            stored.fqdn.interval = stored.fqdn.interval or "3600"
            stored.fqdn.down_interval = stored.fqdn.down_interval or 5
            stored.fqdn.autopopulate = stored.fqdn.autopopulate or "disabled"
            stored.fqdn.address_family = stored.fqdn.address_family or "ipv4"
        self.nodes[node.name] = stored

    def get_node(self, name):
        self.calls.append(("get", name))
        self._check("get")
        node = self.nodes.get(name)
        if node is None:
            return None
        return replace(node, fqdn=replace(node.fqdn))

    def modify_node(self, name, node):
        self.calls.append(("modify", name, node))
        self._check("modify")
        stored = self.nodes[name]
        for key, value in vars(node).items():
            if key != "fqdn" and value:
                setattr(stored, key, value)

    def delete_node(self, name):
        self.calls.append(("delete", name))
        self._check("delete")
        self.nodes.pop(name, None)

    def operations(self):
        return [call[0] for call in self.calls]


@pytest.fixture
def store():
    return FakeNodeStore()


@pytest.fixture
def resource():
    return resource_bigip_ltm_node()


@pytest.fixture
def literal_config():
    return {
        "name": "/Common/node1",
        "address": "10.10.10.10",
        "connection_limit": 100,
        "description": "web backend",
    }


@pytest.fixture
def fqdn_config():
    return {
        "name": "/Common/node2",
        "address": "node2.example.com",
        "fqdn": {
            "address_family": "ipv4",
            "interval": "300",
            "downinterval": 3,
            "autopopulate": "enabled",
        },
    }


@pytest.fixture
def remote_node():
    """Node as already present on the device."""
    return Node(
        name="/Common/node1",
        partition="Common",
        full_path="/Common/node1",
        address="10.10.10.10%2",
        connection_limit=5,
        dynamic_ratio=1,
        description="created elsewhere",
        monitor="/Common/icmp ",
        rate_limit="disabled",
        ratio=1,
        session="monitor-enabled",
        state="up",
        fqdn=FQDN(address_family="ipv4", autopopulate="disabled", down_interval=5, interval="3600"),
    )

"""
Remote node store interface.

The resource callbacks only need four calls on the device. Any object
implementing NodeStore can be handed to them as `meta`; the iControl REST
implementation lives in rest.endpoints.ltm.node.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from utility.log import Log

log = Log(__name__)


class NodeStore(ABC):
    """Capability to add, get, modify and delete LTM nodes."""

    @abstractmethod
    def add_node(self, node):
        """Create the node. Raises on failure."""

    @abstractmethod
    def get_node(self, name):
        """Return the Node, or None when the device has no such node.

        Raises on transport or API failure.
        """

    @abstractmethod
    def modify_node(self, name, node):
        """Modify the node in place. Raises on failure."""

    @abstractmethod
    def delete_node(self, name):
        """Delete the node. Raises on failure."""


class LookupStatus(Enum):
    FOUND = "found"
    ABSENT = "absent"
    FAILED = "failed"


@dataclass
class NodeLookup:
    """Outcome of a node lookup: Found(node), Absent or Failed(error)."""

    status: LookupStatus
    node: object = None
    error: Exception = None

    @classmethod
    def found(cls, node):
        return cls(LookupStatus.FOUND, node=node)

    @classmethod
    def absent(cls):
        return cls(LookupStatus.ABSENT)

    @classmethod
    def failed(cls, error):
        return cls(LookupStatus.FAILED, error=error)

    @property
    def is_found(self):
        return self.status is LookupStatus.FOUND

    @property
    def is_absent(self):
        return self.status is LookupStatus.ABSENT

    @property
    def is_failed(self):
        return self.status is LookupStatus.FAILED


def fetch_node(store, name):
    """Look a node up and fold the outcome into a NodeLookup.

    Args:
        store (NodeStore): device client
        name (str): node name, e.g. /Common/node1
    """
    log.info(f"Fetching node {name}")
    try:
        node = store.get_node(name)
    except Exception as err:
        log.error(f"Unable to retrieve node {name}: {err}")
        return NodeLookup.failed(err)

    if node is None:
        return NodeLookup.absent()
    return NodeLookup.found(node)

"""
LTM node records as exchanged with the iControl REST API.
"""

from dataclasses import dataclass, field


@dataclass
class FQDN:
    """FQDN block of a node, used when the node is addressed by name."""

    address_family: str = ""
    autopopulate: str = ""
    down_interval: int = 0
    interval: str = ""
    name: str = ""

    def to_payload(self):
        payload = {
            "addressFamily": self.address_family,
            "autopopulate": self.autopopulate,
            "downInterval": self.down_interval,
            "interval": self.interval,
            "tmName": self.name,
        }
        return {k: v for k, v in payload.items() if v}

    @classmethod
    def from_payload(cls, data):
        data = data or {}
        return cls(
            address_family=data.get("addressFamily", ""),
            autopopulate=data.get("autopopulate", ""),
            down_interval=int(data.get("downInterval", 0) or 0),
            interval=str(data.get("interval", "") or ""),
            name=data.get("tmName", ""),
        )


@dataclass
class Node:
    """An LTM node.

    Zero values mean "not set": they are left out of request payloads so the
    device applies its own defaults.
    """

    name: str = ""
    partition: str = ""
    full_path: str = ""
    address: str = ""
    connection_limit: int = 0
    dynamic_ratio: int = 0
    description: str = ""
    monitor: str = ""
    rate_limit: str = ""
    ratio: int = 0
    session: str = ""
    state: str = ""
    fqdn: FQDN = field(default_factory=FQDN)

    def to_payload(self):
        """Return the JSON body for an add or modify call."""
        payload = {
            "name": self.name,
            "partition": self.partition,
            "fullPath": self.full_path,
            "address": self.address,
            "connectionLimit": self.connection_limit,
            "dynamicRatio": self.dynamic_ratio,
            "description": self.description,
            "monitor": self.monitor,
            "rateLimit": self.rate_limit,
            "ratio": self.ratio,
            "session": self.session,
            "state": self.state,
        }
        payload = {k: v for k, v in payload.items() if v}
        fqdn = self.fqdn.to_payload()
        if fqdn:
            payload["fqdn"] = fqdn
        return payload

    @classmethod
    def from_payload(cls, data):
        """Build a Node from a GET response body."""
        return cls(
            name=data.get("name", ""),
            partition=data.get("partition", ""),
            full_path=data.get("fullPath", ""),
            address=data.get("address", ""),
            connection_limit=int(data.get("connectionLimit", 0) or 0),
            dynamic_ratio=int(data.get("dynamicRatio", 0) or 0),
            description=data.get("description", ""),
            monitor=data.get("monitor", ""),
            rate_limit=str(data.get("rateLimit", "") or ""),
            ratio=int(data.get("ratio", 0) or 0),
            session=data.get("session", ""),
            state=data.get("state", ""),
            fqdn=FQDN.from_payload(data.get("fqdn")),
        )

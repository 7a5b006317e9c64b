"""
bigip_ltm_node resource.

Lifecycle callbacks for LTM nodes. A node configured with a literal IPv4/IPv6
address is sent with that address, any other value is treated as the FQDN of
the node and sent in the fqdn block instead.
"""

from bigip import diagnostics
from bigip.address import is_literal_address, strip_route_domain
from bigip.exceptions import ConfigError, RemoteCallFailure
from bigip.models import FQDN, Node
from bigip.resource import Resource, import_state_passthrough
from bigip.schema import TYPE_INT, TYPE_LIST, TYPE_STRING, Schema, validate_f5_name
from bigip.store import fetch_node
from utility.log import Log

log = Log(__name__)

DEFAULT_MONITOR = "/Common/icmp"
SESSION_ENABLED = "user-enabled"
SESSION_DISABLED = "user-disabled"
_ENABLED_SESSIONS = ("monitor-enabled", "user-enabled")


def resource_bigip_ltm_node():
    return Resource(
        create=resource_bigip_ltm_node_create,
        read=resource_bigip_ltm_node_read,
        update=resource_bigip_ltm_node_update,
        delete=resource_bigip_ltm_node_delete,
        importer=import_state_passthrough,
        description="Manages LTM nodes on a BIG-IP device",
        schema={
            "name": Schema(
                type=TYPE_STRING,
                required=True,
                force_new=True,
                description="Name of the node",
                validate_func=validate_f5_name,
            ),
            "address": Schema(
                type=TYPE_STRING,
                required=True,
                force_new=True,
                description="Address of the node",
            ),
            "rate_limit": Schema(
                type=TYPE_STRING,
                optional=True,
                computed=True,
                description="Specifies the maximum number of connections per second allowed "
                "for a node or node address. The default value is 'disabled'.",
            ),
            "connection_limit": Schema(
                type=TYPE_INT,
                optional=True,
                computed=True,
                description="Specifies the maximum number of connections allowed for the "
                "node or node address.",
            ),
            "dynamic_ratio": Schema(
                type=TYPE_INT,
                optional=True,
                computed=True,
                description="Sets the dynamic ratio number for the node. Used for dynamic "
                "ratio load balancing.",
            ),
            "ratio": Schema(
                type=TYPE_INT,
                optional=True,
                computed=True,
                description="Sets the ratio number for the node.",
            ),
            "monitor": Schema(
                type=TYPE_STRING,
                optional=True,
                default=DEFAULT_MONITOR,
                description="Specifies the name of the monitor or monitor rule that you "
                "want to associate with the node.",
            ),
            "description": Schema(
                type=TYPE_STRING,
                optional=True,
                description="User defined description of the node.",
            ),
            "state": Schema(
                type=TYPE_STRING,
                optional=True,
                computed=True,
                description="Marks the node up or down. The default value is user-up.",
            ),
            "session": Schema(
                type=TYPE_STRING,
                optional=True,
                computed=True,
                description="Enables or disables the node for new sessions. The default "
                "value is user-enabled.",
            ),
            "fqdn": Schema(
                type=TYPE_LIST,
                optional=True,
                max_items=1,
                elem={
                    "address_family": Schema(
                        type=TYPE_STRING,
                        optional=True,
                        description="Specifies the node's address family. The default is "
                        "'unspecified', or IP-agnostic",
                    ),
                    "name": Schema(
                        type=TYPE_STRING,
                        optional=True,
                        description="Specifies the fully qualified domain name of the node.",
                    ),
                    "interval": Schema(
                        type=TYPE_STRING,
                        optional=True,
                        computed=True,
                        description="Specifies the amount of time before sending the next "
                        "DNS query.",
                    ),
                    "downinterval": Schema(
                        type=TYPE_INT,
                        optional=True,
                        computed=True,
                        description="Specifies the number of attempts to resolve a domain "
                        "name. The default is 5.",
                    ),
                    "autopopulate": Schema(
                        type=TYPE_STRING,
                        optional=True,
                        computed=True,
                        description="Specifies whether the node should scale to the IP "
                        "address set returned by DNS.",
                    ),
                },
            ),
        },
    )


def normalize_session(session):
    """Collapse the device session values into user-enabled / user-disabled."""
    if session in _ENABLED_SESSIONS:
        return SESSION_ENABLED
    return SESSION_DISABLED


def resource_bigip_ltm_node_create(ctx, d, meta):
    """Create the node unless the device already has one with this name."""
    name = d.get("name")
    address = d.get("address")

    log.info(f"Creating node {name}::{address}")

    node = Node(
        name=name,
        rate_limit=d.get("rate_limit"),
        connection_limit=d.get("connection_limit"),
        dynamic_ratio=d.get("dynamic_ratio"),
        monitor=d.get("monitor"),
        state=d.get("state"),
        session=d.get("session"),
        description=d.get("description"),
        ratio=d.get("ratio"),
    )

    if is_literal_address(address):
        node.address = address
    else:
        node.fqdn = FQDN(
            name=address,
            interval=d.get("fqdn.0.interval"),
            address_family=d.get("fqdn.0.address_family"),
            autopopulate=d.get("fqdn.0.autopopulate"),
            down_interval=d.get("fqdn.0.downinterval"),
        )

    log.debug(f"config of Node to be added: {node}")
    d.set_id(name)

    exists, _ = resource_bigip_ltm_node_exists(d, meta)
    if not exists:
        try:
            meta.add_node(node)
        except Exception as err:
            d.set_id("")
            return diagnostics.from_err(RemoteCallFailure("creating", name, err))
    else:
        log.info(f"Node {name} already present, skipping add")

    return resource_bigip_ltm_node_read(ctx, d, meta)


def resource_bigip_ltm_node_read(ctx, d, meta):
    """Refresh the state from the device, clearing the id when the node is gone."""
    name = d.id()

    lookup = fetch_node(meta, name)
    if lookup.is_failed:
        return diagnostics.from_err(RemoteCallFailure("retrieving", name, lookup.error))
    if lookup.is_absent:
        log.warning(f"Node ({name}) not found, removing from state")
        d.set_id("")
        return diagnostics.Diagnostics()

    node = lookup.node
    try:
        if node.fqdn.name:
            d.set("address", node.fqdn.name)
        else:
            log.info(f"Address: {strip_route_domain(node.address)}")
            d.set("address", node.address)
    except ConfigError as err:
        return diagnostics.from_err(
            ConfigError(f"Error saving address to state for Node ({name}): {err}")
        )
    d.set("name", name)

    try:
        d.set("rate_limit", node.rate_limit)
    except ConfigError as err:
        return diagnostics.from_err(
            ConfigError(f"Error saving rate_limit to state for Node ({name}): {err}")
        )

    log.debug(f"node session is: {node.session}")
    d.set("session", normalize_session(node.session))

    d.set("connection_limit", node.connection_limit)
    d.set("description", node.description)
    d.set("dynamic_ratio", node.dynamic_ratio)
    d.set("monitor", node.monitor.strip())
    d.set("ratio", node.ratio)
    d.set("fqdn.0.interval", node.fqdn.interval)
    d.set("fqdn.0.downinterval", node.fqdn.down_interval)
    d.set("fqdn.0.autopopulate", node.fqdn.autopopulate)
    d.set("fqdn.0.address_family", node.fqdn.address_family)

    return diagnostics.Diagnostics()


def resource_bigip_ltm_node_exists(d, meta):
    """
    Returns:
        (bool, Exception) whether the node exists, and the lookup error if any
    """
    lookup = fetch_node(meta, d.id())
    if lookup.is_failed:
        return False, lookup.error
    if lookup.is_absent:
        log.warning(f"Node ({d.id()}) not found")
        return False, None
    return True, None


def resource_bigip_ltm_node_update(ctx, d, meta):
    """Push the mutable fields. The address is only sent when it is literal."""
    name = d.id()
    address = d.get("address")

    node = Node(
        connection_limit=d.get("connection_limit"),
        dynamic_ratio=d.get("dynamic_ratio"),
        monitor=d.get("monitor"),
        rate_limit=d.get("rate_limit"),
        state=d.get("state"),
        session=d.get("session"),
        description=d.get("description"),
        ratio=d.get("ratio"),
    )

    if is_literal_address(address):
        node.address = address

    try:
        meta.modify_node(name, node)
    except Exception as err:
        return diagnostics.from_err(RemoteCallFailure("modifying", name, err))

    return resource_bigip_ltm_node_read(ctx, d, meta)


def resource_bigip_ltm_node_delete(ctx, d, meta):
    name = d.id()
    log.info(f"Deleting node {name}")

    try:
        meta.delete_node(name)
    except Exception as err:
        log.error(f"Unable to Delete Node {name}: {err}")
        return diagnostics.from_err(RemoteCallFailure("deleting", name, err))

    d.set_id("")
    return diagnostics.Diagnostics()

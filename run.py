#!/usr/bin/env python3

import json
import os
import sys

import yaml
from docopt import docopt

from bigip.exceptions import ConfigError
from bigip.provider import Provider
from bigip.utils.configs import get_configs, get_device_config
from utility.log import Log

log = Log(__name__)

doc = """
Drive the lifecycle of a BIG-IP LTM node from a yaml node definition.

 Usage:
  run.py (create | update) --node <FILE> --state <FILE>
        [--device <FILE>]
        [--log-level <LEVEL>]
        [--log-dir <directory-name>]
        [--disable-console-log]
  run.py (read | delete) --state <FILE>
        [--device <FILE>]
        [--log-level <LEVEL>]
        [--log-dir <directory-name>]
        [--disable-console-log]
  run.py import <name> --state <FILE>
        [--device <FILE>]
        [--log-level <LEVEL>]
        [--log-dir <directory-name>]
        [--disable-console-log]

Options:
  -h --help                         show this screen
  --node <FILE>                     node definition using the resource field names
                                    eg: name, address, monitor, fqdn
  --state <FILE>                    json file holding the id and attributes of the
                                    node between runs
  --device <FILE>                   device configuration file
                                    [default: ~/.bigip.yaml]
  --log-level <LEVEL>               Set logging level
  --log-dir <directory-name>        Set log directory
  --disable-console-log             Only log to files in --log-dir
"""

RESOURCE_TYPE = "bigip_ltm_node"


def load_file(file_name):
    """Retrieve yaml data content from file."""
    file_path = os.path.abspath(os.path.expanduser(file_name))
    with open(file_path, "r") as conf_:
        content = yaml.safe_load(conf_)

    return content


def load_state(file_name):
    """Return the persisted state, an empty one when the file does not exist."""
    file_path = os.path.abspath(os.path.expanduser(file_name))
    if not os.path.exists(file_path):
        return {"id": "", "attributes": {}}

    with open(file_path, "r") as state_:
        return json.load(state_)


def store_state(file_name, state):
    """Persist the state, removing the file once the node is gone."""
    file_path = os.path.abspath(os.path.expanduser(file_name))
    if not state["id"]:
        if os.path.exists(file_path):
            os.remove(file_path)
        log.info(f"Node removed, state file {file_path} cleared")
        return

    with open(file_path, "w") as state_:
        json.dump(state, state_, indent=2)
    log.info(f"State written to {file_path}")


def print_diagnostics(diags):
    for diag in diags:
        print(f"{diag.severity.upper():<10s} {diag.summary}")


def run(args):
    console_log_level = args.get("--log-level")
    log_directory = args.get("--log-dir")
    disable_console_log = args.get("--disable-console-log", False)

    if log_directory:
        log.configure_logger("bigip-node", log_directory, disable_console_log)

    if console_log_level:
        log.set_level(console_log_level)

    device_file = os.path.expanduser(args.get("--device") or "~/.bigip.yaml")
    state_file = args["--state"]

    provider = Provider()
    resource = provider.resource(RESOURCE_TYPE)
    try:
        get_configs(device_file, reload=True)
        meta = provider.configure(get_device_config())
    except ConfigError as e:
        log.error(f"Invalid device configuration: {e}")
        return 1

    state = load_state(state_file)

    if args.get("import"):
        imported = resource.import_state(None, args["<name>"], meta)
        d = imported[0]
        diags = resource.read(None, d, meta)
        if not diags.has_error() and not d.id():
            log.error(f"Cannot import non-existent node {args['<name>']}")
            return 1
    elif args.get("create") or args.get("update"):
        node_config = load_file(args["--node"]) or {}
        diags = resource.validate(node_config)
        if diags.has_error():
            print_diagnostics(diags)
            return 1

        if args.get("create"):
            if state["id"]:
                log.error(f"Node {state['id']} is already managed by {state_file}")
                return 1
            d = resource.data(config=node_config)
            diags = resource.create(None, d, meta)
        else:
            if not state["id"]:
                log.error(f"No node recorded in {state_file}, create it first")
                return 1
            d = resource.data(
                config=node_config, state=state["attributes"], id=state["id"]
            )
            diags = resource.update(None, d, meta)
    else:
        if not state["id"]:
            log.error(f"No node recorded in {state_file}")
            return 1
        d = resource.data(state=state["attributes"], id=state["id"])
        if args.get("read"):
            diags = resource.read(None, d, meta)
        else:
            diags = resource.delete(None, d, meta)

    print_diagnostics(diags)
    if diags.has_error():
        return 1

    store_state(state_file, d.state())
    return 0


if __name__ == "__main__":
    args = docopt(doc)
    rc = run(args)
    log.info("final rc of node run %d" % rc)
    sys.exit(rc)

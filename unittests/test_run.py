import json

import mock
import pytest
import yaml
from docopt import docopt

import run
from bigip.utils import configs


@pytest.fixture(autouse=True)
def reset_cache():
    configs.CONFIG = None
    yield
    configs.CONFIG = None


@pytest.fixture
def files(tmp_path, literal_config):
    device = tmp_path / "bigip.yaml"
    device.write_text(yaml.safe_dump({"device": {"address": "10.1.1.245"}}))
    node = tmp_path / "node.yaml"
    node.write_text(yaml.safe_dump(literal_config))
    return {"device": str(device), "node": str(node), "state": str(tmp_path / "state.json")}


def execute(store, *argv):
    args = docopt(run.doc, argv=list(argv))
    with mock.patch("run.Provider.configure", return_value=store):
        return run.run(args)


def read_state(files):
    with open(files["state"]) as fh:
        return json.load(fh)


def test_node_lifecycle(store, files, literal_config):
    common = ["--device", files["device"], "--state", files["state"]]

    assert execute(store, "create", "--node", files["node"], *common) == 0
    state = read_state(files)
    assert state["id"] == "/Common/node1"
    assert state["attributes"]["address"] == "10.10.10.10"
    assert state["attributes"]["session"] == "user-enabled"

    literal_config["ratio"] = 7
    with open(files["node"], "w") as fh:
        yaml.safe_dump(literal_config, fh)
    assert execute(store, "update", "--node", files["node"], *common) == 0
    assert read_state(files)["attributes"]["ratio"] == 7

    assert execute(store, "read", *common) == 0
    assert execute(store, "delete", *common) == 0
    assert store.nodes == {}
    with pytest.raises(FileNotFoundError):
        read_state(files)


def test_create_rejects_invalid_node(store, files):
    with open(files["node"], "w") as fh:
        yaml.safe_dump({"name": "node1", "address": "10.0.0.5"}, fh)

    rc = execute(store, "create", "--node", files["node"], "--device", files["device"],
                 "--state", files["state"])

    assert rc == 1
    assert store.calls == []


def test_create_failure_writes_no_state(store, files):
    store.failures["add"] = RuntimeError("boom")

    rc = execute(store, "create", "--node", files["node"], "--device", files["device"],
                 "--state", files["state"])

    assert rc == 1
    with pytest.raises(FileNotFoundError):
        read_state(files)


def test_delete_failure_keeps_state(store, files):
    common = ["--device", files["device"], "--state", files["state"]]
    execute(store, "create", "--node", files["node"], *common)
    store.failures["delete"] = RuntimeError("locked")

    assert execute(store, "delete", *common) == 1
    assert read_state(files)["id"] == "/Common/node1"


def test_import(store, files, remote_node):
    store.nodes["/Common/node1"] = remote_node

    rc = execute(store, "import", "/Common/node1", "--device", files["device"],
                 "--state", files["state"])

    assert rc == 0
    state = read_state(files)
    assert state["id"] == "/Common/node1"
    assert state["attributes"]["address"] == "10.10.10.10%2"


def test_import_missing_node(store, files):
    rc = execute(store, "import", "/Common/missing", "--device", files["device"],
                 "--state", files["state"])
    assert rc == 1


def test_read_without_state(store, files):
    assert execute(store, "read", "--device", files["device"], "--state", files["state"]) == 1


def test_invalid_device_config(store, tmp_path, files):
    device = tmp_path / "empty.yaml"
    device.write_text(yaml.safe_dump({"device": {}}))
    args = docopt(run.doc, argv=["read", "--device", str(device), "--state", files["state"]])

    assert run.run(args) == 1

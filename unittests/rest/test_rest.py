import json

import mock
import pytest

from rest.common.utils.exceptions import (
    CommandExecutionError,
    HTTPError,
    ResourceNotFoundError,
)
from rest.common.utils.rest import REST, rest


def response(status_code, body=None):
    resp = mock.Mock()
    resp.status_code = status_code
    resp.text = json.dumps(body) if body is not None else ""
    return resp


@pytest.fixture
def client():
    return REST(ip="10.1.1.245", username="admin", password="secret", port=8443)


def test_invalid_ip():
    with pytest.raises(ValueError):
        REST(ip=None)


def test_rest_from_device_config():
    _rest = rest(device={"address": "bigip.lab", "username": "ops", "port": 443})
    assert _rest.base_uri == "https://bigip.lab:443"


@mock.patch("rest.common.utils.rest.requests.get")
def test_get(get_mock, client):
    get_mock.return_value = response(200, {"name": "node1"})

    result = client.get(relative_url="/mgmt/tm/ltm/node/~Common~node1")

    assert result == {"name": "node1"}
    args, kwargs = get_mock.call_args
    assert args[0] == "https://10.1.1.245:8443/mgmt/tm/ltm/node/~Common~node1"
    assert kwargs["auth"] == ("admin", "secret")
    assert kwargs["verify"] is False
    assert kwargs["data"] is None


@mock.patch("rest.common.utils.rest.requests.post")
def test_post_serializes_data(post_mock, client):
    post_mock.return_value = response(200, {"name": "node1"})

    client.post(relative_url="/mgmt/tm/ltm/node", data={"name": "node1"})

    assert json.loads(post_mock.call_args[1]["data"]) == {"name": "node1"}
    assert post_mock.call_count == 1


@mock.patch("rest.common.utils.rest.requests.delete")
def test_delete_empty_body(delete_mock, client):
    delete_mock.return_value = response(200)
    assert client.delete(relative_url="/mgmt/tm/ltm/node/~Common~node1") == {}


@mock.patch("rest.common.utils.rest.requests.get")
def test_not_found(get_mock, client):
    get_mock.return_value = response(404, {"code": 404})

    with pytest.raises(ResourceNotFoundError) as exc:
        client.get(relative_url="/mgmt/tm/ltm/node/~Common~missing")

    assert exc.value.status_code == 404


@pytest.mark.parametrize("status_code", [400, 401, 409])
@mock.patch("rest.common.utils.rest.requests.put")
def test_client_errors(put_mock, status_code, client):
    put_mock.return_value = response(status_code, {"message": "rejected"})

    with pytest.raises(HTTPError) as exc:
        client.put(relative_url="/mgmt/tm/ltm/node/~Common~node1", data={})

    assert exc.value.status_code == status_code
    assert put_mock.call_count == 1


@mock.patch("rest.common.utils.rest.requests.patch")
def test_server_error_no_retry(patch_mock, client):
    patch_mock.return_value = response(500, {"message": "boom"})

    with pytest.raises(CommandExecutionError):
        client.patch(relative_url="/mgmt/tm/ltm/node/~Common~node1", data={})

    assert patch_mock.call_count == 1

import pytest

from bigip.exceptions import ConfigError
from bigip.provider import Provider
from rest.endpoints.ltm.node import LTMNode


def test_resources_map():
    provider = Provider()
    resource = provider.resource("bigip_ltm_node")
    assert resource.schema["monitor"].default == "/Common/icmp"


def test_unknown_resource():
    with pytest.raises(ConfigError):
        Provider().resource("bigip_ltm_pool")


def test_configure():
    provider = Provider()

    meta = provider.configure({"address": "10.1.1.245", "password": "pw"})

    assert isinstance(meta, LTMNode)
    assert provider.meta is meta
    assert meta._rest.base_uri == "https://10.1.1.245:443"


def test_configure_requires_address():
    with pytest.raises(ConfigError):
        Provider().configure({"username": "admin"})

import pytest
from google.api_core import exceptions

from skyforge.builders.network import build_network_interfaces, build_tags
from skyforge.errors import (
    NetworkConfigurationError,
    NetworkNotFoundError,
    SubnetworkNotFoundError,
)
from skyforge.schemas.network import Networks

NETWORK_LINK = "https://www.googleapis.com/compute/v1/projects/test-project/global/networks/default"
SUBNET_LINK = "https://www.googleapis.com/compute/v1/projects/test-project/regions/us-central1/subnetworks/sn-1"


@pytest.fixture
def catalogs(mocker):
    network_catalog = mocker.Mock()
    network_catalog.find.return_value = (mocker.Mock(self_link=NETWORK_LINK), True)
    subnetwork_catalog = mocker.Mock()
    subnetwork_catalog.find.return_value = mocker.Mock(self_link=SUBNET_LINK)
    return network_catalog, subnetwork_catalog


def test_networks_accessors():
    networks = Networks.model_validate(
        {
            "private": {
                "type": "manual",
                "ip": "10.0.0.10",
                "dns": ["10.0.0.2"],
                "cloud_properties": {
                    "network_name": "vpc-1",
                    "subnetwork_name": "sn-1",
                    "ip_forwarding": True,
                    "tags": ["web", "internal"],
                    "xpn_host_project_id": "host-project",
                },
            },
            "public": {"type": "vip", "ip": "34.1.2.3", "cloud_properties": {"tags": ["web"]}},
        }
    )

    networks.validate_single_nic()
    assert networks.network_name() == "vpc-1"
    assert networks.subnetwork_name() == "sn-1"
    assert networks.network_project_id("test-project") == "host-project"
    assert networks.static_private_ip() == "10.0.0.10"
    assert networks.vip_network().ip == "34.1.2.3"
    assert networks.dns() == ["10.0.0.2"]
    assert networks.can_ip_forward() is True
    assert networks.tags() == ["web", "internal", "web"]


def test_dynamic_network_has_no_static_ip():
    networks = Networks.model_validate({"default": {"type": "dynamic", "ip": "10.0.0.5"}})
    assert networks.static_private_ip() == ""
    assert networks.network_name() == "default"
    assert networks.network_project_id("test-project") == "test-project"


def test_empty_networks():
    networks = Networks()
    networks.validate_single_nic()
    assert networks.network_name() == "default"
    assert networks.tags() == []


def test_two_nic_networks_rejected():
    networks = Networks.model_validate({"a": {"type": "dynamic"}, "b": {"type": "manual"}})
    with pytest.raises(NetworkConfigurationError, match="dynamic or manual"):
        networks.validate_single_nic()


def test_two_vip_networks_rejected():
    networks = Networks.model_validate({"a": {"type": "vip"}, "b": {"type": "vip"}})
    with pytest.raises(NetworkConfigurationError, match="vip"):
        networks.validate_single_nic()


def test_interface_without_external_ip(catalogs):
    network_catalog, subnetwork_catalog = catalogs
    networks = Networks.model_validate({"default": {"type": "dynamic"}})

    nics = build_network_interfaces(
        networks, "us-central1-a", "test-project", network_catalog, subnetwork_catalog
    )

    assert len(nics) == 1
    assert nics[0].network == NETWORK_LINK
    assert "subnetwork" not in nics[0]
    assert len(nics[0].access_configs) == 0
    network_catalog.find.assert_called_once_with("test-project", "default")
    subnetwork_catalog.find.assert_not_called()


def test_interface_with_subnetwork_and_ephemeral_ip(catalogs):
    network_catalog, subnetwork_catalog = catalogs
    networks = Networks.model_validate(
        {
            "default": {
                "type": "manual",
                "ip": "10.0.0.10",
                "cloud_properties": {
                    "network_name": "vpc-1",
                    "subnetwork_name": "sn-1",
                    "ephemeral_external_ip": True,
                },
            }
        }
    )

    nic = build_network_interfaces(
        networks, "us-central1-a", "test-project", network_catalog, subnetwork_catalog
    )[0]

    subnetwork_catalog.find.assert_called_once_with("test-project", "sn-1", "us-central1")
    assert nic.subnetwork == SUBNET_LINK
    assert nic.network_i_p == "10.0.0.10"
    assert len(nic.access_configs) == 1
    assert nic.access_configs[0].name == "External NAT"
    assert nic.access_configs[0].type_ == "ONE_TO_ONE_NAT"
    assert "nat_i_p" not in nic.access_configs[0]


def test_interface_with_pinned_external_ip(catalogs):
    network_catalog, subnetwork_catalog = catalogs
    networks = Networks.model_validate(
        {"default": {"type": "dynamic"}, "vip": {"type": "vip", "ip": "34.1.2.3"}}
    )

    nic = build_network_interfaces(
        networks, "us-central1-a", "test-project", network_catalog, subnetwork_catalog
    )[0]

    assert len(nic.access_configs) == 1
    assert nic.access_configs[0].nat_i_p == "34.1.2.3"


def test_network_not_found(catalogs):
    network_catalog, subnetwork_catalog = catalogs
    network_catalog.find.return_value = (None, False)
    networks = Networks.model_validate(
        {"default": {"cloud_properties": {"network_name": "missing-vpc"}}}
    )

    with pytest.raises(NetworkNotFoundError) as exc:
        build_network_interfaces(
            networks, "us-central1-a", "test-project", network_catalog, subnetwork_catalog
        )

    assert "missing-vpc" in str(exc.value)
    assert "test-project" in str(exc.value)


def test_subnetwork_not_found_names_shared_vpc_project(catalogs):
    network_catalog, subnetwork_catalog = catalogs
    subnetwork_catalog.find.side_effect = exceptions.NotFound("subnetwork missing")
    networks = Networks.model_validate(
        {
            "default": {
                "cloud_properties": {
                    "subnetwork_name": "sn-missing",
                    "xpn_host_project_id": "host-project",
                }
            }
        }
    )

    with pytest.raises(SubnetworkNotFoundError) as exc:
        build_network_interfaces(
            networks, "us-central1-a", "test-project", network_catalog, subnetwork_catalog
        )

    assert exc.value.name == "sn-missing"
    assert exc.value.scope == "host-project"
    assert "Subnetwork 'sn-missing' does not exist in project 'host-project'" == str(exc.value)


def test_subnetwork_lookup_error_propagates(catalogs):
    network_catalog, subnetwork_catalog = catalogs
    subnetwork_catalog.find.side_effect = exceptions.ServiceUnavailable("try later")
    networks = Networks.model_validate(
        {"default": {"cloud_properties": {"subnetwork_name": "sn-1"}}}
    )

    with pytest.raises(exceptions.ServiceUnavailable):
        build_network_interfaces(
            networks, "us-central1-a", "test-project", network_catalog, subnetwork_catalog
        )


def test_tags_are_deduplicated():
    networks = Networks.model_validate(
        {"default": {"cloud_properties": {"tags": ["web", "ssh"]}}}
    )
    tags = build_tags(networks, ["ssh", "db"])
    assert sorted(tags.items) == ["db", "ssh", "web"]

from google.api_core import exceptions
from google.cloud import compute_v1

from ..config import DEFAULTS, ProvisioningDefaults
from ..core import region_from_zone
from ..errors import NetworkNotFoundError, SubnetworkNotFoundError
from ..schemas.network import Networks
from ..services.base import NetworkCatalog, SubnetworkCatalog


def build_network_interfaces(
    networks: Networks,
    zone: str,
    project_id: str,
    network_catalog: NetworkCatalog,
    subnetwork_catalog: SubnetworkCatalog,
    defaults: ProvisioningDefaults = DEFAULTS,
) -> list[compute_v1.NetworkInterface]:
    """
    Resolves the network (and subnetwork, when named) and returns the single
    network interface of the instance.
    """
    network_project = networks.network_project_id(project_id)
    network_name = networks.network_name(defaults.default_network_name)

    network, found = network_catalog.find(network_project, network_name)
    if not found:
        raise NetworkNotFoundError(network_name, network_project)

    nic = compute_v1.NetworkInterface(network=network.self_link)

    subnetwork_name = networks.subnetwork_name()
    if subnetwork_name:
        try:
            subnetwork = subnetwork_catalog.find(
                network_project, subnetwork_name, region_from_zone(zone)
            )
        except exceptions.NotFound as e:
            raise SubnetworkNotFoundError(subnetwork_name, network_project) from e
        nic.subnetwork = subnetwork.self_link

    if static_ip := networks.static_private_ip():
        nic.network_i_p = static_ip

    vip_ip = networks.vip_network().ip
    if networks.ephemeral_external_ip() or vip_ip:
        access_config = compute_v1.AccessConfig(
            name=defaults.access_config_name,
            type_=defaults.access_config_type,
        )
        # Pinned address wins over an ephemeral one
        if vip_ip:
            access_config.nat_i_p = vip_ip
        nic.access_configs = [access_config]

    return [nic]


def build_tags(networks: Networks, vm_tags: list[str]) -> compute_v1.Tags:
    """Union of network and VM tags, first occurrence order kept."""
    items = list(dict.fromkeys([*networks.tags(), *vm_tags]))
    return compute_v1.Tags(items=items)

from typing import Any

from google.api_core import exceptions
from tenacity import retry, retry_if_not_exception_type

from ..clients import (
    get_disk_types_client,
    get_networks_client,
    get_subnetworks_client,
)
from ..core import RETRY_CONFIG, resource_name
from ..logger import logger

# NotFound is an answer, not a transient failure
_LOOKUP_RETRY = {
    **RETRY_CONFIG,
    "retry": retry_if_not_exception_type(exceptions.NotFound),
    "reraise": True,
}


class DiskTypeLookup:
    def __init__(self, project_id: str):
        self.project_id = project_id

    @retry(**_LOOKUP_RETRY)  # type: ignore[call-overload, untyped-decorator]
    def find(self, type_name: str, zone: str) -> tuple[Any, bool]:
        client = get_disk_types_client()
        try:
            disk_type = client.get(
                project=self.project_id, zone=resource_name(zone), disk_type=type_name
            )
        except exceptions.NotFound:
            logger.debug(f"Disk type {type_name} not found in {zone}")
            return None, False
        return disk_type, True


class NetworkLookup:
    @retry(**_LOOKUP_RETRY)  # type: ignore[call-overload, untyped-decorator]
    def find(self, project_id: str, network_name: str) -> tuple[Any, bool]:
        client = get_networks_client()
        try:
            network = client.get(project=project_id, network=network_name)
        except exceptions.NotFound:
            logger.debug(f"Network {network_name} not found in {project_id}")
            return None, False
        return network, True


class SubnetworkLookup:
    @retry(**_LOOKUP_RETRY)  # type: ignore[call-overload, untyped-decorator]
    def find(self, project_id: str, subnetwork_name: str, region: str) -> Any:
        """Raises google.api_core.exceptions.NotFound when it does not exist."""
        client = get_subnetworks_client()
        return client.get(project=project_id, region=region, subnetwork=subnetwork_name)

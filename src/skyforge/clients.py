from __future__ import annotations

from functools import lru_cache
from typing import Any

from google.cloud import compute_v1

# Shared Client Registry (Lazy-loaded and cached)


@lru_cache(maxsize=1)
def get_compute_instances_client() -> Any:
    return compute_v1.InstancesClient()


@lru_cache(maxsize=1)
def get_disk_types_client() -> Any:
    return compute_v1.DiskTypesClient()


@lru_cache(maxsize=1)
def get_networks_client() -> Any:
    return compute_v1.NetworksClient()


@lru_cache(maxsize=1)
def get_subnetworks_client() -> Any:
    return compute_v1.SubnetworksClient()


@lru_cache(maxsize=1)
def get_zone_operations_client() -> Any:
    return compute_v1.ZoneOperationsClient()


@lru_cache(maxsize=1)
def get_region_operations_client() -> Any:
    return compute_v1.RegionOperationsClient()


@lru_cache(maxsize=1)
def get_global_operations_client() -> Any:
    return compute_v1.GlobalOperationsClient()


@lru_cache(maxsize=1)
def get_target_pools_client() -> Any:
    return compute_v1.TargetPoolsClient()


@lru_cache(maxsize=1)
def get_backend_services_client() -> Any:
    return compute_v1.BackendServicesClient()


@lru_cache(maxsize=1)
def get_instance_groups_client() -> Any:
    return compute_v1.InstanceGroupsClient()

from typing import Any

from google.cloud import compute_v1

from ..clients import get_target_pools_client
from ..core import resource_name
from ..errors import TargetPoolNotFoundError
from ..logger import logger
from .base import OperationWaiter


def _references(instance_link: str) -> list[compute_v1.InstanceReference]:
    return [compute_v1.InstanceReference(instance=instance_link)]


class TargetPools:
    def __init__(self, project_id: str, waiter: OperationWaiter):
        self.project_id = project_id
        self.waiter = waiter

    def _pools(self, region: str = "") -> list[tuple[str, Any]]:
        """(region, pool) pairs for one region, or every region."""
        client = get_target_pools_client()
        if region:
            return [
                (region, pool)
                for pool in client.list(project=self.project_id, region=region)
            ]

        pools = []
        for scope, scoped_list in client.aggregated_list(project=self.project_id):
            for pool in scoped_list.target_pools:
                pools.append((resource_name(scope), pool))
        return pools

    def _find(self, name: str) -> tuple[str, Any]:
        for region, pool in self._pools():
            if pool.name == name:
                return region, pool
        raise TargetPoolNotFoundError(name, self.project_id)

    def add_instance(self, name: str, instance_link: str) -> None:
        region, _ = self._find(name)
        request = compute_v1.TargetPoolsAddInstanceRequest(
            instances=_references(instance_link)
        )
        operation = get_target_pools_client().add_instance(
            project=self.project_id,
            region=region,
            target_pool=name,
            target_pools_add_instance_request_resource=request,
        )
        self.waiter.wait(operation, region=region)
        logger.debug(f"Added {instance_link} to target pool {name}")

    def remove_instance(self, name: str, instance_link: str) -> None:
        region, _ = self._find(name)
        request = compute_v1.TargetPoolsRemoveInstanceRequest(
            instances=_references(instance_link)
        )
        operation = get_target_pools_client().remove_instance(
            project=self.project_id,
            region=region,
            target_pool=name,
            target_pools_remove_instance_request_resource=request,
        )
        self.waiter.wait(operation, region=region)
        logger.debug(f"Removed {instance_link} from target pool {name}")

    def find_by_instance(
        self, instance_link: str, region: str = ""
    ) -> tuple[str, bool]:
        for _region, pool in self._pools(region):
            if instance_link in pool.instances:
                return pool.name, True
        return "", False

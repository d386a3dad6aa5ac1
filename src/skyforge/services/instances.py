from typing import Any

from ..clients import get_compute_instances_client
from ..core import resource_name


class Instances:
    """Issues create and delete requests; does not wait for them."""

    def insert(self, project_id: str, zone: str, instance: Any) -> Any:
        client = get_compute_instances_client()
        return client.insert(
            project=project_id, zone=resource_name(zone), instance_resource=instance
        )

    def delete(self, project_id: str, zone: str, name: str) -> Any:
        client = get_compute_instances_client()
        return client.delete(project=project_id, zone=resource_name(zone), instance=name)

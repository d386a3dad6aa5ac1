from google.cloud import compute_v1

from ..clients import get_backend_services_client, get_instance_groups_client
from ..core import resource_name, zone_from_link
from ..errors import InstanceGroupNotFoundError
from ..logger import logger
from .base import OperationWaiter


class BackendServices:
    """
    Backend services hold unmanaged instance groups, so membership is
    managed on the group in the instance's zone.
    """

    def __init__(self, project_id: str, waiter: OperationWaiter):
        self.project_id = project_id
        self.waiter = waiter

    def add_instance(self, name: str, instance_link: str) -> None:
        zone = zone_from_link(instance_link)
        service = get_backend_services_client().get(
            project=self.project_id, backend_service=name
        )

        group = next(
            (
                resource_name(b.group)
                for b in service.backends
                if zone_from_link(b.group) == zone
            ),
            None,
        )
        if group is None:
            raise InstanceGroupNotFoundError(name, zone)

        request = compute_v1.InstanceGroupsAddInstancesRequest(
            instances=[compute_v1.InstanceReference(instance=instance_link)]
        )
        operation = get_instance_groups_client().add_instances(
            project=self.project_id,
            zone=zone,
            instance_group=group,
            instance_groups_add_instances_request_resource=request,
        )
        self.waiter.wait(operation, zone=zone)
        logger.debug(f"Added {instance_link} to instance group {group} of {name}")

    def remove_instance(self, instance_link: str) -> None:
        zone = zone_from_link(instance_link)
        client = get_instance_groups_client()
        list_request = compute_v1.InstanceGroupsListInstancesRequest(
            instance_state="ALL"
        )

        for group in client.list(project=self.project_id, zone=zone):
            members = client.list_instances(
                project=self.project_id,
                zone=zone,
                instance_group=group.name,
                instance_groups_list_instances_request_resource=list_request,
            )
            if not any(m.instance == instance_link for m in members):
                continue

            request = compute_v1.InstanceGroupsRemoveInstancesRequest(
                instances=[compute_v1.InstanceReference(instance=instance_link)]
            )
            operation = client.remove_instances(
                project=self.project_id,
                zone=zone,
                instance_group=group.name,
                instance_groups_remove_instances_request_resource=request,
            )
            self.waiter.wait(operation, zone=zone)
            logger.debug(f"Removed {instance_link} from instance group {group.name}")

from google.cloud import compute_v1

from .builders.accelerators import build_accelerators
from .builders.disks import build_boot_disk
from .builders.local_ssd import build_local_ssd_disks, resolve_local_disk_topology
from .builders.metadata import build_metadata
from .builders.network import build_network_interfaces, build_tags
from .builders.scheduling import build_scheduling
from .builders.service_accounts import build_service_accounts
from .config import DEFAULTS, ProvisioningDefaults
from .core import region_from_zone, resource_name
from .errors import InstanceNameError, VMCreationFailedError
from .logger import logger
from .membership import (
    add_to_backend_service,
    add_to_target_pool,
    remove_from_backend_service,
    remove_from_target_pool,
)
from .rollback import CompensationStack
from .schemas.instance import ProvisionedInstance, VMProperties
from .schemas.network import Networks
from .services.base import (
    BackendServiceService,
    ComputeService,
    DiskTypeCatalog,
    IdGenerator,
    NetworkCatalog,
    OperationWaiter,
    SubnetworkCatalog,
    TargetPoolService,
)


def _machine_type_link(machine_type: str, zone: str) -> str:
    if "/" in machine_type:
        return machine_type
    return f"zones/{zone}/machineTypes/{machine_type}"


class InstanceProvisioner:
    """
    Turns VM properties plus network configuration into a running instance.

    Steps: name -> build request -> insert -> wait -> [target pool] ->
    [backend service]. Nothing before the insert has side effects; every
    step after it is undone on failure, newest first.
    """

    def __init__(
        self,
        project_id: str,
        compute: ComputeService,
        operations: OperationWaiter,
        disk_types: DiskTypeCatalog,
        networks: NetworkCatalog,
        subnetworks: SubnetworkCatalog,
        target_pools: TargetPoolService,
        backend_services: BackendServiceService,
        id_generator: IdGenerator,
        defaults: ProvisioningDefaults = DEFAULTS,
    ):
        self.project_id = project_id
        self.compute = compute
        self.operations = operations
        self.disk_types = disk_types
        self.networks = networks
        self.subnetworks = subnetworks
        self.target_pools = target_pools
        self.backend_services = backend_services
        self.id_generator = id_generator
        self.defaults = defaults

    def instance_name(self, props: VMProperties) -> str:
        if props.name:
            return props.name
        try:
            uid = self.id_generator.generate()
        except Exception as e:
            raise InstanceNameError(f"Generating random instance name: {e}") from e
        return f"{self.defaults.instance_name_prefix}-{uid}"

    def build_instance(
        self,
        name: str,
        props: VMProperties,
        networks: Networks,
        registry_endpoint: str,
    ) -> compute_v1.Instance:
        """Assembles the insert request. Raises before anything is created."""
        networks.validate_single_nic()
        zone = resource_name(props.zone)

        disks = [
            build_boot_disk(
                props.stemcell, props.root_disk_size_gb, props.root_disk_type, self.defaults
            )
        ]
        topology = resolve_local_disk_topology(
            props.machine_type, props.ephemeral_disk_type, self.defaults
        )
        disks.extend(
            build_local_ssd_disks(topology, zone, self.disk_types, self.defaults)
        )

        return compute_v1.Instance(
            name=name,
            description=self.defaults.instance_description,
            can_ip_forward=networks.can_ip_forward(),
            disks=disks,
            machine_type=_machine_type_link(props.machine_type, zone),
            metadata=build_metadata(name, registry_endpoint, networks, self.defaults),
            network_interfaces=build_network_interfaces(
                networks,
                zone,
                self.project_id,
                self.networks,
                self.subnetworks,
                self.defaults,
            ),
            scheduling=build_scheduling(
                props.automatic_restart,
                props.on_host_maintenance,
                props.preemptible,
                props.node_group,
                self.defaults,
            ),
            service_accounts=build_service_accounts(
                props.service_account, props.service_scopes, self.defaults
            ),
            tags=build_tags(networks, props.tags),
            labels=dict(props.labels),
            guest_accelerators=build_accelerators(props.accelerators),
        )

    def provision(
        self, props: VMProperties, networks: Networks, registry_endpoint: str = ""
    ) -> ProvisionedInstance:
        name = self.instance_name(props)
        instance = self.build_instance(name, props, networks, registry_endpoint)
        zone = resource_name(props.zone)

        logger.debug(f"Creating instance with params: {instance}")
        try:
            operation = self.compute.insert(self.project_id, zone, instance)
        except Exception as e:
            logger.debug(f"Failed to create instance {name}: {e}")
            raise VMCreationFailedError(str(e), can_retry=True) from e

        stack = CompensationStack()
        stack.push(
            f"delete instance {name}",
            lambda: self.compute.delete(self.project_id, zone, name),
        )

        try:
            operation = self.operations.wait(operation, zone=zone)
            instance_link = operation.target_link

            if props.target_pool:
                add_to_target_pool(self.target_pools, instance_link, props.target_pool)
                stack.push(
                    f"remove {name} from target pool {props.target_pool}",
                    lambda: remove_from_target_pool(
                        self.target_pools, instance_link, region_from_zone(zone)
                    ),
                )

            if props.backend_service.name:
                add_to_backend_service(
                    self.backend_services, instance_link, props.backend_service
                )
                stack.push(
                    f"remove {name} from backend service {props.backend_service.name}",
                    lambda: remove_from_backend_service(
                        self.backend_services, instance_link
                    ),
                )
        except Exception as e:
            logger.debug(f"Failed to create instance {name}: {e}")
            stack.unwind()
            raise VMCreationFailedError(str(e), can_retry=True) from e

        return ProvisionedInstance(name=name, zone=zone, self_link=instance_link)

    def create(
        self, props: VMProperties, networks: Networks, registry_endpoint: str = ""
    ) -> str:
        """Provisions the instance and returns its name."""
        return self.provision(props, networks, registry_endpoint).name


def live_provisioner(
    project_id: str, defaults: ProvisioningDefaults = DEFAULTS
) -> InstanceProvisioner:
    """Provisioner wired to the compute_v1 clients."""
    from .services.backend_services import BackendServices
    from .services.catalogs import DiskTypeLookup, NetworkLookup, SubnetworkLookup
    from .services.ids import UUIDGenerator
    from .services.instances import Instances
    from .services.operations import OperationPoller
    from .services.target_pools import TargetPools

    poller = OperationPoller(project_id)
    return InstanceProvisioner(
        project_id=project_id,
        compute=Instances(),
        operations=poller,
        disk_types=DiskTypeLookup(project_id),
        networks=NetworkLookup(),
        subnetworks=SubnetworkLookup(),
        target_pools=TargetPools(project_id, poller),
        backend_services=BackendServices(project_id, poller),
        id_generator=UUIDGenerator(),
        defaults=defaults,
    )

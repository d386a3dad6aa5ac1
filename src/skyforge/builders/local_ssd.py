from google.cloud import compute_v1
from pydantic import BaseModel, ConfigDict

from ..config import DEFAULTS, ProvisioningDefaults
from ..errors import DiskTypeNotFoundError
from ..machine_type import parse_machine_type
from ..services.base import DiskTypeCatalog


class LocalDiskTopology(BaseModel):
    model_config = ConfigDict(frozen=True)

    count: int = 0
    interface: str = "NVME"


def minimum_local_ssds(
    family: str, cpus: int | None, defaults: ProvisioningDefaults = DEFAULTS
) -> int:
    """
    Smallest number of local SSDs the provider accepts for a family/vCPU pair.
    Families without a graduated table take exactly one.
    """
    table = defaults.local_ssd_minimums.get(family)
    if not table or cpus is None:
        return 1
    for min_cpus, disks in table:
        if cpus >= min_cpus:
            return disks
    return 1


def resolve_local_disk_topology(
    machine_type: str,
    ephemeral_disk_type: str,
    defaults: ProvisioningDefaults = DEFAULTS,
) -> LocalDiskTopology:
    if ephemeral_disk_type != defaults.local_ssd_disk_type:
        return LocalDiskTopology(count=0, interface=defaults.local_ssd_interface)

    parsed = parse_machine_type(machine_type)
    cpus = parsed.cpu_count(defaults.a2_cpus_per_gpu, defaults.a2_max_cpus)
    return LocalDiskTopology(
        count=minimum_local_ssds(parsed.family, cpus, defaults),
        interface=defaults.local_ssd_interface,
    )


def build_local_ssd_disks(
    topology: LocalDiskTopology,
    zone: str,
    disk_types: DiskTypeCatalog,
    defaults: ProvisioningDefaults = DEFAULTS,
) -> list[compute_v1.AttachedDisk]:
    """
    Scratch disks indexed 1..N. The disk type is resolved once per disk so a
    missing type fails before anything is submitted.
    """
    disks = []
    for index in range(1, topology.count + 1):
        disk_type, found = disk_types.find(defaults.local_ssd_disk_type, zone)
        if not found:
            raise DiskTypeNotFoundError(defaults.local_ssd_disk_type, zone)

        disks.append(
            compute_v1.AttachedDisk(
                auto_delete=True,
                boot=False,
                initialize_params=compute_v1.AttachedDiskInitializeParams(
                    disk_type=disk_type.self_link,
                ),
                interface=topology.interface,
                index=index,
                type_="SCRATCH",
            )
        )
    return disks

from google.cloud import compute_v1

from ..config import DEFAULTS, ProvisioningDefaults


def build_boot_disk(
    stemcell: str,
    size_gb: int,
    disk_type: str,
    defaults: ProvisioningDefaults = DEFAULTS,
) -> compute_v1.AttachedDisk:
    """
    Persistent boot disk initialised from the stemcell image.
    A size of 0 means "use the default root disk size".
    """
    initialize_params = compute_v1.AttachedDiskInitializeParams(
        disk_size_gb=size_gb or defaults.default_root_disk_size_gb,
        source_image=stemcell,
    )
    if disk_type:
        initialize_params.disk_type = disk_type

    return compute_v1.AttachedDisk(
        auto_delete=True,
        boot=True,
        initialize_params=initialize_params,
        mode="READ_WRITE",
        type_="PERSISTENT",
    )

from pydantic import BaseModel, ConfigDict, Field


class ProvisioningDefaults(BaseModel):
    """
    Named constants the builders and the provisioner rely on.
    Pass a modified copy (model_copy(update=...)) to override any of them.
    """

    model_config = ConfigDict(frozen=True)

    instance_name_prefix: str = "vm"
    instance_description: str = "Instance managed by skyforge"
    default_root_disk_size_gb: int = 10
    user_data_key: str = "user_data"
    node_affinity_key: str = "compute.googleapis.com/node-group-name"
    default_on_host_maintenance: str = "MIGRATE"

    default_service_account: str = "default"
    scope_prefix: str = "https://www.googleapis.com/auth/"
    full_access_scope: str = "cloud-platform"

    access_config_name: str = "External NAT"
    access_config_type: str = "ONE_TO_ONE_NAT"
    default_network_name: str = "default"

    local_ssd_disk_type: str = "local-ssd"
    local_ssd_interface: str = "NVME"
    a2_cpus_per_gpu: int = 12
    a2_max_cpus: int = 96

    # family -> [(min_cpus, disks), ...], highest breakpoint first.
    # https://cloud.google.com/compute/docs/disks/local-ssd#lssd_disk_options
    local_ssd_minimums: dict[str, list[tuple[int, int]]] = Field(
        default_factory=lambda: {
            "n2": [(82, 16), (42, 8), (22, 4), (12, 2)],
            "n2d": [(96, 8), (64, 4), (32, 2)],
        }
    )

    def full_scope(self, scope: str) -> str:
        if scope.startswith(self.scope_prefix):
            return scope
        return f"{self.scope_prefix}{scope}"


DEFAULTS = ProvisioningDefaults()

from pydantic import BaseModel, ConfigDict, Field


class Accelerator(BaseModel):
    model_config = ConfigDict(frozen=True)

    accelerator_type: str = Field(description="e.g., nvidia-tesla-t4")
    count: int = 1


class BackendService(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = ""
    scheme: str = Field(default="", description="EXTERNAL or INTERNAL")


class VMProperties(BaseModel):
    """Declarative description of the machine to provision."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    zone: str
    machine_type: str = Field(
        description="e.g., n2-standard-4, custom-4-5120, a2-highgpu-1g"
    )
    stemcell: str = Field(description="Boot image self link")
    root_disk_size_gb: int = 0
    root_disk_type: str = ""
    ephemeral_disk_type: str = ""
    accelerators: list[Accelerator] = Field(default_factory=list)
    labels: dict[str, str] = Field(default_factory=dict)
    tags: list[str] = Field(default_factory=list)
    service_account: str = ""
    service_scopes: list[str] = Field(default_factory=list)
    target_pool: str = ""
    backend_service: BackendService = Field(default_factory=BackendService)
    node_group: str = ""
    preemptible: bool = False
    automatic_restart: bool = False
    on_host_maintenance: str = ""


class ProvisionedInstance(BaseModel):
    name: str
    zone: str
    self_link: str = ""

from pydantic import BaseModel, ConfigDict

from .core import resource_name
from .errors import MachineTypeError


class MachineType(BaseModel):
    """
    A machine type identifier split into its family and size components.
    e.g. n2-standard-4  -> family=n2, size_components=[standard, 4]
         custom-4-5120  -> family=custom, size_components=[4, 5120]
         a2-highgpu-1g  -> family=a2, size_components=[highgpu, 1g]
    """

    model_config = ConfigDict(frozen=True)

    name: str
    family: str
    size_components: list[str]

    def cpu_count(self, cpus_per_gpu: int, max_cpus: int) -> int | None:
        """
        Number of vCPUs encoded in the identifier, or None for families
        whose local SSD minimum does not depend on it.
        """
        if self.family.startswith("a2"):
            gpus = _to_int(self, self.size_components[-1].removesuffix("g"))
            return min(gpus * cpus_per_gpu, max_cpus)
        if self.family == "custom":
            return _to_int(self, self.size_components[0])
        if self.family.startswith("n"):
            if len(self.size_components) < 2:
                raise MachineTypeError(self.name, "missing vCPU component")
            return _to_int(self, self.size_components[1])
        return None


def _to_int(machine_type: MachineType, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise MachineTypeError(
            machine_type.name, f"'{value}' is not a number"
        ) from None


def parse_machine_type(identifier: str) -> MachineType:
    """
    Parses a bare machine type or a zones/<zone>/machineTypes/<type> path.
    """
    name = resource_name(identifier)
    parts = name.split("-")
    if not name or len(parts) < 2 or not all(parts):
        raise MachineTypeError(identifier, "expected <family>-<size>")
    return MachineType(name=name, family=parts[0], size_components=parts[1:])

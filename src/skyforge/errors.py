class SkyforgeError(Exception):
    """Base class for every error raised while provisioning an instance."""


class MachineTypeError(SkyforgeError):
    def __init__(self, machine_type: str, reason: str):
        self.machine_type = machine_type
        self.reason = reason
        super().__init__(f"Invalid machine type '{machine_type}': {reason}")


class UserDataError(SkyforgeError):
    pass


class NetworkConfigurationError(SkyforgeError):
    pass


class InstanceNameError(SkyforgeError):
    pass


class ResourceNotFoundError(SkyforgeError):
    kind = "Resource"

    def __init__(self, name: str, scope: str, scope_kind: str = "project"):
        self.name = name
        self.scope = scope
        super().__init__(f"{self.kind} '{name}' does not exist in {scope_kind} '{scope}'")


class NetworkNotFoundError(ResourceNotFoundError):
    kind = "Network"


class SubnetworkNotFoundError(ResourceNotFoundError):
    kind = "Subnetwork"


class DiskTypeNotFoundError(ResourceNotFoundError):
    kind = "Disk type"

    def __init__(self, name: str, zone: str):
        super().__init__(name, zone, scope_kind="zone")


class OperationError(SkyforgeError):
    def __init__(self, operation: str, message: str):
        self.operation = operation
        super().__init__(f"Operation '{operation}' failed: {message}")


class VMCreationFailedError(SkyforgeError):
    """
    Raised for any failure once the create request has been issued.
    The caller may retry the whole provisioning attempt when can_retry is set.
    """

    def __init__(self, message: str, can_retry: bool = True):
        self.can_retry = can_retry
        super().__init__(message)


class InstanceGroupNotFoundError(ResourceNotFoundError):
    kind = "Instance group for backend service"

    def __init__(self, backend_service: str, zone: str):
        super().__init__(backend_service, zone, scope_kind="zone")


class TargetPoolNotFoundError(ResourceNotFoundError):
    kind = "Target pool"

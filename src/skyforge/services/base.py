from typing import Any, Protocol


class IdGenerator(Protocol):
    def generate(self) -> str: ...


class DiskTypeCatalog(Protocol):
    def find(self, type_name: str, zone: str) -> tuple[Any, bool]: ...


class NetworkCatalog(Protocol):
    def find(self, project_id: str, network_name: str) -> tuple[Any, bool]: ...


class SubnetworkCatalog(Protocol):
    """Raises google.api_core.exceptions.NotFound for a missing subnetwork."""

    def find(self, project_id: str, subnetwork_name: str, region: str) -> Any: ...


class ComputeService(Protocol):
    def insert(self, project_id: str, zone: str, instance: Any) -> Any: ...

    def delete(self, project_id: str, zone: str, name: str) -> Any: ...


class OperationWaiter(Protocol):
    def wait(self, operation: Any, zone: str = "", region: str = "") -> Any: ...


class TargetPoolService(Protocol):
    def add_instance(self, name: str, instance_link: str) -> None: ...

    def remove_instance(self, name: str, instance_link: str) -> None: ...

    def find_by_instance(
        self, instance_link: str, region: str = ""
    ) -> tuple[str, bool]: ...


class BackendServiceService(Protocol):
    def add_instance(self, name: str, instance_link: str) -> None: ...

    def remove_instance(self, instance_link: str) -> None: ...

from typing import Literal

from pydantic import BaseModel, Field, RootModel

from ..errors import NetworkConfigurationError

NetworkType = Literal["dynamic", "manual", "vip"]


class NetworkCloudProperties(BaseModel):
    network_name: str = ""
    subnetwork_name: str = ""
    ephemeral_external_ip: bool = False
    ip_forwarding: bool = False
    tags: list[str] = Field(default_factory=list)
    xpn_host_project_id: str = Field(
        default="", description="Shared VPC host project owning the network"
    )


class Network(BaseModel):
    type: NetworkType = "dynamic"
    ip: str = ""
    dns: list[str] = Field(default_factory=list)
    default: list[str] = Field(default_factory=list)
    cloud_properties: NetworkCloudProperties = Field(
        default_factory=NetworkCloudProperties
    )

    def is_vip(self) -> bool:
        return self.type == "vip"


_EMPTY = Network()


class Networks(RootModel[dict[str, Network]]):
    """
    Logical networks keyed by name, merged into a single network interface.
    Only one dynamic/manual network and one vip network are supported.
    """

    root: dict[str, Network] = Field(default_factory=dict)

    def validate_single_nic(self) -> None:
        nic = [name for name, n in self.root.items() if not n.is_vip()]
        vip = [name for name, n in self.root.items() if n.is_vip()]
        if len(nic) > 1:
            raise NetworkConfigurationError(
                f"Only one dynamic or manual network is supported, got: {', '.join(nic)}"
            )
        if len(vip) > 1:
            raise NetworkConfigurationError(
                f"Only one vip network is supported, got: {', '.join(vip)}"
            )

    def network(self) -> Network:
        """The network carrying the instance NIC (first non-vip)."""
        return next((n for n in self.root.values() if not n.is_vip()), _EMPTY)

    def vip_network(self) -> Network:
        return next((n for n in self.root.values() if n.is_vip()), _EMPTY)

    def network_name(self, default: str = "default") -> str:
        return self.network().cloud_properties.network_name or default

    def subnetwork_name(self) -> str:
        return self.network().cloud_properties.subnetwork_name

    def network_project_id(self, project_id: str) -> str:
        return self.network().cloud_properties.xpn_host_project_id or project_id

    def dns(self) -> list[str]:
        return list(self.network().dns)

    def ephemeral_external_ip(self) -> bool:
        return self.network().cloud_properties.ephemeral_external_ip

    def static_private_ip(self) -> str:
        nic = self.network()
        return nic.ip if nic.type == "manual" else ""

    def can_ip_forward(self) -> bool:
        return self.network().cloud_properties.ip_forwarding

    def tags(self) -> list[str]:
        tags: list[str] = []
        for n in self.root.values():
            tags.extend(n.cloud_properties.tags)
        return tags

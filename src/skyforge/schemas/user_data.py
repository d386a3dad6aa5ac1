from pydantic import BaseModel, ConfigDict, Field


class UserDataServerName(BaseModel):
    name: str


class UserDataRegistryEndpoint(BaseModel):
    endpoint: str


class UserDataDNSItems(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name_server: list[str] = Field(default_factory=list, alias="nameserver")


class UserData(BaseModel):
    """
    Payload read by the agent on first boot.
    Serialized as {"server":{"name":...},"registry":{"endpoint":...},"dns":{...}}
    """

    server: UserDataServerName
    registry: UserDataRegistryEndpoint
    dns: UserDataDNSItems | None = None

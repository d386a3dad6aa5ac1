from google.cloud import compute_v1
from pydantic_core import PydanticSerializationError

from ..config import DEFAULTS, ProvisioningDefaults
from ..errors import UserDataError
from ..schemas.network import Networks
from ..schemas.user_data import (
    UserData,
    UserDataDNSItems,
    UserDataRegistryEndpoint,
    UserDataServerName,
)


def build_user_data(name: str, registry_endpoint: str, networks: Networks) -> str:
    user_data = UserData(
        server=UserDataServerName(name=name),
        registry=UserDataRegistryEndpoint(endpoint=registry_endpoint),
    )
    if dns := networks.dns():
        user_data.dns = UserDataDNSItems(name_server=dns)

    try:
        return user_data.model_dump_json(by_alias=True, exclude_none=True)
    except PydanticSerializationError as e:
        raise UserDataError(f"Marshalling user data: {e}") from e


def build_metadata(
    name: str,
    registry_endpoint: str,
    networks: Networks,
    defaults: ProvisioningDefaults = DEFAULTS,
) -> compute_v1.Metadata:
    """Wraps the serialized user data as the only metadata entry."""
    value = build_user_data(name, registry_endpoint, networks)
    return compute_v1.Metadata(
        items=[compute_v1.Items(key=defaults.user_data_key, value=value)]
    )

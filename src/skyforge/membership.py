from .logger import logger
from .schemas.instance import BackendService
from .services.base import BackendServiceService, TargetPoolService


def add_to_target_pool(
    target_pools: TargetPoolService, instance_link: str, target_pool: str
) -> None:
    target_pools.add_instance(target_pool, instance_link)


def remove_from_target_pool(
    target_pools: TargetPoolService, instance_link: str, region: str = ""
) -> None:
    """No-op when the instance is not in any target pool."""
    target_pool, found = target_pools.find_by_instance(instance_link, region)
    if not found:
        logger.debug(f"{instance_link} is not a member of any target pool")
        return
    target_pools.remove_instance(target_pool, instance_link)


def add_to_backend_service(
    backend_services: BackendServiceService,
    instance_link: str,
    backend_service: BackendService,
) -> None:
    backend_services.add_instance(backend_service.name, instance_link)


def remove_from_backend_service(
    backend_services: BackendServiceService, instance_link: str
) -> None:
    backend_services.remove_instance(instance_link)

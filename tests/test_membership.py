import pytest

from skyforge.membership import (
    add_to_backend_service,
    add_to_target_pool,
    remove_from_backend_service,
    remove_from_target_pool,
)
from skyforge.schemas.instance import BackendService

INSTANCE_LINK = "https://www.googleapis.com/compute/v1/projects/p/zones/us-central1-a/instances/vm-1"


def test_add_to_target_pool(mocker):
    target_pools = mocker.Mock()
    add_to_target_pool(target_pools, INSTANCE_LINK, "pool-1")
    target_pools.add_instance.assert_called_once_with("pool-1", INSTANCE_LINK)


def test_add_to_target_pool_error_propagates(mocker):
    target_pools = mocker.Mock()
    target_pools.add_instance.side_effect = RuntimeError("quota")
    with pytest.raises(RuntimeError, match="quota"):
        add_to_target_pool(target_pools, INSTANCE_LINK, "pool-1")


def test_remove_from_target_pool(mocker):
    target_pools = mocker.Mock()
    target_pools.find_by_instance.return_value = ("pool-1", True)

    remove_from_target_pool(target_pools, INSTANCE_LINK)

    target_pools.find_by_instance.assert_called_once_with(INSTANCE_LINK, "")
    target_pools.remove_instance.assert_called_once_with("pool-1", INSTANCE_LINK)


def test_remove_from_target_pool_not_a_member_is_noop(mocker):
    target_pools = mocker.Mock()
    target_pools.find_by_instance.return_value = ("", False)

    remove_from_target_pool(target_pools, INSTANCE_LINK, "us-central1")

    target_pools.remove_instance.assert_not_called()


def test_remove_from_target_pool_lookup_error_propagates(mocker):
    target_pools = mocker.Mock()
    target_pools.find_by_instance.side_effect = RuntimeError("boom")
    with pytest.raises(RuntimeError):
        remove_from_target_pool(target_pools, INSTANCE_LINK)


def test_add_to_backend_service(mocker):
    backend_services = mocker.Mock()
    add_to_backend_service(
        backend_services, INSTANCE_LINK, BackendService(name="bs-1", scheme="EXTERNAL")
    )
    backend_services.add_instance.assert_called_once_with("bs-1", INSTANCE_LINK)


def test_remove_from_backend_service(mocker):
    backend_services = mocker.Mock()
    backend_services.remove_instance.side_effect = RuntimeError("gone")

    with pytest.raises(RuntimeError, match="gone"):
        remove_from_backend_service(backend_services, INSTANCE_LINK)
    backend_services.remove_instance.assert_called_once_with(INSTANCE_LINK)

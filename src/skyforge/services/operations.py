from typing import Any

from google.api_core import exceptions
from google.cloud import compute_v1
from tenacity import (
    RetryError,
    Retrying,
    retry_if_exception_type,
    retry_if_result,
    stop_after_attempt,
    wait_exponential,
)

from ..clients import (
    get_global_operations_client,
    get_region_operations_client,
    get_zone_operations_client,
)
from ..core import (
    OPERATION_POLL_ATTEMPTS,
    OPERATION_POLL_MAX_WAIT,
    OPERATION_POLL_MIN_WAIT,
    resource_name,
)
from ..errors import OperationError
from ..logger import logger

DONE = compute_v1.Operation.Status.DONE


def _pending(operation: Any) -> bool:
    return operation.status != DONE


def _error_message(operation: Any) -> str:
    error = getattr(operation, "error", None)
    errors = list(error.errors) if error else []
    return "; ".join(f"{e.code}: {e.message}" for e in errors)


class OperationPoller:
    """
    Polls a compute operation until it is DONE, backing off exponentially.
    Zonal, regional and global operations are read from their own clients.
    """

    def __init__(
        self,
        project_id: str,
        attempts: int = OPERATION_POLL_ATTEMPTS,
        min_wait: float = OPERATION_POLL_MIN_WAIT,
        max_wait: float = OPERATION_POLL_MAX_WAIT,
    ):
        self.project_id = project_id
        self.attempts = attempts
        self.min_wait = min_wait
        self.max_wait = max_wait

    def _get(self, name: str, zone: str, region: str) -> Any:
        if zone:
            return get_zone_operations_client().get(
                project=self.project_id, zone=resource_name(zone), operation=name
            )
        if region:
            return get_region_operations_client().get(
                project=self.project_id, region=resource_name(region), operation=name
            )
        return get_global_operations_client().get(project=self.project_id, operation=name)

    def wait(self, operation: Any, zone: str = "", region: str = "") -> Any:
        name = operation.name
        if _pending(operation):
            retrying = Retrying(
                stop=stop_after_attempt(self.attempts),
                wait=wait_exponential(multiplier=1, min=self.min_wait, max=self.max_wait),
                retry=(
                    retry_if_result(_pending)
                    | retry_if_exception_type(exceptions.ServiceUnavailable)
                ),
            )
            try:
                operation = retrying(self._get, name, zone, region)
            except RetryError as e:
                if e.last_attempt.failed:
                    cause = e.last_attempt.exception()
                    raise OperationError(
                        name, f"polling failed after {self.attempts} attempts: {cause}"
                    ) from cause
                raise OperationError(
                    name, f"still pending after {self.attempts} polls"
                ) from e

        if message := _error_message(operation):
            logger.debug(f"Operation {name} finished with errors: {message}")
            raise OperationError(name, message)

        logger.debug(f"Operation {name} done")
        return operation

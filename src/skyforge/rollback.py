from collections.abc import Callable
from typing import Any

from .logger import logger


class CompensationStack:
    """
    Undo actions for steps that created external state.
    unwind() runs them newest first; a failing action is logged and
    collected so the error that triggered the unwind is the one reported.
    """

    def __init__(self) -> None:
        self._actions: list[tuple[str, Callable[[], Any]]] = []

    def __len__(self) -> int:
        return len(self._actions)

    def push(self, description: str, action: Callable[[], Any]) -> None:
        self._actions.append((description, action))

    def unwind(self) -> list[Exception]:
        errors: list[Exception] = []
        while self._actions:
            description, action = self._actions.pop()
            logger.debug(f"Rolling back: {description}")
            try:
                action()
            except Exception as e:
                logger.debug(f"Failed rolling back '{description}': {e}")
                errors.append(e)
        return errors

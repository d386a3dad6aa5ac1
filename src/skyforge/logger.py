import logging

from rich.logging import RichHandler


def setup_logger(name: str = "skyforge", level: int = logging.ERROR) -> logging.Logger:
    """
    Returns the provisioning logger, attaching a RichHandler on first use.
    Rollback failures and operation errors are logged at DEBUG and
    surfaced to the user only when the CLI runs with --debug.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if logger.handlers:
        return logger

    # Instance names and request dumps may contain brackets
    handler = RichHandler(rich_tracebacks=True, markup=False, show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger


logger = setup_logger()

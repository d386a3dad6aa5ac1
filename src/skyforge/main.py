import argparse
import json
import logging
from importlib.metadata import version
from pathlib import Path

from google.api_core import exceptions
from google.cloud import compute_v1
from rich.console import Console

from .errors import SkyforgeError, VMCreationFailedError
from .logger import logger
from .provisioner import live_provisioner
from .schemas.instance import VMProperties
from .schemas.network import Networks


def _load_vm_config(path: str) -> tuple[VMProperties, Networks]:
    """
    Reads {"properties": {...}, "networks": {...}} from a JSON file.
    """
    data = json.loads(Path(path).read_text())
    props = VMProperties.model_validate(data.get("properties", {}))
    networks = Networks.model_validate(data.get("networks", {}))
    return props, networks


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Skyforge: GCE instance provisioning with rollback",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Create the instance described in vm.json
  skyforge create --project-id my-project --vm-config vm.json

  # Print the insert request without creating anything
  skyforge create --project-id my-project --vm-config vm.json --dry-run
""",
    )
    try:
        ver = version("skyforge")
    except Exception:
        ver = "unknown"
    parser.add_argument("--version", action="version", version=f"Skyforge v{ver}")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)
    create = sub.add_parser("create", help="Provision a single instance")
    create.add_argument("--project-id", required=True, help="GCP Project ID")
    create.add_argument(
        "--vm-config", required=True, help="JSON file with properties and networks"
    )
    create.add_argument(
        "--registry-endpoint",
        default="",
        help="Registry endpoint written to the instance user data",
    )
    create.add_argument(
        "--dry-run",
        action="store_true",
        help="Resolve and print the insert request, do not submit it",
    )
    return parser


def run_create(
    args: argparse.Namespace, log_console: Console, out_console: Console
) -> int:
    props, networks = _load_vm_config(args.vm_config)
    provisioner = live_provisioner(args.project_id)

    if args.dry_run:
        name = provisioner.instance_name(props)
        instance = provisioner.build_instance(name, props, networks, args.registry_endpoint)
        out_console.print_json(compute_v1.Instance.to_json(instance))
        return 0

    with log_console.status(f"Provisioning in [cyan]{props.zone}[/cyan]..."):
        result = provisioner.provision(props, networks, args.registry_endpoint)

    log_console.print(f"[bold green]Created[/bold green] {result.name} ({result.zone})")
    out_console.print(result.name, markup=False, highlight=False)
    return 0


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    if args.debug:
        logger.setLevel(logging.DEBUG)

    log_console = Console(stderr=True)
    out_console = Console()

    try:
        code = run_create(args, log_console, out_console)
    except VMCreationFailedError as e:
        retry_hint = "retryable" if e.can_retry else "not retryable"
        logger.error(f"Instance creation failed ({retry_hint}): {e}")
        code = 1
    except (SkyforgeError, exceptions.GoogleAPIError, OSError, ValueError) as e:
        logger.error(f"Provisioning Failed: {e}")
        code = 1

    exit(code)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        console = Console(stderr=True)
        console.print("\n[bold red]Operation cancelled by user.[/bold red]")
        exit(130)

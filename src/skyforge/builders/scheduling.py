from google.cloud import compute_v1

from ..config import DEFAULTS, ProvisioningDefaults


def build_scheduling(
    automatic_restart: bool,
    on_host_maintenance: str,
    preemptible: bool,
    node_group: str,
    defaults: ProvisioningDefaults = DEFAULTS,
) -> compute_v1.Scheduling:
    # Preemptible instances cannot restart, migrate or be pinned to a node group
    if preemptible:
        return compute_v1.Scheduling(preemptible=True)

    scheduling = compute_v1.Scheduling(
        automatic_restart=automatic_restart,
        on_host_maintenance=on_host_maintenance or defaults.default_on_host_maintenance,
        preemptible=False,
    )

    if node_group:
        scheduling.node_affinities = [
            compute_v1.SchedulingNodeAffinity(
                key=defaults.node_affinity_key,
                operator="IN",
                values=[node_group],
            )
        ]

    return scheduling

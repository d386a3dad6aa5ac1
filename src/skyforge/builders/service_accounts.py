from google.cloud import compute_v1

from ..config import DEFAULTS, ProvisioningDefaults


def build_service_accounts(
    service_account: str,
    scopes: list[str],
    defaults: ProvisioningDefaults = DEFAULTS,
) -> list[compute_v1.ServiceAccount]:
    """
    - neither account nor scopes: no service account at all
    - scopes only: the default compute account
    - account only: full access scope
    Scopes are normalised to full https://www.googleapis.com/auth/ URLs.
    """
    if not service_account and not scopes:
        return []

    email = service_account or defaults.default_service_account
    requested = scopes or [defaults.full_access_scope]

    return [
        compute_v1.ServiceAccount(
            email=email,
            scopes=[defaults.full_scope(s) for s in requested],
        )
    ]

from tenacity import stop_after_attempt, wait_exponential

# Shared retry configuration for read-only lookups
# usage: @retry(**RETRY_CONFIG)
RETRY_CONFIG = {
    "stop": stop_after_attempt(3),
    "wait": wait_exponential(multiplier=1, min=4, max=10),
}

# Operation polling: how many times to re-read a pending operation
# and how long to back off between reads (seconds).
OPERATION_POLL_ATTEMPTS = 60
OPERATION_POLL_MIN_WAIT = 1
OPERATION_POLL_MAX_WAIT = 30


def resource_name(link: str) -> str:
    """
    Reduces a resource URL or partial path to its last segment.
    e.g. https://.../zones/us-central1-a -> us-central1-a
    """
    return link.rstrip("/").split("/")[-1] if link else ""


def region_from_zone(zone: str) -> str:
    """us-central1-a -> us-central1"""
    zone = resource_name(zone)
    return zone.rsplit("-", 1)[0] if "-" in zone else zone


def zone_from_link(link: str) -> str:
    """
    Extracts the zone from an instance self link.
    e.g. .../projects/p/zones/us-central1-a/instances/vm-1 -> us-central1-a
    """
    parts = link.split("/")
    if "zones" in parts:
        idx = parts.index("zones")
        if idx + 1 < len(parts):
            return parts[idx + 1]
    return ""

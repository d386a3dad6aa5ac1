import logging

from skyforge.config import DEFAULTS
from skyforge.core import region_from_zone, resource_name, zone_from_link
from skyforge.logger import setup_logger


def test_resource_name():
    assert resource_name("https://www.googleapis.com/compute/v1/projects/p/zones/us-west1-b") == "us-west1-b"
    assert resource_name("n2-standard-4") == "n2-standard-4"
    assert resource_name("") == ""


def test_region_from_zone():
    assert region_from_zone("us-central1-a") == "us-central1"
    assert region_from_zone("projects/p/zones/europe-west4-b") == "europe-west4"


def test_zone_from_link():
    link = "https://www.googleapis.com/compute/v1/projects/p/zones/us-central1-a/instances/vm-1"
    assert zone_from_link(link) == "us-central1-a"
    assert zone_from_link("global/networks/default") == ""


def test_full_scope():
    assert DEFAULTS.full_scope("cloud-platform") == "https://www.googleapis.com/auth/cloud-platform"
    assert (
        DEFAULTS.full_scope("https://www.googleapis.com/auth/compute")
        == "https://www.googleapis.com/auth/compute"
    )


def test_setup_logger_attaches_one_handler():
    first = setup_logger("skyforge-test", logging.INFO)
    second = setup_logger("skyforge-test", logging.DEBUG)

    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.DEBUG

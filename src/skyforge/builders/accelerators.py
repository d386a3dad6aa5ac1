from google.cloud import compute_v1

from ..schemas.instance import Accelerator


def build_accelerators(
    accelerators: list[Accelerator],
) -> list[compute_v1.AcceleratorConfig]:
    return [
        compute_v1.AcceleratorConfig(
            accelerator_type=acc.accelerator_type,
            accelerator_count=acc.count,
        )
        for acc in accelerators
    ]

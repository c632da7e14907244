"""Resource operations built on TutumClient.execute and TutumClient.collect_all."""

from tutum_client.resources.stacks import Service, Stack, StackSummary
from tutum_client.resources.volume_groups import VolumeGroup

__all__ = [
    "Service",
    "Stack",
    "StackSummary",
    "VolumeGroup",
]

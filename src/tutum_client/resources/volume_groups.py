"""Volume group operations."""

from dataclasses import dataclass, field

from tutum_client.client import TutumClient
from tutum_client.models import Model
from tutum_client.resources._paths import detail_path
from tutum_client.transport.executor import CallDescriptor

COLLECTION = "volumegroup"


@dataclass
class VolumeGroup(Model):
    """A set of volumes shared by the containers of the listed services."""

    uuid: str = ""
    resource_uri: str = ""
    name: str = ""
    state: str = ""
    services: list[str] = field(default_factory=list)
    volumes: list[str] = field(default_factory=list)


def list_volume_groups(client: TutumClient) -> list[VolumeGroup]:
    """Return every volume group, following pagination."""
    return client.collect_all(f"{COLLECTION}/", item=VolumeGroup.from_dict)


def get_volume_group(client: TutumClient, uuid_or_uri: str) -> VolumeGroup:
    data = client.execute(CallDescriptor(detail_path(client, COLLECTION, uuid_or_uri)))
    return VolumeGroup.from_json(data)

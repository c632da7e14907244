"""Stack operations.

A stack groups services that are deployed, started and stopped together.

Example:
    ```python
    from tutum_client import TutumClient
    from tutum_client.resources import stacks

    with TutumClient() as client:
        for summary in stacks.list_stacks(client):
            print(summary.name, summary.state)
        stacks.redeploy_stack(client, summary.uuid)
    ```
"""

from dataclasses import dataclass, field

from tutum_client.client import TutumClient
from tutum_client.errors.exceptions import DecodeError
from tutum_client.models import Model
from tutum_client.resources._paths import detail_path
from tutum_client.transport.executor import CallDescriptor

COLLECTION = "stack"


@dataclass
class Service(Model):
    """A service as embedded in a stack detail response."""

    uuid: str = ""
    resource_uri: str = ""
    name: str = ""
    image_name: str = ""
    state: str = ""
    stack: str = ""
    public_dns: str = ""
    synchronized: bool = False
    target_num_containers: int = 0
    current_num_containers: int = 0
    running_num_containers: int = 0


@dataclass
class StackSummary(Model):
    """A stack as listed by ``GET stack/``; services are resource URIs."""

    uuid: str = ""
    resource_uri: str = ""
    name: str = ""
    state: str = ""
    synchronized: bool = False
    deployed_datetime: str = ""
    destroyed_datetime: str = ""
    services: list[str] = field(default_factory=list)


@dataclass
class Stack(Model):
    """A stack detail with its services embedded."""

    uuid: str = ""
    resource_uri: str = ""
    name: str = ""
    state: str = ""
    synchronized: bool = False
    deployed_datetime: str = ""
    destroyed_datetime: str = ""
    services: list[Service] = field(default_factory=list)


def list_stacks(client: TutumClient) -> list[StackSummary]:
    """Return every stack, following pagination."""
    return client.collect_all(f"{COLLECTION}/", item=StackSummary.from_dict)


def get_stack(client: TutumClient, uuid_or_uri: str) -> Stack:
    data = client.execute(CallDescriptor(detail_path(client, COLLECTION, uuid_or_uri)))
    return Stack.from_json(data)


def export_stack(client: TutumClient, uuid_or_uri: str) -> str:
    """Return the stack definition as served by the export endpoint."""
    path = detail_path(client, COLLECTION, uuid_or_uri) + "export/"
    data = client.execute(CallDescriptor(path))
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"Stack export is not valid UTF-8: {e}") from e


def create_stack(client: TutumClient, body: str | bytes) -> Stack:
    """Create a stack from a JSON definition passed through unchanged."""
    data = client.execute(CallDescriptor(f"{COLLECTION}/", "POST", body))
    return Stack.from_json(data)


def update_stack(client: TutumClient, uuid_or_uri: str, body: str | bytes) -> None:
    """Apply a partial JSON update to a stack."""
    client.execute(CallDescriptor(detail_path(client, COLLECTION, uuid_or_uri), "PATCH", body))


def _stack_action(client: TutumClient, uuid_or_uri: str, action: str) -> None:
    path = detail_path(client, COLLECTION, uuid_or_uri) + f"{action}/"
    client.execute(CallDescriptor(path, "POST"))


def start_stack(client: TutumClient, uuid_or_uri: str) -> None:
    _stack_action(client, uuid_or_uri, "start")


def stop_stack(client: TutumClient, uuid_or_uri: str) -> None:
    _stack_action(client, uuid_or_uri, "stop")


def redeploy_stack(client: TutumClient, uuid_or_uri: str) -> None:
    _stack_action(client, uuid_or_uri, "redeploy")


def terminate_stack(client: TutumClient, uuid_or_uri: str) -> None:
    """Terminate a stack and all of its services."""
    client.execute(CallDescriptor(detail_path(client, COLLECTION, uuid_or_uri), "DELETE"))

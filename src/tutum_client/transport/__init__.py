"""Transport layer: the two primitives every resource operation uses.

Modules:
    executor: One authenticated request, strict 200 success, raw body
    pagination: Follows ``meta.next`` links across list pages

Example:
    ```python
    from tutum_client.transport import CallDescriptor, PaginatedCollector

    body = executor.execute(CallDescriptor("stack/<uuid>/", "PATCH", b'{"name": "web"}'))
    stacks = PaginatedCollector(executor).collect_all("stack/")
    ```
"""

from tutum_client.transport.executor import CallDescriptor, CallExecutor
from tutum_client.transport.pagination import PaginatedCollector, relative_path

__all__ = [
    "CallDescriptor",
    "CallExecutor",
    "PaginatedCollector",
    "relative_path",
]

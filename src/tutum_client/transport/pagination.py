"""Follow ``meta.next`` links until a list endpoint is exhausted.

Pages are fetched strictly one after another: the location of page N+1 is
only known once page N has been decoded. Objects keep their arrival order
and are neither reordered nor de-duplicated.

Collection is all-or-nothing. If any page fails to load or decode, the
error propagates and the pages already fetched are discarded.
"""

import logging
from collections.abc import Callable
from typing import Any, TypeVar
from urllib.parse import urljoin, urlsplit

import httpx

from tutum_client.errors.exceptions import DecodeError
from tutum_client.models import PaginatedResponse
from tutum_client.transport.executor import CallDescriptor, CallExecutor

logger = logging.getLogger(__name__)

T = TypeVar("T")


def relative_path(reference: str, base_url: str) -> str:
    """Turn a server-provided reference into a path relative to ``base_url``.

    ``reference`` may be an absolute URL or an absolute path such as the
    ``meta.next`` value ``/api/v1/stack/?offset=25`` or a ``resource_uri``.
    It is resolved against ``base_url`` and the base URL's own path is
    stripped, so ``base_url + relative_path(...)`` addresses the same
    resource whatever the length of the base URL.

    Raises:
        DecodeError: If the reference points outside the base URL.
    """
    base = urlsplit(base_url)
    target = urlsplit(urljoin(base_url, reference))

    # Match whole path segments, so /api/v1 does not claim /api/v10/
    prefix = base.path.rstrip("/") + "/"
    if (target.scheme, target.netloc) != (base.scheme, base.netloc) or not target.path.startswith(prefix):
        raise DecodeError(f"Reference {reference!r} is outside the base URL {base_url}")

    path = target.path[len(base.path) :]
    if target.query:
        path = f"{path}?{target.query}"
    return path


class PaginatedCollector:
    """Collect every object of a paginated list endpoint.

    Example:
        ```python
        collector = PaginatedCollector(executor)
        stacks = collector.collect_all("stack/", item=StackSummary.from_dict)
        ```
    """

    def __init__(self, executor: CallExecutor) -> None:
        self._executor = executor

    def collect_all(
        self,
        start_path: str,
        method: str = "GET",
        body: bytes | None = None,
        *,
        item: Callable[[Any], T] | None = None,
        timeout: Any = httpx.USE_CLIENT_DEFAULT,
    ) -> list[T]:
        """Fetch ``start_path`` and every page after it.

        Args:
            start_path: Path of the first page, relative to the base URL.
            method: HTTP method used for every page.
            body: Body sent with every page.
            item: Converts each raw object; raw JSON values when omitted.
            timeout: Applied to each page request.

        Returns:
            The objects of all pages, in page order.

        Raises:
            APIError: Any executor or decode failure on any page.
        """
        descriptor = CallDescriptor(start_path, method, body)
        page = self._fetch(descriptor, item, timeout)
        collected = list(page.objects)
        page_count = 1

        while page.next:
            path = relative_path(page.next, self._executor.base_url)
            page = self._fetch(CallDescriptor(path, descriptor.method, descriptor.body), item, timeout)
            collected.extend(page.objects)
            page_count += 1

        logger.debug(f"Collected {len(collected)} objects from {start_path} in {page_count} page(s)")
        return collected

    def _fetch(
        self,
        descriptor: CallDescriptor,
        item: Callable[[Any], T] | None,
        timeout: Any,
    ) -> PaginatedResponse[T]:
        data = self._executor.execute(descriptor, timeout=timeout)
        return PaginatedResponse.from_json(data, item=item)

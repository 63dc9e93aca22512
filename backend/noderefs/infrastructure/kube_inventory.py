"""Kubernetes Node Inventory - lists Nodes from a workload cluster's API server.

Invariants:
    - One logical bulk read per list_members call, paged with limit/continue
    - Snapshot order is the API server's order across pages
    - scope.label_selector forwarded as labelSelector when set
    - Timeouts, transport errors, non-2xx responses and malformed payloads all
      map to InventoryUnavailableError (core/errors.py)
    - No retry: backoff belongs to the outer reconciliation loop
    - A repeated continue token ends the listing with InventoryUnavailableError
    - asyncio.CancelledError (BaseException) passes through uncaught

Design Decisions:
    - httpx.AsyncClient injected or built from settings: tests swap in a
      MockTransport without patching module globals
    - pydantic parses the NodeList at the boundary; core never sees raw JSON
"""

import logging
import os
from collections.abc import Sequence

import httpx
from pydantic import ValidationError

from noderefs.core.domain_types import MemberScope
from noderefs.core.errors import (
    ErrorCategory, ErrorContext, InventoryUnavailableError,
)
from noderefs.core.members import MemberRecord
from noderefs.schemas.kube_node import KubeNodeList

logger = logging.getLogger(__name__)

NODES_PATH = "/api/v1/nodes"


class KubeNodeInventory:
    """MemberInventory backed by the Kubernetes core/v1 Node API."""

    backend_name = "kubernetes"

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        ca_path: str | None = None,
        verify_tls: bool = True,
        timeout_seconds: float = 10.0,
        page_size: int = 500,
        client: httpx.AsyncClient | None = None,
    ):
        self.page_size = page_size
        self._owns_client = client is None
        if client is None:
            headers = {"Accept": "application/json"}
            if token:
                headers["Authorization"] = f"Bearer {token}"
            verify: bool | str = verify_tls
            if verify_tls and ca_path and os.path.exists(ca_path):
                verify = ca_path
            client = httpx.AsyncClient(
                base_url=base_url,
                headers=headers,
                verify=verify,
                timeout=timeout_seconds,
            )
        self.client = client

    async def list_members(self, scope: MemberScope) -> Sequence[MemberRecord]:
        context = ErrorContext(cluster=scope.cluster, backend=self.backend_name)
        members: list[MemberRecord] = []
        continue_token: str | None = None
        page = 0
        seen_tokens: set[str] = set()

        while True:
            page += 1
            node_list = await self._fetch_page(scope, continue_token, context)
            members.extend(node.to_member() for node in node_list.items)
            logger.debug(
                f"Fetched {len(node_list.items)} nodes",
                extra={"cluster": scope.cluster, "page": page},
            )
            continue_token = node_list.metadata.continue_token
            if not continue_token:
                return members
            if continue_token in seen_tokens:
                raise InventoryUnavailableError(
                    f"API server repeated continue token on page {page}", "list",
                    ErrorCategory.EXTERNAL_API, context,
                )
            seen_tokens.add(continue_token)

    async def _fetch_page(
        self,
        scope: MemberScope,
        continue_token: str | None,
        context: ErrorContext,
    ) -> KubeNodeList:
        params: dict[str, str | int] = {"limit": self.page_size}
        if continue_token:
            params["continue"] = continue_token
        if scope.label_selector:
            params["labelSelector"] = scope.label_selector

        try:
            response = await self.client.get(NODES_PATH, params=params)
            response.raise_for_status()
            return KubeNodeList.model_validate(response.json())

        except httpx.TimeoutException as e:
            raise InventoryUnavailableError(
                "API server timeout", "list", ErrorCategory.TIMEOUT, context,
            ) from e

        except httpx.HTTPStatusError as e:
            raise InventoryUnavailableError(
                f"API server returned {e.response.status_code}", "list",
                ErrorCategory.EXTERNAL_API, context,
            ) from e

        except httpx.HTTPError as e:
            raise InventoryUnavailableError(
                f"Connection error: {e}", "list",
                ErrorCategory.EXTERNAL_API, context,
            ) from e

        except (ValidationError, ValueError) as e:
            logger.error(
                f"Malformed NodeList payload: {e}",
                extra={"cluster": scope.cluster},
            )
            raise InventoryUnavailableError(
                "Malformed NodeList payload", "decode",
                ErrorCategory.EXTERNAL_API, context,
            ) from e

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

"""Vercel Edge Config backend.

Reads go through the Vercel REST API (uncached, needs an API token) or the
edge endpoint named by the connection string (what the Vercel SDK uses,
cached at the edge). Writes always go through the REST API.
"""

import re
from dataclasses import dataclass

import httpx
import logfire

from joinlink.domain.error import StoreTransportError, StoreWriteError
from joinlink.domain.model import InvitationRecord
from joinlink.persistence.mappers import document_to_record, record_to_document
from joinlink.persistence.repository.invitation import RecordReader, RecordWriter
from joinlink.util.error import ConfigurationError

API_BASE_URL = "https://api.vercel.com/v1/edge-config"
EDGE_BASE_URL = "https://edge-config.vercel.com"

_CONNECTION_RE = re.compile(r"edge-config\.vercel\.com/([^?/]+)(?:\?(.*))?")


@dataclass(frozen=True)
class EdgeConfigConnection:
    """Parsed Edge Config connection string."""

    edge_config_id: str
    read_token: str | None


def parse_connection_string(connection_string: str) -> EdgeConfigConnection:
    """Parse ``https://edge-config.vercel.com/<id>?token=<token>``.

    Raises:
        ConfigurationError: If the string is not an Edge Config connection string
    """
    match = _CONNECTION_RE.search(connection_string)
    if not match:
        raise ConfigurationError(
            "Invalid Edge Config connection string", setting="STORAGE__EDGE_CONFIG"
        )

    token = None
    for part in (match.group(2) or "").split("&"):
        name, _, value = part.partition("=")
        if name == "token" and value:
            token = value
    return EdgeConfigConnection(edge_config_id=match.group(1), read_token=token)


class _EdgeConfigBackend:
    def __init__(
        self,
        connection: EdgeConfigConnection,
        key: str,
        api_token: str | None = None,
        team_id: str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.connection = connection
        self.key = key
        self.api_token = api_token
        self.team_id = team_id
        self.timeout = timeout
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self.transport)

    def _team_params(self) -> dict[str, str]:
        return {"teamId": self.team_id} if self.team_id else {}

    def _api_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_token}",
            "Content-Type": "application/json",
        }


class EdgeConfigApiReader(_EdgeConfigBackend, RecordReader):
    """Reads the item through the Vercel REST API (not cached)."""

    name = "edge_config_api"

    async def read(self) -> InvitationRecord | None:
        url = f"{API_BASE_URL}/{self.connection.edge_config_id}/item/{self.key}"
        try:
            async with self._client() as client:
                response = await client.get(
                    url, params=self._team_params(), headers=self._api_headers()
                )
        except httpx.HTTPError as e:
            raise StoreTransportError(f"Edge Config API request failed: {e}")

        if response.status_code == 404:
            return None
        if response.status_code != 200:
            raise StoreTransportError(
                f"Edge Config API read failed: {response.status_code}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise StoreTransportError(f"Edge Config API returned invalid JSON: {e}")

        value = data.get("value") if isinstance(data, dict) else None
        if value is None:
            return None
        return document_to_record(value)


class EdgeConfigEdgeReader(_EdgeConfigBackend, RecordReader):
    """Reads the item from the edge endpoint with the connection string token."""

    name = "edge_config_edge"

    async def read(self) -> InvitationRecord | None:
        url = f"{EDGE_BASE_URL}/{self.connection.edge_config_id}/item/{self.key}"
        headers = {}
        if self.connection.read_token:
            headers["Authorization"] = f"Bearer {self.connection.read_token}"

        try:
            async with self._client() as client:
                response = await client.get(url, params={"version": "1"}, headers=headers)
        except httpx.HTTPError as e:
            raise StoreTransportError(f"Edge Config request failed: {e}")

        if response.status_code in (204, 404):
            return None
        if response.status_code != 200:
            raise StoreTransportError(f"Edge Config read failed: {response.status_code}")

        try:
            value = response.json()
        except ValueError as e:
            raise StoreTransportError(f"Edge Config returned invalid JSON: {e}")

        if value is None:
            return None
        return document_to_record(value)


class EdgeConfigApiWriter(_EdgeConfigBackend, RecordWriter):
    """Upserts the item through the Vercel REST API."""

    async def write(self, record: InvitationRecord) -> None:
        if not self.api_token:
            raise StoreWriteError("Edge Config API token is not configured")

        url = f"{API_BASE_URL}/{self.connection.edge_config_id}/items"
        body = {
            "items": [
                {
                    "operation": "upsert",
                    "key": self.key,
                    "value": record_to_document(record),
                }
            ]
        }

        try:
            async with self._client() as client:
                response = await client.patch(
                    url,
                    params=self._team_params(),
                    headers=self._api_headers(),
                    json=body,
                )
        except httpx.HTTPError as e:
            logfire.error("Edge Config write HTTP error", error=str(e))
            raise StoreWriteError(f"Failed to save data to Edge Config: {e}")

        if not response.is_success:
            logfire.error(
                "Edge Config write failed",
                status_code=response.status_code,
                body=response.text,
            )
            raise StoreWriteError(
                f"Edge Config update failed: {response.status_code} {response.text}"
            )

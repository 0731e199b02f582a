"""Persistence infrastructure providers."""

from pathlib import Path

from dishka import Scope, provide
import logfire

from joinlink.config import Settings
from joinlink.domain.repository import InvitationStore
from joinlink.persistence.backend import (
    EdgeConfigApiReader,
    EdgeConfigApiWriter,
    EdgeConfigEdgeReader,
    FileRecordReader,
    FileRecordWriter,
    parse_connection_string,
)
from joinlink.persistence.repository import ChainedInvitationStore, RecordReader
from joinlink.util.di.base import ProviderBase
from joinlink.util.error import ConfigurationError


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider (Edge Config or local file)."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_invitation_store(self, settings: Settings) -> InvitationStore:
        """Provide the invitation store for the configured backend.

        Raises:
            ConfigurationError: If Edge Config is selected without a connection string
        """
        storage = settings.storage
        file_path = Path(storage.file_path)

        if storage.backend == "file":
            logfire.info("Using file invitation store", path=str(file_path))
            return ChainedInvitationStore(
                readers=[FileRecordReader(file_path)],
                writer=FileRecordWriter(file_path),
                key=storage.item_key,
            )

        if not storage.edge_config:
            raise ConfigurationError(
                "Edge Config connection string is required for the edge_config backend",
                setting="STORAGE__EDGE_CONFIG",
            )
        connection = parse_connection_string(storage.edge_config)
        options = dict(
            connection=connection,
            key=storage.item_key,
            api_token=storage.api_token,
            team_id=storage.team_id,
            timeout=storage.timeout_seconds,
        )

        # REST API first (uncached), then the edge endpoint, then the file
        readers: list[RecordReader] = []
        if storage.api_token:
            readers.append(EdgeConfigApiReader(**options))
        readers.append(EdgeConfigEdgeReader(**options))
        if storage.file_fallback:
            readers.append(FileRecordReader(file_path))

        logfire.info(
            "Using Edge Config invitation store",
            edge_config_id=connection.edge_config_id,
            readers=[reader.name for reader in readers],
        )
        return ChainedInvitationStore(
            readers=readers,
            writer=EdgeConfigApiWriter(**options),
            key=storage.item_key,
        )

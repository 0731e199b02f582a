"""Invitation link validation."""

from abc import ABC, abstractmethod

import logfire

from joinlink.config import InvitationSettings

from .base import Service


class LinkProbe(ABC):
    """Abstract liveness probe for a URL."""

    @abstractmethod
    async def check(self, url: str) -> bool:
        """Check whether the URL still resolves.

        Implementations must never raise: timeouts and transport errors
        count as unreachable.

        Args:
            url: URL to probe

        Returns:
            True if the URL answered with a success or redirect status
        """
        pass


class LinkValidator(Service):
    """Decides whether an invitation URL is usable.

    A URL must be non-blank, point at an allowed Slack host, and answer a
    liveness probe.
    """

    def __init__(self, probe: LinkProbe, settings: InvitationSettings) -> None:
        """Initialize link validator.

        Args:
            probe: Liveness probe
            settings: Invitation settings (allow-list)
        """
        self.probe = probe
        self.allowed_hosts = settings.allowed_hosts

    def is_allowed(self, url: str) -> bool:
        """Check the URL against the host allow-list without any I/O."""
        trimmed = url.strip()
        if not trimmed:
            return False
        return any(host in trimmed for host in self.allowed_hosts)

    async def validate(self, url: str) -> bool:
        """Validate an invitation URL.

        Args:
            url: Invitation URL

        Returns:
            True if the URL is allowed and reachable, False otherwise
        """
        with logfire.span("link_validator.validate", url=url):
            if not self.is_allowed(url):
                logfire.info("Invitation URL rejected by allow-list", url=url)
                return False

            reachable = await self.probe.check(url.strip())
            logfire.info("Invitation URL probed", url=url, reachable=reachable)
            return reachable

"""Link probe infrastructure providers."""

from dishka import Scope, provide

from joinlink.adapter.probe import HttpLinkProbe
from joinlink.config import InvitationSettings
from joinlink.domain.service import LinkProbe
from joinlink.util.di.base import ProviderBase


class ProbeProvider(ProviderBase):
    """Link probe component base."""

    __mock_component__ = "probe"


class ProdProbeProvider(ProbeProvider):
    """Production link probe provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_link_probe(self, settings: InvitationSettings) -> LinkProbe:
        """Provide HTTP HEAD link probe."""
        return HttpLinkProbe(
            timeout=settings.probe_timeout_seconds,
            user_agent=settings.probe_user_agent,
        )

"""HTTP liveness probe for invitation links."""

import httpx
import logfire

from joinlink.domain.service.link_validator import LinkProbe


class HttpLinkProbe(LinkProbe):
    """Probes a URL with a HEAD request.

    Any status in [200, 400) counts as alive: invitation links answer with
    the invite page directly or redirect to a login/signup flow.
    """

    def __init__(
        self,
        timeout: float = 10.0,
        user_agent: str = "SlackInviteValidator/1.0",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize HTTP probe.

        Args:
            timeout: Probe timeout in seconds
            user_agent: User-Agent header sent with the probe
            transport: Optional httpx transport (tests)
        """
        self.timeout = timeout
        self.user_agent = user_agent
        self.transport = transport

    async def check(self, url: str) -> bool:
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                transport=self.transport,
            ) as client:
                response = await client.head(url, headers={"User-Agent": self.user_agent})
        except httpx.HTTPError as e:
            logfire.warn("Link probe failed", url=url, error=str(e))
            return False
        except httpx.InvalidURL as e:
            logfire.warn("Link probe rejected URL", url=url, error=str(e))
            return False

        logfire.info("Link probe answered", url=url, status_code=response.status_code)
        return 200 <= response.status_code < 400


class MockLinkProbe(LinkProbe):
    """Mock probe for testing.

    Answers with the configured reachability and records probed URLs.
    """

    def __init__(self, reachable: bool = True) -> None:
        self.reachable = reachable
        self.calls: list[str] = []

    async def check(self, url: str) -> bool:
        self.calls.append(url)
        return self.reachable

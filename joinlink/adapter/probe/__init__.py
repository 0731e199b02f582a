"""Link probe adapter."""

from .http import HttpLinkProbe, MockLinkProbe

__all__ = ["HttpLinkProbe", "MockLinkProbe"]

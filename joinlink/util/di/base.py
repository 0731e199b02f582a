"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure components that tests can swap for in-memory doubles:
# the invitation store, the Slack webhook and the HTTP link probe
Component = Literal["persistence", "slack", "probe"]


class ProviderBase(Provider):
    """Base for all joinlink providers.

    Attributes:
        __mock_component__: Component this provider belongs to, None for
            the concrete config, domain and application providers
        __is_mock__: True for the test double of a component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

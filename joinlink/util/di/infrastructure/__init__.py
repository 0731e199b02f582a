"""Infrastructure providers."""

# Import bases
from .persistence import PersistenceProvider
from .probe import ProbeProvider
from .slack import SlackProvider

# Import implementations (needed for __subclasses__())
from .persistence import ProdPersistenceProvider  # noqa: F401
from .probe import ProdProbeProvider  # noqa: F401
from .slack import ProdSlackProvider  # noqa: F401

__all__ = [
    "PersistenceProvider",
    "ProbeProvider",
    "ProdPersistenceProvider",
    "ProdProbeProvider",
    "ProdSlackProvider",
    "SlackProvider",
]

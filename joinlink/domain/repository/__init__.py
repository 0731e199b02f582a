"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from joinlink.domain.repository.invitation import InvitationStore

__all__ = [
    "InvitationStore",
]

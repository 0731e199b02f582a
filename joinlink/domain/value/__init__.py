"""Domain value objects."""

from joinlink.domain.value.types import ReconcileAction

__all__ = ["ReconcileAction"]

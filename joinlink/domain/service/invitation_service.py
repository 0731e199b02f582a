"""Invitation domain service."""

from datetime import datetime

import logfire
from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from joinlink.config import InvitationSettings
from joinlink.domain.error import (
    InvalidURLError,
    MissingURLError,
    NoInvitationError,
    RecordNotFoundError,
    StoreWriteError,
)
from joinlink.domain.model.invitation import InvitationRecord, ReconcileOutcome, utc_now
from joinlink.domain.repository import InvitationStore
from joinlink.domain.value import ReconcileAction

from .base import Service
from .expiry import days_left, is_expired
from .link_validator import LinkValidator
from .notification_service import NotificationService

_url_adapter = TypeAdapter(AnyUrl)


class InvitationService(Service):
    """Domain service for the invitation lifecycle.

    Ties together the record store, the link validator and notifications.
    """

    def __init__(
        self,
        store: InvitationStore,
        validator: LinkValidator,
        notifications: NotificationService,
        settings: InvitationSettings,
    ) -> None:
        """Initialize invitation service.

        Args:
            store: Invitation record store
            validator: Link validator
            notifications: Notification service
            settings: Invitation settings (TTL and warning window)
        """
        self.store = store
        self.validator = validator
        self.notifications = notifications
        self.ttl_days = settings.ttl_days
        self.warning_days = settings.warning_days

    def is_expired(self, record: InvitationRecord, now: datetime | None = None) -> bool:
        return is_expired(record.created_at, self.ttl_days, now)

    def days_left(self, record: InvitationRecord, now: datetime | None = None) -> int:
        return days_left(record.created_at, self.ttl_days, now)

    def effective(self, record: InvitationRecord) -> InvitationRecord:
        """Copy of the record with is_active reflecting expiry."""
        active = record.is_active and not self.is_expired(record)
        if active == record.is_active:
            return record
        return record.model_copy(update={"is_active": active})

    async def current(self) -> InvitationRecord:
        """Stored record, or the empty record when none can be read."""
        return await self.store.get()

    async def stored(self) -> InvitationRecord:
        """Stored record, or the empty record when none is stored.

        Raises:
            StoreTransportError: If the backend cannot be read
        """
        try:
            return await self.store.load()
        except RecordNotFoundError:
            return InvitationRecord.empty()

    async def reconcile(self, record: InvitationRecord) -> ReconcileOutcome:
        """Apply the expiry and validation policy to a record.

        Order matters: an expired link is deactivated without being probed,
        and the expiring-soon warning never deactivates on its own.

        Args:
            record: The record as loaded from the store

        Returns:
            Outcome with the effective record and whether to redirect
        """
        with logfire.span(
            "invitation_service.reconcile",
            url=record.url,
            is_active=record.is_active,
        ):
            if not record.is_active or not record.has_url:
                logfire.info("Invitation inactive or unset, nothing to reconcile")
                return ReconcileOutcome(
                    record=record,
                    days_left=self.days_left(record) if record.has_url else None,
                )

            remaining = self.days_left(record)

            if self.is_expired(record):
                deactivated = await self._deactivate(record)
                sent = await self.notifications.link_expired(record.url, 0)
                logfire.warn(
                    "Invitation expired and deactivated",
                    url=record.url,
                    days_left=remaining,
                )
                return ReconcileOutcome(
                    record=deactivated,
                    action=ReconcileAction.DEACTIVATED_EXPIRED,
                    days_left=remaining,
                    notification_sent=sent,
                )

            action = ReconcileAction.NONE
            notification_sent = False
            if remaining <= self.warning_days:
                notification_sent = await self.notifications.link_expired(
                    record.url, remaining
                )
                action = ReconcileAction.EXPIRING_WARNING
                logfire.info(
                    "Invitation expiring soon", url=record.url, days_left=remaining
                )

            is_valid = await self.validator.validate(record.url)
            if not is_valid:
                deactivated = await self._deactivate(record)
                sent = await self.notifications.link_invalid(record.url)
                logfire.warn("Invitation invalid and deactivated", url=record.url)
                return ReconcileOutcome(
                    record=deactivated,
                    action=ReconcileAction.DEACTIVATED_INVALID,
                    is_valid=False,
                    days_left=remaining,
                    notification_sent=notification_sent or sent,
                )

            return ReconcileOutcome(
                record=record,
                action=action,
                redirectable=True,
                is_valid=True,
                days_left=remaining,
                notification_sent=notification_sent,
            )

    async def replace(self, new_url: str | None) -> InvitationRecord:
        """Replace the invitation with a new URL.

        Args:
            new_url: The new invitation URL

        Returns:
            The newly stored, active record

        Raises:
            MissingURLError: If no URL was given
            InvalidURLError: If the URL does not parse
            StoreWriteError: If the record cannot be written
        """
        if not new_url or not new_url.strip():
            raise MissingURLError()
        new_url = new_url.strip()
        try:
            _url_adapter.validate_python(new_url)
        except PydanticValidationError:
            logfire.info("Rejected malformed invitation URL", url=new_url)
            raise InvalidURLError(new_url)

        with logfire.span("invitation_service.replace", new_url=new_url):
            old = await self.store.get()
            record = InvitationRecord(url=new_url, created_at=utc_now(), is_active=True)
            saved = await self.store.save(record)
            logfire.info("Invitation replaced", old_url=old.url, new_url=new_url)

            if old.url and old.url != new_url:
                await self.notifications.link_updated(old.url, new_url)

            return saved

    async def revalidate(self) -> tuple[InvitationRecord, bool]:
        """Probe the stored URL and store the result as is_active.

        A successful probe re-activates an inactive record.

        Returns:
            Tuple of (stored record, whether the link is valid)

        Raises:
            NoInvitationError: If no URL is stored
            StoreTransportError: If the store cannot be read
            StoreWriteError: If the result cannot be written
        """
        record = await self.stored()
        if not record.has_url:
            raise NoInvitationError()

        with logfire.span("invitation_service.revalidate", url=record.url):
            is_valid = await self.validator.validate(record.url)
            saved = await self.store.save(record.model_copy(update={"is_active": is_valid}))
            if not is_valid:
                await self.notifications.link_invalid(record.url)
            logfire.info("Invitation revalidated", url=record.url, is_valid=is_valid)
            return saved, is_valid

    async def _deactivate(self, record: InvitationRecord) -> InvitationRecord:
        inactive = record.model_copy(update={"is_active": False})
        try:
            return await self.store.save(inactive)
        except StoreWriteError as e:
            # The record is still reported inactive; the next check writes again
            logfire.error(
                "Failed to persist invitation deactivation",
                url=record.url,
                error=str(e),
            )
            return inactive

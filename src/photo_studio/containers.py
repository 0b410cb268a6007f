"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from photo_studio.adapters.supabase_audit_repository import SupabaseAuditRepository
from photo_studio.adapters.supabase_booking_store import SupabaseBookingStore
from photo_studio.adapters.supabase_notification_repository import (
    SupabaseNotificationRepository,
)
from photo_studio.adapters.supabase_user_repository import SupabaseUserRepository
from photo_studio.config import Settings
from photo_studio.services.admin import AdminService
from photo_studio.services.audit import AuditService
from photo_studio.services.bookings import BookingService
from photo_studio.services.lifecycle import BookingLifecycleManager
from photo_studio.services.notifications import (
    NotificationDispatcher,
    NotificationService,
)
from photo_studio.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    booking_service: BookingService
    lifecycle_manager: BookingLifecycleManager
    notification_service: NotificationService
    admin_service: AdminService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    booking_store = SupabaseBookingStore(supabase_client)
    user_service = UserService(SupabaseUserRepository(supabase_client))
    audit_service = AuditService(SupabaseAuditRepository(supabase_client))
    notification_service = NotificationService(
        SupabaseNotificationRepository(supabase_client)
    )
    dispatcher = NotificationDispatcher(
        notification_service=notification_service,
        user_service=user_service,
    )
    return AppContainer(
        settings=resolved_settings,
        user_service=user_service,
        booking_service=BookingService(
            store=booking_store,
            user_service=user_service,
            audit_service=audit_service,
        ),
        lifecycle_manager=BookingLifecycleManager(
            store=booking_store,
            dispatcher=dispatcher,
            audit_service=audit_service,
        ),
        notification_service=notification_service,
        admin_service=AdminService(
            user_service=user_service,
            booking_store=booking_store,
            audit_service=audit_service,
            notification_service=notification_service,
            active_client_window_days=resolved_settings.active_client_window_days,
        ),
    )

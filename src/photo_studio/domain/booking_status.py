"""Booking status state machine."""

from dataclasses import dataclass

from photo_studio.domain.models import ADMIN, CLIENT, PHOTOGRAPHER, ROLES

PENDING = "pending"
CONFIRMED = "confirmed"
COMPLETED = "completed"
CANCELLED = "cancelled"

BOOKING_STATUSES = frozenset({PENDING, CONFIRMED, COMPLETED, CANCELLED})

BOOKING_TRANSITIONS: dict[str, frozenset[str]] = {
    PENDING: frozenset({CONFIRMED, CANCELLED}),
    CONFIRMED: frozenset({COMPLETED, CANCELLED}),
    COMPLETED: frozenset(),
    # Reopening is only reachable by admins through the role check below.
    CANCELLED: frozenset({PENDING}),
}

ROLE_TARGET_STATUSES: dict[str, frozenset[str]] = {
    PHOTOGRAPHER: frozenset({CONFIRMED, COMPLETED}),
    CLIENT: frozenset({CANCELLED}),
}

INVALID_TRANSITION = "invalid_transition"
ROLE_FORBIDDEN = "role_forbidden"


@dataclass(frozen=True)
class TransitionAllowed:
    """The requested status change may proceed."""

    noop: bool = False


@dataclass(frozen=True)
class TransitionRejected:
    """The requested status change is refused."""

    code: str
    reason: str


TransitionDecision = TransitionAllowed | TransitionRejected


def validate_transition(
    current_status: str, requested_status: str, actor_role: str
) -> TransitionDecision:
    """Decide whether an actor with the given role may move a booking.

    The base transition table is checked before the role allow-lists, so an
    edge that does not exist is reported as an invalid transition even for a
    role that could never set the target status. Admins are bound only by the
    table.
    """
    if actor_role not in ROLES:
        return _role_forbidden(actor_role, requested_status)
    if requested_status == current_status:
        return TransitionAllowed(noop=True)
    if requested_status not in BOOKING_TRANSITIONS.get(current_status, frozenset()):
        return TransitionRejected(
            code=INVALID_TRANSITION,
            reason=f"invalid transition from {current_status} to {requested_status}",
        )
    if actor_role == ADMIN:
        return TransitionAllowed()
    if requested_status not in ROLE_TARGET_STATUSES.get(actor_role, frozenset()):
        return _role_forbidden(actor_role, requested_status)
    return TransitionAllowed()


def _role_forbidden(actor_role: str, requested_status: str) -> TransitionRejected:
    return TransitionRejected(
        code=ROLE_FORBIDDEN,
        reason=f"role {actor_role} cannot set status {requested_status}",
    )

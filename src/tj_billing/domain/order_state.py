"""Order status contract and subscription extension.

PENDING -> {PAID, EXPIRED, FAILED}. Terminal states are final:
re-applying the same status is a no-op, anything else is rejected.
The payment gateway is the source of truth; this module only decides
whether its callback changes our record.
"""

import math
from datetime import datetime, timedelta

from src.tj_billing.domain.models import Subscription
from src.tj_common.enums import OrderStatus
from src.tj_common.errors import InvalidOrderTransitionError

TERMINAL_STATUSES = frozenset({OrderStatus.PAID, OrderStatus.EXPIRED, OrderStatus.FAILED})

_GATEWAY_STATUS_MAP = {
    "PAID": OrderStatus.PAID,
    "SETTLED": OrderStatus.PAID,
    "EXPIRED": OrderStatus.EXPIRED,
    "FAILED": OrderStatus.FAILED,
}


def map_gateway_status(raw_status: str | None) -> OrderStatus | None:
    """Gateway invoice status -> order status; None for statuses we ignore."""
    if raw_status is None:
        return None
    return _GATEWAY_STATUS_MAP.get(raw_status.upper())


def transition_order(current: OrderStatus, target: OrderStatus) -> tuple[OrderStatus, bool]:
    """Return (new_status, changed).

    Raises InvalidOrderTransitionError when leaving a terminal state or
    moving back to PENDING.
    """
    if current == target:
        return current, False
    if current in TERMINAL_STATUSES or target == OrderStatus.PENDING:
        raise InvalidOrderTransitionError(current.value, target.value)
    return target, True


def resolve_gateway_callback(
    current: OrderStatus, raw_status: str | None
) -> tuple[OrderStatus, bool]:
    """Apply a gateway callback; unknown statuses leave the order untouched."""
    target = map_gateway_status(raw_status)
    if target is None:
        return current, False
    return transition_order(current, target)


def extend_subscription(
    current_expiry: datetime | None, now: datetime, duration_days: int
) -> datetime:
    """New expiry after a paid order.

    Unexpired time is kept: the extension stacks on the later of the
    current expiry and now.
    """
    base = current_expiry if current_expiry is not None and current_expiry > now else now
    return base + timedelta(days=duration_days)


def is_subscription_active(sub: Subscription | None, now: datetime) -> bool:
    if sub is None or not sub.is_active:
        return False
    return sub.expires_at > now


def days_remaining(sub: Subscription | None, now: datetime) -> int:
    """Whole days left, rounded up; 0 once expired."""
    if sub is None:
        return 0
    seconds = (sub.expires_at - now).total_seconds()
    return max(0, math.ceil(seconds / 86400))

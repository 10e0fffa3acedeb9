"""
Closed enumerations used by the wire schemas.

Members are ``str`` based so they compare equal to, and serialize as, the
exact tag the API sends. Decoding a tag outside these sets is a hard
failure; surfaces that evolve with the API (event types, card brands) are
plain strings instead.
"""

from enum import Enum


class ChargeStatus(str, Enum):
    """Outcome of a charge."""
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class RefundReason(str, Enum):
    """Reason given when a refund was created."""
    DUPLICATE = "duplicate"
    FRAUDULENT = "fraudulent"
    REQUESTED_BY_CUSTOMER = "requested_by_customer"


class SubscriptionStatus(str, Enum):
    """Lifecycle state of a subscription."""
    TRIALING = "trialing"
    ACTIVE = "active"
    PAST_DUE = "past_due"
    CANCELED = "canceled"
    UNPAID = "unpaid"


class LineItemType(str, Enum):
    """Source of an invoice line item."""
    INVOICE_ITEM = "invoiceitem"
    SUBSCRIPTION = "subscription"


class CouponDuration(str, Enum):
    """How long a coupon applies once redeemed."""
    ONCE = "once"
    REPEATING = "repeating"
    FOREVER = "forever"


class PlanInterval(str, Enum):
    """Billing intervals supported by plans."""
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

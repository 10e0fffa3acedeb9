"""Wire schemas for the payments API objects."""

from .base import CardId, ChargeId, CustomerId, InvoiceId, StripeObject, SubscriptionId, WireModel, is_present
from .billing import Coupon, Discount, Period, Plan
from .card import Card, ShallowCard
from .charge import Charge, Refund
from .customer import (
    CardResource,
    Customer,
    CustomerResource,
    ExpandableCard,
    ExpandableCustomer,
    ShallowCustomer,
)
from .error import APIError, ErrorResponse
from .event import Event, EventData, EventHeader
from .invoice import Invoice, InvoiceItem, InvoiceLineItem
from .lists import ListObject
from .references import Expandable, is_expanded, reference_id
from .subscription import Subscription

__all__ = [
    "APIError",
    "Card",
    "CardId",
    "CardResource",
    "Charge",
    "ChargeId",
    "Coupon",
    "Customer",
    "CustomerId",
    "CustomerResource",
    "Discount",
    "ErrorResponse",
    "Event",
    "EventData",
    "EventHeader",
    "Expandable",
    "ExpandableCard",
    "ExpandableCustomer",
    "Invoice",
    "InvoiceId",
    "InvoiceItem",
    "InvoiceLineItem",
    "ListObject",
    "Period",
    "Plan",
    "Refund",
    "ShallowCard",
    "ShallowCustomer",
    "StripeObject",
    "Subscription",
    "SubscriptionId",
    "WireModel",
    "is_expanded",
    "is_present",
    "reference_id",
]

"""Subscription schema."""

from typing import Literal, Optional

from pydantic import Field, StrictBool, StrictStr

from ..domain.enums import SubscriptionStatus
from ..domain.scalars import Metadata, NonnegInt
from .base import CustomerId, StripeObject, Timestamp
from .billing import Discount, Plan


class Subscription(StripeObject):
    object_: Literal["subscription"] = Field("subscription", alias="object")
    id: StrictStr
    status: SubscriptionStatus
    plan: Plan
    customer: CustomerId
    quantity: NonnegInt = 1
    start: Optional[Timestamp] = None
    current_period_start: Timestamp
    current_period_end: Timestamp
    cancel_at_period_end: StrictBool = False
    canceled_at: Optional[Timestamp] = None
    ended_at: Optional[Timestamp] = None
    trial_start: Optional[Timestamp] = None
    trial_end: Optional[Timestamp] = None
    discount: Optional[Discount] = None
    metadata: Metadata = Field(default_factory=dict)

    def is_active(self) -> bool:
        """Check if the subscription currently grants access."""
        return self.status in (SubscriptionStatus.ACTIVE, SubscriptionStatus.TRIALING)

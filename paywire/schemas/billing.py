"""Plans, coupons, discounts and billing periods."""

from typing import Literal, Optional

from pydantic import Field, StrictBool, StrictStr, ValidationInfo, model_validator
from pydantic_core import PydanticCustomError

from ..domain.enums import CouponDuration, PlanInterval
from ..domain.scalars import Metadata, NonnegInt, PosInt
from .base import CustomerId, StripeObject, SubscriptionId, Timestamp, WireModel


class Period(WireModel):
    """Start and end of the span an invoice line covers."""

    start: Timestamp
    end: Timestamp


class Plan(StripeObject):
    object_: Literal["plan"] = Field("plan", alias="object")
    id: StrictStr
    amount: NonnegInt
    currency: StrictStr
    interval: PlanInterval
    interval_count: NonnegInt
    name: Optional[StrictStr] = None
    created: Optional[Timestamp] = None
    livemode: StrictBool = False
    trial_period_days: Optional[NonnegInt] = None
    statement_descriptor: Optional[StrictStr] = None
    metadata: Metadata = Field(default_factory=dict)


class Coupon(StripeObject):
    """
    Discount template.

    At most one of ``amount_off`` and ``percent_off`` is set by the API; this
    is only checked when the codec runs with strict exclusivity enabled.
    """

    object_: Literal["coupon"] = Field("coupon", alias="object")
    id: StrictStr
    duration: CouponDuration
    valid: StrictBool
    amount_off: Optional[PosInt] = None
    percent_off: Optional[PosInt] = None
    currency: Optional[StrictStr] = None
    duration_in_months: Optional[PosInt] = None
    max_redemptions: Optional[PosInt] = None
    redeem_by: Optional[Timestamp] = None
    times_redeemed: NonnegInt = 0
    created: Optional[Timestamp] = None
    livemode: StrictBool = False
    metadata: Metadata = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_exclusive_amounts(self, info: ValidationInfo) -> "Coupon":
        if info.context and info.context.get("strict_exclusivity"):
            if self.amount_off is not None and self.percent_off is not None:
                raise PydanticCustomError(
                    "exclusive_fields",
                    "amount_off and percent_off cannot both be set",
                )
        return self


class Discount(StripeObject):
    object_: Literal["discount"] = Field("discount", alias="object")
    coupon: Coupon
    start: Timestamp
    end: Optional[Timestamp] = None
    customer: Optional[CustomerId] = None
    subscription: Optional[SubscriptionId] = None

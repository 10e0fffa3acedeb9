"""Charge and refund schemas."""

from typing import Literal, Optional

from pydantic import Field, StrictBool, StrictStr

from ..domain.enums import ChargeStatus, RefundReason
from ..domain.scalars import Metadata, NonnegInt
from .base import ChargeId, CustomerId, InvoiceId, StripeObject, Timestamp
from .card import ShallowCard
from .lists import ListObject


class Refund(StripeObject):
    object_: Literal["refund"] = Field("refund", alias="object")
    id: StrictStr
    amount: NonnegInt
    currency: StrictStr
    charge: ChargeId
    created: Optional[Timestamp] = None
    reason: Optional[RefundReason] = None
    balance_transaction: Optional[StrictStr] = None
    metadata: Metadata = Field(default_factory=dict)


class Charge(StripeObject):
    """
    Payment attempt against a card.

    ``amount_refunded`` never exceeds ``amount`` on the API side; the value is
    taken as sent.
    """

    object_: Literal["charge"] = Field("charge", alias="object")
    id: StrictStr
    amount: NonnegInt
    amount_refunded: NonnegInt = 0
    currency: StrictStr
    status: ChargeStatus
    paid: StrictBool = False
    refunded: StrictBool = False
    captured: StrictBool = True
    source: ShallowCard
    refunds: Optional[ListObject[Refund]] = None
    customer: Optional[CustomerId] = None
    invoice: Optional[InvoiceId] = None
    description: Optional[StrictStr] = None
    failure_code: Optional[StrictStr] = None
    failure_message: Optional[StrictStr] = None
    receipt_email: Optional[StrictStr] = None
    statement_descriptor: Optional[StrictStr] = None
    created: Optional[Timestamp] = None
    livemode: StrictBool = False
    metadata: Metadata = Field(default_factory=dict)

"""Invoice, invoice line item and invoice item schemas."""

from typing import Literal, Optional

from pydantic import Field, StrictBool, StrictInt, StrictStr

from ..domain.enums import LineItemType
from ..domain.scalars import Metadata, NonnegInt
from .base import ChargeId, CustomerId, InvoiceId, StripeObject, SubscriptionId, Timestamp
from .billing import Discount, Period, Plan
from .lists import ListObject


class InvoiceLineItem(StripeObject):
    """
    One line of an invoice.

    ``subscription`` is only sent for ``invoiceitem`` lines that belong to a
    subscription.
    """

    object_: Literal["line_item"] = Field("line_item", alias="object")
    id: StrictStr
    type_: LineItemType = Field(alias="type")
    amount: StrictInt
    currency: StrictStr
    period: Period
    plan: Optional[Plan] = None
    quantity: Optional[NonnegInt] = None
    proration: StrictBool = False
    description: Optional[StrictStr] = None
    subscription: Optional[SubscriptionId] = None
    livemode: StrictBool = False
    metadata: Metadata = Field(default_factory=dict)


class InvoiceItem(StripeObject):
    object_: Literal["invoiceitem"] = Field("invoiceitem", alias="object")
    id: StrictStr
    amount: StrictInt
    currency: StrictStr
    customer: CustomerId
    date: Optional[Timestamp] = None
    period: Period
    plan: Optional[Plan] = None
    proration: StrictBool = False
    quantity: Optional[NonnegInt] = None
    invoice: Optional[InvoiceId] = None
    subscription: Optional[SubscriptionId] = None
    description: Optional[StrictStr] = None
    discountable: StrictBool = True
    livemode: StrictBool = False
    metadata: Metadata = Field(default_factory=dict)


class Invoice(StripeObject):
    """
    Invoice with its first page of lines.

    ``total`` is ``subtotal`` after discounts as computed by the API; it is
    never recomputed here.
    """

    object_: Literal["invoice"] = Field("invoice", alias="object")
    id: StrictStr
    customer: CustomerId
    lines: ListObject[InvoiceLineItem]
    subtotal: StrictInt
    total: StrictInt
    amount_due: StrictInt
    currency: StrictStr
    attempted: StrictBool = False
    attempt_count: NonnegInt = 0
    closed: StrictBool = False
    paid: StrictBool = False
    forgiven: StrictBool = False
    period_start: Optional[Timestamp] = None
    period_end: Optional[Timestamp] = None
    date: Optional[Timestamp] = None
    starting_balance: Optional[StrictInt] = None
    ending_balance: Optional[StrictInt] = None
    charge: Optional[ChargeId] = None
    subscription: Optional[SubscriptionId] = None
    discount: Optional[Discount] = None
    next_payment_attempt: Optional[Timestamp] = None
    description: Optional[StrictStr] = None
    livemode: StrictBool = False
    metadata: Metadata = Field(default_factory=dict)

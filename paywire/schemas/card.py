"""Card schema, generic over the representation of its owner."""

from typing import Generic, Literal, Optional, TypeVar

from pydantic import Field, StrictStr

from ..domain.scalars import Metadata, PosInt
from .base import CustomerId, StripeObject

U = TypeVar("U")


class Card(StripeObject, Generic[U]):
    """
    Payment card attached to a customer.

    ``customer`` is either the owner's identifier (``Card[CustomerId]``) or an
    expandable reference to the owner; see ``CardResource``.
    """

    object_: Literal["card"] = Field("card", alias="object")
    id: StrictStr
    brand: StrictStr
    last4: StrictStr
    exp_month: PosInt
    exp_year: PosInt
    fingerprint: Optional[StrictStr] = None
    funding: Optional[StrictStr] = None
    country: Optional[StrictStr] = None
    name: Optional[StrictStr] = None
    address_line1: Optional[StrictStr] = None
    address_zip: Optional[StrictStr] = None
    cvc_check: Optional[StrictStr] = None
    customer: Optional[U] = None
    metadata: Metadata = Field(default_factory=dict)


# the card shape embedded anywhere a card hangs off another object
ShallowCard = Card[CustomerId]

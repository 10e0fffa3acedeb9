"""Customer schema and the customer/card reference instantiations."""

from typing import Generic, Literal, Optional, TypeVar

from pydantic import Field, StrictBool, StrictInt, StrictStr, ValidationInfo, model_validator
from pydantic_core import PydanticCustomError

from ..domain.scalars import Metadata
from .base import CardId, StripeObject, Timestamp
from .billing import Discount
from .card import Card, ShallowCard
from .lists import ListObject
from .references import Expandable
from .subscription import Subscription

C = TypeVar("C")


class Customer(StripeObject, Generic[C]):
    """
    Customer, generic over the representation of its default card.

    Depending on the API version the attached cards are listed under
    ``sources`` or under ``cards``. Both are accepted; having both is only
    rejected when the codec runs with strict exclusivity enabled.
    """

    object_: Literal["customer"] = Field("customer", alias="object")
    id: StrictStr
    balance: StrictInt
    created: Optional[Timestamp] = None
    livemode: StrictBool = False
    currency: Optional[StrictStr] = None
    description: Optional[StrictStr] = None
    email: Optional[StrictStr] = None
    delinquent: StrictBool = False
    default_source: Optional[C] = None
    default_card: Optional[C] = None
    sources: Optional[ListObject[ShallowCard]] = None
    cards: Optional[ListObject[ShallowCard]] = None
    subscriptions: Optional[ListObject[Subscription]] = None
    discount: Optional[Discount] = None
    metadata: Metadata = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_exclusive_card_lists(self, info: ValidationInfo) -> "Customer":
        if info.context and info.context.get("strict_exclusivity"):
            if self.sources is not None and self.cards is not None:
                raise PydanticCustomError(
                    "exclusive_fields",
                    "sources and cards cannot both be set",
                )
        return self


ShallowCustomer = Customer[CardId]

ExpandableCard = Expandable[ShallowCard]
ExpandableCustomer = Expandable[ShallowCustomer]

# shapes returned by the customer and card endpoints
CustomerResource = Customer[ExpandableCard]
CardResource = Card[ExpandableCustomer]

"""Event envelope, generic over its payload."""

from typing import Any, Dict, Generic, Literal, Optional, TypeVar

from pydantic import Field, StrictBool, StrictStr

from ..domain.scalars import NonnegInt
from .base import StripeObject, Timestamp, WireModel

T = TypeVar("T")


class EventData(WireModel, Generic[T]):
    object_: T = Field(alias="object")
    previous_attributes: Optional[Dict[str, Any]] = None


class Event(StripeObject, Generic[T]):
    """
    Webhook or event API envelope.

    ``type`` stays a plain string so events the client does not model yet
    still decode; it is what callers dispatch on to pick ``T``.
    """

    object_: Literal["event"] = Field("event", alias="object")
    id: StrictStr
    created: Timestamp
    type_: StrictStr = Field(alias="type")
    data: EventData[T]
    livemode: StrictBool = False
    pending_webhooks: NonnegInt
    api_version: Optional[StrictStr]
    request: Optional[StrictStr] = None

    @property
    def payload(self) -> T:
        return self.data.object_


class EventHeader(StripeObject):
    """Type-only view of an event, decoded before the payload schema is chosen."""

    object_: Literal["event"] = Field("event", alias="object")
    id: StrictStr
    type_: StrictStr = Field(alias="type")

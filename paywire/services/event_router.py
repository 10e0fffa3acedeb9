"""Dispatch of events to payload schemas by event type."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from ..schemas.base import StripeObject
from ..schemas.billing import Coupon, Discount, Plan
from ..schemas.charge import Charge, Refund
from ..schemas.customer import CardResource, CustomerResource
from ..schemas.event import Event, EventHeader
from ..schemas.invoice import Invoice, InvoiceItem
from ..schemas.subscription import Subscription
from .codec import WireCodec

logger = logging.getLogger(__name__)

DEFAULT_ROUTES: Dict[str, Any] = {
    "charge.refund.": Refund,
    "charge.": Charge,
    "customer.subscription.": Subscription,
    "customer.source.": CardResource,
    "customer.card.": CardResource,
    "customer.discount.": Discount,
    "customer.": CustomerResource,
    "invoice.": Invoice,
    "invoiceitem.": InvoiceItem,
    "plan.": Plan,
    "coupon.": Coupon,
}

# payload schema for event types nothing is registered for
UNKNOWN_PAYLOAD = Dict[str, Any]


class EventRouter:
    """
    Picks the payload schema for an event from its ``type``.

    The type is read with a cheap header-only decode first, so the full
    decode runs once, against the right payload schema.
    """

    def __init__(self, codec: WireCodec, routes: Optional[Dict[str, Any]] = None) -> None:
        self._codec = codec
        self._routes: Dict[str, Any] = dict(DEFAULT_ROUTES if routes is None else routes)

    def register(self, prefix: str, schema: Any) -> None:
        """Route event types starting with ``prefix`` to ``schema``."""
        self._routes[prefix] = schema
        logger.debug("Registered event route %s -> %s", prefix, getattr(schema, "__name__", schema))

    def probe(self, raw: Any) -> str:
        """Return the event type without decoding the payload."""
        return self._codec.decode(EventHeader, raw).type_

    def schema_for(self, event_type: str) -> Optional[Any]:
        """Return the payload schema of the longest matching prefix, if any."""
        matches = [prefix for prefix in self._routes if event_type.startswith(prefix)]
        if not matches:
            return None
        return self._routes[max(matches, key=len)]

    def decode(self, raw: Any) -> Event:
        """
        Decode a full event, payload included.

        Events whose type has no route, or whose payload carries another
        object tag than the routed schema (e.g. a ``dispute`` under
        ``charge.dispute.created``), decode with a plain mapping payload.
        """
        event_type = self.probe(raw)
        schema = self.schema_for(event_type)
        if schema is None:
            logger.debug("No payload schema for event type %s", event_type)
            schema = UNKNOWN_PAYLOAD
        elif not _payload_matches(schema, raw):
            logger.debug("Payload of %s is not a %s", event_type, _object_tag(schema))
            schema = UNKNOWN_PAYLOAD
        return self._codec.decode(Event[schema], raw)


def _object_tag(schema: Any) -> Optional[str]:
    if isinstance(schema, type) and issubclass(schema, StripeObject):
        return schema.model_fields["object_"].default
    return None


def _payload_matches(schema: Any, raw: Mapping) -> bool:
    """Compare the payload's ``object`` tag with the one ``schema`` expects."""
    expected = _object_tag(schema)
    data = raw.get("data")
    payload = data.get("object") if isinstance(data, Mapping) else None
    if expected is None or not isinstance(payload, Mapping) or "object" not in payload:
        # nothing to compare; the full decode reports malformed payloads
        return True
    return payload["object"] == expected

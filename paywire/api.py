"""
Per-entity decode and encode functions.

Every ``decode_*`` takes one API object already parsed from JSON and returns
the validated value or raises a ``DecodeError``. Every ``encode_*`` returns
the wire JSON for a value. The functions share a container built from the
environment on first use; build your own with
``paywire.core.container.build_container`` to run with other settings.
"""

from typing import Any, Dict, Optional

from .core.container import CodecContainer, build_container
from .schemas.billing import Coupon, Discount, Period, Plan
from .schemas.charge import Charge, Refund
from .schemas.customer import CardResource, CustomerResource
from .schemas.error import APIError, ErrorResponse
from .schemas.event import Event, EventHeader
from .schemas.invoice import Invoice, InvoiceItem, InvoiceLineItem
from .schemas.lists import ListObject
from .schemas.subscription import Subscription

Json = Dict[str, Any]

_container: Optional[CodecContainer] = None


def get_container() -> CodecContainer:
    global _container
    if _container is None:
        _container = build_container()
    return _container


def set_container(container: Optional[CodecContainer]) -> None:
    """Replace the shared container; ``None`` rebuilds it from the environment on next use."""
    global _container
    _container = container


def _decode(schema: Any, raw: Any) -> Any:
    return get_container().codec.decode(schema, raw)


def _encode(value: Any, collapse_references: Optional[bool]) -> Json:
    return get_container().codec.encode(value, collapse_references=collapse_references)


def decode_customer(raw: Any) -> CustomerResource:
    """Decode a customer whose default card may be an identifier or an embedded card."""
    return _decode(CustomerResource, raw)


def encode_customer(customer: CustomerResource, collapse_references: Optional[bool] = None) -> Json:
    return _encode(customer, collapse_references)


def decode_card(raw: Any) -> CardResource:
    """Decode a card whose owner may be an identifier or an embedded customer."""
    return _decode(CardResource, raw)


def encode_card(card: CardResource, collapse_references: Optional[bool] = None) -> Json:
    return _encode(card, collapse_references)


def decode_charge(raw: Any) -> Charge:
    return _decode(Charge, raw)


def encode_charge(charge: Charge) -> Json:
    return _encode(charge, None)


def decode_refund(raw: Any) -> Refund:
    return _decode(Refund, raw)


def encode_refund(refund: Refund) -> Json:
    return _encode(refund, None)


def decode_invoice(raw: Any) -> Invoice:
    return _decode(Invoice, raw)


def encode_invoice(invoice: Invoice) -> Json:
    return _encode(invoice, None)


def decode_invoice_line_item(raw: Any) -> InvoiceLineItem:
    return _decode(InvoiceLineItem, raw)


def encode_invoice_line_item(line_item: InvoiceLineItem) -> Json:
    return _encode(line_item, None)


def decode_invoice_item(raw: Any) -> InvoiceItem:
    return _decode(InvoiceItem, raw)


def encode_invoice_item(invoice_item: InvoiceItem) -> Json:
    return _encode(invoice_item, None)


def decode_coupon(raw: Any) -> Coupon:
    return _decode(Coupon, raw)


def encode_coupon(coupon: Coupon) -> Json:
    return _encode(coupon, None)


def decode_subscription(raw: Any) -> Subscription:
    return _decode(Subscription, raw)


def encode_subscription(subscription: Subscription) -> Json:
    return _encode(subscription, None)


def decode_plan(raw: Any) -> Plan:
    return _decode(Plan, raw)


def encode_plan(plan: Plan) -> Json:
    return _encode(plan, None)


def decode_discount(raw: Any) -> Discount:
    return _decode(Discount, raw)


def encode_discount(discount: Discount) -> Json:
    return _encode(discount, None)


def decode_period(raw: Any) -> Period:
    return _decode(Period, raw)


def encode_period(period: Period) -> Json:
    return _encode(period, None)


def decode_list(item_schema: Any, raw: Any) -> ListObject:
    """Decode one page of a list, each element with ``item_schema``."""
    return _decode(ListObject[item_schema], raw)


def encode_list(page: ListObject, collapse_references: Optional[bool] = None) -> Json:
    return _encode(page, collapse_references)


def decode_event_type(raw: Any) -> str:
    """Read only the ``type`` of an event so the payload schema can be chosen."""
    return _decode(EventHeader, raw).type_


def decode_event(raw: Any, payload_schema: Optional[Any] = None) -> Event:
    """
    Decode an event.

    With ``payload_schema`` the payload must match it; without, the schema is
    picked from the event type by the container's event router.
    """
    if payload_schema is None:
        return get_container().event_router.decode(raw)
    return _decode(Event[payload_schema], raw)


def encode_event(event: Event, collapse_references: Optional[bool] = None) -> Json:
    return _encode(event, collapse_references)


def decode_error(raw: Any) -> APIError:
    """Decode the inner ``error`` object of an API error body."""
    return _decode(APIError, raw)


def encode_error(error: APIError) -> Json:
    return _encode(error, None)


def decode_error_response(raw: Any) -> ErrorResponse:
    return _decode(ErrorResponse, raw)

"""Validated decoding and encoding of payments API objects."""

from .api import (
    decode_card,
    decode_charge,
    decode_coupon,
    decode_customer,
    decode_discount,
    decode_error,
    decode_error_response,
    decode_event,
    decode_event_type,
    decode_invoice,
    decode_invoice_item,
    decode_invoice_line_item,
    decode_list,
    decode_period,
    decode_plan,
    decode_refund,
    decode_subscription,
    encode_card,
    encode_charge,
    encode_coupon,
    encode_customer,
    encode_discount,
    encode_error,
    encode_event,
    encode_invoice,
    encode_invoice_item,
    encode_invoice_line_item,
    encode_list,
    encode_period,
    encode_plan,
    encode_refund,
    encode_subscription,
)
from .domain.errors import (
    DecodeError,
    ErrorDetail,
    MissingField,
    TypeMismatch,
    UnknownEnumTag,
    UpstreamError,
    ValidationFailed,
)
from .domain.scalars import decode_metadata, decode_nonneg_int, decode_pos_int

__all__ = [
    "DecodeError",
    "ErrorDetail",
    "MissingField",
    "TypeMismatch",
    "UnknownEnumTag",
    "UpstreamError",
    "ValidationFailed",
    "decode_card",
    "decode_charge",
    "decode_coupon",
    "decode_customer",
    "decode_discount",
    "decode_error",
    "decode_error_response",
    "decode_event",
    "decode_event_type",
    "decode_invoice",
    "decode_invoice_item",
    "decode_invoice_line_item",
    "decode_list",
    "decode_metadata",
    "decode_nonneg_int",
    "decode_period",
    "decode_plan",
    "decode_pos_int",
    "decode_refund",
    "decode_subscription",
    "encode_card",
    "encode_charge",
    "encode_coupon",
    "encode_customer",
    "encode_discount",
    "encode_error",
    "encode_event",
    "encode_invoice",
    "encode_invoice_item",
    "encode_invoice_line_item",
    "encode_list",
    "encode_period",
    "encode_plan",
    "encode_refund",
    "encode_subscription",
]

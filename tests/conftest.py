"""Shared raw API payloads and codec fixtures."""

import pytest

from paywire import api
from paywire.core.config import Settings
from paywire.core.container import build_container


@pytest.fixture(autouse=True)
def container():
    """Module-level functions run against explicit default settings."""
    built = build_container(Settings(strict_exclusivity=False, collapse_references=True))
    api.set_container(built)
    yield built
    api.set_container(None)


@pytest.fixture
def codec(container):
    return container.codec


@pytest.fixture
def strict_codec():
    return build_container(Settings(strict_exclusivity=True, collapse_references=True)).codec


@pytest.fixture
def raw_plan():
    return {
        "id": "gold",
        "object": "plan",
        "amount": 2000,
        "currency": "usd",
        "interval": "month",
        "interval_count": 1,
        "name": "Gold",
        "created": 1386247539,
        "livemode": False,
        "trial_period_days": None,
        "metadata": {},
    }


@pytest.fixture
def raw_coupon():
    return {
        "id": "25OFF",
        "object": "coupon",
        "duration": "repeating",
        "duration_in_months": 3,
        "percent_off": 25,
        "amount_off": None,
        "currency": None,
        "valid": True,
        "times_redeemed": 4,
        "livemode": False,
        "metadata": {},
    }


@pytest.fixture
def raw_discount(raw_coupon):
    return {
        "object": "discount",
        "coupon": raw_coupon,
        "customer": "cus_123",
        "start": 1386247539,
        "end": 1394023539,
        "subscription": "sub_123",
    }


@pytest.fixture
def raw_subscription(raw_plan):
    return {
        "id": "sub_123",
        "object": "subscription",
        "status": "active",
        "plan": raw_plan,
        "customer": "cus_123",
        "quantity": 1,
        "start": 1386247539,
        "current_period_start": 1386247539,
        "current_period_end": 1388925939,
        "cancel_at_period_end": False,
        "canceled_at": None,
        "ended_at": None,
        "trial_start": None,
        "trial_end": None,
        "discount": None,
        "metadata": {"tier": "gold"},
    }


@pytest.fixture
def raw_card():
    return {
        "id": "card_ABC123",
        "object": "card",
        "brand": "Visa",
        "last4": "4242",
        "exp_month": 8,
        "exp_year": 2030,
        "fingerprint": "Xt5EWLLDS7FJjR1c",
        "funding": "credit",
        "country": "US",
        "name": None,
        "cvc_check": "pass",
        "customer": "cus_123",
        "metadata": {},
    }


@pytest.fixture
def raw_customer(raw_card, raw_subscription):
    return {
        "id": "cus_123",
        "object": "customer",
        "balance": 0,
        "created": 1386247539,
        "currency": "usd",
        "description": "Jane Roe",
        "email": "jane@example.com",
        "delinquent": False,
        "livemode": False,
        "default_source": "card_ABC123",
        "sources": {
            "object": "list",
            "data": [raw_card],
            "has_more": False,
            "url": "/v1/customers/cus_123/sources",
            "total_count": 1,
        },
        "subscriptions": {
            "object": "list",
            "data": [raw_subscription],
            "has_more": False,
            "url": "/v1/customers/cus_123/subscriptions",
            "total_count": 1,
        },
        "discount": None,
        "metadata": {"order_id": "6735"},
    }


@pytest.fixture
def raw_refund():
    return {
        "id": "re_123",
        "object": "refund",
        "amount": 500,
        "currency": "usd",
        "charge": "ch_123",
        "created": 1386247600,
        "reason": "requested_by_customer",
        "balance_transaction": "txn_123",
        "metadata": {},
    }


@pytest.fixture
def raw_charge(raw_card, raw_refund):
    return {
        "id": "ch_123",
        "object": "charge",
        "amount": 2000,
        "amount_refunded": 500,
        "currency": "usd",
        "status": "succeeded",
        "paid": True,
        "refunded": False,
        "captured": True,
        "source": raw_card,
        "refunds": {
            "object": "list",
            "data": [raw_refund],
            "has_more": False,
            "url": "/v1/charges/ch_123/refunds",
            "total_count": 1,
        },
        "customer": "cus_123",
        "invoice": "in_123",
        "description": None,
        "failure_code": None,
        "failure_message": None,
        "created": 1386247539,
        "livemode": False,
        "metadata": {},
    }


@pytest.fixture
def raw_line_item(raw_plan):
    return {
        "id": "sub_123",
        "object": "line_item",
        "type": "subscription",
        "amount": 2000,
        "currency": "usd",
        "period": {"start": 1386247539, "end": 1388925939},
        "plan": raw_plan,
        "quantity": 1,
        "proration": False,
        "description": None,
        "livemode": False,
        "metadata": {},
    }


@pytest.fixture
def raw_invoice_item(raw_plan):
    return {
        "id": "ii_123",
        "object": "invoiceitem",
        "amount": -500,
        "currency": "usd",
        "customer": "cus_123",
        "date": 1386247539,
        "period": {"start": 1386247539, "end": 1386247539},
        "plan": None,
        "proration": True,
        "quantity": None,
        "invoice": "in_123",
        "subscription": "sub_123",
        "description": "Credit for unused time",
        "discountable": False,
        "livemode": False,
        "metadata": {},
    }


@pytest.fixture
def raw_invoice(raw_line_item):
    return {
        "id": "in_123",
        "object": "invoice",
        "customer": "cus_123",
        "lines": {
            "object": "list",
            "data": [raw_line_item],
            "has_more": False,
            "url": "/v1/invoices/in_123/lines",
            "total_count": 1,
        },
        "subtotal": 2000,
        "total": 1500,
        "amount_due": 1500,
        "currency": "usd",
        "attempted": True,
        "attempt_count": 1,
        "closed": True,
        "paid": True,
        "forgiven": False,
        "period_start": 1386247539,
        "period_end": 1388925939,
        "date": 1386247539,
        "starting_balance": 0,
        "ending_balance": 0,
        "charge": "ch_123",
        "subscription": "sub_123",
        "discount": None,
        "next_payment_attempt": None,
        "livemode": False,
        "metadata": {},
    }


@pytest.fixture
def raw_charge_event(raw_charge):
    return {
        "id": "evt_123",
        "object": "event",
        "created": 1386247700,
        "type": "charge.refunded",
        "data": {"object": raw_charge},
        "livemode": False,
        "pending_webhooks": 1,
        "api_version": "2014-11-05",
        "request": "req_123",
    }

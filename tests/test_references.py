import pytest

from paywire import api
from paywire.domain.errors import MissingField, TypeMismatch
from paywire.schemas import ShallowCard, ShallowCustomer, is_expanded, reference_id


@pytest.fixture
def owner(raw_customer):
    """Customer payload to embed in a card, without the card list that holds that card."""
    owner = dict(raw_customer)
    del owner["sources"]
    return owner


class TestCustomerDefaultCard:
    """Default card given as an id or as an embedded card."""

    def test_bare_identifier_is_shallow(self, raw_customer):
        customer = api.decode_customer(raw_customer)
        assert customer.default_source == "card_ABC123"
        assert not is_expanded(customer.default_source)
        assert reference_id(customer.default_source) == "card_ABC123"

    def test_embedded_object_is_expanded(self, raw_customer, raw_card):
        raw_customer["default_source"] = raw_card
        customer = api.decode_customer(raw_customer)
        assert isinstance(customer.default_source, ShallowCard)
        assert is_expanded(customer.default_source)
        assert reference_id(customer.default_source) == "card_ABC123"
        # the embedded card only knows its owner by id
        assert customer.default_source.customer == "cus_123"

    def test_legacy_default_card_field(self, raw_customer, raw_card):
        raw_customer["default_card"] = raw_card
        raw_customer["cards"] = raw_customer.pop("sources")
        customer = api.decode_customer(raw_customer)
        assert customer.default_card.last4 == "4242"
        assert customer.cards[0].id == "card_ABC123"
        assert customer.sources is None

    def test_embedded_card_failure_path_hides_union_branch(self, raw_customer, raw_card):
        del raw_card["exp_month"]
        raw_customer["default_source"] = raw_card
        with pytest.raises(MissingField) as exc_info:
            api.decode_customer(raw_customer)
        assert exc_info.value.path == "customer.default_source.exp_month"

    def test_embedded_object_of_wrong_kind(self, raw_customer, raw_plan):
        raw_customer["default_source"] = raw_plan
        with pytest.raises(TypeMismatch) as exc_info:
            api.decode_customer(raw_customer)
        assert exc_info.value.path == "customer.default_source"

    def test_neither_string_nor_object(self, raw_customer):
        raw_customer["default_source"] = 42
        with pytest.raises(TypeMismatch) as exc_info:
            api.decode_customer(raw_customer)
        assert exc_info.value.path == "customer.default_source"


class TestCardOwner:
    """Card owner given as an id or as an embedded customer."""

    def test_bare_customer_identifier(self, raw_card):
        card = api.decode_card(raw_card)
        assert card.customer == "cus_123"

    def test_embedded_customer(self, raw_card, owner):
        raw_card["customer"] = owner
        card = api.decode_card(raw_card)
        assert isinstance(card.customer, ShallowCustomer)
        assert card.customer.email == "jane@example.com"
        # back-reference of the embedded customer stays an identifier
        assert card.customer.default_source == "card_ABC123"

    def test_embedded_customer_cannot_embed_a_card(self, raw_card, owner):
        owner["default_source"] = dict(raw_card)
        raw_card["customer"] = owner
        with pytest.raises(TypeMismatch) as exc_info:
            api.decode_card(raw_card)
        assert exc_info.value.path == "card.customer.default_source"


class TestEncoding:
    """Expandable references on encode."""

    def test_embedded_reference_is_written_as_identifier(self, raw_customer, raw_card):
        raw_customer["default_source"] = raw_card
        customer = api.decode_customer(raw_customer)
        encoded = api.encode_customer(customer)
        assert encoded["default_source"] == "card_ABC123"
        assert api.decode_customer(encoded).default_source == "card_ABC123"

    def test_embedded_reference_kept_on_request(self, raw_customer, raw_card):
        raw_customer["default_source"] = raw_card
        customer = api.decode_customer(raw_customer)
        encoded = api.encode_customer(customer, collapse_references=False)
        assert encoded["default_source"]["last4"] == "4242"
        assert api.decode_customer(encoded) == customer

    def test_embedded_owner_round_trip(self, raw_card, owner):
        raw_card["customer"] = owner
        card = api.decode_card(raw_card)
        assert api.encode_card(card)["customer"] == "cus_123"
        assert api.decode_card(api.encode_card(card, collapse_references=False)) == card

    def test_collapse_default_follows_settings(self, raw_customer, raw_card):
        from paywire.core.config import Settings
        from paywire.core.container import build_container

        raw_customer["default_source"] = raw_card
        codec = build_container(Settings(collapse_references=False)).codec
        customer = codec.decode(api.CustomerResource, raw_customer)
        assert isinstance(codec.encode(customer)["default_source"], dict)


class TestReferenceHelpers:
    """Helpers reading either representation."""

    def test_reference_id_of_none(self):
        assert reference_id(None) is None

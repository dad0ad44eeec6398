import pytest

from prodreg.engine import Category, Product, ReferenceStore, RegistrationStore
from prodreg.engine.demo_data import DEMO_REGISTRATIONS, demo_snapshot
from prodreg.models import Product as ProductModel
from prodreg.routes.products import PRODUCT_POLICY
from prodreg.validation import (
    ValidationError,
    enforce_rules_product,
    normalize_category_ref,
    normalize_name,
    validate_payload,
)


class TestStores:

    def test_replace_returns_new_store(self):
        store = ReferenceStore(users=("Tom",))
        updated = store.replace_names("users", ["Tom", "Nele"])
        assert store.users == ("Tom",)
        assert updated.users == ("Tom", "Nele")

    def test_replace_unknown_list(self):
        with pytest.raises(ValueError):
            ReferenceStore().replace_names("products", [])

    def test_find_product(self):
        store = ReferenceStore().replace_products([
            Product(id="1", name="A", qr_code="X"),
            Product(id="2", name="B", qr_code="X"),
        ])
        assert store.find_product_by_qr("X").id == "1"
        assert store.find_product_by_qr("") is None
        assert store.find_product_by_name("B").id == "2"

    def test_category_name(self):
        store = ReferenceStore().replace_categories([Category(id="7", name="Onderhoud")])
        assert store.category_name("7") == "Onderhoud"
        assert store.category_name("8") == "Onbekende categorie"

    def test_registration_store(self):
        store = RegistrationStore().replace_all(DEMO_REGISTRATIONS)
        assert len(store) == 13
        assert next(iter(store)).id == "1"

    def test_demo_snapshot_shape(self):
        snapshot = demo_snapshot()
        assert snapshot.source == "demo"
        assert len(snapshot.reference.users) == 6
        assert len(snapshot.reference.products) == 6
        assert len(snapshot.reference.categories) == 3
        assert len(snapshot.reference.locations) == 5
        assert len(snapshot.reference.purposes) == 5
        for reg in snapshot.registrations:
            assert reg.date == reg.timestamp[:10]
            assert reg.time == reg.timestamp[11:19]


class TestValidation:

    def test_normalize_name(self):
        assert normalize_name("  Tom ") == "Tom"
        with pytest.raises(ValidationError):
            normalize_name("   ")
        with pytest.raises(ValidationError):
            normalize_name(None)
        with pytest.raises(ValidationError):
            normalize_name("x" * 256)

    @pytest.mark.parametrize("raw", ["none", "NONE", "", "  "])
    def test_no_category_placeholders(self, raw):
        assert normalize_category_ref({"category_id": raw})["category_id"] is None

    def test_category_ref_passthrough(self):
        assert normalize_category_ref({"name": "A"}) == {"name": "A"}
        assert normalize_category_ref({"category_id": "3"})["category_id"] == "3"

    def test_product_payload_is_normalised(self):
        patch = validate_payload(
            model=ProductModel,
            payload={"name": " Spray ", "category_id": "3", "qr_code": ""},
            policy=PRODUCT_POLICY,
            partial=False,
        )
        assert patch == {"name": "Spray", "category_id": 3, "qr_code": None}

    @pytest.mark.parametrize("value", ["1.5", "1e3", 2.0, True])
    def test_category_id_must_be_plain_integer(self, value):
        with pytest.raises(ValidationError):
            validate_payload(
                model=ProductModel,
                payload={"category_id": value},
                policy=PRODUCT_POLICY,
                partial=True,
            )

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name cannot be blank"):
            validate_payload(model=ProductModel, payload={"name": "  "}, policy=PRODUCT_POLICY, partial=True)

    def test_attachment_rule(self):
        with pytest.raises(ValidationError):
            enforce_rules_product({"attachment_name": "manual.pdf", "attachment_url": None})
        enforce_rules_product({"attachment_name": "manual.pdf"})

"""Unit tests for the Product entity, its transfer object and field copying."""

from src.product_api.entities.service.product import Product, ProductInput, copy_input


class TestProductEntity:
    """Test Product domain entity."""

    def test_new_product_has_no_id(self):
        product = Product(name="Widget")

        assert product.id is None
        assert product.description is None
        assert product.price is None

    def test_equality_uses_id_and_fields(self):
        product1 = Product(id=1, name="Widget", price=9.99)
        product2 = Product(id=1, name="Widget", price=9.99)
        product3 = Product(id=2, name="Widget", price=9.99)

        assert product1 == product2
        assert product1 != product3
        assert hash(product1) == hash(product2)

    def test_not_equal_to_other_types(self):
        assert Product(id=1) != {"id": 1}


class TestProductInput:
    """Test the ProductInput transfer object."""

    def test_accepts_empty_payload(self):
        product_input = ProductInput()

        assert product_input.name is None
        assert product_input.price is None

    def test_ignores_identifier(self):
        product_input = ProductInput.model_validate({"id": 7, "name": "Widget"})

        assert not hasattr(product_input, "id")
        assert product_input.name == "Widget"

    def test_coerces_numeric_strings(self):
        product_input = ProductInput.model_validate({"price": "9.5"})

        assert product_input.price == 9.5


class TestCopyInput:
    """Test the explicit field-by-field copy."""

    def test_copies_every_provided_field(self):
        target = Product()

        copy_input(
            ProductInput(name="Widget", description="Blue", price=9.99), target
        )

        assert target == Product(name="Widget", description="Blue", price=9.99)

    def test_absent_fields_are_left_unchanged(self):
        target = Product(id=3, name="Widget", description="Blue", price=9.99)

        copy_input(ProductInput(price=12.0), target)

        assert target.name == "Widget"
        assert target.description == "Blue"
        assert target.price == 12.0

    def test_identifier_is_preserved(self):
        target = Product(id=3, name="Widget")

        result = copy_input(ProductInput(name="Gadget"), target)

        assert result is target
        assert result.id == 3
        assert result.name == "Gadget"

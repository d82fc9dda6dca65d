import pytest
from typing import Optional
from pydantic import ValidationError
from utils.base_model import ImmutableModel


class Pair(ImmutableModel):
    """Simple test model with two scalar fields."""
    left: float
    right: float


class Tagged(ImmutableModel):
    """Model nesting another immutable model."""
    label: str
    pair: Pair
    note: Optional[str] = None


class TestImmutableModel:
    """Test suite for ImmutableModel base class."""

    def test_basic_creation(self):
        """Test creating a simple immutable model."""
        model = Pair(left=1.0, right=2.0)
        assert model.left == 1.0
        assert model.right == 2.0

    def test_immutability(self):
        """Test that models are immutable after creation."""
        model = Pair(left=1.0, right=2.0)

        with pytest.raises(ValidationError):
            model.left = 5.0

    def test_structural_equality(self):
        """Test that equal fields mean equal values."""
        assert Pair(left=1.0, right=2.0) == Pair(left=1.0, right=2.0)
        assert Pair(left=1.0, right=2.0) != Pair(left=2.0, right=1.0)

    def test_hashable(self):
        """Test that equal values hash equally."""
        assert hash(Pair(left=1.0, right=2.0)) == hash(Pair(left=1.0, right=2.0))

    def test_with_changes_basic(self):
        """Test creating modified copies with with_changes() method."""
        original = Pair(left=1.0, right=2.0)
        modified = original.with_changes(left=3.0)

        assert original.left == 1.0
        assert modified.left == 3.0
        assert modified.right == 2.0
        assert original is not modified

    def test_with_changes_invalid_field(self):
        """Test that with_changes() raises error for invalid field names."""
        model = Pair(left=1.0, right=2.0)

        with pytest.raises(ValueError) as exc_info:
            model.with_changes(middle=1.5)

        assert "Invalid field: middle" in str(exc_info.value)

    def test_with_changes_validates(self):
        """Test that replacement values go through validation."""
        model = Pair(left=1.0, right=2.0)

        with pytest.raises(ValidationError):
            model.with_changes(left="not a number")

    def test_with_changes_keeps_nested_instance(self):
        """Test that nested models are carried over unchanged."""
        original = Tagged(label="a", pair=Pair(left=1.0, right=2.0))
        modified = original.with_changes(label="b")

        assert modified.label == "b"
        assert modified.pair == original.pair
        assert modified.note is None

    def test_chained_with_changes(self):
        """Test that with_changes can be chained."""
        original = Pair(left=0.0, right=0.0)

        result = original.with_changes(left=1.0) \
            .with_changes(right=2.0) \
            .with_changes(left=3.0)

        assert result == Pair(left=3.0, right=2.0)
        assert original == Pair(left=0.0, right=0.0)

    def test_equality_compares_fields_with_float_semantics(self):
        """Test that a NaN field makes an instance unequal to itself."""
        model = Pair(left=float("nan"), right=2.0)
        assert model != model
        assert model.with_changes(right=2.0) != model

    def test_not_equal_across_types(self):
        """Test that instances of different models never compare equal."""
        assert Pair(left=1.0, right=2.0) != Tagged(label="a", pair=Pair(left=1.0, right=2.0))

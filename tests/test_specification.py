from __future__ import annotations

from itertools import product as cartesian

import pytest

from product_specifications import (
    AndSpecification,
    CapabilityError,
    Color,
    ColorSpecification,
    ISpecification,
    Product,
    Size,
    SizeSpecification,
)


class RecordingSpecification:
    """Plain predicate object that is not a BaseSpecification subclass."""

    def __init__(self, result: bool) -> None:
        self.result = result
        self.calls = 0

    def is_satisfied_by(self, candidate: Product) -> bool:
        self.calls += 1
        return self.result

    def to_dict(self) -> dict[str, bool]:
        return {"const": self.result}


# -- attribute specifications -----------------------------------------------


@pytest.mark.parametrize(("target", "color"), list(cartesian(Color, Color)))
def test_color_specification_matches_equality(target: Color, color: Color):
    item = Product(name="x", color=color, size=Size.SMALL)
    spec = ColorSpecification[Product](target)
    assert spec.is_satisfied_by(item) is (color == target)


@pytest.mark.parametrize(("target", "size"), list(cartesian(Size, Size)))
def test_size_specification_matches_equality(target: Size, size: Size):
    item = Product(name="x", color=Color.RED, size=size)
    spec = SizeSpecification[Product](target)
    assert spec.is_satisfied_by(item) is (size == target)


def test_specification_does_not_mutate_candidate(frog: Product):
    before = frog.model_dump()
    ColorSpecification[Product](Color.GREEN).is_satisfied_by(frog)
    SizeSpecification[Product](Size.LARGE).is_satisfied_by(frog)
    assert frog.model_dump() == before


def test_attribute_specifications_are_specifications():
    assert isinstance(ColorSpecification(Color.RED), ISpecification)
    assert isinstance(SizeSpecification(Size.SMALL), ISpecification)


def test_attribute_to_dict():
    assert ColorSpecification(Color.RED).to_dict() == {
        "op": "=",
        "attr": "color",
        "val": "red",
    }
    assert SizeSpecification(Size.LARGE).to_dict() == {
        "op": "=",
        "attr": "size",
        "val": "large",
    }


def test_for_type_accepts_conforming_type(strawberry: Product):
    spec = ColorSpecification.for_type(Product, Color.RED)
    assert spec.is_satisfied_by(strawberry) is True


def test_for_type_rejects_type_without_capability():
    class Label:
        text: str

    with pytest.raises(CapabilityError, match="Colored"):
        ColorSpecification.for_type(Label, Color.RED)
    with pytest.raises(CapabilityError, match="Sized"):
        SizeSpecification.for_type(Label, Size.SMALL)


# -- AND composition ---------------------------------------------------------


@pytest.mark.parametrize(
    ("left", "right"), [(True, True), (True, False), (False, True), (False, False)]
)
def test_and_is_conjunction(frog: Product, left: bool, right: bool):
    spec = AndSpecification(
        RecordingSpecification(left), RecordingSpecification(right)
    )
    assert spec.is_satisfied_by(frog) is (left and right)


def test_and_short_circuits(frog: Product):
    left = RecordingSpecification(False)
    right = RecordingSpecification(True)
    AndSpecification(left, right).is_satisfied_by(frog)
    assert left.calls == 1
    assert right.calls == 0


def test_and_of_color_and_size(frog: Product, strawberry: Product, tree: Product):
    red_and_small = AndSpecification(
        ColorSpecification[Product](Color.RED),
        SizeSpecification[Product](Size.SMALL),
    )
    assert red_and_small.is_satisfied_by(strawberry) is True
    assert red_and_small.is_satisfied_by(frog) is False
    assert red_and_small.is_satisfied_by(tree) is False


def test_nested_composites(frog: Product):
    green = ColorSpecification[Product](Color.GREEN)
    small = SizeSpecification[Product](Size.SMALL)
    nested = AndSpecification(
        AndSpecification(green, small), AndSpecification(small, green)
    )
    assert nested.is_satisfied_by(frog) is True

    deeper = AndSpecification(nested, ColorSpecification[Product](Color.RED))
    assert deeper.is_satisfied_by(frog) is False


def test_and_operator_builds_left_deep_tree(frog: Product):
    green = ColorSpecification[Product](Color.GREEN)
    small = SizeSpecification[Product](Size.SMALL)
    green_and_small = AndSpecification(green, small)

    spec = green & small & green_and_small
    assert isinstance(spec, AndSpecification)
    assert isinstance(spec.left, AndSpecification)
    assert spec.right is green_and_small
    assert spec.is_satisfied_by(frog) is True


def test_merge_creates_and(strawberry: Product):
    merged = ColorSpecification[Product](Color.RED).merge(
        SizeSpecification[Product](Size.SMALL)
    )
    assert isinstance(merged, AndSpecification)
    assert merged.is_satisfied_by(strawberry) is True


def test_and_accepts_plain_predicate_objects(frog: Product):
    spec = ColorSpecification[Product](Color.GREEN) & RecordingSpecification(True)
    assert spec.is_satisfied_by(frog) is True


def test_and_to_dict():
    spec = ColorSpecification(Color.RED) & SizeSpecification(Size.SMALL)
    assert spec.to_dict() == {
        "op": "and",
        "conditions": [
            {"op": "=", "attr": "color", "val": "red"},
            {"op": "=", "attr": "size", "val": "small"},
        ],
    }


def test_repr_shows_tree():
    spec = AndSpecification(
        ColorSpecification(Color.RED), SizeSpecification(Size.SMALL)
    )
    assert repr(spec) == (
        "AndSpecification(ColorSpecification('red'), SizeSpecification('small'))"
    )

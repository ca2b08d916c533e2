"""
Tests for the type and sanitizer registries.
"""

import pytest

from wrapgen.core.sanitizers import CONTENT_SANITIZERS, lookup_sanitizer
from wrapgen.core.types import (
    ENUMERATIONS,
    TYPE_ALIASES,
    TYPE_CONSTRAINTS,
    CheckKind,
    Sequence,
    Single,
    canonicalize_type,
    expand_constraint,
    lookup_constraint,
    one_of_check,
    type_check,
)


class TestTypeRegistry:
    """Test canonicalization and constraint lookup."""

    @pytest.mark.parametrize(
        "declared,canonical",
        [
            ("NSUInteger", "NSInteger"),
            ("NSString *", "NSString"),
            ("NSInteger", "NSInteger"),
            ("id", "id"),
        ],
    )
    def test_canonicalize_type(self, declared, canonical):
        assert canonicalize_type(declared) == canonical

    @pytest.mark.parametrize(
        "type_name", ["NSInteger", "CGFloat", "CFTimeInterval", "double", "float", "NSDate *"]
    )
    def test_numeric_types(self, type_name):
        assert lookup_constraint(type_name) == Single(type_check("number"))

    def test_string_and_boolean(self):
        assert lookup_constraint("NSString") == Single(type_check("string"))
        assert lookup_constraint("BOOL") == Single(type_check("boolean"))

    def test_point_checks_in_order(self):
        constraint = lookup_constraint("CGPoint")

        assert isinstance(constraint, Sequence)
        checks = expand_constraint(constraint)
        assert [(c.expected, c.selector) for c in checks] == [
            ("object", None),
            ("number", "x"),
            ("number", "y"),
        ]

    def test_enumerations(self):
        direction = expand_constraint(lookup_constraint("GREYDirection"))
        assert direction == (one_of_check(("left", "right", "up", "down")),)
        assert direction[0].kind == CheckKind.ONE_OF

        edge = expand_constraint(lookup_constraint("GREYContentEdge"))
        assert edge[0].options == ("left", "right", "top", "bottom")

        pinch = expand_constraint(lookup_constraint("GREYPinchDirection"))
        assert pinch[0].options == ("outward", "inward")

    def test_unknown_type_has_no_constraint(self):
        assert lookup_constraint("id") is None
        assert lookup_constraint(canonicalize_type("UIView *")) is None

    def test_alias_resolves_before_lookup(self):
        assert lookup_constraint(canonicalize_type("NSUInteger")) is not None
        assert lookup_constraint(canonicalize_type("NSString *")) is not None

    def test_expand_rejects_non_constraint(self):
        with pytest.raises(TypeError):
            expand_constraint(type_check("number"))

    def test_registries_are_read_only(self):
        with pytest.raises(TypeError):
            TYPE_CONSTRAINTS["id"] = Single(type_check("object"))
        with pytest.raises(TypeError):
            TYPE_ALIASES["NSNumber *"] = "double"
        with pytest.raises(TypeError):
            ENUMERATIONS["GREYDirection"] = ()


class TestSanitizerRegistry:
    """Test content sanitizer lookup."""

    def test_direction_is_sanitized(self):
        assert lookup_sanitizer("GREYDirection") == "sanitize_greyDirection"

    def test_other_types_pass_through(self):
        assert lookup_sanitizer("GREYContentEdge") is None
        assert lookup_sanitizer("NSInteger") is None

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            CONTENT_SANITIZERS["CGPoint"] = "sanitize_point"

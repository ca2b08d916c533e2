"""
Tests for the interface model and parser output conversion.
"""

import pytest

from wrapgen.core.interface import (
    ArgumentDescription,
    InterfaceError,
    MethodDescription,
    convert_parser_output,
)


class TestConvertParserOutput:
    def test_converts_basic_interface(self, basic_interface_dict):
        interface = convert_parser_output(basic_interface_dict)

        assert interface.name == "BasicName"
        assert [m.name for m in interface.methods] == [
            "basicMethodOneWithArgOne:",
            "placeTitle:atPoint:",
            "swipeInDirection:",
            "selectElementWithMatcher:",
        ]

        first = interface.methods[0]
        assert first.args == (ArgumentDescription(name="argOne", type="NSInteger"),)
        assert first.return_type == "NSInteger"
        assert first.comment == "This is the comment of basic method one"
        assert first.is_static is False

    def test_defaults_for_optional_keys(self):
        interface = convert_parser_output({"name": "Foo", "methods": [{"name": "tap"}]})

        method = interface.methods[0]
        assert method == MethodDescription(name="tap")
        assert method.return_type == "void"
        assert method.comment is None
        assert method.argument_names == ()

    def test_empty_comment_is_none(self):
        interface = convert_parser_output(
            {"name": "Foo", "methods": [{"name": "tap", "comment": ""}]}
        )
        assert interface.methods[0].comment is None

    @pytest.mark.parametrize(
        "data",
        [
            [],
            {},
            {"name": ""},
            {"name": "Foo", "methods": {}},
            {"name": "Foo", "methods": [{"args": []}]},
            {"name": "Foo", "methods": [{"name": "tap:", "args": [{"name": "x"}]}]},
        ],
    )
    def test_malformed_input_raises(self, data):
        with pytest.raises(InterfaceError):
            convert_parser_output(data)

"""
Tests for the JavaScript target.
"""

import pytest

from wrapgen.core.config import load_config
from wrapgen.core.generator import generate_code
from wrapgen.core.interface import convert_parser_output
from wrapgen.core.synthesis import ClassSynthesizer, ValidationCheck
from wrapgen.core.types import one_of_check, type_check
from wrapgen.languages.javascript import JavaScriptGenerator, render_guard

PREAMBLE = (
    "/**\n"
    "\n"
    "\tThis code is generated.\n"
    "\tFor more information see generation/README.md.\n"
    "*/\n"
    "\n"
)

FOO_METHOD = """\
  do_with_bar(bar) {
    if (typeof bar !== "number") {
      throw new Error("bar should be a number, but got " + bar + " (" + typeof bar + ")");
    }

    return {
      target: {
        type: "Class",
        value: "Foo"
      },
      method: "doWithBar",
      args: [{
        type: "NSInteger",
        value: bar
      }]
    };
  }
"""


def _generate(generator, interface_dict):
    module = ClassSynthesizer().synthesize(convert_parser_output(interface_dict))
    return generate_code(generator, module)


class TestJavaScriptGuards:
    def test_type_guard(self):
        guard = render_guard(ValidationCheck("count", type_check("number")), "count")

        assert guard.condition == 'typeof count !== "number"'
        assert guard.message == (
            '"count should be a number, but got " + count + " (" + typeof count + ")"'
        )

    def test_object_guard_rejects_null(self):
        guard = render_guard(ValidationCheck("point", type_check("object")), "point")

        assert guard.condition == 'typeof point !== "object" || point === null'
        assert guard.message.startswith('"point should be an object, but got "')

    def test_field_guard(self):
        guard = render_guard(ValidationCheck("point", type_check("number", selector="x")), "point")

        assert guard.condition == 'typeof point.x !== "number"'
        assert guard.message.startswith('"point.x should be a number, but got " + point.x')

    def test_one_of_guard(self):
        check = ValidationCheck("edge", one_of_check(("left", "right")))
        guard = render_guard(check, "edge")

        assert guard.condition == '!["left", "right"].includes(edge)'
        assert guard.message == '"edge should be one of [left, right], but got " + edge'


class TestJavaScriptGenerator:
    def test_structural_example(self, js_generator, foo_interface_dict):
        result = _generate(js_generator, foo_interface_dict)

        assert result.success
        assert FOO_METHOD in result.code
        assert result.code.rstrip().endswith("module.exports = Foo;")
        assert "class Foo {\n" in result.code

    def test_file_layout(self, js_generator, foo_interface_dict):
        code = _generate(js_generator, foo_interface_dict).code

        assert code.startswith(PREAMBLE)
        helpers_at = code.index("function sanitize_greyDirection(direction)")
        class_at = code.index("class Foo {")
        assert len(PREAMBLE) < helpers_at < class_at
        # Only the generated module's export survives
        assert code.count("module.exports") == 1

    def test_output_is_deterministic(self, js_generator, basic_interface_dict):
        first = _generate(js_generator, basic_interface_dict).code
        second = _generate(JavaScriptGenerator(load_config("javascript")), basic_interface_dict).code

        assert first == second

    def test_point_guards_precede_return(self, js_generator, basic_interface_dict):
        code = _generate(js_generator, basic_interface_dict).code

        object_at = code.index('typeof point !== "object" || point === null')
        x_at = code.index('typeof point.x !== "number"')
        y_at = code.index('typeof point.y !== "number"')
        return_at = code.index("return {", y_at)
        assert object_at < x_at < y_at < return_at

    def test_static_and_sanitized_method(self, js_generator, basic_interface_dict):
        code = _generate(js_generator, basic_interface_dict).code

        assert "  static swipe_in_direction(direction) {\n" in code
        assert '!["left", "right", "up", "down"].includes(direction)' in code
        assert "value: sanitize_greyDirection(direction)\n" in code
        assert 'type: "GREYDirection",\n' in code

    def test_declared_types_in_descriptor(self, js_generator, basic_interface_dict):
        code = _generate(js_generator, basic_interface_dict).code

        assert '      args: [{\n        type: "NSString *",\n        value: title\n      }, {\n' in code
        assert 'type: "CGPoint",\n        value: point\n      }]\n' in code

    def test_unknown_type_passes_through(self, js_generator, basic_interface_dict):
        result = _generate(js_generator, basic_interface_dict)

        assert "static select_element_with_matcher(matcher) {\n    return {\n" in result.code
        assert result.metadata["unchecked_arguments"] == 1
        assert any("id<GREYMatcher>" in warning for warning in result.warnings)

    def test_comment_styles(self, js_generator, basic_interface_dict):
        code = _generate(js_generator, basic_interface_dict).code

        assert "  // This is the comment of basic method one\n  basic_method_one_with_arg_one(argOne) {" in code
        assert (
            "  /**\n"
            "   * Places a title.\n"
            "   * The point is in screen coordinates.\n"
            "   */\n"
            "  place_title_at_point(title, point) {"
        ) in code

    def test_no_comments_option(self, basic_interface_dict):
        generator = JavaScriptGenerator(load_config("javascript", {"add_comments": False}))
        code = _generate(generator, basic_interface_dict).code

        assert "This is the comment" not in code
        assert "Places a title" not in code

    def test_zero_argument_method(self, js_generator):
        code = _generate(js_generator, {"name": "Foo", "methods": [{"name": "tap"}]}).code

        assert "  tap() {\n    return {\n" in code
        assert "      method: \"tap\",\n      args: []\n    };\n" in code

    def test_reserved_parameter_name(self, js_generator):
        code = _generate(
            js_generator,
            {"name": "Foo", "methods": [{"name": "doWith:", "args": [{"name": "new", "type": "BOOL"}]}]},
        ).code

        assert "  do_with(new_) {\n" in code
        assert 'typeof new_ !== "boolean"' in code
        assert "value: new_\n" in code

    def test_without_helpers(self, foo_interface_dict):
        generator = JavaScriptGenerator(load_config("javascript", {"include_helpers": False}))
        code = _generate(generator, foo_interface_dict).code

        assert "sanitize_greyDirection" not in code
        assert code == PREAMBLE + "\n" + "class Foo {\n" + FOO_METHOD + "}\n\nmodule.exports = Foo;\n"

    def test_custom_indent_and_readme(self, foo_interface_dict):
        generator = JavaScriptGenerator(
            load_config(
                "javascript",
                {"indent_size": 4, "readme_reference": "docs/GENERATED.md", "include_helpers": False},
            )
        )
        code = _generate(generator, foo_interface_dict).code

        assert "\tFor more information see docs/GENERATED.md.\n" in code
        assert "    do_with_bar(bar) {\n        if (" in code

    def test_helpers_file_override(self, tmp_path, foo_interface_dict):
        helpers = tmp_path / "helpers.js"
        helpers.write_text("function custom() {}\n\nmodule.exports = { custom };\n")
        generator = JavaScriptGenerator(load_config("javascript", {"helpers_file": str(helpers)}))

        code = _generate(generator, foo_interface_dict).code

        assert "function custom() {}\n" in code
        assert "module.exports = { custom }" not in code

    def test_empty_class_warns(self, js_generator):
        result = _generate(js_generator, {"name": "Empty"})

        assert result.success
        assert "class Empty {\n}\n" in result.code
        assert "Class 'Empty' has no methods" in result.warnings

    @pytest.mark.parametrize("line_ending", ["\r\n"])
    def test_line_ending(self, foo_interface_dict, line_ending):
        generator = JavaScriptGenerator(load_config("javascript", {"line_ending": line_ending}))
        code = _generate(generator, foo_interface_dict).code

        assert "module.exports = Foo;\r\n" in code
        assert "\n" not in code.replace("\r\n", "")

    def test_comment_cannot_close_block(self, js_generator):
        code = _generate(
            js_generator,
            {"name": "Foo", "methods": [{"name": "tap", "comment": "Ends early */\nsecond line"}]},
        ).code

        assert "   * Ends early *\\/\n" in code

"""
Tests for the command-line interface.
"""

import json

import pytest

from wrapgen.cli import create_parser, main


class TestParser:
    def test_generate_defaults(self):
        args = create_parser().parse_args(["generate", "Foo.h"])

        assert args.command == "generate"
        assert args.language == "javascript"
        assert args.output is None
        assert args.no_helpers is False

    def test_log_level_is_case_insensitive(self):
        args = create_parser().parse_args(["--log-level", "debug", "languages"])

        assert args.log_level == "DEBUG"


class TestGenerateCommand:
    def test_generate_to_file(self, tmp_path, write_json, foo_interface_dict, capsys):
        source = write_json("Foo.json", foo_interface_dict)
        output = tmp_path / "out" / "Foo.js"

        assert main(["generate", str(source), "-o", str(output)]) == 0

        assert output.read_text(encoding="utf-8").endswith("module.exports = Foo;\n")
        assert "Generated" in capsys.readouterr().err

    def test_generate_to_stdout(self, write_json, foo_interface_dict, capsys):
        source = write_json("Foo.json", foo_interface_dict)

        assert main(["generate", str(source), "--no-helpers"]) == 0

        out = capsys.readouterr().out
        assert out.startswith("/**\n")
        assert "do_with_bar(bar) {" in out
        assert "sanitize_greyDirection" not in out

    def test_generate_python_from_header(self, tmp_path, sample_header, capsys):
        header = tmp_path / "GREYActions.h"
        header.write_text(sample_header, encoding="utf-8")

        assert main(["generate", str(header), "-l", "py", "--no-comments", "--method-case", "camel"]) == 0

        out = capsys.readouterr().out
        assert "def swipeWithDirectionSpeed(self, direction, speed):" in out
        assert "Swipes in the given direction." not in out

    def test_config_file(self, tmp_path, write_json, foo_interface_dict, capsys):
        source = write_json("Foo.json", foo_interface_dict)
        config = write_json("wrapgen.json", {"readme_reference": "docs/wrappers.md"})

        assert main(["generate", str(source), "--config", str(config)]) == 0

        assert "docs/wrappers.md" in capsys.readouterr().out

    def test_missing_input(self, tmp_path, capsys):
        output = tmp_path / "Foo.js"

        assert main(["generate", str(tmp_path / "Foo.h"), "-o", str(output)]) == 1

        assert "Error" in capsys.readouterr().err
        assert not output.exists()

    def test_unsupported_language(self, write_json, foo_interface_dict, capsys):
        source = write_json("Foo.json", foo_interface_dict)

        assert main(["generate", str(source), "-l", "cobol"]) == 1

        assert "Unsupported language" in capsys.readouterr().err

    def test_bad_config_file(self, tmp_path, write_json, foo_interface_dict, capsys):
        source = write_json("Foo.json", foo_interface_dict)

        assert main(["generate", str(source), "--config", str(tmp_path / "none.json")]) == 1

        assert "Configuration error" in capsys.readouterr().err

    def test_invalid_config_values(self, tmp_path, write_json, foo_interface_dict, capsys):
        source = write_json("Foo.json", foo_interface_dict)
        config = write_json("config.json", {"indent_size": 0})
        output = tmp_path / "Foo.js"

        assert main(["generate", str(source), "--config", str(config), "-o", str(output)]) == 1

        assert "Invalid indent_size" in capsys.readouterr().err
        assert not output.exists()


class TestRunCommand:
    def test_run_manifest(self, tmp_path, write_json, foo_interface_dict, basic_interface_dict):
        write_json("in/Foo.json", foo_interface_dict)
        write_json("in/BasicName.json", basic_interface_dict)
        manifest = write_json(
            "manifest.json",
            {"in/Foo.json": "out/Foo.js", "in/BasicName.json": "out/BasicName.js"},
        )

        assert main(["run", str(manifest)]) == 0

        assert (tmp_path / "out" / "Foo.js").exists()
        assert (tmp_path / "out" / "BasicName.js").exists()

    def test_run_fails_on_missing_input(self, tmp_path, write_json):
        manifest = write_json("manifest.json", {"in/Missing.h": "out/Missing.js"})

        assert main(["run", str(manifest)]) == 1

        assert not (tmp_path / "out" / "Missing.js").exists()

    def test_invalid_manifest(self, tmp_path, capsys):
        manifest = tmp_path / "manifest.json"
        manifest.write_text("[]", encoding="utf-8")

        assert main(["run", str(manifest)]) == 1


class TestMiscCommands:
    def test_languages(self, capsys):
        assert main(["languages"]) == 0

        err = capsys.readouterr().err
        assert "javascript" in err
        assert "python" in err

    def test_no_command(self, capsys):
        assert main([]) == 1

    def test_log_file(self, tmp_path, write_json, foo_interface_dict):
        source = write_json("Foo.json", foo_interface_dict)
        log_file = tmp_path / "wrapgen.log"

        assert main(
            ["--log-level", "INFO", "--log-file", str(log_file), "generate", str(source), "-o", str(tmp_path / "Foo.js")]
        ) == 0

        assert "Loaded interface Foo" in log_file.read_text(encoding="utf-8")

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])

        assert exc_info.value.code == 0
        assert "0.1.0" in capsys.readouterr().out

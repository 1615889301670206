"""
Tests for the editmask command-line interface.

``main`` is called in-process with an explicit argv list.
"""
from __future__ import annotations

import json
import locale
import logging

import pytest

from editmask.cli import main


class TestApplyAndRemove:
    def test_apply_single_value(self, capsys):
        assert main(["(999) 999-9999;0", "8005551212"]) == 0
        assert capsys.readouterr().out == "(800) 555-1212\n"

    def test_apply_several_values(self, capsys):
        assert main(["!999;0", "1", "12", "123"]) == 0
        assert capsys.readouterr().out.splitlines() == ["  1", " 12", "123"]

    def test_remove(self, capsys):
        assert main(["(999) 999-9999;1", "(800) 555-1212", "--remove"]) == 0
        assert capsys.readouterr().out == "8005551212\n"

    def test_placeholder_option(self, capsys):
        assert main(["99-99", "1-2", "-p", "*"]) == 0
        assert capsys.readouterr().out == "1*-2*\n"

    def test_date_separator_option(self, capsys):
        assert main(["99/99;0", "0102", "--date-separator", "."]) == 0
        assert capsys.readouterr().out == "01.02\n"

    def test_input_file(self, tmp_path, capsys):
        values = tmp_path / "values.txt"
        values.write_text("8005551212\n2125550000\n", encoding="utf-8")
        assert main(["(999) 999-9999;0", "-i", str(values)]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "(800) 555-1212",
            "(212) 555-0000",
        ]

    def test_output_file(self, tmp_path, capsys):
        out = tmp_path / "out.txt"
        assert main(["999;0", "12", "-o", str(out)]) == 0
        assert out.read_text(encoding="utf-8") == "12 \n"
        assert "Output written" in capsys.readouterr().err

    def test_json_format(self, capsys):
        assert main(["(999) 999-9999;0;_", "8005551212", "-f", "json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["mask"] == "(999) 999-9999;0;_"
        assert data["operation"] == "apply"
        assert data["results"] == [{"value": "8005551212", "result": "(800) 555-1212"}]

    def test_system_locale_separators(self, monkeypatch, capsys):
        formats = {locale.D_FMT: "%d.%m.%Y", locale.T_FMT: "%H,%M"}
        monkeypatch.setattr(locale, "nl_langinfo", formats.__getitem__)
        assert main(["99/99 99:99;0", "01021230", "--system-locale"]) == 0
        assert capsys.readouterr().out == "01.02 12,30\n"

    def test_verbose_logs_debug_to_stderr(self, monkeypatch, capsys):
        root = logging.getLogger()
        level = root.level
        # basicConfig only installs its handler on a bare root logger
        monkeypatch.setattr(root, "handlers", [])
        try:
            assert main(["999;0", "12", "--verbose"]) == 0
        finally:
            root.setLevel(level)
        captured = capsys.readouterr()
        assert captured.out == "12 \n"
        assert "DEBUG editmask." in captured.err
        assert "apply '12'" in captured.err


class TestCompileMode:
    def test_text_table(self, capsys):
        assert main([">LL[0-9]-000", "--compile"]) == 0
        out = capsys.readouterr().out
        assert "Pattern      : >LL[0-9]-000" in out
        assert "CHARSET_FIXED" in out
        assert "'UPPER'" in out

    def test_json(self, capsys):
        assert main(["!99/99;0;*", "--compile", "-f", "json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["spec"] == {
            "pattern": "!99/99",
            "save_formatted": False,
            "space_placeholder": "*",
        }
        assert data["mask"]["right_to_left"] is True
        assert data["mask"]["element_count"] == 5
        assert data["mask"]["elements"][2] == {"kind": "DATE_SEPARATOR", "required": False}


class TestErrors:
    def test_invalid_mask(self, capsys):
        assert main(["[ABC;0", "x"]) == 2
        assert "error: invalid mask" in capsys.readouterr().err

    def test_no_values(self, capsys):
        assert main(["999;0"]) == 2
        assert "no values" in capsys.readouterr().err

    def test_bad_separator(self, capsys):
        assert main(["99/99;0", "1", "--date-separator", ".."]) == 2
        assert "date_separator" in capsys.readouterr().err

    def test_bad_placeholder(self, capsys):
        assert main(["99-99", "1-2", "-p", "ab"]) == 2
        assert "space_placeholder" in capsys.readouterr().err

    def test_unknown_format(self):
        with pytest.raises(SystemExit) as info:
            main(["999", "1", "-f", "xml"])
        assert info.value.code == 2

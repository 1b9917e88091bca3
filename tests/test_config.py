"""Reader configuration and error formatting tests."""

import json

import pytest

from gcodescan.core import GCodeScanError, ParseError, ReadError, ReaderConfig


class TestReaderConfig:
    def test_defaults(self) -> None:
        config = ReaderConfig()
        assert config.to_dict() == {"encoding": "utf-8", "errors": "replace"}

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ReaderConfig.from_dict({"encoding": "ascii", "dialect": "fanuc"})
        assert config == ReaderConfig(encoding="ascii")

    def test_from_json(self, tmp_path) -> None:
        path = tmp_path / "reader.json"
        path.write_text(json.dumps({"encoding": "latin-1", "errors": "strict"}), encoding="utf-8")
        assert ReaderConfig.from_json(path) == ReaderConfig("latin-1", "strict")

    def test_from_json_missing_file_gives_defaults(self, tmp_path) -> None:
        assert ReaderConfig.from_json(tmp_path / "absent.json") == ReaderConfig()

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            ReaderConfig().encoding = "ascii"  # type: ignore[misc]


class TestErrorFormatting:
    def test_parse_error_without_line(self) -> None:
        err = ParseError("@", 0, "@X1")
        assert str(err) == "Parse Error at C1: unexpected character '@' in '@X1'"

    def test_parse_error_with_line(self) -> None:
        err = ParseError("*", 6, "G1 X1 *5", lineno=12)
        assert str(err).startswith("Parse Error at L12, C7:")

    def test_read_error(self) -> None:
        err = ReadError(OSError("boom"), 3)
        assert str(err) == "Read Error after L3: boom"

    @pytest.mark.parametrize(
        "err", [ParseError("@", 0, "@"), ReadError(OSError("x"))], ids=["parse", "read"]
    )
    def test_hierarchy(self, err) -> None:
        assert isinstance(err, GCodeScanError)
        assert isinstance(err, Exception)

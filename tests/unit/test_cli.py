"""
Тесты для CLI калькулятора

Коды выхода: 0 — успех, 1 — ошибка вычисления, 2 — ошибка использования.
"""

import json

import pytest

from src.calculator.cli import build_parser, main

QUIET = ["--log-level", "ERROR"]


class TestCalculate:
    """fraction-calc LEFT OPERATOR RIGHT"""

    def test_add(self, capsys) -> None:
        assert main(QUIET + ["1/2", "+", "1/3"]) == 0

        out = capsys.readouterr().out.splitlines()
        assert out[0] == "1/2 + 1/3 = 5/6"
        assert out[1] == "improper: 5/6"
        assert out[2] == "decimal:  0.833333"

    def test_divide_mixed(self, capsys) -> None:
        assert main(QUIET + ["1/2", "÷", "1/3"]) == 0
        assert capsys.readouterr().out.splitlines()[0] == "1/2 ÷ 1/3 = 1 1/2"

    def test_ascii_alias_and_mixed_operand(self, capsys) -> None:
        assert main(QUIET + ["3 1/2", "/", "7/4"]) == 0
        assert capsys.readouterr().out.splitlines()[0] == "3 1/2 ÷ 1 3/4 = 2"

    def test_single_dash_operator(self, capsys) -> None:
        assert main(QUIET + ["3/4", "-", "1/4"]) == 0
        assert capsys.readouterr().out.splitlines()[0] == "3/4 - 1/4 = 1/2"

    def test_negative_operand_after_separator(self, capsys) -> None:
        assert main(QUIET + ["--", "-1/2", "-", "1/4"]) == 0
        assert capsys.readouterr().out.splitlines()[0] == "-1/2 - 1/4 = -3/4"

    def test_places(self, capsys) -> None:
        assert main(QUIET + ["--places", "2", "2", "÷", "3"]) == 0
        assert "decimal:  0.67" in capsys.readouterr().out

    def test_json(self, capsys) -> None:
        assert main(QUIET + ["--json", "2/3", "x", "3/4"]) == 0

        payload = json.loads(capsys.readouterr().out)
        assert payload["operator"] == "×"
        assert payload["result"] == {"numerator": 1, "denominator": 2}
        assert payload["expression"] == "2/3 × 3/4 = 1/2"

    def test_division_by_zero(self, capsys) -> None:
        assert main(QUIET + ["1/2", "÷", "0"]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "division by zero" in captured.err.lower()

    def test_invalid_operator(self, capsys) -> None:
        assert main(QUIET + ["1/2", "%", "1/3"]) == 1
        assert "Invalid operation" in capsys.readouterr().err


class TestFromDecimal:
    """fraction-calc --from-decimal VALUE"""

    def test_recover(self, capsys) -> None:
        assert main(QUIET + ["--from-decimal", "0.75"]) == 0

        out = capsys.readouterr().out.splitlines()
        assert out[0] == "0.75 ≈ 3/4"
        assert out[1] == "improper: 3/4"
        assert out[2] == "decimal:  0.750000"

    def test_recover_json(self, capsys) -> None:
        assert main(QUIET + ["--json", "--from-decimal", "2.5"]) == 0

        payload = json.loads(capsys.readouterr().out)
        assert payload == {"numerator": 5, "denominator": 2, "display": "2 1/2"}

    def test_tolerance(self, capsys) -> None:
        assert main(QUIET + ["--from-decimal", "3.1416", "--tolerance", "1e-2"]) == 0
        assert capsys.readouterr().out.splitlines()[0] == "3.1416 ≈ 3 1/7"

    def test_max_iterations(self, capsys) -> None:
        assert main(QUIET + ["--from-decimal", "3.14159265", "--tolerance", "1e-12", "--max-iterations", "1"]) == 0
        assert capsys.readouterr().out.splitlines()[0] == "3.14159265 ≈ 3"

    def test_nan(self, capsys) -> None:
        assert main(QUIET + ["--from-decimal", "nan"]) == 1
        assert "finite" in capsys.readouterr().err

    def test_overflow(self, capsys) -> None:
        assert main(QUIET + ["--from-decimal", "1e20"]) == 1
        assert capsys.readouterr().err.startswith("❌")


class TestUsageErrors:
    """Ошибки использования → SystemExit(2)."""

    @pytest.mark.parametrize(
        "argv",
        [
            [],
            ["1/2", "+"],
            ["--from-decimal", "0.5", "1/2"],
            ["--places", "-1", "1", "+", "1"],
            ["--from-decimal", "abc"],
        ],
    )
    def test_usage_error(self, argv) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(QUIET + argv)
        assert exc_info.value.code == 2

    def test_parser_defaults(self) -> None:
        args = build_parser().parse_args(["1", "+", "1"])
        assert args.tolerance == 1e-6
        assert args.max_iterations == 20
        assert args.places == 6
        assert args.json is False

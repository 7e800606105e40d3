"""Tests for the pure conversion, validation and formatting helpers."""

from __future__ import annotations

import math

import pytest

from convertidor.temp_utils import (
    FORMULA_PLANTILLA,
    MENSAJE_INVALIDO,
    QUICK_EXAMPLES,
    Empty,
    Invalid,
    InvalidNumericInput,
    Valid,
    c_to_f,
    format_display,
    formula_text,
    number_text,
    parse_celsius,
    reference_table,
    result_text,
    validate,
)


class TestConversion:
    @pytest.mark.parametrize(
        "celsius, expected",
        [(0, 32.0), (100, 212.0), (-40, -40.0), (37, 98.6), (25, 77.0), (-273.15, -459.67)],
    )
    def test_c_to_f(self, celsius: float, expected: float) -> None:
        assert c_to_f(celsius) == pytest.approx(expected)

    def test_large_values_are_not_clamped(self) -> None:
        assert c_to_f(1e6) == pytest.approx(1_800_032.0)


class TestParse:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("12", 12.0),
            (" 12.5 ", 12.5),
            ("-3", -3.0),
            ("+7", 7.0),
            (".5", 0.5),
            ("1e2", 100.0),
            ("-2.5E-1", -0.25),
        ],
    )
    def test_accepts_float_text(self, text: str, expected: float) -> None:
        assert parse_celsius(text) == expected

    @pytest.mark.parametrize("text", ["abc", "12abc", "1,5", "-", " ", "nan", "NaN", "1_000"])
    def test_rejects(self, text: str) -> None:
        with pytest.raises(InvalidNumericInput) as info:
            parse_celsius(text)
        assert info.value.text == text
        assert info.value.message == MENSAJE_INVALIDO

    @pytest.mark.parametrize(
        "text, expected",
        [("1e400", math.inf), ("-1e400", -math.inf), ("inf", math.inf), ("-Infinity", -math.inf)],
    )
    def test_out_of_range_is_infinite(self, text: str, expected: float) -> None:
        assert parse_celsius(text) == expected

    def test_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_celsius("x")


class TestValidate:
    def test_empty(self) -> None:
        assert validate("") == Empty()

    def test_invalid(self) -> None:
        assert validate("abc") == Invalid(MENSAJE_INVALIDO)

    def test_valid(self) -> None:
        state = validate("37")
        assert state == Valid(37.0)
        assert state.fahrenheit == pytest.approx(98.6)


class TestFormatDisplay:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (32.0, "32"),
            (98.60000001, "98.6"),
            (212.0, "212"),
            (77.0, "77"),
            (-40.0, "-40"),
            (0.05, "0.1"),
            (12.34, "12.3"),
            (-0.04, "0"),
            (0.0, "0"),
            (1e21, "1e+21"),
            (0.25, "0.3"),
            (-0.25, "-0.3"),
            (1.25, "1.3"),
            (34.25, "34.3"),
            (0.15, "0.1"),
            (math.inf, "Infinity"),
            (-math.inf, "-Infinity"),
        ],
    )
    def test_format(self, value: float, expected: str) -> None:
        assert format_display(value) == expected


class TestTexts:
    def test_formula_valid(self) -> None:
        assert formula_text(Valid(37.0)) == "(37 × 9/5) + 32 = 98.6"

    def test_formula_decimal_celsius(self) -> None:
        assert formula_text(Valid(36.5)) == "(36.5 × 9/5) + 32 = 97.7"

    @pytest.mark.parametrize("state", [Empty(), Invalid()])
    def test_formula_template(self, state) -> None:
        assert formula_text(state) == FORMULA_PLANTILLA == "(°C × 9/5) + 32 = °F"

    def test_result_text(self) -> None:
        assert result_text(Valid(0.0)) == "32°F"
        assert result_text(Valid(100.0)) == "212°F"
        assert result_text(Empty()) == "---°F"
        assert result_text(Invalid()) == "---°F"

    def test_number_text(self) -> None:
        assert number_text(0) == "0"
        assert number_text(25.0) == "25"
        assert number_text(37.5) == "37.5"


class TestPresets:
    def test_quick_examples(self) -> None:
        assert [(ex.celsius, ex.label) for ex in QUICK_EXAMPLES] == [
            (0, "Congelación"),
            (25, "Ambiente"),
            (37, "Corporal"),
            (100, "Ebullición"),
        ]

    def test_reference_table(self) -> None:
        df = reference_table()
        assert list(df.columns) == ["Ejemplo", "Celsius (°C)", "Fahrenheit (°F)"]
        assert df["Fahrenheit (°F)"].tolist() == ["32°F", "77°F", "98.6°F", "212°F"]

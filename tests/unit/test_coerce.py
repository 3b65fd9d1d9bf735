import math

import pytest

from src.domain.coerce import format_number, to_number


class TestToNumber:
    """Form text follows browser Number() conversion."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("60", 60.0),
            (" 45 ", 45.0),
            ("", 0.0),
            ("   ", 0.0),
            (None, 0.0),
            ("-30", -30.0),
            ("+12", 12.0),
            ("1.5", 1.5),
            (".5", 0.5),
            ("5.", 5.0),
            ("1e3", 1000.0),
            ("2.5E-1", 0.25),
            ("0x10", 16.0),
            ("0o17", 15.0),
            ("0b101", 5.0),
        ],
    )
    def test_numeric(self, text: str | None, expected: float) -> None:
        assert to_number(text) == expected

    @pytest.mark.parametrize(
        "text",
        [
            "abc",
            "12abc",
            "1,000",
            "$100",
            "nan",
            "inf",
            "1_000",
            "0x",
            "0xZZ",
            "0x1_0",
            "-0x10",
            "1e",
            "\u0661\u0662",
            "0x\u0661",
        ],
    )
    def test_not_a_number(self, text: str) -> None:
        assert math.isnan(to_number(text))

    def test_infinity(self) -> None:
        assert to_number("Infinity") == math.inf
        assert to_number("-Infinity") == -math.inf
        assert to_number("+Infinity") == math.inf

    @pytest.mark.parametrize("text", ["0x" + "f" * 300, "0o" + "7" * 400, "0b" + "1" * 1100])
    def test_huge_radix_literal_is_infinite(self, text: str) -> None:
        assert to_number(text) == math.inf

    def test_huge_decimal_is_infinite(self) -> None:
        assert to_number("9" * 400) == math.inf


class TestFormatNumber:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (60.0, "60"),
            (0.0, "0"),
            (-0.0, "0"),
            (1.5, "1.5"),
            (-30.0, "-30"),
            (math.nan, "NaN"),
            (math.inf, "Infinity"),
            (-math.inf, "-Infinity"),
        ],
    )
    def test_values(self, value: float, expected: str) -> None:
        assert format_number(value) == expected

import unittest

from Tint.colors import (
    Hex,
    Named,
    Rgb,
    WithFlags,
    classify,
    hex_to_rgb,
    parse_numeric_triplet,
    resolve_color,
    to_color_spec,
)


class TestNumericParsing(unittest.TestCase):
    def test_delimiters_are_interchangeable(self):
        expected = [255, 0, 0]
        for raw in ("255,0,0", "255-0-0", "255.0.0", "255/0-0", "255\\0\\0", "255 0 0"):
            self.assertEqual(parse_numeric_triplet(raw), expected, raw)

    def test_components_wrap(self):
        self.assertEqual(parse_numeric_triplet("256,0,0"), [0, 0, 0])
        self.assertEqual(parse_numeric_triplet("511.257.3"), [255, 1, 3])

    def test_extra_runs_ignored(self):
        self.assertEqual(parse_numeric_triplet("1,2,3,4,5"), [1, 2, 3])

    def test_list_input(self):
        self.assertEqual(parse_numeric_triplet([300, "x", "5px", 9]), [44, 0, 5])

    def test_no_digits(self):
        self.assertEqual(parse_numeric_triplet("abc"), [])
        self.assertEqual(parse_numeric_triplet(""), [])


class TestHex(unittest.TestCase):
    def test_forms(self):
        self.assertEqual(hex_to_rgb("#fff"), [255, 255, 255])
        self.assertEqual(hex_to_rgb("#ff0000"), [255, 0, 0])
        self.assertEqual(hex_to_rgb("#00ff0080"), [0, 255, 0])

    def test_invalid(self):
        self.assertIsNone(hex_to_rgb("#ff00"))
        self.assertIsNone(hex_to_rgb("#ggg"))
        self.assertIsNone(hex_to_rgb("#"))


class TestClassify(unittest.TestCase):
    def test_precedence(self):
        self.assertEqual(classify("#abc"), Hex("#abc"))
        self.assertEqual(classify("10,20,30"), Rgb(("10,20,30",)))
        self.assertEqual(classify("42"), Rgb(("42",)))
        self.assertEqual(classify("rgb(1 2 3)"), Rgb(("rgb(1 2 3)",)))
        self.assertEqual(classify("Red"), Named("Red"))

    def test_loose_values(self):
        self.assertEqual(to_color_spec(["red", True]), WithFlags(Named("red"), True))
        self.assertEqual(to_color_spec([255, 0, 0]), Rgb((255, 0, 0)))
        self.assertEqual(to_color_spec({"data": "blue", "contrast": True}), WithFlags(Named("blue"), True))
        self.assertEqual(to_color_spec(7), Rgb((7,)))
        self.assertIsNone(to_color_spec(None))
        self.assertIsNone(to_color_spec([True]))


class TestResolveColor(unittest.TestCase):
    def test_named_case_insensitive(self):
        self.assertEqual(resolve_color("red"), "31")
        self.assertEqual(resolve_color("red"), resolve_color("RED"))

    def test_flags(self):
        self.assertEqual(resolve_color("red", background=True), "41")
        self.assertEqual(resolve_color("red", bright=True), "91")
        self.assertEqual(resolve_color("green", background=True, bright=True), "102")

    def test_substring_fallback(self):
        self.assertEqual(resolve_color("darkred"), "31")
        self.assertEqual(resolve_color("ultra_blue_text"), "34")

    def test_unresolvable(self):
        for raw in ("purple", "re", "", "#12345", "#zzz", "abc", None):
            self.assertEqual(resolve_color(raw), "", raw)

    def test_reset_ignores_flags(self):
        self.assertEqual(resolve_color("reset", background=True, bright=True), "0")

    def test_hex_equivalence(self):
        self.assertEqual(resolve_color("#f00"), resolve_color("#ff0000"))
        self.assertEqual(resolve_color("#f00"), "38;2;255;0;0")
        self.assertEqual(resolve_color("#ff000080", background=True), "48;2;255;0;0")

    def test_component_count_selects_form(self):
        self.assertEqual(resolve_color("200"), "38;5;200")
        self.assertEqual(resolve_color("10-20"), "38;2;10;20;0")
        self.assertEqual(resolve_color("10-20-30"), "38;2;10;20;30")
        self.assertEqual(resolve_color("10-20-30", background=True), "48;2;10;20;30")

    def test_bright_ignored_for_extended_forms(self):
        self.assertEqual(resolve_color("1,2,3", bright=True), "38;2;1;2;3")

    def test_variants(self):
        self.assertEqual(resolve_color(WithFlags(Named("cyan"), True)), "96")
        self.assertEqual(resolve_color([0, 128, 255]), "38;2;0;128;255")
        self.assertEqual(resolve_color(("yellow", True), background=True), "103")


if __name__ == "__main__":
    unittest.main()

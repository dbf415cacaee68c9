import math
import random
import unittest

from reportlab.pdfbase.pdfmetrics import stringWidth

from label_types import OverflowPolicy
from label_variants.utils import (
    layout_text_block,
    shrink_fit,
    string_measure,
    truncate_to_width,
    wrap_lines,
)


def mono(text: str) -> float:
    return len(text) / 10


class WrapLinesTests(unittest.TestCase):
    def test_empty_and_blank_input(self) -> None:
        self.assertEqual(list(wrap_lines("", 1.0, 0, 1, 10, mono)), [])
        self.assertEqual(list(wrap_lines("  \n\t ", 1.0, 0, 1, 10, mono)), [])

    def test_single_line(self) -> None:
        lines = list(wrap_lines("Short text.", 5.0, 2.0, 1, 10, mono))
        self.assertEqual(lines, [("Short text.", 2.0)])

    def test_greedy_fill(self) -> None:
        lines = list(wrap_lines("aa bb cc dd ee", 0.5, 0, 1, 10, mono))
        self.assertEqual(lines, [("aa bb", 0), ("cc dd", 1), ("ee", 2)])

    def test_collapses_whitespace(self) -> None:
        lines = list(wrap_lines("aa \n  bb", 1.0, 0, 1, 10, mono))
        self.assertEqual(lines, [("aa bb", 0)])

    def test_oversized_word_is_truncated_and_suffix_dropped(self) -> None:
        lines = list(wrap_lines("abcdefghij xy", 0.5, 0, 1, 10, mono))
        self.assertEqual(lines, [("abcde", 0), ("xy", 1)])

    def test_oversized_word_after_buffer_is_truncated(self) -> None:
        lines = list(wrap_lines("ab abcdefghijkl", 0.5, 0, 1, 10, mono))
        self.assertEqual(lines, [("ab", 0), ("abcde", 1)])

    def test_vertical_cutoff_keeps_first_line_only(self) -> None:
        lines = list(wrap_lines("aaa bbb ccc", 0.3, 0, 1, 0.5, mono))
        self.assertEqual(lines, [("aaa", 0)])

    def test_vertical_cutoff_single_fitting_line(self) -> None:
        lines = list(wrap_lines("aaa bbb", 5.0, 0, 1, 0.5, mono))
        self.assertEqual(lines, [("aaa bbb", 0)])

    def test_trailing_line_on_boundary_is_kept(self) -> None:
        lines = list(wrap_lines("aaa bbb", 0.3, 0, 1, 1, mono))
        self.assertEqual(lines, [("aaa", 0), ("bbb", 1)])

    def test_start_below_bound_yields_nothing(self) -> None:
        self.assertEqual(list(wrap_lines("aaa", 5.0, 3, 1, 2, mono)), [])

    def test_long_description_drops_tail_words(self) -> None:
        text = " ".join(["word"] * 200)
        start_y, line_height, max_y = 0.0, 1.0, 2.5
        lines = list(wrap_lines(text, 1.0, start_y, line_height, max_y, mono))
        self.assertEqual(
            lines,
            [("word word", 0.0), ("word word", 1.0), ("word word", 2.0)],
        )
        self.assertLessEqual(
            len(lines) * line_height, (max_y - start_y) + line_height
        )

    def test_long_description_exact_boundary(self) -> None:
        text = " ".join(f"w{i:03d}" for i in range(200))
        lines = list(wrap_lines(text, 1.0, 0, 1, 2.5, mono))
        kept = " ".join(line for line, _ in lines).split()
        self.assertEqual(kept, ["w000", "w001", "w002", "w003", "w004", "w005"])

    def test_width_and_line_count_bounds_hold_for_random_input(self) -> None:
        rng = random.Random(1234)
        alphabet = "abcdefghijklmnopqrstuvwxyz"
        for _ in range(300):
            words = [
                "".join(rng.choice(alphabet) for _ in range(rng.randint(1, 15)))
                for _ in range(rng.randint(0, 40))
            ]
            per_char = rng.choice([0.05, 0.1, 0.37, 2.0])
            max_width = rng.uniform(0.1, 3.0)
            start_y = rng.uniform(0, 5)
            line_height = rng.uniform(0.1, 2.0)
            max_y = start_y + rng.uniform(-1.0, 10.0)

            def measure(text: str, per_char: float = per_char) -> float:
                return per_char * len(text)

            lines = list(
                wrap_lines(" ".join(words), max_width, start_y, line_height, max_y, measure)
            )
            bound = max(math.ceil((max_y - start_y) / line_height) + 1, 0)
            self.assertLessEqual(len(lines), bound)
            for line, y in lines:
                self.assertTrue(line)
                self.assertLessEqual(measure(line), max_width)
                self.assertLessEqual(y, max_y)

    def test_character_wider_than_bound_emits_nothing(self) -> None:
        lines = list(wrap_lines("abc de f", 0.5, 0, 1, 10, lambda s: 1.0 * len(s)))
        self.assertEqual(lines, [])

    def test_is_lazy(self) -> None:
        calls: list[str] = []

        def measure(text: str) -> float:
            calls.append(text)
            return mono(text)

        lines = wrap_lines("aa bb cc", 0.5, 0, 1, 10, measure)
        self.assertEqual(calls, [])
        self.assertEqual(next(lines), ("aa bb", 0))


class TruncateToWidthTests(unittest.TestCase):
    def test_narrow_word_is_unchanged(self) -> None:
        self.assertEqual(truncate_to_width("abc", 0.3, mono), "abc")
        self.assertEqual(truncate_to_width("abc", 10, mono), "abc")

    def test_wide_word_is_cut(self) -> None:
        self.assertEqual(truncate_to_width("abcdef", 0.35, mono), "abc")

    def test_never_fits(self) -> None:
        self.assertEqual(truncate_to_width("abc", -1, mono), "")


class LayoutTextBlockTests(unittest.TestCase):
    def _block(self, text: str, overflow: OverflowPolicy, **kwargs):
        params = dict(
            x=5.0,
            start_y=0.0,
            max_width=60.0,
            max_y=0.0,
            font_name="Courier",
            font_size=10,
            line_height=10.0,
            cell_height=8.0,
            overflow=overflow,
        )
        params.update(kwargs)
        return layout_text_block(text, **params)

    def test_truncate_drops_overflow(self) -> None:
        lines = self._block("abcde fghij", OverflowPolicy.TRUNCATE)
        self.assertEqual([line.text for line in lines], ["abcde"])
        self.assertEqual(lines[0].font_size, 10)
        self.assertEqual(lines[0].x, 5.0)
        self.assertEqual(lines[0].cell_height, 8.0)

    def test_shrink_keeps_all_words(self) -> None:
        lines = self._block("abcde fghij", OverflowPolicy.SHRINK)
        self.assertEqual([line.text for line in lines], ["abcde fghij"])
        self.assertEqual(lines[0].font_size, 9.0)
        self.assertAlmostEqual(lines[0].cell_height, 7.2)

    def test_shrink_falls_back_to_truncation_at_min_size(self) -> None:
        text = " ".join(["word"] * 100)
        lines = self._block(text, OverflowPolicy.SHRINK, min_font_size=6)
        self.assertEqual(len(lines), 1)
        self.assertEqual(lines[0].font_size, 6)
        self.assertLessEqual(stringWidth(lines[0].text, "Courier", 6), 60.0)

    def test_string_measure_matches_reportlab(self) -> None:
        measure = string_measure("Courier", 10)
        self.assertAlmostEqual(measure("abcd"), stringWidth("abcd", "Courier", 10))


class ShrinkFitTests(unittest.TestCase):
    def test_shrink_fit_respects_bounds(self) -> None:
        size = shrink_fit("Hello", 1000, max_font=20, min_font=10, font_name="Helvetica")
        self.assertEqual(size, 20)
        size = shrink_fit("Hello", 1, max_font=20, min_font=10, font_name="Helvetica")
        self.assertGreaterEqual(size, 10)
        self.assertLessEqual(size, 20)

    def test_shrink_fit_fits_width(self) -> None:
        size = shrink_fit("Sample Product", 252, max_font=48, min_font=12, font_name="Courier-Bold")
        self.assertLessEqual(stringWidth("Sample Product", "Courier-Bold", size), 252)
        self.assertGreater(size, 12)


if __name__ == "__main__":
    unittest.main()

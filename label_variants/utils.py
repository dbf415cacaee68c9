"""Text measurement, wrapping and fitting helpers shared by label variants."""

from __future__ import annotations

from typing import Callable, Iterator, List

from reportlab.pdfbase.pdfmetrics import stringWidth

from label_types import LayoutLine, OverflowPolicy

Measure = Callable[[str], float]


def string_measure(font_name: str, font_size: float) -> Measure:
    """Return a width function for ``font_name`` at ``font_size`` points."""

    def measure(text: str) -> float:
        return stringWidth(text, font_name, font_size)

    return measure


def truncate_to_width(word: str, max_width: float, measure: Measure) -> str:
    """Drop trailing characters from ``word`` until it fits ``max_width``."""

    while word and measure(word) > max_width:
        word = word[:-1]
    return word


def wrap_lines(
    text: str,
    max_width: float,
    start_y: float,
    line_height: float,
    max_y: float,
    measure: Measure,
) -> Iterator[tuple[str, float]]:
    """Greedily wrap ``text`` into ``(line, y)`` pairs.

    Lines are emitted top-down starting at ``start_y``. Once the cursor has
    passed ``max_y`` the remaining words are dropped. A word wider than
    ``max_width`` on its own is cut down to the characters that fit and the
    rest of it is lost.
    """

    line = ""
    y = start_y
    for word in text.split():
        if y > max_y:
            return

        candidate = f"{line} {word}" if line else word
        if measure(candidate) <= max_width:
            line = candidate
            continue

        if line:
            yield line, y
            y += line_height
        line = truncate_to_width(word, max_width, measure)

    if line and y <= max_y:
        yield line, y


def layout_text_block(
    text: str,
    *,
    x: float,
    start_y: float,
    max_width: float,
    max_y: float,
    font_name: str,
    font_size: float,
    line_height: float,
    cell_height: float,
    overflow: OverflowPolicy = OverflowPolicy.TRUNCATE,
    min_font_size: float | None = None,
    step: float = 0.5,
) -> List[LayoutLine]:
    """Position a wrapped text block according to ``overflow``.

    With ``OverflowPolicy.SHRINK`` the font size (and the line pitch with it)
    is reduced until every word fits; at ``min_font_size`` the block is
    truncated like ``OverflowPolicy.TRUNCATE``.
    """

    if overflow is OverflowPolicy.SHRINK:
        normalized = " ".join(text.split())
        min_font = min_font_size if min_font_size is not None else font_size * 0.5
        min_font = max(min_font, 0.5)
        size = font_size
        while size >= min_font:
            scale = size / font_size
            wrapped = list(
                wrap_lines(
                    text,
                    max_width,
                    start_y,
                    line_height * scale,
                    max_y,
                    string_measure(font_name, size),
                )
            )
            if " ".join(line for line, _ in wrapped) == normalized:
                return [
                    LayoutLine(line, x, y, font_name, size, cell_height * scale)
                    for line, y in wrapped
                ]
            size -= step

        scale = min_font / font_size
        font_size = min_font
        line_height *= scale
        cell_height *= scale

    return [
        LayoutLine(line, x, y, font_name, font_size, cell_height)
        for line, y in wrap_lines(
            text,
            max_width,
            start_y,
            line_height,
            max_y,
            string_measure(font_name, font_size),
        )
    ]


def shrink_fit(
    text: str,
    max_width_pt: float,
    max_font: float,
    min_font: float,
    font_name: str,
    step: float = 0.5,
) -> float:
    """Return the largest font size that fits within ``max_width_pt``."""

    size = max_font
    step = max(step, 0.25)
    while (
        size >= min_font
        and stringWidth(text, font_name, size) > max_width_pt
    ):
        size -= step
    return max(size, min_font)

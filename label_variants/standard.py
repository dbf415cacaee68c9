"""Portrait 4x6 product label with price, SKU and barcode."""

from __future__ import annotations

from reportlab.lib.units import inch

from label_types import (
    DrawInstruction,
    Orientation,
    PageGeometry,
    StandardLabelFields,
)
from .base import FormField, LabelVariant
from .common import (
    BARCODE_FONT_SIZE,
    BOTTOM_ROW_OFFSET,
    DESC_BOTTOM_RESERVE,
    FIELD_CELL_H,
    PAPER_H,
    PAPER_W,
    PRICE_FONT_SIZE,
    SKU_FONT_SIZE,
)

MARGIN = 0.25 * inch

GEOMETRY = PageGeometry(PAPER_W, PAPER_H, MARGIN, Orientation.PORTRAIT)


class Variant(LabelVariant):
    """Product label: title as typed, price left, SKU center, barcode right."""

    name = "standard"
    fields_type = StandardLabelFields

    @property
    def geometry(self) -> PageGeometry:
        return GEOMETRY

    def form_fields(self) -> list[FormField]:
        return [
            FormField("title", "Title:", default="Sample Product"),
            FormField(
                "description",
                "Description:",
                multiline=True,
                default=(
                    "This is a sample product description that can span "
                    "multiple lines."
                ),
            ),
            FormField("price", "Price:", default="$19.99"),
            FormField("sku", "SKU:", default="SKU123456"),
            FormField("barcode", "Barcode:", default="1234567890123"),
        ]

    def description_max_y(self) -> float:
        return GEOMETRY.height - MARGIN - DESC_BOTTOM_RESERVE

    def bottom_instructions(
        self, fields: StandardLabelFields
    ) -> list[DrawInstruction]:
        row_y = GEOMETRY.height - MARGIN - BOTTOM_ROW_OFFSET
        return [
            self.left_aligned(fields.price, row_y, PRICE_FONT_SIZE, FIELD_CELL_H),
            self.centered(f"SKU: {fields.sku}", row_y, SKU_FONT_SIZE, FIELD_CELL_H),
            self.right_aligned(
                f"BC: {fields.barcode}", row_y, BARCODE_FONT_SIZE, FIELD_CELL_H
            ),
        ]

"""Landscape 4x6 equipment loan tag with return details and a QR code."""

from __future__ import annotations

from reportlab.lib.units import inch

from label_types import (
    DrawInstruction,
    EquipmentTagFields,
    LayoutLine,
    Orientation,
    PageGeometry,
    QrPlacement,
)
from .base import FormField, LabelVariant
from .common import (
    BARCODE_FONT_SIZE,
    BARCODE_ROW_GAP,
    BORROWED_OFFSET,
    BOTTOM_ROW_OFFSET,
    CAPTION_FONT_SIZE,
    DESC_LINE_H,
    FIELD_CELL_H,
    FONT_BOLD,
    PAPER_H,
    PAPER_W,
    PRICE_FONT_SIZE,
    QR_CAPTION,
    QR_CAPTION_CELL_H,
    QR_CAPTION_OFFSET,
    QR_COLUMN_GAP,
    QR_SIZE,
    RETURN_TO_OFFSET,
    SKU_FONT_SIZE,
)
from .utils import string_measure

MARGIN = 0.125 * inch

GEOMETRY = PageGeometry(PAPER_W, PAPER_H, MARGIN, Orientation.LANDSCAPE)

QR_X = GEOMETRY.width - MARGIN - QR_SIZE
QR_Y = GEOMETRY.height - MARGIN - QR_SIZE
BORROWED_Y = QR_Y - BORROWED_OFFSET
RETURN_TO_Y = QR_Y - RETURN_TO_OFFSET
BOTTOM_ROW_Y = GEOMETRY.height - MARGIN - BOTTOM_ROW_OFFSET
BARCODE_Y = BOTTOM_ROW_Y - BARCODE_ROW_GAP
# right-aligned fields stop short of the QR column
FIELDS_RIGHT = QR_X - QR_COLUMN_GAP


def title_case(text: str) -> str:
    """Capitalize the first letter of each word and lowercase the rest."""

    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split())


class Variant(LabelVariant):
    """Equipment tag: loan dates and return location, optional QR link."""

    name = "equipment"
    fields_type = EquipmentTagFields

    @property
    def geometry(self) -> PageGeometry:
        return GEOMETRY

    def form_fields(self) -> list[FormField]:
        return [
            FormField("title", "Title:", default="Sample Equipment Tag"),
            FormField(
                "description",
                "Description:",
                multiline=True,
                default=(
                    "This is a sample item description that can span multiple "
                    "lines. We can see this as the default description is "
                    "quite long."
                ),
            ),
            FormField(
                "return_location", "Return Location:", default="Engineering Hall 317"
            ),
            FormField("sku", "SKU:", default="SKU123456"),
            FormField("barcode", "Barcode:", default="1234567890123"),
            FormField("checkout_date", "Checkout Date:", default="01/15/2024"),
            FormField("return_date", "Return Date:", default="01/22/2024"),
            FormField(
                "url", "URL (QR Code):", default="https://example.com/product1"
            ),
        ]

    def format_title(self, title: str) -> str:
        return title_case(title)

    def description_max_y(self) -> float:
        return BORROWED_Y - DESC_LINE_H

    def bottom_instructions(
        self, fields: EquipmentTagFields
    ) -> list[DrawInstruction]:
        instructions: list[DrawInstruction] = [
            self.right_aligned(
                f"BC: {fields.barcode}",
                BARCODE_Y,
                BARCODE_FONT_SIZE + 1,
                FIELD_CELL_H,
                right=FIELDS_RIGHT,
            ),
            self.left_aligned(
                f"SKU: {fields.sku}", BOTTOM_ROW_Y, SKU_FONT_SIZE + 1, FIELD_CELL_H
            ),
            self.right_aligned(
                f"Return By: {fields.return_date}",
                BOTTOM_ROW_Y,
                PRICE_FONT_SIZE,
                FIELD_CELL_H,
                right=FIELDS_RIGHT,
            ),
            self.left_aligned(
                f"Borrowed: {fields.checkout_date}",
                BORROWED_Y,
                PRICE_FONT_SIZE,
                FIELD_CELL_H,
            ),
            self.left_aligned(
                f"Return To: {fields.return_location}",
                RETURN_TO_Y,
                PRICE_FONT_SIZE,
                FIELD_CELL_H,
            ),
        ]
        if fields.url.strip():
            instructions.append(
                QrPlacement(
                    fields.url.strip(),
                    QR_X,
                    QR_Y,
                    QR_SIZE,
                    caption=self._qr_caption(),
                )
            )
        return instructions

    def _qr_caption(self) -> LayoutLine:
        width = string_measure(FONT_BOLD, CAPTION_FONT_SIZE)(QR_CAPTION)
        # centered over the code, but never past the right margin
        x = min(
            QR_X + (QR_SIZE - width) / 2.0,
            GEOMETRY.width - MARGIN - width,
        )
        return LayoutLine(
            QR_CAPTION,
            x,
            QR_Y - QR_CAPTION_OFFSET,
            FONT_BOLD,
            CAPTION_FONT_SIZE,
            QR_CAPTION_CELL_H,
        )

"""Shared constants for 4x6 inch label variants."""

from __future__ import annotations

from reportlab.lib.units import inch

PAPER_W = 4.0 * inch
PAPER_H = 6.0 * inch

FONT_REGULAR = "Courier"
FONT_BOLD = "Courier-Bold"

TITLE_FONT_SIZE = 48
TITLE_MIN_FONT_SIZE = 12
DESC_FONT_SIZE = 10
PRICE_FONT_SIZE = 14
SKU_FONT_SIZE = 10
BARCODE_FONT_SIZE = 8
CAPTION_FONT_SIZE = 8

TITLE_OFFSET = 0.1 * inch
TITLE_CELL_H = 0.3 * inch

DESC_OFFSET = 0.625 * inch
DESC_LINE_H = 0.25 * inch
DESC_CELL_H = 0.2 * inch
DESC_RIGHT_PAD = 0.1 * inch
DESC_BOTTOM_RESERVE = 1.0 * inch

FIELD_CELL_H = 0.3 * inch
BOTTOM_ROW_OFFSET = 0.6 * inch
BARCODE_ROW_GAP = 0.35 * inch

BORDER_LINE_W = 0.01 * inch

QR_SIZE = 0.5 * inch
QR_PIXELS = 256
QR_COLUMN_GAP = 0.125 * inch
QR_CAPTION = "Finalize Restock"
QR_CAPTION_OFFSET = 0.15 * inch
QR_CAPTION_CELL_H = 0.1 * inch
BORROWED_OFFSET = 0.8 * inch
RETURN_TO_OFFSET = 0.5 * inch

"""Page assembly and PDF output for 4x6 labels."""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Iterator, Sequence

import qrcode
from qrcode.exceptions import DataOverflowError
from reportlab.pdfgen import canvas

from label_types import (
    BorderRect,
    DrawInstruction,
    LabelFields,
    LayoutLine,
    OverflowPolicy,
    PageGeometry,
    QrPlacement,
)
from label_variants.base import LabelVariant
from label_variants.common import QR_PIXELS

logger = logging.getLogger(__name__)


class LabelValidationError(ValueError):
    """The captured fields cannot produce a label."""


class LabelWriteError(RuntimeError):
    """The PDF could not be written."""


def label_filename(sku: str) -> str:
    safe_sku = sku.replace(" ", "_")
    return f"label_{safe_sku}.pdf"


def validate_fields(fields: LabelFields) -> None:
    if not fields.title.strip():
        raise LabelValidationError("title is required")


def generate_label(
    variant: LabelVariant,
    fields: LabelFields,
    output_dir: str | os.PathLike[str] | None = None,
    overflow: OverflowPolicy = OverflowPolicy.TRUNCATE,
) -> Path:
    """Lay out ``fields`` with ``variant`` and write a single-page PDF.

    Returns the absolute path of the written file.
    """

    validate_fields(fields)

    instructions = variant.layout(fields, overflow)
    output_path = (Path(output_dir or ".") / label_filename(fields.sku)).resolve()

    try:
        render_pdf(output_path, variant.geometry, instructions)
    except OSError as exc:
        raise LabelWriteError(f"failed to save PDF: {exc}") from exc

    logger.info("Wrote %s label to %s", variant.name, output_path)
    return output_path


def render_pdf(
    output_path: str | os.PathLike[str],
    geometry: PageGeometry,
    instructions: Sequence[DrawInstruction],
) -> None:
    """Paint ``instructions`` on one page sized to ``geometry`` and save it."""

    canvas_obj = canvas.Canvas(str(output_path), pagesize=geometry.page_size)
    page_height = geometry.height

    for instruction in instructions:
        if isinstance(instruction, LayoutLine):
            _draw_text(canvas_obj, page_height, instruction)
        elif isinstance(instruction, BorderRect):
            _draw_border(canvas_obj, page_height, instruction)
        elif isinstance(instruction, QrPlacement):
            _draw_qr(canvas_obj, page_height, instruction)
        else:
            raise TypeError(f"Unsupported draw instruction: {instruction!r}")

    canvas_obj.showPage()
    canvas_obj.save()


@contextmanager
def qr_image_file(url: str, size: int = QR_PIXELS) -> Iterator[str]:
    """Write a QR code PNG for ``url`` to a temporary file.

    The file is removed when the context exits, including on errors raised
    while the image is being embedded.
    """

    tmp_file = NamedTemporaryFile(delete=False, prefix="label_qr_", suffix=".png")
    tmp_file.close()
    try:
        qr = qrcode.QRCode(error_correction=qrcode.constants.ERROR_CORRECT_M)
        qr.add_data(url)
        qr.make(fit=True)
        qr.box_size = max(size // (qr.modules_count + 2 * qr.border), 1)
        qr.make_image().save(tmp_file.name)
        yield tmp_file.name
    finally:
        try:
            os.remove(tmp_file.name)
        except OSError as exc:
            logger.debug("Could not remove %s: %s", tmp_file.name, exc)


def _draw_text(
    canvas_obj: canvas.Canvas,
    page_height: float,
    line: LayoutLine,
) -> None:
    if not line.text:
        return
    canvas_obj.setFont(line.font_name, line.font_size)
    canvas_obj.drawString(line.x, page_height - line.baseline, line.text)


def _draw_border(
    canvas_obj: canvas.Canvas,
    page_height: float,
    rect: BorderRect,
) -> None:
    canvas_obj.saveState()
    canvas_obj.setLineWidth(rect.line_width)
    canvas_obj.rect(
        rect.x,
        page_height - rect.y - rect.height,
        rect.width,
        rect.height,
        stroke=1,
        fill=0,
    )
    canvas_obj.restoreState()


def _draw_qr(
    canvas_obj: canvas.Canvas,
    page_height: float,
    placement: QrPlacement,
) -> None:
    try:
        with qr_image_file(placement.url) as image_path:
            canvas_obj.drawImage(
                image_path,
                placement.x,
                page_height - placement.y - placement.size,
                width=placement.size,
                height=placement.size,
                preserveAspectRatio=True,
                mask="auto",
            )
    except (DataOverflowError, OSError, ValueError) as exc:
        logger.warning("Leaving out QR code for %s: %s", placement.url, exc)
        return

    if placement.caption is not None:
        _draw_text(canvas_obj, page_height, placement.caption)

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Union


class Orientation(StrEnum):
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


class OverflowPolicy(StrEnum):
    """What happens to description text that does not fit the label."""

    TRUNCATE = "truncate"
    SHRINK = "shrink"


@dataclass(frozen=True)
class StandardLabelFields:
    """Product label payload captured from the form."""

    title: str
    description: str = ""
    price: str = ""
    sku: str = ""
    barcode: str = ""


@dataclass(frozen=True)
class EquipmentTagFields:
    """Equipment loan tag payload captured from the form."""

    title: str
    description: str = ""
    return_location: str = ""
    sku: str = ""
    barcode: str = ""
    checkout_date: str = ""
    return_date: str = ""
    url: str = ""


LabelFields = Union[StandardLabelFields, EquipmentTagFields]


@dataclass(frozen=True)
class PageGeometry:
    """Physical page description, all lengths in points."""

    paper_width: float
    paper_height: float
    margin: float
    orientation: Orientation = Orientation.PORTRAIT

    @property
    def width(self) -> float:
        if self.orientation is Orientation.LANDSCAPE:
            return max(self.paper_width, self.paper_height)
        return min(self.paper_width, self.paper_height)

    @property
    def height(self) -> float:
        if self.orientation is Orientation.LANDSCAPE:
            return min(self.paper_width, self.paper_height)
        return max(self.paper_width, self.paper_height)

    @property
    def content_width(self) -> float:
        return self.width - 2 * self.margin

    @property
    def content_height(self) -> float:
        return self.height - 2 * self.margin

    @property
    def page_size(self) -> tuple[float, float]:
        return (self.width, self.height)


@dataclass(frozen=True)
class LayoutLine:
    """A positioned run of text.

    ``y`` is the top of the text cell measured down from the top edge of the
    page; the baseline sits in the vertical middle of the cell.
    """

    text: str
    x: float
    y: float
    font_name: str
    font_size: float
    cell_height: float

    @property
    def baseline(self) -> float:
        return self.y + self.cell_height / 2.0 + 0.3 * self.font_size


@dataclass(frozen=True)
class BorderRect:
    x: float
    y: float
    width: float
    height: float
    line_width: float


@dataclass(frozen=True)
class QrPlacement:
    """Square QR image slot; the caption is only drawn with the image."""

    url: str
    x: float
    y: float
    size: float
    caption: LayoutLine | None = None


DrawInstruction = Union[LayoutLine, BorderRect, QrPlacement]

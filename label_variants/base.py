"""Abstract base class for label variants."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, fields as dataclass_fields
from typing import Mapping

from label_types import (
    BorderRect,
    DrawInstruction,
    LabelFields,
    LayoutLine,
    OverflowPolicy,
    PageGeometry,
)
from .common import (
    BORDER_LINE_W,
    DESC_CELL_H,
    DESC_FONT_SIZE,
    DESC_LINE_H,
    DESC_OFFSET,
    DESC_RIGHT_PAD,
    FONT_BOLD,
    FONT_REGULAR,
    TITLE_CELL_H,
    TITLE_FONT_SIZE,
    TITLE_MIN_FONT_SIZE,
    TITLE_OFFSET,
)
from .utils import layout_text_block, shrink_fit, string_measure, truncate_to_width


@dataclass(frozen=True)
class FormField:
    """An input exposed by a variant on the entry form."""

    name: str
    label: str
    multiline: bool = False
    default: str = ""


class LabelVariant(ABC):
    """Lays out one kind of label on a fixed page."""

    name: str = ""
    fields_type: type

    @property
    @abstractmethod
    def geometry(self) -> PageGeometry:
        """Return the page geometry for this variant."""

    @abstractmethod
    def form_fields(self) -> list[FormField]:
        """Return the form inputs in display order."""

    @abstractmethod
    def description_max_y(self) -> float:
        """Return the lowest cell top a description line may start at."""

    @abstractmethod
    def bottom_instructions(self, fields: LabelFields) -> list[DrawInstruction]:
        """Return the instructions anchored to the bottom of the label."""

    def format_title(self, title: str) -> str:
        return title.strip()

    def build_fields(self, values: Mapping[str, str]) -> LabelFields:
        """Snapshot form ``values`` into the variant's immutable record."""

        known = {f.name for f in dataclass_fields(self.fields_type)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ValueError(
                f"Unknown field(s) for '{self.name}' labels: {', '.join(unknown)}"
            )
        return self.fields_type(**{k: values.get(k, "") for k in known})

    def default_values(self) -> dict[str, str]:
        return {f.name: f.default for f in self.form_fields()}

    def layout(
        self,
        fields: LabelFields,
        overflow: OverflowPolicy = OverflowPolicy.TRUNCATE,
    ) -> list[DrawInstruction]:
        """Map ``fields`` to absolute draw instructions for one page."""

        instructions: list[DrawInstruction] = []
        title = self.title_line(fields.title)
        if title is not None:
            instructions.append(title)
        instructions.extend(self.description_lines(fields.description, overflow))
        instructions.extend(self.bottom_instructions(fields))
        instructions.append(self.border())
        return instructions

    def title_line(self, title: str) -> LayoutLine | None:
        text = self.format_title(title)
        if not text:
            return None
        geometry = self.geometry
        width = geometry.content_width
        size = shrink_fit(
            text,
            width,
            max_font=TITLE_FONT_SIZE,
            min_font=TITLE_MIN_FONT_SIZE,
            font_name=FONT_BOLD,
        )
        measure = string_measure(FONT_BOLD, size)
        text = truncate_to_width(text, width, measure)
        x = geometry.margin + (width - measure(text)) / 2.0
        return LayoutLine(
            text,
            x,
            geometry.margin + TITLE_OFFSET,
            FONT_BOLD,
            size,
            TITLE_CELL_H,
        )

    def description_lines(
        self,
        description: str,
        overflow: OverflowPolicy,
    ) -> list[LayoutLine]:
        geometry = self.geometry
        return layout_text_block(
            description,
            x=geometry.margin,
            start_y=geometry.margin + DESC_OFFSET,
            max_width=geometry.content_width - DESC_RIGHT_PAD,
            max_y=self.description_max_y(),
            font_name=FONT_REGULAR,
            font_size=DESC_FONT_SIZE,
            line_height=DESC_LINE_H,
            cell_height=DESC_CELL_H,
            overflow=overflow,
        )

    def border(self) -> BorderRect:
        geometry = self.geometry
        return BorderRect(
            geometry.margin,
            geometry.margin,
            geometry.content_width,
            geometry.content_height,
            BORDER_LINE_W,
        )

    def left_aligned(
        self,
        text: str,
        y: float,
        font_size: float,
        cell_height: float,
        font_name: str = FONT_BOLD,
    ) -> LayoutLine:
        return LayoutLine(text, self.geometry.margin, y, font_name, font_size, cell_height)

    def centered(
        self,
        text: str,
        y: float,
        font_size: float,
        cell_height: float,
        font_name: str = FONT_BOLD,
    ) -> LayoutLine:
        geometry = self.geometry
        width = string_measure(font_name, font_size)(text)
        x = geometry.margin + (geometry.content_width - width) / 2.0
        return LayoutLine(text, x, y, font_name, font_size, cell_height)

    def right_aligned(
        self,
        text: str,
        y: float,
        font_size: float,
        cell_height: float,
        *,
        right: float | None = None,
        font_name: str = FONT_BOLD,
    ) -> LayoutLine:
        geometry = self.geometry
        edge = right if right is not None else geometry.width - geometry.margin
        width = string_measure(font_name, font_size)(text)
        return LayoutLine(text, edge - width, y, font_name, font_size, cell_height)

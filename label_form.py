"""Form actions shared by the desktop window and the command line."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from label_generation import LabelValidationError, LabelWriteError, generate_label
from label_types import OverflowPolicy
from label_variants import LabelVariant

logger = logging.getLogger(__name__)

READY_STATUS = "Ready to generate PDF"
CLEARED_STATUS = "Fields cleared"


@dataclass(frozen=True)
class GenerationOutcome:
    """Result of one "Generate" action, ready to show to the user."""

    ok: bool
    status: str
    dialog: str
    path: Path | None = None


class LabelFormController:
    """Turns raw form values into a written label."""

    def __init__(
        self,
        variant: LabelVariant,
        output_dir: str | os.PathLike[str] | None = None,
        overflow: OverflowPolicy = OverflowPolicy.TRUNCATE,
    ) -> None:
        self.variant = variant
        self.output_dir = output_dir
        self.overflow = overflow

    def initial_values(self) -> dict[str, str]:
        return self.variant.default_values()

    def cleared_values(self) -> dict[str, str]:
        return {f.name: "" for f in self.variant.form_fields()}

    def generate(self, values: Mapping[str, str]) -> GenerationOutcome:
        fields = self.variant.build_fields(values)
        try:
            path = generate_label(
                self.variant,
                fields,
                output_dir=self.output_dir,
                overflow=self.overflow,
            )
        except (LabelValidationError, LabelWriteError) as exc:
            logger.error("Label generation failed: %s", exc)
            return GenerationOutcome(False, f"Error: {exc}", str(exc))

        message = f"PDF saved: {path}"
        return GenerationOutcome(True, message, message, path)

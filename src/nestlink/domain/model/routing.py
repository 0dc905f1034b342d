"""Per-Source-system routing configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

SHEET_NAME_PLACEHOLDER: Final[str] = "<sheet_name>"


@dataclass(eq=False, kw_only=True)
class InterfaceConfig:
    """Maps a Source system (PRD, QAS, ...) onto a Target district."""

    system: str
    district: int
    remnant_template: str | None = None

    def remnant_path(self, sheet_name: str) -> str | None:
        """Return the remnant geometry path for ``sheet_name``, if a template is configured."""

        if self.remnant_template is None:
            return None
        return self.remnant_template.replace(SHEET_NAME_PLACEHOLDER, sheet_name)

from __future__ import annotations

import os
from abc import ABC, abstractmethod

import aiofiles

from ..core.exceptions import OutputError
from ..models.report import FleetSummary


class BaseExporter(ABC):
    """Abstract base class for report exporters.

    Subclasses implement `render`; `export` writes the rendering to disk.
    """

    DEFAULT_FILENAME: str = "cbsummary.out"

    @abstractmethod
    def render(self, summary: FleetSummary) -> str:
        """Serialize the summary to text."""
        raise NotImplementedError()

    async def export(self, summary: FleetSummary, path: str | None = None) -> str:
        """Render the summary and write it to `path`. Return the written path."""
        out_path = path or self.DEFAULT_FILENAME
        try:
            content = self.render(summary)
        except (TypeError, ValueError) as e:
            raise OutputError(f"Error serializing summary: {e}") from e

        try:
            os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
            async with aiofiles.open(out_path, "w", encoding="utf-8", newline="") as fh:
                await fh.write(content)
        except OSError as e:
            raise OutputError(f"Error writing output file {out_path}: {e}") from e
        return out_path

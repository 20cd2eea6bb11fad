"""JSONL frame recorder - captures scene states for offline rendering."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from reel import FrameContext
from reel_chat import SceneRenderState


class FrameRecorder:
    """Player sink that accumulates one JSON record per frame."""

    def __init__(self) -> None:
        self._records: list[dict[str, Any]] = []

    def __call__(self, ctx: FrameContext, state: SceneRenderState) -> None:
        record = state.as_dict()
        record["t"] = ctx.elapsed
        self._records.append(record)

    @property
    def count(self) -> int:
        return len(self._records)

    def write(self, path: str | Path) -> int:
        """Write all records as JSONL. Returns number of lines written."""
        p = Path(path)
        with p.open("w") as f:
            for record in self._records:
                f.write(json.dumps(record) + "\n")
        return len(self._records)

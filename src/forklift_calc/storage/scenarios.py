"""Named TCO scenarios kept in a small JSON key-value file.

File layout::

    {"forklift_scenarios": {"<name>": {"name": ..., "preset_key": ..., <TcoInputs fields>}}}

Only TCO fields are stored.  A missing file is an empty store; a file that
cannot be read or parsed is logged and treated as empty so the calculator
keeps working.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from forklift_calc.config.tco import TcoInputs

logger = logging.getLogger(__name__)

STORAGE_KEY = "forklift_scenarios"


class ScenarioStore:
    """Save, list, load and delete named snapshots of :class:`TcoInputs`."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    # ── Public API ─────────────────────────────────────────────────────

    def names(self) -> list[str]:
        return sorted(self._read())

    def save(self, name: str, inputs: TcoInputs, preset_key: str | None = None) -> None:
        """Store (or overwrite) a scenario.  Blank names raise ``ValueError``."""
        name = name.strip()
        if not name:
            raise ValueError("scenario name must not be blank")
        scenarios = self._read()
        scenarios[name] = {**inputs.model_dump(), "name": name, "preset_key": preset_key}
        self._write(scenarios)
        logger.info("Saved scenario %r to %s", name, self.path)

    def load(self, name: str) -> tuple[TcoInputs, str | None] | None:
        """Return ``(inputs, preset_key)`` or ``None`` if there is no such scenario."""
        snapshot = self._read().get(name)
        if snapshot is None:
            return None
        # Unknown keys (name, preset_key, fields from older versions) are ignored
        return TcoInputs.model_validate(snapshot), snapshot.get("preset_key")

    def delete(self, name: str) -> bool:
        scenarios = self._read()
        if name not in scenarios:
            return False
        del scenarios[name]
        self._write(scenarios)
        logger.info("Deleted scenario %r from %s", name, self.path)
        return True

    # ── File I/O ───────────────────────────────────────────────────────

    def _read(self) -> dict[str, dict[str, Any]]:
        if not self.path.exists():
            return {}
        try:
            document = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            logger.exception("Failed to load scenarios from %s", self.path)
            return {}
        scenarios = document.get(STORAGE_KEY, {}) if isinstance(document, dict) else {}
        if not isinstance(scenarios, dict):
            logger.error("Ignoring malformed %r entry in %s", STORAGE_KEY, self.path)
            return {}
        return {k: v for k, v in scenarios.items() if isinstance(v, dict)}

    def _write(self, scenarios: dict[str, dict[str, Any]]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({STORAGE_KEY: scenarios}, indent=2), encoding="utf-8")

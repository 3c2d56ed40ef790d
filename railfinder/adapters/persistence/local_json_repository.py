from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from railfinder.domain.exceptions import CatalogUnavailable

from .json_document_repository import JsonDocumentRepository


@dataclass(slots=True)
class LocalJsonRepository(JsonDocumentRepository):
    """Loads trains, stations and passengers from a directory of JSON files.

    Env vars:
      - RAILFINDER_DATA_PATH: directory containing trains.json, stations.json
        and passengers.json (default: data)
    """

    base_path: str | Path | None = None

    def _base(self) -> Path:
        value = self.base_path or os.getenv("RAILFINDER_DATA_PATH") or "data"
        return Path(value)

    def read_document(self, name: str) -> Any:
        path = self._base() / name
        try:
            with path.open("r", encoding="utf-8") as fp:
                return json.load(fp)
        except (OSError, json.JSONDecodeError) as exc:
            raise CatalogUnavailable(f"{path}: {exc}") from exc

"""Read and write tower JSON files.

Two layouts are accepted on load:

* a bare list of towers: ``[{"id": 1, "lat": ..., "lng": ...}, ...]``
* a saved session: ``{"towers": [...], "precision": 0.001}``

Saving always writes the session layout.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional, Sequence, Union

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from ..core.types import Tower

logger = logging.getLogger(__name__)


class TowerFileError(ValueError):
    """Tower file is not valid JSON or not one of the accepted layouts."""


class TowerModel(BaseModel):
    id: Optional[Union[int, str]] = None
    lat: float = Field(ge=-90.0, le=90.0)
    lng: float = Field(ge=-180.0, le=180.0)

    def to_tower(self) -> Tower:
        return Tower.from_dict(self.model_dump())


class TowerSession(BaseModel):
    towers: List[TowerModel]
    precision: float = Field(gt=0.0)


_TOWER_LIST = TypeAdapter(List[TowerModel])


@dataclass
class TowerDocument:
    towers: List[Tower]
    precision: Optional[float] = None
    """Grid precision stored with the towers, if the file had one."""


def parse_tower_document(data: Any) -> TowerDocument:
    """Validate decoded JSON and convert it to towers.

    Raises
    ------
    TowerFileError
        If *data* matches neither layout.
    """
    try:
        if isinstance(data, list):
            models = _TOWER_LIST.validate_python(data)
            return TowerDocument(towers=[m.to_tower() for m in models])
        if isinstance(data, dict):
            session = TowerSession.model_validate(data)
            return TowerDocument(
                towers=[m.to_tower() for m in session.towers],
                precision=session.precision,
            )
    except ValidationError as exc:
        raise TowerFileError(f"Invalid file format: {exc}") from exc
    raise TowerFileError(
        f"Invalid file format: expected a list of towers or an object, got {type(data).__name__}"
    )


def loads_towers(text: str) -> TowerDocument:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise TowerFileError(f"Invalid JSON: {exc}") from exc
    return parse_tower_document(data)


def load_towers(path: Union[str, Path]) -> TowerDocument:
    """Load a tower file from disk."""
    text = Path(path).read_text(encoding="utf-8")
    try:
        doc = loads_towers(text)
    except TowerFileError:
        logger.warning("Rejected tower file %s", path)
        raise
    logger.info("Loaded %d towers from %s", len(doc.towers), path)
    return doc


def dump_towers(towers: Sequence[Tower], precision: float) -> str:
    """Serialise towers and precision as an indented session document."""
    payload = {"towers": [t.to_dict() for t in towers], "precision": precision}
    return json.dumps(payload, indent=2)


def save_towers(path: Union[str, Path], towers: Sequence[Tower], precision: float) -> Path:
    path = Path(path)
    path.write_text(dump_towers(towers, precision), encoding="utf-8")
    logger.info("Saved %d towers to %s", len(towers), path)
    return path

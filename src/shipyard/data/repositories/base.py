"""Base repository for grouped JSON catalogs.

Catalog files map a group name to an object of definitions keyed by id:
``{grp: {id: payload}}``. Ids are unique across every group in a file.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Generic, TypeVar

from shipyard.data.errors import DataReferenceError, DataValidationError
from shipyard.data.json_loader import load_json
from shipyard.data import paths

T = TypeVar("T")

logger = logging.getLogger(__name__)


class RepositoryBase(Generic[T]):
    """Lazy loading, caching and group indexing for catalog repositories."""

    def __init__(self, filename: str, base_path: Path | str | None = None) -> None:
        self._filename = filename
        self._base_path = Path(base_path) if base_path is not None else None
        self._definitions: Dict[str, T] | None = None
        self._groups: Dict[str, list[str]] = {}

    def _get_file_path(self) -> Path:
        definitions_dir = paths.get_definitions_path(self._base_path)
        return definitions_dir / self._filename

    def _load_raw(self) -> dict[str, object]:
        file_path = self._get_file_path()
        raw = load_json(file_path)
        if not isinstance(raw, dict):
            raise DataValidationError(f"Expected top-level object in {file_path}")
        return raw

    def _build_entry(self, grp: str, def_id: str, payload: dict[str, object]) -> T:
        """Convert one raw catalog entry into a typed definition."""
        raise NotImplementedError

    def _ensure_loaded(self) -> None:
        if self._definitions is not None:
            return
        definitions: Dict[str, T] = {}
        groups: Dict[str, list[str]] = {}
        owners: Dict[str, str] = {}
        for grp, group_payload in self._load_raw().items():
            group_data = self._require_mapping(group_payload, f"group '{grp}'")
            for def_id, payload in group_data.items():
                if def_id in owners:
                    raise DataReferenceError(
                        f"Id '{def_id}' appears in groups '{owners[def_id]}' and '{grp}'."
                    )
                entry = self._require_mapping(payload, f"entry '{def_id}'")
                definitions[def_id] = self._build_entry(grp, def_id, entry)
                owners[def_id] = grp
                groups.setdefault(grp, []).append(def_id)
        self._definitions = definitions
        self._groups = groups
        logger.debug(
            "Loaded %d definitions in %d groups from %s",
            len(definitions),
            len(groups),
            self._filename,
        )

    def get(self, def_id: str) -> T:
        """Return a definition by id."""
        self._ensure_loaded()
        assert self._definitions is not None
        try:
            return self._definitions[def_id]
        except KeyError as exc:
            raise KeyError(def_id) from exc

    def get_in_group(self, grp: str, def_id: str) -> T:
        """Return a definition by id, raising KeyError unless it sits in ``grp``."""
        self._ensure_loaded()
        if def_id not in self._groups.get(grp, ()):
            logger.debug("No entry '%s' in group '%s'", def_id, grp)
            raise KeyError(def_id)
        return self.get(def_id)

    def all(self) -> list[T]:
        """Return all definitions sorted deterministically by id."""
        self._ensure_loaded()
        assert self._definitions is not None
        return [self._definitions[key] for key in sorted(self._definitions.keys())]

    def by_group(self, grp: str) -> list[T]:
        """Return definitions in ``grp`` sorted by id; unknown groups give []."""
        self._ensure_loaded()
        assert self._definitions is not None
        return [self._definitions[key] for key in sorted(self._groups.get(grp, ()))]

    def groups(self) -> list[str]:
        """Return the sorted names of groups that hold at least one entry."""
        self._ensure_loaded()
        return sorted(self._groups)

    @staticmethod
    def _require_mapping(value: object, context: str) -> dict[str, object]:
        if not isinstance(value, dict):
            raise DataValidationError(f"{context} must be an object/dict.")
        return value

"""Keyed directory lookup that reports misses as values rather than exceptions."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from .errors import DirectoryLoadError
from .outcome import Found, NotFound, Outcome

DEFAULT_ENTRIES: Mapping[str, str] = MappingProxyType({"johnsmith": "John Smith"})


class KeyedLookup:
    """Read-only mapping of user keys to display names.

    Keys match exactly: case-sensitive, no trimming. Every ``lookup`` returns
    either ``Found`` or ``NotFound``.
    """

    def __init__(
        self,
        entries: Mapping[str, str] | None = None,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        source = DEFAULT_ENTRIES if entries is None else entries
        self._entries: Mapping[str, str] = MappingProxyType(dict(source))
        self._logger = logger or logging.getLogger("refkit.directory")

    @classmethod
    def from_json_file(cls, path: str | Path, *, logger: logging.Logger | None = None) -> KeyedLookup:
        """Load entries from a JSON object of string keys to string values."""
        target = Path(path).expanduser()
        try:
            payload = json.loads(target.read_text(encoding="utf-8"))
        except OSError as exc:
            raise DirectoryLoadError(f"Unable to read directory file: {target}") from exc
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise DirectoryLoadError(f"Directory file is not valid UTF-8 JSON: {target}") from exc

        if not isinstance(payload, dict):
            raise DirectoryLoadError(f"Directory file must contain a JSON object: {target}")
        for key, value in payload.items():
            if not isinstance(value, str):
                raise DirectoryLoadError(f"Directory entry {key!r} must map to a string, got {value!r}")

        lookup = cls(payload, logger=logger)
        lookup._logger.info("directory_loaded", extra={"path": str(target), "entry_count": len(payload)})
        return lookup

    def lookup(self, key: str) -> Outcome:
        if key in self._entries:
            return Found(self._entries[key])

        self._logger.debug("lookup_miss", extra={"key": key})
        return NotFound(f"user '{key}' not in database")

    def keys(self) -> list[str]:
        return sorted(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

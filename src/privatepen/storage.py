from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Dict, List, TypeVar

from filelock import FileLock

from .errors import StorageError
from .models import Snippet, StatsDelta, StyleProfile, WritingStats, to_epoch_millis
from .stats import empty_stats, fold_stats

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_STORE_PATH = Path.home() / ".privatepen" / "storage.json"
THEMES = ("auto", "light", "dark")


@dataclass(slots=True)
class ExtensionSettings:
    """Flat user preferences kept alongside the stats record."""

    privacy_mode: bool = True
    theme: str = "auto"
    whisper_mode: bool = False
    auto_complete: bool = False
    language: str = "en"

    def __post_init__(self) -> None:
        if self.theme not in THEMES:
            raise ValueError(f"Unknown theme '{self.theme}'. Expected one of {', '.join(THEMES)}.")

    def to_dict(self) -> dict[str, Any]:
        return {
            "privacyMode": self.privacy_mode,
            "theme": self.theme,
            "whisperMode": self.whisper_mode,
            "autoComplete": self.auto_complete,
            "language": self.language,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ExtensionSettings":
        privacy = data.get("privacyMode")
        return cls(
            privacy_mode=True if privacy is None else bool(privacy),
            theme=str(data.get("theme") or "auto"),
            whisper_mode=bool(data.get("whisperMode", False)),
            auto_complete=bool(data.get("autoComplete", False)),
            language=str(data.get("language") or "en"),
        )


def default_record() -> Dict[str, Any]:
    """The record written on first use."""
    record: Dict[str, Any] = ExtensionSettings().to_dict()
    record["writingStats"] = empty_stats().to_dict()
    record["styleProfile"] = None
    record["snippets"] = []
    return record


class RecordStore:
    """A single JSON document holding settings, stats, snippets and the style profile."""

    def __init__(self, path: str | Path | None = None) -> None:
        self._path = Path(path) if path is not None else DEFAULT_STORE_PATH
        # Held across processes for every read-modify-write of the record.
        self._lock = FileLock(f"{self._path}.lock")

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Dict[str, Any]:
        """Read the whole record, falling back to defaults for missing keys."""
        record = default_record()
        if not self._path.exists():
            return record
        try:
            contents = self._path.read_text(encoding="utf-8")
            parsed = json.loads(contents) if contents.strip() else {}
        except (OSError, json.JSONDecodeError) as exc:
            raise StorageError(f"Could not read record at {self._path}: {exc}") from exc
        if not isinstance(parsed, dict):
            raise StorageError(f"Record at {self._path} must be a JSON object.")
        record.update(parsed)
        return record

    def get(self, key: str) -> Any:
        return self.load().get(key)

    def set(self, **values: Any) -> None:
        with self._locked():
            record = self.load()
            record.update(values)
            self._write(record)

    def _write(self, record: Dict[str, Any]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self._path.name}.", dir=str(self._path.parent)
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(record, handle, indent=2, ensure_ascii=False)
            os.replace(tmp_name, self._path)
        except OSError as exc:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageError(f"Could not write record at {self._path}: {exc}") from exc
        LOGGER.debug("Wrote record to %s", self._path)

    def _locked(self) -> FileLock:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(f"Could not create directory for {self._path}: {exc}") from exc
        return self._lock

    def _decode(self, key: str, build: Callable[[Any], T]) -> T:
        """Build a model from one record entry, treating malformed data as a storage fault."""
        try:
            return build(self.get(key))
        except (AttributeError, TypeError, ValueError) as exc:
            raise StorageError(f"Invalid '{key}' entry in {self._path}: {exc}") from exc

    # Stats

    def read_stats(self) -> WritingStats:
        return self._decode("writingStats", WritingStats.from_dict)

    def update_stats(self, delta: StatsDelta) -> WritingStats:
        """Read-modify-write the stats record with one session's delta."""
        with self._locked():
            updated = fold_stats(self.read_stats(), delta)
            self.set(writingStats=updated.to_dict())
        return updated

    def reset_stats(self) -> WritingStats:
        stats = empty_stats()
        self.set(writingStats=stats.to_dict())
        LOGGER.info("Statistics reset")
        return stats

    # Style profile

    def save_style_profile(self, profile: StyleProfile) -> None:
        self.set(styleProfile=profile.to_dict())

    def read_style_profile(self) -> StyleProfile | None:
        return self._decode(
            "styleProfile", lambda data: StyleProfile.from_dict(data) if data else None
        )

    # Snippets

    def list_snippets(self) -> List[Snippet]:
        return self._decode(
            "snippets", lambda items: [Snippet.from_dict(item) for item in items or []]
        )

    def add_snippet(self, title: str, content: str, now: datetime | None = None) -> Snippet:
        title = title.strip()
        content = content.strip()
        if not title or not content:
            raise ValueError("Please fill in both title and content")
        snippet = Snippet(
            title=title,
            content=content,
            created_at=to_epoch_millis(now or datetime.now(timezone.utc)),
        )
        with self._locked():
            snippets = self.get("snippets") or []
            snippets.append(snippet.to_dict())
            self.set(snippets=snippets)
        return snippet

    def delete_snippet(self, index: int) -> Snippet:
        with self._locked():
            snippets = self.get("snippets") or []
            if index < 0 or index >= len(snippets):
                raise IndexError(f"No snippet at index {index}.")
            removed = snippets.pop(index)
            self.set(snippets=snippets)
        return Snippet.from_dict(removed)

    # Settings

    def read_settings(self) -> ExtensionSettings:
        try:
            return ExtensionSettings.from_dict(self.load())
        except ValueError as exc:
            raise StorageError(f"Invalid settings in {self._path}: {exc}") from exc

    def save_settings(self, settings: ExtensionSettings) -> None:
        self.set(**settings.to_dict())

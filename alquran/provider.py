"""
provider.py — Lazily loaded verse text and translation stores.

Each store is built once, on first access, by whichever thread gets
there first; other threads wait on the same lock and then share the
result. Stores are never written after that.

A missing or unreadable data file gives an empty store (and a warning),
so the metadata half of the library keeps working without text data.
"""
import gzip
import json
import logging
import threading
from pathlib import Path
from typing import Any, Callable, Generic, TypeVar

from . import config
from .enums import ScriptType, TranslationEdition
from .metadata import SAJDA_BY_VERSE, TOTAL_SURAHS, TRANSLATION_BY_EDITION
from .models import Ayah, TranslatedAyah

logger = logging.getLogger(__name__)

T = TypeVar("T")

_UNSET = object()


class Lazy(Generic[T]):
    """A value computed exactly once, on first access, safe across threads."""

    def __init__(self, factory: Callable[[], T]):
        self._factory = factory
        self._lock = threading.Lock()
        self._value: Any = _UNSET

    @property
    def is_loaded(self) -> bool:
        return self._value is not _UNSET

    @property
    def value(self) -> T:
        if self._value is _UNSET:
            with self._lock:
                if self._value is _UNSET:
                    self._value = self._factory()
        return self._value


# ---------------------------------------------------------------------------
# File loading
# ---------------------------------------------------------------------------

def _read_entries(data_dir: Path, filenames: list[str]) -> list[dict[str, Any]]:
    """Read the first existing JSON (optionally gzipped) file from *filenames*."""
    for filename in filenames:
        path = data_dir / filename
        if not path.exists():
            continue
        try:
            if path.suffix == ".gz":
                with gzip.open(path, "rt", encoding="utf-8") as f:
                    entries = json.load(f)
            else:
                entries = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read {path}: {e}")
            return []
        if not isinstance(entries, list):
            logger.warning(f"Unexpected data layout in {path}; expected a list of entries")
            return []
        return entries

    logger.warning(f"No data file found in {data_dir} (tried {', '.join(filenames)}); "
                   "run alquran-fetch to download it")
    return []


def _group_by_surah(items: list) -> dict[int, list]:
    store: dict[int, list] = {}
    for item in items:
        store.setdefault(item.surah_number, []).append(item)
    for ayahs in store.values():
        ayahs.sort(key=lambda a: a.ayah_number)
    return store


def load_ayahs(data_dir: Path, script_type: ScriptType) -> dict[int, list[Ayah]]:
    """
    Build the verse store for one script variant.

    Returns:
        {surah_number: [Ayah, ...]} with ayahs in ascending order
    """
    entries = _read_entries(data_dir, config.TEXT_SOURCES[script_type.value])
    ayahs = []
    for entry in entries:
        try:
            surah = int(entry["surah"])
            number = int(entry["ayah"])
            ayahs.append(Ayah(
                surah_number=surah,
                ayah_number=number,
                text=entry.get("text") or "",
                juz=int(entry.get("juz") or 0),
                page=int(entry.get("page") or 0),
                hizb_quarter=int(entry.get("hizbQuarter") or 0),
                has_sajda=(surah, number) in SAJDA_BY_VERSE,
            ))
        except (AttributeError, KeyError, TypeError, ValueError):
            logger.warning(f"Skipping malformed verse entry: {entry!r}")

    store = _group_by_surah(ayahs)
    if store:
        logger.info(f"Loaded {len(ayahs)} ayahs ({script_type.value}) from {data_dir}")
    return store


def load_translation(data_dir: Path, edition: TranslationEdition) -> dict[int, list[TranslatedAyah]]:
    """Build the store for one translation edition."""
    info = TRANSLATION_BY_EDITION.get(edition)
    if info is None:
        return {}

    entries = _read_entries(
        data_dir, [f"{info.resource_name}.json.gz", f"{info.resource_name}.json"]
    )
    ayahs = []
    for entry in entries:
        try:
            ayahs.append(TranslatedAyah(
                surah_number=int(entry["surah"]),
                ayah_number=int(entry["ayah"]),
                text=entry.get("text") or "",
                edition=edition,
            ))
        except (AttributeError, KeyError, TypeError, ValueError):
            logger.warning(f"Skipping malformed translation entry: {entry!r}")

    store = _group_by_surah(ayahs)
    if store:
        logger.info(f"Loaded {len(ayahs)} ayahs of {info.name} from {data_dir}")
    return store


# ---------------------------------------------------------------------------
# Provider
# ---------------------------------------------------------------------------

class TextProvider:
    """Verse text and translations for one data directory."""

    def __init__(self, data_dir: Path | str | None = None):
        self.data_dir = Path(data_dir) if data_dir is not None else config.DATA_DIR
        self._scripts: dict[ScriptType, Lazy[dict[int, list[Ayah]]]] = {
            script: Lazy(lambda s=script: load_ayahs(self.data_dir, s))
            for script in ScriptType
        }
        self._translations: dict[TranslationEdition, Lazy[dict[int, list[TranslatedAyah]]]] = {
            edition: Lazy(lambda e=edition: load_translation(self.data_dir, e))
            for edition in TranslationEdition
        }

    # Arabic text

    def store(self, script_type: ScriptType) -> dict[int, list[Ayah]]:
        return self._scripts[script_type].value

    def ayahs_for_surah(self, surah_number: int, script_type: ScriptType) -> list[Ayah]:
        return list(self.store(script_type).get(surah_number, []))

    def ayah(self, surah_number: int, ayah_number: int, script_type: ScriptType) -> Ayah | None:
        for ayah in self.store(script_type).get(surah_number, []):
            if ayah.ayah_number == ayah_number:
                return ayah
        return None

    def all_ayahs(self, script_type: ScriptType) -> list[Ayah]:
        store = self.store(script_type)
        return [a for n in range(1, TOTAL_SURAHS + 1) for a in store.get(n, [])]

    def is_available(self, script_type: ScriptType) -> bool:
        return len(self.store(script_type)) > 0

    # Translations

    def translation_store(self, edition: TranslationEdition) -> dict[int, list[TranslatedAyah]]:
        return self._translations[edition].value

    def translations_for_surah(self, surah_number: int,
                               edition: TranslationEdition) -> list[TranslatedAyah]:
        return list(self.translation_store(edition).get(surah_number, []))

    def translation(self, surah_number: int, ayah_number: int,
                    edition: TranslationEdition) -> TranslatedAyah | None:
        for ayah in self.translation_store(edition).get(surah_number, []):
            if ayah.ayah_number == ayah_number:
                return ayah
        return None

    def is_translation_available(self, edition: TranslationEdition) -> bool:
        return len(self.translation_store(edition)) > 0

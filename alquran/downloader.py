"""
downloader.py — Fetch verse text and translations from alquran.cloud.

Writes the gzipped JSON files the text provider reads into the data
directory (config.DATA_DIR unless given):

    alquran-fetch                    # Uthmani and Simple scripts
    alquran-fetch en.sahih ur.maududi
    alquran-fetch all --force        # every translation, overwrite existing
"""
import gzip
import json
import logging
import sys
import urllib.request
from pathlib import Path

from . import config
from .enums import ScriptType, TranslationEdition
from .metadata import TRANSLATION_BY_EDITION, TRANSLATIONS

logger = logging.getLogger(__name__)

SCRIPT_EDITIONS = {
    ScriptType.UTHMANI: "quran-uthmani",
    ScriptType.SIMPLE: "quran-simple",
}

RETRIES = 3


def fetch_edition(identifier: str) -> list[dict] | None:
    """
    Download one full edition from the API.

    Returns:
        The edition's list of surah objects, or None after RETRIES failures
    """
    url = f"{config.QURAN_API}/quran/{identifier}"
    for attempt in range(RETRIES):
        try:
            logger.info(f"Downloading {identifier} (attempt {attempt + 1})")
            with urllib.request.urlopen(url, timeout=60) as response:
                payload = json.loads(response.read().decode("utf-8"))
            return payload["data"]["surahs"]
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.warning(f"Download attempt {attempt + 1} failed for {identifier}: {e}")
    return None


def verse_entries(surahs: list[dict], with_positions: bool = True) -> list[dict]:
    """Flatten API surah objects into the on-disk entry layout."""
    entries = []
    for surah in surahs:
        for ayah in surah["ayahs"]:
            entry = {"surah": surah["number"], "ayah": ayah["numberInSurah"], "text": ayah["text"]}
            if with_positions:
                entry["juz"] = ayah.get("juz")
                entry["page"] = ayah.get("page")
                entry["hizbQuarter"] = ayah.get("hizbQuarter")
            entries.append(entry)
    return entries


def write_entries(path: Path, entries: list[dict]) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    partial = path.with_name(path.name + ".part")
    with gzip.open(partial, "wt", encoding="utf-8") as f:
        json.dump(entries, f, ensure_ascii=False)
    partial.replace(path)
    logger.info(f"Wrote {len(entries)} entries to {path}")
    return path


def _download(identifier: str, path: Path, with_positions: bool, force: bool) -> Path | None:
    if path.exists() and not force:
        logger.info(f"{path.name} already exists, skipping")
        return path

    surahs = fetch_edition(identifier)
    if surahs is None:
        return None
    try:
        entries = verse_entries(surahs, with_positions)
    except (KeyError, TypeError) as e:
        logger.warning(f"Unexpected response layout for {identifier}: {e}")
        return None
    return write_entries(path, entries)


def download_script(script_type: ScriptType, data_dir: Path | str | None = None,
                    force: bool = False) -> Path | None:
    """Download one script variant; returns the written path or None on failure."""
    data_dir = Path(data_dir) if data_dir is not None else config.DATA_DIR
    path = data_dir / config.TEXT_SOURCES[script_type.value][0]
    return _download(SCRIPT_EDITIONS[script_type], path, True, force)


def download_translation(edition: TranslationEdition, data_dir: Path | str | None = None,
                         force: bool = False) -> Path | None:
    """Download one translation edition; returns the written path or None on failure."""
    info = TRANSLATION_BY_EDITION[edition]
    data_dir = Path(data_dir) if data_dir is not None else config.DATA_DIR
    path = data_dir / f"{info.resource_name}.json.gz"
    return _download(info.api_identifier, path, False, force)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    force = "--force" in args
    wanted = [a for a in args if a != "--force"]

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    by_identifier = {t.api_identifier: t for t in TRANSLATIONS}
    if "all" in wanted:
        wanted = list(by_identifier)

    unknown = [w for w in wanted if w not in by_identifier]
    if unknown:
        print(f"Unknown edition(s): {', '.join(unknown)}")
        print(f"Available: all, {', '.join(by_identifier)}")
        return 2

    failed = [s.value for s in ScriptType if download_script(s, force=force) is None]
    failed += [w for w in wanted
               if download_translation(by_identifier[w].edition, force=force) is None]

    if failed:
        logger.error(f"Failed to download: {', '.join(failed)}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

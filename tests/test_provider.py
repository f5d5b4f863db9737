"""
Tests for lazy, thread-safe loading of the text stores.
"""

import gzip
import json
import threading
import time

from alquran import Quran, ScriptType, TranslationEdition
from alquran import provider as provider_module
from alquran.provider import Lazy, TextProvider, load_ayahs


def test_lazy_runs_factory_once_across_threads():
    calls = []

    def factory():
        calls.append(1)
        time.sleep(0.05)
        return {"value": 42}

    lazy = Lazy(factory)
    barrier = threading.Barrier(16)
    results = []

    def worker():
        barrier.wait()
        results.append(lazy.value)

    threads = [threading.Thread(target=worker) for _ in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(calls) == 1
    assert len(results) == 16
    assert all(r is results[0] for r in results)


def test_lazy_not_loaded_until_read():
    lazy = Lazy(lambda: 1)
    assert not lazy.is_loaded
    assert lazy.value == 1
    assert lazy.is_loaded


def test_store_loaded_once_under_concurrency(data_dir, monkeypatch):
    calls = []

    def counting_load(path, script_type):
        calls.append(script_type)
        time.sleep(0.05)
        return load_ayahs(path, script_type)

    monkeypatch.setattr(provider_module, "load_ayahs", counting_load)
    quran = Quran(data_dir=data_dir, script_type=ScriptType.UTHMANI)

    barrier = threading.Barrier(12)
    counts = []

    def worker():
        barrier.wait()
        counts.append(len(quran.search("رب")))

    threads = [threading.Thread(target=worker) for _ in range(12)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert calls == [ScriptType.UTHMANI]
    assert counts == [counts[0]] * 12


def test_reads_gzip_and_plain_json(data_dir):
    provider = TextProvider(data_dir)
    assert len(provider.ayahs_for_surah(1, ScriptType.UTHMANI)) == 7
    assert len(provider.ayahs_for_surah(1, ScriptType.SIMPLE)) == 7


def test_all_ayahs_in_corpus_order(data_dir):
    keys = [a.key for a in TextProvider(data_dir).all_ayahs(ScriptType.SIMPLE)]
    assert keys[:2] == ["1:1", "1:2"]
    assert keys[7] == "96:19"
    assert keys[-1] == "114:6"


def test_missing_directory_gives_empty_store(tmp_path):
    provider = TextProvider(tmp_path / "nothing-here")
    assert provider.store(ScriptType.UTHMANI) == {}
    assert not provider.is_available(ScriptType.UTHMANI)
    assert provider.ayah(1, 1, ScriptType.UTHMANI) is None


def test_malformed_entries_are_skipped(tmp_path, caplog):
    entries = [
        {"surah": 1, "ayah": 1, "text": "بسم الله الرحمن الرحيم", "juz": 1, "page": 1},
        {"surah": 1, "text": "no ayah number"},
        {"surah": "x", "ayah": 2, "text": "bad surah"},
        "not an object",
    ]
    (tmp_path / "quran_simple.json").write_text(
        json.dumps(entries, ensure_ascii=False), encoding="utf-8"
    )

    with caplog.at_level("WARNING"):
        store = load_ayahs(tmp_path, ScriptType.SIMPLE)

    assert [a.key for a in store[1]] == ["1:1"]
    assert store[1][0].hizb_quarter == 0
    assert "Skipping malformed verse entry" in caplog.text


def test_corrupt_file_gives_empty_store(tmp_path, caplog):
    (tmp_path / "quran_uthmani.json.gz").write_bytes(b"not gzip at all")
    with caplog.at_level("WARNING"):
        assert load_ayahs(tmp_path, ScriptType.UTHMANI) == {}
    assert "Could not read" in caplog.text


def test_non_list_file_gives_empty_store(tmp_path):
    with gzip.open(tmp_path / "quran_uthmani.json.gz", "wt", encoding="utf-8") as f:
        json.dump({"surah": 1}, f)
    assert load_ayahs(tmp_path, ScriptType.UTHMANI) == {}


def test_gzip_preferred_over_plain(tmp_path):
    with gzip.open(tmp_path / "quran_simple.json.gz", "wt", encoding="utf-8") as f:
        json.dump([{"surah": 1, "ayah": 1, "text": "gz"}], f)
    (tmp_path / "quran_simple.json").write_text(
        json.dumps([{"surah": 1, "ayah": 1, "text": "plain"}]), encoding="utf-8"
    )
    assert load_ayahs(tmp_path, ScriptType.SIMPLE)[1][0].text == "gz"


def test_translation_store(data_dir):
    provider = TextProvider(data_dir)
    edition = TranslationEdition.ENGLISH_SAHEEH_INTERNATIONAL
    assert provider.is_translation_available(edition)
    assert provider.translation(112, 1, edition).text.startswith("Say")
    assert provider.translation(112, 2, edition) is None

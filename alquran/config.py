import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

BASE_DIR = Path(__file__).parent
DATA_DIR = Path(os.getenv("ALQURAN_DATA_DIR", str(BASE_DIR / "data")))

# "uthmani" (full tashkeel) or "simple"
DEFAULT_SCRIPT = os.getenv("ALQURAN_DEFAULT_SCRIPT", "uthmani").strip().lower()

# Verse text files, tried in order
TEXT_SOURCES = {
    "uthmani": ["quran_uthmani.json.gz", "quran_uthmani.json"],
    "simple":  ["quran_simple.json.gz", "quran_simple.json"],
}

# Source for the downloader
QURAN_API = os.getenv("ALQURAN_API", "https://api.alquran.cloud/v1")

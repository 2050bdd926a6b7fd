# app/services/language.py
from __future__ import annotations

import logging
import re

log = logging.getLogger("chef_ai.language")

INDONESIAN_MARKERS = (
    # function words
    "yang", "dengan", "untuk", "dari", "dan", "atau", "ini", "itu", "adalah", "akan",
    "sudah", "belum", "bisa", "tidak", "bukan", "juga", "saja", "hanya", "masih",
    # cooking
    "masak", "memasak", "resep", "bahan", "bumbu", "goreng", "rebus", "tumis",
    "bakar", "kukus", "sajikan", "hidangkan", "potong", "iris", "cincang",
    # question words
    "apa", "bagaimana", "cara", "kapan", "dimana", "kenapa", "mengapa",
    # particles
    "di", "ke", "pada", "dalam", "oleh",
)

# Share of tokens (percent) that must be Indonesian markers
INDONESIAN_THRESHOLD = 15.0

_MARKER_PATTERNS = [re.compile(rf"\b{re.escape(w)}\b", re.IGNORECASE) for w in INDONESIAN_MARKERS]


def detect_language(text: str) -> str:
    normalized = (text or "").lower()
    total_words = max(1, len(normalized.split()))

    score = sum(len(p.findall(normalized)) for p in _MARKER_PATTERNS)
    percentage = score / total_words * 100
    language = "id" if percentage > INDONESIAN_THRESHOLD else "en"

    log.debug(
        "language detected",
        extra={"score": score, "total_words": total_words, "percentage": round(percentage, 1), "language": language},
    )
    return language

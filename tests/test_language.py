from __future__ import annotations

from app.services.language import detect_language


def test_indonesian_question_detected():
    assert detect_language("Bagaimana cara memasak nasi goreng yang enak") == "id"


def test_english_question_detected():
    assert detect_language("How do I cook fried rice well") == "en"


def test_empty_and_blank_input_is_english():
    assert detect_language("") == "en"
    assert detect_language("   ") == "en"


def test_case_insensitive():
    assert detect_language("RESEP AYAM") == "id"


def test_threshold_is_strictly_above_fifteen_percent():
    # 1 marker in 6 tokens = 16.7%
    assert detect_language("please cook the chicken dengan rice") == "id"
    # 1 marker in 7 tokens = 14.3%
    assert detect_language("please cook the chicken dengan rice tonight") == "en"


def test_markers_match_whole_words_only():
    # "di" inside "diced", "dan" inside "sedan"
    assert detect_language("diced onions in the sedan") == "en"


def test_each_marker_counts_once_per_occurrence():
    # 1 hit in 7 tokens stays English; weighting "untuk"/"dari" twice would flip it
    assert detect_language("a simple dinner untuk the whole family") == "en"
    assert detect_language("fresh fish dari the market this morning") == "en"
    # 2 hits in 7 tokens
    assert detect_language("fresh fish dari the market untuk dinner") == "id"

from services.text_utils import (
    clamp,
    clean_text,
    estimate_pages,
    normalize_text,
    round_half_up,
    word_count,
)


def test_normalize_text():
    assert normalize_text("  Python\n\tDeveloper  ") == "python developer"


def test_clean_text_keeps_paragraphs():
    assert clean_text("Jane Doe\n\n\n\nPython   developer\t\tSeattle ") == (
        "Jane Doe\n\nPython developer Seattle"
    )


def test_word_count():
    assert word_count("") == 0
    assert word_count("   ") == 0
    assert word_count("one two  three\nfour") == 4


def test_estimate_pages():
    assert estimate_pages("") == 0
    assert estimate_pages(" ".join(["word"] * 500)) == 1
    assert estimate_pages(" ".join(["word"] * 501)) == 2


def test_clamp():
    assert clamp(-5) == 0
    assert clamp(120) == 100
    assert clamp(42.5) == 42.5


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(62.5) == 63
    assert round_half_up(1.49) == 1
    assert round_half_up(0) == 0

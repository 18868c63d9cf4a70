from services.normalizer import normalize, text_length, tokenize


def test_normalize_lowercases_everything():
    assert normalize("Senior PYTHON Dev") == "senior python dev"


def test_normalize_keeps_length_for_sharp_s():
    assert normalize("STRAßE") == "straße"
    assert len(normalize("Straße")) == 6


def test_normalize_empty():
    assert normalize("") == ""


def test_tokenize_splits_on_whitespace_runs():
    assert tokenize("react \t and\n\nnode.js") == ["react", "and", "node.js"]


def test_tokenize_keeps_punctuation_attached():
    assert tokenize("skills, teamwork.") == ["skills,", "teamwork."]


def test_tokenize_keeps_duplicates():
    assert tokenize("agile agile agile") == ["agile", "agile", "agile"]


def test_tokenize_blank():
    assert tokenize("") == []
    assert tokenize("   \n ") == []


def test_tokenize_splits_on_byte_order_mark():
    assert tokenize("react\ufeffdeveloper") == ["react", "developer"]


def test_tokenize_splits_on_unicode_spaces():
    assert tokenize("\u00a0senior\u3000engineer\u2028lead\u202f") == ["senior", "engineer", "lead"]


def test_tokenize_does_not_split_on_ascii_separators():
    assert tokenize("kafka\x1cspark\x1fflink") == ["kafka\x1cspark\x1fflink"]
    assert tokenize("kafka\x85spark") == ["kafka\x85spark"]


def test_text_length_counts_utf16_code_units():
    assert text_length("python") == 6
    assert text_length("\U0001f600") == 2
    assert text_length("") == 0

from services.keyword_gap import (
    KeywordGap,
    analyze_keyword_gap,
    find_missing_keywords,
    qualifying_tokens,
)


def test_qualifying_tokens_excludes_four_chars_and_shorter():
    tokens = ["go", "is", "a", "lean", "fast", "tool", "rapid", "python"]
    assert qualifying_tokens(tokens) == ["rapid", "python"]


def test_qualifying_tokens_keeps_repeats_and_order():
    assert qualifying_tokens(["kafka", "scala", "kafka"]) == ["kafka", "scala", "kafka"]


def test_qualifying_tokens_counts_punctuation():
    # "team," is five characters once the comma is included
    assert qualifying_tokens(["team,", "team"]) == ["team,"]


def test_find_missing_keywords_first_occurrence_order():
    keywords = ["kafka", "python", "spark", "kafka", "airflow"]
    assert find_missing_keywords(keywords, "python developer") == ["kafka", "spark", "airflow"]


def test_find_missing_keywords_substring_match():
    # "react" is found inside "reactive"
    assert find_missing_keywords(["react"], "reactive systems") == []


def test_find_missing_keywords_punctuation_not_stripped():
    assert find_missing_keywords(["skills,"], "strong skills") == ["skills,"]


def test_find_missing_keywords_limit():
    keywords = [f"absent{i:02d}" for i in range(15)]
    assert find_missing_keywords(keywords, "", limit=10) == keywords[:10]


def test_analyze_keyword_gap_counts():
    tokens = "senior python engineer with kafka and kafka streams".split()
    gap = analyze_keyword_gap(tokens, "senior python engineer")
    assert gap.total == 6
    assert gap.missing == ["kafka", "streams"]
    assert gap.matched == 4


def test_analyze_keyword_gap_repeated_miss_counted_once():
    gap = analyze_keyword_gap(["python,", "python,", "python,"], "")
    assert gap.total == 3
    assert gap.missing == ["python,"]
    assert gap.matched == 2


def test_analyze_keyword_gap_no_qualifying_tokens():
    gap = analyze_keyword_gap("go is a lean fast tool".split(), "anything")
    assert gap == KeywordGap(total=0, missing=[])
    assert gap.matched == 0


def test_qualifying_tokens_measure_utf16_length():
    # three letters plus an emoji is five UTF-16 code units
    assert qualifying_tokens(["abc\U0001f600", "abé"]) == ["abc\U0001f600"]

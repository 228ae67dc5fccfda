from script.build_dictionary import extract_words, unique_preserve_order


def test_extract_words_keeps_five_letter_tokens_in_order():
    text = "Crane, STARE and raise; also: cranes, ab, 12345, crane again"
    assert extract_words(text) == ["crane", "stare", "raise", "again"]


def test_unique_preserve_order():
    assert unique_preserve_order(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]

import pytest
from wordsieve.engine import (
    Guess, LetterState, Word,
    score, score_pattern, parse_pattern, format_pattern,
    matches, filter_candidates, filter_words,
)
from wordsieve.engine.constraints import MIN_PARALLEL_CANDIDATES

C, M, A = LetterState.CORRECT, LetterState.MISPLACED, LetterState.ABSENT


def G(word, pattern):
    return Guess.from_pattern(word, pattern)


def words(*ws):
    return [Word(w) for w in ws]


# --- golden scoring tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,answer,expected", [
    ("belle", "level", "-GYYY"),
    ("level", "level", "GGGGG"),
    ("lemon", "level", "GG---"),
    ("cools", "scoop", "YYG-Y"),
    ("crane", "crane", "GGGGG"),
    ("raise", "crane", "YY--G"),
    ("stare", "crane", "--GYG"),
    ("boost", "books", "GGGY-"),
    ("stamp", "steam", "GGYY-"),
    ("tarms", "smart", "YYYYY"),
    ("wound", "chart", "-----"),
    ("spell", "belle", "--YGY"),
    ("happy", "paper", "-GGY-"),
    ("level", "eight", "-Y---"),
])
def test_score_golden(guess, answer, expected):
    assert score_pattern(guess, answer) == expected


def test_score_returns_states():
    assert score(Word("happy"), Word("paper")) == (A, C, C, M, A)


def test_pattern_codec():
    assert parse_pattern("-gY._") == (A, C, M, A, A)
    assert parse_pattern("bxGGy") == (A, A, C, C, M)
    assert format_pattern((A, C, M, A, A)) == "-GY--"


# --- matcher ---
def test_matches_all_correct():
    assert matches(Word("chart"), G("chart", "GGGGG"))
    assert not matches(Word("charm"), G("chart", "GGGGG"))


def test_matches_all_absent():
    assert matches(Word("chart"), G("wound", "-----"))
    assert not matches(Word("sound"), G("wound", "-----"))


def test_matches_all_misplaced_anagram():
    assert matches(Word("smart"), G("tarms", "YYYYY"))
    # same letters but one shares a position -> not all misplaced
    assert not matches(Word("marts"), G("tarms", "YYYYY"))


def test_matches_mixed_states():
    assert matches(Word("steam"), G("stamp", "GGYY-"))
    assert matches(Word("books"), G("boost", "GGGY-"))


def test_happy_against_paper():
    # paper holds two p's: one is matched in place, the other is still
    # available, so the second p of "happy" is misplaced, not absent.
    assert matches(Word("paper"), Guess(Word("happy"), (A, C, C, M, A)))
    assert not matches(Word("paper"), Guess(Word("happy"), (A, C, C, A, A)))


def test_duplicate_guess_letter_single_in_candidate():
    # "level" has e twice, "eight" once: only the first e earns a colour
    eight = Word("eight")
    assert matches(eight, G("level", "-Y---"))
    assert not matches(eight, G("level", "-Y-Y-"))
    assert not matches(eight, G("level", "---Y-"))


def test_exact_match_wins_over_misplaced():
    # "crane" has one e, at the end: the exact hit takes it
    assert matches(Word("crane"), G("belle", "----G"))
    assert not matches(Word("crane"), G("belle", "-Y---"))


# --- filter ---
POOL = words("paint", "taint", "saint", "print", "brain")


def test_filter_single_guess():
    out = filter_candidates(POOL, [G("saint", "-GGGG")])
    assert out == words("paint", "taint")


def test_filter_multiple_guesses():
    out = filter_candidates(POOL, [G("saint", "-GGGG"), G("print", "G-GGG")])
    assert out == words("paint")


def test_filter_empty_history_is_identity():
    assert filter_candidates(POOL, []) == POOL
    assert filter_candidates([], [G("paint", "GGGGG")]) == []


def test_filter_does_not_mutate_inputs():
    pool = list(POOL)
    history = [G("saint", "-GGGG")]
    filter_candidates(pool, history)
    assert pool == POOL and history == [G("saint", "-GGGG")]


def test_filter_duplicate_letters():
    pool = words("belle", "steel", "spell", "eagle", "whale")
    out = filter_candidates(pool, [G("spell", "--YGY")])
    assert Word("belle") in out and Word("spell") not in out


def test_filter_words_skips_malformed_entries():
    out = filter_words(["valid", "toolong", "shor", "VALID "], [G("valid", "GGGGG")])
    assert out == ["valid", "valid"]
    assert filter_words(["hello"], []) == ["hello"]


def test_filter_process_pool_matches_sequential():
    import itertools
    from string import ascii_lowercase
    pool = [Word(a + b + c + "ty")
            for a, b, c in itertools.product(ascii_lowercase, ascii_lowercase, "aeiou")]
    history = [G("party", "-Y-GG"), G("dusty", "---GG")]
    seq = filter_candidates(pool, history)
    par = filter_candidates(pool, history, workers=4)
    assert len(pool) >= MIN_PARALLEL_CANDIDATES
    assert par == seq and Word("aboty") in par
    assert all(w[3:] == "ty" for w in par)

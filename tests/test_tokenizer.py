from wordstats.config import TokenizerConfig
from wordstats.tokenizer import WordTokenizer, iter_words, next_word, tokenize


def test_apostrophes_stay_inside_words():
    assert list(iter_words("don't stop")) == ["don't", "stop"]


def test_terminators_split_into_own_words():
    assert list(iter_words("Hi. Bye!")) == ["hi", ".", "bye", "!"]


def test_case_is_folded():
    assert list(iter_words("Apple apple APPLE")) == ["apple", "apple", "apple"]


def test_digits_and_punctuation_separate_words():
    assert list(iter_words("abc123def, ghi;jkl")) == ["abc", "def", "ghi", "jkl"]


def test_terminator_after_separator_is_counted_once():
    assert list(iter_words("wait  !")) == ["wait", "!"]
    assert list(iter_words("?!")) == ["?", "!"]


def test_next_word_leaves_terminator_unconsumed():
    word, pos = next_word("Hi. Bye!")
    assert (word, pos) == ("hi", 2)
    word, pos = next_word("Hi. Bye!", pos)
    assert (word, pos) == (".", 3)


def test_next_word_on_empty_or_blank_line():
    assert next_word("") == ("", 0)
    assert next_word("  ,; 42 ") == ("", 8)


def test_repeated_calls_consume_whole_line():
    line = "It's 9 o'clock... Where's  the CAT?? (no idea)"
    pos = 0
    words = []
    while True:
        word, new_pos = next_word(line, pos)
        assert new_pos >= pos
        if not word:
            assert new_pos == len(line)
            assert next_word(line, new_pos) == ("", len(line))
            break
        assert new_pos > pos
        words.append(word)
        pos = new_pos
    assert words == ["it's", "o'clock", ".", ".", ".", "where's", "the", "cat", "?", "?", "no", "idea"]


def test_words_are_lowercase_letters_or_single_terminator():
    for word in iter_words("Mixed CASE, don't! 3.14 -- ok?"):
        assert word in {".", "!", "?"} or all(c == "'" or "a" <= c <= "z" for c in word)


def test_non_ascii_letters_are_separators():
    assert list(iter_words("café naïve")) == ["caf", "na", "ve"]


def test_config_can_drop_apostrophes_and_terminators():
    tok = WordTokenizer(TokenizerConfig(terminators="", keep_apostrophes=False))
    assert list(tok.iter_words("Don't stop. Now!")) == ["don", "t", "stop", "now"]


def test_tokenize_spans_lines_and_restarts_per_line():
    tok = WordTokenizer()
    assert tok.tokenize("one two\r\nthree.\n") == ["one", "two", "three", "."]
    assert list(tok.iter_words("again")) == list(tok.iter_words("again")) == ["again"]
    assert tokenize("") == []

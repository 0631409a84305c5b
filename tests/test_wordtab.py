import pytest

from fdfview.wordtab import find_token, find_unquoted, split_words


def test_split_on_spaces_and_tabs():
    assert split_words("a  b\tc") == ["a", "b", "c"]


def test_split_ignores_leading_and_trailing_blanks():
    assert split_words(" \t16 16 2 1 \t") == ["16", "16", "2", "1"]


def test_split_empty_and_blank():
    assert split_words("") == []
    assert split_words(" \t  ") == []


def test_newline_is_not_a_separator():
    assert split_words("a\nb c") == ["a\nb", "c"]


def test_split_round_trip():
    words = ["None", "c", "#FF0000"]
    assert split_words("\t".join(words)) == words
    assert split_words(" ".join(words)) == words


def test_find_token_first_occurrence():
    text = "abcabc"
    pos = find_token(text, "ca")
    assert pos == 2
    assert text[pos:pos + 2] == "ca"


def test_find_token_missing():
    assert find_token("abc", "x") == -1
    assert find_token("ab", "abc") == -1


def test_find_token_at_end():
    text = 'row "'
    assert find_token(text, '"') == len(text) - 1


def test_find_unquoted_skips_quoted_text():
    text = '"/*" /* x'
    pos = find_unquoted(text, "/*")
    assert pos == text.rindex("/*")
    assert find_token(text, "/*") == 1


def test_find_unquoted_without_quotes_matches_find():
    text = "static char *x = 1; // note"
    assert find_unquoted(text, "//") == find_token(text, "//")


def test_find_unquoted_all_inside_quotes():
    assert find_unquoted('"a // b"', "//") == -1


def test_find_unquoted_at_closing_quote():
    text = 'x"ab"cd'
    assert find_unquoted(text, '"cd') == text.index('"cd')


@pytest.mark.parametrize("func", [find_token, find_unquoted])
def test_empty_token_rejected(func):
    with pytest.raises(ValueError):
        func("abc", "")
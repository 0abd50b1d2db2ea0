import pytest

from ftkit.strmanip import (
    concat,
    split,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    strtrim,
    substr,
)


def test_concat_joins_in_order():
    parts = ["alpha", "", "beta", "gamma"]
    result = concat(*parts)
    assert result == "alphabetagamma"
    assert len(result) == sum(len(p) for p in parts)


def test_concat_with_no_arguments_is_empty():
    assert concat() == ""


def test_split_example_from_source():
    assert split("Ha ic b", " ") == ["Ha", "ic", "b"]


def test_split_drops_empty_words():
    words = split("  one   two three  ", " ")
    assert words == ["one", "two", "three"]
    assert all(word for word in words)


def test_split_empty_and_only_separators():
    assert split("", ",") == []
    assert split(",,,", ",") == []


def test_split_without_separator_returns_whole():
    assert split("whole", ",") == ["whole"]


def test_split_rejects_multi_char_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_strdup_copies_text():
    assert strdup("Hello, world!") == "Hello, world!"
    assert strdup("") == ""


def test_striteri_modifies_in_place():
    chars = list("abcd")
    result = striteri(chars, lambda i, ch: ch.upper() if i % 2 == 0 else ch)
    assert result is chars
    assert "".join(chars) == "AbCd"


def test_striteri_passes_indexes():
    seen = []
    chars = list("xyz")

    def record(index, ch):
        seen.append(index)
        return ch

    striteri(chars, record)
    assert seen == [0, 1, 2]
    assert chars == ["x", "y", "z"]


def test_strjoin_concatenates_two():
    s1, s2 = "Bonjour", " world"
    joined = strjoin(s1, s2)
    assert joined.startswith(s1)
    assert joined.endswith(s2)
    assert len(joined) == len(s1) + len(s2)


def test_strlcat_size_zero_from_source():
    src = " a test beurk"
    dest = "This is"
    result, total = strlcat(dest, src, 0)
    assert result == dest
    assert total == len(src)


def test_strlcat_enough_room():
    dest, src = "This is", " a test beurk"
    result, total = strlcat(dest, src, 100)
    assert result == dest + src
    assert total == len(dest) + len(src)


def test_strlcat_truncates_to_size():
    dest, src = "This is", " a test beurk"
    size = len(dest) + 4
    result, total = strlcat(dest, src, size)
    assert len(result) == size - 1
    assert result == dest + src[:3]
    assert total == len(dest) + len(src)


def test_strlcat_size_not_larger_than_dest():
    dest, src = "This is", " a test beurk"
    result, total = strlcat(dest, src, 3)
    assert result == dest
    assert total == 3 + len(src)


def test_strlcat_negative_size():
    with pytest.raises(ValueError):
        strlcat("a", "b", -1)


def test_strlcpy_example_from_source():
    result, total = strlcpy("Je cache quoi ?", "Rien !", 17)
    assert result == "Rien !"
    assert total == len("Rien !")


def test_strlcpy_truncates():
    src = "Rien !"
    result, total = strlcpy("Je cache quoi ?", src, 4)
    assert result == src[:3]
    assert total == len(src)


def test_strlcpy_size_zero_keeps_dest():
    result, total = strlcpy("Je cache quoi ?", "Rien !", 0)
    assert result == "Je cache quoi ?"
    assert total == len("Rien !")


def test_strlcpy_negative_size():
    with pytest.raises(ValueError):
        strlcpy("a", "b", -2)


def test_strmapi_uses_index_and_char():
    text = "abcdef"
    result = strmapi(text, lambda i, ch: ch.upper() if i < 3 else ch)
    assert result == "ABCdef"
    assert len(result) == len(text)


def test_strmapi_identity():
    assert strmapi("Hello", lambda i, ch: ch) == "Hello"


def test_strtrim_both_ends():
    assert strtrim("xx--hello--xx", "x-") == "hello"


def test_strtrim_all_trimmed():
    assert strtrim("aaaa", "a") == ""
    assert strtrim("", "a") == ""


def test_strtrim_empty_charset_keeps_text():
    assert strtrim("  keep  ", "") == "  keep  "


def test_strtrim_keeps_inner_characters():
    result = strtrim("  a b  ", " ")
    assert result == "a b"


def test_substr_in_range():
    text = "Bonjour"
    assert substr(text, 3, 2) == text[3:5]


def test_substr_length_clamped():
    text = "Bonjour"
    assert substr(text, 3, 100) == text[3:]


def test_substr_start_past_end():
    assert substr("Bonjour", 7, 3) == ""
    assert substr("Bonjour", 50, 3) == ""


@pytest.mark.parametrize("start,length", [(-1, 2), (0, -1)])
def test_substr_negative_arguments(start, length):
    with pytest.raises(ValueError):
        substr("Bonjour", start, length)
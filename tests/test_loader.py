import logging

from wordpermutter.loader import is_valid_line, load_words, parse_lines, parse_word
from wordpermutter.words import Word, WordType


def test_is_valid_line():
    assert is_valid_line("cat")
    assert not is_valid_line("")
    assert not is_valid_line("// comment")
    assert is_valid_line("/not-a-comment")


def test_parse_word_markers():
    assert parse_word("dog#").type is WordType.FIRST
    assert parse_word("dog#").content == "dog"
    assert parse_word("fish*").type is WordType.SECOND
    assert parse_word("fish*").content == "fish"
    assert parse_word("cat").type is WordType.ANY_ORDER
    assert parse_word("c#t").content == "c#t"


def test_lone_marker_gives_empty_word():
    w = parse_word("#")
    assert w.content == ""
    assert w.type is WordType.FIRST
    assert parse_word("*").type is WordType.SECOND


def test_parse_lines_example():
    words = parse_lines(["cat", "fish*", "dog#", "// comment", "  "])
    assert [(w.content, w.type) for w in words] == [
        ("cat", WordType.ANY_ORDER),
        ("dog", WordType.FIRST),
        ("fish", WordType.SECOND),
    ]


def test_parse_lines_strips_and_sorts():
    words = parse_lines(["  pear \n", "\tapple*", "Banana", "", "   // x"])
    contents = [w.content for w in words]
    assert contents == ["Banana", "apple", "pear"]
    assert contents == sorted(contents)


def test_duplicates_are_kept():
    words = parse_lines(["cat#", "cat*", "cat"])
    assert len(words) == 3
    # stable sort keeps input order for equal text
    assert [w.type for w in words] == [WordType.FIRST, WordType.SECOND, WordType.ANY_ORDER]


def test_load_words_from_file(write_words):
    fp = write_words(["// nouns", "sun", "moon#", "", "star*"])
    assert load_words(fp) == [Word("moon"), Word("star"), Word("sun")]


def test_load_words_unreadable_returns_empty(tmp_path, caplog):
    with caplog.at_level(logging.ERROR):
        assert load_words(tmp_path / "missing.txt") == []
        # a directory cannot be read as a file either
        assert load_words(tmp_path) == []
    assert "could not read word list" in caplog.text


def test_load_words_keeps_invalid_utf8_visible(tmp_path, caplog):
    fp = tmp_path / "latin1.txt"
    fp.write_bytes(b"caf\xe9\nsun\n")
    with caplog.at_level(logging.WARNING):
        words = load_words(fp)
    assert [w.content for w in words] == ["caf\ufffd", "sun"]
    assert "not valid UTF-8" in caplog.text

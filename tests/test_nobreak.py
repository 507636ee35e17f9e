import logging

import pytest
from jerriais import is_nobreak, nobreak_stems, stem, tokenize_word
from jerriais.nobreak import NOBREAK_WORDS


ALL_WORDS = [word for words in NOBREAK_WORDS.values() for word in words]


@pytest.mark.parametrize("word", ALL_WORDS)
def test_listed_words_stay_whole(word):
    assert tokenize_word(word) == [word]


def test_table_markers():
    assert set(nobreak_stems()) == {"ch", "d", "j", "l", "m", "n", "s", "t"}


def test_table_holds_stems():
    stems = nobreak_stems()
    for marker, words in NOBREAK_WORDS.items():
        assert stems[marker] == frozenset(stem(word) for word in words)


def test_table_is_built_once():
    assert nobreak_stems() is nobreak_stems()


def test_table_is_read_only():
    with pytest.raises(TypeError):
        nobreak_stems()["y"] = frozenset()


def test_table_build_is_logged(caplog):
    nobreak_stems.cache_clear()
    with caplog.at_level(logging.DEBUG, logger="jerriais.nobreak"):
        nobreak_stems()

    assert "Built no-break table" in caplog.text


def test_is_nobreak():
    assert is_nobreak("d", "d'vant")
    assert is_nobreak("l", "l'vée")
    assert not is_nobreak("L", "l'vée")
    assert not is_nobreak("l", "l'affaithe")
    assert not is_nobreak("y", "y'a")
    assert not is_nobreak("qu", "qu'importe")

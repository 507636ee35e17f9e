import unicodedata

import pytest
from jerriais import Tokenizer, tokenize, tokenize_word


@pytest.fixture
def tokenizer():
    return Tokenizer()


def test_tokenize_splits_article():
    assert tokenize("l'affaithe") == ["l", "affaithe"]


def test_tokenize_sentence():
    assert tokenize("Bouônjour, mes anmîns!") == ["Bouônjour", "mes", "anmîns"]


def test_tokenize_decomposed_accents():
    # combining accents are outside the word alphabet
    text = unicodedata.normalize("NFD", "Bouônjour, mes anmîns!")
    assert tokenize(text) == ["Bouo", "njour", "mes", "anmi", "ns"]


@pytest.mark.parametrize("text", ["", "   ", "\n\t", "!?., ;"])
def test_tokenize_nothing(text):
    assert tokenize(text) == []


def test_tokenize_separators():
    assert tokenize("mon-ami/1066; sèx") == ["mon", "ami", "1066", "sèx"]


def test_tokenize_keeps_letter_order():
    text = "Bouônjour, mes anmîns! J'l'ai vu d'vant l'églyise, qu'importe."
    tokens = tokenize(text)

    assert all(tokens)
    assert "".join(c for c in text if c.isalnum()) == "".join(
        c for t in tokens for c in t if c.isalnum()
    )


@pytest.mark.parametrize(
    "word, expected",
    [
        ("qu'importe", ["qu", "importe"]),
        ("Qu'importe", ["Qu", "importe"]),
        ("tch'est", ["tch", "est"]),
        ("tu'es", ["tu", "es"]),
        ("y'avait", ["y", "avait"]),
        ("j'l'ai", ["j", "l", "ai"]),
        ("qu'j'l'ai", ["qu", "j", "l", "ai"]),
        ("j'", ["j"]),
        # stem("l'") == stem("l's"), which is listed as a whole word
        ("l'", ["l'"]),
        ("affaithe", ["affaithe"]),
        ("aujourd'hui", ["aujourd'hui"]),
    ],
)
def test_tokenize_word(word, expected):
    assert tokenize_word(word) == expected


def test_tokenize_word_nobreak():
    assert tokenize_word("d'vant") == ["d'vant"]
    assert tokenize_word("D'vant") == ["D", "vant"]
    assert tokenize_word("S'maine") == ["S", "maine"]
    assert tokenize_word("s'maine") == ["s'maine"]
    assert tokenize("La s'maine d'vant") == ["La", "s'maine", "d'vant"]


def test_tokenize_word_empty():
    assert tokenize_word("") == []


def test_stems(tokenizer):
    assert list(tokenizer.stems("Les chevaux et les bateaux")) == [
        "le",
        "cheval",
        "et",
        "le",
        "bateau",
    ]


def test_tokenize_group(tokenizer):
    count, groups = tokenizer.tokenize_group("chats chat, l'chat")
    assert count == 4
    assert dict(groups) == {"chat": [0, 1, 3], "l": [2]}


def test_tokenize_group_empty(tokenizer):
    count, groups = tokenizer.tokenize_group("")
    assert count == 0
    assert dict(groups) == {}

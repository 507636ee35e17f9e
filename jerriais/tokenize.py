import re
from collections import defaultdict
from typing import Generator, ItemsView

from line_profiler import profile

from .nobreak import is_nobreak
from .stemmer import JerriaisStemmer


class Tokenizer:

    SEPARATOR_REGEX = re.compile(r"[^'a-z0-9äâàéèëêïîöôùüûç]+", re.IGNORECASE)

    # these never form a word with what follows
    ALWAYS_SPLIT_REGEX = re.compile(r"^(qu|tu|tch|li)'", re.IGNORECASE)

    CLITIC_REGEX = re.compile(r"^(ch|[djlmnsty])'", re.IGNORECASE)

    def __init__(self):
        self._stemmer = JerriaisStemmer()

    @profile
    def tokenize(self, text: str) -> list[str]:
        tokens = []
        for word in self.__class__.SEPARATOR_REGEX.split(text):
            if word:
                tokens.extend(self.tokenize_word(word))

        return tokens

    def tokenize_word(self, word: str) -> list[str]:
        """
        Split leading clitics off a word: "qu'j'l'ai" -> ["qu", "j", "l", "ai"].

        An apostrophe word listed in the no-break table ("d'vant") stays whole.
        """
        if match := self.__class__.ALWAYS_SPLIT_REGEX.match(word):
            return self._split(word, match.group(1))

        if match := self.__class__.CLITIC_REGEX.match(word):
            prefix = match.group(1)
            if is_nobreak(prefix, word):
                return [word]

            return self._split(word, prefix)

        return [word] if word else []

    def _split(self, word: str, prefix: str) -> list[str]:
        return [prefix, *self.tokenize_word(word[len(prefix) + 1 :])]

    def stems(self, text: str) -> Generator[str, None, None]:
        for token in self.tokenize(text):
            yield self._stemmer.stem(token)

    def tokenize_group(self, text: str) -> tuple[int, ItemsView[str, list[int]]]:
        tokens = defaultdict(list)

        i = -1
        for i, token in enumerate(self.stems(text)):
            tokens[token].append(i)

        return i + 1, tokens.items()


_tokenizer = Tokenizer()


def tokenize(text: str) -> list[str]:
    return _tokenizer.tokenize(text)


def tokenize_word(word: str) -> list[str]:
    return _tokenizer.tokenize_word(word)

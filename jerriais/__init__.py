from .stemmer import JerriaisStemmer, stem
from .nobreak import is_nobreak, nobreak_stems
from .tokenize import Tokenizer, tokenize, tokenize_word

__all__ = [
    "JerriaisStemmer",
    "Tokenizer",
    "is_nobreak",
    "nobreak_stems",
    "stem",
    "tokenize",
    "tokenize_word",
]

from enum import Enum
from functools import lru_cache
from typing import Callable, NamedTuple, Optional, Union

from line_profiler import profile


VOWELS = frozenset("aeiouyâàëéêèïîôûù")


def is_vowel(char: str) -> bool:
    return char in VOWELS


class Tag(str, Enum):
    CONSONANT = "c"
    VOWEL = "v"
    SEMIVOWEL = "s"


class Word:
    """
    Working form of a word inside the stemmer: lowercase letters plus one
    Tag per letter. A semivowel never counts as a vowel.

    Rule tables spell suffixes with an uppercase letter where a semivowel is
    expected ("iqUe", "abl'Yes"), see Word.parse.
    """

    __slots__ = ("text", "tags")

    def __init__(self, text: str, tags: str):
        self.text = text
        self.tags = tags

    @classmethod
    def parse(cls, notation: str) -> "Word":
        tags = []
        for char in notation:
            if char.isupper():
                tags.append(Tag.SEMIVOWEL.value)
            elif is_vowel(char):
                tags.append(Tag.VOWEL.value)
            else:
                tags.append(Tag.CONSONANT.value)

        return cls(notation.lower(), "".join(tags))

    def __len__(self):
        return len(self.text)

    def __eq__(self, other):
        if not isinstance(other, Word):
            return NotImplemented
        return self.text == other.text and self.tags == other.tags

    def __repr__(self):
        return f"Word({self.text!r}, {self.tags!r})"

    def is_vowel(self, index: int) -> bool:
        return 0 <= index < len(self.text) and self.tags[index] == Tag.VOWEL

    def plain(self, index: int) -> str:
        """Letter at index unless it is a semivowel or out of range."""
        if 0 <= index < len(self.text) and self.tags[index] != Tag.SEMIVOWEL:
            return self.text[index]

        return ""

    def tail(self, offset: int) -> "Word":
        return Word(self.text[offset:], self.tags[offset:])

    def endswith(self, suffix: "Word") -> bool:
        return self.text.endswith(suffix.text) and self.tags.endswith(suffix.tags)

    def longest_suffix(self, suffixes) -> Optional["Word"]:
        longest = None
        for suffix in suffixes:
            if self.endswith(suffix) and (longest is None or len(suffix) > len(longest)):
                longest = suffix

        return longest

    def drop(self, count: int) -> "Word":
        if count <= 0:
            return self
        return Word(self.text[:-count], self.tags[:-count])

    def append(self, other: "Word") -> "Word":
        return Word(self.text + other.text, self.tags + other.tags)

    def substitute(self, index: int, char: str) -> "Word":
        replacement = Word.parse(char)
        return Word(
            self.text[:index] + replacement.text + self.text[index + 1 :],
            self.tags[:index] + replacement.tags + self.tags[index + 1 :],
        )


class Region(Enum):
    WORD = "word"
    R1 = "r1"
    R2 = "r2"
    RV = "rv"


class Regions(NamedTuple):
    r1: int
    r2: int
    rv: int

    def offset(self, region) -> int:
        # a tuple of regions means the suffix has to lie in all of them
        if isinstance(region, tuple):
            return max(self.offset(r) for r in region)
        if region is Region.WORD:
            return 0

        return getattr(self, region.value)

    def tail(self, word: Word, region) -> Word:
        return word.tail(self.offset(region))


Action = Callable[[Word, Regions, Word], Word]
Condition = Callable[[Word, Regions, Word], bool]


class Rule(NamedTuple):
    suffixes: tuple
    region: Union[Region, tuple]
    action: Action
    condition: Optional[Condition] = None
    forces_step_2a: bool = False


def delete(word: Word, regions: Regions, suffix: Word) -> Word:
    return word.drop(len(suffix))


def replace_with(notation: str) -> Action:
    replacement = Word.parse(notation)

    def _replace(word: Word, regions: Regions, suffix: Word) -> Word:
        return word.drop(len(suffix)).append(replacement)

    return _replace


def rule(region, suffixes, action=delete, condition=None, forces_step_2a=False) -> Rule:
    return Rule(
        tuple(Word.parse(s) for s in suffixes),
        region,
        action,
        condition,
        forces_step_2a,
    )


def apply_rules(word: Word, regions: Regions, rules) -> tuple[Word, Optional[Rule]]:
    """
    Run the first rule whose region ends with one of its suffixes.

    The longest matching suffix of that rule is used. A rule that matches
    claims the step even when its condition rejects the word, in which case
    the word comes back unchanged and no rule is reported as fired.
    """
    for r in rules:
        suffix = regions.tail(word, r.region).longest_suffix(r.suffixes)
        if suffix is None:
            continue

        if r.condition is None or r.condition(word, regions, suffix):
            return r.action(word, regions, suffix), r

        return word, None

    return word, None


def _before(word: Word, suffix: Word) -> int:
    return len(word) - len(suffix) - 1


def _not_after_vowel(word, regions, suffix):
    return not word.is_vowel(_before(word, suffix))


def _after_vowel_in_rv(word, regions, suffix):
    index = _before(word, suffix)
    return index >= regions.rv and word.is_vowel(index)


def _after_non_vowel_in_rv(word, regions, suffix):
    index = _before(word, suffix)
    return index >= regions.rv and not word.is_vowel(index)


def _plural_s(word, regions, suffix):
    return word.plain(len(word) - 2) not in ("a", "i", "o", "u", "è", "s")


def _after_s_or_t(word, regions, suffix):
    return word.plain(_before(word, suffix)) in ("s", "t")


GU = Word.parse("gu")
SEMIVOWEL_Y = Word.parse("Y")
PLAIN_I = Word.parse("i")
CEDILLA_C = Word.parse("ç")
PLAIN_C = Word.parse("c")
IQU = Word.parse("iqU")
EMENT = tuple(Word.parse(s) for s in ("ement", "ements"))
ICATIF = tuple(Word.parse(s) for s in ("icatif", "icative", "icatifs", "icatives"))
ATIF = tuple(Word.parse(s) for s in ("atif", "ative", "atifs", "atives"))


def _after_gu(word, regions, suffix):
    return word.drop(len(suffix)).endswith(GU)


def _delete_ement_in_rv(word, regions, suffix):
    ement = regions.tail(word, Region.RV).longest_suffix(EMENT)
    return word if ement is None else word.drop(len(ement))


def _icatif(word, regions, suffix):
    found = regions.tail(word, Region.R2).longest_suffix(ICATIF)
    if found is not None:
        word = word.drop(len(found))

    found = regions.tail(word, Region.R2).longest_suffix(ATIF)
    if found is not None:
        # the "ic" in front of "atif" goes too
        word = word.drop(len(found) + 2).append(IQU)

    return word


def _delete_then_e_in_rv(word, regions, suffix):
    word = word.drop(len(suffix))
    if word.plain(len(word) - 1) == "e" and len(word) - 1 >= regions.rv:
        word = word.drop(1)

    return word


class JerriaisStemmer:
    """
    Suffix-stripping stemmer for Jèrriais, built on the Porter/Snowball French
    stemmer (https://snowballstem.org/algorithms/french/stemmer.html) and
    extended with the Jèrriais verb, noun and adjective endings.

    Every step is a tuple of Rule records. Inside a step the first rule whose
    region ends with one of its suffixes claims the step.
    """

    RV_PREFIXES = ("par", "col", "tap")

    STEP_1_RULES = (
        rule(
            Region.R2,
            (
                "ance", "iqUe", "isme", "abl'Ye", "ibl'Ye", "iste", "eux",
                "ances", "iqUes", "ismes", "abl'Yes", "ibl'Yes", "istes",
            ),
        ),
        rule(
            Region.R2,
            ("icatrice", "icateur", "icâtion", "icatrices", "icateurs", "icâtions"),
        ),
        rule(
            Region.WORD,
            ("icatrice", "icateur", "icâtion", "icatrices", "icateurs", "icâtions"),
            replace_with("iqU"),
        ),
        rule(
            Region.R2,
            ("atrice", "ateur", "âtion", "atrices", "ateurs", "âtions"),
        ),
        rule(Region.R2, ("logie", "logies"), replace_with("log")),
        rule(Region.R2, ("usion", "ution", "usions", "utions"), replace_with("u")),
        rule(Region.R2, ("ence", "ences"), replace_with("ent")),
        rule(Region.R1, ("issement", "issements"), condition=_not_after_vowel),
        rule(Region.R2, ("ativement", "ativements")),
        rule(Region.R2, ("ivement", "ivements")),
        rule(Region.R2, ("eusement", "eusements")),
        rule(Region.R1, ("eusement", "eusements"), replace_with("eux")),
        rule(Region.WORD, ("eusement", "eusements"), _delete_ement_in_rv),
        rule(Region.R2, ("abl'Yement", "abl'Yements", "iqUement", "iqUements")),
        rule(
            Region.RV,
            ("ièthement", "ièthements", "Ièthement", "Ièthements"),
            replace_with("i"),
        ),
        rule(Region.RV, ("ement", "ements")),
        rule(Region.R2, ("icité", "icités")),
        rule(Region.WORD, ("icité", "icités"), replace_with("iqU")),
        rule(Region.R2, ("abilité", "abilités")),
        rule(Region.WORD, ("abilité", "abilités"), replace_with("abl")),
        rule(Region.R2, ("ité", "ités")),
        rule(Region.WORD, ("icatif", "icative", "icatifs", "icatives"), _icatif),
        rule(Region.R2, ("atif", "ative", "atifs", "atives")),
        rule(Region.R2, ("if", "ive", "ifs", "ives")),
        rule(Region.WORD, ("tchieaux",), replace_with("té")),
        rule(Region.WORD, ("ieaux",), replace_with("é")),
        rule(Region.WORD, ("eaux",), replace_with("eau")),
        rule(Region.R1, ("aux",), replace_with("al")),
        rule(Region.R2, ("euse", "euses")),
        rule(Region.R1, ("euse", "euses", "euthe", "euthes"), replace_with("eux")),
        rule(Region.RV, ("amment",), replace_with("ant"), forces_step_2a=True),
        rule(Region.RV, ("emment",), replace_with("ent"), forces_step_2a=True),
        rule(
            Region.RV,
            ("ment", "ments"),
            condition=_after_vowel_in_rv,
            forces_step_2a=True,
        ),
    )

    STEP_2A_RULES = (
        rule(
            Region.RV,
            (
                "iéthie", "éthie", "'thie", "'die", "'lie", "'nie", "'rie",
                "'sie", "'tie",
                "Yi", "Yis", "Yit", "Yînmes", "Yîtes", "Yîdres", "Yîtent",
                "Yîdrent", "'Ye", "Yons", "Yiz", "'Yent", "Yais", "Yait",
                "Yêmes", "Yions", "Yêtes", "Yiez", "YaIent",
                "înmes", "ît", "îtes", "îdres",
                "i", "ie", "Ie", "ies",
                "ith", "itha", "ithai", "ithaIent", "ithais", "ithait", "ithas",
                "ithent", "ithez", "ithêmes", "ithiez", "ithêtes", "ithions",
                "ithons", "ithont",
                "is", "issaIent", "issais", "issait", "issant", "issante",
                "issantes", "issants", "isse", "issent", "isses", "issez",
                "issêtes", "issiez", "issêmes", "issions", "issons", "it",
                "îsse", "îssions", "îssYiz", "îssiez", "îssent",
            ),
            condition=_after_non_vowel_in_rv,
        ),
    )

    STEP_2B_RULES = (
        rule(
            Region.RV,
            (
                "é", "ée", "ées", "és", "èrent", "er",
                "etha", "ethai", "ethaIent", "ethais", "ethait", "ethas",
                "ethez", "ethêtes", "ethiez", "ethêmes", "ethions", "ethons",
                "ethont",
                "étha", "éthai", "éthaIent", "éthais", "éthait", "éthas",
                "éthez", "éthêtes", "éthiez", "éthêmes", "éthions", "éthons",
                "éthont",
                "ez", "iez", "Iez",
                "'thai", "'thas", "'tha", "'thons", "'thez", "'thont",
                "'thais", "'thait", "'thêmes", "'thêtes", "'thaIent",
                "'dai", "'das", "'da", "'dons", "'dez", "'dont", "'dais",
                "'dait", "'dêmes", "'dêtes", "'daIent",
                "'lai", "'las", "'la", "'lons", "'lez", "'lont", "'lais",
                "'lait", "'lêmes", "'lêtes", "'laIent",
                "'nai", "'nas", "'na", "'nons", "'nez", "'nont", "'nais",
                "'nait", "'nêmes", "'nêtes", "'naIent",
                "'rai", "'ras", "'ra", "'rons", "'rez", "'ront", "'rais",
                "'rait", "'rêmes", "'rêtes", "'raIent",
                "'sai", "'sas", "'sa", "'sons", "'sez", "'sont", "'sais",
                "'sait", "'sêmes", "'sêtes", "'saIent",
                "'tai", "'tas", "'ta", "'tons", "'tez", "'tont", "'tais",
                "'tait", "'têmes", "'têtes", "'taIent",
                "'chai", "'chas", "'cha", "'chons", "'chez", "'chont",
                "'chais", "'chait", "'chêmes", "'chêtes", "'chaIent",
                "êmes", "êtes",
            ),
        ),
        rule((Region.RV, Region.R2), ("ions",)),
        rule(
            Region.RV,
            (
                "âmes", "ât", "âtes", "a", "ai", "aIent", "ais", "ait",
                "Yant", "ant", "ante", "antes", "ants", "as", "asse",
                "assent", "asses", "assiez", "assions",
            ),
            _delete_then_e_in_rv,
        ),
    )

    STEP_4_RULES = (
        (rule(Region.WORD, ("s",), condition=_plural_s),),
        (rule(Region.R2, ("ion",), condition=_after_s_or_t),),
        (
            rule(
                Region.RV,
                ("ier", "ièr", "ière", "Ier", "Ière", "iethe", "iéthe", "Iethe", "Iéthe"),
                replace_with("i"),
            ),
        ),
        (rule(Region.RV, ("'Ye", "e")),),
        (rule(Region.RV, ("ë",), condition=_after_gu),),
    )

    STEP_5_RULES = (
        rule(
            Region.WORD,
            ("enn", "onn", "ett", "ell", "eill"),
            lambda word, regions, suffix: word.drop(1),
        ),
    )

    STEP_6A_RULES = (rule(Region.WORD, ("èl",), replace_with("'l")),)

    @lru_cache(maxsize=4096)
    @profile
    def stem(self, word: str) -> str:
        if not word:
            return ""

        tagged = self.prelude(word.lower())
        if len(tagged) == 1:
            return tagged.text

        regions = self.find_regions(tagged)

        before_step_1 = tagged
        tagged, forces_step_2a = self.step_1(tagged, regions)

        if tagged == before_step_1 or forces_step_2a:
            before_step_2a = tagged
            tagged = self.step_2a(tagged, regions)
            if tagged == before_step_2a:
                tagged = self.step_2b(tagged, regions)

        if tagged != before_step_1:
            tagged = self.step_3(tagged)
        else:
            tagged = self.step_4(tagged, regions)

        tagged = self.step_5(tagged, regions)
        tagged = self.step_6a(tagged, regions)
        tagged = self.step_6(tagged)

        return tagged.text

    def prelude(self, word: str) -> Word:
        """
        Tag u, i and y that act as consonants. Neighbours are always looked
        up in the untagged word.
        """
        tags = []
        for i, char in enumerate(word):
            preceding = word[i - 1] if i > 0 else ""
            following = word[i + 1] if i + 1 < len(word) else ""

            if i == 0:
                semivowel = char == "y" and is_vowel(following)
            else:
                semivowel = (
                    (char in ("u", "i") and is_vowel(preceding) and is_vowel(following))
                    or (char == "y" and (is_vowel(preceding) or is_vowel(following)))
                    or (char == "u" and preceding == "q")
                )

            if semivowel:
                tags.append(Tag.SEMIVOWEL.value)
            elif is_vowel(char):
                tags.append(Tag.VOWEL.value)
            else:
                tags.append(Tag.CONSONANT.value)

        return Word(word, "".join(tags))

    def find_regions(self, word: Word) -> Regions:
        length = len(word)
        r1 = r2 = rv = length

        for i in range(length - 1):
            if word.is_vowel(i) and not word.is_vowel(i + 1):
                r1 = i + 2
                break

        for i in range(r1, length - 1):
            if word.is_vowel(i) and not word.is_vowel(i + 1):
                r2 = i + 2
                break

        if word.is_vowel(0) and word.is_vowel(1):
            rv = 3

        # a two-vowel start only keeps rv = 3 while that is short of the
        # word end, three letter words still fall through to the vowel scan
        if word.text[:3] in self.__class__.RV_PREFIXES:
            rv = 3
        elif rv == length:
            for i in range(1, length - 1):
                if word.is_vowel(i):
                    rv = i + 1
                    break

        return Regions(min(r1, length), min(r2, length), min(rv, length))

    def step_1(self, word: Word, regions: Regions) -> tuple[Word, bool]:
        word, fired = apply_rules(word, regions, self.__class__.STEP_1_RULES)
        return word, fired is not None and fired.forces_step_2a

    def step_2a(self, word: Word, regions: Regions) -> Word:
        word, _ = apply_rules(word, regions, self.__class__.STEP_2A_RULES)
        return word

    def step_2b(self, word: Word, regions: Regions) -> Word:
        word, _ = apply_rules(word, regions, self.__class__.STEP_2B_RULES)
        return word

    def step_3(self, word: Word) -> Word:
        if word.endswith(SEMIVOWEL_Y):
            word = word.drop(1).append(PLAIN_I)

        if word.endswith(CEDILLA_C):
            word = word.drop(1).append(PLAIN_C)

        return word

    def step_4(self, word: Word, regions: Regions) -> Word:
        for rules in self.__class__.STEP_4_RULES:
            word, _ = apply_rules(word, regions, rules)

        return word

    def step_5(self, word: Word, regions: Regions) -> Word:
        word, _ = apply_rules(word, regions, self.__class__.STEP_5_RULES)
        return word

    def step_6a(self, word: Word, regions: Regions) -> Word:
        word, _ = apply_rules(word, regions, self.__class__.STEP_6A_RULES)
        return word

    def step_6(self, word: Word) -> Word:
        """Unaccent the last vowel when it is é or è followed by consonants."""
        i = len(word) - 1
        while i > 0:
            if not word.is_vowel(i):
                i -= 1
            elif i != len(word) - 1 and word.text[i] in ("é", "è"):
                return word.substitute(i, "e")
            else:
                break

        return word


_stemmer = JerriaisStemmer()


def stem(word: str) -> str:
    return _stemmer.stem(word)

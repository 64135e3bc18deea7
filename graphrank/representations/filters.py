from typing import Callable

from graphrank.data.types import Token

TokenFilter = Callable[[Token], bool]

_NOUN_TAGS = frozenset({"NN", "NNP", "NNPS", "NNS"})
_VERB_TAGS = frozenset({"VB", "VBD", "VBG", "VBN", "VBP", "VBZ", "MD"})
_ADJ_TAGS = frozenset({"JJ", "JJR", "JJS"})
_ADV_TAGS = frozenset({"RB", "RBR", "RBS", "RP"})


def is_noun(tag: str) -> bool:
    return tag in _NOUN_TAGS


def is_verb(tag: str) -> bool:
    return tag in _VERB_TAGS


def is_adjective(tag: str) -> bool:
    return tag in _ADJ_TAGS


def is_adverb(tag: str) -> bool:
    return tag in _ADV_TAGS


def noun_verb_filter(tok: Token) -> bool:
    """Whitelist nouns and verbs (Penn Treebank tags)."""
    return is_noun(tok.tag) or is_verb(tok.tag)


def noun_verb_adj_adv_filter(tok: Token) -> bool:
    """Whitelist nouns, verbs, adjectives and adverbs."""
    return is_noun(tok.tag) or is_verb(tok.tag) or is_adjective(tok.tag) or is_adverb(tok.tag)


FILTERS = {
    "nv": noun_verb_filter,
    "nvaa": noun_verb_adj_adv_filter,
}


def get_filter(name: str) -> TokenFilter:
    try:
        return FILTERS[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown token filter: {name}") from None

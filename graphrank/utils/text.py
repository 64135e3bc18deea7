from graphrank.data.types import Sentence

CONJUNCTION_TAG = "CC"


def capitalize(text: str) -> str:
    """Uppercase the first character only."""
    return text[:1].upper() + text[1:]


def remove_leading_conjunction(sentence: Sentence) -> None:
    """Drop a leading coordinating conjunction (and, but, for, ...) from the sentence.

    Trims ``raw`` past the conjunction and the following character, and removes
    the matching first token. Sentences with fewer than two tokens are untouched.
    """
    if len(sentence.tokens) < 2:
        return
    first = sentence.tokens[0]
    if first.tag != CONJUNCTION_TAG:
        return
    idx = sentence.raw.find(first.text)
    if idx < 0:
        return
    sentence.raw = capitalize(sentence.raw[idx + len(first.text) + 1:])
    sentence.tokens = sentence.tokens[1:]

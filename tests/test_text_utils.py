from graphrank.data.types import Sentence
from graphrank.utils.text import capitalize, remove_leading_conjunction

from conftest import make_tokens


def test_capitalize():
    assert capitalize("birds sing") == "Birds sing"
    assert capitalize("") == ""


def test_remove_conjunction():
    s = Sentence(raw="But the rain stopped.", tokens=make_tokens("But/CC the/DT rain/NN stopped/VBD ./."))
    remove_leading_conjunction(s)
    assert s.raw == "The rain stopped."
    assert s.tokens[0].text == "the"


def test_keeps_sentence_without_conjunction():
    s = Sentence(raw="Rain stopped.", tokens=make_tokens("Rain/NN stopped/VBD ./."))
    remove_leading_conjunction(s)
    assert s.raw == "Rain stopped."
    assert len(s.tokens) == 3


def test_single_token_untouched():
    s = Sentence(raw="And", tokens=make_tokens("And/CC"))
    remove_leading_conjunction(s)
    assert s.raw == "And"

from pathlib import Path

from markov.text import TextChain, join_tokens, tokenize
from markov.types import SENTINEL


def test_tokenize_splits_on_any_whitespace():
    assert tokenize("  the\tcat  sat\r\n") == ["the", "cat", "sat"]
    assert tokenize("   ") == []
    assert join_tokens([]) == ""


def test_feed_str_and_generate_str():
    chain = TextChain(seed=0).feed_str("I like cats").feed_str("I hate cats")
    outputs = {chain.generate_str() for _ in range(100)}
    assert outputs == {"I like cats", "I hate cats"}


def test_feed_blank_string_is_a_noop():
    chain = TextChain().feed_str("   ")
    assert chain.is_empty()


def test_generate_str_from_token():
    chain = TextChain(seed=0).feed_str("I like cats").feed_str("I hate cats")
    assert chain.generate_str_from_token("like") == "like cats"
    assert chain.generate_str_from_token("dogs") == ""


def test_generate_str_on_empty_chain():
    assert TextChain().generate_str() == ""


def test_feed_file_one_sentence_per_line(tmp_path: Path):
    corpus = tmp_path / "corpus.txt"
    corpus.write_text("the cat sat\n\n   \nthe dog  ran\n", encoding="utf-8")

    chain = TextChain().feed_file(corpus)
    assert chain.transition_count(SENTINEL, "the") == 2
    assert chain.transition_count("sat", SENTINEL) == 1
    assert chain.transition_count("ran", SENTINEL) == 1
    assert chain.transition_count("sat", "the") == 0
    assert sorted(chain.states()) == ["cat", "dog", "ran", "sat", "the"]


def test_str_iterators():
    chain = TextChain(seed=2).feed_str("I like cats").feed_str("I hate cats")
    sized = list(chain.str_iter_for(4))
    assert len(sized) == 4
    assert set(sized) <= {"I like cats", "I hate cats"}

    stream = chain.str_iter()
    for _ in range(20):
        assert next(stream) in ("I like cats", "I hate cats")

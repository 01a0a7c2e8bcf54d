from markov.chain.tokens import TokenStore


def test_intern_returns_first_instance_seen():
    store = TokenStore()
    first = tuple([1, 2])
    second = tuple([1, 2])
    assert first is not second

    assert store.intern(first) is first
    assert store.intern(second) is first
    assert len(store) == 1


def test_lookup_does_not_insert():
    store = TokenStore()
    assert store.lookup("cat") is None
    assert "cat" not in store
    assert len(store) == 0

    store.intern("cat")
    assert store.lookup("cat") == "cat"
    assert "cat" in store
    assert list(store) == ["cat"]

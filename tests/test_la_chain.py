from listarray.la_chain import NodeChain


def _chain_of(*values):
    chain = NodeChain()
    last = chain.head
    for value in values:
        last = chain.splice_after(last, value)
    return chain


class TestSplice:
    def test_new_chain_has_only_sentinel(self) -> None:
        chain = NodeChain()
        assert len(chain) == 0
        assert chain.next_of(chain.head) is None
        assert list(chain.values()) == []

    def test_splice_after_head_goes_first(self) -> None:
        chain = _chain_of(1, 2)
        chain.splice_after(chain.head, 0)
        assert list(chain.values()) == [0, 1, 2]

    def test_splice_in_middle_keeps_following_nodes(self) -> None:
        chain = _chain_of("a", "c")
        first = chain.walk(1)
        chain.splice_after(first, "b")
        assert list(chain.values()) == ["a", "b", "c"]
        assert len(chain) == 3


class TestUnlinkAndTruncate:
    def test_unlink_returns_value_and_discards_node(self) -> None:
        chain = _chain_of(1, 2, 3)
        assert chain.unlink_after(chain.walk(1)) == 2
        assert list(chain.values()) == [1, 3]
        assert len(chain.nodes) == 3

    def test_truncate_after_head_empties_chain(self) -> None:
        chain = _chain_of(1, 2, 3)
        assert chain.truncate_after(chain.head) == 3
        assert list(chain.values()) == []
        assert list(chain.nodes) == [chain.head]

    def test_truncate_after_last_node_drops_nothing(self) -> None:
        chain = _chain_of(1, 2)
        assert chain.truncate_after(chain.walk(2)) == 0
        assert list(chain.values()) == [1, 2]


class TestTraversal:
    def test_walk_from_explicit_start(self) -> None:
        chain = _chain_of(10, 20, 30)
        second = chain.walk(2)
        assert chain.value_of(chain.walk(1, start=second)) == 30

    def test_set_value_overwrites_in_place(self) -> None:
        chain = _chain_of(1, 2)
        node_id = chain.walk(2)
        chain.set_value(node_id, 5)
        assert chain.walk(2) == node_id
        assert list(chain.values()) == [1, 5]

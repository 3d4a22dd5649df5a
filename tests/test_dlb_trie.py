# tests/test_dlb_trie.py
# unit tests for the arena trie: insertion, counts, lookups, dump

import pytest

from dlb_autocomplete.core import DLBTrie, InvalidArgumentError, ROOT, SENTINEL


@pytest.fixture
def trie():
    return DLBTrie(["cat", "car", "card", "dog"])


def test_insert_reports_new_and_duplicate():
    t = DLBTrie()
    assert t.insert("cat") is True
    assert t.insert("cat") is False
    assert len(t) == 1


def test_duplicate_leaves_counts_and_nodes_alone(trie):
    nodes = trie.node_count
    gen = trie.generation
    assert trie.insert("card") is False
    assert trie.node_count == nodes
    assert trie.generation == gen
    assert len(trie) == 4
    assert trie.count_prefix("ca") == 3
    assert trie.count_prefix("car") == 2


def test_counts_per_prefix(trie):
    assert trie.count_prefix("") == 4
    assert trie.count_prefix("c") == 3
    assert trie.count_prefix("cat") == 1
    assert trie.count_prefix("card") == 1
    assert trie.count_prefix("d") == 1
    assert trie.count_prefix("x") == 0


def test_word_of_length_l_uses_l_plus_one_nodes():
    t = DLBTrie(["word"])
    # root record + 4 characters + sentinel
    assert t.node_count == 6
    last = t.find_node("word")
    sentinel = t.node(t.node(last).child)
    assert sentinel.symbol == SENTINEL
    assert sentinel.count == 0
    assert t.node(last).is_word


def test_siblings_keep_insertion_order():
    t = DLBTrie(["b", "c", "a"])
    head = t.node(ROOT).child
    assert [t.node(i).symbol for i in t.chain(head)] == ["b", "c", "a"]


def test_sibling_links_are_doubly_linked_and_share_parent(trie):
    head = trie.node(trie.find_node("ca")).child
    t_idx, r_idx = list(trie.chain(head))
    assert trie.node(t_idx).next_sibling == r_idx
    assert trie.node(r_idx).prev_sibling == t_idx
    assert trie.node(t_idx).parent == trie.node(r_idx).parent == trie.find_node("ca")
    assert trie.chain_head(r_idx) == t_idx


def test_symbols_unique_within_chain(trie):
    trie.insert("cab")
    head = trie.node(trie.find_node("ca")).child
    symbols = [trie.node(i).symbol for i in trie.chain(head)]
    assert len(symbols) == len(set(symbols))


def test_contains_and_words(trie):
    assert "car" in trie
    assert "ca" not in trie
    assert "cards" not in trie
    assert "" not in trie
    assert list(trie.words()) == ["cat", "car", "card", "dog"]


@pytest.mark.parametrize("bad", [None, "", "ab" + SENTINEL, 42])
def test_insert_rejects_bad_words(bad):
    t = DLBTrie(["ok"])
    with pytest.raises(InvalidArgumentError):
        t.insert(bad)
    assert len(t) == 1
    assert t.generation == 1


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        DLBTrie().insert("")


def test_dump_whole_trie(trie):
    lines = trie.dump()
    assert lines[0].startswith("==================== START")
    assert lines[-1].startswith("==================== END")
    assert lines[1:-1] == [
        "c (3)",
        " a (3)",
        "  t * (1)",
        "   ^ (0)",
        "  r * (2)",
        "   ^ (0)",
        "   d * (1)",
        "    ^ (0)",
        "d (1)",
        " o (1)",
        "  g * (1)",
        "   ^ (0)",
    ]


def test_dump_from_prefix(trie):
    assert trie.dump("car")[1:-1] == ["^ (0)", "d * (1)", " ^ (0)"]
    assert trie.dump("zzz")[1:-1] == []


def test_long_word_does_not_recurse():
    word = "a" * 5000
    t = DLBTrie([word])
    assert word in t
    assert t.count_prefix("a" * 2500) == 1

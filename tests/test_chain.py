"""Chains of two collections, their seam, and their capabilities."""

from itertools import count, islice, product

import pytest

from collection_adapters import (
    BidirectionalChain,
    Chain,
    ChainIndex,
    RandomAccessChain,
    chained,
)
from collection_adapters.abc import BidirectionalCollection, RandomAccessCollection


def index_at(offset, chain):
    # Built by hand so that the chain's own offsetting is not assumed.
    if offset < len(chain.base1):
        return ChainIndex.first(chain.base1.index_offset(chain.base1.start_index, offset))
    return ChainIndex.second(chain.base2.index_offset(chain.base2.start_index, offset - len(chain.base1)))


# --- Iteration ----------------------------------------------------------------

def test_chain_of_sequences():
    c = chained([1, 2, 3], [4, 5, 6])
    assert list(c) == [1, 2, 3, 4, 5, 6]
    assert len(c) == 6
    assert [c.element_at(i) for i in c.indices()] == [1, 2, 3, 4, 5, 6]


def test_chain_of_unbounded_iterators():
    run = chained(range(1, 11), count(20))
    assert list(islice(run, 20)) == list(range(1, 11)) + list(range(20, 30))


def test_chain_of_an_iterator_and_a_string():
    assert "".join(chained(reversed("ABCDEFGHIJ"), "klmnopqrstuv")) == "JIHGFEDCBAklmnopqrstuv"


def test_chain_of_forward_collections():
    s1 = frozenset(range(11))
    s2 = frozenset(range(20, 31))
    c = chained(s1, s2)
    assert type(c) is Chain
    assert not isinstance(c, BidirectionalCollection)
    assert list(c) == list(s1) + list(s2)
    assert [c.element_at(i) for i in c.indices()] == list(s1) + list(s2)
    assert c.distance(c.start_index, c.end_index) == 22
    with pytest.raises(TypeError):
        reversed(c)


def test_chain_of_bidirectional_collections():
    s1 = "ABCDEFGHIJ"
    s2 = dict.fromkeys("klmnopqrstuv")
    c = chained(s1, s2)
    assert type(c) is BidirectionalChain
    assert not isinstance(c, RandomAccessCollection)
    assert "".join(c) == "ABCDEFGHIJklmnopqrstuv"
    assert "".join(reversed(c)) == "vutsrqponmlkJIHGFEDCBA"


def test_walking_backwards_across_the_seam():
    c = chained("ABC", dict.fromkeys("de"))
    index = c.end_index
    elements = []
    while index != c.start_index:
        index = c.index_before(index)
        elements.append(c.element_at(index))
    assert elements == ["e", "d", "C", "B", "A"]


def test_random_access_needs_both_bases():
    assert type(chained("abc", range(3))) is RandomAccessChain
    assert type(chained("abc", dict.fromkeys("x"))) is BidirectionalChain
    assert type(chained(dict.fromkeys("x"), frozenset("y"))) is Chain


# --- Seam ---------------------------------------------------------------------

def test_advancing_to_the_seam():
    c = chained([1, 2, 3], [4, 5, 6])
    index = c.start_index
    for _ in range(3):
        index = c.index_after(index)
    assert index == ChainIndex.second(0)
    assert index.in_second
    assert c.element_at(index) == 4


def test_retreating_to_the_seam():
    c = chained([1, 2, 3], [4, 5, 6])
    index = c.end_index
    for _ in range(3):
        index = c.index_before(index)
    assert index == ChainIndex.second(0)
    assert c.element_at(index) == 4
    index = c.index_before(index)
    assert index == ChainIndex.first(2)
    assert c.element_at(index) == 3


def test_seam_has_one_representation():
    c = chained([1, 2, 3], [4, 5, 6])
    assert c.index_offset(c.start_index, 3) == ChainIndex.second(0)
    assert c.index_offset(c.end_index, -3) == ChainIndex.second(0)
    assert c.index_at(3) == ChainIndex.second(0)
    assert ChainIndex.first(3) != ChainIndex.second(0)


def test_empty_first_base_starts_in_the_second():
    c = chained([], [1, 2])
    assert c.start_index == ChainIndex.second(0)
    assert c[0] == 1
    assert list(reversed(c)) == [2, 1]
    with pytest.raises(IndexError):
        c.index_before(c.start_index)


def test_empty_chain():
    c = chained("", "")
    assert c.is_empty()
    assert len(c) == 0
    assert list(c) == []


def test_forward_seam_canonicalization():
    c = chained(frozenset({1}), frozenset({2}))
    index = c.index_after(c.start_index)
    assert index.in_second
    assert index == ChainIndex.second(c.base2.start_index)


# --- Errors -------------------------------------------------------------------

def test_end_position_errors():
    c = chained([1, 2, 3], [4, 5, 6])
    with pytest.raises(IndexError):
        c.element_at(c.end_index)
    with pytest.raises(IndexError):
        c.index_after(c.end_index)
    with pytest.raises(IndexError):
        c.index_before(c.start_index)


def test_offsets_out_of_range_fail():
    c = chained([1, 2, 3], [4, 5, 6])
    with pytest.raises(IndexError):
        c.index_offset(c.start_index, 7)
    with pytest.raises(IndexError):
        c.index_offset(c.end_index, -7)
    with pytest.raises(IndexError):
        c.index_offset(ChainIndex.first(1), -2)
    with pytest.raises(IndexError):
        c[6]


# --- Random access ------------------------------------------------------------

def test_distance_between_every_pair_of_positions():
    s1 = "abcde"
    s2 = "VWXYZ"
    c = chained(s1, s2)
    assert len(c) == len(s1) + len(s2)
    for start_offset, end_offset in product(range(len(c) + 1), repeat=2):
        start = index_at(start_offset, c)
        end = index_at(end_offset, c)
        assert c.distance(start, end) == end_offset - start_offset


def test_offset_by_distance_lands_on_the_target():
    c = chained("abcde", "VWXYZ")
    for start_offset, end_offset in product(range(len(c) + 1), repeat=2):
        start = index_at(start_offset, c)
        end = index_at(end_offset, c)
        assert c.index_offset(start, c.distance(start, end)) == end


def test_integer_indexing_and_slicing():
    c = chained([1, 2, 3], (4, 5, 6))
    assert [c[i] for i in range(6)] == [1, 2, 3, 4, 5, 6]
    assert c[-1] == 6
    assert list(c[2:5]) == [3, 4, 5]
    assert list(reversed(c[2:5])) == [5, 4, 3]
    assert c[::2] == [1, 3, 5]
    assert 5 in c
    assert 7 not in c


# --- Equality -----------------------------------------------------------------

def test_equality_uses_both_bases():
    assert chained("ab", "cd") == chained("ab", "cd")
    assert chained("ab", "cd") != chained("ab", "c")
    assert hash(chained("ab", "cd")) == hash(chained("ab", "cd"))
    assert repr(chained("ab", "cd")) == "chained(SequenceCollection('ab'), SequenceCollection('cd'))"

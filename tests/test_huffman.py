import random

import numpy as np
import pytest

from freq import NSYM, count_bytes
from huff_errors import EmptyInputError
from huffman import build_codebook, build_tree, code_lengths, tree_weight_ok


def _freqs(mapping):
    f = np.zeros(NSYM, dtype=np.uint64)
    for sym, n in mapping.items():
        f[sym] = n
    return f


def _random_freqs(rng):
    f = np.zeros(NSYM, dtype=np.uint64)
    for sym in rng.sample(range(NSYM), rng.randint(2, NSYM)):
        f[sym] = rng.choice([1, 1, 2, 3, rng.randint(1, 1000)])
    return f


def _leaves(node):
    if node.is_leaf:
        return [node.sym]
    out = []
    for c in (node.left, node.right):
        if c is not None:
            out.extend(_leaves(c))
    return out


def test_empty_table_is_an_error():
    with pytest.raises(EmptyInputError):
        build_tree(np.zeros(NSYM, dtype=np.uint64))


def test_single_symbol_tree_and_code():
    root = build_tree(_freqs({ord("A"): 8}))
    assert not root.is_leaf
    assert root.right is None
    assert root.left.is_leaf and root.left.sym == ord("A")
    assert root.freq == 8

    codes = build_codebook(root)
    assert codes[ord("A")] == "0"
    assert sum(1 for c in codes if c) == 1


def test_three_symbol_tree_codes():
    root = build_tree(count_bytes(b"AABBBCCCC"))
    assert root.freq == 9
    codes = build_codebook(root)
    assert codes[ord("C")] == "0"
    assert codes[ord("A")] == "10"
    assert codes[ord("B")] == "11"


def test_codebook_is_fixed_size_and_empty_for_absent():
    codes = build_codebook(build_tree(count_bytes(b"hello")))
    assert len(codes) == NSYM
    assert codes[ord("z")] == ""
    lengths = code_lengths(codes)
    assert lengths[ord("l")] >= 1
    assert lengths[ord("z")] == 0


def test_tree_invariants_random():
    rng = random.Random(1234)
    for _ in range(30):
        freqs = _random_freqs(rng)
        root = build_tree(freqs)
        assert root.freq == int(freqs.sum())
        assert tree_weight_ok(root)
        assert sorted(_leaves(root)) == [int(s) for s in np.flatnonzero(freqs)]


def test_build_is_deterministic():
    rng = random.Random(99)
    for _ in range(50):
        freqs = _random_freqs(rng)
        assert build_codebook(build_tree(freqs)) == build_codebook(build_tree(freqs.copy()))


def test_codes_are_prefix_free():
    rng = random.Random(5)
    for _ in range(50):
        codes = sorted(c for c in build_codebook(build_tree(_random_freqs(rng))) if c)
        for a, b in zip(codes, codes[1:]):
            assert not b.startswith(a)
        # full binary tree: Kraft sum is exactly one
        assert sum(2.0 ** -len(c) for c in codes) == pytest.approx(1.0)


def test_all_byte_values_present():
    codes = build_codebook(build_tree(count_bytes(bytes(range(256)))))
    assert all(len(c) == 8 for c in codes)

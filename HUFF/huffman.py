from freq import NSYM, present_symbols
from huff_errors import EmptyInputError
from minheap import MinHeap


class Node:
    __slots__ = ("sym", "freq", "left", "right")

    def __init__(self, sym=None, freq=0, left=None, right=None):
        self.sym = sym
        self.freq = freq
        self.left = left
        self.right = right

    @property
    def is_leaf(self):
        return self.left is None and self.right is None

    def __repr__(self):
        if self.is_leaf:
            return f"Leaf(sym={self.sym}, freq={self.freq})"
        return f"Internal(freq={self.freq})"


def build_tree(freqs):
    """
    Rebuildable Huffman tree from a 256-entry frequency table.

    Leaves enter the heap in ascending symbol order, so the same table always
    gives the same tree. A lone symbol becomes the left child of the root.
    """
    symbols = present_symbols(freqs)
    if not symbols:
        raise EmptyInputError("No symbols to build a tree from")

    if len(symbols) == 1:
        s = symbols[0]
        w = int(freqs[s])
        return Node(freq=w, left=Node(sym=s, freq=w))

    pq = MinHeap(len(symbols))
    for s in symbols:
        pq.insert(Node(sym=s, freq=int(freqs[s])))

    while len(pq) > 1:
        a = pq.extract_min()
        b = pq.extract_min()
        pq.insert(Node(freq=a.freq + b.freq, left=a, right=b))
    return pq.extract_min()


def build_codebook(root):
    """Code table: list of 256 bit-strings, '' for absent symbols."""
    code = [""] * NSYM
    if root.is_leaf:
        code[root.sym] = "0"
        return code
    if root.right is None and root.left is not None and root.left.is_leaf:
        code[root.left.sym] = "0"
        return code
    _walk(root, "", code)
    return code


def _walk(node, prefix, code):
    if node.is_leaf:
        code[node.sym] = prefix
        return
    if node.left is not None:
        _walk(node.left, prefix + "0", code)
    if node.right is not None:
        _walk(node.right, prefix + "1", code)


def code_lengths(code):
    return [len(c) for c in code]


def tree_weight_ok(node) -> bool:
    """Every internal weight equals the sum of its children's."""
    if node.is_leaf:
        return True
    total = sum(c.freq for c in (node.left, node.right) if c is not None)
    return node.freq == total and all(
        tree_weight_ok(c) for c in (node.left, node.right) if c is not None
    )

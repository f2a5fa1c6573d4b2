import numpy as np

NSYM = 256
CHUNK_SIZE = 64 * 1024


def count_bytes(data: bytes) -> np.ndarray:
    """Occurrence count of each byte value in an in-memory buffer."""
    return np.bincount(np.frombuffer(data, dtype=np.uint8), minlength=NSYM).astype(np.uint64)


def count_frequencies(f, chunk_size: int = CHUNK_SIZE):
    """
    Single pass over a binary stream.
    Returns (freqs, total): freqs is a uint64 array of length 256 indexed by byte value.
    """
    freqs = np.zeros(NSYM, dtype=np.uint64)
    total = 0
    while True:
        chunk = f.read(chunk_size)
        if not chunk:
            break
        freqs += count_bytes(chunk)
        total += len(chunk)
    return freqs, total


def present_symbols(freqs) -> list:
    """Symbols with nonzero count, ascending."""
    return [int(s) for s in np.flatnonzero(np.asarray(freqs))]

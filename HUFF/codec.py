"""
Huffman file codec.

Archive layout: header | frequency table | payload (see bitstream.py).
The decoder never stores code tables: it rebuilds the tree from the
frequency table, so both sides must run the exact same build_tree().
"""
import io
import logging
from contextlib import contextmanager

from bitpack import BitReader, BitWriter
from bitstream import read_header, read_table, write_header, write_table
from freq import CHUNK_SIZE, count_bytes, count_frequencies, present_symbols
from huff_errors import (ArchiveIOError, EmptyInputError, FormatError,
                         ResourceExhaustionError, StreamDesyncError)
from huffman import build_codebook, build_tree

log = logging.getLogger(__name__)


@contextmanager
def _io_errors():
    try:
        yield
    except OSError as e:
        raise ArchiveIOError(str(e)) from e
    except MemoryError as e:
        raise ResourceExhaustionError("out of memory") from e


def encode_stream(fin, fout, codes, chunk_size: int = CHUNK_SIZE) -> int:
    """
    Encode every byte read from fin with the code table; bits go to fout.
    Returns payload length in bytes (after the final flush).
    """
    bw = BitWriter(fout)
    while True:
        chunk = fin.read(chunk_size)
        if not chunk:
            break
        for b in chunk:
            c = codes[b]
            if not c:
                # byte was counted, so this means the table is out of sync
                log.warning("no code for byte 0x%02X, skipped", b)
                continue
            bw.write_code(c)
    return bw.flush()


def decode_stream(br, fout, root, original_size: int, chunk_size: int = CHUNK_SIZE) -> int:
    """
    Walk the tree bit by bit until original_size bytes are out or the bits run out.
    Returns number of bytes decoded.
    """
    out = bytearray()
    node = root
    n = 0
    try:
        while n < original_size:
            try:
                bit = br.read_bit()
            except EOFError:
                log.warning("payload ended after %d of %d bytes", n, original_size)
                break
            node = node.right if bit else node.left
            if node is None:
                raise StreamDesyncError(f"Invalid Huffman code at output byte {n} (corrupt stream)")
            if node.is_leaf:
                out.append(node.sym)
                n += 1
                node = root
                if len(out) >= chunk_size:
                    fout.write(out)
                    out = bytearray()
    finally:
        fout.write(out)
    return n


def _encode_archive(fin, fout, freqs, total):
    root = build_tree(freqs)
    codes = build_codebook(root)
    nsym = len(present_symbols(freqs))
    log.debug("original=%d bytes, symbols=%d", total, nsym)

    write_header(fout, original_size=total, compressed_size=0, symbol_count=nsym)
    write_table(fout, freqs)
    payload_len = encode_stream(fin, fout, codes)

    # header is rewritten now that the payload size is known
    fout.seek(0)
    write_header(fout, original_size=total, compressed_size=payload_len, symbol_count=nsym)
    log.debug("payload=%d bytes", payload_len)
    return dict(original_size=total, compressed_size=payload_len,
                symbol_count=nsym, padding_bits=0)


def _read_archive_head(fin):
    """Header + frequency table + rebuilt tree. Nothing is written here."""
    h = read_header(fin)
    freqs = read_table(fin, h["symbol_count"])
    if h["symbol_count"] == 0:
        raise FormatError("Malformed stream: archive holds no symbols")
    total = int(freqs.sum())
    if total != h["original_size"]:
        raise FormatError(
            f"Malformed stream: frequencies sum to {total}, header says {h['original_size']}"
        )
    return h, build_tree(freqs)


def _check_complete(h, n):
    if n < h["original_size"]:
        raise FormatError(
            f"Malformed stream: payload truncated ({n} of {h['original_size']} bytes decoded)"
        )


def compress(input_path, output_path):
    """
    Compress input_path into output_path. Returns the header dict.
    Raises EmptyInputError for a zero-length input, ArchiveIOError on file errors.
    """
    with _io_errors(), open(input_path, "rb") as fin:
        freqs, total = count_frequencies(fin)
        if total == 0:
            raise EmptyInputError(f"Input is empty: {input_path}")
        fin.seek(0)
        with open(output_path, "wb") as fout:
            return _encode_archive(fin, fout, freqs, total)


def decompress(input_path, output_path):
    """
    Restore output_path from the archive at input_path. Returns the header dict.
    The output file is only created once header and frequency table are valid.
    """
    with _io_errors(), open(input_path, "rb") as fin:
        h, root = _read_archive_head(fin)
        with open(output_path, "wb") as fout:
            n = decode_stream(BitReader(fin, limit=h["compressed_size"]), fout,
                              root, h["original_size"])
    _check_complete(h, n)
    return h


def compress_bytes(data: bytes) -> bytes:
    if not data:
        raise EmptyInputError("Input is empty")
    with _io_errors():
        fout = io.BytesIO()
        _encode_archive(io.BytesIO(data), fout, count_bytes(data), len(data))
        return fout.getvalue()


def decompress_bytes(blob: bytes) -> bytes:
    with _io_errors():
        fin = io.BytesIO(blob)
        h, root = _read_archive_head(fin)
        fout = io.BytesIO()
        n = decode_stream(BitReader(fin, limit=h["compressed_size"]), fout,
                          root, h["original_size"])
    _check_complete(h, n)
    return fout.getvalue()

import struct

import numpy as np

from freq import NSYM
from huff_errors import FormatError

MAGIC = 0x48554646  # "HUFF"

# Header (little-endian):
# magic(u32) original_size(u32) compressed_size(u32) symbol_count(u32) padding_bits(u8)
HDR_FMT = "<IIIIB"
HDR_SIZE = struct.calcsize(HDR_FMT)

# Frequency table entry:
# symbol(u8) count(u32)
TBL_FMT = "<BI"
TBL_SIZE = struct.calcsize(TBL_FMT)

U32_MAX = 0xFFFFFFFF


def write_header(f, *, original_size: int, compressed_size: int,
                 symbol_count: int, padding_bits: int = 0):
    if not (0 <= original_size <= U32_MAX):
        raise FormatError(f"original size {original_size} does not fit in 32 bits")
    if not (0 <= compressed_size <= U32_MAX):
        raise FormatError(f"compressed size {compressed_size} does not fit in 32 bits")
    if not (0 <= symbol_count <= NSYM):
        raise FormatError("symbol count out of range (0..256)")
    if not (0 <= padding_bits <= 7):
        raise FormatError("padding bits out of range (0..7)")
    f.write(struct.pack(
        HDR_FMT, MAGIC, original_size, compressed_size, symbol_count, padding_bits
    ))


def read_header(f):
    data = f.read(HDR_SIZE)
    if len(data) != HDR_SIZE:
        raise FormatError("Malformed stream: header too short")
    magic, original_size, compressed_size, symbol_count, padding_bits = struct.unpack(HDR_FMT, data)
    if magic != MAGIC:
        raise FormatError(f"Bad magic number 0x{magic:08X} (not HUFF)")
    if symbol_count > NSYM:
        raise FormatError(f"Malformed stream: symbol count {symbol_count} > {NSYM}")
    return dict(
        magic=magic,
        original_size=original_size,
        compressed_size=compressed_size,
        symbol_count=symbol_count,
        padding_bits=padding_bits,
    )


def write_table(f, freqs) -> int:
    """Write (symbol, count) for every nonzero count, ascending. Returns entry count."""
    n = 0
    for sym in range(NSYM):
        count = int(freqs[sym])
        if count == 0:
            continue
        if count > U32_MAX:
            raise FormatError(f"count for symbol {sym} does not fit in 32 bits")
        f.write(struct.pack(TBL_FMT, sym, count))
        n += 1
    return n


def read_table(f, symbol_count: int) -> np.ndarray:
    freqs = np.zeros(NSYM, dtype=np.uint64)
    prev = -1
    for _ in range(symbol_count):
        data = f.read(TBL_SIZE)
        if len(data) != TBL_SIZE:
            raise FormatError("Malformed stream: frequency table truncated")
        sym, count = struct.unpack(TBL_FMT, data)
        if sym <= prev:
            raise FormatError(f"Malformed stream: symbol {sym} out of order")
        if count == 0:
            raise FormatError(f"Malformed stream: zero count for symbol {sym}")
        freqs[sym] = count
        prev = sym
    return freqs

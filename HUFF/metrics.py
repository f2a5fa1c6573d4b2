import os


def compression_ratio(original_size: int, compressed_size: int) -> float:
    """compressed / original (smaller is better)."""
    if original_size <= 0:
        raise ValueError("original size must be positive")
    return compressed_size / original_size


def space_saved(original_size: int, compressed_size: int) -> float:
    """Percent of the original size saved; negative when the archive grew."""
    if original_size <= 0:
        raise ValueError("original size must be positive")
    return 100.0 * (original_size - compressed_size) / original_size


def file_stats(original_path, compressed_path):
    orig = os.path.getsize(original_path)
    comp = os.path.getsize(compressed_path)
    return dict(
        original_size=orig,
        compressed_size=comp,
        ratio=compression_ratio(orig, comp),
        saved_pct=space_saved(orig, comp),
    )


def code_table_rows(codes):
    """(display_char, byte_value, code, length) for each symbol that has a code."""
    rows = []
    for sym, code in enumerate(codes):
        if not code:
            continue
        ch = chr(sym) if 32 <= sym <= 126 else "?"
        rows.append((ch, sym, code, len(code)))
    return rows

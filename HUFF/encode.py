import argparse, logging, os, sys, time
from codec import compress
from huffman import build_codebook, build_tree
from freq import count_frequencies
from huff_errors import HuffError
from metrics import code_table_rows, file_stats

def print_codes(input_path):
    with open(input_path, "rb") as f:
        freqs, _ = count_frequencies(f)
    codes = build_codebook(build_tree(freqs))
    print("Char\tByte\tCode\tLength")
    for ch, sym, code, L in code_table_rows(codes):
        print(f"{ch}\t{sym}\t{code}\t{L}")

def main(argv=None):
    ap = argparse.ArgumentParser(description="Huffman-compress a file")
    ap.add_argument("--input", required=True, help="file to compress")
    ap.add_argument("--output", required=True, help="path to archive (.huf)")
    ap.add_argument("--codes", action="store_true", help="print the code table")
    ap.add_argument("--stats", action="store_true", help="print size statistics")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    existed = os.path.exists(args.output)
    t0 = time.perf_counter()
    try:
        h = compress(args.input, args.output)
    except HuffError as e:
        print(f"[encode] error: {e}", file=sys.stderr)
        if not existed and os.path.exists(args.output):
            os.remove(args.output)
        return 1
    dt = time.perf_counter() - t0

    print(f"[encode] wrote {args.output} in {dt:.2f}s")
    print(f"[encode] original={h['original_size']}B payload={h['compressed_size']}B symbols={h['symbol_count']}")
    if args.codes:
        print_codes(args.input)
    if args.stats:
        s = file_stats(args.input, args.output)
        print(f"[encode] ratio={s['ratio']:.2f} saved={s['saved_pct']:.2f}%")
    return 0

if __name__ == "__main__":
    sys.exit(main())

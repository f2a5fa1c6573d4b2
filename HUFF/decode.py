import argparse, logging, os, sys, time
from codec import decompress
from huff_errors import HuffError

def main(argv=None):
    ap = argparse.ArgumentParser(description="Restore a Huffman-compressed file")
    ap.add_argument("--input", required=True, help="path to archive (.huf)")
    ap.add_argument("--output", required=True, help="path to restored file")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    existed = os.path.exists(args.output)
    t0 = time.perf_counter()
    try:
        h = decompress(args.input, args.output)
    except HuffError as e:
        print(f"[decode] error: {e}", file=sys.stderr)
        if not existed and os.path.exists(args.output):
            os.remove(args.output)
        return 1
    dt = time.perf_counter() - t0

    print(f"[decode] wrote {args.output} ({h['original_size']}B) in {dt:.2f}s")
    return 0

if __name__ == "__main__":
    sys.exit(main())

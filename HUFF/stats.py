import argparse, sys
from metrics import file_stats

def main(argv=None):
    ap = argparse.ArgumentParser(description="Compression statistics for a file and its archive")
    ap.add_argument("--original", required=True)
    ap.add_argument("--compressed", required=True)
    args = ap.parse_args(argv)

    try:
        s = file_stats(args.original, args.compressed)
    except (OSError, ValueError) as e:
        print(f"[stats] error: {e}", file=sys.stderr)
        return 1
    print(f"Original size:     {s['original_size']} bytes")
    print(f"Compressed size:   {s['compressed_size']} bytes")
    print(f"Compression ratio: {s['ratio']:.2f}")
    print(f"Space saved:       {s['saved_pct']:.2f}%")
    return 0

if __name__ == "__main__":
    sys.exit(main())

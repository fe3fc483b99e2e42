# scripts/predict.py

import os
import sys
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import argparse

from eng2p.infer.g2p_infer import G2PPipeline, tokens_to_frame
from eng2p.utils.logger import setup_logger, log

CONFIG_PATH = "config/config.yaml"


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--text", type=str,
                        help="Text (one sentence) to convert to phonemes")
    parser.add_argument("--file", type=str,
                        help="Path to an input text file, one sentence per line")
    parser.add_argument("--output", type=str,
                        help="Output file (optional); phoneme strings only")
    parser.add_argument("--config", type=str, default=CONFIG_PATH,
                        help="Path to config.yaml")
    parser.add_argument("--british", action="store_true",
                        help="GB English instead of US English")
    parser.add_argument("--no-fallback", action="store_true",
                        help="Disable the espeak-ng fallback")
    parser.add_argument("--debug", action="store_true",
                        help="Print the token table for every sentence")
    args = parser.parse_args()

    if not args.text and not args.file:
        print("Please pass input with --text or --file")
        sys.exit(1)

    setup_logger(level="debug" if args.debug else "info")

    # -------------------------
    # 1. Load pipeline
    # -------------------------
    pipeline = G2PPipeline(
        args.config,
        british=True if args.british else None,
        fallback=False if args.no_fallback else None,
    )

    lines = []
    if args.text:
        lines.append(args.text.strip())
    if args.file:
        if not os.path.exists(args.file):
            print(f"Input file not found: {args.file}")
            sys.exit(1)
        with open(args.file, "r", encoding="utf-8") as f:
            lines.extend(raw.strip() for raw in f)

    # -------------------------
    # 2. Predict
    # -------------------------
    out_lines = []
    for line in lines:
        if not line:
            continue
        ps, tokens = pipeline(line)
        print(ps)
        if args.debug:
            print(tokens_to_frame(tokens).to_string(index=False))
        out_lines.append(ps.strip())

    # -------------------------
    # 3. Save to --output
    # -------------------------
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            for out in out_lines:
                f.write(out + "\n")
        log(f"Phonemes saved to: {args.output}")


if __name__ == "__main__":
    main()

# normalize_smoke.py
"""
Normalization smoke test for janorm.
Runs each input through normalize / guess_language / the script matchers and prints the results.

Usage:
  python scripts/normalize_smoke.py "ＢGＭ弾きます🐏🌙【高音質】" "Hello　ｗｏｒｌｄ"
  echo "ｶﾀｶﾅ" | python scripts/normalize_smoke.py --space-width 1

Install:
  pip install -e .
"""

from __future__ import annotations

import argparse
import logging
import sys

from janorm.config import load_config
from janorm.errors import ConversionError
from janorm.textnorm.language import guess_language
from janorm.textnorm.script_match import match_hankaku_kana, match_kanji_kana
from janorm.textnorm.segments import normalize


def main() -> None:
    p = argparse.ArgumentParser()
    p.add_argument("texts", nargs="*", help="Texts to normalize (read from stdin when omitted)")
    p.add_argument("--config", type=str, default=None, help="Path to a janorm YAML config")
    p.add_argument("--space-width", type=int, choices=[1, 2], default=None, help="ASCII spaces per JIS space")
    args = p.parse_args()

    config = load_config(args.config)
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        force=True,
    )
    options = config.to_options()
    if args.space_width is not None:
        options = options.model_copy(update={"space_width": args.space_width})

    texts = args.texts or [line.rstrip("\n") for line in sys.stdin]
    for text in texts:
        try:
            out = normalize(text, options)
        except ConversionError as exc:
            print(f"[normalize_smoke] {text!r}: conversion failed: {exc}")
            continue
        print(f"[normalize_smoke] input      : {text!r}")
        print(f"[normalize_smoke] normalized : {out!r}")
        print(f"[normalize_smoke] language   : {guess_language(text)}")
        print(f"[normalize_smoke] kanji/kana : {match_kanji_kana(text)}")
        print(f"[normalize_smoke] hankaku    : {match_hankaku_kana(text)}")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\n[normalize_smoke] Cancelled.")
        sys.exit(130)

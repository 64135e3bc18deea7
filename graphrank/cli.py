import argparse
import logging
import sys
import time
from typing import List, Optional

from graphrank.data.analyzer import download_resources
from graphrank.errors import GraphRankError
from graphrank.pipeline.config import RankConfig, load_config
from graphrank.pipeline.document import Document
from graphrank.utils.io import read_text
from graphrank.utils.logging import setup_logging

logger = logging.getLogger("graphrank")


def _build_config(args) -> RankConfig:
    cfg = load_config(args.config) if args.config else RankConfig()
    return cfg.with_options(threshold=args.threshold, merge_quotations=args.merge_quotations or None)


def run_summarize(args) -> List[str]:
    doc = Document.create(read_text(args.file), config=_build_config(args))
    return ["[%.2f] %s" % (s.score, s.raw) for s in doc.summarize(args.length, focus=args.focus)]


def run_highlight(args) -> List[str]:
    doc = Document.create(read_text(args.file), config=_build_config(args))
    return ["[%.2f] %s" % (kw.weight, kw.word) for kw in doc.highlight(args.words, merge=not args.no_merge)]


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="graphrank", description="Extractive summaries and keywords with TextRank")
    ap.add_argument("--config", default=None, help="YAML config path")
    ap.add_argument("--threshold", type=float, default=None, help="sentence similarity threshold")
    ap.add_argument("--merge-quotations", action="store_true", help="merge sentences inside quotations")
    ap.add_argument("--download-nltk", action="store_true", help="fetch nltk models before running")
    ap.add_argument("--log-level", default="INFO")
    sub = ap.add_subparsers(dest="command", required=True)

    sp = sub.add_parser("summarize", help="print the top sentences in reading order")
    sp.add_argument("--length", type=int, required=True)
    sp.add_argument("--file", required=True)
    sp.add_argument("--focus", default=None, help="focus sentence; defaults to the first sentence")
    sp.set_defaults(func=run_summarize)

    hp = sub.add_parser("highlight", help="print the top keywords")
    hp.add_argument("--words", type=int, default=-1, help="keyword count; negative selects a third")
    hp.add_argument("--file", required=True)
    hp.add_argument("--no-merge", action="store_true", help="do not build multi-word keywords")
    hp.set_defaults(func=run_highlight)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    if args.download_nltk:
        download_resources()

    start = time.perf_counter()
    try:
        lines = args.func(args)
    except (GraphRankError, OSError) as exc:
        logger.error("%s", exc)
        return 1
    for line in lines:
        print(line)
    logger.info("%s took %.3fs", args.command, time.perf_counter() - start)
    return 0


if __name__ == "__main__":
    sys.exit(main())

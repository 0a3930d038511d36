"""Command line interface for semantic prime discovery."""
from __future__ import annotations

import argparse
import gzip
import json
import logging
import os
import sys
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import IO, Callable, Iterator

from dotenv import find_dotenv, load_dotenv

from .common.config import (
    DEFAULT_STOP_WORDS,
    VERBOSE_ENV,
    DiscoveryConfig,
    env_flag,
    get_config_paths,
    load_stop_words,
)
from .graph.trace import UnknownWordError, dependency_path, explain_word, shortest_cycle
from .pipeline import DiscoveryResult, discover_primes
from .reference.nsm import check_reference, coverage
from .report.writer import to_json_payload, to_links_notation
from .utils.text import utcnow_iso

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)


def _validate_input_file(path: Path, description: str) -> None:
    if not path.exists() or not path.is_file():
        raise FileNotFoundError(f"{description} '{path}' does not exist or is not a file")


def _atomic_write(path: Path, write_fn: Callable[[IO[str]], None]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with NamedTemporaryFile(mode="w", delete=False, dir=str(path.parent), encoding="utf-8", newline="\n") as tmp:
        write_fn(tmp)
        tmp.flush()
        os.fsync(tmp.fileno())
    os.replace(tmp.name, path)


def _write_text(path: Path, text: str) -> None:
    _atomic_write(path, lambda tmp: tmp.write(text))


def _write_json(path: Path, payload: dict[str, object]) -> None:
    def writer(tmp: IO[str]) -> None:
        json.dump(payload, tmp, indent=2, ensure_ascii=False)
        tmp.write("\n")

    _atomic_write(path, writer)


def _iter_corpus_lines(path: Path) -> Iterator[str]:
    """Yield corpus lines one at a time, transparently reading ``.gz`` files."""

    if path.suffix == ".gz":
        handle: IO[str] = gzip.open(path, "rt", encoding="utf-8")
    else:
        handle = path.open("r", encoding="utf-8")
    with handle:
        yield from handle


def _config_from_args(args: argparse.Namespace) -> DiscoveryConfig:
    stop_words: frozenset[str] = frozenset()
    if getattr(args, "stop_words", None):
        stop_words = load_stop_words(args.stop_words)
    elif getattr(args, "use_default_stop_words", False):
        stop_words = DEFAULT_STOP_WORDS
        logger.info("Using default stop words list", extra={"count": len(stop_words)})
    else:
        logger.info("No stop words configured; analyzing all words")

    return DiscoveryConfig(
        stop_words=stop_words,
        sample_size=getattr(args, "sample_size", 10),
        show_progress=getattr(args, "progress", False),
    )


def _discover(args: argparse.Namespace) -> DiscoveryResult:
    corpus = Path(args.corpus).expanduser()
    _validate_input_file(corpus, "Corpus file")
    logger.info("Discovering semantic primes", extra={"corpus": str(corpus)})
    return discover_primes(_iter_corpus_lines(corpus), _config_from_args(args))


def _run_discover(args: argparse.Namespace) -> None:
    result = _discover(args)

    output = Path(args.output) if args.output else get_config_paths()["primes_lino"]
    _write_text(output, to_links_notation(result.records))
    written = [str(output)]

    if args.json:
        _write_json(Path(args.json), to_json_payload(result))
        written.append(args.json)

    print(
        "[{}] Discovered {} primes from {} words ({} edges) | wrote: {}".format(
            utcnow_iso(),
            len(result.records),
            len(result.graph),
            result.graph.edge_count,
            ", ".join(written),
        )
    )
    for record in result.records[: args.top]:
        flags = []
        if record.has_self_loop:
            flags.append("self-loop")
        if record.is_self_reference:
            flags.append("self-ref")
        flags.append(f"scc={record.scc_size}")
        print(
            f"  {record.word}: score={record.score:.1f}, refs={record.reference_count} {', '.join(flags)}"
        )


def _run_trace(args: argparse.Namespace) -> None:
    result = _discover(args)
    word = args.word.strip().lower()
    if word not in result.graph:
        raise UnknownWordError(word)

    if args.to:
        target = args.to.strip().lower()
        if target not in result.graph:
            raise UnknownWordError(target)
        path = dependency_path(result.graph, word, target)
    else:
        path = shortest_cycle(result.graph, word)

    if path is None:
        print(f"{word}: no definition chain found")
    else:
        print(" -> ".join(path))


def _run_explain(args: argparse.Namespace) -> None:
    result = _discover(args)
    report = explain_word(result, args.word)

    print(f"{report.word}:")
    for definition in report.definitions:
        print(f"  definition: {definition}")
    print(f"  content words: {', '.join(report.content_words)}")
    print(f"  depends on: {', '.join(report.dependencies)}")
    print(f"  reference count: {report.reference_count}")
    print(f"  scc size: {report.scc_size}, self-loop: {report.has_self_loop}")
    print(f"  in cycle: {report.is_in_cycle}")
    if report.cycle:
        print(f"  shortest cycle: {' -> '.join(report.cycle)}")
    if report.score is not None:
        print(f"  score: {report.score:.1f}")


def _run_reference(args: argparse.Namespace) -> None:
    result = _discover(args)
    hits = check_reference(result)
    for hit in hits:
        detail = f"score={hit.score:.1f}, scc_size={hit.scc_size}" if hit.score is not None else f"scc_size={hit.scc_size}"
        print(f"  {hit.prime} [{hit.term}]: {hit.status.upper()} ({detail})")
    summary = coverage(hits)
    print(
        "Reference primes found: {}/{} ({} missing)".format(
            summary["found"], summary["primes"], summary["missing"]
        )
    )


def _add_corpus_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("corpus", help="Lexical database XML export (optionally .gz)")
    stop = parser.add_mutually_exclusive_group()
    stop.add_argument("--stop-words", default=None, help="File with one stop word per line")
    stop.add_argument(
        "--use-default-stop-words",
        action="store_true",
        help="Exclude the built-in English function words",
    )
    parser.add_argument("--sample-size", type=int, default=10, help="SCC members kept per record")
    parser.add_argument("--progress", action="store_true", help="Show progress bars")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="semantic-primes",
        description="Discover semantic prime candidates from circular definitions",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    discover = subparsers.add_parser("discover", help="Rank words in circular definition chains")
    _add_corpus_arguments(discover)
    discover.add_argument("--output", default=None, help="Links Notation output path")
    discover.add_argument("--json", default=None, help="Optional JSON output path")
    discover.add_argument("--top", type=int, default=30, help="Number of primes to print")
    discover.set_defaults(handler=_run_discover)

    trace = subparsers.add_parser("trace", help="Show the shortest definition chain for a word")
    _add_corpus_arguments(trace)
    trace.add_argument("word", help="Word to trace")
    trace.add_argument("--to", default=None, help="Trace to this word instead of back to itself")
    trace.set_defaults(handler=_run_trace)

    explain = subparsers.add_parser("explain", help="Describe how discovery sees a word")
    _add_corpus_arguments(explain)
    explain.add_argument("word", help="Word to explain")
    explain.set_defaults(handler=_run_explain)

    reference = subparsers.add_parser("reference", help="Compare results with the NSM prime list")
    _add_corpus_arguments(reference)
    reference.set_defaults(handler=_run_reference)

    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv(find_dotenv(usecwd=True))

    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:  # pragma: no cover - delegated to argparse
        return exc.code

    _configure_logging(args.verbose or env_flag(VERBOSE_ENV))

    try:
        args.handler(args)
    except UnknownWordError as error:
        logger.error("Word not found in corpus: %s", error.word)
        return 1
    except (FileNotFoundError, OSError, ValueError) as error:
        logger.error("Command failed", exc_info=False, extra={"error": str(error)})
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())

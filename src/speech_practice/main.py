"""Main entry point for the speech practice toolkit."""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from speech_practice.coordinators import PronunciationCheckCoordinator
from speech_practice.services import (
    FuriganaService,
    JamdictLookupService,
    JishoLookupService,
    PronunciationScorer,
    ReadingLookupService,
    RetryingLookupService,
    ScoringConfig,
    SettingsManager,
    SqliteReadingCache,
    WhisperTranscriptionService,
    to_romaji,
)


def build_lookup_service(settings: SettingsManager) -> ReadingLookupService:
    if settings.get_lookup_backend() == "jamdict":
        inner: ReadingLookupService = JamdictLookupService()
    else:
        inner = JishoLookupService(timeout=settings.get_lookup_timeout())
    return RetryingLookupService(inner, max_attempts=settings.get_lookup_max_attempts())


def build_cache(settings: SettingsManager) -> SqliteReadingCache:
    cache = SqliteReadingCache(settings.get_reading_cache_path())
    cache.ensure_schema()
    return cache


def build_scorer(settings: SettingsManager) -> PronunciationScorer:
    return PronunciationScorer(
        ScoringConfig(forgiveness_multiplier=settings.get_forgiveness_multiplier())
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="speech-practice",
        description="Furigana annotation and pronunciation scoring for Japanese practice.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    annotate = subparsers.add_parser("annotate", help="Add furigana markup to text")
    annotate.add_argument("text")

    score = subparsers.add_parser("score", help="Score a transcription against a target phrase")
    score.add_argument("target")
    score.add_argument("heard")

    romaji = subparsers.add_parser("romaji", help="Render text as romaji")
    romaji.add_argument("text")

    check = subparsers.add_parser("check", help="Transcribe a recording and score it")
    check.add_argument("audio", type=Path)
    check.add_argument("target")
    check.add_argument("--language", default="japanese")

    forget = subparsers.add_parser("cache-forget", help="Delete cached readings")
    forget.add_argument("words", nargs="+")

    subparsers.add_parser("cache-purge", help="Delete cached entries without ruby markup")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Composition root: the only place that wires settings, cache, lookup,
    scorer and transcription together.
    """
    args = build_parser().parse_args(argv)
    settings = SettingsManager()

    if args.command == "score":
        result = build_scorer(settings).score(args.target, args.heard)
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return 0

    cache = build_cache(settings)
    try:
        furigana = FuriganaService(build_lookup_service(settings), cache)

        if args.command == "annotate":
            print(furigana.annotate(args.text))
        elif args.command == "romaji":
            print(to_romaji(args.text, furigana.annotate(args.text)))
        elif args.command == "check":
            coordinator = PronunciationCheckCoordinator(
                transcription_service=WhisperTranscriptionService(
                    api_key=settings.get_openai_api_key()
                ),
                scorer=build_scorer(settings),
                furigana_service=furigana,
            )
            outcome = coordinator.check(args.audio.read_bytes(), args.target, args.language)
            print(json.dumps(outcome.to_dict(), ensure_ascii=False, indent=2))
        elif args.command == "cache-forget":
            for word in args.words:
                cache.delete(word)
                print(f"Cleared: {word}")
        elif args.command == "cache-purge":
            purged = cache.purge_unannotated()
            for word in purged:
                print(f"  - \"{word}\"")
            print(f"Deleted {len(purged)} entries, {len(cache.keys())} remain")
    finally:
        cache.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())

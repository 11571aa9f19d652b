"""Kana to romaji conversion for learner-facing display."""

import re
from typing import List, Optional

import pykakasi

LONG_VOWEL_MARKS = {"ー", "〜"}
SOKUON = {"っ", "ッ"}

# Spaces, long vowel marks and kana runs; everything else is dropped.
_TOKEN_PATTERN = re.compile(r" |[ー〜]|[ぁ-ゖァ-ヺ]+")

_kakasi = pykakasi.kakasi()

PARTICLES = {"は", "が", "を", "に", "で", "と", "の", "も", "へ", "や", "か", "ね", "よ", "わ"}

_PARTICLE_PRONUNCIATION = {"ha": "wa", "he": "e"}

_RUBY_READING_PATTERN = re.compile(r"<ruby>[^<]*<rt>([^<]*)</rt></ruby>")
_TAG_PATTERN = re.compile(r"<[^>]*>")


def strip_ruby_markup(annotation_html: str) -> str:
    """Replace each <ruby>漢字<rt>かんじ</rt></ruby> with its reading and drop other tags."""
    if not annotation_html:
        return ""
    text = _RUBY_READING_PATTERN.sub(r"\1", annotation_html)
    return _TAG_PATTERN.sub("", text)


def add_particle_spacing(kana: str) -> str:
    """
    Put spaces around single-kana particles so the romaji reads as words.

    A particle kana never starts a word, so a kana at the start of the text or
    right after a space is left alone. No space is added after a particle that
    is followed by a space or by another particle.

    Example: "がっこうへいきます" -> "がっこう へ いきます"
    """
    pieces: List[str] = []
    last = len(kana) - 1

    for i, char in enumerate(kana):
        prev_char = kana[i - 1] if i > 0 else " "
        next_char = kana[i + 1] if i < last else " "
        is_particle = char in PARTICLES and prev_char != " "

        if is_particle:
            pieces.append(" ")
        pieces.append(char)
        if is_particle and i < last and next_char != " " and next_char not in PARTICLES:
            pieces.append(" ")

    return "".join(pieces)


def _hepburn(kana_run: str) -> str:
    # A trailing sokuon has no consonant to double.
    kana_run = kana_run.rstrip("".join(SOKUON))
    if not kana_run:
        return ""
    return "".join(item["hepburn"] for item in _kakasi.convert(kana_run))


def kana_to_romaji(kana: str) -> str:
    """
    Convert hiragana/katakana to Hepburn-style romaji with pykakasi.

    Spaces are preserved and a long vowel mark repeats the previous vowel.
    Characters without a known phonetic value (ideographs, punctuation,
    Latin text) are omitted.
    """
    pieces: List[str] = []

    for token in _TOKEN_PATTERN.findall(kana or ""):
        if token == " ":
            pieces.append(" ")
        elif token in LONG_VOWEL_MARKS:
            previous = "".join(pieces)
            if previous and previous[-1] in "aeiou":
                pieces.append(previous[-1])
        else:
            pieces.append(_hepburn(token))

    return "".join(pieces)


def fix_particle_pronunciation(romaji: str) -> str:
    """Render standalone particle words as spoken: ha -> wa, he -> e."""
    return " ".join(_PARTICLE_PRONUNCIATION.get(word, word) for word in romaji.split(" "))


def to_romaji(text: str, annotation_html: Optional[str] = None) -> str:
    """
    Convert Japanese text to space-separated romaji.

    Args:
        text: Original text, used as the phonetic source when no markup is given.
        annotation_html: Optional furigana markup for text; ruby readings replace
            their ideographs and unannotated ideographs are skipped.

    Returns:
        Romaji string with particles split out as words.
    """
    source = strip_ruby_markup(annotation_html) if annotation_html else (text or "")
    if not source:
        return ""

    spaced = add_particle_spacing(source)
    romaji = fix_particle_pronunciation(kana_to_romaji(spaced))
    return " ".join(romaji.split())

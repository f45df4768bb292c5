from __future__ import annotations
import re
from typing import List

_WS_RE = re.compile(r"\s+")
_SENT_END_RE = re.compile(r"(?<=[.!?])\s+")
_TERMINAL_RE = re.compile(r"""[!,;`'".?>]$""")

def normalize_whitespace(text: str) -> str:
    # collapse runs of spaces, tabs and newlines the way HTML rendering does
    return _WS_RE.sub(" ", text or "").strip()

def capitalize(sentence: str) -> str:
    if not sentence:
        return ""
    return sentence[0].upper() + sentence[1:]

def punctualize(sentence: str) -> str:
    """Append a dot unless the sentence already ends in punctuation or a closing tag."""
    if not sentence:
        return ""
    if not _TERMINAL_RE.search(sentence):
        sentence += "."
    return sentence

def split_sentences(text: str) -> List[str]:
    """
    Segment raw text into sentences.

    Output sentences are whitespace-normalized, non-empty, capitalized and
    terminally punctuated; the ranking code assumes this and does not check it.
    """
    text = normalize_whitespace(text)
    if not text:
        return []
    # Split on . ! ? while keeping order
    parts = _SENT_END_RE.split(text) or [text]
    sentences = []
    for p in parts:
        p = normalize_whitespace(p)
        if p:
            sentences.append(punctualize(capitalize(p)))
    return sentences

def tokenize(sentence: str) -> List[str]:
    # word tokens are plain whitespace splits, no case folding or stemming
    return sentence.split()

def word_count(sentence: str) -> int:
    return len(tokenize(sentence))

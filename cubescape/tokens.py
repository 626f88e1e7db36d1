"""Splitting text into words while keeping the delimiters as tokens."""

from __future__ import annotations

from typing import List


def split_keep(text: str, charset: str) -> List[str]:
    """Split ``text`` at every character of ``charset``.

    Each delimiter becomes a one-character token of its own; the text between
    delimiters becomes a word token. Empty words are not produced.
    """
    tokens: List[str] = []
    word: List[str] = []
    for ch in text:
        if ch in charset:
            if word:
                tokens.append("".join(word))
                word.clear()
            tokens.append(ch)
        else:
            word.append(ch)
    if word:
        tokens.append("".join(word))
    return tokens


def split_keep_collapsed(text: str, charset: str) -> List[str]:
    """Like :func:`split_keep`, with runs of one same delimiter kept once."""
    collapsed: List[str] = []
    current_delim = None
    for token in split_keep(text, charset):
        if token[0] in charset:
            if token[0] == current_delim:
                continue
            current_delim = token[0]
        else:
            current_delim = None
        collapsed.append(token)
    return collapsed
# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-01-23
# Description: ContextAssembler
# -----------------------------------------------------------------------------
from typing import Any, Iterable, Mapping

PASSAGE_SEPARATOR = "\n\n"


def _content_of(passage: Any) -> str:
    if isinstance(passage, str):
        return passage
    if isinstance(passage, Mapping):
        return passage["content"]
    return passage.content


def assemble_context(passages: Iterable[Any]) -> str:
    """
    Join passage contents, in the order given, separated by a blank line.

    Accepts SimilarityResult objects, mappings with a "content" key or plain
    strings. An empty sequence gives an empty string.
    """
    return PASSAGE_SEPARATOR.join(_content_of(p) for p in passages)

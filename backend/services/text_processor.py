"""
Law text truncation.

Keeps a law text within the prompt budget by preferring lines that mention
one of the configured relevance keywords, backfilling from the start of the
document when the keyword lines cover less than half of the budget.
"""

from typing import Iterable, List, Set

from config import MAX_LAW_TEXT_CHARS, RELEVANT_KEYWORDS


def truncate_law_text(
    text: str,
    max_chars: int = MAX_LAW_TEXT_CHARS,
    keywords: Iterable[str] = RELEVANT_KEYWORDS,
) -> str:
    """
    Return text unchanged if it fits in max_chars, otherwise a selection of its lines.

    The result is at most max_chars long, counting the joining newlines.
    Keyword lines keep their document order and come first; backfilled
    lines follow. No line is included twice.
    """
    if len(text) <= max_chars:
        return text

    lowered_keywords = [k.lower() for k in keywords]
    lines = text.split("\n")
    selected: List[int] = []
    taken: Set[int] = set()
    char_count = 0

    def _cost(line: str) -> int:
        return len(line) + (1 if selected else 0)

    for index, line in enumerate(lines):
        lower_line = line.lower()
        if not any(keyword in lower_line for keyword in lowered_keywords):
            continue
        cost = _cost(line)
        if char_count + cost > max_chars:
            break
        selected.append(index)
        taken.add(index)
        char_count += cost

    if char_count < max_chars / 2:
        for index, line in enumerate(lines):
            if index in taken:
                continue
            cost = _cost(line)
            if char_count + cost > max_chars:
                break
            selected.append(index)
            taken.add(index)
            char_count += cost

    return "\n".join(lines[index] for index in selected)

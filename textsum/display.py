from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from .counter import TextCounts
from .ranking import RankedEntry


SUFFIX_DEFAULT = "..."
DEFAULT_WIDTH = 80
DEFAULT_PROPORTION: tuple[float, float] = (7.0, 3.0)
DEFAULT_TITLE = "Text summary"
SEPARATOR_CHAR = "="
BORDER_CHAR = "|"
WORDS_HEADING = "Most common words"
COUNTS_HEADING = "Counts"
SINGLE_HEADING = "Most common words/phrases:"
LAYOUTS = {"columns": 2, "single": 1}


class LayoutError(ValueError):
    pass


@dataclass
class ReportConfig:
    width: int = DEFAULT_WIDTH
    proportion: tuple[float, float] = DEFAULT_PROPORTION
    suffix: str = SUFFIX_DEFAULT
    columns: int = 2
    title: str = DEFAULT_TITLE


def limit_width(text: str, max_width: int, suffix: str = SUFFIX_DEFAULT) -> str:
    """Cut text down to max_width characters, marking the cut with suffix."""
    if max_width <= len(suffix):
        raise LayoutError(f"max_width must be greater than {len(suffix)} for suffix {suffix!r}, got {max_width}")
    if len(text) <= max_width:
        return text
    return text[: max_width - len(suffix)] + suffix


def centre_text(text: str, max_width: int, suffix: str = SUFFIX_DEFAULT) -> str:
    """
    Pad text with spaces on both sides to exactly max_width characters.

    When the padding cannot be split evenly the extra space goes on the left.
    Text that is too long is truncated with limit_width instead.
    """
    if len(text) == max_width:
        return text
    if len(text) > max_width:
        return limit_width(text, max_width, suffix)

    spare = max_width - len(text)
    right = spare // 2
    left = spare - right
    return " " * left + text + " " * right


def comma_separate_number(number: int) -> str:
    if number < 0:
        raise ValueError(f"number must be >= 0, got {number}")
    return f"{number:,}"


def minimum_width(config: ReportConfig) -> int:
    column = len(config.suffix) + 1
    if config.columns == 1:
        return column + 2
    return 2 * column + 3


def column_widths(
    usable: int,
    proportion: tuple[float, float],
    word_need: int,
    count_need: int,
    min_width: int = len(SUFFIX_DEFAULT) + 1,
) -> tuple[int, int]:
    """
    Split usable characters between the words and counts columns.

    The split starts from proportion (rounded half up) and keeps each column
    at least min_width wide. If one column is narrower than its longest phrase
    while the other has room to spare, width moves across until the tight
    column fits or the other one runs out of spare room.
    """
    left, right = (float(part) for part in proportion)
    if left <= 0 or right <= 0:
        raise LayoutError(f"proportion parts must be > 0, got {proportion}")
    if usable < 2 * min_width:
        raise LayoutError(f"need at least {2 * min_width} usable characters for two columns, got {usable}")

    words = int(usable * left / (left + right) + 0.5)
    words = max(min_width, min(words, usable - min_width))
    counts = usable - words

    if words < word_need and counts > count_need:
        words += min(word_need - words, counts - max(count_need, min_width))
    elif counts < count_need and words > word_need:
        words -= min(count_need - counts, words - max(word_need, min_width))

    return words, usable - words


def word_phrases(ranked: Iterable[RankedEntry]) -> list[str]:
    return [f"{entry.word} ({comma_separate_number(entry.count)})" for entry in ranked]


def count_phrases(counts: TextCounts) -> list[str]:
    return [
        f"Words: {comma_separate_number(counts.word_count)}",
        f"Characters: {comma_separate_number(counts.character_count)}",
        f"Letters: {comma_separate_number(counts.alphabetic)}",
        f"Numbers: {comma_separate_number(counts.numeric)}",
        f"Symbols: {comma_separate_number(counts.symbol)}",
        f"Whitespace: {comma_separate_number(counts.whitespace)}",
    ]


def render(
    ranked: Sequence[RankedEntry],
    counts: TextCounts,
    config: ReportConfig | None = None,
) -> list[str]:
    """
    Build the boxed report as a list of lines, each exactly config.width long.

    An empty ranking renders the title and headings only.
    """
    cfg = config or ReportConfig()
    if cfg.columns not in (1, 2):
        raise LayoutError(f"columns must be 1 or 2, got {cfg.columns}")
    if cfg.width < minimum_width(cfg):
        raise LayoutError(f"width must be at least {minimum_width(cfg)}, got {cfg.width}")

    if cfg.columns == 1:
        lines = _render_single(word_phrases(ranked), cfg)
    else:
        lines = _render_columns(word_phrases(ranked), count_phrases(counts), cfg)

    for idx, line in enumerate(lines):
        if len(line) != cfg.width:
            raise LayoutError(f"line {idx} is {len(line)} characters wide, expected {cfg.width}")
    return lines


def _render_single(words: list[str], cfg: ReportConfig) -> list[str]:
    separator = SEPARATOR_CHAR * cfg.width
    inner = [cfg.width - 2]

    lines = [
        separator,
        _row([_one_line(cfg.title)], inner, cfg.suffix),
        separator,
        _row([SINGLE_HEADING], inner, cfg.suffix),
        separator,
    ]
    if words:
        lines.extend(_row([phrase], inner, cfg.suffix) for phrase in words)
        lines.append(separator)
    return lines


def _render_columns(words: list[str], counts: list[str], cfg: ReportConfig) -> list[str]:
    separator = SEPARATOR_CHAR * cfg.width
    widths = list(
        column_widths(
            cfg.width - 3,
            cfg.proportion,
            word_need=max(len(phrase) for phrase in [WORDS_HEADING, *words]),
            count_need=max(len(phrase) for phrase in [COUNTS_HEADING, *counts]),
            min_width=len(cfg.suffix) + 1,
        )
    )

    lines = [
        separator,
        _row([_one_line(cfg.title)], [cfg.width - 2], cfg.suffix),
        separator,
        _row([WORDS_HEADING, COUNTS_HEADING], widths, cfg.suffix),
        separator,
    ]
    if not words:
        return lines

    total = max(len(words), len(counts))
    words = words + [""] * (total - len(words))
    counts = counts + [""] * (total - len(counts))
    lines.extend(_row([left, right], widths, cfg.suffix) for left, right in zip(words, counts))
    lines.append(separator)
    return lines


def _row(phrases: list[str], widths: list[int], suffix: str) -> str:
    cells = [centre_text(phrase, width, suffix) for phrase, width in zip(phrases, widths)]
    return BORDER_CHAR + BORDER_CHAR.join(cells) + BORDER_CHAR


def _one_line(text: str) -> str:
    # newlines and tabs would print wider or taller than the box
    return " ".join(text.split())

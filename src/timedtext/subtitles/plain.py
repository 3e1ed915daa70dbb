from __future__ import annotations

import logging
import math
import re
from typing import List

from .types import TimedLine

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_DURATION = 180.0

_LINE_SPLIT_RE = re.compile(r"\r?\n")


def _effective_duration(total_duration: float | None, fallback_duration: float) -> float:
    try:
        value = float(total_duration) if total_duration is not None else 0.0
    except (TypeError, ValueError):
        value = 0.0
    if math.isfinite(value) and value > 0:
        return value
    if not (math.isfinite(fallback_duration) and fallback_duration > 0):
        fallback_duration = DEFAULT_FALLBACK_DURATION
    logger.debug("总时长 %r 无效，使用默认时长 %.1f 秒", total_duration, fallback_duration)
    return fallback_duration


def parse_plain_lyrics(
    text: str,
    total_duration: float | None,
    fallback_duration: float = DEFAULT_FALLBACK_DURATION,
) -> List[TimedLine]:
    """
    将无时间信息的纯文本歌词按行均分到 [0, total_duration] 上。

    total_duration 为 0、负数或非有限值时，改用 fallback_duration（默认 180 秒），
    以保证结果依然有结构。
    """
    lines = [line.strip() for line in _LINE_SPLIT_RE.split(text)]
    lines = [line for line in lines if line]
    if not lines:
        return []

    duration = _effective_duration(total_duration, fallback_duration)
    per_line = duration / len(lines)
    return [
        TimedLine(
            id=f"line-{idx}",
            start_time=idx * per_line,
            end_time=(idx + 1) * per_line,
            text=line,
        )
        for idx, line in enumerate(lines)
    ]

from __future__ import annotations

from typing import List

from .plain import DEFAULT_FALLBACK_DURATION, parse_plain_lyrics
from .srt_parser import parse_srt
from .types import TimedLine

DETECT_MODES = ("substring", "strict")


def detect_and_parse(
    content: str,
    total_duration: float | None,
    strict: bool = False,
    fallback_duration: float = DEFAULT_FALLBACK_DURATION,
) -> List[TimedLine]:
    """
    自动识别输入格式并解析。

    默认模式：内容中出现 "-->" 即按 SRT 解析，否则按纯文本均分。
    strict=True 时先尝试 SRT 解析，没有得到任何字幕块再退回纯文本，
    避免正文里恰好出现 "-->" 时得到空结果。
    """
    if strict:
        lines = parse_srt(content)
        if lines:
            return lines
        return parse_plain_lyrics(content, total_duration, fallback_duration)

    if "-->" in content:
        return parse_srt(content)
    return parse_plain_lyrics(content, total_duration, fallback_duration)

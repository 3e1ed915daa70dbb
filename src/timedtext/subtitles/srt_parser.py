from __future__ import annotations

import logging
import re
from dataclasses import replace
from pathlib import Path
from typing import Iterable, List

from .types import TimedLine

logger = logging.getLogger(__name__)

# 一个或多个空行分隔字幕块（兼容 \r\n）
_BLOCK_SPLIT_RE = re.compile(r"\r?\n(?:[ \t]*\r?\n)+")
_LINE_SPLIT_RE = re.compile(r"\r?\n")
_TIMESTAMP_RE = re.compile(
    r"(\d{2}):(\d{2}):(\d{2})[,.](\d{3}) --> (\d{2}):(\d{2}):(\d{2})[,.](\d{3})",
    re.ASCII,
)


def _to_seconds(hours: str, minutes: str, seconds: str, millis: str) -> float:
    return int(hours) * 3600 + int(minutes) * 60 + int(seconds) + int(millis) / 1000


def parse_srt(content: str) -> List[TimedLine]:
    """
    解析 SRT 文本为 TimedLine 列表。

    - 缺少序号行时（首行即包含 "-->"）同样可以解析；
    - 时间戳不合法或不足两行的块会被直接丢弃，不抛异常；
    - id 使用原始分块中的位置，因此丢弃块后可能不连续。
    """
    result: List[TimedLine] = []
    stripped = content.strip()
    if not stripped:
        return result

    for index, block in enumerate(_BLOCK_SPLIT_RE.split(stripped)):
        parts = _LINE_SPLIT_RE.split(block)
        if len(parts) < 2:
            logger.debug("跳过不足两行的字幕块 #%d", index)
            continue

        if "-->" in parts[0]:
            time_line = parts[0]
            text_lines = parts[1:]
        else:
            time_line = parts[1]
            text_lines = parts[2:]

        match = _TIMESTAMP_RE.search(time_line)
        if match is None:
            logger.debug("跳过时间戳无法识别的字幕块 #%d: %r", index, time_line)
            continue

        groups = match.groups()
        result.append(
            TimedLine(
                id=f"line-{index}",
                start_time=_to_seconds(*groups[:4]),
                end_time=_to_seconds(*groups[4:]),
                text="\n".join(text_lines),
            )
        )
    return result


def renumber(lines: Iterable[TimedLine]) -> List[TimedLine]:
    """
    按位置重新生成连续的 id（line-0, line-1, ...），返回新的副本。
    """
    return [replace(line, id=f"line-{idx}") for idx, line in enumerate(lines)]


def read_text(path: str | Path) -> str:
    in_path = Path(path).expanduser().resolve()
    if not in_path.is_file():
        raise FileNotFoundError(f"输入文件不存在: {in_path}")
    # utf-8-sig 会去掉 Windows 编辑器常见的 BOM
    return in_path.read_text(encoding="utf-8-sig")

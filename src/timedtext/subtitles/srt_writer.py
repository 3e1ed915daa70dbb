from __future__ import annotations

import math
from pathlib import Path
from typing import Iterable

from .types import TimedLine


def _clamp_seconds(seconds: float) -> float:
    try:
        value = float(seconds)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(value) or value < 0:
        return 0.0
    return value


def format_time(seconds: float) -> str:
    """
    将秒数转换为播放器显示用的 MM:SS.CC（分钟不封顶）。
    """
    seconds = _clamp_seconds(seconds)
    m = math.floor(seconds / 60)
    s = math.floor(seconds % 60)
    cs = math.floor((seconds % 1) * 100)
    return f"{m:02d}:{s:02d}.{cs:02d}"


def format_srt_time(seconds: float) -> str:
    """
    将秒数转换为 SRT 时间戳格式：HH:MM:SS,mmm

    纯整数运算，小时数不会在 24 小时处回绕。
    """
    seconds = _clamp_seconds(seconds)
    total_ms = int(round(seconds * 1000))
    ms = total_ms % 1000
    total_seconds = total_ms // 1000
    s = total_seconds % 60
    total_minutes = total_seconds // 60
    m = total_minutes % 60
    h = total_minutes // 60
    return f"{h:02d}:{m:02d}:{s:02d},{ms:03d}"


def lyrics_to_string(lines: Iterable[TimedLine]) -> str:
    """
    转换为便于在文本框中编辑的类 SRT 文本（每块末尾保留换行，忽略译文）。
    """
    blocks: list[str] = []
    for idx, line in enumerate(lines, start=1):
        start_ts = format_srt_time(line.start_time)
        end_ts = format_srt_time(line.end_time)
        blocks.append(f"{idx}\n{start_ts} --> {end_ts}\n{line.text}\n")
    return "\n".join(blocks)


def generate_srt(lines: Iterable[TimedLine]) -> str:
    blocks: list[str] = []
    for idx, line in enumerate(lines, start=1):
        start_ts = format_srt_time(line.start_time)
        end_ts = format_srt_time(line.end_time)
        if line.translation:
            content = f"{line.text}\n{line.translation}"
        else:
            content = line.text
        blocks.append(f"{idx}\n{start_ts} --> {end_ts}\n{content}")
    # 最后一个块之后不追加空行
    return "\n\n".join(blocks)


def write_srt(lines: Iterable[TimedLine], path: str | Path) -> Path:
    srt_text = generate_srt(lines)
    out_path = Path(path).expanduser().resolve()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(srt_text, encoding="utf-8")
    return out_path

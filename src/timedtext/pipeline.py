from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List

from .audio import probe_duration
from .config import TimedTextConfig
from .subtitles import (
    TimedLine,
    detect_and_parse,
    generate_srt,
    lyrics_to_string,
    read_text,
    renumber,
    write_srt,
)

logger = logging.getLogger(__name__)


class TimedTextPipeline:
    """
    读取字幕/歌词文件 -> 识别并解析 -> 按配置格式写出。
    """

    def __init__(self, config: TimedTextConfig) -> None:
        self.config = config

    def resolve_duration(self) -> float | None:
        if self.config.total_duration is not None:
            return self.config.total_duration
        if self.config.audio_path is not None:
            duration = probe_duration(self.config.audio_path)
            logger.info("音频时长 %.2f 秒: %s", duration, self.config.audio_path)
            return duration
        return None

    def load_lines(self) -> List[TimedLine]:
        content = read_text(self.config.input_path)
        # SRT 输入不需要总时长，避免无谓地解码音频
        if "-->" in content and not self.config.strict_detection:
            total_duration = self.config.total_duration
        else:
            total_duration = self.resolve_duration()
        lines = detect_and_parse(
            content,
            total_duration,
            strict=self.config.strict_detection,
            fallback_duration=self.config.fallback_duration,
        )
        if self.config.renumber:
            lines = renumber(lines)
        logger.info("解析得到 %d 行: %s", len(lines), self.config.input_path)
        return lines

    def render(self, lines: List[TimedLine]) -> str:
        fmt = self.config.output_format
        if fmt == "srt":
            return generate_srt(lines)
        if fmt == "text":
            return lyrics_to_string(lines)
        if fmt == "json":
            payload = [line.to_dict() for line in lines]
            return json.dumps(payload, ensure_ascii=False, indent=2)
        raise ValueError(f"不支持的输出格式: {fmt}")

    def run(self) -> List[TimedLine]:
        if self.config.output_path is None:
            raise ValueError("output_path 未在配置中设置")
        lines = self.load_lines()
        if self.config.output_format == "srt":
            write_srt(lines, self.config.output_path)
            return lines
        out_path = Path(self.config.output_path)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(self.render(lines), encoding="utf-8")
        return lines

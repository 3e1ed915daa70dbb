from __future__ import annotations

"""
Web 层与核心转换函数之间的集成点。

请求体模型、上传大小限制与字幕 JSON 的组装集中放在这里，
路由函数只负责参数校验与调用。
"""

from typing import Any, Dict, List
import os

from pydantic import BaseModel, Field

from timedtext.subtitles import TimedLine, format_time


class ParseRequest(BaseModel):
    content: str
    total_duration: float | None = None
    strict: bool = False


class LinePayload(BaseModel):
    id: str = ""
    start_time: float
    end_time: float
    text: str
    translation: str | None = None


class SerializeRequest(BaseModel):
    lines: List[LinePayload] = Field(default_factory=list)


def get_max_upload_bytes() -> int:
    """
    上传文件大小上限，字幕与歌词文本一般很小；
    可通过 TIMEDTEXT_WEB_MAX_UPLOAD_KB 覆盖（默认 1024 KB）。
    """
    max_kb_env = os.getenv("TIMEDTEXT_WEB_MAX_UPLOAD_KB", "1024")
    try:
        max_kb = int(max_kb_env)
    except ValueError:
        max_kb = 1024
    if max_kb <= 0:
        max_kb = 1024
    return max_kb * 1024


def payload_to_lines(payload: SerializeRequest) -> List[TimedLine]:
    return [TimedLine.from_dict(item.model_dump()) for item in payload.lines]


def lines_to_payload(lines: List[TimedLine]) -> Dict[str, Any]:
    """
    组装解析结果 JSON，附带播放器显示用的 MM:SS.CC 标签。
    """
    subtitles_payload = []
    for line in lines:
        item = line.to_dict()
        item["start_label"] = format_time(line.start_time)
        item["end_label"] = format_time(line.end_time)
        subtitles_payload.append(item)
    return {
        "total_count": len(subtitles_payload),
        "lines": subtitles_payload,
    }

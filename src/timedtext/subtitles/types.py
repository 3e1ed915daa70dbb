from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class TimedLine:
    """
    时间轴上的一行文本，对应 SRT 中的一个字幕块或纯文本歌词中的一行。

    - id 仅在同一次解析结果内稳定（形如 "line-3"）；
    - end_time >= start_time 是预期但不做校验；
    - translation 仅在生成 SRT 时使用，解析器不会填充。
    """

    id: str
    start_time: float
    end_time: float
    text: str
    translation: str | None = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "start_time": float(self.start_time),
            "end_time": float(self.end_time),
            "text": self.text,
            "translation": self.translation,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TimedLine":
        translation = data.get("translation")
        return cls(
            id=str(data.get("id") or ""),
            start_time=float(data.get("start_time") or 0.0),
            end_time=float(data.get("end_time") or 0.0),
            text=str(data.get("text") or ""),
            translation=str(translation) if translation else None,
        )

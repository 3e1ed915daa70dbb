from __future__ import annotations

from dataclasses import dataclass
import math
import os
from pathlib import Path
from typing import Optional

from .subtitles import DEFAULT_FALLBACK_DURATION, DETECT_MODES

OUTPUT_FORMATS = ("srt", "text", "json")

_OUTPUT_SUFFIXES = {
    "srt": ".srt",
    "text": ".txt",
    "json": ".json",
}


def _env_fallback_duration() -> float:
    env_value = os.getenv("TIMEDTEXT_FALLBACK_DURATION", "")
    try:
        value = float(env_value)
    except ValueError:
        return DEFAULT_FALLBACK_DURATION
    if not math.isfinite(value) or value <= 0:
        return DEFAULT_FALLBACK_DURATION
    return value


@dataclass
class TimedTextConfig:
    """
    转换流程的配置对象。

    total_duration 与 audio_path 都用于纯文本歌词的时间均分：
    显式给出的 total_duration 优先，其次读取 audio_path 的时长。
    """

    input_path: Path
    output_path: Optional[Path] = None
    audio_path: Optional[Path] = None
    total_duration: Optional[float] = None
    fallback_duration: float = DEFAULT_FALLBACK_DURATION
    detect_mode: str = "substring"
    output_format: str = "srt"
    renumber: bool = False

    @property
    def strict_detection(self) -> bool:
        return self.detect_mode == "strict"

    @classmethod
    def from_paths(
        cls,
        input_path: str | Path,
        output_path: Optional[str | Path] = None,
        audio_path: Optional[str | Path] = None,
        total_duration: Optional[float] = None,
        fallback_duration: Optional[float] = None,
        detect_mode: Optional[str] = None,
        output_format: Optional[str] = None,
        renumber: bool = False,
    ) -> "TimedTextConfig":
        input_path_obj = Path(input_path).expanduser().resolve()

        # 未显式传入时从环境变量读取，非法值回退到默认
        if output_format is None:
            env_format = os.getenv("TIMEDTEXT_OUTPUT_FORMAT", "").strip().lower()
            output_format = env_format if env_format in OUTPUT_FORMATS else "srt"
        elif output_format not in OUTPUT_FORMATS:
            raise ValueError(f"不支持的输出格式: {output_format}")

        if detect_mode is None:
            env_mode = os.getenv("TIMEDTEXT_DETECT_MODE", "").strip().lower()
            detect_mode = env_mode if env_mode in DETECT_MODES else "substring"
        elif detect_mode not in DETECT_MODES:
            raise ValueError(f"不支持的格式识别模式: {detect_mode}")

        if fallback_duration is None:
            fallback_value = _env_fallback_duration()
        else:
            fallback_value = float(fallback_duration)
            if not math.isfinite(fallback_value) or fallback_value <= 0:
                raise ValueError(f"默认时长必须为正数: {fallback_duration}")

        if output_path is not None:
            output_path_obj = Path(output_path).expanduser().resolve()
        else:
            suffix = _OUTPUT_SUFFIXES[output_format]
            candidate = input_path_obj.with_suffix(suffix)
            if candidate == input_path_obj:
                # 避免覆盖输入文件，例如 lyrics.srt -> lyrics.out.srt
                candidate = input_path_obj.with_name(f"{input_path_obj.stem}.out{suffix}")
            output_path_obj = candidate

        audio_path_obj: Optional[Path]
        if audio_path is not None:
            audio_path_obj = Path(audio_path).expanduser().resolve()
        else:
            audio_path_obj = None

        return cls(
            input_path=input_path_obj,
            output_path=output_path_obj,
            audio_path=audio_path_obj,
            total_duration=float(total_duration) if total_duration is not None else None,
            fallback_duration=fallback_value,
            detect_mode=detect_mode,
            output_format=output_format,
            renumber=renumber,
        )

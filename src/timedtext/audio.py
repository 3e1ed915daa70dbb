from __future__ import annotations

import logging
from pathlib import Path

import librosa
import soundfile as sf

logger = logging.getLogger(__name__)


def probe_duration(path: str | Path) -> float:
    """
    读取音频/视频文件的总时长（秒），用于纯文本歌词的时间均分。

    优先使用 soundfile 读取文件头；libsndfile 无法识别的容器（如 mp4/m4a）
    再交给 librosa 解码。
    """
    audio_path = Path(path).expanduser().resolve()
    if not audio_path.is_file():
        raise FileNotFoundError(f"音频文件不存在: {audio_path}")

    try:
        info = sf.info(str(audio_path))
        return float(info.duration)
    except RuntimeError as sf_error:
        logger.debug("soundfile 无法读取 %s，改用 librosa: %s", audio_path, sf_error)

    return float(librosa.get_duration(path=str(audio_path)))

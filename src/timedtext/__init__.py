from __future__ import annotations

from .config import TimedTextConfig
from .pipeline import TimedTextPipeline
from .subtitles import (
    TimedLine,
    detect_and_parse,
    format_time,
    generate_srt,
    lyrics_to_string,
    parse_plain_lyrics,
    parse_srt,
)

__all__ = [
    "TimedTextConfig",
    "TimedTextPipeline",
    "TimedLine",
    "parse_srt",
    "parse_plain_lyrics",
    "detect_and_parse",
    "format_time",
    "lyrics_to_string",
    "generate_srt",
]

__version__ = "0.1.0"

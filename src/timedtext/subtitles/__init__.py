from __future__ import annotations

from .types import TimedLine
from .srt_parser import parse_srt, read_text, renumber
from .plain import DEFAULT_FALLBACK_DURATION, parse_plain_lyrics
from .detect import DETECT_MODES, detect_and_parse
from .srt_writer import format_srt_time, format_time, generate_srt, lyrics_to_string, write_srt

__all__ = [
    "TimedLine",
    "parse_srt",
    "parse_plain_lyrics",
    "detect_and_parse",
    "format_time",
    "format_srt_time",
    "lyrics_to_string",
    "generate_srt",
    "write_srt",
    "renumber",
    "read_text",
    "DEFAULT_FALLBACK_DURATION",
    "DETECT_MODES",
]

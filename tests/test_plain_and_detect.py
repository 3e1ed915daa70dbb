import math

from timedtext.subtitles import detect_and_parse, parse_plain_lyrics


def test_plain_fallback_duration() -> None:
    lines = parse_plain_lyrics("a\nb\nc", 0)
    assert [(line.start_time, line.end_time) for line in lines] == [
        (0.0, 60.0),
        (60.0, 120.0),
        (120.0, 180.0),
    ]
    assert [line.id for line in lines] == ["line-0", "line-1", "line-2"]


def test_plain_skips_blank_lines_and_trims() -> None:
    lines = parse_plain_lyrics("\n  first  \n\n\t\r\nsecond\r\n", 10.0)
    assert [line.text for line in lines] == ["first", "second"]
    assert [line.id for line in lines] == ["line-0", "line-1"]
    assert lines[0].end_time == lines[1].start_time == 5.0
    assert lines[-1].end_time == 10.0


def test_plain_splits_only_on_newlines() -> None:
    lines = parse_plain_lyrics("verse\x0cone\nchorus", 20)
    assert [line.text for line in lines] == ["verse\x0cone", "chorus"]
    assert [line.end_time for line in lines] == [10.0, 20.0]
    assert len(parse_plain_lyrics("a\rb", 20)) == 1
    assert len(parse_plain_lyrics("x y\r\nz", 20)) == 2


def test_plain_partitions_duration_contiguously() -> None:
    lines = parse_plain_lyrics("\n".join(f"l{i}" for i in range(7)), 100.0)
    assert lines[0].start_time == 0.0
    assert math.isclose(lines[-1].end_time, 100.0)
    for prev, cur in zip(lines, lines[1:]):
        assert prev.end_time == cur.start_time
        assert math.isclose(cur.end_time - cur.start_time, 100.0 / 7)


def test_plain_invalid_durations_use_fallback() -> None:
    for duration in (-5, float("nan"), float("inf"), None):
        lines = parse_plain_lyrics("x\ny", duration)
        assert lines[-1].end_time == 180.0


def test_plain_custom_fallback() -> None:
    lines = parse_plain_lyrics("x\ny", 0, fallback_duration=30.0)
    assert lines[0].end_time == 15.0


def test_plain_empty_input() -> None:
    assert parse_plain_lyrics("", 100) == []
    assert parse_plain_lyrics("  \n \r\n\t", 100) == []


def test_detect_routes_arrow_to_srt() -> None:
    lines = detect_and_parse("1\n00:00:01,000 --> 00:00:02,500\nHello", 999)
    assert len(lines) == 1
    assert lines[0].end_time == 2.5


def test_detect_routes_plain_text() -> None:
    lines = detect_and_parse("one\ntwo", 20)
    assert [line.end_time for line in lines] == [10.0, 20.0]


def test_detect_prose_with_arrow_is_empty_by_default() -> None:
    assert detect_and_parse("go here --> then there\nand more", 20) == []


def test_detect_strict_falls_back_to_plain() -> None:
    lines = detect_and_parse("go here --> then there\nand more", 20, strict=True)
    assert [line.text for line in lines] == ["go here --> then there", "and more"]


def test_detect_strict_keeps_srt_result() -> None:
    lines = detect_and_parse("00:00:01,000 --> 00:00:02,000\nHi", 20, strict=True)
    assert len(lines) == 1
    assert lines[0].start_time == 1.0

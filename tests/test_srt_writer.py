from timedtext.subtitles import (
    TimedLine,
    format_srt_time,
    format_time,
    generate_srt,
    lyrics_to_string,
    write_srt,
)


def test_format_time() -> None:
    assert format_time(125.678) == "02:05.67"
    assert format_time(0) == "00:00.00"
    assert format_time(3600.5) == "60:00.50"


def test_format_time_bad_input_does_not_raise() -> None:
    assert format_time(-3) == "00:00.00"
    assert format_time(float("nan")) == "00:00.00"


def test_format_srt_time() -> None:
    assert format_srt_time(0) == "00:00:00,000"
    assert format_srt_time(62.5) == "00:01:02,500"
    assert format_srt_time(1.001) == "00:00:01,001"
    assert format_srt_time(3725.25) == "01:02:05,250"


def test_format_srt_time_past_one_day() -> None:
    assert format_srt_time(90000) == "25:00:00,000"


def test_generate_srt_with_translation() -> None:
    lines = [TimedLine(id="x", start_time=0, end_time=1, text="Hi", translation="Hola")]
    assert generate_srt(lines) == "1\n00:00:00,000 --> 00:00:01,000\nHi\nHola"


def test_generate_srt_blocks_and_no_trailing_blank() -> None:
    lines = [
        TimedLine(id="a", start_time=1, end_time=2, text="A"),
        TimedLine(id="b", start_time=3, end_time=4.5, text="B", translation=""),
    ]
    assert generate_srt(lines) == (
        "1\n00:00:01,000 --> 00:00:02,000\nA\n\n"
        "2\n00:00:03,000 --> 00:00:04,500\nB"
    )
    assert generate_srt([]) == ""


def test_lyrics_to_string_ignores_translation() -> None:
    lines = [
        TimedLine(id="a", start_time=1, end_time=2, text="A", translation="ignored"),
        TimedLine(id="b", start_time=3, end_time=4, text="B"),
    ]
    assert lyrics_to_string(lines) == (
        "1\n00:00:01,000 --> 00:00:02,000\nA\n\n"
        "2\n00:00:03,000 --> 00:00:04,000\nB\n"
    )


def test_write_srt(tmp_path) -> None:
    lines = [TimedLine(id="a", start_time=1, end_time=2, text="A")]
    out_path = write_srt(lines, tmp_path / "nested" / "out.srt")
    assert out_path.is_file()
    assert out_path.read_text(encoding="utf-8") == "1\n00:00:01,000 --> 00:00:02,000\nA"


def test_timed_line_dict_conversion() -> None:
    line = TimedLine(id="line-2", start_time=1, end_time=2.5, text="A", translation="B")
    data = line.to_dict()
    assert data == {
        "id": "line-2",
        "start_time": 1.0,
        "end_time": 2.5,
        "text": "A",
        "translation": "B",
    }
    assert TimedLine.from_dict(data) == line
    assert TimedLine.from_dict({"text": "x"}).translation is None

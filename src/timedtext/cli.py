from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .env import load_dotenv_if_present
from .config import OUTPUT_FORMATS, TimedTextConfig
from .pipeline import TimedTextPipeline


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="timedtext",
        description="timedtext: 在 SRT 字幕与纯文本歌词之间转换，输出统一的时间轴。",
    )
    parser.add_argument(
        "input",
        type=str,
        help="输入的 SRT 或纯文本歌词文件路径。",
    )
    duration_group = parser.add_mutually_exclusive_group()
    duration_group.add_argument(
        "--duration",
        type=float,
        default=None,
        help="总时长（秒），用于纯文本歌词按行均分。",
    )
    duration_group.add_argument(
        "--audio",
        type=str,
        default=None,
        help="对应的音频/视频文件，读取其时长作为总时长。",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="输出文件路径（默认: 与输入同目录，按输出格式替换后缀）。",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=list(OUTPUT_FORMATS),
        default=None,
        help="输出格式：srt / text / json，可通过环境变量 TIMEDTEXT_OUTPUT_FORMAT 配置。",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="先尝试按 SRT 解析，没有得到任何字幕块时再按纯文本处理。",
    )
    parser.add_argument(
        "--renumber",
        action="store_true",
        help="解析后重新生成连续的行 id。",
    )
    parser.add_argument(
        "--fallback-duration",
        type=float,
        default=None,
        help="总时长无效时使用的默认时长（秒，默认: 180，可通过环境变量 TIMEDTEXT_FALLBACK_DURATION 配置）。",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="输出调试日志（包括被丢弃的字幕块）。",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    # 确保在解析参数和使用配置之前加载 .env 中的环境变量
    load_dotenv_if_present()
    if argv is None:
        argv = sys.argv[1:]

    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    try:
        config = TimedTextConfig.from_paths(
            input_path=args.input,
            output_path=args.output,
            audio_path=args.audio,
            total_duration=args.duration,
            fallback_duration=args.fallback_duration,
            detect_mode="strict" if args.strict else None,
            output_format=args.format,
            renumber=args.renumber,
        )
        pipeline = TimedTextPipeline(config)
        lines = pipeline.run()
        print("转换完成")
        print(f"   输入: {Path(args.input)}")
        print(f"   输出: {config.output_path}")
        print(f"   行数: {len(lines)}")
        return 0
    except KeyboardInterrupt:
        print("\n用户中断")
        return 1
    except Exception as exc:
        print(f"处理失败: {exc}")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())

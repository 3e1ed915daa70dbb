from __future__ import annotations

import os

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.responses import JSONResponse, PlainTextResponse

from timedtext.env import load_dotenv_if_present
from timedtext.subtitles import detect_and_parse, generate_srt, lyrics_to_string
from .dependencies import (
    ParseRequest,
    SerializeRequest,
    get_max_upload_bytes,
    lines_to_payload,
    payload_to_lines,
)


def create_app() -> FastAPI:
    """
    创建并配置 FastAPI 应用。

    - 加载 .env 环境变量；
    - 注册解析、序列化与健康检查路由。
    """
    load_dotenv_if_present()

    app = FastAPI(
        title="timedtext Web",
        description="SRT / 纯文本歌词与时间轴之间的转换 API。",
    )

    @app.get("/health", response_class=JSONResponse)
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/api/parse", response_class=JSONResponse)
    async def parse_api(payload: ParseRequest) -> JSONResponse:
        """
        解析提交的文本，返回时间轴 JSON。格式错误的字幕块会被忽略，不报错。
        """
        max_bytes = get_max_upload_bytes()
        if len(payload.content.encode("utf-8")) > max_bytes:
            raise HTTPException(
                status_code=413,
                detail=f"提交内容过大，超过限制 {max_bytes // 1024} KB。",
            )
        lines = detect_and_parse(
            payload.content,
            payload.total_duration,
            strict=payload.strict,
        )
        return JSONResponse(lines_to_payload(lines))

    @app.post("/api/upload", response_class=JSONResponse)
    async def upload_api(
        file: UploadFile = File(...),
        total_duration: float = Form(0.0),
        strict: bool = Form(False),
    ) -> JSONResponse:
        """
        上传 .srt / .txt 文件并解析。
        """
        if not file.filename:
            raise HTTPException(status_code=400, detail="未选择要上传的文件。")

        max_bytes = get_max_upload_bytes()
        raw = await file.read(max_bytes + 1)
        if len(raw) > max_bytes:
            raise HTTPException(
                status_code=413,
                detail=f"上传文件过大，超过限制 {max_bytes // 1024} KB。",
            )
        try:
            content = raw.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise HTTPException(status_code=400, detail="文件不是 UTF-8 编码的文本。") from exc

        lines = detect_and_parse(content, total_duration, strict=strict)
        result = lines_to_payload(lines)
        result["input_name"] = file.filename
        return JSONResponse(result)

    @app.post("/api/srt", response_class=PlainTextResponse)
    async def srt_api(payload: SerializeRequest) -> PlainTextResponse:
        return PlainTextResponse(
            generate_srt(payload_to_lines(payload)),
            media_type="text/plain; charset=utf-8",
        )

    @app.post("/api/text", response_class=PlainTextResponse)
    async def text_api(payload: SerializeRequest) -> PlainTextResponse:
        """
        输出便于编辑的类 SRT 文本（不含译文）。
        """
        return PlainTextResponse(
            lyrics_to_string(payload_to_lines(payload)),
            media_type="text/plain; charset=utf-8",
        )

    return app


# 供 uvicorn 等 ASGI 服务器直接引用
app = create_app()


def main() -> None:
    """
    本地启动 Web 服务的入口。

    可通过环境变量控制监听地址与端口：
      - TIMEDTEXT_WEB_HOST（默认 127.0.0.1）
      - TIMEDTEXT_WEB_PORT（默认 8000）
    """
    import uvicorn

    host = os.getenv("TIMEDTEXT_WEB_HOST", "127.0.0.1")
    port_str = os.getenv("TIMEDTEXT_WEB_PORT", "8000")
    try:
        port = int(port_str)
    except ValueError:
        port = 8000

    uvicorn.run("timedtext.web.app:app", host=host, port=port, reload=False)

"""FastAPI application exposing the task interpreter over HTTP."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from app.main import build_interpreter
from core.interpreter import Interpreter, InterpreterResponse
from tools.task_list import format_task

logger = logging.getLogger(__name__)


class CommandRequest(BaseModel):
    text: str


def _format_response(result: InterpreterResponse) -> Dict[str, Any]:
    return {
        "text": result.text,
        "user_text": result.user_text,
        "success": result.success,
        "command_kind": result.command.kind.value if result.command else None,
        "error_kind": result.error.kind.value if result.error else None,
        "exit": result.should_exit,
        "latency_ms": result.latency_ms,
    }


def create_app(interpreter: Optional[Interpreter] = None) -> FastAPI:
    """Build the API around ``interpreter`` (tests pass their own; default is the CLI wiring)."""
    app = FastAPI(title="Task Interpreter API", version="1.0.0")
    app.state.interpreter = interpreter or build_interpreter()

    @app.get("/api/health")
    def health_check() -> Dict[str, Any]:
        return {
            "status": "ok",
            "timestamp": datetime.now(tz=timezone.utc).isoformat(),
        }

    @app.post("/api/command")
    def run_command(payload: CommandRequest) -> Dict[str, Any]:
        if not payload.text.strip():
            raise HTTPException(status_code=400, detail="Command text is required.")
        result = app.state.interpreter.handle_line_with_details(payload.text)
        logger.debug("Handled web command %r (success=%s)", payload.text, result.success)
        return _format_response(result)

    @app.get("/api/tasks")
    def list_tasks() -> Dict[str, Any]:
        numbered = app.state.interpreter.task_list.numbered()
        return {
            "count": len(numbered),
            "tasks": [
                {"index": number, "type": task.icon, "done": task.done, "text": format_task(task)}
                for number, task in numbered
            ],
        }

    return app


if __name__ == "__main__":
    import uvicorn
    from app.config import get_web_ui_host, get_web_ui_port
    from app.main import configure_logging

    configure_logging()
    uvicorn.run(
        create_app(),
        host=get_web_ui_host(),
        port=get_web_ui_port(),
        reload=False,
    )

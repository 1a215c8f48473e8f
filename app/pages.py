# app/pages.py
from pathlib import Path
from typing import Any, Optional

from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).parent / "templates"


def format_duration(value: Optional[Any]) -> str:
    """초 단위 합계 -> '1h 02m 03s' (원본 테이블 표기)"""
    if value is None:
        return "-"
    seconds = max(0, int(round(float(value))))
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours}h {minutes:02d}m {secs:02d}s"


def format_score(value: Optional[Any]) -> str:
    if value is None:
        return "-"
    v = float(value)
    return str(int(v)) if v.is_integer() else f"{v:.2f}"


templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["duration"] = format_duration
templates.env.filters["score"] = format_score

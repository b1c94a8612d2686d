from .summary import (
    build_json_summary,
    format_calculation,
    format_currency,
    format_number,
    render_json_summary,
    render_text_summary,
)

__all__ = [
    "build_json_summary",
    "format_calculation",
    "format_currency",
    "format_number",
    "render_json_summary",
    "render_text_summary",
]

"""
Output module for repouri.

Provides consistent output formatting across all commands:
- JSONL (default): Newline-delimited JSON for piping
- Pretty: Human-readable tables using Rich

Usage:
    from repouri.output import emit, emit_error

    emit(references, pretty=pretty)
    emit_error("unsupported host: gitlab.com", type="UnsupportedHost")
"""

import json
import sys
from typing import Iterable, Any, Dict, Optional, List

from rich.console import Console
from rich.table import Table


def _as_dict(item: Any) -> Dict[str, Any]:
    if hasattr(item, 'to_dict'):
        return item.to_dict()
    if isinstance(item, dict):
        return item
    return {'value': str(item)}


def emit(
    items: Iterable[Any],
    pretty: bool = False,
    columns: Optional[List[str]] = None,
    err: bool = False
) -> None:
    """
    Emit items as JSONL or pretty table.

    Args:
        items: Items to emit (should have to_dict() method or be dicts)
        pretty: If True, render as table. If False, output JSONL
        columns: Column names for table (auto-detected if None)
        err: If True, output to stderr instead of stdout
    """
    stream = sys.stderr if err else sys.stdout

    if pretty:
        _emit_table(items, columns, stream)
    else:
        _emit_jsonl(items, stream)


def _emit_jsonl(items: Iterable[Any], stream) -> None:
    for item in items:
        print(json.dumps(_as_dict(item), ensure_ascii=False), file=stream, flush=True)


def _emit_table(items: Iterable[Any], columns: Optional[List[str]], stream) -> None:
    rows = [_as_dict(item) for item in items]

    if not rows:
        print("No results found", file=stream)
        return

    if not columns:
        columns = _auto_columns(rows)

    console = Console(file=stream)
    table = Table(show_header=True, header_style="bold")

    for col in columns:
        table.add_column(col)

    for row in rows:
        table.add_row(*[_format_value(row.get(col, '')) for col in columns])

    console.print(table)


def _auto_columns(rows: List[Dict]) -> List[str]:
    """Auto-detect columns from rows, preferred ones first."""
    preferred = ['input', 'type', 'url', 'path', 'valid', 'error', 'metadata']

    all_keys = []
    for row in rows:
        for key in row:
            if key not in all_keys:
                all_keys.append(key)

    columns = [col for col in preferred if col in all_keys]
    columns.extend(key for key in all_keys if key not in columns)
    return columns


def _format_value(value: Any, max_len: int = 50) -> str:
    """Format a value for table display."""
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'Yes' if value else 'No'
    if isinstance(value, list):
        s = ', '.join(str(v) for v in value[:3])
        if len(value) > 3:
            s += f' (+{len(value) - 3} more)'
        return s
    s = str(value)
    if len(s) > max_len:
        s = s[:max_len - 3] + '...'
    return s


def emit_error(message: str, type: str = "error", context: Optional[Dict[str, Any]] = None) -> None:
    """Write a JSON error object to stderr."""
    error_obj: Dict[str, Any] = {"error": message, "type": type}
    if context:
        error_obj["context"] = context
    print(json.dumps(error_obj, ensure_ascii=False), file=sys.stderr, flush=True)

"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). Renderers are
dispatched by ``result.op`` in :func:`render_result`; unknown ops fall
through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from casework.output.console import create_console, get_output, style_for_content_type

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from casework.services.result import ServiceResult

    Renderer = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    if verbose:
        _render_meta(console, result)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output for ``--quiet``: slugs or facet values, one per line."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item.get("slug", "")) for item in items)
    values = result.data.get("values")
    if isinstance(values, list):
        return "\n".join(str(v) for v in values)
    if "slug" in result.data:
        return str(result.data["slug"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="cw.ok"), Text(f"  {result.op}", style="cw.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    if key == "slug":
        style = "cw.slug"
    elif key == "title":
        style = "cw.title"
    else:
        style = ""
    console.print(Text(f"  {key}: ", style="cw.key"), Text(str(value), style=style))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block, including the telemetry span tree."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        if key == "telemetry":
            _render_span(console, value, indent=4)
        else:
            console.print(f"    {key}: {value}")


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    duration = span.get("duration_ms", 0.0)
    style = "yellow" if duration > 100 else "dim"
    name = escape(str(span.get("name", "?")))
    line = f"{' ' * indent}[{style}]{duration:>8.2f}ms[/{style}]  {name}"
    annotations = span.get("annotations") or {}
    if annotations:
        line += "  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")"
    console.print(line)
    for child in span.get("children", []):
        _render_span(console, child, indent + 4)


def _format_metric(metric: dict[str, Any]) -> str:
    return f"{metric.get('label', '')}: {metric.get('value', '')}"


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="cw.error"),
        Text(f"  {result.op}", style="cw.op"),
        Text(" — "),
        Text(msg),
    )
    if err is None:
        return

    detail = err.detail
    if result.op == "check" and "issues" in detail:
        _render_issues(console, detail["issues"], verbose=verbose)
        return
    for issue in detail.get("issues", []):
        console.print(f"  [cw.error]-[/cw.error] {escape(str(issue))}")
    for name, message in (detail.get("fields") or {}).items():
        console.print(f"  [cw.error]{escape(name)}[/cw.error]: {escape(str(message))}")
    if verbose:
        for key, value in detail.items():
            if key not in ("issues", "fields"):
                console.print(f"    {key}: {value}")


# ── Work renderers ────────────────────────────────────────────────────


def _render_listing(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render list_case_studies as a table of listing cards."""
    items = result.data.get("items", [])
    filters = result.data.get("filters") or {}

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Slug", style="cw.slug", no_wrap=True)
    table.add_column("Title", style="cw.title")
    table.add_column("Client")
    table.add_column("Platforms")
    table.add_column("Start", style="dim", no_wrap=True)
    if verbose:
        table.add_column("Metrics", style="cw.metric")
        table.add_column("Services")

    for item in items:
        content_type = str(item.get("content_type", ""))
        title = Text(str(item.get("title", "")))
        if content_type == "detailed":
            title.append(" [detailed]", style=style_for_content_type(content_type))
        client = item.get("client") or ""
        if item.get("supported_via"):
            client = f"{client} (via {item['supported_via']})".strip()
        row: list[Any] = [
            str(item.get("slug", "")),
            title,
            escape(client),
            escape(", ".join(item.get("platforms", []))),
            str(item.get("start") or ""),
        ]
        if verbose:
            row.append("\n".join(_format_metric(m) for m in item.get("metrics", [])))
            row.append(", ".join(item.get("services", [])))
        table.add_row(*row)

    if items:
        console.print(table)
    else:
        console.print("No case studies found.")
    if filters:
        applied = ", ".join(f"{k}={v}" for k, v in filters.items())
        console.print(f"\nFilters: {escape(applied)}")
    console.print(f"\n{result.data.get('count', len(items))} case studies")


def _render_detail(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render get_case_study as a metadata panel followed by the body."""
    d = result.data
    fm = d.get("frontmatter", {})

    lines: list[str] = []
    if fm.get("supportedVia"):
        lines.append(f"supported via: {fm['supportedVia']}")
    elif fm.get("client"):
        lines.append(f"client: {fm['client']}")
    for key, label in (
        ("sector", "sector"),
        ("platforms", "platforms"),
        ("services", "services"),
        ("techStack", "tech stack"),
    ):
        values = fm.get(key) or []
        if values:
            lines.append(f"{label}: {', '.join(values)}")
    dates = fm.get("dates") or {}
    if dates.get("start") or dates.get("end"):
        lines.append(f"dates: {dates.get('start') or '?'} → {dates.get('end') or 'ongoing'}")
    lines.append(f"type: {fm.get('contentType', 'summary')}")
    if verbose:
        lines.append(f"confidentiality: {fm.get('confidentiality', 'public')}")
        lines.append(f"logo permission: {fm.get('logoPermission', False)}")
        lines.append(f"file: {d.get('filename', '')}")

    metrics = fm.get("metrics") or []
    if metrics:
        lines.append("")
        lines.extend(_format_metric(m) for m in metrics)

    outcomes = fm.get("outcomes") or []
    if outcomes:
        lines.append("")
        lines.append("outcomes:")
        lines.extend(f"  • {o}" for o in outcomes)

    title_lines = d.get("title_lines") or [fm.get("title", "Untitled")]
    heading = Text("\n".join(title_lines), style="cw.title")
    heading.append("\n\n")
    heading.append("\n".join(lines))
    style = style_for_content_type(str(fm.get("contentType", "")))
    console.print(
        Panel(
            heading,
            title=Text(str(d.get("slug", "")), style="cw.slug"),
            border_style=style or "dim",
            expand=False,
        )
    )

    body = d.get("content", "")
    if body:
        console.print()
        console.print(Text(body.rstrip("\n")))


def _render_values(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render facet lists (sectors, platforms, services, slugs)."""
    values = result.data.get("values", [])
    for value in values:
        console.print(f"  {escape(str(value))}")
    label = result.op.removeprefix("list_")
    console.print(f"\n{result.data.get('count', len(values))} {label}")


def _render_contact(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "endpoint", result.data.get("endpoint", ""))
    for key, value in (result.data.get("submission") or {}).items():
        _field(console, key, value)


# ── Check renderer ────────────────────────────────────────────────────


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    issues = result.data.get("issues", [])
    checked = result.data.get("checked", 0)
    if not issues:
        console.print(f"[cw.ok]OK[/cw.ok]  {checked} case studies, no issues found.")
        return
    _render_issues(console, issues, verbose=verbose)


def _render_issues(console: Console, issues: list[dict[str, Any]], *, verbose: bool) -> None:
    """Print issues grouped by category, then a summary line."""
    severity_styles = {"error": "cw.error", "warning": "cw.warning"}

    by_category: dict[str, list[dict[str, Any]]] = {}
    for issue in issues:
        by_category.setdefault(str(issue.get("category", "unknown")), []).append(issue)

    for category, category_issues in by_category.items():
        console.print(f"\n[bold]{category}[/bold]")
        for issue in category_issues:
            severity = str(issue.get("severity", "warning"))
            style = severity_styles.get(severity, "")
            prefix = f"[{style}]{severity}[/{style}]" if style else severity
            location = escape(str(issue.get("filename", "")))
            if issue.get("field"):
                location += f" ({escape(str(issue['field']))})"
            console.print(f"  {prefix} {location}: {escape(str(issue.get('message', '')))}")

    errors = sum(1 for i in issues if i.get("severity") == "error")
    console.print(f"\n{errors} errors, {len(issues) - errors} warnings")


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Renderer] = {
    "list_case_studies": _render_listing,
    "get_case_study": _render_detail,
    "list_sectors": _render_values,
    "list_platforms": _render_values,
    "list_services": _render_values,
    "list_slugs": _render_values,
    "check": _render_check,
    "validate_contact": _render_contact,
}

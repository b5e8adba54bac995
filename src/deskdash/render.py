"""Plain-text rendering of a dashboard snapshot."""

from __future__ import annotations

from deskdash.view_state import ViewSnapshot


def format_launch_items(snapshot: ViewSnapshot) -> list[str]:
    lines = [f"Launchers ({len(snapshot.launch_items)}):"]
    if not snapshot.launch_items:
        lines.append("- (none)")
    for item in snapshot.launch_items:
        lines.append(f"- [{item.id}] {item.name}: {item.path}")
    return lines


def format_notes(snapshot: ViewSnapshot) -> list[str]:
    lines = [f"Notes ({len(snapshot.notes)}):"]
    if not snapshot.notes:
        lines.append("- (none)")
    for note in snapshot.notes:
        heading = note.title or "(untitled)"
        lines.append(f"- [{note.id}] {heading}")
        for content_line in note.content.splitlines() or [""]:
            lines.append(f"    {content_line}")
    return lines


def format_dashboard(snapshot: ViewSnapshot) -> str:
    """Render both collections, degraded loads and the current error."""
    if snapshot.loading:
        return "Loading..."

    lines = format_launch_items(snapshot)
    lines.append("")
    lines.extend(format_notes(snapshot))
    if snapshot.load_failures:
        lines.append("")
        lines.append(f"Unavailable: {', '.join(snapshot.load_failures)}")
    if snapshot.error:
        lines.append("")
        lines.append(f"Error: {snapshot.error}")
    return "\n".join(lines)

"""
Text rendering of key records.
"""

from datetime import datetime, timezone
from typing import List

from .models import KeyRecord

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def format_timestamp(epoch: int) -> str:
    """
    Render epoch seconds as an RFC 3339 UTC timestamp.

    Values outside the range datetime can represent are shown as raw epoch seconds.
    """
    try:
        return datetime.fromtimestamp(epoch, tz=timezone.utc).strftime(TIMESTAMP_FORMAT)
    except (ValueError, OverflowError, OSError):
        return f"{epoch} (epoch seconds, out of range)"


def _flag(value: bool) -> str:
    return "true" if value else "false"


def _lifecycle_lines(record: KeyRecord) -> List[str]:
    attr = record.attributes
    if attr is None:
        return []

    lines = []
    if attr.enabled is not None:
        lines.append(f"  Enabled:    {_flag(attr.enabled)}")
    if attr.exportable is not None:
        lines.append(f"  Exportable: {_flag(attr.exportable)}")

    timestamps = (
        ("Created:   ", attr.created),
        ("Updated:   ", attr.updated),
        ("Expires:   ", attr.expires),
        ("Not Before:", attr.not_before),
    )
    for label, value in timestamps:
        if value is not None:
            lines.append(f"  {label} {format_timestamp(value)}")
    return lines


def format_key(record: KeyRecord) -> str:
    """
    Render one key as a block of text.

    The block always holds the name, ID and location lines. Other lines
    appear only when the field is populated. The block ends with a blank line.

    Args:
        record: Key to render

    Returns:
        Multi-line text, newline-terminated
    """
    lines: List[str] = [
        f"Key: {record.name}",
        f"  ID:       {record.id or ''}",
        f"  Location: {record.location or ''}",
    ]

    if record.kty is not None:
        lines.append(f"  Type:     {record.kty}")
    if record.key_size is not None:
        lines.append(f"  Key Size: {record.key_size} bits")
    if record.curve_name is not None:
        lines.append(f"  Curve:    {record.curve_name}")
    if record.key_ops:
        lines.append(f"  Key Ops: {', '.join(record.key_ops)}")
    if record.key_uri is not None:
        lines.append(f"  Key URI:  {record.key_uri}")
    if record.key_uri_with_version is not None:
        lines.append(f"  Key URI (versioned): {record.key_uri_with_version}")

    lines.extend(_lifecycle_lines(record))

    if record.has_release_policy:
        lines.append("  Release Policy: configured")
    if record.has_rotation_policy:
        lines.append("  Rotation Policy: configured")

    if record.tags:
        lines.append("  Tags:")
        # Sorted so output is stable between runs
        for name in sorted(record.tags):
            lines.append(f"    {name} = {record.tags[name]}")

    lines.append("")
    return "\n".join(lines) + "\n"

"""Formatting helpers for CLI output."""

from client.schemas import ContainerInfo, EncryptedInfo, ReportInfo, Token


def format_file_size(size_bytes: int) -> str:
    """
    Format file size in bytes to human-readable format with appropriate unit.

    Uses binary units (1024-based) and automatically selects the most
    appropriate unit (B, KiB, MiB, GiB, TiB).

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string with size and unit (e.g., "1.50 MiB", "512 B")
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"

    units = ['KiB', 'MiB', 'GiB', 'TiB']
    size = size_bytes / 1024.0

    for unit in units:
        if size < 1024.0:
            return f"{size:.2f} {unit}"
        size /= 1024.0

    return f"{size:.2f} PiB"


def format_limit(value) -> str:
    return "unlimited" if value is None else str(value)


def format_container(container: ContainerInfo) -> str:
    if isinstance(container, EncryptedInfo):
        return f"Container {container.id} is encrypted. Supply --password to view it."

    lines = [
        f"Container {container.id}",
        f"  Encrypted: {'yes' if container.encrypted else 'no'}",
        f"  Created:   {container.created.isoformat()}",
        f"  Modified:  {container.modified.isoformat()}",
        f"  Storage:   {format_file_size(container.used_storage)} used of "
        f"{format_file_size(container.storage_limit)}",
    ]
    if not container.files:
        lines.append("  No files.")
    else:
        lines.append(f"  {len(container.files)} file(s), room for {container.file_slots_left} more:")
        for f in sorted(container.files, key=lambda f: f.path):
            lines.append(f"    {f.path}  {format_file_size(f.size)}  {f.mime}")
    return "\n".join(lines)


def format_token(token: Token) -> str:
    lines = [
        f"Token {token.id}",
        f"  Parent:        {token.parent or '(root)'}",
        f"  Token limit:   {format_limit(token.token_limit)}",
        f"  Storage limit: {format_limit(token.storage_limit)}",
        f"  Expired:       {'yes' if token.expired else 'no'}",
        f"  Created:       {token.created.isoformat()}",
        f"  Child tokens:  {len(token.child_tokens)}",
        f"  Containers:    {len(token.child_containers)}",
    ]
    if token.hint:
        lines.append(f"  Hint:          {token.hint}")
    return "\n".join(lines)


def format_report(info: ReportInfo) -> str:
    files = ", ".join(info.report.files) if info.report.files else "(whole container)"
    return (
        f"Report {info.id} on {info.container_id} ({info.created.isoformat()}): "
        f"{info.report.reason} [{files}]"
    )

"""Command handler functions for CLI operations."""

import asyncio
from pathlib import Path
from typing import Optional

from cli.config import Config
from cli.models import (
    CommandRequest,
    DeleteFileCommand,
    GetContainerCommand,
    GetFileCommand,
    GetTokenCommand,
    ListReportsCommand,
    NewContainerCommand,
    NewTokenCommand,
    PutFileCommand,
    ReportCommand,
    UseTokenCommand,
)
from cli.utils import format_container, format_file_size, format_report, format_token
from client.exceptions import StorageServiceError
from client.schemas import Report
from client.storage_client import StorageClient
from common.logging_config import get_logger

logger = get_logger(__name__)


_config: Optional[Config] = None


def get_config() -> Config:
    """
    Get or create the global Config instance.

    Returns:
        Config loaded from ~/.strongbox/config.json
    """
    global _config
    if _config is None:
        _config = Config(Path.home() / '.strongbox' / 'config.json')
    return _config


def open_client(config: Config) -> StorageClient:
    """Create a StorageClient from the CLI configuration."""
    logger.debug(f"Creating StorageClient [host={config.get_host()}]")
    return StorageClient(config.get_host(), timeout=config.get_timeout())


def handle_use_token(cmd: UseTokenCommand, config: Config) -> str:
    config.set_token(cmd.token)
    return "Creation token saved to config."


async def handle_get_container(cmd: GetContainerCommand, client: StorageClient) -> str:
    container = await client.get_container(cmd.container_id, cmd.password)
    return format_container(container)


async def handle_new_container(cmd: NewContainerCommand, client: StorageClient, config: Config) -> str:
    """
    Handle 'new-container' command.

    Args:
        cmd: NewContainerCommand with optional token and password
        client: StorageClient to send the request through
        config: Config holding the saved creation token

    Returns:
        Container summary or an error message
    """
    token = cmd.token or config.get_token()
    if not token:
        return "Error: No creation token. Please run: use-token <token>"
    container = await client.new_container(token, cmd.password)
    return f"Created container {container.id}\n{format_container(container)}"


async def handle_get_file(cmd: GetFileCommand, client: StorageClient) -> str:
    """
    Handle 'get' command.

    Without an output path the file is printed if it is UTF-8 text.
    """
    content = await client.get_file(cmd.container_id, cmd.path, cmd.password)
    if cmd.output_path:
        output = Path(cmd.output_path)
        try:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_bytes(content)
        except OSError as e:
            return f"Error writing file: {e}"
        return f"Saved {format_file_size(len(content))} to {output}"
    try:
        return content.decode('utf-8')
    except UnicodeDecodeError:
        return f"Binary file ({format_file_size(len(content))}). Pass an output path to save it."


async def handle_put_file(cmd: PutFileCommand, client: StorageClient) -> str:
    local = Path(cmd.local_path)
    if not local.is_file():
        return f"Error: File not found: {cmd.local_path}"
    try:
        content = local.read_bytes()
    except OSError as e:
        return f"Error reading file: {e}"
    await client.put_file(cmd.container_id, cmd.path, content, cmd.password)
    return f"Stored {cmd.path} ({format_file_size(len(content))})"


async def handle_delete_file(cmd: DeleteFileCommand, client: StorageClient) -> str:
    await client.delete_file(cmd.container_id, cmd.path, cmd.password)
    return f"Deleted {cmd.path}"


async def handle_get_token(cmd: GetTokenCommand, client: StorageClient) -> str:
    token = await client.get_token(cmd.token_id)
    return format_token(token)


async def handle_new_token(cmd: NewTokenCommand, client: StorageClient) -> str:
    token = await client.new_token(cmd.parent, cmd.token_limit, cmd.storage_limit, cmd.hint)
    return f"Created token {token.id}\n{format_token(token)}"


async def handle_list_reports(cmd: ListReportsCommand, client: StorageClient) -> str:
    reports = await client.get_reports(cmd.container_id, cmd.path)
    if not reports:
        return "No open reports."
    lines = [f"Found {len(reports)} report(s):"]
    lines.extend(format_report(r) for r in reports)
    return "\n".join(lines)


async def handle_report(cmd: ReportCommand, client: StorageClient) -> str:
    report = Report(reason=cmd.reason, files=cmd.files)
    info = await client.post_report(cmd.container_id, report, cmd.password)
    return f"Filed report {info.id}"


async def dispatch_command(cmd: CommandRequest, client: StorageClient, config: Config) -> str:
    """
    Dispatch a parsed command to its handler.

    Storage errors are turned into an 'Error: ...' message.
    """
    try:
        if isinstance(cmd, GetContainerCommand):
            return await handle_get_container(cmd, client)
        elif isinstance(cmd, NewContainerCommand):
            return await handle_new_container(cmd, client, config)
        elif isinstance(cmd, GetFileCommand):
            return await handle_get_file(cmd, client)
        elif isinstance(cmd, PutFileCommand):
            return await handle_put_file(cmd, client)
        elif isinstance(cmd, DeleteFileCommand):
            return await handle_delete_file(cmd, client)
        elif isinstance(cmd, GetTokenCommand):
            return await handle_get_token(cmd, client)
        elif isinstance(cmd, NewTokenCommand):
            return await handle_new_token(cmd, client)
        elif isinstance(cmd, ListReportsCommand):
            return await handle_list_reports(cmd, client)
        elif isinstance(cmd, ReportCommand):
            return await handle_report(cmd, client)
        else:
            return f"Unknown command type: {type(cmd)}"
    except StorageServiceError as e:
        logger.info(f"{cmd.command} failed: {type(e).__name__}")
        return f"Error: {e}"


def run_command(cmd: CommandRequest, config: Optional[Config] = None) -> str:
    """
    Run one command to completion with a fresh client.

    Args:
        cmd: Parsed command
        config: Optional Config for dependency injection (testing)

    Returns:
        Output to print
    """
    if config is None:
        config = get_config()

    if isinstance(cmd, UseTokenCommand):
        return handle_use_token(cmd, config)

    async def _run() -> str:
        async with open_client(config) as client:
            return await dispatch_command(cmd, client, config)

    logger.info(f"Executing {cmd.command} command")
    return asyncio.run(_run())

"""Command parser for CLI input."""

import shlex
from typing import Optional

from cli.constants import PASSWORD_OPTION
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


class ParseError(Exception):
    """Raised when command parsing fails."""

    pass


def parse_command(input_line: str) -> CommandRequest:
    """Parse user input into a CommandRequest object.

    Args:
        input_line: Raw user input from REPL

    Returns:
        CommandRequest object

    Raises:
        ParseError: If command syntax is invalid
    """
    if not input_line.strip():
        raise ParseError("Empty command")

    try:
        tokens = shlex.split(input_line)
    except ValueError as e:
        raise ParseError(f"Invalid syntax: {e}")

    if not tokens:
        raise ParseError("Empty command")

    command_name = tokens[0]
    args = tokens[1:]

    if command_name == "use-token":
        return _parse_use_token(args)
    elif command_name == "container":
        return _parse_container(args)
    elif command_name == "new-container":
        return _parse_new_container(args)
    elif command_name == "get":
        return _parse_get(args)
    elif command_name == "put":
        return _parse_put(args)
    elif command_name == "rm":
        return _parse_rm(args)
    elif command_name == "token":
        return _parse_token(args)
    elif command_name == "new-token":
        return _parse_new_token(args)
    elif command_name == "reports":
        return _parse_reports(args)
    elif command_name == "report":
        return _parse_report(args)
    else:
        raise ParseError(f"Unknown command: {command_name}")


def _pop_password(args: list[str]) -> tuple[list[str], Optional[str]]:
    """Remove '--password P' or '--password=P' from args and return it."""
    remaining = []
    password = None
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == PASSWORD_OPTION:
            if i + 1 >= len(args):
                raise ParseError(f"{PASSWORD_OPTION} requires a value")
            password = args[i + 1]
            i += 2
            continue
        if arg.startswith(f"{PASSWORD_OPTION}="):
            password = arg[len(PASSWORD_OPTION) + 1:]
        else:
            remaining.append(arg)
        i += 1
    return remaining, password


def _parse_int(value: str, name: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise ParseError(f"{name} must be an integer, got '{value}'")
    if number < 0:
        raise ParseError(f"{name} must not be negative")
    return number


def _parse_use_token(args: list[str]) -> UseTokenCommand:
    """Parse 'use-token <token>' command."""
    if len(args) != 1:
        raise ParseError("use-token requires exactly 1 argument: <token>")
    return UseTokenCommand(token=args[0])


def _parse_container(args: list[str]) -> GetContainerCommand:
    """Parse 'container <id>' command."""
    args, password = _pop_password(args)
    if len(args) != 1:
        raise ParseError("container requires exactly 1 argument: <id>")
    return GetContainerCommand(container_id=args[0], password=password)


def _parse_new_container(args: list[str]) -> NewContainerCommand:
    """Parse 'new-container [token]' command."""
    args, password = _pop_password(args)
    if len(args) > 1:
        raise ParseError("new-container takes at most 1 argument: [token]")
    token = args[0] if args else None
    return NewContainerCommand(token=token, password=password)


def _parse_get(args: list[str]) -> GetFileCommand:
    """Parse 'get <container> <path> [output]' command."""
    args, password = _pop_password(args)
    if len(args) not in (2, 3):
        raise ParseError("get requires 2 or 3 arguments: <container> <path> [output]")
    output_path = args[2] if len(args) == 3 else None
    return GetFileCommand(
        container_id=args[0], path=args[1], output_path=output_path, password=password
    )


def _parse_put(args: list[str]) -> PutFileCommand:
    """Parse 'put <container> <path> <local-file>' command."""
    args, password = _pop_password(args)
    if len(args) != 3:
        raise ParseError("put requires exactly 3 arguments: <container> <path> <local-file>")
    container_id, path, local_path = args
    return PutFileCommand(
        container_id=container_id, path=path, local_path=local_path, password=password
    )


def _parse_rm(args: list[str]) -> DeleteFileCommand:
    """Parse 'rm <container> <path>' command."""
    args, password = _pop_password(args)
    if len(args) != 2:
        raise ParseError("rm requires exactly 2 arguments: <container> <path>")
    return DeleteFileCommand(container_id=args[0], path=args[1], password=password)


def _parse_token(args: list[str]) -> GetTokenCommand:
    """Parse 'token <id>' command."""
    if len(args) != 1:
        raise ParseError("token requires exactly 1 argument: <id>")
    return GetTokenCommand(token_id=args[0])


def _parse_new_token(args: list[str]) -> NewTokenCommand:
    """Parse 'new-token <parent> <token-limit> <storage-limit> [hint]' command."""
    if len(args) not in (3, 4):
        raise ParseError(
            "new-token requires 3 or 4 arguments: <parent> <token-limit> <storage-limit> [hint]"
        )
    return NewTokenCommand(
        parent=args[0],
        token_limit=_parse_int(args[1], "token-limit"),
        storage_limit=_parse_int(args[2], "storage-limit"),
        hint=args[3] if len(args) == 4 else None,
    )


def _parse_reports(args: list[str]) -> ListReportsCommand:
    """Parse 'reports [container] [path]' command."""
    if len(args) > 2:
        raise ParseError("reports takes at most 2 arguments: [container] [path]")
    container_id = args[0] if args else None
    path = args[1] if len(args) > 1 else None
    return ListReportsCommand(container_id=container_id, path=path)


def _parse_report(args: list[str]) -> ReportCommand:
    """Parse 'report <container> <reason> <path>...' command."""
    args, password = _pop_password(args)
    if len(args) < 3:
        raise ParseError("report requires a container, a reason and at least one path")
    return ReportCommand(
        container_id=args[0], reason=args[1], files=tuple(args[2:]), password=password
    )

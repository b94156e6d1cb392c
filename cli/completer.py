"""Custom completer for Strongbox CLI with local file autocompletion."""

from pathlib import Path
from typing import Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from cli.constants import COMMANDS, PASSWORD_OPTION

# put <container> <path> <local-file>
ARGS_BEFORE_LOCAL_FILE = 2


class StrongboxCompleter(Completer):
    """
    Custom completer that provides:
    - Command name completion for the first token
    - Local file path completion for the <local-file> argument of 'put'
    """

    def get_completions(
        self, document: Document, complete_event
    ) -> Iterable[Completion]:
        text = document.text_before_cursor
        tokens = text.split()

        is_typing_new_token = text.endswith(" ") or not tokens

        if not tokens or (len(tokens) == 1 and not is_typing_new_token):
            yield from self._complete_commands(tokens[0] if tokens else "")
            return

        if tokens[0].lower() != "put":
            return

        completed = tokens[1:] if is_typing_new_token else tokens[1:-1]
        positional = []
        expecting_password = False
        for token in completed:
            if expecting_password:
                expecting_password = False
            elif token == PASSWORD_OPTION:
                expecting_password = True
            elif not token.startswith(f"{PASSWORD_OPTION}="):
                positional.append(token)

        if expecting_password or len(positional) != ARGS_BEFORE_LOCAL_FILE:
            return

        current_word = "" if is_typing_new_token else tokens[-1]
        yield from self._complete_local_files(current_word)

    def _complete_commands(self, partial: str) -> Iterable[Completion]:
        """Complete command names matching the partial input."""
        partial_lower = partial.lower()
        for cmd in COMMANDS:
            if cmd.startswith(partial_lower):
                yield Completion(cmd, start_position=-len(partial))

    def _complete_local_files(self, partial: str) -> Iterable[Completion]:
        """
        Complete paths relative to the current directory.

        Directories are offered with a trailing '/' so completion can descend.
        """
        directory, _, prefix = partial.rpartition("/")
        base = Path.cwd() / directory if directory else Path.cwd()

        if not base.is_dir():
            return

        for item in sorted(base.iterdir()):
            if not item.name.startswith(prefix) or item.name.startswith("."):
                continue
            candidate = f"{directory}/{item.name}" if directory else item.name
            if item.is_dir():
                candidate += "/"
            yield Completion(candidate, start_position=-len(partial))

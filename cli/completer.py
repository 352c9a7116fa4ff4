"""Custom completer for Scribe CLI with local path completion."""

import os
from pathlib import Path
from typing import Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from cli.constants import COMMANDS

ADD_PATH_POSITION = 2


class ScribeCompleter(Completer):
    """
    Completes command names for the first token and local file paths for
    the ``<file_path>`` argument of ``add``.
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

        if tokens[0].lower() != "add":
            return

        position = len(tokens) if is_typing_new_token else len(tokens) - 1
        if position != ADD_PATH_POSITION:
            return

        current_word = "" if is_typing_new_token else tokens[-1]
        yield from self._complete_paths(current_word)

    def _complete_commands(self, partial: str) -> Iterable[Completion]:
        partial_lower = partial.lower()
        for cmd in COMMANDS:
            if cmd.startswith(partial_lower):
                yield Completion(cmd, start_position=-len(partial))

    def _complete_paths(self, partial: str) -> Iterable[Completion]:
        """
        Complete entries of the directory named by ``partial``.

        Directories are offered with a trailing separator so completion can
        continue into them. Hidden entries appear only once a dot is typed.
        """
        directory, prefix = os.path.split(partial)
        search_dir = Path(os.path.expanduser(directory)) if directory else Path.cwd()

        if not search_dir.is_dir():
            return

        try:
            entries = sorted(search_dir.iterdir(), key=lambda item: item.name)
        except OSError:
            return

        for item in entries:
            if not item.name.startswith(prefix):
                continue
            if item.name.startswith(".") and not prefix.startswith("."):
                continue

            candidate = os.path.join(directory, item.name)
            if item.is_dir():
                candidate += os.sep
            yield Completion(candidate, start_position=-len(partial))

"""Input sources: file, piped stdin or an interactive editor session."""

import logging
import os
import shlex
import shutil
import subprocess
import sys
import tempfile
from collections.abc import Iterable, Iterator
from typing import Optional, TextIO

from .config import Config
from .errors import InputUnreadable

logger = logging.getLogger(__name__)

INTERACTIVE_PROMPT = "Input text. End input with Ctrl-d or EOF on a new line."


def read_file_lines(path: str) -> Iterator[str]:
    """Yield lines of a text file, mapping read failures to InputUnreadable."""
    logger.info(f"Reading input from file: {path}", extra={"source": path})
    try:
        with open(path, encoding="utf-8") as handle:
            yield from handle
    except FileNotFoundError:
        raise InputUnreadable(path, "File not found") from None
    except PermissionError:
        raise InputUnreadable(path, "Permission denied reading file") from None
    except IsADirectoryError:
        raise InputUnreadable(path, "Is a directory") from None
    except UnicodeDecodeError as e:
        raise InputUnreadable(path, f"File is not valid UTF-8 text ({e.reason})") from e
    except OSError as e:
        raise InputUnreadable(path, f"Failed to read file ({e.strerror or e})") from e


def read_stream_lines(stream: TextIO, name: str = "<stdin>") -> Iterator[str]:
    """Yield lines of an already open text stream."""
    logger.debug(f"Reading input from {name}", extra={"source": name})
    try:
        yield from stream
    except UnicodeDecodeError as e:
        raise InputUnreadable(name, f"Input is not valid text ({e.reason})") from e
    except OSError as e:
        raise InputUnreadable(name, f"Failed to read input ({e.strerror or e})") from e


def find_editor(editor: str) -> Optional[list[str]]:
    """Split the EDITOR value into argv if its program is on PATH."""
    if not editor:
        return None

    try:
        argv = shlex.split(editor)
    except ValueError:
        argv = []

    if not argv or shutil.which(argv[0]) is None:
        logger.warning(f"Editor not found. EDITOR={editor!r}")
        return None

    return argv


def run_editor(argv: list[str]) -> str:
    """Open the editor on an empty temporary file and return what was saved."""
    fd, path = tempfile.mkstemp(prefix="macfmt-", suffix=".txt")
    os.close(fd)
    try:
        logger.debug(f"Opening editor {argv[0]!r} for input", extra={"source": path})
        try:
            result = subprocess.run([*argv, path], check=False)
        except OSError as e:
            raise InputUnreadable(argv[0], f"Failed to start editor ({e.strerror or e})") from e

        if result.returncode != 0:
            raise InputUnreadable(argv[0], f"Editor exited with status {result.returncode}")

        with open(path, encoding="utf-8") as handle:
            return handle.read()
    finally:
        os.unlink(path)


def gather_interactive_input(editor: str, stdin: Optional[TextIO] = None) -> Iterator[str]:
    """
    Collect input typed by a user at a terminal.

    Uses $EDITOR when it names an installed program, otherwise prompts on
    stderr and reads stdin until EOF.
    """
    argv = find_editor(editor)
    if argv is not None:
        return iter(run_editor(argv).splitlines(keepends=True))

    print(INTERACTIVE_PROMPT, file=sys.stderr)
    return read_stream_lines(stdin if stdin is not None else sys.stdin)


def open_input(
    path: Optional[str],
    config: Config,
    stdin: Optional[TextIO] = None,
) -> Iterable[str]:
    """Pick the input source for a run."""
    if path:
        return read_file_lines(path)

    stream = stdin if stdin is not None else sys.stdin
    if stream.isatty():
        logger.debug("Detected interactive terminal")
        return gather_interactive_input(config.editor, stream)

    return read_stream_lines(stream)

"""Interactive collection of the text to summarise."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, List

logger = logging.getLogger(__name__)

SENTINEL = "END"
PASTE_CHOICE = "1"
FILE_CHOICE = "2"

CHOICE_PROMPT = (
    "Choose input method: (1) Paste text (type END on its own line to finish) (2) Read from file\n"
    "Enter 1 or 2: "
)
PASTE_INSTRUCTIONS = "Paste your text. Enter a single line with END to finish input:"
FILE_PROMPT = "Enter file path: "

ReadLine = Callable[[str], str]


class InputError(RuntimeError):
    """Raised when the operator's input cannot be used."""


def prompt_choice(read_line: ReadLine = input) -> str:
    try:
        choice = read_line(CHOICE_PROMPT).strip()
    except EOFError:
        choice = ""
    if choice not in (PASTE_CHOICE, FILE_CHOICE):
        raise InputError("Invalid choice")
    return choice


def read_pasted_text(read_line: ReadLine = input) -> str:
    """Read lines until a line equal to the sentinel (after trimming) or end of input."""

    print(PASTE_INSTRUCTIONS)
    lines: List[str] = []
    while True:
        try:
            line = read_line("")
        except EOFError:
            break
        if line.strip() == SENTINEL:
            break
        lines.append(line)
    logger.debug("Collected %d pasted lines", len(lines))
    return "\n".join(lines)


def read_file_text(path: str) -> str:
    # Directories and undecodable files are reported like any other read failure.
    file_path = Path(path.strip())
    try:
        text = file_path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"Failed to read file: {exc}") from exc
    logger.debug("Read %d characters from %s", len(text), file_path)
    return text


def collect_text(read_line: ReadLine = input) -> str:
    choice = prompt_choice(read_line)
    if choice == PASTE_CHOICE:
        text = read_pasted_text(read_line)
    else:
        try:
            path = read_line(FILE_PROMPT)
        except EOFError:
            path = ""
        text = read_file_text(path)

    if not text.strip():
        raise InputError("No text provided")
    return text

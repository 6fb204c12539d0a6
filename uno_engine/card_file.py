"""Reading and writing card-list files (one card token per line)."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from uno_engine.cards import Card, ParseError, card_from_token, card_to_token


def read_card_file(path: str | Path) -> list[Card]:
    """Read a card-list file.

    The file is UTF-8. Blank lines are skipped. A missing file reads as
    an empty list.

    Raises:
        ParseError: If a line is not valid UTF-8 or not a valid card
            token. The message includes the file name and line number.
        IsADirectoryError: If the path names a directory.
    """
    path = Path(path)
    if not path.exists():
        return []
    if path.is_dir():
        raise IsADirectoryError(f"Card-list path is a directory: {path}")

    cards = []
    with open(path, "rb") as f:
        for line_number, raw_line in enumerate(f, start=1):
            try:
                line = raw_line.decode("utf-8")
            except UnicodeDecodeError as e:
                raise ParseError(
                    raw_line.decode("utf-8", errors="replace").strip(),
                    f"not valid UTF-8 ({path}:{line_number})",
                ) from e
            token = line.strip()
            if not token:
                continue
            try:
                cards.append(card_from_token(token))
            except ParseError as e:
                raise ParseError(token, f"{e.reason} ({path}:{line_number})") from e
    return cards


def write_card_file(path: str | Path, cards: Iterable[Card]) -> Path:
    """Write cards to a card-list file, creating parent directories.

    Returns:
        Path to the written file.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        for card in cards:
            f.write(card_to_token(card) + "\n")
    return path

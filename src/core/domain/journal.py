"""Journal: the Single Responsibility vignette.

The journal only keeps numbered entries. Saving, loading or fetching it is
somebody else's job (see `adapters.persistence.PersistenceManager`), so the
only reason to change this class is a change in how entries are kept.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field

_ENTRY_RE = re.compile(r"^(?P<index>\d+): (?P<text>.*)$")


class JournalFormatError(ValueError):
    """Raised when text cannot be read back as journal entries."""


class Journal(BaseModel):
    """Numbered, append-mostly list of thoughts."""

    count: int = Field(
        default=0,
        ge=0,
        description="Last index handed out. Indices are never reused.",
    )
    entries: dict[int, str] = Field(
        default_factory=dict,
        description="Index -> rendered entry ('N: text'), in insertion order.",
    )

    def add_entry(self, text: str) -> int:
        """Append an entry and return its index.

        The text must fit on one line; otherwise the rendered journal could
        not be read back by `from_text`.
        """

        if text.splitlines() not in ([], [text]):
            raise JournalFormatError(f"journal entries must be a single line: {text!r}")
        self.count += 1
        c = self.count
        self.entries[c] = f"{c}: {text}"
        return c

    def remove_entry(self, index: int) -> None:
        self.entries.pop(index, None)

    def __len__(self) -> int:
        return len(self.entries)

    def __str__(self) -> str:
        return "\n".join(self.entries.values())

    @classmethod
    def from_text(cls, text: str) -> "Journal":
        """Rebuild a journal from its rendered form.

        Rules:
        - One `N: text` entry per non-empty line.
        - `count` resumes from the highest index seen, so new entries never
          collide with removed ones that were persisted.
        - An index may appear only once.
        """

        journal = cls()
        for lineno, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            match = _ENTRY_RE.match(line)
            if match is None:
                raise JournalFormatError(f"line {lineno} is not a journal entry: {line!r}")
            index = int(match.group("index"))
            if index in journal.entries:
                raise JournalFormatError(f"line {lineno} repeats index {index}")
            journal.entries[index] = line
            journal.count = max(journal.count, index)
        return journal

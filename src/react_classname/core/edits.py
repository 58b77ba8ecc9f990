from collections.abc import Sequence
from dataclasses import dataclass


class EditConflictError(RuntimeError):
    """Raised when two planned edits touch the same bytes."""


@dataclass(frozen=True)
class TextEdit:
    start: int
    end: int
    replacement: str

    @classmethod
    def insert(cls, offset: int, text: str) -> "TextEdit":
        return cls(offset, offset, text)


def apply_edits(source: bytes, edits: Sequence[TextEdit]) -> bytes:
    """Apply byte-range edits planned against *source*.

    Edits must not overlap; two insertions at the same offset are applied
    in the order given.
    """
    ordered = sorted(enumerate(edits), key=lambda item: (item[1].start, item[1].end, item[0]))
    chunks: list[bytes] = []
    cursor = 0
    for _, edit in ordered:
        if edit.start > edit.end or edit.end > len(source):
            raise EditConflictError(f"Edit out of range: {edit}")
        if edit.start < cursor:
            raise EditConflictError(f"Edit overlaps a previous edit: {edit}")
        chunks.append(source[cursor : edit.start])
        chunks.append(edit.replacement.encode("utf-8"))
        cursor = edit.end
    chunks.append(source[cursor:])
    return b"".join(chunks)

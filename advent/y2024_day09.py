"""Compacting a disk described by a dense map of file and free-space lengths."""

from __future__ import annotations

from dataclasses import dataclass

_DIGITS = frozenset("0123456789")


@dataclass
class _Span:
    start: int
    size: int
    file_id: int = 0


def _parse_disk_map(disk_map: str) -> list[int]:
    line = disk_map.split("\n", 1)[0].strip()
    if not line or not set(line) <= _DIGITS:
        raise ValueError(f"malformed disk map {line!r}")
    return [int(ch) for ch in line]


def compact_blocks_checksum(disk_map: str) -> int:
    """Move file blocks one at a time into the leftmost free block, then checksum."""
    blocks: list[int | None] = []
    for index, size in enumerate(_parse_disk_map(disk_map)):
        blocks.extend([index // 2 if index % 2 == 0 else None] * size)

    left, right = 0, len(blocks) - 1
    while True:
        while left < len(blocks) and blocks[left] is not None:
            left += 1
        while right >= 0 and blocks[right] is None:
            right -= 1
        if left >= right:
            break
        blocks[left], blocks[right] = blocks[right], None

    return sum(position * file_id for position, file_id in enumerate(blocks) if file_id is not None)


def compact_files_checksum(disk_map: str) -> int:
    """Move whole files, highest id first, into the leftmost gap that fits, then checksum."""
    files: list[_Span] = []
    spaces: list[_Span] = []
    position = 0
    for index, size in enumerate(_parse_disk_map(disk_map)):
        if index % 2 == 0:
            files.append(_Span(position, size, index // 2))
        else:
            spaces.append(_Span(position, size))
        position += size

    for file in reversed(files[1:]):
        for space in spaces:
            if space.start < file.start and space.size >= file.size:
                file.start = space.start
                space.start += file.size
                space.size -= file.size
                break

    return sum(
        file.file_id * position
        for file in files
        for position in range(file.start, file.start + file.size)
    )


def solve(text: str) -> tuple[int, int]:
    """Return the checksums after block-wise and file-wise compaction."""
    return compact_blocks_checksum(text), compact_files_checksum(text)
"""Directory sizes recovered from a terminal session."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

DISK_SIZE = 70_000_000
SPACE_REQUIRED = 30_000_000
SMALL_FOLDER = 100_000

_U64_MAX = 2**64 - 1
_NUMBER = re.compile(r"\+?[0-9]+")


@dataclass
class Folder:
    """A directory: its subdirectories, its files and, once known, its size."""

    children: list[str] = field(default_factory=list)
    files: list[tuple[str, int]] = field(default_factory=list)
    size: int | None = None

    def add_child(self, child: str) -> None:
        self.children = sorted({*self.children, child})

    def add_file(self, file: tuple[str, int]) -> None:
        self.files = sorted({*self.files, file})


def _word(words: list[str], index: int, line: str) -> str:
    if index >= len(words):
        raise ValueError(f"incomplete line: {line!r}")
    return words[index]


def _u64(text: str) -> int:
    if not _NUMBER.fullmatch(text):
        raise ValueError(f"invalid file size: {text!r}")
    value = int(text)
    if value > _U64_MAX:
        raise ValueError(f"file size out of range: {text}")
    return value


def create_tree(data: Iterable[str | None]) -> dict[str, Folder]:
    """Map every listed directory path to its folder."""
    tree: dict[str, Folder] = {}
    history: list[str] = []
    for line in data:
        if line is None:
            continue
        words = line.split()
        first = _word(words, 0, line)
        if first == "$":
            if _word(words, 1, line) == "cd":
                target = _word(words, 2, line)
                if target == "..":
                    if history:
                        history.pop()
                else:
                    history.append(target)
            continue
        parent = "/".join(history)
        folder = tree.setdefault(parent, Folder())
        name = _word(words, 1, line)
        if first == "dir":
            folder.add_child(f"{parent}/{name}")
        else:
            folder.add_file((name, _u64(first)))
    return tree


def calculate_size(folders: Mapping[str, Folder], folder_name: str) -> int:
    """Total size of the files in a folder and everything below it."""
    folder = folders.get(folder_name)
    if folder is None:
        return 0
    own = sum(size for _, size in folder.files)
    return own + sum(calculate_size(folders, child) for child in folder.children)


def _record_sizes(tree: dict[str, Folder]) -> list[int]:
    sizes = []
    for name, folder in tree.items():
        folder.size = calculate_size(tree, name)
        sizes.append(folder.size)
    return sizes


def solve_a(text: str) -> str:
    sizes = _record_sizes(create_tree(text.splitlines()))
    return str(sum(size for size in sizes if size <= SMALL_FOLDER))


def solve_b(text: str) -> str:
    tree = create_tree(text.splitlines())
    used = calculate_size(tree, "/")
    if used > DISK_SIZE:
        raise ValueError("more space is used than the disk holds")
    free = DISK_SIZE - used
    if free > SPACE_REQUIRED:
        raise ValueError("enough space is already free")
    needed = SPACE_REQUIRED - free
    sizes = _record_sizes(tree)
    return str(min((size for size in sizes if size >= needed), default=_U64_MAX))
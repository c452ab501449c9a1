"""Reading and listing a graph of wired components."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

_WORD_RE = re.compile(r"[A-Za-z0-9]+")


@dataclass
class Node:
    """A named component and the components it is wired to."""

    index: int
    name: str
    edges: list[str] = field(default_factory=list)


def parse_graph(text: str) -> list[Node]:
    """Read lines of the form 'name: other other ...'."""
    nodes: list[Node] = []
    for line in text.splitlines():
        if not line.strip():
            continue
        name, sep, rest = line.partition(":")
        name = name.strip()
        if not sep or not _WORD_RE.fullmatch(name):
            raise ValueError(f"malformed connection line {line!r}")
        nodes.append(Node(len(nodes), name, _WORD_RE.findall(rest)))
    return nodes


def format_graph(nodes: Iterable[Node]) -> str:
    """List each node with its edges, one node per line."""
    return "".join(
        f"Node {node.index}: {node.name}: " + "".join(f"{edge} -- " for edge in node.edges) + "\n"
        for node in nodes
    )


def solve(text: str) -> str:
    """Return the listing of the graph described by ``text``."""
    return format_graph(parse_graph(text))
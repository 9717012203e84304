"""Opening tree data structures."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class Opening:
    """An ECO classification; both fields are empty when unknown."""

    eco_code: str = ""
    name: str = ""

    @property
    def is_known(self) -> bool:
        return bool(self.eco_code or self.name)


UNKNOWN_OPENING = Opening()


@dataclass(slots=True)
class OpeningNode:
    """A position in the opening tree, reached by playing :attr:`move`."""

    move: str
    eco_code: str = ""
    name: str = ""
    children: dict[str, int] = field(default_factory=dict)

    @property
    def has_code(self) -> bool:
        return bool(self.eco_code)


class OpeningTree:
    """Prefix tree of opening lines stored as an arena of nodes.

    Nodes are addressed by integer handles; handle :attr:`ROOT` is the
    starting position and carries no move.
    """

    ROOT = 0

    __slots__ = ("_nodes",)

    def __init__(self) -> None:
        self._nodes: list[OpeningNode] = [OpeningNode(move="")]

    def node(self, handle: int) -> OpeningNode:
        return self._nodes[handle]

    def child(self, handle: int, move: str) -> int | None:
        """Return the child of *handle* reached by *move*, if any."""
        return self._nodes[handle].children.get(move)

    def add_child(self, handle: int, move: str) -> int:
        """Create an unlabeled child of *handle* and return its handle."""
        child = len(self._nodes)
        self._nodes.append(OpeningNode(move=move))
        self._nodes[handle].children[move] = child
        return child

    @property
    def is_empty(self) -> bool:
        return len(self._nodes) == 1

    def __len__(self) -> int:
        return len(self._nodes)

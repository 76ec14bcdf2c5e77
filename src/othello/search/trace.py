"""
Search tracing for debugging the alpha-beta traversal.
A trace is handed to one search call; nothing is kept at module level.
"""
import logging
from typing import List, Optional, Tuple

logger = logging.getLogger("othello.search")


class SearchTrace:
    """Records the explored branches of a search as an indented outline."""

    def __init__(self, max_depth: int = 4, indent: int = 4):
        """
        Initialize a trace.

        Args:
            max_depth: Branches nested this deep or deeper are not recorded
            indent: Spaces per nesting level in the outline
        """
        self.max_depth = max_depth
        self.indent = indent
        self._path: List[Tuple[int, int]] = []
        self._lines: List[str] = []

    @property
    def path(self) -> List[Tuple[int, int]]:
        """Moves from the root to the branch being explored."""
        return list(self._path)

    @property
    def lines(self) -> List[str]:
        return list(self._lines)

    def _record(self, text: str):
        line = f"{' ' * (len(self._path) * self.indent)}{text}"
        self._lines.append(line)
        logger.debug(line)

    def enter(self, move: Tuple[int, int]):
        """Called before descending into the branch for `move`."""
        if len(self._path) < self.max_depth:
            self._record(f"Option {tuple(move)}")
        self._path.append(move)

    def leave(self, move: Tuple[int, int], score: int):
        """Called once the branch for `move` has been scored."""
        self._path.pop()
        if len(self._path) < self.max_depth:
            self._record(f"Score {tuple(move)} {score}")

    def dump(self, filepath: Optional[str] = None) -> str:
        """Return the outline, writing it to `filepath` when given."""
        text = "\n".join(self._lines) + "\n" if self._lines else ""
        if filepath:
            with open(filepath, 'w') as f:
                f.write(text)
        return text

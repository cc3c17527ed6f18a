from __future__ import annotations


class IdGenerator:
    """Sequential record id source owned by whoever originates records.

    Each instance keeps its own counter, so two capture sessions never share
    id state. The analytics engine only consumes ids and never creates them.
    """

    def __init__(self, prefix: str = "e", start: int = 1) -> None:
        self.prefix = prefix
        self._next = int(start)

    def next_id(self) -> str:
        value = self._next
        self._next += 1
        return f"{self.prefix}{value}"

    def peek(self) -> str:
        return f"{self.prefix}{self._next}"

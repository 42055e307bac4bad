from contextlib import contextmanager
from typing import Dict, Iterator
import logging

logger = logging.getLogger(__name__)

class SymbolTable:
    """Per-name rename counters for the uniquify pass.

    ``get`` returns the suffix visible in the current scope (0 when the name
    is not bound). Entering a binding saves that value, installs a fresh
    suffix, and restores the saved value on exit, so the table behaves like a
    stack of shadowing frames per name. Fresh suffixes come from a per-name
    high-water mark that never goes back down, which keeps sibling bindings
    of the same name distinct.
    """

    def __init__(self):
        self.counters: Dict[str, int] = {}
        self.issued: Dict[str, int] = {}

    def get(self, name: str) -> int:
        return self.counters.get(name, 0)

    def store(self, name: str, count: int) -> None:
        if count:
            self.counters[name] = count
        else:
            self.counters.pop(name, None)

    def fresh(self, name: str) -> int:
        """Issue the next unused suffix for name"""
        count = max(self.issued.get(name, 0), self.get(name)) + 1
        self.issued[name] = count
        return count

    def enter_scope(self, name: str) -> int:
        """Bind name to a fresh suffix and return the suffix it shadows"""
        saved = self.get(name)
        self.store(name, self.fresh(name))
        logger.debug(f"enter {name}: {saved} -> {self.get(name)}")
        return saved

    def exit_scope(self, name: str, saved: int) -> None:
        logger.debug(f"exit {name}: {self.get(name)} -> {saved}")
        self.store(name, saved)

    @contextmanager
    def scope(self, name: str) -> Iterator[int]:
        """Make a fresh binding of name visible for the duration of the block.

        Yields the new suffix. The previous suffix is restored on every exit
        path, including exceptions.
        """
        saved = self.enter_scope(name)
        try:
            yield self.get(name)
        finally:
            self.exit_scope(name, saved)

    def __contains__(self, name: str) -> bool:
        return name in self.counters

    def __len__(self) -> int:
        return len(self.counters)

    def snapshot(self) -> Dict[str, int]:
        """Visible counters, for checking that a traversal left no trace"""
        return dict(self.counters)

"""Batch command processing over an OrderedTree of Pokemon records."""

import logging
from pathlib import Path
from typing import List, Sequence, Union

from ordered_tree import OrderedTree
from records import Pokemon, find_by_name

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = "output.txt"
INVALID_COMMAND = "Invalid Command"


class CommandParser:
    def __init__(self, records: Sequence[Pokemon],
                 output_path: Union[str, Path] = DEFAULT_OUTPUT) -> None:
        self.records: List[Pokemon] = list(records)
        self.output_path = Path(output_path)
        self.tree: OrderedTree[Pokemon] = OrderedTree()

    def process(self, path: Union[str, Path]) -> None:
        with open(path, encoding="utf-8") as handle:
            for line in handle:
                line = line.strip()
                if not line:
                    continue
                self.operate(line.split())

    def operate(self, command: Sequence[str]) -> str:
        """Run one command and append its result line to the output file."""
        operation = command[0].lower() if command else ""
        logger.debug("dispatching %s", list(command))

        if operation == "print":
            result = " ".join(record.name for record in self.tree)
        elif operation in ("insert", "search", "remove") and len(command) < 2:
            result = INVALID_COMMAND
        elif operation == "insert":
            result = self._insert(command[1])
        elif operation == "search":
            result = self._search(command[1])
        elif operation == "remove":
            result = self._remove(command[1])
        else:
            result = INVALID_COMMAND

        self.write(result)
        return result

    def _insert(self, name: str) -> str:
        record = find_by_name(self.records, name)
        if record is None:
            return f"Pokemon not found: {name}"
        self.tree.insert(record)
        return f"insert {name}"

    def _search(self, name: str) -> str:
        record = find_by_name(self.records, name)
        if record is not None and self.tree.search(record):
            return f"found {name}"
        return "search failed"

    def _remove(self, name: str) -> str:
        record = find_by_name(self.records, name)
        if record is not None and self.tree.search(record):
            self.tree.remove(record)
            return f"removed {name}"
        return "remove failed"

    def write(self, content: str) -> None:
        with open(self.output_path, "a", encoding="utf-8") as handle:
            handle.write(content + "\n")

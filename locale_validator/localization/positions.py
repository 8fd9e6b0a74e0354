"""Source positions for keys in raw JSON text.

``json.loads`` throws away where things were in the file, so annotations need
a second pass over the text. The scanner below walks the JSON grammar,
recording the line and column of every object member key under its path
tuple (``("messages", "greeting")``; array items add their index, as in
``("items", 0)``).
"""

import re
from bisect import bisect_right
from json import JSONDecodeError
from json.decoder import scanstring
from typing import Dict, List, Tuple, Union

from .models import SourcePosition

KeyPath = Tuple[Union[str, int], ...]
PositionIndex = Dict[KeyPath, SourcePosition]

_WHITESPACE = re.compile(r"[ \t\n\r]*")
_SCALAR = re.compile(r"-?(?:0|[1-9]\d*)(?:\.\d+)?(?:[eE][-+]?\d+)?|-?Infinity|NaN|true|false|null")


class PositionIndexError(ValueError):
    """Raised when the text is not well-formed JSON."""


class _Scanner:
    def __init__(self, text: str):
        self.text = text
        self.positions: PositionIndex = {}
        self._line_starts: List[int] = [0] + [m.end() for m in re.finditer("\n", text)]

    def position_at(self, offset: int) -> SourcePosition:
        line = bisect_right(self._line_starts, offset)
        return SourcePosition(line=line, column=offset - self._line_starts[line - 1] + 1)

    def fail(self, message: str, offset: int) -> PositionIndexError:
        where = self.position_at(offset)
        return PositionIndexError(f"{message}: line {where.line} column {where.column}")

    def skip_whitespace(self, offset: int) -> int:
        return _WHITESPACE.match(self.text, offset).end()

    def expect(self, char: str, offset: int) -> int:
        if not self.text.startswith(char, offset):
            raise self.fail(f"Expecting '{char}'", offset)
        return offset + 1

    def scan_string(self, offset: int) -> Tuple[str, int]:
        try:
            return scanstring(self.text, offset + 1)
        except JSONDecodeError as e:
            raise self.fail(e.msg, e.pos) from e

    def scan_value(self, offset: int, path: KeyPath) -> int:
        offset = self.skip_whitespace(offset)
        char = self.text[offset:offset + 1]

        if char == "{":
            return self.scan_object(offset + 1, path)
        if char == "[":
            return self.scan_array(offset + 1, path)
        if char == '"':
            return self.scan_string(offset)[1]

        match = _SCALAR.match(self.text, offset)
        if match is None:
            raise self.fail("Expecting value", offset)
        return match.end()

    def scan_object(self, offset: int, path: KeyPath) -> int:
        offset = self.skip_whitespace(offset)
        if self.text.startswith("}", offset):
            return offset + 1

        while True:
            offset = self.skip_whitespace(offset)
            if not self.text.startswith('"', offset):
                raise self.fail("Expecting property name enclosed in double quotes", offset)

            key, end = self.scan_string(offset)
            member = path + (key,)
            # Duplicate keys: last one wins, as with json.loads
            self.positions[member] = self.position_at(offset)

            offset = self.expect(":", self.skip_whitespace(end))
            offset = self.skip_whitespace(self.scan_value(offset, member))

            if self.text.startswith(",", offset):
                offset += 1
                continue
            return self.expect("}", offset)

    def scan_array(self, offset: int, path: KeyPath) -> int:
        offset = self.skip_whitespace(offset)
        if self.text.startswith("]", offset):
            return offset + 1

        index = 0
        while True:
            offset = self.skip_whitespace(self.scan_value(offset, path + (index,)))
            index += 1

            if self.text.startswith(",", offset):
                offset += 1
                continue
            return self.expect("]", offset)


def build_position_index(text: str) -> PositionIndex:
    """Map every object key path in ``text`` to its 1-based line and column.

    Args:
        text: Raw JSON document text

    Returns:
        Dictionary of key path tuples to positions of the key's opening quote

    Raises:
        PositionIndexError: If ``text`` is not well-formed JSON
    """
    scanner = _Scanner(text)
    end = scanner.skip_whitespace(scanner.scan_value(0, ()))
    if end != len(text):
        raise scanner.fail("Extra data", end)
    return scanner.positions

from dataclasses import dataclass, field
from enum import Enum


class ShorthandTokenizerState(Enum):
    SEGMENT = 1
    TEXT = 2


OPERATORS = {
    '>': "child",
    '+': "sibling",
}


@dataclass
class ShorthandTokenizerStateMachine:
    buffer: list[str] = field(default_factory=list)
    state: ShorthandTokenizerState = ShorthandTokenizerState.SEGMENT

    """
    This method is used for only testing purposes.
    """
    def process_string(self, s: str) -> tuple[str, str] | None:
        tok: tuple[str, str] | None = None
        for c in s:
            output = self.feed(c)
            if output:
                tok = output
        return tok

    def flush_buffer(self) -> str:
        result = "".join(self.buffer)
        self.buffer = []
        return result

    def next_state(self, next_char: str) -> ShorthandTokenizerState:
        if next_char == '{':
            return ShorthandTokenizerState.TEXT
        elif next_char == '}':
            return ShorthandTokenizerState.SEGMENT
        return self.state

    def feed(self, c: str) -> tuple[str, str] | None:
        self.state = self.next_state(c)

        # operators inside {...} are plain text
        if self.state == ShorthandTokenizerState.SEGMENT and c in OPERATORS:
            return (OPERATORS[c], self.flush_buffer())

        self.buffer.append(c)
        return None

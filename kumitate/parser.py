import re
from dataclasses import dataclass, field

from kumitate.constants import ROOT_TAG
from kumitate.node import Element
from kumitate.state_machine import ShorthandTokenizerStateMachine


TAG_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9_-]*")
TRAILING_TEXT_PATTERN = re.compile(r"\{([^}]*)\}$")

# characters that end a class or id run
DECORATION_STOPS = ('.', '#', '{')


def print_tree(node: Element, indent: int = 0) -> None:
    print(" " * indent, node)
    for child in node.children:
        print_tree(child, indent + 2)


@dataclass
class SegmentExtractor:
    """
    Turns a single segment such as ``div.a#main{hello}`` into an Element.

    Anything that is not a ``.class`` or ``#id`` run after the tag is
    skipped, so a sloppy segment still yields whatever can be recognized.
    """
    text: str = ""

    def _read_run(self, rest: str, idx: int) -> tuple[str, int]:
        start = idx
        while idx < len(rest) and rest[idx] not in DECORATION_STOPS:
            idx += 1
        return rest[start:idx], idx

    def parse(self) -> Element | None:
        segment = self.text.strip()

        text: str | None = None
        text_match = TRAILING_TEXT_PATTERN.search(segment)
        if text_match:
            text = text_match.group(1)
            segment = segment[:text_match.start()]

        tag_match = TAG_PATTERN.match(segment)
        if not tag_match:
            return None
        tag = tag_match.group(0)
        rest = segment[len(tag):]

        classes: list[str] = []
        element_id: str | None = None

        idx = 0
        while idx < len(rest):
            c = rest[idx]
            if c == '.':
                name, idx = self._read_run(rest, idx + 1)
                if name:
                    classes.append(name)
            elif c == '#':
                name, idx = self._read_run(rest, idx + 1)
                if name:
                    element_id = name
            else:
                idx += 1

        return Element(
            tag=tag,
            id=element_id,
            classes=classes or None,
            text=text,
        )


@dataclass
class ShorthandParser:
    body: str = ""
    unfinished: list[Element] = field(default_factory=list)

    def parse(self) -> Element | None:
        root = Element(tag=ROOT_TAG)
        self.unfinished = [root]

        state_machine = ShorthandTokenizerStateMachine()
        for c in self.body:
            output = state_machine.feed(c)
            if output:
                kind, segment = output
                node = self.add_element(segment)
                if node is None:
                    # a dropped segment leaves the nesting level alone
                    continue
                if kind == "child":
                    self.unfinished.append(node)

        self.add_element(state_machine.flush_buffer())

        return self.finish(root)

    def add_element(self, segment: str) -> Element | None:
        node = SegmentExtractor(text=segment).parse()
        if node is None:
            return None

        parent = self.unfinished[-1]
        parent.children.append(node)
        return node

    def finish(self, root: Element) -> Element | None:
        self.unfinished = []
        if not root.children:
            return None
        if len(root.children) == 1:
            return root.children[0]
        return root


def parse_shorthand(token: str) -> Element | None:
    return ShorthandParser(body=token).parse()

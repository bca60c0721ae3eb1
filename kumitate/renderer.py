from dataclasses import dataclass

from kumitate.constants import DEFAULT_CSS_PREFIX, INDENT_UNIT
from kumitate.node import Element


ESCAPES = {
    "<": "&lt;",
    ">": "&gt;",
}

_escape_table = str.maketrans(ESCAPES)


def escape_text(text: str) -> str:
    return text.translate(_escape_table)


@dataclass
class JSXRenderer:
    """
    Serializes an Element tree into indented JSX.

    The first emitted line carries no indentation because the caller is
    inserting at a position that already has it. Every later line gets
    ``base_indent`` plus one ``INDENT_UNIT`` per nesting level.
    """
    css_prefix: str = DEFAULT_CSS_PREFIX
    base_indent: str = ""

    def class_expression(self, classes: list[str]) -> str:
        if len(classes) == 1:
            return f"{{{self.css_prefix}.{classes[0]}}}"
        expr = " ".join(f"${{{self.css_prefix}.{cls}}}" for cls in classes)
        return f"{{`{expr}`}}"

    def attribute_str(self, node: Element) -> str:
        attrs: list[str] = []
        if node.id:
            attrs.append(f'id="{node.id}"')
        if node.classes:
            attrs.append(f"className={self.class_expression(node.classes)}")
        if not attrs:
            return ""
        return " " + " ".join(attrs)

    def indent_str(self, indent: int, is_first_line: bool) -> str:
        if is_first_line:
            return self.base_indent
        return self.base_indent + INDENT_UNIT * indent

    def render(
        self,
        node: Element,
        indent: int = 0,
        is_first_line: bool = True
    ) -> str:
        lines: list[str] = []

        # (node, indent, is_first_line, closing); popped in document order
        pending: list[tuple[Element, int, bool, bool]] = [
            (node, indent, is_first_line, False)
        ]
        while pending:
            node, indent, is_first_line, closing = pending.pop()
            indent_str = self.indent_str(indent, is_first_line)

            if closing:
                lines.append(f"{indent_str}</{node.tag}>")
                continue

            if node.is_root:
                # every top-level sibling starts like a fresh render
                for i in reversed(range(len(node.children))):
                    pending.append((node.children[i], indent, i == 0, False))
                continue

            lead = "" if is_first_line else indent_str
            attrs = self.attribute_str(node)

            if node.children:
                lines.append(f"{lead}<{node.tag}{attrs}>")
                pending.append((node, indent, is_first_line, True))
                for child in reversed(node.children):
                    pending.append((child, indent + 1, False, False))
            elif node.text:
                lines.append(
                    f"{lead}<{node.tag}{attrs}>{escape_text(node.text)}</{node.tag}>"
                )
            else:
                lines.append(f"{lead}<{node.tag}{attrs}></{node.tag}>")

        return "\n".join(lines)


def generate_jsx(
    tree: Element,
    css_prefix: str = DEFAULT_CSS_PREFIX,
    indent: int = 0,
    base_indent: str = "",
    is_first_line: bool = True
) -> str:
    renderer = JSXRenderer(css_prefix=css_prefix, base_indent=base_indent)
    return renderer.render(tree, indent, is_first_line)

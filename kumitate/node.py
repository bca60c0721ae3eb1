from dataclasses import dataclass, field
from typing import Any

from kumitate.constants import ROOT_TAG


@dataclass
class Element:
    tag: str = ""
    id: str | None = None
    classes: list[str] | None = None
    text: str | None = None
    children: list['Element'] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"<{self.tag}{self.selector_str}>"

    @property
    def is_root(self) -> bool:
        return self.tag == ROOT_TAG

    @property
    def selector_str(self) -> str:
        selector = ""
        if self.id:
            selector += f"#{self.id}"
        for cls in self.classes or []:
            selector += f".{cls}"
        if self.text is not None:
            selector += "{" + self.text + "}"
        return selector

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"tag": self.tag}
        if self.id is not None:
            result["id"] = self.id
        if self.classes:
            result["classes"] = list(self.classes)
        if self.text is not None:
            result["text"] = self.text
        if self.children:
            result["children"] = [child.to_dict() for child in self.children]
        return result

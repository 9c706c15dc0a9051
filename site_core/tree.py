# site_core/tree.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Tuple, Union
import html

VOID_TAGS = frozenset({"img", "br", "hr", "meta", "link", "input"})

Child = Union["Node", str]


@dataclass(frozen=True)
class Node:
    """
    An immutable element of the visible output tree.
    Attributes keep their insertion order, so equal trees always serialize to
    the same HTML.
    """
    tag: str
    attrs: Tuple[Tuple[str, str], ...] = ()
    children: Tuple[Child, ...] = ()

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        for key, value in self.attrs:
            if key == name:
                return value
        return default

    @property
    def classes(self) -> List[str]:
        return (self.get("class") or "").split()

    def text(self) -> str:
        """All text content below this node, concatenated."""
        return "".join(c if isinstance(c, str) else c.text() for c in self.children)

    def iter(self) -> Iterator[Node]:
        yield self
        for child in self.children:
            if isinstance(child, Node):
                yield from child.iter()

    def find_all(self, predicate: Callable[[Node], bool]) -> List[Node]:
        return [n for n in self.iter() if predicate(n)]

    def find_by_id(self, element_id: str) -> Optional[Node]:
        for node in self.iter():
            if node.get("id") == element_id:
                return node
        return None

    def find_by_class(self, class_name: str) -> List[Node]:
        return self.find_all(lambda n: class_name in n.classes)

    def to_html(self) -> str:
        attrs = "".join(
            f' {key}="{html.escape(value, quote=True)}"' if value != "" else f" {key}"
            for key, value in self.attrs
        )
        if self.tag in VOID_TAGS:
            return f"<{self.tag}{attrs}>"
        inner = "".join(
            html.escape(c, quote=False) if isinstance(c, str) else c.to_html()
            for c in self.children
        )
        return f"<{self.tag}{attrs}>{inner}</{self.tag}>"


def h(tag: str, *children, **attrs) -> Node:
    """
    Shorthand element builder.
    `class_` becomes `class`, other underscores become dashes (`aria_label` ->
    `aria-label`). None/False attributes and None children are dropped;
    nested lists of children are flattened.
    """
    pairs = []
    for key, value in attrs.items():
        if value is None or value is False:
            continue
        name = key.rstrip("_").replace("_", "-")
        pairs.append((name, "" if value is True else str(value)))
    return Node(tag, tuple(pairs), tuple(_flatten(children)))


def _flatten(children) -> Iterator[Child]:
    for child in children:
        if child is None:
            continue
        if isinstance(child, (list, tuple)):
            yield from _flatten(child)
        else:
            yield child if isinstance(child, Node) else str(child)

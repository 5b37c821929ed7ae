"""The penguin "paper" doll shown on a player card, with worn items and colour."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Union
from xml.dom import minidom
from xml.parsers.expat import ExpatError

from penguinroom.constants import ClothingType

Point = tuple[float, float]
SvgText = Union[str, bytes]

ITEM_OFFSET_Y = -12.5

PENGUIN_COLORS = {
    1: "#003366",
    2: "#009900",
    3: "#ff3399",
    4: "#333333",
    5: "#cc0000",
    6: "#ff6600",
    7: "#ffcc00",
    8: "#660099",
    9: "#996600",
    10: "#ff6666",
    11: "#006600",
    12: "#0099cc",
    13: "#8ae302",
    14: "#93a0a4",
    15: "#02a797",
    16: "#f0f0d8",
}

_PAPER_Z = {
    ClothingType.HEAD: 6,
    ClothingType.FACE: 5,
    ClothingType.NECK: 4,
    ClothingType.BODY: 3,
    ClothingType.HAND: 8,
    ClothingType.FEET: 2,
    ClothingType.PIN: 1,
    ClothingType.BACKGROUND: 0,
}


def color_for_id(color_id: int) -> Optional[str]:
    """The fill colour of penguin colour ``color_id``, or None if unknown."""
    return PENGUIN_COLORS.get(color_id)


def _parse(svg: SvgText) -> minidom.Document:
    try:
        return minidom.parseString(svg)
    except (ExpatError, ValueError) as exc:
        raise ValueError(f"not a valid SVG document: {exc}") from exc


def _child_elements(node: minidom.Node) -> Iterable[minidom.Element]:
    return (child for child in node.childNodes if child.nodeType == child.ELEMENT_NODE)


def _child_with_id(node: Optional[minidom.Node], element_id: str) -> Optional[minidom.Element]:
    if node is None:
        return None
    return next(
        (child for child in _child_elements(node) if child.getAttribute("id") == element_id),
        None,
    )


def recolor_svg(svg: SvgText, color: str) -> str:
    """Set the fill of every filled shape in the penguin's body group.

    The body group is the child with id "body" of the root's child with id
    "penguin". Documents without it come back unchanged apart from
    serialisation. Raises ValueError for text that is not XML.
    """
    document = _parse(svg)
    body = _child_with_id(_child_with_id(document.documentElement, "penguin"), "body")
    if body is not None:
        for shape in _child_elements(body):
            if shape.hasAttribute("fill"):
                shape.setAttribute("fill", color)
    return document.documentElement.toxml()


def _to_float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


def item_offset(svg: SvgText) -> Point:
    """Offset that undoes the translation of an item drawing's first element.

    The first element's ``transform="matrix(a, b, c, d, e, f)"`` gives
    (-e, -f); anything else, including unreadable text, gives (0, 0).
    """
    try:
        document = _parse(svg)
    except ValueError:
        return (0.0, 0.0)
    first = next(iter(_child_elements(document.documentElement)), None)
    if first is None:
        return (0.0, 0.0)
    value = first.getAttribute("transform")
    parts = value.replace("matrix(", "").replace(")", "").split(", ")
    if len(parts) != 6:
        return (0.0, 0.0)
    return (-_to_float(parts[4]), -_to_float(parts[5]))


@dataclass
class PaperItem:
    """One clothing item drawn on the paper doll."""

    slot: ClothingType
    item_id: int
    svg: str
    z_value: int
    position: Point = (0.0, 0.0)
    clickable: bool = True
    hoverable: bool = True
    movable: bool = True


@dataclass
class PenguinPaper:
    """A paper doll of ``width`` by ``height`` drawn from SVG ``frames``."""

    frames: list[str] = field(default_factory=list)
    width: float = 0.0
    height: float = 0.0
    _items: dict[ClothingType, PaperItem] = field(default_factory=dict, init=False, repr=False)

    @property
    def items(self) -> dict[ClothingType, PaperItem]:
        """The worn items by slot."""
        return dict(self._items)

    def change_color(self, color: str) -> None:
        """Recolour the penguin's body in every frame."""
        self.frames = [recolor_svg(frame, color) for frame in self.frames]

    def set_color(self, color_id: int) -> Optional[str]:
        """Apply penguin colour ``color_id``; unknown ids change nothing.

        Returns the colour applied, or None.
        """
        color = color_for_id(color_id)
        if color is not None:
            self.change_color(color)
        return color

    def wear(self, slot: ClothingType, item_id: int, svg: SvgText) -> PaperItem:
        """Put item ``item_id`` drawn by ``svg`` in ``slot``, replacing what was there."""
        try:
            kind = ClothingType(slot)
            z_value = _PAPER_Z[kind]
        except (KeyError, ValueError):
            raise ValueError(f"a penguin paper has no {slot!r} slot") from None
        text = svg.decode("utf-8") if isinstance(svg, bytes) else svg
        offset_x, offset_y = item_offset(text)
        position = (
            self.width / 2 + offset_x,
            self.height / 2 + offset_y + ITEM_OFFSET_Y,
        )
        item = PaperItem(kind, item_id, text, z_value, position)
        self._items[kind] = item
        return item

    def remove(self, slot: ClothingType) -> PaperItem:
        """Take off the item in ``slot``; KeyError if nothing is worn there."""
        try:
            kind = ClothingType(slot)
        except ValueError:
            raise KeyError(slot) from None
        return self._items.pop(kind)
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ElementType(str, Enum):
    ROOT = "Root"
    EMPTY = "Empty"
    TEXT = "Text"
    LINK = "Link"
    IMAGE = "Image"
    SPOILER = "Spoiler"


@dataclass
class PostElement:
    """
    A piece of information recovered from a post body.

    `name` stays empty until the element is paired with a title,
    `href` is only meaningful for links and images.
    """
    type: ElementType
    name: str = ""
    text: str = ""
    content: list = field(default_factory=list)
    href: str = ""

    def is_empty(self):
        return not self.name.strip() and not self.text.strip() and not self.content

    def to_dict(self):
        data = {
            "type": self.type.value,
            "name": self.name,
            "text": self.text,
            "content": [child.to_dict() for child in self.content],
        }
        if self.type in (ElementType.LINK, ElementType.IMAGE):
            data["href"] = self.href
        return data


def create_empty_element():
    return PostElement(type=ElementType.EMPTY)


def get_element_by_name(elements, name) -> Optional[PostElement]:
    """Returns the first element named `name` (case-insensitive) or None."""
    wanted = name.upper()
    for element in elements:
        if element.name.upper() == wanted:
            return element
    return None

"""Front-matter metadata for generated posts."""

from __future__ import annotations

from yaml2md.config import DEFAULT_DATE, DEFAULT_TITLE
from yaml2md.schemas.results import FrontMatter
from yaml2md.schemas.tree import MappingNode, SequenceNode, TextNode, TreeNode


def extract_title(doc: TreeNode) -> str | None:
    """Return the text at ``info.title``, if present."""
    if not isinstance(doc, MappingNode):
        return None
    info = doc.get("info")
    if not isinstance(info, MappingNode):
        return None
    title = info.get("title")
    if isinstance(title, TextNode):
        return title.value
    return None


def extract_tags(doc: TreeNode) -> list[str] | None:
    """Return the text items of the ``tags`` sequence, if present.

    Items that are not text are skipped, so a sequence without any text
    items yields an empty list rather than None.
    """
    if not isinstance(doc, MappingNode):
        return None
    tags = doc.get("tags")
    if not isinstance(tags, SequenceNode):
        return None
    return [tag.value for tag in tags.items if isinstance(tag, TextNode)]


def build_front_matter(front_matter: FrontMatter) -> str:
    """Serialize front matter as a ``---`` delimited block followed by a blank line."""
    title = front_matter.title if front_matter.title is not None else DEFAULT_TITLE
    date = front_matter.date if front_matter.date is not None else DEFAULT_DATE
    lines = ["---", f"title: {title}"]
    if front_matter.tags is not None:
        lines.append("tags:")
        lines.extend(f"  - {tag}" for tag in front_matter.tags)
    lines.append(f"date: {date}")
    lines.append("---")
    return "\n".join(lines) + "\n\n"

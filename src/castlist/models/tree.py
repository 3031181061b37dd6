"""Media hierarchy tree."""

from __future__ import annotations

import weakref
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from castlist.models.media import ImageRef, MediaDescriptor


class TreeNode:
    """A category or a leaf media entry in the media hierarchy.

    Parents own their children. The parent link is a weak reference and
    only serves upward traversal, so dropping the root frees the tree.

    Attributes:
        title: Display title (None for the root).
        image: Poster or thumbnail reference.
        media: Playable descriptor, set on leaves only.
        children: Ordered child nodes.
    """

    __slots__ = ("title", "image", "media", "children", "_parent", "__weakref__")

    def __init__(
        self,
        title: str | None = None,
        image: ImageRef | None = None,
        media: MediaDescriptor | None = None,
    ) -> None:
        self.title = title
        self.image = image
        self.media = media
        self.children: list[TreeNode] = []
        self._parent: weakref.ref[TreeNode] | None = None

    @classmethod
    def for_media(cls, media: MediaDescriptor) -> TreeNode:
        """Create a leaf node titled and illustrated from its descriptor."""
        return cls(title=media.metadata.title, image=media.thumbnail, media=media)

    @property
    def parent(self) -> TreeNode | None:
        """Parent node, or None for the root (or a detached node)."""
        return self._parent() if self._parent is not None else None

    @property
    def is_root(self) -> bool:
        return self._parent is None

    @property
    def is_leaf(self) -> bool:
        return self.media is not None

    def add_child(self, child: TreeNode) -> TreeNode:
        """Append a child and point it back at this node.

        Raises:
            ValueError: If the child already has a parent.
        """
        if child.parent is not None:
            raise ValueError("node already has a parent")
        child._parent = weakref.ref(self)
        self.children.append(child)
        return child

    def walk(self) -> Iterator[TreeNode]:
        """Yield this node and its descendants depth-first, in order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def to_dict(self) -> dict[str, Any]:
        """Structural dump of the subtree, for comparison and debugging."""
        return {
            "title": self.title,
            "image": self.image.model_dump() if self.image else None,
            "media": self.media.model_dump(mode="json") if self.media else None,
            "children": [child.to_dict() for child in self.children],
        }

    def __len__(self) -> int:
        return len(self.children)

    def __repr__(self) -> str:
        kind = "leaf" if self.is_leaf else "group"
        return f"TreeNode({kind}, title={self.title!r}, children={len(self.children)})"


@dataclass
class MediaTree:
    """Result of decoding a media list document.

    Attributes:
        root: Root group holding the decoded items.
        title: Display name of the category the items came from.
    """

    root: TreeNode = field(default_factory=TreeNode)
    title: str | None = None

    @property
    def items(self) -> list[MediaDescriptor]:
        """Descriptors of all leaves, in tree order."""
        return [node.media for node in self.root.walk() if node.media is not None]

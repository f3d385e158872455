"""DAG node handles as seen by this library (structured and raw leaf nodes).

Hashing, persistence and link resolution belong to the DAG layer; these types
only carry what the codec reads: the payload bytes and the ordered child links
with their declared sizes.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Link:
    """
    Reference from a structured node to one child.
    """
    name: str
    size: int
    cid: Optional[bytes] = None


@dataclass
class ProtoNode:
    """
    Structured node: an encoded UnixFS payload plus ordered child links.

    The link list is parallel to the payload's block size list; whoever adds
    or removes a link must add or remove the matching block size.
    """
    data: bytes = b""
    links: List[Link] = field(default_factory=list)

    def add_link(self, link: Link) -> None:
        """Append a child link."""
        self.links.append(link)

    def remove_link(self, index: int) -> Link:
        """
        Remove and return the child link at ``index``.

        Raises:
            IndexError: If index is out of range
        """
        return self.links.pop(index)


@dataclass(frozen=True)
class RawNode:
    """
    Raw leaf node: file bytes stored verbatim, no payload encoding.
    """
    raw_data: bytes


def node_with_data(data: bytes) -> ProtoNode:
    """Create a structured node with the given payload and no links."""
    return ProtoNode(data=data)

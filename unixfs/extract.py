"""Recover file data or an FSNode from DAG node handles and raw payloads."""

from unixfs import protocol
from unixfs.constants import PAYLOAD_KINDS
from unixfs.dag import ProtoNode, RawNode
from unixfs.exceptions import NotStructuredNodeError, UnexpectedNodePlacementError, UnrecognizedTypeError
from unixfs.fsnode import FSNode
from unixfs.logging_config import get_logger

logger = get_logger(__name__)


def read_unixfs_node_data(node) -> bytes:
    """
    Extract the file data carried by a leaf position node.

    Raw nodes are accepted because they are used as leaves that hold nothing
    but file data. For structured nodes, Raw-kind payloads are the normal
    leaves, but File-kind payloads have long been written for leaves as well,
    so both are accepted.

    Args:
        node: ProtoNode or RawNode from the DAG layer

    Returns:
        The file bytes stored in the node

    Raises:
        MalformedFormatError: If a structured node's payload does not decode
        UnexpectedNodePlacementError: If the payload is of any other kind
        UnrecognizedTypeError: If the node is neither ProtoNode nor RawNode
    """
    if isinstance(node, ProtoNode):
        fsnode = FSNode.from_bytes(node.data)
        kind = fsnode.type()
        if kind in PAYLOAD_KINDS:
            return fsnode.data()
        logger.debug("Found %s node where file data was expected", kind.name)
        raise UnexpectedNodePlacementError(kind)

    if isinstance(node, RawNode):
        return node.raw_data

    raise UnrecognizedTypeError(f"unrecognized node type: {type(node).__name__}")


def extract_fsnode(node) -> FSNode:
    """
    Decode the FSNode carried by a structured node.

    Args:
        node: DAG node handle, expected to be a ProtoNode

    Returns:
        Decoded FSNode

    Raises:
        NotStructuredNodeError: If node is not a ProtoNode
        MalformedFormatError: If the payload does not decode
    """
    if not isinstance(node, ProtoNode):
        raise NotStructuredNodeError("expected a ProtoNode as internal node")
    return FSNode.from_bytes(node.data)


def data_size(payload: bytes) -> int:
    """
    Size of the content described by an encoded payload.

    Raises:
        NoSizeDefinedError: For directory kinds
    """
    return FSNode.from_bytes(payload).file_size()


def unwrap_data(payload: bytes) -> bytes:
    """Embedded bytes of an encoded payload, whatever its kind."""
    return protocol.decode(payload).Data

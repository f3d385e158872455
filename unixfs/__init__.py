"""UnixFS node format: payload codec, FSNode, metadata and node dispatch."""

from unixfs.constants import DataKind
from unixfs.exceptions import (
    UnixFSException,
    MalformedFormatError,
    MissingRequiredFieldError,
    UnrecognizedTypeError,
    NotStructuredNodeError,
    UnexpectedNodePlacementError,
    NoSizeDefinedError,
    IncorrectNodeTypeError,
    BlockIndexError,
)
from unixfs.types import ModTime
from unixfs.fsnode import FSNode
from unixfs.metadata import Metadata, metadata_from_bytes, bytes_for_metadata
from unixfs.dag import Link, ProtoNode, RawNode, node_with_data
from unixfs.extract import read_unixfs_node_data, extract_fsnode, data_size, unwrap_data
from unixfs.builders import (
    file_pb_data,
    file_pb_data_with_stat,
    folder_pb_data,
    folder_pb_data_with_stat,
    wrap_data,
    symlink_data,
    hamt_shard_data,
    empty_dir_node,
    empty_dir_node_with_stat,
    empty_file_node,
)

__all__ = [
    "DataKind",
    "UnixFSException",
    "MalformedFormatError",
    "MissingRequiredFieldError",
    "UnrecognizedTypeError",
    "NotStructuredNodeError",
    "UnexpectedNodePlacementError",
    "NoSizeDefinedError",
    "IncorrectNodeTypeError",
    "BlockIndexError",
    "ModTime",
    "FSNode",
    "Metadata",
    "metadata_from_bytes",
    "bytes_for_metadata",
    "Link",
    "ProtoNode",
    "RawNode",
    "node_with_data",
    "read_unixfs_node_data",
    "extract_fsnode",
    "data_size",
    "unwrap_data",
    "file_pb_data",
    "file_pb_data_with_stat",
    "folder_pb_data",
    "folder_pb_data_with_stat",
    "wrap_data",
    "symlink_data",
    "hamt_shard_data",
    "empty_dir_node",
    "empty_dir_node_with_stat",
    "empty_file_node",
]

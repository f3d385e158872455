"""Unit tests for node dispatch and extraction."""

import pytest

from unixfs.builders import (
    empty_dir_node,
    empty_file_node,
    file_pb_data,
    folder_pb_data,
    hamt_shard_data,
    symlink_data,
    wrap_data,
)
from unixfs.constants import DataKind
from unixfs.dag import Link, ProtoNode, RawNode
from unixfs.exceptions import (
    MalformedFormatError,
    NoSizeDefinedError,
    NotStructuredNodeError,
    UnexpectedNodePlacementError,
    UnrecognizedTypeError,
)
from unixfs.extract import data_size, extract_fsnode, read_unixfs_node_data, unwrap_data
from unixfs.fsnode import FSNode


class TestReadUnixFSNodeData:
    """Test reading file data from leaf-position nodes."""

    def test_raw_node_returned_verbatim(self):
        payload = b"\x08\x01 not decoded"

        assert read_unixfs_node_data(RawNode(raw_data=payload)) == payload

    def test_raw_kind_payload(self):
        node = ProtoNode(data=wrap_data(b"hello"))

        assert read_unixfs_node_data(node) == b"hello"

    def test_file_kind_payload(self):
        node = ProtoNode(data=file_pb_data(b"abc", 3))

        assert read_unixfs_node_data(node) == b"abc"

    @pytest.mark.parametrize("payload,kind", [
        (folder_pb_data(), DataKind.Directory),
        (symlink_data("target"), DataKind.Symlink),
        (hamt_shard_data(b"", 256, 34), DataKind.HAMTShard),
    ])
    def test_other_kinds_are_unexpected(self, payload, kind):
        with pytest.raises(UnexpectedNodePlacementError) as exc_info:
            read_unixfs_node_data(ProtoNode(data=payload))

        assert exc_info.value.kind == kind
        assert kind.name in str(exc_info.value)

    def test_malformed_payload(self):
        with pytest.raises(MalformedFormatError):
            read_unixfs_node_data(ProtoNode(data=b"\x08"))

    def test_unknown_node_handle(self):
        with pytest.raises(UnrecognizedTypeError):
            read_unixfs_node_data(object())


class TestExtractFSNode:
    """Test extracting FSNode from structured nodes."""

    def test_extract_from_proto_node(self):
        fsnode = extract_fsnode(empty_file_node())

        assert fsnode.type() == DataKind.File
        assert fsnode.file_size() == 0

    def test_extract_from_raw_node(self):
        with pytest.raises(NotStructuredNodeError):
            extract_fsnode(RawNode(raw_data=b"abc"))

    def test_extract_propagates_decode_errors(self):
        with pytest.raises(MalformedFormatError):
            extract_fsnode(ProtoNode(data=b"\x08\x02\x12\x05ab"))

    def test_extract_directory(self):
        assert extract_fsnode(empty_dir_node()).is_dir()


class TestPayloadHelpers:
    """Test size and data helpers over encoded payloads."""

    def test_data_size_of_file(self):
        assert data_size(file_pb_data(b"ab", 1000)) == 1000

    def test_data_size_of_symlink(self):
        assert data_size(symlink_data("abc")) == 3

    def test_data_size_of_directory(self):
        with pytest.raises(NoSizeDefinedError):
            data_size(folder_pb_data())

    def test_unwrap_data(self):
        assert unwrap_data(wrap_data(b"payload")) == b"payload"
        assert unwrap_data(folder_pb_data()) == b""


class TestLinkParity:
    """Test keeping links and block sizes in step."""

    def test_links_and_block_sizes_move_together(self):
        fsnode = FSNode(DataKind.File)
        node = ProtoNode()

        for i, size in enumerate((100, 200, 300)):
            node.add_link(Link(name=f"chunk{i}", size=size))
            fsnode.add_block_size(size)

        node.remove_link(1)
        fsnode.remove_block_size(1)
        node.data = fsnode.to_bytes()

        decoded = extract_fsnode(node)
        assert decoded.num_children() == len(node.links)
        assert decoded.block_sizes() == [link.size for link in node.links]
        assert decoded.file_size() == 400

"""Shared pytest fixtures for all tests."""

import pytest

from unixfs import DataKind, FSNode, ModTime


@pytest.fixture
def file_node():
    """
    Create a fresh File node.

    Returns:
        FSNode of File kind with no data and no children
    """
    return FSNode(DataKind.File)


@pytest.fixture
def populated_file_node():
    """
    Create a File node with two children and embedded data.

    Returns:
        FSNode with block sizes [10, 20] and data b'\\x01\\x02\\x03'
    """
    node = FSNode(DataKind.File)
    node.add_block_size(10)
    node.add_block_size(20)
    node.set_data(bytes([1, 2, 3]))
    return node


@pytest.fixture
def sample_mtime():
    """
    Create a modification time with a nanosecond fraction.

    Returns:
        ModTime instance
    """
    return ModTime(seconds=1_700_000_000, nanos=123_456_789)

"""Ready-made payloads and nodes for the common cases.

Each builder writes exactly the fields the historical helpers wrote, so the
resulting bytes (and therefore content addresses) match theirs.
"""

from datetime import datetime
from typing import Optional, Union

from unixfs import protocol
from unixfs.constants import PERMISSION_BITS, DataKind
from unixfs.dag import ProtoNode, node_with_data
from unixfs.types import ModTime


def _new_data(kind: DataKind):
    return protocol.Data(Type=int(kind))


def _add_stat(pbdata, mode: int, mtime: Optional[Union[ModTime, datetime]]) -> None:
    perms = mode & PERMISSION_BITS
    if perms:
        pbdata.mode = perms
    if mtime is not None:
        if isinstance(mtime, datetime):
            mtime = ModTime.from_datetime(mtime)
        pbdata.mtime.CopyFrom(protocol.timestamp(mtime))


def file_pb_data(data: Optional[bytes], total_size: int) -> bytes:
    """
    Payload for a File node.

    Args:
        data: Embedded bytes, or None for a node whose content is all in children
        total_size: Declared filesize, stored as given

    Returns:
        Encoded payload
    """
    pbdata = _new_data(DataKind.File)
    if data is not None:
        pbdata.Data = data
    pbdata.filesize = total_size
    return protocol.encode(pbdata)


def file_pb_data_with_stat(
    data: Optional[bytes],
    total_size: int,
    mode: int = 0,
    mtime: Optional[Union[ModTime, datetime]] = None
) -> bytes:
    """
    Payload for a File node that also carries permissions and mtime.

    Args:
        data: Embedded bytes, or None
        total_size: Declared filesize
        mode: Permission bits (0 stores none)
        mtime: Modification time (None stores none)

    Returns:
        Encoded payload
    """
    pbdata = _new_data(DataKind.File)
    if data is not None:
        pbdata.Data = data
    pbdata.filesize = total_size
    _add_stat(pbdata, mode, mtime)
    return protocol.encode(pbdata)


def folder_pb_data() -> bytes:
    """Payload for an empty Directory node."""
    return protocol.encode(_new_data(DataKind.Directory))


def folder_pb_data_with_stat(mode: int = 0, mtime: Optional[Union[ModTime, datetime]] = None) -> bytes:
    """Payload for an empty Directory node with permissions and mtime."""
    pbdata = _new_data(DataKind.Directory)
    _add_stat(pbdata, mode, mtime)
    return protocol.encode(pbdata)


def wrap_data(data: bytes) -> bytes:
    """
    Payload for a Raw leaf holding ``data``, with filesize set to its length.
    """
    pbdata = _new_data(DataKind.Raw)
    pbdata.Data = data
    pbdata.filesize = len(data)
    return protocol.encode(pbdata)


def symlink_data(path: str) -> bytes:
    """
    Payload for a Symlink node pointing at ``path``.

    Args:
        path: Link target, stored UTF-8 encoded

    Returns:
        Encoded payload
    """
    pbdata = _new_data(DataKind.Symlink)
    pbdata.Data = path.encode('utf-8')
    return protocol.encode(pbdata)


def hamt_shard_data(data: Optional[bytes], fanout: int, hash_type: int) -> bytes:
    """
    Payload for a HAMTShard node.

    Args:
        data: Shard bitfield bytes, or None to leave the field out
        fanout: Number of buckets per shard
        hash_type: Multihash code of the hash function used for keys

    Returns:
        Encoded payload
    """
    pbdata = _new_data(DataKind.HAMTShard)
    pbdata.hashType = hash_type
    if data is not None:
        pbdata.Data = data
    pbdata.fanout = fanout
    return protocol.encode(pbdata)


def empty_dir_node() -> ProtoNode:
    """Structured node for an empty directory."""
    return node_with_data(folder_pb_data())


def empty_dir_node_with_stat(mode: int = 0, mtime: Optional[Union[ModTime, datetime]] = None) -> ProtoNode:
    """Structured node for an empty directory with permissions and mtime."""
    return node_with_data(folder_pb_data_with_stat(mode, mtime))


def empty_file_node() -> ProtoNode:
    """Structured node for an empty file."""
    return node_with_data(file_pb_data(None, 0))

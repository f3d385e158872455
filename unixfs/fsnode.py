"""FSNode: invariant-preserving view over a single node payload."""

import stat
from datetime import datetime
from typing import List, Optional, Union

from unixfs import protocol
from unixfs.constants import (
    DIRECTORY_KINDS,
    EXTENDED_MODE_BITS,
    EXTENDED_MODE_SHIFT,
    MAX_MTIME_NANOS,
    MIN_MTIME_NANOS,
    PAYLOAD_KINDS,
    PERMISSION_BITS,
    UINT32_MASK,
    UINT64_LIMIT,
    DataKind,
)
from unixfs.exceptions import BlockIndexError, NoSizeDefinedError, UnrecognizedTypeError
from unixfs.logging_config import get_logger
from unixfs.types import ModTime

logger = get_logger(__name__)


class FSNode:
    """
    A filesystem object (file, directory, symlink, shard, ...) backed by one
    ``Data`` message.

    The node exclusively owns its message. All mutation goes through the
    methods below so that, for File nodes, ``filesize`` always equals the
    embedded data length plus the sum of the child block sizes. The block
    size list is parallel to the link list of the owning DAG node; keeping
    the two in step is the caller's job.

    Construct with ``FSNode(kind)`` (producer path) or ``FSNode.from_bytes()``
    (consumer path). ``kind`` is fixed for the life of the node.
    """

    def __init__(self, kind: DataKind):
        """
        Create an empty node of the given kind.

        ``filesize`` is initialized to an explicit 0 rather than left absent,
        so that fresh leaves encode the same way older writers encoded them.

        Args:
            kind: Node kind, stored in the required ``Type`` field
        """
        self._format = protocol.Data()
        self._format.Type = int(DataKind(kind))
        self.update_filesize(0)

    @classmethod
    def new(cls, kind: DataKind) -> 'FSNode':
        """Create an empty node of the given kind."""
        return cls(kind)

    @classmethod
    def from_bytes(cls, payload: bytes) -> 'FSNode':
        """
        Decode a node payload.

        Args:
            payload: Encoded node payload

        Returns:
            FSNode wrapping the decoded message

        Raises:
            MalformedFormatError: If the bytes are not a valid encoding
            MissingRequiredFieldError: If the ``Type`` field is absent
        """
        return cls._from_message(protocol.decode(payload))

    @classmethod
    def _from_message(cls, pbdata) -> 'FSNode':
        node = cls.__new__(cls)
        node._format = pbdata
        return node

    def to_bytes(self) -> bytes:
        """Encode this node as a payload for the DAG layer."""
        return protocol.encode(self._format)

    def copy(self) -> 'FSNode':
        """Return an independent copy that can be mutated separately."""
        pbdata = protocol.Data()
        pbdata.CopyFrom(self._format)
        return FSNode._from_message(pbdata)

    def type(self) -> DataKind:
        """Node kind."""
        return DataKind(self._format.Type)

    def is_dir(self) -> bool:
        """True for Directory and HAMTShard nodes."""
        return self._format.Type in DIRECTORY_KINDS

    def data(self) -> bytes:
        """Embedded payload bytes (empty when absent)."""
        return self._format.Data

    def set_data(self, data: Optional[bytes]) -> None:
        """
        Replace the embedded payload, adjusting ``filesize`` by the change in
        length. ``None`` removes the field.

        Args:
            data: New embedded bytes (any bytes-like value), or None
        """
        old_length = len(self._format.Data)
        if data is None:
            self._format.ClearField('Data')
        else:
            self._format.Data = bytes(memoryview(data))
        self.update_filesize(len(self._format.Data) - old_length)

    def update_filesize(self, filesize_diff: int) -> None:
        """
        Shift ``filesize`` by a signed difference.

        The field is a uint64, so the arithmetic wraps modulo 2**64 the way
        the wire type does.

        Args:
            filesize_diff: Amount to add (negative to subtract)
        """
        self._format.filesize = (self._format.filesize + filesize_diff) % UINT64_LIMIT

    def hash_type(self) -> Optional[int]:
        """HAMT hash function id, or None when absent."""
        if self._format.HasField('hashType'):
            return self._format.hashType
        return None

    def fanout(self) -> Optional[int]:
        """HAMT fanout, or None when absent."""
        if self._format.HasField('fanout'):
            return self._format.fanout
        return None

    def add_block_size(self, size: int) -> None:
        """
        Record the size of a newly appended child link.

        Args:
            size: Declared size of the child, a uint64
        """
        self._format.blocksizes.append(size)
        self.update_filesize(size)

    def remove_block_size(self, index: int) -> None:
        """
        Drop the size of the child at ``index``, keeping the rest in order.

        Args:
            index: Position in the block size list

        Raises:
            BlockIndexError: If index is outside [0, num_children())
        """
        self._check_index(index)
        size = self._format.blocksizes[index]
        del self._format.blocksizes[index]
        self.update_filesize(-size)

    def block_size(self, index: int) -> int:
        """
        Size of the child at ``index``.

        Raises:
            BlockIndexError: If index is outside [0, num_children())
        """
        self._check_index(index)
        return self._format.blocksizes[index]

    def block_sizes(self) -> List[int]:
        """Copy of the per-child size list."""
        return list(self._format.blocksizes)

    def remove_all_block_sizes(self) -> None:
        """Forget every child; ``filesize`` falls back to the embedded data length."""
        self._format.ClearField('blocksizes')
        self._format.filesize = len(self._format.Data)

    def num_children(self) -> int:
        return len(self._format.blocksizes)

    def file_size(self) -> int:
        """
        Logical size of the content this node represents.

        Returns:
            Stored filesize for File and Raw nodes, target length for Symlinks

        Raises:
            NoSizeDefinedError: For Directory and HAMTShard nodes
            UnrecognizedTypeError: For any other kind
        """
        kind = self._format.Type
        if kind in DIRECTORY_KINDS:
            raise NoSizeDefinedError("can't get data size of directory")
        if kind in PAYLOAD_KINDS:
            return self._format.filesize
        if kind == DataKind.Symlink:
            return len(self._format.Data)
        raise UnrecognizedTypeError(f"unrecognized node data type: {kind}")

    def mode(self) -> int:
        """Stored permission bits (low 12 bits), 0 when none are stored."""
        return self._format.mode & PERMISSION_BITS

    def set_mode(self, mode: int) -> None:
        """
        Store permission bits, keeping any extended bits.

        Only the low 12 bits are used, so an ``st_mode`` value can be passed
        as-is. When the result has neither permission nor extended bits the
        field is removed: an absent mode means "no stat info", which is how
        nodes written before mode support read back.

        Args:
            mode: Permission bits (setuid/setgid/sticky and rwx triplets)
        """
        new_mode = (self._format.mode & EXTENDED_MODE_BITS) | (mode & PERMISSION_BITS)
        self._store_mode(new_mode)

    def stat_mode(self) -> int:
        """
        Permission bits combined with the ``stat`` file type bits for this
        node's kind, or 0 when no permissions are stored.
        """
        perms = self.mode()
        if perms == 0:
            return 0
        if self.is_dir():
            return perms | stat.S_IFDIR
        if self._format.Type == DataKind.Symlink:
            return perms | stat.S_IFLNK
        return perms | stat.S_IFREG

    def extended_mode(self) -> int:
        """The 20 extended mode bits stored above the permission bits."""
        return (self._format.mode & EXTENDED_MODE_BITS) >> EXTENDED_MODE_SHIFT

    def set_extended_mode(self, mode: int) -> None:
        """
        Store the 20 extended mode bits; bits beyond the first 20 of ``mode``
        are ignored and permission bits are kept.

        Args:
            mode: Extended mode value
        """
        new_mode = ((mode << EXTENDED_MODE_SHIFT) & UINT32_MASK) | (self._format.mode & PERMISSION_BITS)
        self._store_mode(new_mode)

    def mod_time(self) -> Optional[ModTime]:
        """
        Stored modification time, or None.

        A stored nanosecond fraction outside [1, 999999999] was written by a
        broken encoder; such timestamps read as absent rather than failing.
        """
        if not self._format.HasField('mtime'):
            return None
        ts = self._format.mtime
        if not ts.HasField('FractionalNanoseconds'):
            return ModTime(seconds=ts.Seconds)

        nanos = ts.FractionalNanoseconds
        if nanos < MIN_MTIME_NANOS or nanos > MAX_MTIME_NANOS:
            logger.debug("Ignoring mtime with out-of-range nanoseconds: %d", nanos)
            return None
        return ModTime(seconds=ts.Seconds, nanos=nanos)

    def set_mod_time(self, mtime: Optional[Union[ModTime, datetime]]) -> None:
        """
        Store a modification time; None removes it.

        Args:
            mtime: ModTime, datetime (naive means UTC) or None

        Raises:
            ValueError: If the seconds do not fit an int64; the node is unchanged
        """
        if mtime is None:
            self._format.ClearField('mtime')
            return
        if isinstance(mtime, datetime):
            mtime = ModTime.from_datetime(mtime)

        self._format.mtime.CopyFrom(protocol.timestamp(mtime))

    def _store_mode(self, new_mode: int) -> None:
        if new_mode == 0:
            self._format.ClearField('mode')
        else:
            self._format.mode = new_mode

    def _check_index(self, index: int) -> None:
        count = len(self._format.blocksizes)
        if not 0 <= index < count:
            raise BlockIndexError(f"block index {index} out of range for {count} children")

    def __eq__(self, other):
        if not isinstance(other, FSNode):
            return NotImplemented
        return self._format == other._format

    __hash__ = None

    def __repr__(self):
        return (
            f"FSNode(type={self.type().name}, filesize={self._format.filesize}, "
            f"children={self.num_children()})"
        )

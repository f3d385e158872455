"""Project-wide constants (node kinds, mode masks, timestamp bounds)."""

from enum import IntEnum


class DataKind(IntEnum):
    """
    Node kind carried in the required ``Type`` field of every payload.

    Values are the wire enum numbers and must never change.
    """
    Raw = 0
    Directory = 1
    File = 2
    Metadata = 3
    Symlink = 4
    HAMTShard = 5


DIRECTORY_KINDS = (DataKind.Directory, DataKind.HAMTShard)
PAYLOAD_KINDS = (DataKind.File, DataKind.Raw)

PERMISSION_BITS: int = 0xFFF  # rwx for user/group/other plus setuid/setgid/sticky
EXTENDED_MODE_BITS: int = 0xFFFFF000
EXTENDED_MODE_SHIFT: int = 12
UINT32_MASK: int = 0xFFFFFFFF
UINT64_LIMIT: int = 1 << 64

MIN_MTIME_NANOS: int = 1
MAX_MTIME_NANOS: int = 999_999_999
NANOS_PER_SECOND: int = 1_000_000_000

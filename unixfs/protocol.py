"""Wire schema message definitions (proto2 ``Data``, ``Metadata``, ``IPFSTimestamp``).

The messages are built from a descriptor at import time so that field numbers
and wire types stay identical to the historical ``unixfs.proto``:

    message Data {
      enum DataType { Raw = 0; Directory = 1; File = 2; Metadata = 3; Symlink = 4; HAMTShard = 5; }
      required DataType Type = 1;
      optional bytes Data = 2;
      optional uint64 filesize = 3;
      repeated uint64 blocksizes = 4;
      optional uint64 hashType = 5;
      optional uint64 fanout = 6;
      optional uint32 mode = 7;
      optional IPFSTimestamp mtime = 8;
    }

    message Metadata { optional string MimeType = 1; }

    message IPFSTimestamp {
      required int64 Seconds = 1;
      optional fixed32 FractionalNanoseconds = 2;
    }
"""

from google.protobuf import descriptor_pb2, descriptor_pool, message, message_factory

from unixfs.constants import DataKind
from unixfs.exceptions import MalformedFormatError, MissingRequiredFieldError
from unixfs.logging_config import get_logger
from unixfs.types import ModTime

logger = get_logger(__name__)

PROTO_PACKAGE = 'unixfs.pb'

_Field = descriptor_pb2.FieldDescriptorProto


def _build_file_descriptor() -> descriptor_pb2.FileDescriptorProto:
    """
    Describe the node schema as a proto2 file descriptor.

    Returns:
        FileDescriptorProto ready to be registered in a descriptor pool
    """
    fdp = descriptor_pb2.FileDescriptorProto(
        name='unixfs.proto',
        package=PROTO_PACKAGE,
        syntax='proto2',
    )

    timestamp = fdp.message_type.add(name='IPFSTimestamp')
    timestamp.field.add(name='Seconds', number=1, label=_Field.LABEL_REQUIRED, type=_Field.TYPE_INT64)
    timestamp.field.add(
        name='FractionalNanoseconds', number=2, label=_Field.LABEL_OPTIONAL, type=_Field.TYPE_FIXED32
    )

    data = fdp.message_type.add(name='Data')
    data_type = data.enum_type.add(name='DataType')
    for kind in DataKind:
        data_type.value.add(name=kind.name, number=kind.value)

    data.field.add(
        name='Type', number=1, label=_Field.LABEL_REQUIRED, type=_Field.TYPE_ENUM,
        type_name=f'.{PROTO_PACKAGE}.Data.DataType',
    )
    data.field.add(name='Data', number=2, label=_Field.LABEL_OPTIONAL, type=_Field.TYPE_BYTES)
    data.field.add(name='filesize', number=3, label=_Field.LABEL_OPTIONAL, type=_Field.TYPE_UINT64)
    data.field.add(name='blocksizes', number=4, label=_Field.LABEL_REPEATED, type=_Field.TYPE_UINT64)
    data.field.add(name='hashType', number=5, label=_Field.LABEL_OPTIONAL, type=_Field.TYPE_UINT64)
    data.field.add(name='fanout', number=6, label=_Field.LABEL_OPTIONAL, type=_Field.TYPE_UINT64)
    data.field.add(name='mode', number=7, label=_Field.LABEL_OPTIONAL, type=_Field.TYPE_UINT32)
    data.field.add(
        name='mtime', number=8, label=_Field.LABEL_OPTIONAL, type=_Field.TYPE_MESSAGE,
        type_name=f'.{PROTO_PACKAGE}.IPFSTimestamp',
    )

    metadata = fdp.message_type.add(name='Metadata')
    metadata.field.add(name='MimeType', number=1, label=_Field.LABEL_OPTIONAL, type=_Field.TYPE_STRING)

    return fdp


_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(_build_file_descriptor().SerializeToString())

Data = message_factory.GetMessageClass(_pool.FindMessageTypeByName(f'{PROTO_PACKAGE}.Data'))
Metadata = message_factory.GetMessageClass(_pool.FindMessageTypeByName(f'{PROTO_PACKAGE}.Metadata'))
IPFSTimestamp = message_factory.GetMessageClass(_pool.FindMessageTypeByName(f'{PROTO_PACKAGE}.IPFSTimestamp'))


def decode(payload: bytes) -> Data:
    """
    Deserialize a node payload into a ``Data`` message.

    Args:
        payload: Encoded node payload

    Returns:
        Decoded Data message

    Raises:
        MalformedFormatError: If the bytes are not a valid encoding
        MissingRequiredFieldError: If ``Type`` (or ``mtime.Seconds``) is absent
    """
    pbdata = Data()
    try:
        pbdata.MergeFromString(bytes(payload))
    except message.DecodeError as e:
        logger.debug("Rejecting malformed payload %s: %s", payload, e)
        raise MalformedFormatError(f"malformed data in file format: {e}") from e

    if not pbdata.IsInitialized():
        missing = ', '.join(pbdata.FindInitializationErrors())
        logger.debug("Rejecting payload %s missing required fields: %s", payload, missing)
        raise MissingRequiredFieldError(f"missing required fields: {missing}")

    return pbdata


def encode(pbdata: Data) -> bytes:
    """
    Serialize a ``Data`` message.

    Every instance produced through FSNode or the builders has ``Type`` set,
    so a failure here is a programming error and is not converted into a
    library exception.

    Args:
        pbdata: Data message with ``Type`` set

    Returns:
        Encoded node payload
    """
    assert pbdata.HasField('Type'), "Data.Type must be set before encoding"
    return pbdata.SerializeToString()


def from_bytes(payload: bytes) -> Data:
    """Decode a payload into the raw message; prefer FSNode.from_bytes."""
    return decode(payload)


def timestamp(mtime: ModTime) -> IPFSTimestamp:
    """
    Build a standalone ``IPFSTimestamp``, omitting a zero nanosecond fraction.

    Args:
        mtime: Modification time to convert

    Returns:
        IPFSTimestamp message with ``Seconds`` set

    Raises:
        ValueError: If seconds do not fit an int64
    """
    if mtime.nanos > 0:
        return IPFSTimestamp(Seconds=mtime.seconds, FractionalNanoseconds=mtime.nanos)
    return IPFSTimestamp(Seconds=mtime.seconds)


def decode_metadata(payload: bytes) -> Metadata:
    """
    Deserialize the inner ``Metadata`` message of a Metadata-kind node.

    Args:
        payload: Encoded Metadata message

    Returns:
        Decoded Metadata message

    Raises:
        MalformedFormatError: If the bytes are not a valid encoding
    """
    md = Metadata()
    try:
        md.MergeFromString(bytes(payload))
    except message.DecodeError as e:
        logger.debug("Rejecting malformed metadata %s: %s", payload, e)
        raise MalformedFormatError(f"malformed metadata: {e}") from e
    return md


def encode_metadata(md: Metadata) -> bytes:
    """Serialize a ``Metadata`` message."""
    return md.SerializeToString()

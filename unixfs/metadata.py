"""Metadata codec: MIME type information wrapped inside a Metadata-kind node."""

from pydantic import BaseModel, Field, ValidationError

from unixfs import protocol
from unixfs.constants import UINT64_LIMIT, DataKind
from unixfs.exceptions import IncorrectNodeTypeError, MalformedFormatError


class Metadata(BaseModel):
    """
    Additional information stored next to a file.

    ``size`` is written as the wrapping node's ``filesize`` and is supplied by
    the caller; it is never derived from, or checked against, the wrapped
    content, and ``from_bytes`` does not read it back.
    """
    mime_type: str = ""
    size: int = Field(default=0, ge=0, lt=UINT64_LIMIT)

    @classmethod
    def from_bytes(cls, payload: bytes) -> 'Metadata':
        """
        Decode a payload produced by ``to_wrapped_bytes``.

        Args:
            payload: Encoded Metadata-kind node

        Returns:
            Metadata carrying the MIME type (``size`` stays 0)

        Raises:
            MalformedFormatError: If either encoding layer is invalid
            MissingRequiredFieldError: If the outer ``Type`` is absent
            IncorrectNodeTypeError: If the node is not of Metadata kind
        """
        pbdata = protocol.decode(payload)
        if pbdata.Type != DataKind.Metadata:
            raise IncorrectNodeTypeError(
                f"incorrect node type: expected Metadata, got {DataKind(pbdata.Type).name}"
            )

        pbmeta = protocol.decode_metadata(pbdata.Data)
        try:
            return cls(mime_type=pbmeta.MimeType)
        except (ValidationError, UnicodeDecodeError) as e:
            raise MalformedFormatError(f"metadata MIME type is not valid UTF-8: {e}") from e

    def to_bytes(self) -> bytes:
        """Encode the inner Metadata message only."""
        pbmeta = protocol.Metadata(MimeType=self.mime_type)
        return protocol.encode_metadata(pbmeta)

    def to_wrapped_bytes(self) -> bytes:
        """Encode as a Metadata-kind node with ``filesize`` set to ``size``."""
        pbdata = protocol.Data(
            Type=int(DataKind.Metadata),
            Data=self.to_bytes(),
            filesize=self.size,
        )
        return protocol.encode(pbdata)


def metadata_from_bytes(payload: bytes) -> Metadata:
    """Decode a Metadata-kind node payload. See ``Metadata.from_bytes``."""
    return Metadata.from_bytes(payload)


def bytes_for_metadata(metadata: Metadata) -> bytes:
    """Wrap metadata as a Metadata-kind node payload."""
    return metadata.to_wrapped_bytes()

"""Custom exception classes for UnixFS node decoding and manipulation."""


class UnixFSException(Exception):
    """
    Base exception class for all UnixFS-related errors.
    """
    pass


class MalformedFormatError(UnixFSException):
    """
    Raised when a payload is not a well-formed node encoding.
    """
    pass


class MissingRequiredFieldError(MalformedFormatError):
    """
    Raised when a decoded payload lacks a required field (such as ``Type``).
    """
    pass


class UnrecognizedTypeError(UnixFSException):
    """
    Raised when a node or node kind is not one this library understands.
    """
    pass


class NotStructuredNodeError(UnixFSException):
    """
    Raised when a structured (ProtoNode) DAG node was expected.
    """
    pass


class UnexpectedNodePlacementError(UnixFSException):
    """
    Raised when a node kind shows up where only file data was expected.
    """

    def __init__(self, kind):
        self.kind = kind
        super().__init__(f"found {kind.name} node in unexpected place")


class NoSizeDefinedError(UnixFSException):
    """
    Raised when asking for the size of a node kind that has none (directories).
    """
    pass


class IncorrectNodeTypeError(UnixFSException):
    """
    Raised when a payload decodes to a different node kind than requested.
    """
    pass


class BlockIndexError(UnixFSException, IndexError):
    """
    Raised when a block size index is outside the node's child list.
    """
    pass

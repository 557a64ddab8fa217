"""Custom exceptions for doxtree."""


class DoxtreeError(Exception):
    """Base exception for doxtree operations."""


class MalformedTreeError(DoxtreeError):
    """Hierarchy data is not a well-formed forest."""


class UnknownNodeReferenceError(DoxtreeError):
    """A link target or node path does not resolve."""


class FetchError(DoxtreeError):
    """Error while loading hierarchy data."""


class SourceNotFoundError(FetchError):
    """Hierarchy source does not exist."""

class TypegenError(Exception):
    """Base class for errors raised by typegen."""


class UnknownTypeSystemError(TypegenError):
    """Raised when an object does not belong to a known output dialect."""


class DescribeAttrError(TypegenError):
    """Raised when describe_attrs returns a selector that cannot be rendered."""

import tblib.pickling_support


@tblib.pickling_support.install
class RusticError(Exception):
    """Base class for the errors raised when a container is misused.

    It should not be raised directly, instead raise a subclass.
    """

    pass


@tblib.pickling_support.install
class EmptyValueError(RusticError, ValueError):
    """Raised when a value is extracted from a container that doesn't hold one.

    This is the case when unwrapping an absent option or a failed result.
    """

    pass


@tblib.pickling_support.install
class InvalidStateError(RusticError, RuntimeError):
    """Raised when an operation is not allowed for the current variant.

    For example, asking a successful result for its error.
    """

    pass


@tblib.pickling_support.install
class IndexOutOfRangeError(RusticError, IndexError):
    """Raised when a position falls outside a sequence."""

    pass

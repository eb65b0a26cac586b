"""Initialization tag types shared by the value types."""


class ZeroInitT:
    """Zero initialization tag type.

    Passing the ``ZeroInit`` instance to a constructor requests the zero
    value explicitly, same as calling the constructor without arguments.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return "ZeroInit"


ZeroInit = ZeroInitT()

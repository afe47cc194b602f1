from typing import Any


class ArgumentNoneError(TypeError):
    """Raised when a required argument is `None`.

    Args:
        argument (str): Name of the offending parameter.
    """

    argument: str

    def __init__(self, argument: str) -> None:
        super().__init__(f"argument `{argument}` must not be None")
        self.argument = argument


def check_not_none(**arguments: Any) -> None:
    """Raise `ArgumentNoneError` for the first argument that is `None`, in keyword order.

    Example:
    ```python
    >>> from allequal._core import check_not_none
    >>> check_not_none(source=[1], key=len)
    >>> check_not_none(source=[1], key=None)
    Traceback (most recent call last):
        ...
    allequal._core._errors.ArgumentNoneError: argument `key` must not be None

    ```
    """
    for name, value in arguments.items():
        if value is None:
            raise ArgumentNoneError(name)

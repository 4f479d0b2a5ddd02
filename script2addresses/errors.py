class MalformedEncoding(BaseException):
    """Error raised when a push-data length would read past the end of
        the script.
    """
    ...

class NoTemplateMatch(BaseException):
    """Error raised by a template attempt that does not fit the tokens."""
    ...

class InvalidInputType(BaseException):
    """Error raised when a script is neither bytes nor a hex string."""
    ...


def vert(condition: bool, message: str = '') -> None:
    """Replacement for assert preconditions. Raises ValueError with the
        given message if the condition check fails.
    """
    if condition:
        return
    raise ValueError(message)

def tert(condition: bool, message: str = '') -> None:
    """Replacement for assert preconditions. Raises TypeError with the
        given message if the condition check fails.
    """
    if condition:
        return
    raise TypeError(message)

def mert(condition: bool, message: str = '') -> None:
    """Replacement for assert preconditions. Raises MalformedEncoding
        with the given message if the condition check fails.
    """
    if condition:
        return
    raise MalformedEncoding(message)

def nert(condition: bool, message: str = '') -> None:
    """Replacement for assert preconditions. Raises NoTemplateMatch
        with the given message if the condition check fails.
    """
    if condition:
        return
    raise NoTemplateMatch(message)

def iert(condition: bool, message: str = '') -> None:
    """Replacement for assert preconditions. Raises InvalidInputType
        with the given message if the condition check fails.
    """
    if condition:
        return
    raise InvalidInputType(message)

"""
Shell-style splitting of command arguments.
"""

import shlex
from typing import List

from reqline.errors import UnclosedQuoteError


def split_arguments(text: str) -> List[str]:
    """
    Split argument text into tokens the way a POSIX shell would.

    Quotes group words into a single token and backslashes escape the next
    character. Comment characters have no special meaning.

    Raises:
        UnclosedQuoteError: if the text ends inside a quoted string or with a
            dangling backslash
    """
    try:
        return shlex.split(text.strip())
    except ValueError as e:
        raise UnclosedQuoteError(text, str(e)) from e

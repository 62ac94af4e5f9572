"""Title extraction from request paths.

The validator is the only sanitization boundary between the URL and the
file system: a title that reaches ``PageStore`` is always alphanumeric, so it
can never name a file outside the pages directory.
"""

import re

from textwiki.core.errors import InvalidTitleError

PATH_PATTERN = r"/(view|edit|save)/([A-Za-z0-9]+)"


class TitleValidator:
    """Allow-list check of request paths.

    The pattern is compiled once; the object holds no per-request state and can
    be shared by all handlers.
    """

    def __init__(self) -> None:
        self._path_re = re.compile(PATH_PATTERN)

    def extract(self, path: str) -> str:
        """Return the page title carried by a request path.

        The whole path must match ``/(view|edit|save)/<title>``.

        Args:
            path: Decoded request path, e.g. "/view/FrontPage"

        Returns:
            The title component

        Raises:
            InvalidTitleError: If the path does not match
        """
        match = self._path_re.fullmatch(path)
        if match is None:
            raise InvalidTitleError(path)
        return match.group(2)

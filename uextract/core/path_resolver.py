#!/usr/bin/env python3
"""
Resolution of the `--object` pattern into the identifiers to export.
"""

import re

from ..errors import InvalidPatternError
from .request import LITERAL, REGEX


class PathResolver:
    """Turns a user pattern into the list of object identifiers to process."""

    @staticmethod
    def compile_pattern(pattern):
        """
        Compile a regex pattern.

        Raises:
            InvalidPatternError: If the pattern does not compile
        """
        try:
            return re.compile(pattern)
        except re.error as e:
            raise InvalidPatternError(f"`--object` is not a valid regex: {e}", pattern=pattern) from e

    @classmethod
    def resolve(cls, pattern, mode, namespace):
        """
        Select the identifiers matched by a pattern.

        Args:
            pattern: Literal identifier or regular expression
            mode: 'literal' or 'regex'
            namespace: Iterable of every identifier known to the archive.
                Not consulted in literal mode.

        Returns:
            list: Matched identifiers, in namespace order for regex mode

        Raises:
            InvalidPatternError: If mode is regex and the pattern is invalid
            ValueError: If mode is unknown
        """
        if mode == LITERAL:
            return [pattern]
        if mode == REGEX:
            regex = cls.compile_pattern(pattern)
            # search, not fullmatch: a match anywhere in the identifier counts
            return [identifier for identifier in namespace if regex.search(identifier)]
        raise ValueError(f"Unknown match mode: {mode}")

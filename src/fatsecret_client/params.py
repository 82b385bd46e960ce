"""Request parameter sets and their OAuth1 canonical encoding."""

import urllib.parse
from collections.abc import Iterator, Mapping
from typing import Any

from .exceptions import ParameterConflictError


def percent_encode(value: Any) -> str:
    """Percent-encode a value according to RFC 3986.

    Only unreserved characters (letters, digits, ``-``, ``.``, ``_``, ``~``)
    are left as-is. Spaces become ``%20`` and ``+`` becomes ``%2B``.

    Args:
        value: The value to encode. Non-strings are converted with ``str()``.

    Returns:
        Percent-encoded string.
    """
    return urllib.parse.quote(str(value), safe="")


class ParameterSet(Mapping[str, str]):
    """Mapping of request parameter names to string values.

    Keys are unique. Iteration follows insertion order; the canonical
    encoding is always sorted, so insertion order never affects the signature.
    """

    def __init__(self, params: Mapping[str, Any] | None = None) -> None:
        self._params: dict[str, str] = {}
        if params:
            self.merge(params)

    def __getitem__(self, key: str) -> str:
        return self._params[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._params)

    def __len__(self) -> int:
        return len(self._params)

    def __repr__(self) -> str:
        return f"ParameterSet({self._params!r})"

    def merge(self, params: Mapping[str, Any]) -> "ParameterSet":
        """Add parameters to the set.

        Args:
            params: Parameters to add. Values are converted with ``str()``.

        Returns:
            This parameter set, for chaining.

        Raises:
            ParameterConflictError: If a key is already present.
        """
        conflicts = sorted(set(params) & set(self._params))
        if conflicts:
            raise ParameterConflictError(
                f"Parameters already set: {', '.join(conflicts)}"
            )
        for key, value in params.items():
            self._params[key] = str(value)
        return self

    def encoded_pairs(self) -> list[tuple[str, str]]:
        """Percent-encode every pair and sort by key, then value."""
        return sorted(
            (percent_encode(key), percent_encode(value))
            for key, value in self._params.items()
        )

    def canonical_query(self) -> str:
        """Build the normalized parameter string used for signing.

        Returns:
            Sorted ``key=value`` pairs joined with ``&``.
        """
        return "&".join(f"{key}={value}" for key, value in self.encoded_pairs())

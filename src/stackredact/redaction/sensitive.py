"""Set of argument names whose following value gets masked."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence, Set

from stackredact.models.config import InvalidConfiguration

# Argument names redacted when the caller supplies none.
DEFAULT_SENSITIVE_ARGUMENT_NAMES: tuple[str, ...] = (
    "password",
    "passwd",
    "cc_number",
    "cc_exp",
    "ccv",
)


class SensitiveNameSet:
    """Read-only membership test over sensitive argument names.

    Matching is exact and case-sensitive. None is never sensitive.

    Args:
        names: Ordered sequence of names replacing the defaults. None
            selects DEFAULT_SENSITIVE_ARGUMENT_NAMES; an empty sequence
            masks nothing.

    Raises:
        InvalidConfiguration: If names is not a sequence of strings.
    """

    __slots__ = ("_names",)

    def __init__(self, names: Sequence[str] | None = None) -> None:
        if names is None:
            names = DEFAULT_SENSITIVE_ARGUMENT_NAMES
        elif isinstance(names, (str, bytes, Mapping)) or not isinstance(
            names, (Sequence, Set)
        ):
            raise InvalidConfiguration(
                "'sensitive_argument_names' must be a sequence of strings, "
                f"got {type(names).__name__}"
            )
        bad = [n for n in names if not isinstance(n, str)]
        if bad:
            raise InvalidConfiguration(
                "'sensitive_argument_names' must only contain strings, "
                f"got {bad[0]!r}"
            )
        self._names = frozenset(names)

    def is_sensitive(self, name: object) -> bool:
        return isinstance(name, str) and name in self._names

    __contains__ = is_sensitive

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._names))

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"SensitiveNameSet({sorted(self._names)!r})"

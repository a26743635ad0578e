"""The immutable configuration record consumed by the argument builder."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from llauncher.core.models import OptionSpec
from llauncher.core.options import OPTIONS, OPTIONS_BY_NAME


def _freeze(value: Any) -> Any:
    """Turn list values into tuples so the record cannot be mutated."""
    if isinstance(value, list):
        return tuple(value)
    return value


@dataclass(frozen=True, slots=True)
class ConfigRecord:
    """Typed option values keyed by semantic option name.

    Options that are not present read as their kind's zero value, which
    the argument builder treats as "not specified".  Explicitly storing
    a zero value is therefore the same as leaving the option out.

    Usage::

        record = ConfigRecord.of(model_path="/m.gguf", port=8080)
        record.get("port")     # 8080
        record.get("threads")  # 0
    """

    values: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        unknown = sorted(name for name in self.values if name not in OPTIONS_BY_NAME)
        if unknown:
            raise TypeError(f"unknown option(s): {', '.join(unknown)}")
        frozen = {name: _freeze(value) for name, value in self.values.items()}
        object.__setattr__(self, "values", MappingProxyType(frozen))

    @classmethod
    def of(cls, **values: Any) -> ConfigRecord:
        """Build a record from keyword arguments named after options."""
        return cls(values)

    def get(self, name: str) -> Any:
        """Return the value of option *name*, or its zero value if unset.

        Raises
        ------
        KeyError
            If *name* is not a known option.
        """
        return self.value_of(OPTIONS_BY_NAME[name])

    def value_of(self, spec: OptionSpec) -> Any:
        """Return the value stored for *spec*, or the zero value of its kind."""
        if spec.name in self.values:
            return self.values[spec.name]
        return spec.kind.zero

    def specified(self) -> Iterator[tuple[OptionSpec, Any]]:
        """Yield ``(spec, value)`` for every non-zero option in table order."""
        for spec in OPTIONS:
            value = self.value_of(spec)
            if value != spec.kind.zero:
                yield spec, value

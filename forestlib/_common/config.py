"""Configuration for forestlib walkers.

Walkers are configured with small dataclasses. Options can also be given as
plain mappings, which are validated and converted with ``from_value``.
"""

from dataclasses import dataclass, fields
from typing import Any, List, Mapping, Optional, Union


@dataclass(frozen=True)
class AsyncWalkerOptions:
    """Options for ``AsyncTreeWalker``.

    Attributes:
        save_children: Write every resolved children list back onto
            ``node.children``, so the caller can inspect or reuse the
            materialized tree afterwards. When False, resolved children
            only drive the traversal and are not retained.
    """

    save_children: bool = False

    def validate(self) -> List[str]:
        """Validate options for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        if not isinstance(self.save_children, bool):
            errors.append(
                f"save_children must be a bool, got {type(self.save_children).__name__}"
            )
        return errors

    @classmethod
    def from_value(
        cls,
        value: Optional[Union["AsyncWalkerOptions", Mapping[str, Any]]] = None,
    ) -> "AsyncWalkerOptions":
        """Build options from None, an instance or a mapping.

        Missing keys fall back to ``DEFAULT_ASYNC_WALKER_OPTIONS``.

        Args:
            value: Options to convert

        Returns:
            A validated AsyncWalkerOptions instance

        Raises:
            ValueError: If the mapping has unknown keys or a value is invalid
        """
        if value is None:
            return DEFAULT_ASYNC_WALKER_OPTIONS

        if isinstance(value, cls):
            options = value
            errors = []
        elif isinstance(value, Mapping):
            known = {f.name for f in fields(cls)}
            unknown = sorted(str(key) for key in value if key not in known)
            errors = [f"unknown option: {key}" for key in unknown]
            options = cls(**{key: val for key, val in value.items() if key in known})
        else:
            raise ValueError(
                f"options must be AsyncWalkerOptions or a mapping, got {type(value).__name__}"
            )

        errors.extend(options.validate())
        if errors:
            raise ValueError("Invalid walker options: " + "; ".join(errors))
        return options


DEFAULT_ASYNC_WALKER_OPTIONS = AsyncWalkerOptions()

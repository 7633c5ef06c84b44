"""Form state protocol consumed by the narrow widget components."""

from typing import Protocol, Optional, Any, Hashable, Sequence, Dict, runtime_checkable


@runtime_checkable
class FormStateProtocol(Protocol):
    """Per-request form state owned by the host form pipeline."""

    @property
    def limit_validation_errors(self) -> bool:
        """True when validation errors must be suppressed for this pass."""
        ...

    @property
    def triggering_element(self) -> Optional[Dict[Hashable, Any]]:
        """Element that triggered the current (ajax) submission, if any."""
        ...

    def get_value(self, parents: Sequence[Hashable], default: Any = None) -> Any:
        """Return the submitted value at a key path."""
        ...

    def set_error_by_name(self, name: str, message: str) -> None:
        """Record a validation error for the element with the given error name."""
        ...

    def set_rebuild(self, rebuild: bool = True) -> None:
        """Mark the form to be rebuilt on the next request."""
        ...

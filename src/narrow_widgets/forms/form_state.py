"""
In-memory form state.

A minimal implementation of FormStateProtocol for hosts without a form
state object of their own and for driving the widget in tests. Holds the
submitted value tree, the recorded errors keyed by error name, the rebuild
flag and the triggering element of an ajax request.
"""

import logging
from typing import Any, Dict, Hashable, Optional, Sequence

from narrow_widgets.core import tree

logger = logging.getLogger(__name__)


class FormState:
    """Request-scoped form state."""

    def __init__(
        self,
        values: Optional[Dict[Hashable, Any]] = None,
        limit_validation_errors: bool = False,
        triggering_element: Optional[Dict[Hashable, Any]] = None,
    ):
        self.values: Dict[Hashable, Any] = values if values is not None else {}
        self.errors: Dict[str, str] = {}
        self.rebuild = False
        self._limit_validation_errors = limit_validation_errors
        self._triggering_element = triggering_element

    @property
    def limit_validation_errors(self) -> bool:
        return self._limit_validation_errors

    @property
    def triggering_element(self) -> Optional[Dict[Hashable, Any]]:
        return self._triggering_element

    def get_value(self, parents: Sequence[Hashable], default: Any = None) -> Any:
        return tree.get_value(self.values, parents, default)

    def set_value(self, parents: Sequence[Hashable], value: Any) -> None:
        tree.set_value(self.values, parents, value)

    def set_error_by_name(self, name: str, message: str) -> None:
        # First error for an element wins, later ones are dropped
        if name in self.errors:
            logger.debug(f"Error for '{name}' already recorded, dropping: {message}")
            return
        self.errors[name] = message

    def set_rebuild(self, rebuild: bool = True) -> None:
        self.rebuild = rebuild

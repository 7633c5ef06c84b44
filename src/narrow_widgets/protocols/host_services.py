"""Host collaborator protocols.

The narrow widgets never look these services up globally; hosts pass
implementations to the components that need them.
"""

import re
from typing import Protocol, Optional, Any, Dict, List, Mapping


class BundleInfoService(Protocol):
    """Bundle metadata for entity types."""

    def get_bundle_info(self, target_type: str) -> Dict[str, Dict[str, Any]]:
        """Return ``{bundle_id: {"label": ...}}`` for an entity type."""
        ...


class SelectionHandler(Protocol):
    """A reference selection handler instance."""

    def build_configuration_form(self, form: Dict[Any, Any], form_state: Any) -> Dict[Any, Any]:
        """Return the handler's configuration sub-form."""
        ...


class SelectionManager(Protocol):
    """Creates selection handlers from handler options."""

    def get_instance(self, options: Mapping[str, Any]) -> SelectionHandler:
        """Return a handler for options like ``{"target_type", "handler", ...}``."""
        ...


class ViewExecutor(Protocol):
    """Executes a named, parameterized view to compute reference candidates."""

    def execute(
        self,
        view_name: str,
        display_name: str,
        arguments: Optional[List[str]] = None,
        match: Optional[str] = None,
    ) -> List[Any]:
        """Return the candidate records produced by the view display."""
        ...


class Translator(Protocol):
    """Translates a message template and substitutes its placeholders."""

    def __call__(self, message: str, args: Optional[Mapping[str, Any]] = None) -> str:
        ...


_PLACEHOLDER = re.compile(r"[@%:][A-Za-z_]+")


def default_translator(message: str, args: Optional[Mapping[str, Any]] = None) -> str:
    """Substitute ``@name`` style placeholders without translating."""
    if not args:
        return message
    return _PLACEHOLDER.sub(
        lambda match: str(args[match.group(0)]) if match.group(0) in args else match.group(0),
        message,
    )

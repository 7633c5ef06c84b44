"""Post-processing of the repeatable value group once the maximum is reached."""

import logging
from typing import Any, Dict, Hashable

from narrow_widgets.core import tree
from narrow_widgets.core.settings import SettingsModel

logger = logging.getLogger(__name__)


class AddMoreController:
    """Suppresses the "add another value" button and the over-limit slot. Stateless."""

    def adjust(
        self,
        elements: Dict[Hashable, Any],
        add_button_key: Hashable,
        settings: SettingsModel,
    ) -> Dict[Hashable, Any]:
        """Return a copy of ``elements`` with the affordances the maximum forbids removed."""
        result = tree.copy_tree(elements)
        if not settings.max:
            return result

        value_count = len(tree.ordinal_keys(result))

        if value_count >= settings.max:
            # The host appends an empty slot plus the button, both go
            result.pop(add_button_key, None)

        if value_count > settings.max and settings.max in result:
            logger.debug(f"Removing over-limit slot {settings.max} ({value_count} slots, max {settings.max})")
            del result[settings.max]

        return result

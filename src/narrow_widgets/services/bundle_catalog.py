"""
Referenceable bundle discovery.

Reads the bundles a reference field may point to from its selection handler
settings and labels them through the bundle metadata service. Fields whose
selection handler has no bundle restriction setting simply cannot be
narrowed; that is not an error.
"""

import logging
from typing import List, Optional

from narrow_widgets.core.constants import CONSTANTS
from narrow_widgets.core.field import BundleOption, FieldDefinition
from narrow_widgets.core.settings import HandlerConfig, SettingsModel
from narrow_widgets.protocols.host_services import BundleInfoService

logger = logging.getLogger(__name__)


class BundleCatalog:
    """Bundle lookups for a reference field."""

    def __init__(self, bundle_info: Optional[BundleInfoService] = None):
        self._bundle_info = bundle_info

    def referenceable_bundles(self, field: FieldDefinition) -> List[str]:
        """Bundle ids the field may reference, in configured order."""
        handler_settings = field.handler_settings or {}
        # Handlers without this setting (e.g. view based) can't be narrowed
        if CONSTANTS.TARGET_BUNDLES_KEY not in handler_settings:
            logger.debug(f"Field '{field.name}' has no bundle restriction setting")
            return []
        return list(handler_settings[CONSTANTS.TARGET_BUNDLES_KEY] or [])

    def can_narrow(self, field: FieldDefinition) -> bool:
        return len(self.referenceable_bundles(field)) > 1

    def bundle_options(self, field: FieldDefinition) -> List[BundleOption]:
        """Selector options for the field's bundles, labeled from bundle metadata."""
        info = {}
        if self._bundle_info is not None:
            info = self._bundle_info.get_bundle_info(field.target_type) or {}

        options = []
        for bundle in self.referenceable_bundles(field):
            label = (info.get(bundle) or {}).get("label") or bundle
            options.append(BundleOption(id=bundle, label=str(label)))
        return options

    def handler_for(self, bundle: str, settings: SettingsModel) -> HandlerConfig:
        """Filtering handler for a bundle; missing entries restrict directly."""
        if bundle not in settings.handlers:
            logger.debug(f"No handler configured for bundle '{bundle}', using direct restriction")
        return settings.handler_for(bundle)

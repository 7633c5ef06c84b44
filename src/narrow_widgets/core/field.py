"""
Field and value slot types.

Lightweight, host-neutral descriptions of the reference field a widget is
attached to and of the values it currently holds. Hosts adapt their own
field objects into these before calling the widget.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .constants import CONSTANTS

CARDINALITY_UNLIMITED = -1


@dataclass(frozen=True)
class FieldDefinition:
    """Definition of a reference field.

    Attributes:
        name: Machine name, used as the field's key in the form tree
        label: Human-readable label used in messages
        cardinality: Storage cardinality, CARDINALITY_UNLIMITED or a positive int
        target_type: Entity type the field references
        handler_settings: Selection handler settings of the field; bundle
            narrowing reads ``target_bundles`` from here
        primary_value_key: Key of the value a slot is populated by
    """

    name: str
    label: str
    cardinality: int = 1
    target_type: str = ""
    handler_settings: Dict[str, Any] = field(default_factory=dict)
    primary_value_key: str = CONSTANTS.TARGET_ID_KEY

    @property
    def is_unlimited(self) -> bool:
        return self.cardinality == CARDINALITY_UNLIMITED


@dataclass(frozen=True)
class ReferencedEntity:
    """A record currently referenced by a slot."""
    id: Any
    bundle: str
    label: str = ""


@dataclass
class FieldItems:
    """Stored values of a field, indexed by delta."""
    definition: FieldDefinition
    referenced: List[Optional[ReferencedEntity]] = field(default_factory=list)

    def referenced_entity(self, delta: int) -> Optional[ReferencedEntity]:
        if 0 <= delta < len(self.referenced):
            return self.referenced[delta]
        return None


@dataclass(frozen=True)
class ValueSlot:
    """One ordinal position of a multi-valued field, materialized per request."""
    delta: int
    primary_value: Any = None
    bundle: Optional[str] = None

    @property
    def is_populated(self) -> bool:
        return bool(self.primary_value)

    @classmethod
    def from_items(cls, items: FieldItems, delta: int) -> "ValueSlot":
        entity = items.referenced_entity(delta)
        if entity is None:
            return cls(delta=delta)
        return cls(delta=delta, primary_value=entity.id, bundle=entity.bundle)


@dataclass(frozen=True)
class BundleOption:
    """Selectable bundle shown by the companion selector."""
    id: str
    label: str

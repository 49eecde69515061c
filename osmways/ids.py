"""Identifiers for OSM features, their versioned elements and objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ElementType(str, Enum):
    """The kinds of OSM element an identifier can refer to."""

    NODE = "node"
    WAY = "way"
    RELATION = "relation"


@dataclass(frozen=True)
class FeatureID:
    """Identifies a feature: an element type and id, independent of version."""

    type: ElementType
    ref: int

    def element_id(self, version: int) -> ElementID:
        """Return the element id of the given version of this feature."""
        return ElementID(self.type, self.ref, version)

    def object_id(self, version: int) -> ObjectID:
        """Return the object id of the given version of this feature."""
        return ObjectID(self.type, self.ref, version)

    def __str__(self) -> str:
        return f"{self.type.value}/{self.ref}"


@dataclass(frozen=True)
class ElementID:
    """Identifies one version of a feature."""

    type: ElementType
    ref: int
    version: int

    def feature_id(self) -> FeatureID:
        """Return the feature id, dropping the version."""
        return FeatureID(self.type, self.ref)

    def __str__(self) -> str:
        return f"{self.type.value}/{self.ref}:{self.version}"


@dataclass(frozen=True)
class ObjectID:
    """Identifies a versioned object stored in the database."""

    type: ElementType
    ref: int
    version: int

    def __str__(self) -> str:
        return f"{self.type.value}/{self.ref}:{self.version}"


def node_feature_id(node_id: int) -> FeatureID:
    """Return the feature id for a node id."""
    return FeatureID(ElementType.NODE, node_id)


def node_element_id(node_id: int, version: int) -> ElementID:
    """Return the element id for a node id and version."""
    return node_feature_id(node_id).element_id(version)


def way_feature_id(way_id: int) -> FeatureID:
    """Return the feature id for a way id."""
    return FeatureID(ElementType.WAY, way_id)


def way_element_id(way_id: int, version: int) -> ElementID:
    """Return the element id for a way id and version."""
    return way_feature_id(way_id).element_id(version)


def way_object_id(way_id: int, version: int) -> ObjectID:
    """Return the object id for a way id and version."""
    return way_feature_id(way_id).object_id(version)
"""OSM ways: ordered collections of node references."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Iterable, Optional

from .ids import ElementID, FeatureID, ObjectID, node_feature_id, way_feature_id

Point = tuple[float, float]

ZERO_TIME = datetime.min.replace(tzinfo=timezone.utc)
_MAX_FLOAT = sys.float_info.max


def _format_time(t: datetime) -> str:
    if t.tzinfo is not None:
        t = t.astimezone(timezone.utc)
    text = t.replace(tzinfo=None, microsecond=0).isoformat()
    if t.microsecond:
        text += "." + f"{t.microsecond:06d}".rstrip("0")
    return text + "Z"


class UpdateIndexOutOfRangeError(IndexError):
    """Raised when an update refers to a child index that does not exist."""

    def __init__(self, index: int) -> None:
        super().__init__(f"osm: index {index} is out of range")
        self.index = index


@dataclass
class Update:
    """A change to a child of a way made without a change to the way itself."""

    index: int = 0
    version: int = 0
    timestamp: datetime = ZERO_TIME
    changeset_id: int = 0
    lat: float = 0.0
    lon: float = 0.0
    reverse: bool = False


def _update_json(u: Update) -> dict[str, Any]:
    out: dict[str, Any] = {
        "index": u.index,
        "version": u.version,
        "timestamp": _format_time(u.timestamp),
    }
    if u.changeset_id:
        out["changeset"] = u.changeset_id
    if u.lat:
        out["lat"] = u.lat
    if u.lon:
        out["lon"] = u.lon
    if u.reverse:
        out["reverse"] = True
    return out


@dataclass
class Bounds:
    """A latitude/longitude box."""

    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float


def _bounds_json(b: Bounds) -> dict[str, float]:
    return {
        "minlat": b.min_lat,
        "maxlat": b.max_lat,
        "minlon": b.min_lon,
        "maxlon": b.max_lon,
    }


@dataclass
class Bound:
    """A box given by its (lon, lat) corner points."""

    min: Point
    max: Point


@dataclass
class WayNode:
    """A node reference within a way, optionally annotated with location."""

    id: int = 0
    version: int = 0
    changeset_id: int = 0
    lat: float = 0.0
    lon: float = 0.0

    def feature_id(self) -> FeatureID:
        """Return the feature id of the referenced node."""
        return node_feature_id(self.id)

    def element_id(self) -> ElementID:
        """Return the element id of the referenced node version."""
        return self.feature_id().element_id(self.version)

    def point(self) -> Point:
        """Return the (lon, lat) location; (0, 0) if not annotated."""
        return (self.lon, self.lat)

    @property
    def _annotated(self) -> bool:
        return self.version != 0 or self.lon != 0 or self.lat != 0


class WayNodes(list):
    """A list of way nodes."""

    def bounds(self) -> Bounds:
        """Return the lat/lon bounds of the nodes."""
        return Bounds(
            min_lat=min((n.lat for n in self), default=_MAX_FLOAT),
            max_lat=max((n.lat for n in self), default=-_MAX_FLOAT),
            min_lon=min((n.lon for n in self), default=_MAX_FLOAT),
            max_lon=max((n.lon for n in self), default=-_MAX_FLOAT),
        )

    def bound(self) -> Bound:
        """Return the bound of the nodes as (lon, lat) corner points."""
        b = self.bounds()
        return Bound(min=(b.min_lon, b.min_lat), max=(b.max_lon, b.max_lat))

    def element_ids(self) -> list[ElementID]:
        """Return the element ids of the nodes."""
        return [n.element_id() for n in self]

    def feature_ids(self) -> list[FeatureID]:
        """Return the feature ids of the nodes."""
        return [n.feature_id() for n in self]

    def node_ids(self) -> list[int]:
        """Return the node ids."""
        return [n.id for n in self]

    def to_json(self) -> str:
        """Encode as a JSON array of node ids."""
        return json.dumps(self.node_ids(), separators=(",", ":"))

    @classmethod
    def from_json(cls, data: str | bytes) -> WayNodes:
        """Decode from a JSON array of node ids; raises ValueError if invalid."""
        ids = json.loads(data)
        if not isinstance(ids, list) or not all(
            isinstance(i, int) and not isinstance(i, bool) for i in ids
        ):
            raise ValueError("way nodes must be a JSON array of integers")
        return cls(WayNode(id=i) for i in ids)


@dataclass
class Way:
    """An OSM way."""

    id: int = 0
    user: str = ""
    user_id: int = 0
    visible: bool = False
    version: int = 0
    changeset_id: int = 0
    timestamp: datetime = ZERO_TIME
    nodes: WayNodes = field(default_factory=WayNodes)
    tags: list[tuple[str, str]] = field(default_factory=list)
    committed: Optional[datetime] = None
    updates: list[Update] = field(default_factory=list)
    bounds: Optional[Bounds] = None

    def __post_init__(self) -> None:
        if not isinstance(self.nodes, WayNodes):
            self.nodes = WayNodes(self.nodes)

    def object_id(self) -> ObjectID:
        """Return the object id of this way version."""
        return way_feature_id(self.id).object_id(self.version)

    def feature_id(self) -> FeatureID:
        """Return the feature id of the way."""
        return way_feature_id(self.id)

    def element_id(self) -> ElementID:
        """Return the element id of this way version."""
        return self.feature_id().element_id(self.version)

    def committed_at(self) -> datetime:
        """Return the best estimate of when the way was committed."""
        return self.committed if self.committed is not None else self.timestamp

    def tag_map(self) -> dict[str, str]:
        """Return the tags as a key/value mapping."""
        return dict(self.tags)

    def apply_updates_up_to(self, t: datetime) -> None:
        """Apply updates up to and including time t; keep the later ones."""
        not_applied = []
        for u in self.updates:
            if u.timestamp > t:
                not_applied.append(u)
                continue
            self._apply_update(u)
        self.updates = not_applied

    def _apply_update(self, u: Update) -> None:
        if not 0 <= u.index < len(self.nodes):
            raise UpdateIndexOutOfRangeError(u.index)
        node = self.nodes[u.index]
        node.version = u.version
        node.changeset_id = u.changeset_id
        node.lat = u.lat
        node.lon = u.lon

    def line_string(self) -> list[Point]:
        """Return the points of the annotated nodes."""
        return [n.point() for n in self.nodes if n._annotated]

    def line_string_at(self, t: datetime) -> list[Point]:
        """Return the annotated points with updates up to time t applied."""
        points = [n.point() for n in self.nodes]
        for u in self.updates:
            if u.timestamp > t:
                break
            if not 0 <= u.index < len(points):
                continue
            points[u.index] = (u.lon, u.lat)
        return [p for p, n in zip(points, self.nodes) if n._annotated]

    def to_json(self) -> str:
        """Encode the way as osmjson."""
        out: dict[str, Any] = {"type": "way", "id": self.id}
        if self.user:
            out["user"] = self.user
        if self.user_id:
            out["uid"] = self.user_id
        out["visible"] = self.visible
        if self.version:
            out["version"] = self.version
        if self.changeset_id:
            out["changeset"] = self.changeset_id
        out["timestamp"] = _format_time(self.timestamp)
        out["nodes"] = self.nodes.node_ids()
        if self.tags:
            out["tags"] = dict(sorted(self.tag_map().items()))
        if self.committed is not None:
            out["committed"] = _format_time(self.committed)
        if self.updates:
            out["updates"] = [_update_json(u) for u in self.updates]
        if self.bounds is not None:
            out["bounds"] = _bounds_json(self.bounds)
        return json.dumps(out, separators=(",", ":"))


class Ways(list):
    """A list of ways."""

    def __init__(self, ways: Iterable[Way] = ()) -> None:
        super().__init__(ways)

    def ids(self) -> list[int]:
        """Return the way ids."""
        return [w.id for w in self]

    def feature_ids(self) -> list[FeatureID]:
        """Return the feature ids of the ways."""
        return [w.feature_id() for w in self]

    def element_ids(self) -> list[ElementID]:
        """Return the element ids of the ways."""
        return [w.element_id() for w in self]

    def sort_by_id_version(self) -> None:
        """Sort in place by id, then version, ascending."""
        self.sort(key=lambda w: (w.id, w.version))
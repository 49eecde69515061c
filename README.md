# osmways

A small, dependency-free model of OpenStreetMap ways: the ordered node
references that make up a way, the ids used to identify OSM features and
their versions, and the "minor version" updates that change a way's nodes
without changing the way itself.

## Installation

```
pip install osmways
```

## Identifiers

`osmways.ids` provides frozen, hashable dataclasses:

- `FeatureID(type, ref)`: an element type (`ElementType.NODE`, `WAY` or
  `RELATION`) and id, independent of version. Prints as `way/12`.
- `ElementID(type, ref, version)`: one version of a feature. Prints as
  `way/12:2`.
- `ObjectID(type, ref, version)`: a versioned object.

```python
from osmways.ids import way_feature_id, way_element_id, way_object_id, node_element_id

fid = way_feature_id(12)
eid = way_element_id(12, 2)
assert eid.feature_id() == fid
assert fid.element_id(2) == eid
assert str(eid) == "way/12:2"

oid = way_object_id(12, 2)
nid = node_element_id(5, 1)
```

## Ways

`osmways.way` holds `Way`, `WayNode`, `WayNodes`, `Ways`, `Update`,
`Bounds`, `Bound` and `UpdateIndexOutOfRangeError`.

```python
from osmways.way import Way, WayNode, WayNodes

way = Way(
    id=123,
    version=1,
    nodes=WayNodes([WayNode(id=1, lat=2, lon=1), WayNode(id=2, lat=3, lon=0)]),
)

way.feature_id()           # FeatureID(type=ElementType.WAY, ref=123)
way.element_id()           # ElementID(..., ref=123, version=1)
way.line_string()          # [(1, 2), (0, 3)] as (lon, lat) points
way.nodes.bounds()         # Bounds(min_lat=2, max_lat=3, min_lon=0, max_lon=1)
way.nodes.bound()          # Bound(min=(0, 2), max=(1, 3))
way.nodes.node_ids()       # [1, 2]
way.to_json()              # '{"type":"way","id":123,"visible":false,...,"nodes":[1,2]}'
```

A way node counts as annotated, and appears in `line_string()`, when it has
a version or a non-zero latitude or longitude. `committed_at()` returns
`committed` if set, otherwise `timestamp`; `tag_map()` returns the tags, a
list of `(key, value)` pairs, as a dict.

### Updates

Updates record changes to a way's nodes over time. `line_string_at(t)` gives
the geometry as of a moment, skipping updates whose index is out of range.
`apply_updates_up_to(t)` folds the updates up to and including `t` into the
nodes, keeping only the later ones; an update that points past the end of
the node list raises `UpdateIndexOutOfRangeError` (an `IndexError`).

```python
from datetime import datetime, timezone
from osmways.way import Update

way.updates = [
    Update(index=0, timestamp=datetime(2012, 1, 1, tzinfo=timezone.utc), lat=11),
]
way.apply_updates_up_to(datetime(2013, 1, 1, tzinfo=timezone.utc))
```

### Lists

`Ways` is a list of ways with `ids()`, `feature_ids()`, `element_ids()` and
an in-place `sort_by_id_version()` that orders by id, then version.

`WayNodes` can be read from and written to the JSON form of a node list, a
plain array of node ids, with `WayNodes.from_json(...)` and
`WayNodes.to_json()`. `from_json` raises `ValueError` on invalid input.

## What this package does not do

It models ways only. It has no nodes or relations as objects of their own,
and it does not read or write OSM XML, PBF or binary-encoded data files.
JSON output is available for a single way and for node lists; there is no
JSON reader for whole ways.

## Running the tests

```
pip install -e ".[test]"
pytest
```
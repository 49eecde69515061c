from datetime import datetime, timezone

import pytest

from osmways.ids import (
    node_element_id,
    node_feature_id,
    way_element_id,
    way_feature_id,
    way_object_id,
)
from osmways.way import (
    Bound,
    Bounds,
    Update,
    UpdateIndexOutOfRangeError,
    Way,
    WayNode,
    WayNodes,
    Ways,
)


def utc(year):
    return datetime(year, 1, 1, tzinfo=timezone.utc)


def test_way_ids():
    w = Way(id=12, version=2)
    assert w.feature_id() == way_feature_id(12)
    assert w.element_id() == way_element_id(12, 2)
    assert w.object_id() == way_object_id(12, 2)


def test_apply_updates_up_to():
    updates = [
        Update(index=0, timestamp=utc(2012), lat=11),
        Update(index=1, timestamp=utc(2014), lat=12),
        Update(index=2, timestamp=utc(2013), lat=13),
    ]
    w = Way(id=123, nodes=WayNodes([WayNode(lat=1), WayNode(lat=2), WayNode(lat=3)]))

    w.updates = list(updates)
    w.apply_updates_up_to(utc(2011))
    assert [n.lat for n in w.nodes] == [1, 2, 3]

    w.updates = list(updates)
    w.apply_updates_up_to(utc(2013))
    assert [n.lat for n in w.nodes] == [11, 2, 13]
    assert len(w.updates) == 1
    assert w.updates[0].index == 1


def test_apply_update():
    w = Way(id=123, nodes=[WayNode(lat=1, lon=2)])
    w.updates = [Update(index=0, version=1, changeset_id=2, lat=3, lon=4)]
    w.apply_updates_up_to(utc(2000))
    assert w.nodes[0] == WayNode(id=0, version=1, changeset_id=2, lat=3, lon=4)
    assert w.updates == []


def test_apply_update_error():
    w = Way(id=123, nodes=[WayNode(lat=1, lon=2)])
    w.updates = [Update(index=1)]
    with pytest.raises(UpdateIndexOutOfRangeError) as info:
        w.apply_updates_up_to(utc(2000))
    assert info.value.index == 1


def test_way_node_ids():
    wn = WayNode(id=12, version=2)
    assert wn.feature_id() == node_feature_id(12)
    assert wn.element_id() == node_element_id(12, 2)


def test_way_node_point():
    wn = WayNode(id=12, version=2, lon=1, lat=2)
    lon, lat = wn.point()
    assert lon == 1
    assert lat == 2


def sample_nodes():
    return WayNodes(
        [WayNode(lat=1, lon=2), WayNode(lat=3, lon=4), WayNode(lat=2, lon=3)]
    )


def test_way_nodes_bounds():
    assert sample_nodes().bounds() == Bounds(1, 3, 2, 4)


def test_way_nodes_bound():
    assert sample_nodes().bound() == Bound(min=(2, 1), max=(4, 3))


def test_line_string():
    w = Way(
        id=1,
        nodes=[
            WayNode(id=1, lon=1, lat=2),
            WayNode(id=2, lon=0, lat=3),
            WayNode(id=3, lon=0, lat=0),
            WayNode(id=3, lon=3, lat=0),
            WayNode(id=3, lon=3, lat=4),
        ],
    )
    assert w.line_string() == [(1, 2), (0, 3), (3, 0), (3, 4)]

    zero = datetime.min.replace(tzinfo=timezone.utc)
    w.updates = [
        Update(index=1, timestamp=zero, lon=10, lat=20),
        Update(index=1000, timestamp=zero, lon=10, lat=20),
        Update(index=0, timestamp=zero, lon=5, lat=6),
        Update(index=4, timestamp=zero, lon=7, lat=8),
        Update(index=2, timestamp=utc(2018), lon=10, lat=20),
    ]
    assert w.line_string_at(utc(2017)) == [(5, 6), (10, 20), (3, 0), (7, 8)]


def test_way_to_json():
    w = Way(id=123, nodes=[WayNode(id=1), WayNode(id=2), WayNode(id=4)])
    assert w.to_json() == (
        '{"type":"way","id":123,"visible":false,'
        '"timestamp":"0001-01-01T00:00:00Z","nodes":[1,2,4]}'
    )


def test_way_to_json_empty_nodes():
    assert Way(id=7).to_json().endswith('"nodes":[]}')


def test_way_node_ids_lists():
    wns = WayNodes([WayNode(id=1, version=3), WayNode(id=2, version=4)])
    assert wns.element_ids() == [node_element_id(1, 3), node_element_id(2, 4)]
    assert wns.feature_ids() == [node_feature_id(1), node_feature_id(2)]
    assert wns.node_ids() == [1, 2]


def test_way_nodes_from_json():
    with pytest.raises(ValueError):
        WayNodes.from_json(b"[asdf,]")
    wn = WayNodes.from_json(b"[1,2,3,4]")
    assert wn.node_ids() == [1, 2, 3, 4]


def test_way_nodes_json_round_trip():
    wn = WayNodes([WayNode(id=5), WayNode(id=9)])
    assert WayNodes.from_json(wn.to_json()).node_ids() == [5, 9]


def test_ways_ids():
    ws = Ways([Way(id=1, version=3), Way(id=2, version=4)])
    assert ws.element_ids() == [way_element_id(1, 3), way_element_id(2, 4)]
    assert ws.feature_ids() == [way_feature_id(1), way_feature_id(2)]
    assert ws.ids() == [1, 2]


def test_ways_sort_by_id_version():
    ws = Ways(
        [
            Way(id=7, version=3),
            Way(id=2, version=4),
            Way(id=5, version=2),
            Way(id=5, version=3),
            Way(id=5, version=4),
            Way(id=3, version=4),
            Way(id=4, version=4),
            Way(id=9, version=4),
        ]
    )
    ws.sort_by_id_version()
    assert ws.element_ids() == [
        way_element_id(2, 4),
        way_element_id(3, 4),
        way_element_id(4, 4),
        way_element_id(5, 2),
        way_element_id(5, 3),
        way_element_id(5, 4),
        way_element_id(7, 3),
        way_element_id(9, 4),
    ]


def test_committed_at_and_tag_map():
    w = Way(id=1, timestamp=utc(2010), tags=[("highway", "residential")])
    assert w.committed_at() == utc(2010)
    w.committed = utc(2011)
    assert w.committed_at() == utc(2011)
    assert w.tag_map() == {"highway": "residential"}
import pytest

from chaincheck.index import BlockIndexNode, build_index


def test_node_from_dict(hash_of):
    node = BlockIndexNode.from_dict(
        {"height": "7", "hash": "0x" + hash_of(7).upper(), "chain_tx": 42, "time": 1700000000}
    )
    assert node == BlockIndexNode(height=7, hash=hash_of(7), chain_tx=42, time=1700000000)
    assert BlockIndexNode.from_dict(node.to_dict()) == node


@pytest.mark.parametrize("missing", ["height", "hash", "chain_tx", "time"])
def test_node_fields_required(hash_of, missing):
    data = {"height": 7, "hash": hash_of(7), "chain_tx": 42, "time": 1700000000}
    del data[missing]
    with pytest.raises(KeyError):
        BlockIndexNode.from_dict(data)


def test_build_index(make_node):
    nodes = [make_node(0), make_node(1)]
    index = build_index(nodes)
    assert index == {nodes[0].hash: nodes[0], nodes[1].hash: nodes[1]}

import pytest

from gamelab.maze import MazeGenerator, MazeGeneratorBase, Node


def test_default_node_has_no_walls():
    node = Node()
    assert node.bits == 0
    assert not any((node.north, node.east, node.south, node.west))


@pytest.mark.parametrize("bits", range(16))
def test_bits_round_trip(bits):
    node = Node.from_bits(bits)
    assert node.bits == bits
    assert Node(node.north, node.east, node.south, node.west) == node


def test_north_is_lowest_bit():
    assert Node(north=True).bits == 1
    assert Node(west=True) == Node.from_bits(8)


@pytest.mark.parametrize("wall", ["north", "east", "south", "west"])
def test_setters_touch_one_wall(wall):
    node = Node(True, True, True, True)
    setattr(node, wall, False)
    assert getattr(node, wall) is False
    others = [w for w in ("north", "east", "south", "west") if w != wall]
    assert all(getattr(node, w) for w in others)
    setattr(node, wall, True)
    assert node == Node.from_bits(15)


@pytest.mark.parametrize("bits", [-1, 16, 255])
def test_from_bits_rejects_out_of_range(bits):
    with pytest.raises(ValueError):
        Node.from_bits(bits)


def test_base_is_abstract():
    with pytest.raises(TypeError):
        MazeGeneratorBase()


def test_deprecated_generator():
    generator = MazeGenerator()
    assert generator.name == "deprecated"
    assert generator.step(object()) is False
    generator.clear(object())
    assert generator.step(None) is False
import pytest

from renderengine.furniture import (
    Cabinet,
    Computer,
    Lamp,
    Shelf,
    draw_chair,
    draw_chair1,
    draw_fan_store,
    draw_keyboard,
    draw_mouse,
    draw_table,
)
from renderengine.lighting import PointLight
from renderengine.matrices import identity, trs
from renderengine.meshes import DrawList, Primitives
from renderengine.vectors import Vec3, Vec4

ORIGIN = Vec3(0.0, 0.0, 0.0)
NO_ROT = Vec3(0.0, 0.0, 0.0)
UNIT = Vec3(1.0, 1.0, 1.0)


@pytest.fixture
def prims():
    return Primitives(DrawList())


def _calls(prims):
    return list(prims.sink)


def _translation(call):
    m = call.model
    return (m[0, 3], m[1, 3], m[2, 3])


def test_table_uses_cubes_and_keeps_parent_transform(prims):
    pos, rot, size = Vec3(1, 2, 3), Vec3(0, 90, 0), Vec3(2, 2, 2)
    result = draw_table(prims, pos, rot, size)
    calls = _calls(prims)
    assert len(calls) == 14
    assert {c.mesh.name for c in calls} == {"cube"}
    assert result == trs(pos, rot, size)
    assert prims.cube.model_matrix == result


def test_fan_store_sets_cube_and_cylinder_parents(prims):
    pos, rot, size = Vec3(0, 0, 0), Vec3(0, 0, 0), Vec3(1.5, 1.2, 1.5)
    draw_fan_store(prims, pos, rot, size)
    calls = _calls(prims)
    assert [c.mesh.name for c in calls[:3]] == ["cylinder"] * 3
    assert {c.mesh.name for c in calls[3:]} == {"cube"}
    assert prims.cube.model_matrix == trs(pos, rot, size)
    assert prims.cylinder.model_matrix == trs(pos, rot, size)


def test_chair_is_deterministic(prims):
    draw_chair(prims, Vec3(1, 0, 1), NO_ROT, UNIT)
    first = [c.model for c in _calls(prims)]
    prims.sink.clear()
    draw_chair(prims, Vec3(1, 0, 1), NO_ROT, UNIT)
    second = [c.model for c in _calls(prims)]
    assert first == second
    assert {c.mesh.name for c in _calls(prims)} == {"cube", "cylinder"}


def test_chair1_base_spokes_share_centre(prims):
    draw_chair1(prims, Vec3(40, 6.5, -25), NO_ROT, Vec3(8.5, 8, 8.5))
    calls = _calls(prims)
    spokes = calls[1:6]
    assert all(c.mesh.name == "cube" for c in spokes)
    centre = _translation(spokes[0])
    for spoke in spokes:
        assert _translation(spoke) == pytest.approx(centre)
    assert calls[0].mesh.name == "cylinder"
    assert calls[-1].mesh.name == "cylinder"


def test_keyboard_and_mouse_body_colour(prims):
    draw_keyboard(prims, ORIGIN, NO_ROT, UNIT)
    draw_mouse(prims, ORIGIN, NO_ROT, UNIT)
    calls = _calls(prims)
    assert {c.mesh.name for c in calls} == {"cube"}
    assert calls[0].color == Vec4(0.2, 0.2, 0.2, 1.0)


def test_computer_keys_shift_every_part(prims):
    computer = Computer()
    computer.draw(prims, ORIGIN, NO_ROT, UNIT)
    before = [_translation(c) for c in _calls(prims)]
    assert prims.cube.model_matrix == identity()

    assert computer.on_key("A") is True
    prims.sink.clear()
    computer.draw(prims, ORIGIN, NO_ROT, UNIT)
    after = [_translation(c) for c in _calls(prims)]
    for b, a in zip(before, after):
        assert a[0] - b[0] == pytest.approx(0.1)
        assert a[1] == pytest.approx(b[1])

    assert computer.on_key("a") is True
    assert computer.position.x == pytest.approx(0.0)
    assert computer.on_key("z") is False


def test_cabinet_drawers_clamp():
    cabinet = Cabinet()
    cabinet.on_key("o")
    assert cabinet.left_position.z == 0.0
    for _ in range(10):
        cabinet.on_key("O")
    assert cabinet.left_position.z == pytest.approx(0.35)
    cabinet.on_key("P")
    cabinet.on_key("p")
    cabinet.on_key("p")
    assert cabinet.right_position.z == 0.0
    assert cabinet.on_key("x") is False


def test_cabinet_drawer_moves_only_with_input(prims):
    cabinet = Cabinet()
    cabinet.draw(prims, ORIGIN, NO_ROT, UNIT, True)
    closed = [_translation(c) for c in _calls(prims)]

    cabinet.on_key("O")
    cabinet.on_key("O")
    prims.sink.clear()
    cabinet.draw(prims, ORIGIN, NO_ROT, UNIT, False)
    ignored = [_translation(c) for c in _calls(prims)]
    assert ignored == pytest.approx(closed)

    prims.sink.clear()
    cabinet.draw(prims, ORIGIN, NO_ROT, UNIT, True)
    opened = [_translation(c) for c in _calls(prims)]
    shift = cabinet.left_position.z
    for c, o in zip(closed[10:16], opened[10:16]):
        assert o[2] - c[2] == pytest.approx(shift)
    assert opened[:10] == pytest.approx(closed[:10])
    assert opened[16:] == pytest.approx(closed[16:])
    assert prims.cube.model_matrix == identity()


def test_shelf_draws_three_levels_and_resets(prims):
    shelf = Shelf()
    result = shelf.draw(prims, Vec3(1, 2, 3), NO_ROT, UNIT)
    assert len(prims.sink) == 3
    assert result == trs(Vec3(1, 2, 3), NO_ROT, UNIT)
    assert prims.cube.model_matrix == identity()
    assert shelf.on_key("a") is True
    assert shelf.position.x == pytest.approx(-0.1)
    assert shelf.on_key("b") is False


def test_lamp_places_light_and_glows(prims):
    lamp = Lamp()
    light = PointLight(diffuse=Vec3(0.0, 1.0, 1.0))
    pos = Vec3(32, 35, 20)
    lamp.draw(prims, pos, NO_ROT, Vec3(5, 5, 5), light)
    assert tuple(light.position) == pytest.approx(tuple(pos))

    glowing = [c for c in _calls(prims) if c.mesh.name == "sphere"]
    assert len(glowing) == 1
    assert glowing[0].shader == "emission"
    assert glowing[0].color == Vec4.from_vec3(light.diffuse, 1.0)

    for prim in (prims.cube, prims.cylinder, prims.sphere, prims.plane2):
        assert prim.model_matrix == identity()


def test_lamp_keys_move_light(prims):
    lamp = Lamp()
    light = PointLight()
    assert lamp.on_key("w") is True
    assert lamp.on_key("e") is True
    lamp.draw(prims, ORIGIN, NO_ROT, UNIT, light)
    assert light.position.z == pytest.approx(0.1)
    assert light.position.y == pytest.approx(0.1)
    assert lamp.on_key("t") is True
    assert lamp.rotation.y == pytest.approx(1.0)
    assert lamp.on_key("x") is False
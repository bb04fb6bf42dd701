import pytest

from renderengine.fans import CeilingFan, CircularFan, PortableFan, WallFan
from renderengine.matrices import identity
from renderengine.meshes import DrawList, Primitives
from renderengine.vectors import Vec3, Vec4


@pytest.fixture
def scene():
    sink = DrawList()
    return sink, Primitives(sink)


ORIGIN = Vec3(0.0, 0.0, 0.0)
ONE = Vec3(1.0, 1.0, 1.0)


def test_ceiling_fan_keys():
    fan = CeilingFan()
    assert fan.on is False
    assert fan.on_key("m") is True
    assert fan.on is True
    assert fan.on_key("n") is True
    assert fan.on is False
    assert fan.on_key("x") is False


def test_ceiling_fan_only_turns_when_on(scene):
    sink, prims = scene
    fan = CeilingFan()
    fan.draw(prims, ORIGIN, ORIGIN, ONE, True)
    assert fan.angle == 0.0
    fan.on_key("m")
    fan.draw(prims, ORIGIN, ORIGIN, ONE, True)
    assert fan.angle == 1.0


def test_ceiling_fan_angle_stays_in_range(scene):
    _, prims = scene
    fan = CeilingFan(on=True)
    for _ in range(400):
        fan.draw(prims, ORIGIN, ORIGIN, ONE)
        assert 0.0 <= fan.angle < 360.0


def test_ceiling_fan_meshes_and_parent(scene):
    sink, prims = scene
    fan = CeilingFan()
    global_matrix = fan.draw(prims, Vec3(0, 48, 0), ORIGIN, Vec3.splat(3), True)
    names = [call.mesh.name for call in sink]
    assert names == ["cylinder"] * 3 + ["plane2"] * 3
    assert prims.plane2.model_matrix == global_matrix
    assert prims.cylinder.model_matrix == global_matrix


def test_ceiling_fan_blades_move_when_on(scene):
    sink, prims = scene
    fan = CeilingFan(on=True)
    fan.draw(prims, ORIGIN, ORIGIN, ONE)
    first = [call.model for call in sink.calls[3:]]
    sink.clear()
    fan.draw(prims, ORIGIN, ORIGIN, ONE)
    second = [call.model for call in sink.calls[3:]]
    assert first != second


def test_circular_fan_tilt_limits():
    fan = CircularFan()
    assert fan.on_key("u") is True
    assert fan.rot_axis == pytest.approx(0.55)
    for _ in range(200):
        fan.on_key("u")
    assert 40.0 < fan.rot_axis <= 40.0 + 0.55 + 1e-9
    assert fan.on_key("u") is False
    for _ in range(400):
        fan.on_key("i")
    assert -40.0 - 0.55 - 1e-9 <= fan.rot_axis < -40.0
    assert fan.on_key("z") is False


def test_circular_fan_draw_resets_and_spins(scene):
    sink, prims = scene
    fan = CircularFan()
    fan.draw(prims, Vec3(22, 15.5, -17), Vec3(0, -180, 0), Vec3.splat(2))
    assert fan.blade_rotation == 1.0
    assert prims.cube.model_matrix == identity()
    assert all(call.mesh.name == "cube" for call in sink)
    blades = sink.calls[-3:]
    assert {call.color for call in blades} == {Vec4(0.7, 0.7, 0.0, 1.0)}
    assert len({call.model for call in blades}) == 3
    assert sink.calls[0].color == Vec4(1.0, 0.0, 0.0, 1.0)


def test_wall_fan_sweeps_within_bounds(scene):
    _, prims = scene
    fan = WallFan()
    for _ in range(310):
        fan.draw(prims, ORIGIN, ORIGIN, ONE)
    assert fan.direction == -1.0
    for _ in range(1000):
        fan.draw(prims, ORIGIN, ORIGIN, ONE)
        assert -30.2 <= fan.motor_rot <= 30.2


def test_wall_fan_draw(scene):
    sink, prims = scene
    fan = WallFan()
    fan.draw(prims, Vec3(47, 23.5, -22), Vec3(0, -90, 0), Vec3.splat(2), True)
    assert fan.blade_rot == 2.0
    assert prims.cube.model_matrix == identity()
    assert sink.calls[0].color == Vec4(1.0, 1.0, 0.0, 1.0)
    assert {call.color for call in sink.calls[-3:]} == {Vec4(0.7, 0.7, 0.7, 1.0)}


def test_portable_fan_loop_and_draw(scene):
    sink, prims = scene
    fan = PortableFan()
    fan.on_loop()
    assert fan.blade_rotation == pytest.approx(0.1)
    fan.draw(prims, Vec3(-24, 10.5, -24), Vec3(0, -180, 0), Vec3.splat(8), True)
    assert fan.blade_rotation == pytest.approx(1.1)
    assert fan.rot_axis == pytest.approx(0.15)
    assert sink.calls[0].color == Vec4(0.2, 0.8, 0.2, 1.0)
    assert prims.cube.model_matrix == identity()


def test_portable_fan_sweeps_back(scene):
    _, prims = scene
    fan = PortableFan()
    for _ in range(210):
        fan.draw(prims, ORIGIN, ORIGIN, ONE)
    assert fan.direction == -1.0
    for _ in range(800):
        fan.draw(prims, ORIGIN, ORIGIN, ONE)
        assert -30.3 <= fan.rot_axis <= 30.3
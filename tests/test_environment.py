import pytest

from openlima.color import Color
from openlima.environment import (
    Camera,
    CameraView,
    Environment,
    PerspectiveCamera,
    Projection,
    ProjectionModifier,
)
from openlima.lighting import PointLight
from openlima.scene import Renderable
from openlima.vector import Vector2, Vector3

WHITE = Color(1.0, 1.0, 1.0, 1.0)


class Label(Renderable):
    def __init__(self, text):
        self.text = text

    def render(self):
        return self.text


def make_light():
    return PointLight(Vector3(0, 0, 0), WHITE, WHITE, WHITE)


def test_interfaces_are_abstract():
    with pytest.raises(TypeError):
        ProjectionModifier()
    with pytest.raises(TypeError):
        Camera()


def test_aspect_ratio():
    camera = PerspectiveCamera(45.0)
    assert camera.aspect_ratio(Vector2(200, 100)) == 2.0


def test_aspect_ratio_rejects_zero_height():
    camera = PerspectiveCamera(45.0)
    with pytest.raises(ValueError):
        camera.aspect_ratio(Vector2(640, 0))


def test_modify_projection_uses_fov():
    camera = PerspectiveCamera(60.0)
    projection = camera.modify_projection(Vector2(300, 300))
    assert projection == Projection(fov=60.0, aspect_ratio=1.0)
    assert camera.fov == 60.0


def test_camera_render_snapshots_position_and_rotation():
    camera = PerspectiveCamera(45.0)
    camera.position = Vector3(1, 2, 3)
    camera.rotation = Vector3(10, 20, 30)
    view = camera.render()
    assert view == CameraView(Vector3(1, 2, 3), Vector3(10, 20, 30))
    camera.position.x = 99
    assert view.position == Vector3(1, 2, 3)


def test_set_camera_sets_both_roles():
    environment = Environment()
    camera = PerspectiveCamera(45.0)
    environment.set_camera(camera)
    assert environment.projection_modifier is camera
    assert environment.render_initializer is camera


def test_add_and_remove_lights():
    environment = Environment()
    first, second = make_light(), make_light()
    environment.add_light(first)
    environment.add_light(second)
    assert len(environment.lights) == 2
    environment.remove_light(first)
    assert environment.lights == (second,)
    assert environment.lights[0] is second


def test_remove_missing_light_raises():
    environment = Environment()
    environment.add_light(make_light())
    with pytest.raises(ValueError):
        environment.remove_light(make_light())


def test_clear_lights():
    environment = Environment()
    environment.add_light(make_light())
    environment.clear_lights()
    assert environment.lights == ()


def test_render_without_camera():
    environment = Environment()
    environment.render_node.add_child(Label("mesh"))
    frame = environment.render(Vector2(100, 100))
    assert frame.projection is None
    assert frame.initialization is None
    assert frame.scene == ["mesh"]
    assert frame.lights == ()


def test_render_with_camera_and_lights():
    environment = Environment()
    camera = PerspectiveCamera(45.0)
    environment.set_camera(camera)
    environment.add_light(make_light())
    environment.add_light(make_light())
    environment.ambient_color = Color(0.1, 0.2, 0.3, 1.0)
    frame = environment.render(Vector2(200, 100))
    assert frame.projection == camera.modify_projection(Vector2(200, 100))
    assert frame.initialization == camera.render()
    assert [state.index for state in frame.lights] == [0, 1]
    assert frame.ambient_color == Color(0.1, 0.2, 0.3, 1.0)


def test_default_ambient_color_is_blank():
    assert Environment().ambient_color == Color()
# camera/controls.py
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from camera.camera import Camera

MAX_PITCH = math.pi / 2
MAX_YAW = 2.0 * math.pi


@dataclass
class InputState:
    """
    Input sampled once per frame by the display loop.

    Attributes:
        forward, back, left, right, up, down: Translation keys held this frame.
        exit: The exit key was pressed.
        pointer: Current pointer position in window pixels.
        pointer_down: The drag button is held.
        scroll: Wheel delta (dx, dy) received this frame, if any.
    """
    forward: bool = False
    back: bool = False
    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False
    exit: bool = False
    pointer: Tuple[float, float] = (0.0, 0.0)
    pointer_down: bool = False
    scroll: Optional[Tuple[float, float]] = None


class CameraController:
    """
    Translates per-frame input into camera state changes.

    Keys move the origin a fixed step per frame along the camera's own axes.
    Dragging with the button held rotates by the pointer delta since the
    previous frame, with pitch clamped to [-pi/2, pi/2] and yaw clamped to
    [0, 2*pi]. The wheel changes the focal length, unclamped, so zero or
    negative focal lengths are reachable.
    """
    def __init__(self, move_speed: float = 0.1, rotation_speed: float = 0.02,
                 zoom_speed: float = 0.1):
        self.move_speed = move_speed
        self.rotation_speed = rotation_speed
        self.zoom_speed = zoom_speed
        self.pointer_pressed = False
        self.prev_pointer = (0.0, 0.0)

    def apply(self, camera: Camera, state: InputState):
        self._translate(camera, state)
        self._rotate(camera, state)
        if state.scroll is not None:
            _, scroll_y = state.scroll
            camera.focal_length -= scroll_y * self.zoom_speed
        camera.update_camera()

    def _translate(self, camera: Camera, state: InputState):
        step = self.move_speed
        if state.forward:
            camera.origin = camera.origin + camera.direction * step
        if state.back:
            camera.origin = camera.origin - camera.direction * step
        if state.right:
            camera.origin = camera.origin + camera.right * step
        if state.left:
            camera.origin = camera.origin - camera.right * step
        if state.up:
            camera.origin = camera.origin + camera.up * step
        if state.down:
            camera.origin = camera.origin - camera.up * step

    def _rotate(self, camera: Camera, state: InputState):
        if not state.pointer_down:
            self.pointer_pressed = False
            return

        if not self.pointer_pressed:
            self.prev_pointer = state.pointer
            self.pointer_pressed = True

        delta_x = state.pointer[0] - self.prev_pointer[0]
        delta_y = state.pointer[1] - self.prev_pointer[1]

        camera.yaw += self.rotation_speed * delta_x
        camera.pitch += self.rotation_speed * delta_y

        # Clamp pitch to avoid flipping over the poles
        camera.pitch = max(min(camera.pitch, MAX_PITCH), -MAX_PITCH)
        camera.yaw = max(min(camera.yaw, MAX_YAW), 0.0)

        self.prev_pointer = state.pointer

# camera/camera.py
import math
from raytracing.core.vector import Point3, Vector3

DEFAULT_EYE = Point3(0, 0, 10)
DEFAULT_LOOK_AT = Point3(0, 0, 0)
DEFAULT_UP = Vector3(0, 1, 0)
DEFAULT_FOV = 50.0


class Camera:
    """
    Pinhole camera looking from `eye` towards `look_at`.

    The view plane is laid out in pixel units: stepping one pixel right or
    down moves the ray direction by one unit along the horizontal or vertical
    basis vector, starting from the top-left corner of the view plane. The
    basis is recomputed whenever a viewing parameter changes.
    """
    def __init__(self, width: int, height: int, eye: Vector3 = DEFAULT_EYE,
                 look_at: Vector3 = DEFAULT_LOOK_AT, up: Vector3 = DEFAULT_UP,
                 fov: float = DEFAULT_FOV):
        self._eye = Point3(eye.x, eye.y, eye.z)
        self._look_at = Point3(look_at.x, look_at.y, look_at.z)
        self._up = up
        self._fov = float(fov)
        self._width = width
        self._height = height
        self.update_camera()

    @property
    def eye(self) -> Point3:
        return self._eye

    @eye.setter
    def eye(self, eye: Vector3):
        self.set_view(eye=eye)

    @property
    def look_at(self) -> Point3:
        return self._look_at

    @look_at.setter
    def look_at(self, look_at: Vector3):
        self.set_view(look_at=look_at)

    @property
    def up(self) -> Vector3:
        return self._up

    @up.setter
    def up(self, up: Vector3):
        self.set_view(up=up)

    @property
    def fov(self) -> float:
        return self._fov

    @fov.setter
    def fov(self, fov: float):
        self.set_view(fov=fov)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def set_dimensions(self, width: int, height: int):
        self.set_view(width=width, height=height)

    def set_view(self, eye: Vector3 = None, look_at: Vector3 = None, up: Vector3 = None,
                 fov: float = None, width: int = None, height: int = None):
        """
        Updates any subset of the viewing parameters and recomputes the basis
        once. On failure the previous parameters are kept.
        """
        previous = (self._eye, self._look_at, self._up, self._fov, self._width, self._height)
        if eye is not None:
            self._eye = Point3(eye.x, eye.y, eye.z)
        if look_at is not None:
            self._look_at = Point3(look_at.x, look_at.y, look_at.z)
        if up is not None:
            self._up = up
        if fov is not None:
            self._fov = float(fov)
        if width is not None:
            self._width = width
        if height is not None:
            self._height = height
        try:
            self.update_camera()
        except ValueError:
            self._eye, self._look_at, self._up, self._fov, self._width, self._height = previous
            raise

    def update_camera(self):
        """Recomputes the camera's basis vectors and view-plane corner."""
        if self._width <= 0 or self._height <= 0:
            raise ValueError(f"Camera dimensions must be positive, got {self._width}x{self._height}")
        if not 0 < self._fov < 180:
            raise ValueError(f"Field of view must be between 0 and 180 degrees, got {self._fov}")

        look = self._look_at - self._eye
        horizontal = look.cross(self._up)
        # Vertical comes from look x horizontal, so an up vector that is not
        # perpendicular to the look direction still gives an orthogonal basis.
        vertical = look.cross(horizontal)
        if horizontal.length() == 0 or vertical.length() == 0:
            raise ValueError("Degenerate camera: look direction is zero or parallel to the up vector")
        self.horizontal = horizontal.normalize()
        self.vertical = vertical.normalize()

        self.focal_length = self._width / (2 * math.tan(math.radians(0.5 * self._fov)))
        self.top_left = (look.normalize() * self.focal_length
                         - (self.horizontal * self._width + self.vertical * self._height) * 0.5)

    def direction(self, i: int, j: int) -> Vector3:
        """
        Unnormalised direction of the ray through pixel (i, j), with i counted
        from the left and j from the top.
        """
        return self.horizontal * i + self.vertical * j + self.top_left

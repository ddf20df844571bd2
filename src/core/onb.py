# core/onb.py
from core.vector import Vector3


class ONB:
    """
    Orthonormal basis whose w axis is a given direction (usually a surface normal).
    """
    def __init__(self, w: Vector3):
        unit_w = w.normalize()
        # Helper axis must not be nearly parallel to w.
        a = Vector3(0, 1, 0) if abs(unit_w.x) > 0.9 else Vector3(1, 0, 0)
        v = unit_w.cross(a).normalize()
        u = unit_w.cross(v)
        self.u = u
        self.v = v
        self.w = unit_w

    def local(self, a: Vector3) -> Vector3:
        """Maps local (u, v, w) coordinates into world space."""
        return self.u * a.x + self.v * a.y + self.w * a.z

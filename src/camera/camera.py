# camera/camera.py
import math
from core.vector import Vector3
from core.ray import Ray
from core.utils import degrees_to_radians, random_in_unit_disk


class Camera:
    def __init__(self, lookfrom: Vector3, lookat: Vector3, vup: Vector3,
                 vfov: float, aspect_ratio: float, aperture: float = 0.0,
                 focus_dist: float = 10.0, time0: float = 0.0, time1: float = 0.0):
        self.lookfrom = lookfrom
        self.lookat = lookat
        self.vup = vup
        self.vfov = vfov  # Vertical field of view in degrees
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture  # Lens aperture for depth of field
        self.focus_dist = focus_dist  # Distance to focus plane
        self.lens_radius = aperture / 2.0
        self.time0 = time0  # Shutter open/close times
        self.time1 = time1
        self.update_camera()

    def update_camera(self):
        """Updates the camera's basis vectors and viewport."""
        h = math.tan(degrees_to_radians(self.vfov) / 2)
        viewport_height = 2.0 * h
        viewport_width = self.aspect_ratio * viewport_height

        self.w = (self.lookfrom - self.lookat).normalize()
        self.u = self.vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        self.origin = self.lookfrom
        # Scale by focus distance
        self.horizontal = self.u * viewport_width * self.focus_dist
        self.vertical = self.v * viewport_height * self.focus_dist
        self.lower_left_corner = (self.origin -
                                  self.horizontal * 0.5 -
                                  self.vertical * 0.5 -
                                  self.w * self.focus_dist)

    def get_ray(self, s: float, t: float, rng) -> Ray:
        """
        Generates a ray through viewport coordinates (s, t) in [0, 1]^2, with
        (0, 0) at the lower-left corner, cast at a random shutter time.
        """
        if self.lens_radius > 0:
            rd = random_in_unit_disk(rng) * self.lens_radius
            offset = self.u * rd.x + self.v * rd.y
        else:
            offset = Vector3(0, 0, 0)

        ray_origin = self.origin + offset
        ray_direction = (self.lower_left_corner +
                         self.horizontal * s +
                         self.vertical * t -
                         ray_origin)
        time = self.time0 if self.time1 <= self.time0 else rng.uniform(self.time0, self.time1)
        return Ray(ray_origin, ray_direction, time)

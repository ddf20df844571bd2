# scenes/builtin.py
import logging
from typing import Optional

from camera.camera import Camera
from core.errors import ConfigurationError
from core.vector import Vector3
from geometry.aarect import XYRect, XZRect, YZRect
from geometry.box import Box
from geometry.constant_medium import ConstantMedium
from geometry.hittable import Hittable
from geometry.sphere import MovingSphere, Sphere
from geometry.transforms import FlipFace, RotateY, Translate
from geometry.world import HittableList
from materials.dielectric import Dielectric
from materials.diffuse_light import DiffuseLight
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.presets import ColorPresets, DielectricPresets, LightPresets, MetalPresets, TexturePresets
from materials.texture_loader import create_image_material
from renderer.background import SkyGradient, SolidBackground
from scenes.description import SceneDescription

logger = logging.getLogger(__name__)

BLACK = Vector3(0.0, 0.0, 0.0)
UP = Vector3(0.0, 1.0, 0.0)


def _finish(objects: HittableList, lights, camera: Camera, background, rng,
            time0: float = 0.0, time1: float = 0.0) -> SceneDescription:
    world = objects.build_bvh(time0, time1, rng=rng)
    logger.debug("Built BVH over %d objects", len(objects))
    return SceneDescription(world, lights, camera, background, time0, time1)


def _book_camera(aspect_ratio: float, aperture: float = 0.0, time1: float = 0.0) -> Camera:
    return Camera(Vector3(13, 2, 3), Vector3(0, 0, 0), UP, 20.0, aspect_ratio,
                  aperture=aperture, focus_dist=10.0, time0=0.0, time1=time1)


def _cornell_camera(aspect_ratio: float, time1: float = 0.0) -> Camera:
    return Camera(Vector3(278, 278, -800), Vector3(278, 278, 0), UP, 40.0, aspect_ratio,
                  aperture=0.0, focus_dist=10.0, time0=0.0, time1=time1)


def _cornell_walls(objects: HittableList, light_material, light_rect) -> Hittable:
    red = ColorPresets.matte(ColorPresets.RED)
    white = ColorPresets.matte(ColorPresets.WHITE)
    green = ColorPresets.matte(ColorPresets.GREEN)

    objects.add(YZRect(0, 555, 0, 555, 555, green))
    objects.add(YZRect(0, 555, 0, 555, 0, red))
    # The ceiling light is one-sided; flip it so it shines down into the box.
    light = XZRect(*light_rect, 554, light_material)
    objects.add(FlipFace(light))
    objects.add(XZRect(0, 555, 0, 555, 0, white))
    objects.add(XZRect(0, 555, 0, 555, 555, white))
    objects.add(XYRect(0, 555, 0, 555, 555, white))
    return light


def random_spheres(aspect_ratio: float, rng, texture_path: Optional[str] = None) -> SceneDescription:
    """Checkered ground with a grid of small random spheres and three large ones."""
    objects = HittableList()
    checker = TexturePresets.checkerboard()
    objects.add(Sphere(Vector3(0, -1000, 0), 1000, Lambertian(checker)))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Vector3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - Vector3(4, 0.2, 0)).length() <= 0.9:
                continue
            if choose_mat < 0.8:
                albedo = Vector3.random(rng) * Vector3.random(rng)
                center2 = center + Vector3(0, 0.5 * rng.random(), 0)
                objects.add(MovingSphere(center, center2, 0.0, 1.0, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                albedo = Vector3.random(rng, 0.5, 1.0)
                fuzz = 0.5 * rng.random()
                objects.add(Sphere(center, 0.2, Metal(albedo, fuzz)))
            else:
                objects.add(Sphere(center, 0.2, DielectricPresets.glass()))

    objects.add(Sphere(Vector3(0, 1, 0), 1.0, DielectricPresets.glass()))
    objects.add(Sphere(Vector3(-4, 1, 0), 1.0, Lambertian(Vector3(0.4, 0.2, 0.1))))
    objects.add(Sphere(Vector3(4, 1, 0), 1.0, Metal(Vector3(0.7, 0.6, 0.5), 0.0)))

    camera = _book_camera(aspect_ratio, aperture=0.1, time1=1.0)
    return _finish(objects, None, camera, SolidBackground(ColorPresets.SKY), rng, 0.0, 1.0)


def two_spheres(aspect_ratio: float, rng, texture_path: Optional[str] = None) -> SceneDescription:
    checker = Lambertian(TexturePresets.checkerboard())
    objects = HittableList([
        Sphere(Vector3(0, -10, 0), 10, checker),
        Sphere(Vector3(0, 10, 0), 10, checker),
    ])
    return _finish(objects, None, _book_camera(aspect_ratio), SolidBackground(ColorPresets.SKY), rng)


def _perlin_spheres(rng) -> HittableList:
    marble = Lambertian(TexturePresets.marble(4.0, seed=rng.randrange(2 ** 32)))
    return HittableList([
        Sphere(Vector3(0, -1000, 0), 1000, marble),
        Sphere(Vector3(0, 2, 0), 2, marble),
    ])


def two_perlin_spheres(aspect_ratio: float, rng, texture_path: Optional[str] = None) -> SceneDescription:
    objects = _perlin_spheres(rng)
    return _finish(objects, None, _book_camera(aspect_ratio), SolidBackground(ColorPresets.SKY), rng)


def earth(aspect_ratio: float, rng, texture_path: Optional[str] = None) -> SceneDescription:
    """A globe wrapped in an equirectangular image; needs ``texture_path``."""
    if texture_path is None:
        raise ConfigurationError("The 'earth' scene needs an image texture (--texture PATH)")
    surface = create_image_material(texture_path, Lambertian)
    objects = HittableList([Sphere(Vector3(0, 0, 0), 2, surface)])
    return _finish(objects, None, _book_camera(aspect_ratio), SolidBackground(ColorPresets.SKY), rng)


def simple_light(aspect_ratio: float, rng, texture_path: Optional[str] = None) -> SceneDescription:
    objects = _perlin_spheres(rng)
    light_material = LightPresets.white(4.0)
    panel = XYRect(3, 5, 1, 3, -2, light_material)
    bulb = Sphere(Vector3(0, 7, 0), 2, light_material)
    objects.add(panel)
    objects.add(bulb)

    camera = Camera(Vector3(26, 3, 6), Vector3(0, 2, 0), UP, 20.0, aspect_ratio)
    return _finish(objects, HittableList([panel, bulb]), camera, SolidBackground(BLACK), rng)


def cornell_box(aspect_ratio: float, rng, texture_path: Optional[str] = None) -> SceneDescription:
    """Cornell box with a rotated aluminium block and a glass sphere."""
    objects = HittableList()
    light = _cornell_walls(objects, LightPresets.white(15.0), (213, 343, 227, 332))

    block = Box(Vector3(0, 0, 0), Vector3(165, 330, 165), MetalPresets.aluminum())
    objects.add(Translate(RotateY(block, 15), Vector3(265, 0, 295)))
    glass_ball = Sphere(Vector3(190, 90, 190), 90, DielectricPresets.glass())
    objects.add(glass_ball)

    lights = HittableList([light, glass_ball])
    return _finish(objects, lights, _cornell_camera(aspect_ratio), SolidBackground(BLACK), rng)


def cornell_smoke(aspect_ratio: float, rng, texture_path: Optional[str] = None) -> SceneDescription:
    """Cornell box whose two blocks are filled with dark and light smoke."""
    objects = HittableList()
    light = _cornell_walls(objects, LightPresets.white(7.0), (113, 443, 127, 432))

    white = ColorPresets.matte(ColorPresets.WHITE)
    tall = Translate(RotateY(Box(Vector3(0, 0, 0), Vector3(165, 330, 165), white), 15),
                     Vector3(265, 0, 295))
    short = Translate(RotateY(Box(Vector3(0, 0, 0), Vector3(165, 165, 165), white), -18),
                      Vector3(130, 0, 65))
    objects.add(ConstantMedium(tall, 0.01, BLACK))
    objects.add(ConstantMedium(short, 0.01, Vector3(1, 1, 1)))

    return _finish(objects, light, _cornell_camera(aspect_ratio), SolidBackground(BLACK), rng)


def final_scene(aspect_ratio: float, rng, texture_path: Optional[str] = None) -> SceneDescription:
    """Everything at once: boxes, motion blur, glass, smoke, noise and an instanced cluster."""
    objects = HittableList()

    ground = Lambertian(Vector3(0.48, 0.83, 0.53))
    ground_boxes = HittableList()
    boxes_per_side = 20
    for i in range(boxes_per_side):
        for j in range(boxes_per_side):
            w = 100.0
            x0 = -1000.0 + i * w
            z0 = -1000.0 + j * w
            y1 = rng.uniform(1, 101)
            ground_boxes.add(Box(Vector3(x0, 0, z0), Vector3(x0 + w, y1, z0 + w), ground))
    objects.add(ground_boxes.build_bvh(0.0, 1.0, rng=rng))

    light = XZRect(123, 423, 147, 412, 554, LightPresets.white(7.0))
    objects.add(FlipFace(light))

    center1 = Vector3(400, 400, 200)
    center2 = center1 + Vector3(30, 0, 0)
    objects.add(MovingSphere(center1, center2, 0.0, 1.0, 50, Lambertian(Vector3(0.7, 0.3, 0.1))))

    objects.add(Sphere(Vector3(260, 150, 45), 50, DielectricPresets.glass()))
    objects.add(Sphere(Vector3(0, 150, 145), 50, MetalPresets.brushed()))

    boundary = Sphere(Vector3(360, 150, 145), 70, DielectricPresets.glass())
    objects.add(boundary)
    objects.add(ConstantMedium(boundary, 0.2, Vector3(0.2, 0.4, 0.9)))
    mist = Sphere(Vector3(0, 0, 0), 5000, Dielectric(1.5))
    objects.add(ConstantMedium(mist, 0.0001, Vector3(1, 1, 1)))

    if texture_path is not None:
        objects.add(Sphere(Vector3(400, 200, 400), 100, create_image_material(texture_path, Lambertian)))
    else:
        logger.info("No texture given; final_scene is rendered without the globe")
    objects.add(Sphere(Vector3(220, 280, 300), 80, Lambertian(TexturePresets.marble(0.1, seed=rng.randrange(2 ** 32)))))

    white = ColorPresets.matte(ColorPresets.WHITE)
    cluster = HittableList()
    for _ in range(1000):
        cluster.add(Sphere(Vector3.random(rng, 0, 165), 10, white))
    objects.add(Translate(RotateY(cluster.build_bvh(0.0, 1.0, rng=rng), 15), Vector3(-100, 270, 395)))

    camera = Camera(Vector3(478, 278, -600), Vector3(278, 278, 0), UP, 40.0, aspect_ratio,
                    time0=0.0, time1=1.0)
    return _finish(objects, light, camera, SolidBackground(BLACK), rng, 0.0, 1.0)


def single_sphere(aspect_ratio: float, rng, texture_path: Optional[str] = None) -> SceneDescription:
    """
    One white diffuse sphere in front of a pinhole camera looking down -z.

    The sky brightens towards +z, behind the camera, so the sphere's visible
    face is well lit while rays that miss it see the dark end of the gradient.
    """
    objects = HittableList([Sphere(Vector3(0, 0, -1), 0.5, Lambertian(Vector3(0.9, 0.9, 0.9)))])
    sky = SkyGradient(bottom=Vector3(0.05, 0.05, 0.05), top=Vector3(0.5, 0.7, 1.0),
                      up=Vector3(0.0, 0.0, 1.0))
    camera = Camera(Vector3(0, 0, 0), Vector3(0, 0, -1), UP, 90.0, aspect_ratio)
    return _finish(objects, None, camera, sky, rng)

# scenes/__init__.py
import random
from typing import Optional

from core.errors import ConfigurationError
from scenes.builtin import (cornell_box, cornell_smoke, earth, final_scene, random_spheres,
                            simple_light, single_sphere, two_perlin_spheres, two_spheres)
from scenes.description import SceneDescription

SCENES = {
    "random_spheres": random_spheres,
    "two_spheres": two_spheres,
    "two_perlin_spheres": two_perlin_spheres,
    "earth": earth,
    "simple_light": simple_light,
    "cornell_box": cornell_box,
    "cornell_smoke": cornell_smoke,
    "final_scene": final_scene,
    "single_sphere": single_sphere,
}


def get_scene(name: str, aspect_ratio: float = 16.0 / 9.0, seed: Optional[int] = None,
              texture_path: Optional[str] = None) -> SceneDescription:
    """
    Builds a named scene. ``seed`` fixes the random layout and the BVH split
    axes, so the same seed always yields the same scene.
    """
    try:
        builder = SCENES[name]
    except KeyError:
        raise ConfigurationError(f"Unknown scene {name!r}; choose from {sorted(SCENES)}") from None
    return builder(aspect_ratio, random.Random(seed), texture_path)

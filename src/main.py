# main.py
import argparse
import logging
import math
import random
import sys
from typing import List, Optional

from core.errors import ConfigurationError, RayTracerError
from core.montecarlo import (estimate_pi, integrate_cos_cubed, integrate_cos_squared_over_sphere,
                             integrate_x_squared)
from renderer.export import save_image
from renderer.raytracer import Renderer
from renderer.settings import QUALITY_PRESETS, RenderSettings
from scenes import SCENES, get_scene

logger = logging.getLogger("pathtracer")

ESTIMATORS = ("pi", "x_squared", "sphere", "cos_cubed")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pathtracer",
                                     description="Offline Monte-Carlo path tracer.")
    parser.add_argument("--list-scenes", action="store_true", help="List the built-in scenes and exit")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Log per-scanline progress and BVH details")
    sub = parser.add_subparsers(dest="command")

    render = sub.add_parser("render", help="Render a built-in scene to a .ppm or .png file")
    render.add_argument("--scene", default="cornell_box", choices=sorted(SCENES))
    render.add_argument("--width", type=int, default=400)
    render.add_argument("--aspect-ratio", type=float, default=16.0 / 9.0)
    render.add_argument("--samples", type=int, default=100, help="Samples per pixel")
    render.add_argument("--max-depth", type=int, default=50)
    render.add_argument("--quality", choices=sorted(QUALITY_PRESETS),
                        help="Preset that overrides --samples and --max-depth")
    render.add_argument("--seed", type=int, default=None)
    render.add_argument("--workers", type=int, default=1)
    render.add_argument("--texture", default=None, help="Image used by the 'earth' and 'final_scene' scenes")
    render.add_argument("--output", "-o", default="image.ppm")

    estimate = sub.add_parser("estimate", help="Run one of the Monte-Carlo estimators")
    estimate.add_argument("estimator", choices=ESTIMATORS)
    estimate.add_argument("--samples", type=int, default=1_000_000)
    estimate.add_argument("--seed", type=int, default=None)
    estimate.add_argument("--uniform", action="store_true",
                          help="cos_cubed: sample the hemisphere uniformly instead of by cosine")
    return parser


def setup_logging(verbosity: int):
    level = logging.DEBUG if verbosity else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s",
                        stream=sys.stderr)


def run_render(args) -> None:
    settings = RenderSettings(width=args.width, aspect_ratio=args.aspect_ratio,
                              samples_per_pixel=args.samples, max_depth=args.max_depth,
                              seed=args.seed, workers=args.workers)
    if args.quality:
        settings = settings.with_quality(args.quality)
    # Scene and output format are validated before any pixel is traced.
    if not args.output.lower().endswith((".ppm", ".png")):
        raise ConfigurationError(f"Unsupported output file {args.output!r}; use .ppm or .png")
    scene = get_scene(args.scene, settings.aspect_ratio, seed=args.seed, texture_path=args.texture)
    image = Renderer(settings).render(scene)
    save_image(image, args.output)


def run_estimate(args) -> None:
    rng = random.Random(args.seed)
    n = args.samples
    if args.estimator == "pi":
        regular, stratified = estimate_pi(max(1, int(math.sqrt(n))), rng)
        print(f"Regular    Estimate of Pi = {regular:.12f}")
        print(f"Stratified Estimate of Pi = {stratified:.12f}")
    elif args.estimator == "x_squared":
        print(f"I = {integrate_x_squared(n, rng):.12f} (exact {8.0 / 3.0:.12f})")
    elif args.estimator == "sphere":
        print(f"I = {integrate_cos_squared_over_sphere(n, rng):.12f} (exact {4.0 * math.pi / 3.0:.12f})")
    else:
        result = integrate_cos_cubed(n, rng, importance=not args.uniform)
        print(f"Pi/2     = {math.pi / 2.0:.12f}")
        print(f"Estimate = {result:.12f}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.list_scenes:
        for name in sorted(SCENES):
            print(name)
        return 0
    if args.command is None:
        parser.print_help()
        return 1

    try:
        if args.command == "render":
            run_render(args)
        else:
            run_estimate(args)
    except RayTracerError as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

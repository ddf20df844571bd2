"""Tests for materials and textures.

Tests cover:
- Lambertian: cosine PDF, scattering density, texture lookup
- Metal: mirror reflection, absorption below the surface, fuzz clamp
- Dielectric: refraction, total internal reflection
- DiffuseLight: one-sided emission
- Isotropic: uniform phase function
- Textures: solid, checker, Perlin noise, image loading errors
"""
import math

import numpy as np
import pytest
from PIL import Image

from core.errors import TextureLoadError
from core.perlin import Perlin
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import HitRecord
from materials.dielectric import Dielectric
from materials.diffuse_light import DiffuseLight
from materials.isotropic import Isotropic
from materials.lambertian import Lambertian
from materials.material import Material
from materials.metal import Metal
from materials.texture_loader import create_image_material, load_texture
from materials.textures import CheckerTexture, ImageTexture, NoiseTexture, SolidColor


def surface_hit(normal=Vector3(0, 1, 0), front_face=True, p=Vector3(0, 0, 0), u=0.5, v=0.5):
    return HitRecord(p=p, normal=normal, t=1.0, front_face=front_face, u=u, v=v)


class TestLambertian:
    def test_scatter_returns_cosine_pdf(self, rng):
        mat = Lambertian(Vector3(0.5, 0.25, 1.0))
        srec = mat.scatter(Ray(Vector3(0, 1, 0), Vector3(0, -1, 0)), surface_hit(), rng)
        assert not srec.skip_pdf
        assert tuple(srec.attenuation) == (0.5, 0.25, 1.0)
        for _ in range(100):
            assert srec.pdf.generate(rng).y >= 0

    def test_scattering_pdf(self):
        mat = Lambertian(Vector3(1, 1, 1))
        rec = surface_hit()
        ray_in = Ray(Vector3(0, 1, 0), Vector3(0, -1, 0))
        assert mat.scattering_pdf(ray_in, rec, Ray(rec.p, Vector3(0, 3, 0))) == pytest.approx(1 / math.pi)
        assert mat.scattering_pdf(ray_in, rec, Ray(rec.p, Vector3(0, -1, 0))) == 0.0

    def test_textured_albedo(self, rng):
        checker = CheckerTexture(Vector3(1, 0, 0), Vector3(0, 0, 1), scale=1.0)
        mat = Lambertian(checker)
        p = Vector3(1, 1, 1)
        srec = mat.scatter(Ray(Vector3(0, 5, 0), Vector3(0, -1, 0)), surface_hit(p=p), rng)
        assert tuple(srec.attenuation) == tuple(checker.value(0, 0, p))

    def test_does_not_emit(self):
        rec = surface_hit()
        assert tuple(Lambertian(Vector3(1, 1, 1)).emitted(None, rec, 0, 0, rec.p)) == (0, 0, 0)


class TestMetal:
    def test_perfect_mirror(self, rng):
        mat = Metal(Vector3(0.8, 0.8, 0.8), 0.0)
        srec = mat.scatter(Ray(Vector3(-1, 1, 0), Vector3(1, -1, 0)), surface_hit(), rng)
        assert srec.skip_pdf
        d = srec.skip_pdf_ray.direction
        assert tuple(d) == pytest.approx((1 / math.sqrt(2), 1 / math.sqrt(2), 0))

    def test_fuzz_is_clamped(self):
        assert Metal(Vector3(1, 1, 1), 5.0).fuzz == 1

    def test_absorbs_when_scattered_below_surface(self, rng):
        # Grazing incidence with maximum fuzz: some samples end up below the surface.
        mat = Metal(Vector3(1, 1, 1), 1.0)
        ray_in = Ray(Vector3(-1, 0.001, 0), Vector3(1, -0.001, 0))
        outcomes = [mat.scatter(ray_in, surface_hit(), rng) for _ in range(200)]
        assert any(o is None for o in outcomes)
        for o in outcomes:
            if o is not None:
                assert o.skip_pdf_ray.direction.y > 0


class TestDielectric:
    def test_head_on_mostly_refracts(self, rng):
        mat = Dielectric(1.5)
        ray_in = Ray(Vector3(0, 1, 0), Vector3(0, -1, 0))
        through = 0
        for _ in range(1000):
            srec = mat.scatter(ray_in, surface_hit(), rng)
            assert srec.skip_pdf
            assert tuple(srec.attenuation) == (1.0, 1.0, 1.0)
            if srec.skip_pdf_ray.direction.y < 0:
                through += 1
        # Schlick reflectance at normal incidence is 4%.
        assert 930 < through < 990

    def test_total_internal_reflection(self, rng):
        mat = Dielectric(1.5)
        # Leaving the glass (back face) at a grazing angle.
        direction = Vector3(1, -0.1, 0).normalize()
        rec = surface_hit(normal=Vector3(0, 1, 0), front_face=False)
        for _ in range(50):
            srec = mat.scatter(Ray(Vector3(0, 0.1, 0), direction), rec, rng)
            assert srec.skip_pdf_ray.direction.y > 0

    def test_refraction_obeys_snell(self):
        mat = Dielectric(1.5)

        class NeverReflect:
            def random(self):
                return 1.0

        direction = Vector3(math.sin(0.5), -math.cos(0.5), 0)
        srec = mat.scatter(Ray(Vector3(0, 1, 0), direction), surface_hit(), NeverReflect())
        out = srec.skip_pdf_ray.direction.normalize()
        assert math.sin(0.5) == pytest.approx(1.5 * out.x)


class TestDiffuseLight:
    def test_front_face_emits(self):
        mat = DiffuseLight(Vector3(4, 4, 4))
        rec = surface_hit(front_face=True)
        assert tuple(mat.emitted(None, rec, rec.u, rec.v, rec.p)) == (4, 4, 4)

    def test_back_face_is_black(self):
        mat = DiffuseLight(Vector3(4, 4, 4))
        rec = surface_hit(front_face=False)
        assert tuple(mat.emitted(None, rec, rec.u, rec.v, rec.p)) == (0, 0, 0)

    def test_does_not_scatter(self, rng):
        assert DiffuseLight(Vector3(1, 1, 1)).scatter(None, surface_hit(), rng) is None


class TestIsotropic:
    def test_uniform_phase(self, rng):
        mat = Isotropic(Vector3(0.5, 0.5, 0.5))
        rec = surface_hit()
        srec = mat.scatter(Ray(Vector3(0, 0, 0), Vector3(1, 0, 0)), rec, rng)
        assert not srec.skip_pdf
        d = srec.pdf.generate(rng)
        assert srec.pdf.value(d) == pytest.approx(1 / (4 * math.pi))
        assert mat.scattering_pdf(None, rec, Ray(rec.p, d)) == pytest.approx(1 / (4 * math.pi))


class TestBaseMaterial:
    def test_defaults(self, rng):
        rec = surface_hit()
        mat = Material()
        assert mat.scatter(None, rec, rng) is None
        assert mat.scattering_pdf(None, rec, None) == 0.0
        assert tuple(mat.emitted(None, rec, 0, 0, rec.p)) == (0, 0, 0)


class TestTextures:
    def test_solid_color(self):
        assert tuple(SolidColor(Vector3(0.1, 0.2, 0.3)).value(0.9, 0.1, Vector3(5, 5, 5))) == (0.1, 0.2, 0.3)

    def test_checker_alternates(self):
        checker = CheckerTexture(Vector3(1, 1, 1), Vector3(0, 0, 0), scale=1.0)
        a = checker.value(0, 0, Vector3(1, 1, 1))         # all sines positive
        b = checker.value(0, 0, Vector3(-1, 1, 1))        # one negative
        assert tuple(a) == (1, 1, 1)
        assert tuple(b) == (0, 0, 0)

    def test_perlin_is_deterministic_per_seed(self):
        p = Vector3(1.3, -2.7, 0.45)
        assert Perlin(3).noise(p) == Perlin(3).noise(p)
        assert Perlin(3).turb(p) == Perlin(3).turb(p)

    def test_perlin_vanishes_on_lattice(self):
        noise = Perlin(1)
        assert noise.noise(Vector3(2, -3, 7)) == pytest.approx(0.0, abs=1e-12)

    def test_perlin_range(self, rng):
        noise = Perlin(11)
        for _ in range(200):
            value = noise.noise(Vector3.random(rng, -20, 20))
            assert -1.5 < value < 1.5

    def test_noise_texture_is_grey_in_unit_range(self, rng):
        tex = NoiseTexture(4.0, seed=2)
        for _ in range(50):
            c = tex.value(0, 0, Vector3.random(rng, -5, 5))
            assert c.x == c.y == c.z
            assert 0.0 <= c.x <= 1.0

    def test_image_texture(self, tmp_path):
        path = tmp_path / "tex.png"
        pixels = np.zeros((2, 2, 3), dtype=np.uint8)
        pixels[0, 0] = (255, 0, 0)      # top-left
        pixels[1, 1] = (0, 0, 255)      # bottom-right
        Image.fromarray(pixels).save(path)

        tex = ImageTexture(str(path))
        assert (tex.width, tex.height) == (2, 2)
        assert tuple(tex.value(0.0, 1.0, Vector3(0, 0, 0))) == (1.0, 0.0, 0.0)
        assert tuple(tex.value(0.99, 0.0, Vector3(0, 0, 0))) == (0.0, 0.0, 1.0)
        # UVs outside [0, 1] are clamped.
        assert tuple(tex.value(-3.0, 7.0, Vector3(0, 0, 0))) == (1.0, 0.0, 0.0)

    def test_missing_image_raises(self, tmp_path):
        with pytest.raises(TextureLoadError):
            ImageTexture(str(tmp_path / "missing.jpg"))
        with pytest.raises(TextureLoadError):
            load_texture(str(tmp_path / "missing.jpg"))

    def test_unreadable_image_raises(self, tmp_path):
        path = tmp_path / "broken.png"
        path.write_bytes(b"definitely not an image")
        with pytest.raises(TextureLoadError):
            ImageTexture(str(path))

    def test_create_image_material(self, tmp_path):
        path = tmp_path / "grey.png"
        Image.fromarray(np.full((4, 4, 3), 128, dtype=np.uint8)).save(path)
        mat = create_image_material(str(path), Lambertian)
        assert isinstance(mat, Lambertian)
        assert mat.texture.value(0.5, 0.5, Vector3(0, 0, 0)).x == pytest.approx(128 / 255)

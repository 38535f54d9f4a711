import unittest

from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.triangle import Triangle, Vertex
from geometry.world import Scene
from renderer.lighting import PointLight, attenuation
from renderer.shading import compute_diffuse, is_in_shadow, light_contribution, local_illumination
from vector_assertions import VectorAssertions


class AttenuationTests(VectorAssertions, unittest.TestCase):
    def test_inverse_polynomial_falloff(self) -> None:
        light = PointLight(Vector3(0.0, 0.0, 0.0), Vector3(1.0, 0.5, 0.25),
                           constant=1.0, linear=0.5, quadratic=0.25)
        self.assertVectorAlmostEqual(attenuation(light, 2.0), (1.0 / 3, 0.5 / 3, 0.25 / 3))

    def test_constant_only_light_does_not_fall_off(self) -> None:
        light = PointLight(Vector3(0.0, 0.0, 0.0), Vector3(0.3, 0.3, 0.3))
        self.assertVectorAlmostEqual(attenuation(light, 100.0), (0.3, 0.3, 0.3))

    def test_zero_denominator_contributes_nothing(self) -> None:
        light = PointLight(Vector3(0.0, 0.0, 0.0), Vector3(1.0, 1.0, 1.0),
                           constant=0.0, linear=0.0, quadratic=0.0)
        self.assertVectorAlmostEqual(attenuation(light, 3.0), (0.0, 0.0, 0.0))

        light = PointLight(Vector3(0.0, 0.0, 0.0), Vector3(1.0, 1.0, 1.0),
                           constant=0.0, linear=1.0, quadratic=0.0)
        self.assertVectorAlmostEqual(attenuation(light, 0.0), (0.0, 0.0, 0.0))

    def test_negative_coefficients_rejected(self) -> None:
        with self.assertRaises(ValueError):
            PointLight(Vector3(0.0, 0.0, 0.0), Vector3(1.0, 1.0, 1.0), linear=-0.1)


class ShadowTests(VectorAssertions, unittest.TestCase):
    def setUp(self) -> None:
        self.point = Vector3(0.0, 0.0, 0.0)
        self.normal = Vector3(0.0, 0.0, 1.0)
        self.light = PointLight(Vector3(0.0, 0.0, 10.0), Vector3(1.0, 1.0, 1.0),
                                constant=1.0, linear=0.1, quadratic=0.01)
        self.scene = Scene()
        self.scene.add_light(self.light)

    def test_occluder_between_point_and_light_blocks_it(self) -> None:
        self.scene.add(Sphere.at(Vector3(0.0, 0.0, 5.0), 1.0))
        self.assertTrue(is_in_shadow(self.scene, self.point, self.light))
        self.assertVectorAlmostEqual(
            light_contribution(self.scene, self.point, self.normal, self.light), (0.0, 0.0, 0.0)
        )

    def test_unoccluded_contribution_is_attenuated_cosine(self) -> None:
        self.assertFalse(is_in_shadow(self.scene, self.point, self.light))
        # 1 / (1 + 0.1 * 10 + 0.01 * 100)
        self.assertVectorAlmostEqual(
            light_contribution(self.scene, self.point, self.normal, self.light),
            (1.0 / 3, 1.0 / 3, 1.0 / 3),
        )

    def test_oblique_light_scales_by_cosine(self) -> None:
        light = PointLight(Vector3(3.0, 0.0, 4.0), Vector3(1.0, 1.0, 1.0))
        self.assertVectorAlmostEqual(
            light_contribution(self.scene, self.point, self.normal, light), (0.8, 0.8, 0.8)
        )

    def test_occluder_beyond_light_does_not_shadow(self) -> None:
        self.scene.add(Sphere.at(Vector3(0.0, 0.0, 20.0), 1.0))
        self.assertFalse(is_in_shadow(self.scene, self.point, self.light))

    def test_surface_does_not_shadow_itself(self) -> None:
        floor = Triangle(
            Vertex(Vector3(-5.0, -5.0, 0.0)),
            Vertex(Vector3(5.0, -5.0, 0.0)),
            Vertex(Vector3(0.0, 5.0, 0.0)),
        )
        self.scene.add(floor)
        self.assertFalse(is_in_shadow(self.scene, self.point, self.light))

    def test_triangle_occluder(self) -> None:
        self.scene.add(Triangle(
            Vertex(Vector3(-1.0, -1.0, 3.0)),
            Vertex(Vector3(1.0, -1.0, 3.0)),
            Vertex(Vector3(0.0, 1.0, 3.0)),
        ))
        self.assertTrue(is_in_shadow(self.scene, self.point, self.light))

    def test_light_behind_surface_contributes_nothing(self) -> None:
        light = PointLight(Vector3(0.0, 0.0, -10.0), Vector3(1.0, 1.0, 1.0))
        self.assertVectorAlmostEqual(
            light_contribution(self.scene, self.point, self.normal, light), (0.0, 0.0, 0.0)
        )

    def test_light_at_the_point_contributes_nothing(self) -> None:
        light = PointLight(Vector3(0.0, 0.0, 0.0), Vector3(1.0, 1.0, 1.0))
        self.assertFalse(is_in_shadow(self.scene, self.point, light))
        self.assertVectorAlmostEqual(
            light_contribution(self.scene, self.point, self.normal, light), (0.0, 0.0, 0.0)
        )


class LocalIlluminationTests(VectorAssertions, unittest.TestCase):
    def test_diffuse_sums_lights(self) -> None:
        scene = Scene()
        scene.add_light(PointLight(Vector3(0.0, 0.0, 2.0), Vector3(0.5, 0.0, 0.0)))
        scene.add_light(PointLight(Vector3(0.0, 0.0, 7.0), Vector3(0.0, 0.25, 0.0)))
        total = compute_diffuse(scene, Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 1.0))
        self.assertVectorAlmostEqual(total, (0.5, 0.25, 0.0))

    def test_ambient_and_diffuse_are_modulated_by_reflectance(self) -> None:
        scene = Scene(ambient_light=Vector3(0.2, 0.4, 0.6))
        scene.add_light(PointLight(Vector3(0.0, 0.0, 2.0), Vector3(1.0, 1.0, 1.0)))
        color = local_illumination(
            scene,
            Vector3(0.0, 0.0, 0.0),
            Vector3(0.0, 0.0, 1.0),
            ambient_reflectance=Vector3(1.0, 0.5, 0.0),
            diffuse_reflectance=Vector3(0.0, 0.5, 1.0),
        )
        self.assertVectorAlmostEqual(color, (0.2, 0.7, 1.0))


if __name__ == "__main__":
    unittest.main()

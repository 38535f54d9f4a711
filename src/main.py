# main.py
import argparse
import logging
import math

from core.transform import Transform
from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.triangle import Triangle, Vertex
from geometry.world import Scene
from materials.material import Material
from renderer.lighting import PointLight
from renderer.raytracer import Renderer, RenderSettings, default_camera
from renderer.tone_mapping import TONE_MAPPERS, save_image

logger = logging.getLogger(__name__)

def floor_quad(size: float, y: float, material: Material):
    """Two triangles spanning a square on the XZ plane, normals up."""
    half = size / 2.0
    up = Vector3(0.0, 1.0, 0.0)
    corners = [
        Vertex(Vector3(-half, y, -half), up, material=material),
        Vertex(Vector3(half, y, -half), up, material=material),
        Vertex(Vector3(half, y, half), up, material=material),
        Vertex(Vector3(-half, y, half), up, material=material),
    ]
    return [
        Triangle(corners[0], corners[2], corners[1]),
        Triangle(corners[0], corners[3], corners[2]),
    ]

def build_demo_scene() -> Scene:
    scene = Scene(ambient_light=Vector3(0.15, 0.15, 0.18))

    white = Material(Vector3(0.8, 0.8, 0.8), Vector3(0.8, 0.8, 0.8))
    red = Material(Vector3(0.6, 0.1, 0.1), Vector3(0.9, 0.2, 0.2))
    blue = Material(Vector3(0.1, 0.1, 0.5), Vector3(0.2, 0.3, 0.9))

    for triangle in floor_quad(12.0, -1.0, white):
        scene.add(triangle)

    scene.add(Sphere.at(Vector3(-1.2, 0.0, -5.0), 1.0, red))
    # Squashed ellipsoid: non-uniform scale plus a tilt
    scene.add(Sphere(0.8, blue, Transform(translation=Vector3(1.3, -0.3, -4.5),
                                          rotation=Vector3(0.0, 0.0, math.radians(25.0)),
                                          scale=Vector3(1.4, 0.7, 1.0))))

    # Vertex-colored triangle, no material on one corner
    scene.add(Triangle(
        Vertex(Vector3(-1.0, 0.0, 0.0), Vector3(0.0, 0.0, 1.0), material=red),
        Vertex(Vector3(1.0, 0.0, 0.0), Vector3(0.0, 0.0, 1.0), material=blue),
        Vertex(Vector3(0.0, 1.5, 0.0), Vector3(0.0, 0.0, 1.0)),
        Transform(translation=Vector3(0.0, 0.2, -8.0), scale=Vector3(1.5, 1.5, 1.5)),
    ))

    scene.add_light(PointLight(Vector3(2.0, 4.0, -2.0), Vector3(1.0, 0.95, 0.9),
                               constant=1.0, linear=0.05, quadratic=0.01))
    scene.add_light(PointLight(Vector3(-4.0, 2.0, 0.0), Vector3(0.3, 0.3, 0.4)))
    return scene

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Render the demo scene with the analytic raytracer.")
    parser.add_argument("--width", type=int, default=320)
    parser.add_argument("--height", type=int, default=180)
    parser.add_argument("--output", default="render.png")
    parser.add_argument("--tone-mapping", choices=sorted(TONE_MAPPERS), default="clamp")
    parser.add_argument("--exposure", type=float, default=1.0)
    parser.add_argument("--workers", type=int, default=1)
    parser.add_argument("--fov", type=float, default=60.0, help="Vertical field of view in degrees")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    settings = RenderSettings(tone_mapping=args.tone_mapping, exposure=args.exposure,
                              workers=args.workers)
    renderer = Renderer(args.width, args.height, settings)
    scene = build_demo_scene()
    camera = default_camera(renderer, Vector3(0.0, 0.5, 1.0), args.fov)

    logger.debug("Scene: %d geometries, %d lights", len(scene.geometries), len(scene.lights))
    pixels = renderer.render_image(scene, camera)
    save_image(pixels, args.output)
    print(f"Saved {args.width}x{args.height} image to {args.output}")

if __name__ == "__main__":
    main()

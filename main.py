import argparse
import math
import time

from tracer.scene import RenderSettings
from scene_builders.default_scene_builder import DefaultSceneBuilder
from scene_builders.three_spheres_scene_builder import ThreeSpheresSceneBuilder
from scene_builders.sketches import clock_face_canvas, projectile_canvas, sphere_silhouette_canvas
from renderers.base_renderer import RendererFactory

# imported for registration
import renderers.cpu_renderer  # noqa: F401

SCENE_BUILDERS = {
    'spheres': ThreeSpheresSceneBuilder,
    'default': DefaultSceneBuilder,
}

SKETCHES = {
    'projectile': projectile_canvas,
    'clock': clock_face_canvas,
    'silhouette': sphere_silhouette_canvas,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Phong ray tracer for spheres')
    parser.add_argument('--renderer', '-r',
                        choices=RendererFactory.list_available(),
                        default='cpu_raytracer',
                        help='renderer to use for world scenes')
    parser.add_argument('--scene',
                        choices=list(SCENE_BUILDERS) + list(SKETCHES),
                        default='spheres',
                        help='world scene or canvas sketch to draw')
    parser.add_argument('--width', '-w', type=int, default=500,
                        help='image width in pixels')
    parser.add_argument('--height', type=int, default=250,
                        help='image height in pixels')
    parser.add_argument('--fov', type=float, default=60.0,
                        help='field of view along the longer image side, in degrees')
    parser.add_argument('--output', '-o', default='scene.ppm',
                        help='output file; .ppm is written as plain text, other extensions through Pillow')
    parser.add_argument('--workers', '-j', type=int, default=1,
                        help='worker processes used to shade pixels')
    parser.add_argument('--no-progress', action='store_true',
                        help='disable progress output')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    settings = RenderSettings(
        width=args.width,
        height=args.height,
        field_of_view=math.radians(args.fov),
        progress=not args.no_progress,
        workers=args.workers,
    )

    start_time = time.time()

    if args.scene in SKETCHES:
        print(f"Drawing sketch: {args.scene}")
        canvas = SKETCHES[args.scene]()
    else:
        print(f"Building scene: {args.scene}")
        scene_builder = SCENE_BUILDERS[args.scene]()
        world = scene_builder.build_scene()
        camera = scene_builder.create_camera(settings)

        print(f"Creating renderer: {args.renderer}")
        renderer = RendererFactory.create(args.renderer)
        print(f"Capabilities: {', '.join(renderer.get_capabilities())}")

        canvas = renderer.render(world, camera, settings)

    canvas.save(args.output)
    print(f"Image saved: {args.output}")

    elapsed = time.time() - start_time
    minutes = int(elapsed // 60)
    seconds = elapsed % 60
    print(f"Total time: {minutes}m {seconds:.2f}s")


if __name__ == "__main__":
    main()

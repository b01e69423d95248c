# main.py
import argparse
import sys

from spheretracer.config import QUALITY_LEVELS, TONE_MAPPINGS, RenderSettings
from spheretracer.image_io import save_image
from spheretracer.renderer.sampler import Renderer
from spheretracer.renderer.tone_mapping import tone_map
from spheretracer.scenes import SceneDescription, SceneError, load_scene, reference_scene

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spheretracer",
        description="Render a scene of spheres with a Monte Carlo path tracer.")
    parser.add_argument("--scene", help="JSON scene file (default: built-in reference scene)")
    parser.add_argument("-o", "--output", default="output.ppm",
                        help="output image; .ppm is plain text, other extensions use Pillow")
    parser.add_argument("--width", type=int, default=800)
    parser.add_argument("--height", type=int, default=600)
    parser.add_argument("--samples", type=int, help="samples per pixel")
    parser.add_argument("--max-depth", type=int, help="maximum bounces per path")
    parser.add_argument("--fov", type=float, help="vertical field of view in degrees")
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--workers", type=int, default=1,
                        help="worker processes rendering rows in parallel")
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS), default="high")
    parser.add_argument("--tone-mapping", choices=TONE_MAPPINGS, default="gamma")
    parser.add_argument("--preview", action="store_true",
                        help="show the result in a window after rendering")
    parser.add_argument("-q", "--quiet", action="store_true", help="no progress output")
    return parser

def settings_from_args(args, description: SceneDescription) -> RenderSettings:
    overrides = {
        "width": args.width,
        "height": args.height,
        "seed": args.seed,
        "workers": args.workers,
        "tone_mapping": args.tone_mapping,
        "verbose": not args.quiet,
    }
    if args.samples is not None:
        overrides["samples_per_pixel"] = args.samples
    if args.max_depth is not None:
        overrides["max_depth"] = args.max_depth
    fov = args.fov if args.fov is not None else description.fov
    if fov is not None:
        overrides["fov"] = fov
    return RenderSettings.from_quality(args.quality, **overrides)

def run(args) -> int:
    if args.scene:
        description = load_scene(args.scene)
    else:
        description = SceneDescription(reference_scene())

    settings = settings_from_args(args, description)
    renderer = Renderer(settings)
    camera = renderer.make_camera(description.camera_position,
                                  yaw=description.yaw, pitch=description.pitch)

    linear = renderer.render(description.scene, camera)
    pixels = tone_map(linear, settings.tone_mapping)
    path = save_image(args.output, pixels)
    if settings.verbose:
        print(f"Image written to {path}")

    if args.preview:
        from spheretracer.preview import show_image
        show_image(pixels)
    return 0

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return run(args)
    except (SceneError, ValueError, FileNotFoundError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

if __name__ == "__main__":
    sys.exit(main())

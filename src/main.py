# main.py
import argparse
import os
import sys
from renderer.evaluation import DEFAULT_SHADOW_THRESHOLD, evaluate_image
from renderer.image import Image
from renderer.raytracer import BACKENDS, Renderer
from scenes.cases import CASES, get_case
from scenes.config import build_scene, load_scene

DEFAULT_OUTPUT = "rtcase2"

def resolve_scene_config(scene_arg: str) -> dict:
    """A built-in case name, or a path to a JSON scene file."""
    if scene_arg in CASES:
        return get_case(scene_arg)
    return load_scene(scene_arg)

def run_render(args) -> int:
    verbose = not args.quiet
    config = resolve_scene_config(args.scene)
    scene, camera, width, height = build_scene(config, args.width, args.height)
    threshold = args.threshold
    if threshold is None:
        threshold = config.get("render", {}).get("threshold", DEFAULT_SHADOW_THRESHOLD)

    if verbose:
        name = config.get("name", os.path.basename(args.scene))
        print(f"=== {name} ===")
        print(f"Image: {width} x {height}")
        print(f"Objects: {len(scene.objects)}, lights: {len(scene.lights)}, backend: {args.backend}")

    renderer = Renderer(width, height, backend=args.backend, mask_light=args.mask_light, verbose=verbose)
    result = renderer.render(scene, camera)

    result.image.save_ppm(f"{args.output}.ppm", verbose=verbose)
    result.shadow_mask.save_ppm(f"{args.output}_shadowmask.ppm", verbose=verbose)
    if args.png:
        result.image.save_png(f"{args.output}.png", verbose=verbose)
        result.shadow_mask.save_png(f"{args.output}_shadowmask.png", verbose=verbose)

    metrics = evaluate_image(result.image, threshold, result.render_time_ms)
    print()
    print(metrics.report(threshold))

    if args.preview:
        from renderer.preview import show_preview
        show_preview(result.image, result.shadow_mask, config.get("name", "Hard Shadow Ray Tracer"))
    return 0

def run_evaluate(args) -> int:
    image = Image.load(args.image)
    metrics = evaluate_image(image, args.threshold)
    print(f"Image: {image.width} x {image.height}")
    print(metrics.report(args.threshold))
    return 0

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Hard-shadow ray tracer with shadow-area evaluation")
    sub = parser.add_subparsers(dest="command")

    render = sub.add_parser("render", help="Render a scene and report its shadow metrics")
    render.add_argument("--scene", default="case1",
                        help=f"Built-in scene ({', '.join(sorted(CASES))}) or path to a JSON scene file")
    render.add_argument("--width", type=int, default=None, help="Override the image width")
    render.add_argument("--height", type=int, default=None, help="Override the image height")
    render.add_argument("--output", default=DEFAULT_OUTPUT,
                        help="Output prefix; writes PREFIX.ppm and PREFIX_shadowmask.ppm")
    render.add_argument("--backend", choices=BACKENDS, default="python", help="Rendering backend")
    render.add_argument("--mask-light", type=int, default=0, help="Light index used for the shadow mask")
    render.add_argument("--threshold", type=float, default=None,
                        help="Brightness below which a pixel counts as shadow")
    render.add_argument("--png", action="store_true", help="Also write PNG copies of both images")
    render.add_argument("--preview", action="store_true", help="Show the result in a window")
    render.add_argument("--quiet", action="store_true", help="Suppress progress output")
    render.set_defaults(func=run_render)

    evaluate = sub.add_parser("evaluate", help="Report shadow metrics of an existing image")
    evaluate.add_argument("image", help="PPM or PNG image to evaluate")
    evaluate.add_argument("--threshold", type=float, default=DEFAULT_SHADOW_THRESHOLD,
                          help="Brightness below which a pixel counts as shadow")
    evaluate.set_defaults(func=run_evaluate)
    return parser

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        # Bare invocation renders the default case
        args = parser.parse_args(["render"])
    try:
        return args.func(args)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

if __name__ == "__main__":
    sys.exit(main())

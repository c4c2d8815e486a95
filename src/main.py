# main.py
import argparse
import os
import time
from camera.camera import Camera
from renderer.raytracer import Renderer
from scenes import SCENES

QUALITY_LEVELS = {
    "preview": {"samples": 10, "depth": 10},
    "balanced": {"samples": 50, "depth": 20},
    "final": {"samples": 200, "depth": 50},
}

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Offline Monte-Carlo path tracer.")
    parser.add_argument("--scene", choices=sorted(SCENES), default="cornell",
                        help="Demo scene to render")
    parser.add_argument("--width", type=int, default=400, help="Image width in pixels")
    parser.add_argument("--height", type=int, default=None,
                        help="Image height in pixels (default: from the scene's aspect ratio)")
    parser.add_argument("--quality", choices=list(QUALITY_LEVELS), default="preview",
                        help="Samples and depth preset")
    parser.add_argument("--samples", type=int, default=None, help="Samples per pixel")
    parser.add_argument("--depth", type=int, default=None, help="Maximum bounces per path")
    parser.add_argument("--workers", type=int, default=os.cpu_count() or 1,
                        help="Number of worker processes")
    parser.add_argument("--seed", type=int, default=None, help="Seed for a reproducible render")
    parser.add_argument("--output", default="output.png", help="Output image path")
    parser.add_argument("--preview", action="store_true", help="Show a live preview window")
    parser.add_argument("--no-progress", action="store_true", help="Hide the progress bar")
    return parser

def build_camera(args):
    """Returns (world, camera) for the parsed command line."""
    scene_fn, aspect_ratio = SCENES[args.scene]
    height = args.height if args.height is not None else max(1, int(args.width / aspect_ratio))
    quality = QUALITY_LEVELS[args.quality]

    builder = Camera.builder(args.width, height)
    world = scene_fn(builder)
    builder.samples_per_pixel(args.samples if args.samples is not None else quality["samples"])
    builder.max_depth(args.depth if args.depth is not None else quality["depth"])
    return world, builder.build()

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        world, camera = build_camera(args)
        renderer = Renderer(camera, world, workers=args.workers, seed=args.seed)
    except ValueError as e:
        parser.error(str(e))

    print(f"Scene: {args.scene}")
    print(f"Render resolution: {camera.image_width}x{camera.image_height}")
    print(f"Samples per pixel: {camera.samples_per_pixel}")
    print(f"Max bounces: {camera.max_depth}")
    print(f"Workers: {renderer.workers}")

    preview = None
    if args.preview:
        from renderer.preview import PreviewWindow
        preview = PreviewWindow(camera.image_width, camera.image_height)

    start = time.perf_counter()
    try:
        canvas = renderer.render(progress=not args.no_progress,
                                 on_scanline=preview.on_scanline if preview else None)
        print(f"Rendered in {time.perf_counter() - start:.2f}s")
        canvas.save(args.output)
        print(f"Saved {args.output}")
        if preview is not None:
            preview.show(canvas)
            preview.wait_until_closed()
    finally:
        if preview is not None:
            preview.close()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())

# main.py
import argparse
import sys
import traceback
import pygame
from raytracing.api import RayTraceAPI
from raytracing.renderer.tone_mapping import to_rgb8

# Image scale and reflection depth for each render quality.
QUALITY_LEVELS = {
    "draft": {"scale": 0.25, "bounces": 0},
    "standard": {"scale": 0.5, "bounces": 2},
    "final": {"scale": 1.0, "bounces": 4}
}
DEFAULT_QUALITY = "final"
DEFAULT_WIDTH = 860
DEFAULT_HEIGHT = 640


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="raytrace",
        description="Render the built-in test scene with the Phong ray tracer.")
    parser.add_argument("-o", "--output", default="test_render.png",
                        help="output file; any extension is replaced by .png")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS), default=DEFAULT_QUALITY)
    parser.add_argument("--max-bounces", type=int, default=None,
                        help="override the reflection depth of the quality level")
    parser.add_argument("--workers", type=int, default=None,
                        help="render processes (default: one per CPU)")
    parser.add_argument("--background", type=int, nargs=3, metavar=("R", "G", "B"), default=None,
                        help="background colour, 0-255 per channel")
    parser.add_argument("--show", action="store_true",
                        help="display the finished image in a window")
    return parser


def render_size(args) -> tuple:
    scale = QUALITY_LEVELS[args.quality]["scale"]
    return max(1, int(args.width * scale)), max(1, int(args.height * scale))


def show_image(image, title: str = "Ray Tracer"):
    """Display a float (height, width, 3) image until the window is closed."""
    pygame.init()
    try:
        height, width = image.shape[:2]
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        # surfarray expects (width, height, 3).
        surface = pygame.surfarray.make_surface(to_rgb8(image).swapaxes(0, 1))
        screen.blit(surface, (0, 0))
        pygame.display.flip()

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            clock.tick(30)
    finally:
        pygame.quit()


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    width, height = render_size(args)
    bounces = args.max_bounces
    if bounces is None:
        bounces = QUALITY_LEVELS[args.quality]["bounces"]

    print("\n=== Initializing Renderer ===")
    print(f"Render resolution: {width}x{height}")
    print(f"Quality settings: {args.quality}")
    print(f"Max bounces: {bounces}")

    try:
        api = RayTraceAPI(width, height)
        api.load_test_scene()
        api.set_max_bounces(bounces)
        if args.background is not None:
            api.set_background_color(*args.background)
        image = api.render_image(args.workers)
        api.save_image(args.output)
    except Exception as e:
        print(f"Error during rendering: {e}")
        traceback.print_exc()
        return 1

    if args.show:
        show_image(image)
    return 0


if __name__ == "__main__":
    sys.exit(main())

# raytracer_app.py
import argparse
import logging
import os
import sys
from dataclasses import replace
from typing import List, Optional, Tuple

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
import pygame

from camera.controls import InputState
from core.config import RenderConfig, load_config
from renderer.export import save_image
from renderer.pixels import to_surface_array
from renderer.raytracer import Renderer

logger = logging.getLogger(__name__)

FPS_LOG_INTERVAL_MS = 1000


class Application:
    """
    Live preview window. Owns the camera, the scene and the frame buffer;
    each frame samples input, updates the camera, re-renders and blits.
    """
    def __init__(self, config: RenderConfig):
        self.config = config
        self.width = config.width
        self.height = config.image_height

        self.camera = config.build_camera()
        self.controller = config.build_controller()
        self.world = config.build_world()
        self.renderer = Renderer(self.width, self.height, backend=config.backend)

        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(config.title)
        self.clock = pygame.time.Clock()

        self.key_map = {
            'forward': pygame.K_w,
            'back': pygame.K_s,
            'left': pygame.K_a,
            'right': pygame.K_d,
            'up': pygame.K_e,
            'down': pygame.K_q,
            'exit': pygame.K_ESCAPE,
        }

    def poll_input(self, scroll: Optional[Tuple[float, float]]) -> InputState:
        keys = pygame.key.get_pressed()
        mouse_x, mouse_y = pygame.mouse.get_pos()
        return InputState(
            forward=bool(keys[self.key_map['forward']]),
            back=bool(keys[self.key_map['back']]),
            left=bool(keys[self.key_map['left']]),
            right=bool(keys[self.key_map['right']]),
            up=bool(keys[self.key_map['up']]),
            down=bool(keys[self.key_map['down']]),
            exit=bool(keys[self.key_map['exit']]),
            pointer=(float(mouse_x), float(mouse_y)),
            pointer_down=pygame.mouse.get_pressed()[0],
            scroll=scroll,
        )

    def run(self):
        logger.info("Opening %dx%d window", self.width, self.height)
        running = True
        frame_count = 0
        last_fps_log = pygame.time.get_ticks()
        try:
            while running:
                scroll = None
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.MOUSEWHEEL:
                        dx, dy = scroll or (0.0, 0.0)
                        scroll = (dx + event.x, dy + event.y)

                state = self.poll_input(scroll)
                if state.exit:
                    break
                self.controller.apply(self.camera, state)

                frame = self.renderer.render_frame(self.camera, self.world)
                surface = pygame.surfarray.make_surface(
                    to_surface_array(frame, self.width, self.height))
                self.screen.blit(surface, (0, 0))
                pygame.display.flip()

                frame_count += 1
                self.clock.tick(self.config.target_fps)
                now = pygame.time.get_ticks()
                if now - last_fps_log > FPS_LOG_INTERVAL_MS:
                    logger.debug("FPS: %.1f | frames: %d | %r",
                                 self.clock.get_fps(), frame_count, self.camera)
                    last_fps_log = now
        finally:
            pygame.quit()


def render_to_file(config: RenderConfig, output: str):
    """Renders a single frame without opening a window and saves it."""
    renderer = Renderer(config.width, config.image_height, backend=config.backend)
    frame = renderer.render_frame(config.build_camera(), config.build_world())
    return save_image(frame, config.width, config.image_height, output)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Live analytic ray tracer.")
    parser.add_argument("--config", help="TOML scene/camera configuration file")
    parser.add_argument("--width", type=int, help="Image width in pixels")
    parser.add_argument("--height", type=int, help="Image height in pixels")
    parser.add_argument("--backend", choices=("auto", "python", "numba"),
                        help="Per-pixel loop implementation")
    parser.add_argument("--output", help="Render one frame to this file instead of opening a window")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> RenderConfig:
    config = load_config(args.config) if args.config else RenderConfig()
    overrides = {name: getattr(args, name)
                 for name in ("width", "height", "backend")
                 if getattr(args, name) is not None}
    return replace(config, **overrides) if overrides else config


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_config(args)
        if args.output:
            render_to_file(config, args.output)
        else:
            Application(config).run()
    except Exception:
        logger.exception("Fatal error")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

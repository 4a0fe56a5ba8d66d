import sys, argparse, logging
import pygame
from pygame import K_a, K_d, K_LEFT, K_RIGHT, K_w, K_UP, K_SPACE, K_r, K_ESCAPE
from .config import WIDTH, HEIGHT, FPS, MAX_DT
from .render import draw_world, load_fonts
from .world import World, Controls

JUMP_KEYS = (K_w, K_UP, K_SPACE)


def parse_args():
    p = argparse.ArgumentParser()
    p.add_argument("--seed", type=int, default=None,
                   help="RNG seed for pickup placement. Omit for a random session.")
    p.add_argument("--width", type=int, default=WIDTH, help="Initial window width")
    p.add_argument("--height", type=int, default=HEIGHT, help="Initial window height")
    p.add_argument("--log-level", type=str, default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args()


def run():
    args = parse_args()
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    pygame.init()
    pygame.display.set_caption("Cronus Cash")
    screen = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
    clock = pygame.time.Clock()
    fonts = load_fonts()

    world = World(width=args.width, height=args.height, seed=args.seed)

    while True:
        dt = clock.tick(FPS) / 1000.0
        if dt > MAX_DT:  # clamp stalls
            dt = MAX_DT

        jump_pressed = False
        restart_pressed = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            if event.type == pygame.KEYDOWN:
                if event.key == K_ESCAPE:
                    pygame.quit(); sys.exit()
                if event.key in JUMP_KEYS:
                    jump_pressed = True
                if event.key == K_r:
                    restart_pressed = True

        held = pygame.key.get_pressed()
        controls = Controls(
            left=held[K_a] or held[K_LEFT],
            right=held[K_d] or held[K_RIGHT],
            jump_pressed=jump_pressed,
            restart_pressed=restart_pressed,
        )

        view = world.tick(dt, controls, size=screen.get_size())

        # --- Render ---
        draw_world(screen, view, fonts)
        pygame.display.flip()


if __name__ == "__main__":
    run()

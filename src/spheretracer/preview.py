# preview.py
import numpy as np
import pygame

MAX_WINDOW = (1280, 720)

def window_size(width: int, height: int, max_size=MAX_WINDOW):
    """Window size that fits the image inside max_size, never upscaling."""
    scale = min(max_size[0] / width, max_size[1] / height, 1.0)
    return max(1, int(width * scale)), max(1, int(height * scale))

def show_image(pixels: np.ndarray, title: str = "spheretracer") -> None:
    """
    Display an 8-bit (height, width, 3) image in a pygame window until it is
    closed or Escape is pressed.
    """
    height, width, _ = pixels.shape
    pygame.init()
    try:
        size = window_size(width, height)
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption(title)

        # surfarray is indexed (x, y)
        surface = pygame.surfarray.make_surface(np.ascontiguousarray(pixels.swapaxes(0, 1)))
        if size != (width, height):
            surface = pygame.transform.smoothscale(surface, size)

        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            screen.blit(surface, (0, 0))
            pygame.display.flip()
            clock.tick(30)
    finally:
        pygame.quit()

# renderer/preview.py
import numpy as np
import pygame
from renderer.canvas import Canvas

class PreviewWindow:
    """
    Live window that shows the canvas while scanlines come in.
    Closing the window (or pressing Escape) asks the renderer to stop.
    """
    def __init__(self, width: int, height: int, max_size: int = 800,
                 caption: str = "Path Tracer"):
        pygame.init()
        scale = min(1.0, max_size / max(width, height))
        self.window_width = max(1, int(width * scale))
        self.window_height = max(1, int(height * scale))
        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption(caption)
        self.open = True

    def poll(self) -> bool:
        """Process window events; False once the user closed the window."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.open = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.open = False
        return self.open

    def show(self, canvas: Canvas):
        # surfarray wants (width, height, 3).
        image = np.ascontiguousarray(canvas.to_image().transpose(1, 0, 2))
        surf = pygame.surfarray.make_surface(image)
        if surf.get_size() != (self.window_width, self.window_height):
            surf = pygame.transform.scale(surf, (self.window_width, self.window_height))
        self.screen.blit(surf, (0, 0))
        pygame.display.flip()

    def on_scanline(self, y: int, canvas: Canvas) -> bool:
        """Renderer callback: redraw and report whether to keep going."""
        if self.poll():
            self.show(canvas)
        return self.open

    def wait_until_closed(self):
        clock = pygame.time.Clock()
        while self.poll():
            clock.tick(30)

    def close(self):
        pygame.quit()

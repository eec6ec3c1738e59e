# renderer/preview.py
import pygame
from renderer.image import Image

GAP = 8

def image_to_surface(image: Image) -> "pygame.Surface":
    """Convert an Image to a pygame surface (surfarray is indexed x, y)."""
    return pygame.surfarray.make_surface(image.data.swapaxes(0, 1))

class PreviewWindow:
    """
    Shows the color render and its shadow mask side by side until the window
    is closed or Escape is pressed.
    """
    def __init__(self, render: Image, shadow_mask: Image, title: str = "Hard Shadow Ray Tracer"):
        self.render = render
        self.shadow_mask = shadow_mask
        self.title = title
        self.window_width = render.width + GAP + shadow_mask.width
        self.window_height = max(render.height, shadow_mask.height)

    def compose(self, screen: "pygame.Surface"):
        screen.fill((0, 0, 0))
        screen.blit(image_to_surface(self.render), (0, 0))
        screen.blit(image_to_surface(self.shadow_mask), (self.render.width + GAP, 0))

    def run(self):
        pygame.init()
        try:
            screen = pygame.display.set_mode((self.window_width, self.window_height))
            pygame.display.set_caption(self.title)
            self.compose(screen)
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

def show_preview(render: Image, shadow_mask: Image, title: str = "Hard Shadow Ray Tracer"):
    PreviewWindow(render, shadow_mask, title).run()

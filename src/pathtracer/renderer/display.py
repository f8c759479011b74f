# renderer/display.py
import logging
import threading
import pygame
from pathtracer.renderer.image_output import FrameBuffer

logger = logging.getLogger(__name__)


class PygameDisplay:
    """
    Live window sink. A receiver thread copies arriving pixels into a frame
    buffer under a lock while the calling thread runs the pygame event loop
    and repaints; a repaint that finds the buffer busy skips that frame
    instead of waiting. consume() returns when the window is closed
    (close button or Escape), which also abandons an unfinished render.
    """
    def __init__(self, width: int, height: int, title: str = "Path Tracer - Press ESC to exit",
                 fps: int = 10, save_path: str = None):
        self.width = width
        self.height = height
        self.title = title
        self.fps = fps
        self.save_path = save_path
        self.frame = FrameBuffer(width, height)
        self.lock = threading.Lock()
        self.finished = threading.Event()

    def receive(self, pixels):
        """Copy pixels into the frame buffer until the channel is closed."""
        for pixel in pixels:
            with self.lock:
                self.frame.write(pixel)
        self.finished.set()

    def consume(self, pixels):
        receiver = threading.Thread(target=self.receive, args=(pixels,),
                                    name="display-receiver", daemon=True)
        receiver.start()

        pygame.init()
        try:
            screen = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption(self.title)
            clock = pygame.time.Clock()
            announced = False
            running = True

            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                        running = False

                self.paint(screen)

                if self.finished.is_set() and not announced:
                    announced = True
                    pygame.display.set_caption(f"{self.title} (done)")
                    logger.info("Display received %d pixels", self.frame.count)

                clock.tick(self.fps)
        finally:
            pygame.quit()

        if self.save_path and self.frame.complete:
            self.frame.save(self.save_path)

    def paint(self, screen) -> bool:
        """Blit the frame buffer if it is free; returns False for a skipped frame."""
        if not self.lock.acquire(blocking=False):
            return False
        try:
            # surfarray is indexed (x, y), the frame buffer (y, x).
            pygame.surfarray.blit_array(screen, self.frame.data.swapaxes(0, 1))
        finally:
            self.lock.release()
        pygame.display.flip()
        return True

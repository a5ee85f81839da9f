# renderer.py

import logging

import pygame

import constants

logger = logging.getLogger(constants.LOGGER_NAME)


def to_pygame_color(hsla):
    """Converts an (h, s, l, a) tuple (h in degrees, the rest in %) to a pygame.Color."""
    h, s, l, a = hsla
    color = pygame.Color(0, 0, 0)
    # pygame rejects percentages outside 0..100; s/l bounds come from unchecked config
    color.hsla = (h % 360, min(max(s, 0), 100), min(max(l, 0), 100), min(max(a, 0), 100))
    return color


class Renderer:
    """
    Draws simulation frames onto a pygame surface.

    Nothing is ever cleared: each frame is faded by a translucent black fill,
    which leaves trails behind the moving lines.

    Data Contract:
    - Inputs: screen (pygame.Surface) - The display surface.
    - Side Effects: Draws onto the screen; never touches simulation state.
    """
    def __init__(self, screen: pygame.Surface):
        self._fonts = {}
        self.resize(screen)

    def resize(self, screen: pygame.Surface):
        self.screen = screen
        self.trail_surface = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        self.screen.fill(constants.BLACK)

    def _font(self, settings):
        key = (settings.message_font, settings.message_font_size)
        if key not in self._fonts:
            self._fonts[key] = pygame.font.SysFont(*key)
        return self._fonts[key]

    def draw(self, frame, settings):
        self.trail_surface.fill((*constants.BLACK, int(round(settings.fade_speed * 255))))
        self.screen.blit(self.trail_surface, (0, 0))

        if frame.repaint:
            self.draw_lines(frame.points, frame.colors)
        self.draw_messages(frame.messages, settings)

    def draw_lines(self, points, colors):
        """Draws the closed loop, one gradient segment per consecutive pair of points."""
        pygame_colors = [to_pygame_color(c) for c in colors]
        for i in range(len(points) - 1):
            start, end = points[i], points[i + 1]
            self._draw_gradient_line((start.x, start.y), (end.x, end.y), pygame_colors[i], pygame_colors[i + 1])

    def _draw_gradient_line(self, start, end, start_color, end_color):
        # pygame has no gradient strokes; approximate with short solid pieces
        length = pygame.math.Vector2(end[0] - start[0], end[1] - start[1]).length()
        pieces = max(1, int(length // constants.GRADIENT_SUBSEGMENT_LENGTH))
        for j in range(pieces):
            t0, t1 = j / pieces, (j + 1) / pieces
            p0 = (start[0] + (end[0] - start[0]) * t0, start[1] + (end[1] - start[1]) * t0)
            p1 = (start[0] + (end[0] - start[0]) * t1, start[1] + (end[1] - start[1]) * t1)
            color = start_color.lerp(end_color, (t0 + t1) / 2)
            pygame.draw.line(self.screen, color, p0, p1, constants.LINE_WIDTH)

    def draw_messages(self, messages, settings):
        if not messages:
            return
        font = self._font(settings)
        color = pygame.Color(settings.message_color)
        for message in messages:
            text_surface = font.render(message.text, True, color)
            # Message positions are baselines
            self.screen.blit(text_surface, (message.x, message.y - font.get_ascent()))

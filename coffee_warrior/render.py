"""Pygame drawing of simulation snapshots.

The renderer only reads a ``Snapshot``; it never touches the simulation.
"""

from __future__ import annotations

import math

import pygame

from .config import (
    COL_BUBBLE,
    COL_BUBBLE_STROKE,
    COL_CACTUS,
    COL_CLOUD,
    COL_COFFEE,
    COL_CUP,
    COL_CUP_RIM,
    COL_ERROR_TEXT,
    COL_GROUND,
    COL_GROUND_TUFT,
    COL_HUD_TEXT,
    COL_PANEL,
    COL_PLAYER_PLACEHOLDER,
    COL_SKY,
    COL_STEAM,
    COL_TEXT,
    CUP_HANDLE_SIZE,
    CUP_HEIGHT,
    CUP_WIDTH,
    GAME_OVER_QUIP,
    STUDIO,
    SUBTITLE,
    TITLE,
)
from .simulation import EntityView, PlayerView, Snapshot
from .state import GameState
from .utils import clamp, procedural_noise_surface, scale_color, tuft_noise


class Renderer:
    """Draws one frame onto a canvas surface sized to the current ScaleContext."""

    def __init__(self, player_image: pygame.Surface | None = None) -> None:
        self.player_image = player_image
        self._fonts: dict[int, pygame.font.Font] = {}
        self._ground_cache: tuple[tuple[int, int], pygame.Surface] | None = None
        self._sprite_cache: tuple[tuple[int, int], pygame.Surface] | None = None
        self._cloud_layer: pygame.Surface | None = None

    def font(self, size: float) -> pygame.font.Font:
        px = max(8, int(size))
        if px not in self._fonts:
            self._fonts[px] = pygame.font.SysFont(None, px)
        return self._fonts[px]

    # ----- Frame -----
    def draw(self, canvas: pygame.Surface, snap: Snapshot) -> None:
        s = snap.scale.scale_factor
        canvas.fill(COL_SKY)
        self._draw_clouds(canvas, snap.decorations)
        self._draw_ground(canvas, snap)

        if snap.game_state is GameState.START:
            self._draw_start_screen(canvas, snap)
        elif snap.game_state is GameState.PLAYING:
            for obs in snap.obstacles:
                self._draw_cactus(canvas, obs, s)
            for cup in snap.collectibles:
                self._draw_cup(canvas, cup, s)
            self._draw_player(canvas, snap.player)
            self._draw_hud(canvas, snap)
        elif snap.game_state is GameState.GAME_OVER:
            for obs in snap.obstacles:
                self._draw_cactus(canvas, obs, s)
            for cup in snap.collectibles:
                self._draw_cup(canvas, cup, s)
            self._draw_game_over_screen(canvas, snap)
        else:
            self._draw_error_screen(canvas, snap)

    # ----- Backdrop -----
    def _draw_clouds(self, canvas: pygame.Surface, clouds: tuple[EntityView, ...]) -> None:
        if not clouds:
            return
        if self._cloud_layer is None or self._cloud_layer.get_size() != canvas.get_size():
            self._cloud_layer = pygame.Surface(canvas.get_size(), pygame.SRCALPHA)
        layer = self._cloud_layer
        layer.fill((0, 0, 0, 0))
        for c in clouds:
            size = c.w / 1.5
            cx, cy = c.x + size * 0.4, c.y + c.h / 2
            for ox, oy, ew, eh in (
                (0.0, 0.0, 0.8, 0.6),
                (0.3, -0.1, 1.0, 0.7),
                (0.6, 0.0, 0.7, 0.5),
            ):
                rect = pygame.Rect(0, 0, int(size * ew), int(size * eh))
                rect.center = (int(cx + size * ox), int(cy + size * oy))
                pygame.draw.ellipse(layer, COL_CLOUD, rect)
        canvas.blit(layer, (0, 0))

    def _ground_surface(self, w: int, h: int) -> pygame.Surface:
        key = (w, h)
        if self._ground_cache is None or self._ground_cache[0] != key:
            pixels = procedural_noise_surface(w, h, tuft_noise, base=COL_GROUND, dark=COL_GROUND_TUFT)
            self._ground_cache = (key, pygame.surfarray.make_surface(pixels))
        return self._ground_cache[1]

    def _draw_ground(self, canvas: pygame.Surface, snap: Snapshot) -> None:
        top = int(snap.scale.ground_y)
        w, h = canvas.get_width(), max(1, canvas.get_height() - top)
        canvas.blit(self._ground_surface(w, h), (0, top))

    # ----- Entities -----
    def _draw_cactus(self, canvas: pygame.Surface, obs: EntityView, s: float) -> None:
        x, y, w, h = obs.x, obs.y, obs.w, obs.h
        arm_d = w * 0.35
        arm_r = arm_d / 2
        body_w = w * 0.3
        cap_h = h * 0.2
        body_x = x + w / 2 - body_w / 2
        body_y = y + cap_h
        arm_cy = y + h * 0.55
        left_cx, right_cx = x + arm_r, x + w - arm_r

        pygame.draw.rect(canvas, COL_CACTUS, pygame.Rect(int(body_x), int(body_y), int(body_w), int(h - cap_h)))
        cap = pygame.Rect(int(body_x), int(y), int(body_w), int(cap_h * 2))
        pygame.draw.ellipse(canvas, COL_CACTUS, cap)
        pygame.draw.circle(canvas, COL_CACTUS, (int(left_cx), int(arm_cy)), max(1, int(arm_r)))
        pygame.draw.circle(canvas, COL_CACTUS, (int(right_cx), int(arm_cy)), max(1, int(arm_r)))

        spine = 6 * s
        width = max(1, int(2 * s))
        top_x = body_x + body_w / 2
        spines = [
            ((top_x, y), (top_x, y - spine)),
            ((body_x, arm_cy - arm_r * 0.5), (body_x - spine, arm_cy - arm_r * 0.5)),
            ((body_x + body_w, arm_cy - arm_r * 0.5), (body_x + body_w + spine, arm_cy - arm_r * 0.5)),
            ((left_cx - arm_r, arm_cy), (left_cx - arm_r - spine, arm_cy)),
            ((left_cx, arm_cy - arm_r), (left_cx, arm_cy - arm_r - spine)),
            ((right_cx + arm_r, arm_cy), (right_cx + arm_r + spine, arm_cy)),
            ((right_cx, arm_cy - arm_r), (right_cx, arm_cy - arm_r - spine)),
        ]
        spine_color = scale_color(COL_CACTUS, 0.55)
        for a, b in spines:
            pygame.draw.line(canvas, spine_color, a, b, width)

    def _draw_cup(self, canvas: pygame.Surface, cup: EntityView, s: float) -> None:
        cw, ch, handle = CUP_WIDTH * s, CUP_HEIGHT * s, CUP_HANDLE_SIZE * s
        x, y = cup.x, cup.y
        pygame.draw.rect(canvas, COL_CUP, pygame.Rect(int(x), int(y), int(cw), int(ch)), border_radius=max(1, int(3 * s)))
        coffee = pygame.Rect(0, 0, int(cw * 0.8), int(ch * 0.4))
        coffee.center = (int(x + cw / 2), int(y + ch * 0.3))
        pygame.draw.ellipse(canvas, COL_COFFEE, coffee)
        rim = pygame.Rect(int(x), int(y), int(cw), max(2, int(ch * 0.3)))
        pygame.draw.arc(canvas, COL_CUP_RIM, rim, 0, math.pi, max(1, int(2 * s)))
        handle_rect = pygame.Rect(0, 0, int(handle), int(handle))
        handle_rect.center = (int(x + cw), int(y + ch / 2))
        pygame.draw.arc(canvas, COL_CUP, handle_rect, -math.pi / 2, math.pi / 2, max(1, int(4 * s)))

        # Steam wobbles with the cup's idle phase; drawn on a small patch above the cup
        pad = 8 * s
        sh = 10 * s
        top = y - 5 * s - sh - 3 * s - pad
        steam = pygame.Surface((max(1, int(cw + pad * 2)), max(1, int(y - top))), pygame.SRCALPHA)
        ox, oy = int(x - pad), int(top)
        sx, sy = x + cw / 2 - ox, y - 5 * s - oy
        pygame.draw.lines(
            steam,
            COL_STEAM,
            False,
            [(sx - 3 * s, sy), (sx + (3 + math.sin(cup.phase) * 2) * s, sy - sh / 2), (sx - 2 * s, sy - sh)],
            max(1, int(1.5 * s)),
        )
        pygame.draw.lines(
            steam,
            COL_STEAM,
            False,
            [(sx + 2 * s, sy - 2 * s), (sx + (-3 + math.cos(cup.phase) * 2) * s, sy - sh / 2 - 2 * s), (sx + s, sy - sh - 3 * s)],
            max(1, int(1.5 * s)),
        )
        canvas.blit(steam, (ox, oy))

    def _sprite(self, w: int, h: int) -> pygame.Surface | None:
        if self.player_image is None:
            return None
        key = (max(1, w), max(1, h))
        if self._sprite_cache is None or self._sprite_cache[0] != key:
            self._sprite_cache = (key, pygame.transform.smoothscale(self.player_image, key))
        return self._sprite_cache[1]

    def _draw_player(self, canvas: pygame.Surface, player: PlayerView) -> None:
        sprite = self._sprite(int(player.w), int(player.h))
        if sprite is not None:
            canvas.blit(sprite, (int(player.x), int(player.y)))
        else:
            rect = pygame.Rect(int(player.x), int(player.y), int(player.w), int(player.h))
            pygame.draw.rect(canvas, COL_PLAYER_PLACEHOLDER, rect, border_radius=6)

    # ----- Screens -----
    def _text(self, canvas: pygame.Surface, text: str, size: float, color, **anchor) -> pygame.Rect:
        img = self.font(size).render(text, True, color)
        rect = img.get_rect(**anchor)
        canvas.blit(img, rect)
        return rect

    def _panel(self, canvas: pygame.Surface, rect: pygame.Rect, radius: int) -> None:
        panel = pygame.Surface(rect.size, pygame.SRCALPHA)
        pygame.draw.rect(panel, COL_PANEL, panel.get_rect(), border_radius=radius)
        canvas.blit(panel, rect.topleft)

    def _draw_hud(self, canvas: pygame.Surface, snap: Snapshot) -> None:
        s = snap.scale.scale_factor
        w = canvas.get_width()
        self._text(canvas, f"Coffee: {snap.score}", 32 * s, COL_HUD_TEXT, topleft=(int(20 * s), int(20 * s)))
        hint = pygame.Rect(int(w - 160 * s), int(10 * s), int(150 * s), int(30 * s))
        self._panel(canvas, hint, int(5 * s))
        self._text(canvas, "SPACE to JUMP", 21 * s, COL_TEXT, center=hint.center)

    def _draw_start_screen(self, canvas: pygame.Surface, snap: Snapshot) -> None:
        s = snap.scale.scale_factor
        w, h = canvas.get_size()
        self._panel(canvas, pygame.Rect(int(w * 0.1), int(h * 0.1), int(w * 0.8), int(h * 0.8)), int(20 * s))
        cx = w // 2
        self._text(canvas, TITLE, 72 * s, COL_TEXT, center=(cx, int(h * 0.3)))
        self._text(canvas, SUBTITLE, 30 * s, COL_TEXT, center=(cx, int(h * 0.5)))
        self._text(canvas, "Press SPACEBAR to Start", 36 * s, COL_TEXT, center=(cx, int(h * 0.65)))
        self._text(canvas, STUDIO, 24 * s, COL_TEXT, center=(cx, int(h * 0.8)))

    def _draw_game_over_screen(self, canvas: pygame.Surface, snap: Snapshot) -> None:
        s = snap.scale.scale_factor
        w, h = canvas.get_size()
        big_w, big_h = snap.player.w * 3, snap.player.h * 3
        big_x, big_y = w / 2 - big_w / 2, h / 2 - big_h / 2
        self._draw_player(
            canvas,
            PlayerView(big_x, big_y, big_w, big_h, 0.0, True),
        )
        self._draw_speech_bubble(canvas, GAME_OVER_QUIP, big_x + big_w * 0.85, big_y + big_h * 0.25, snap)

        text_y = max(big_y + big_h + 20 * s, h * 0.7)
        cx = w // 2
        self._text(canvas, f"Final Score: {snap.score}", 38 * s, COL_TEXT, center=(cx, int(text_y)))
        self._text(canvas, "Press SPACEBAR to Restart", 30 * s, COL_TEXT, center=(cx, int(text_y + 40 * s)))
        self._text(canvas, STUDIO, 21 * s, COL_TEXT, center=(cx, int(text_y + 70 * s)))

    def _draw_speech_bubble(
        self, canvas: pygame.Surface, text: str, target_x: float, target_y: float, snap: Snapshot
    ) -> None:
        s = snap.scale.scale_factor
        w, h = canvas.get_size()
        font = self.font(24 * s)
        tw, th = font.size(text)
        pad = 15 * s
        bw = tw + pad * 2
        bh = th + pad * 2
        ground_band = h - snap.scale.ground_y
        bx = clamp(target_x + 10 * s, 10 * s, w - bw - 10 * s)
        by = clamp(target_y - bh / 2, 10 * s, h - bh - 10 * s - ground_band)

        layer = pygame.Surface((w, h), pygame.SRCALPHA)
        tail_tip = (clamp(target_x, bx - 50 * s, bx), clamp(target_y, by - 25 * s, by + bh + 25 * s))
        tail = [(bx + 2 * s, by + bh * 0.4), tail_tip, (bx + 2 * s, by + bh * 0.6)]
        body = pygame.Rect(int(bx), int(by), int(bw), int(bh))
        radius = int(15 * s)
        pygame.draw.polygon(layer, COL_BUBBLE, tail)
        pygame.draw.rect(layer, COL_BUBBLE, body, border_radius=radius)
        stroke = max(1, int(2.5 * s))
        pygame.draw.rect(layer, COL_BUBBLE_STROKE, body, width=stroke, border_radius=radius)
        pygame.draw.lines(layer, COL_BUBBLE_STROKE, False, tail, stroke)
        canvas.blit(layer, (0, 0))
        label = font.render(text, True, (0, 0, 0))
        canvas.blit(label, label.get_rect(center=body.center))

    def _draw_error_screen(self, canvas: pygame.Surface, snap: Snapshot) -> None:
        s = snap.scale.scale_factor
        w, h = canvas.get_size()
        self._text(canvas, "Error: Could not load assets.", 38 * s, COL_ERROR_TEXT, center=(w // 2, h // 2))
        self._text(
            canvas, "Check the log output & restart.", 38 * s, COL_ERROR_TEXT, center=(w // 2, int(h / 2 + 40 * s))
        )

"""Heads-up display: health bar and weapon/ammo readout as drawing primitives."""

from __future__ import annotations

from dataclasses import dataclass

Vec2 = tuple[float, float]
FColor = tuple[float, float, float, float]

BLACK: FColor = (0.0, 0.0, 0.0, 1.0)
WHITE: FColor = (1.0, 1.0, 1.0, 1.0)
RED: FColor = (1.0, 0.0, 0.0, 1.0)
GREEN: FColor = (0.0, 1.0, 0.0, 1.0)
YELLOW: FColor = (1.0, 1.0, 0.0, 1.0)
ORANGE: FColor = (1.0, 0.65, 0.0, 1.0)
GRAY: FColor = (0.5, 0.5, 0.5, 1.0)
TRANSPARENT: FColor = (0.0, 0.0, 0.0, 0.0)

_SHADE_DARK: FColor = (0.22, 0.22, 0.22, 0.2)
_SHADE_LIGHT: FColor = (1.0, 1.0, 1.0, 0.2)


@dataclass(frozen=True)
class Rect:
    """A filled, optionally stroked rectangle."""

    position: Vec2
    size: Vec2
    color: tuple
    corner_radius: float = 0.0
    stroke_color: tuple | None = None
    stroke_width: float = 0.0


@dataclass(frozen=True)
class Label:
    """A piece of text at a screen position."""

    text: str
    position: Vec2


@dataclass
class GameUiState:
    """The player values shown on the HUD."""

    player_hp_max: float
    player_hp: float
    weapon_name: str
    max_ammo: int
    ammo: int


def health_to_color_gradient(proc: float, start_color: FColor, into_color: FColor) -> FColor:
    """Interpolate the RGB of two colours; the result is opaque."""
    r, g, b = (s + proc * (e - s) for s, e in zip(start_color[:3], into_color[:3]))
    return (r, g, b, 1.0)


def health_color(proportion: float) -> FColor:
    """Health bar colour: red at empty, yellow at half, green at full."""
    if proportion > 0.5:
        return health_to_color_gradient((proportion - 0.5) / 0.5, YELLOW, GREEN)
    return health_to_color_gradient(proportion / 0.5, RED, YELLOW)


class GameUI:
    """Lays out the HUD for a given screen size."""

    def __init__(self, game_state: GameUiState) -> None:
        self.game_state = game_state
        self.scale: Vec2 = (2.0, 2.0)
        self.padding: Vec2 = (10.0, 10.0)
        self.size: Vec2 = (150.0, 10.0)
        self.border_size: Vec2 = (4.0, 4.0)

    def draw_health(self, width: int, height: int) -> list[Rect]:
        """Rectangles for the health bar, its shading and its border."""
        state = self.game_state
        proc = state.player_hp / state.player_hp_max
        color = health_color(proc)

        sx, sy = self.scale
        size_x, size_y = self.size
        border_x, border_y = self.border_size
        health_w, health_h = size_x * proc * sx, size_y * sy

        pos_x = (self.padding[0] + border_x) * sx
        pos_y = height - (self.padding[1] + size_y + border_y) * sy

        return [
            Rect((pos_x, pos_y), (health_w, health_h), color),
            Rect((pos_x, pos_y + size_y * sy * 0.7), (health_w, health_h / 3.0), _SHADE_DARK),
            Rect((pos_x, pos_y), (health_w, health_h / 3.0), _SHADE_LIGHT),
            Rect(
                (pos_x - border_x / 2.0, pos_y - border_y / 2.0),
                (size_x * sx + border_x, size_y * sy + border_y),
                TRANSPARENT,
                corner_radius=2.0,
                stroke_color=BLACK,
                stroke_width=border_x,
            ),
        ]

    def draw_weapon_stats(self, width: int, height: int) -> list[Label | Rect]:
        """Labels for the weapon name and ammo, then one bar per round."""
        state = self.game_state
        x, y = width - 200.0, height - 50.0

        ammo_text = "∞"
        if state.max_ammo != 0:
            ammo_text = f"{state.ammo:0>3} / {state.max_ammo:0>3}"

        items: list[Label | Rect] = [
            Label(state.weapon_name, (x, y)),
            Label(ammo_text, (x + 120.0, y)),
        ]
        if state.max_ammo == 0:
            return items

        padding = 10.0 / state.max_ammo
        bar_w = 170.0 / state.max_ammo
        if state.ammo <= state.max_ammo * 0.25:
            loaded = RED
        elif state.ammo <= state.max_ammo * 0.6:
            loaded = ORANGE
        else:
            loaded = WHITE

        for i in range(state.max_ammo):
            color = GRAY if state.max_ammo - i > state.ammo else loaded
            items.append(
                Rect((x + (bar_w + padding) * i, y + 20.0), (bar_w, 5.0), color, corner_radius=2.0)
            )
        return items
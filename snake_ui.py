# snake_ui.py

"""
Interfaz gráfica con arcade: dibuja el tablero, el marcador y los botones,
convierte los clics en intenciones para la sesión y reproduce los sonidos
de comer y de fin de partida.
"""

import arcade

from snake_controls import (GAME_OVER_TEXT, accepts_taps, is_border_cell,
                            is_light_cell, primary_button, reset_button,
                            score_text, sound_cues, window_to_canvas)
from snake_session import PauseGame, SnakeSession, StartGame, UpdateDirection
from snake_state import GameState, RunMode

# --- Constantes Visuales ---
UI_CELL_SIZE_DEFAULT = 20
UI_PANEL_HEIGHT = 60  # Alto del marcador (arriba) y de los botones (abajo)
UI_BUTTON_MARGIN = 8
UI_SCREEN_TITLE = "Snake"

# --- Colores ---
BACKGROUND_COLOR_UI = arcade.color.BLACK_OLIVE
BORDER_CELL_COLOR_UI = arcade.color.ROYAL_BLUE
CELL_COLOR_UI = arcade.color.CREAM
CELL_COLOR_DARK_UI = (*arcade.color.CREAM[:3], 128)
SNAKE_COLOR_UI = arcade.color.CITRINE
HEAD_COLOR_UI = arcade.color.LIME_GREEN
FOOD_COLOR_UI = arcade.color.RED_DEVIL
TEXT_COLOR_UI = arcade.color.WHITE
GAMEOVER_COLOR_UI = arcade.color.LIGHT_GRAY
BUTTON_COLOR_UI = arcade.color.ROYAL_BLUE
BUTTON_DISABLED_COLOR_UI = arcade.color.GRAY

# --- Sonidos (recursos incluidos en arcade) ---
FOOD_SOUND = ":resources:sounds/coin1.wav"
GAME_OVER_SOUND = ":resources:sounds/gameover1.wav"


class SnakeGameUI(arcade.Window):
    def __init__(self, session: SnakeSession, cell_size: int = UI_CELL_SIZE_DEFAULT):
        state = session.observe_state()
        self.session = session
        self.cell_size = cell_size
        self.board_width = state.grid_width * cell_size
        self.board_height = state.grid_height * cell_size
        self.board_left = 0
        self.board_bottom = UI_PANEL_HEIGHT

        super().__init__(self.board_width, self.board_height + 2 * UI_PANEL_HEIGHT,
                         UI_SCREEN_TITLE, update_rate=1/60)
        self.background_color = BACKGROUND_COLOR_UI

        self.food_sound = arcade.load_sound(FOOD_SOUND)
        self.game_over_sound = arcade.load_sound(GAME_OVER_SOUND)

        self._last_state = state
        self._unsubscribe = session.subscribe(self._on_state_published)

    # --- Sonidos ---
    def _on_state_published(self, state: GameState):
        ate, died = sound_cues(self._last_state, state)
        self._last_state = state
        if ate:
            arcade.play_sound(self.food_sound)
        if died:
            arcade.play_sound(self.game_over_sound)

    # --- Geometría ---
    def _cell_to_window(self, x: int, y: int):
        """Esquina inferior izquierda de la celda (x, y) en la ventana."""
        left = self.board_left + x * self.cell_size
        bottom = self.board_bottom + self.board_height - (y + 1) * self.cell_size
        return left, bottom

    def _button_rects(self):
        """Rectángulos (left, right, bottom, top) de los botones principal y de reinicio."""
        half = self.width / 2
        bottom = UI_BUTTON_MARGIN
        top = UI_PANEL_HEIGHT - UI_BUTTON_MARGIN
        reset_rect = (UI_BUTTON_MARGIN, half - UI_BUTTON_MARGIN / 2, bottom, top)
        primary_rect = (half + UI_BUTTON_MARGIN / 2, self.width - UI_BUTTON_MARGIN, bottom, top)
        return primary_rect, reset_rect

    # --- Dibujo ---
    def _draw_board(self, state: GameState):
        for x in range(state.grid_width):
            for y in range(state.grid_height):
                if is_border_cell(x, y, state.grid_width, state.grid_height):
                    color = BORDER_CELL_COLOR_UI
                elif is_light_cell(x, y):
                    color = CELL_COLOR_UI
                else:
                    color = CELL_COLOR_DARK_UI
                left, bottom = self._cell_to_window(x, y)
                arcade.draw_lrbt_rect_filled(left, left + self.cell_size,
                                             bottom, bottom + self.cell_size, color)

    def _draw_food(self, state: GameState):
        left, bottom = self._cell_to_window(state.food.x, state.food.y)
        half = self.cell_size / 2
        arcade.draw_circle_filled(left + half, bottom + half, half * 0.8, FOOD_COLOR_UI)

    def _draw_head(self, state: GameState):
        left, bottom = self._cell_to_window(state.head.x, state.head.y)
        size = self.cell_size
        arcade.draw_lrbt_rect_filled(left, left + size, bottom, bottom + size, HEAD_COLOR_UI)
        # Triángulo apuntando hacia donde se mueve la serpiente
        cx, cy = left + size / 2, bottom + size / 2
        q = size / 4
        # En pantalla el eje Y de la ventana va al revés que el del tablero
        dx, dy = state.direction.dx, -state.direction.dy
        tip = (cx + dx * q, cy + dy * q)
        base_a = (cx - dx * q - dy * q, cy - dy * q + dx * q)
        base_b = (cx - dx * q + dy * q, cy - dy * q - dx * q)
        arcade.draw_triangle_filled(*tip, *base_a, *base_b, arcade.color.BLACK)

    def _draw_snake(self, state: GameState):
        last_index = len(state.snake) - 1
        for index, segment in enumerate(state.snake):
            if index == 0:
                continue
            # La cola es algo más pequeña que el resto del cuerpo
            radius = self.cell_size / 2.5 if index == last_index else self.cell_size / 2
            left, bottom = self._cell_to_window(segment.x, segment.y)
            arcade.draw_circle_filled(left + self.cell_size / 2, bottom + self.cell_size / 2,
                                      radius, SNAKE_COLOR_UI)
        self._draw_head(state)

    def _draw_button(self, rect, label: str, enabled: bool):
        left, right, bottom, top = rect
        color = BUTTON_COLOR_UI if enabled else BUTTON_DISABLED_COLOR_UI
        arcade.draw_lrbt_rect_filled(left, right, bottom, top, color)
        arcade.draw_text(label, (left + right) / 2, (bottom + top) / 2, TEXT_COLOR_UI,
                         font_size=14, anchor_x="center", anchor_y="center")

    def on_draw(self):
        self.clear()
        state = self.session.observe_state()

        self._draw_board(state)
        self._draw_food(state)
        self._draw_snake(state)

        arcade.draw_text(score_text(state), 10, self.height - UI_PANEL_HEIGHT / 2,
                         TEXT_COLOR_UI, font_size=18, anchor_y="center")

        primary_rect, reset_rect = self._button_rects()
        primary_label, primary_intent = primary_button(state)
        reset_label, reset_intent = reset_button(state)
        self._draw_button(primary_rect, primary_label, primary_intent is not None)
        self._draw_button(reset_rect, reset_label, reset_intent is not None)

        if state.is_game_over:
            arcade.draw_text(GAME_OVER_TEXT, self.width / 2, self.board_bottom + self.board_height / 2,
                             GAMEOVER_COLOR_UI, font_size=32, anchor_x="center", anchor_y="center")

    # --- Eventos ---
    def on_update(self, delta_time: float):
        self.session.update(delta_time)

    def on_mouse_press(self, x, y, button, modifiers):
        state = self.session.observe_state()

        for rect, (_, intent) in zip(self._button_rects(),
                                     (primary_button(state), reset_button(state))):
            left, right, bottom, top = rect
            if left <= x <= right and bottom <= y <= top:
                if intent is not None:
                    self.session.on_intent(intent)
                return

        if not accepts_taps(state):
            return
        point = window_to_canvas(x, y, self.board_left, self.board_bottom,
                                 self.board_width, self.board_height)
        if point is not None:
            self.session.on_intent(UpdateDirection(point[0], point[1], self.board_width))

    def on_key_press(self, key, modifiers):
        state = self.session.observe_state()
        if key == arcade.key.ESCAPE:
            arcade.exit()
        elif key == arcade.key.S and not state.is_game_over and state.run_mode != RunMode.RUNNING:
            self.session.on_intent(StartGame())
        elif key == arcade.key.P and state.run_mode == RunMode.RUNNING:
            self.session.on_intent(PauseGame())
        elif key == arcade.key.R:
            # Mismas reglas que el botón: solo en pausa o tras perder
            _, intent = reset_button(state)
            if intent is not None:
                self.session.on_intent(intent)

    def on_close(self):
        self._unsubscribe()
        super().on_close()


def run_ui(session: SnakeSession, cell_size: int = UI_CELL_SIZE_DEFAULT):
    SnakeGameUI(session, cell_size=cell_size)
    arcade.run()


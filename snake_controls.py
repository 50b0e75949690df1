# snake_controls.py

"""
Utilidades de presentación compartidas por las interfaces (arcade y curses):
textos y estado de los botones, marcador y geometría del tablero.
No dibujan nada, solo leen el GameState.
"""

from typing import Optional, Tuple

from snake_session import PauseGame, ResetGame, StartGame
from snake_state import GameState, RunMode

# --- Textos de la Interfaz ---
LABEL_START = "Iniciar"
LABEL_PAUSE = "Pausar"
LABEL_RESUME = "Reanudar"
LABEL_NEW_GAME = "Nuevo Juego"
LABEL_RESTART = "Reiniciar"
GAME_OVER_TEXT = "Game Over"


def primary_button(state: GameState) -> Tuple[str, Optional[object]]:
    """Botón iniciar/pausar/reanudar. La intención es None si está deshabilitado."""
    if state.run_mode == RunMode.RUNNING:
        label, intent = LABEL_PAUSE, PauseGame()
    elif state.run_mode == RunMode.PAUSED:
        label, intent = LABEL_RESUME, StartGame()
    else:
        label, intent = LABEL_START, StartGame()
    if state.is_game_over:
        intent = None
    return label, intent


def reset_button(state: GameState) -> Tuple[str, Optional[object]]:
    """Botón de reinicio: solo activo en pausa o tras perder."""
    label = LABEL_RESTART if state.is_game_over else LABEL_NEW_GAME
    enabled = state.run_mode == RunMode.PAUSED or state.is_game_over
    return label, ResetGame() if enabled else None


def score_text(state: GameState) -> str:
    return f"Puntuación: {state.score}"


def accepts_taps(state: GameState) -> bool:
    # Los toques en el tablero solo cuentan con el juego en marcha
    return state.run_mode == RunMode.RUNNING


def sound_cues(previous: GameState, state: GameState) -> Tuple[bool, bool]:
    """
    Compara dos publicaciones seguidas y devuelve (comió, perdió).

    Un reinicio vuelve a longitud 1 y no cuenta como comer; los ticks que
    siguen llegando tras perder no repiten el sonido de fin de partida.
    """
    ate = len(state.snake) != len(previous.snake) and len(state.snake) != 1
    died = state.is_game_over and not previous.is_game_over
    return ate, died


def window_to_canvas(x: float, y: float, board_left: float, board_bottom: float,
                     board_width: float, board_height: float) -> Optional[Tuple[float, float]]:
    """
    Pasa un punto de la ventana (origen abajo a la izquierda, como arcade) al
    lienzo del tablero (origen arriba a la izquierda, y hacia abajo).
    Devuelve None si el punto cae fuera del tablero.
    """
    canvas_x = x - board_left
    canvas_y = board_bottom + board_height - y
    if not (0 <= canvas_x < board_width and 0 <= canvas_y < board_height):
        return None
    return canvas_x, canvas_y


def is_border_cell(x: int, y: int, grid_width: int, grid_height: int) -> bool:
    return x == 0 or y == 0 or x == grid_width - 1 or y == grid_height - 1


def is_light_cell(x: int, y: int) -> bool:
    # Tablero a cuadros en el interior
    return (x + y) % 2 == 0

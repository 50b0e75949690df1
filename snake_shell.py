# snake_shell.py

"""
Interfaz de terminal con curses. Cada celda del tablero ocupa dos caracteres
de ancho; los clics del ratón hacen de toques en el tablero y las teclas de
botones: 's' iniciar/reanudar, 'p' pausar, 'r' reiniciar, 'q' salir.
"""

import curses
import time

from snake_controls import (GAME_OVER_TEXT, accepts_taps, primary_button,
                            reset_button, score_text)
from snake_session import SnakeSession, UpdateDirection

CHARS_PER_CELL = 2       # Columnas de terminal por celda lógica
SHELL_FRAME_TIMEOUT_MS = 20  # Espera máxima de getch() por vuelta del bucle

HEAD_CHARS = "SS"
BODY_CHARS = "ss"
FOOD_CHARS = "**"
WALL_CHARS = "##"


def terminal_to_canvas(row: int, col: int):
    """
    Punto del lienzo equivalente a un clic en (fila, columna).

    El lienzo usa celdas cuadradas de CHARS_PER_CELL unidades, así que la
    fila se escala para que tap_to_cell devuelva la celda correcta.
    """
    return col, row * CHARS_PER_CELL


def _safe_addstr(stdscr, row, col, text, terminal_rows, terminal_cols):
    if 0 <= row < terminal_rows and 0 <= col and col + len(text) <= terminal_cols:
        try:
            stdscr.addstr(row, col, text)
        except curses.error:
            pass  # Escribir en la última celda de la terminal lanza error en curses


def draw_game_shell(stdscr, session: SnakeSession, terminal_rows, terminal_cols):
    state = session.observe_state()
    stdscr.erase()

    # Bordes: el anillo exterior del tablero es pared
    for row in range(state.grid_height):
        for cell_x in range(state.grid_width):
            if row in (0, state.grid_height - 1) or cell_x in (0, state.grid_width - 1):
                _safe_addstr(stdscr, row, cell_x * CHARS_PER_CELL, WALL_CHARS,
                             terminal_rows, terminal_cols)

    _safe_addstr(stdscr, state.food.y, state.food.x * CHARS_PER_CELL, FOOD_CHARS,
                 terminal_rows, terminal_cols)

    for i, segment in enumerate(state.snake):
        chars = HEAD_CHARS if i == 0 else BODY_CHARS
        _safe_addstr(stdscr, segment.y, segment.x * CHARS_PER_CELL, chars,
                     terminal_rows, terminal_cols)

    status_row = state.grid_height
    primary_label, primary_intent = primary_button(state)
    reset_label, reset_intent = reset_button(state)
    controls = []
    if primary_intent is not None:
        controls.append(f"[s/p] {primary_label}")
    if reset_intent is not None:
        controls.append(f"[r] {reset_label}")
    controls.append("[q] Salir")
    _safe_addstr(stdscr, status_row, 0, score_text(state), terminal_rows, terminal_cols)
    _safe_addstr(stdscr, status_row + 1, 0, "  ".join(controls), terminal_rows, terminal_cols)

    if state.is_game_over:
        msg_r = state.grid_height // 2
        msg_c = max(0, (state.grid_width * CHARS_PER_CELL - len(GAME_OVER_TEXT)) // 2)
        _safe_addstr(stdscr, msg_r, msg_c, GAME_OVER_TEXT, terminal_rows, terminal_cols)

    stdscr.refresh()


def handle_key(session: SnakeSession, user_key: int) -> bool:
    """Aplica una tecla a la sesión. Devuelve False si hay que salir."""
    state = session.observe_state()
    if user_key == ord('q'):
        return False
    if user_key in (ord('s'), ord('p')):
        # La misma tecla que el botón principal: iniciar, pausar o reanudar
        _, intent = primary_button(state)
        if intent is not None:
            session.on_intent(intent)
    elif user_key == ord('r'):
        _, intent = reset_button(state)
        if intent is not None:
            session.on_intent(intent)
    elif user_key == curses.KEY_MOUSE:
        try:
            _, col, row, _, _ = curses.getmouse()
        except curses.error:
            return True
        if accepts_taps(state):
            x, y = terminal_to_canvas(row, col)
            session.on_intent(UpdateDirection(x, y, state.grid_width * CHARS_PER_CELL))
    return True


def game_loop_shell_curses(stdscr, session: SnakeSession):
    curses.curs_set(0)
    curses.mousemask(curses.ALL_MOUSE_EVENTS)
    stdscr.keypad(True)
    stdscr.timeout(SHELL_FRAME_TIMEOUT_MS)

    state = session.observe_state()
    term_rows, term_cols = stdscr.getmaxyx()
    min_req_rows = state.grid_height + 2  # +1 marcador, +1 controles
    min_req_cols = state.grid_width * CHARS_PER_CELL

    if term_rows < min_req_rows or term_cols < min_req_cols:
        stdscr.clear()
        stdscr.addstr(0, 0, "Terminal is too small.")
        stdscr.addstr(1, 0, f"Required: {min_req_rows} rows, {min_req_cols} cols.")
        stdscr.addstr(2, 0, f"Available: {term_rows} rows, {term_cols} cols.")
        stdscr.addstr(4, 0, "Press any key to exit.")
        stdscr.timeout(-1)
        stdscr.getch()
        return

    last_time = time.monotonic()
    while True:
        user_key = stdscr.getch()
        # Re-check por si la terminal cambió de tamaño
        term_rows, term_cols = stdscr.getmaxyx()

        if user_key != -1 and not handle_key(session, user_key):
            break

        now = time.monotonic()
        session.update(now - last_time)
        last_time = now

        draw_game_shell(stdscr, session, term_rows, term_cols)


def run_shell(session: SnakeSession):
    try:
        curses.wrapper(game_loop_shell_curses, session)
    except curses.error as e:
        print(f"Error de Curses: {e}")
        print("Asegúrate de que la terminal es compatible y tiene el tamaño adecuado.")

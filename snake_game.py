# snake_game.py

"""
Punto de entrada: crea la sesión y lanza la interfaz elegida.

    python snake_game.py                 # ventana arcade
    python snake_game.py --ui shell      # terminal (curses)
"""

import argparse

from snake_session import SnakeSession
from snake_state import GRID_HEIGHT_DEFAULT, GRID_WIDTH_DEFAULT

UI_CHOICES = ("arcade", "shell")


def build_parser():
    parser = argparse.ArgumentParser(description="Snake Game")
    parser.add_argument("--ui", choices=UI_CHOICES, default="arcade",
                        help="Interfaz a usar: ventana arcade o terminal curses.")
    parser.add_argument("--width", type=int, default=GRID_WIDTH_DEFAULT,
                        help="Celdas del tablero en el eje X (pared incluida).")
    parser.add_argument("--height", type=int, default=GRID_HEIGHT_DEFAULT,
                        help="Celdas del tablero en el eje Y (pared incluida).")
    parser.add_argument("--seed", type=int, default=None,
                        help="Semilla para la posición de la comida.")
    parser.add_argument("--cell-size", type=int, default=20,
                        help="Píxeles por celda en la ventana arcade.")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        session = SnakeSession(grid_width=args.width, grid_height=args.height, seed=args.seed)
    except ValueError as e:
        parser.error(str(e))

    if args.ui == "shell":
        from snake_shell import run_shell  # curses solo hace falta en modo terminal
        run_shell(session)
    else:
        from snake_ui import run_ui  # Importar arcade solo aquí
        run_ui(session, cell_size=args.cell_size)


if __name__ == "__main__":
    main()

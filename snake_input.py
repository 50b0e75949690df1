# snake_input.py

"""
Traduce un toque en el tablero a un cambio de dirección de la serpiente.
"""

from typing import Tuple

from snake_state import Coordinate, Direction


def map_tap_to_direction(current_direction: Direction, head: Coordinate,
                         tap_x: int, tap_y: int) -> Direction:
    """
    Nueva dirección según la celda tocada.

    El giro siempre es perpendicular al eje actual: moviéndose en vertical
    solo se puede ir a izquierda o derecha (según tap_x frente a la cabeza),
    y moviéndose en horizontal solo arriba o abajo (según tap_y). Así nunca
    se pide la dirección contraria.
    """
    if current_direction.is_vertical:
        return Direction.LEFT if tap_x < head.x else Direction.RIGHT
    return Direction.UP if tap_y < head.y else Direction.DOWN


def tap_to_cell(x: float, y: float, canvas_width: int, grid_width: int) -> Tuple[int, int]:
    """Celda (columna, fila) que contiene el punto (x, y) del lienzo."""
    cell_size = canvas_width // grid_width
    if cell_size <= 0:
        raise ValueError(
            f"Lienzo de {canvas_width}px demasiado estrecho para {grid_width} celdas.")
    return int(x / cell_size), int(y / cell_size)

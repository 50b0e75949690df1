# snake_logic.py

"""
Motor de transición: dado un estado, calcula el estado del siguiente tick
(movimiento, colisiones, comida y crecimiento).
"""

from dataclasses import replace

import numpy as np

from snake_state import Coordinate, Direction, GameState, random_food_coordinate


def next_head(head: Coordinate, direction: Direction) -> Coordinate:
    """Celda a la que llega la cabeza moviéndose un paso en `direction`."""
    return Coordinate(head.x + direction.dx, head.y + direction.dy)


def is_within_bounds(coordinate: Coordinate, grid_width: int, grid_height: int) -> bool:
    # El anillo exterior del tablero es pared
    return (1 <= coordinate.x <= grid_width - 2 and
            1 <= coordinate.y <= grid_height - 2)


def _is_wall_collision(state: GameState, coordinate: Coordinate) -> bool:
    return not is_within_bounds(coordinate, state.grid_width, state.grid_height)


def _is_body_collision(state: GameState, coordinate: Coordinate) -> bool:
    # Se compara contra el cuerpo ANTES de mover: la celda de la cola cuenta
    # como ocupada aunque la cola se fuera a desplazar en este mismo tick.
    return coordinate in state.snake


def is_collision(state: GameState, coordinate: Coordinate) -> bool:
    return _is_body_collision(state, coordinate) or _is_wall_collision(state, coordinate)


def advance(state: GameState, rng: np.random.Generator) -> GameState:
    """
    Avanza el juego un tick.

    Si el juego ya terminó devuelve el mismo estado. Si la nueva cabeza choca
    con el cuerpo o con la pared, devuelve el estado con is_game_over=True y
    el resto de campos sin tocar. Si come, la serpiente crece un segmento y la
    comida reaparece en una celda aleatoria del interior (puede caer sobre el
    cuerpo). Solo consume `rng` cuando hay que colocar comida nueva.
    """
    if state.is_game_over:
        return state

    new_head = next_head(state.head, state.direction)

    if is_collision(state, new_head):
        return replace(state, is_game_over=True)

    new_snake = (new_head,) + state.snake

    if new_head == state.food:
        new_food = random_food_coordinate(rng, state.grid_width, state.grid_height)
    else:
        new_snake = new_snake[:-1]  # No ha comido: la cola avanza
        new_food = state.food

    return replace(state, snake=new_snake, food=new_food)

# snake_state.py

"""
Modelo del estado del juego: coordenadas, direcciones, modo de ejecución
y la instantánea inmutable GameState que publica la sesión.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Tuple

import numpy as np

# --- Constantes del Tablero ---
GRID_WIDTH_DEFAULT = 20   # Celdas en el eje X
GRID_HEIGHT_DEFAULT = 30  # Celdas en el eje Y
MIN_GRID_SIZE = 3         # Con menos de 3 celdas no hay interior jugable


class Coordinate(NamedTuple):
    x: int
    y: int


SNAKE_START = Coordinate(5, 5)


class Direction(Enum):
    # El eje Y crece hacia abajo, como en la pantalla
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def is_vertical(self) -> bool:
        return self in (Direction.UP, Direction.DOWN)


class RunMode(Enum):
    IDLE = "idle"        # Aún no ha empezado
    RUNNING = "running"  # Avanzando con cada tick
    PAUSED = "paused"


def random_food_coordinate(rng: np.random.Generator, grid_width: int, grid_height: int) -> Coordinate:
    """Coordenada aleatoria uniforme dentro del interior (sin excluir la serpiente)."""
    # integers() excluye el límite superior: x en [1, W-2], y en [1, H-2]
    return Coordinate(int(rng.integers(1, grid_width - 1)),
                      int(rng.integers(1, grid_height - 1)))


def check_grid(grid_width: int, grid_height: int):
    if grid_width < MIN_GRID_SIZE or grid_height < MIN_GRID_SIZE:
        raise ValueError(
            f"El tablero {grid_width}x{grid_height} no tiene interior "
            f"(mínimo {MIN_GRID_SIZE}x{MIN_GRID_SIZE}).")


def start_position(grid_width: int, grid_height: int) -> Coordinate:
    """Posición inicial de la cabeza, ajustada al interior en tableros pequeños."""
    return Coordinate(min(SNAKE_START.x, grid_width - 2),
                      min(SNAKE_START.y, grid_height - 2))


@dataclass(frozen=True)
class GameState:
    grid_width: int = GRID_WIDTH_DEFAULT
    grid_height: int = GRID_HEIGHT_DEFAULT
    direction: Direction = Direction.RIGHT
    snake: Tuple[Coordinate, ...] = (SNAKE_START,)  # Cabeza primero, cola al final
    food: Coordinate = Coordinate(10, 10)
    is_game_over: bool = False
    run_mode: RunMode = RunMode.IDLE

    def __post_init__(self):
        check_grid(self.grid_width, self.grid_height)
        if not self.snake:
            raise ValueError("La serpiente necesita al menos un segmento.")
        # Aceptar listas o pares sueltos y guardarlos como tupla de Coordinate
        object.__setattr__(self, "snake", tuple(Coordinate(*c) for c in self.snake))
        object.__setattr__(self, "food", Coordinate(*self.food))

    @property
    def head(self) -> Coordinate:
        return self.snake[0]

    @property
    def score(self) -> int:
        return len(self.snake) - 1


def new_game_state(rng: np.random.Generator,
                   grid_width: int = GRID_WIDTH_DEFAULT,
                   grid_height: int = GRID_HEIGHT_DEFAULT) -> GameState:
    """Estado inicial: serpiente de un segmento mirando a la derecha y comida aleatoria."""
    check_grid(grid_width, grid_height)
    return GameState(
        grid_width=grid_width,
        grid_height=grid_height,
        direction=Direction.RIGHT,
        snake=(start_position(grid_width, grid_height),),
        food=random_food_coordinate(rng, grid_width, grid_height),
        is_game_over=False,
        run_mode=RunMode.IDLE,
    )

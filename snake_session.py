# snake_session.py

"""
Controlador de la sesión de juego.

Es el único dueño del estado publicado: recibe las intenciones de la interfaz
(iniciar, pausar, reiniciar, cambiar dirección), gestiona el modo de ejecución
y aplica el motor una vez por tick. El bucle de la interfaz (arcade o curses)
le pasa el tiempo transcurrido con update(delta_time); el intervalo de cada
tick depende de la longitud de la serpiente.
"""

from dataclasses import dataclass, replace
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from snake_input import map_tap_to_direction, tap_to_cell
from snake_logic import advance
from snake_state import (GRID_HEIGHT_DEFAULT, GRID_WIDTH_DEFAULT, GameState,
                         RunMode, new_game_state)

# --- Velocidad según longitud ---
# (longitud máxima, segundos por tick); por encima del último tramo se usa
# TICK_INTERVAL_FASTEST
SPEED_TIERS = (
    (5, 0.120),
    (10, 0.110),
)
TICK_INTERVAL_FASTEST = 0.100


def tick_interval(snake_length: int,
                  tiers: Sequence[Tuple[int, float]] = SPEED_TIERS,
                  fastest: float = TICK_INTERVAL_FASTEST) -> float:
    for max_length, interval in tiers:
        if snake_length <= max_length:
            return interval
    return fastest


# --- Intenciones de la interfaz ---
@dataclass(frozen=True)
class StartGame:
    pass


@dataclass(frozen=True)
class PauseGame:
    pass


@dataclass(frozen=True)
class ResetGame:
    pass


@dataclass(frozen=True)
class UpdateDirection:
    x: float
    y: float
    canvas_width: int


class SnakeSession:
    def __init__(self, grid_width: int = GRID_WIDTH_DEFAULT,
                 grid_height: int = GRID_HEIGHT_DEFAULT,
                 seed: Optional[int] = None,
                 rng: Optional[np.random.Generator] = None,
                 speed_tiers: Sequence[Tuple[int, float]] = SPEED_TIERS,
                 fastest_interval: float = TICK_INTERVAL_FASTEST,
                 initial_state: Optional[GameState] = None):
        if initial_state is not None:
            # Los reinicios conservan el tamaño del tablero inicial
            grid_width, grid_height = initial_state.grid_width, initial_state.grid_height
        self.grid_width = grid_width
        self.grid_height = grid_height
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.speed_tiers = tuple(speed_tiers)
        self.fastest_interval = fastest_interval

        self._subscribers: List[Callable[[GameState], None]] = []
        self._elapsed = 0.0  # Tiempo acumulado desde el último tick
        self._state = initial_state if initial_state is not None else self._fresh_state()

    def _fresh_state(self) -> GameState:
        return new_game_state(self.rng, self.grid_width, self.grid_height)

    # --- Publicación del estado ---
    @property
    def state(self) -> GameState:
        return self._state

    def observe_state(self) -> GameState:
        """Instantánea actual, completa y coherente."""
        return self._state

    def subscribe(self, callback: Callable[[GameState], None]) -> Callable[[], None]:
        """Registra `callback` para cada publicación; devuelve la función para darse de baja."""
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)
        return unsubscribe

    def _publish(self, new_state: GameState):
        # Único punto de escritura del estado
        self._state = new_state
        for callback in list(self._subscribers):
            callback(new_state)

    # --- Intenciones ---
    def on_intent(self, intent):
        if isinstance(intent, StartGame):
            self.start()
        elif isinstance(intent, PauseGame):
            self.pause()
        elif isinstance(intent, ResetGame):
            self.reset()
        elif isinstance(intent, UpdateDirection):
            self.submit_direction(intent.x, intent.y, intent.canvas_width)
        else:
            raise TypeError(f"Intención desconocida: {intent!r}")

    def start(self):
        if self._state.run_mode == RunMode.RUNNING:
            return  # Ya hay un temporizador en marcha
        self._elapsed = 0.0
        self._publish(replace(self._state, run_mode=RunMode.RUNNING))

    def pause(self):
        self._elapsed = 0.0
        self._publish(replace(self._state, run_mode=RunMode.PAUSED))

    def reset(self):
        self._elapsed = 0.0
        self._publish(self._fresh_state())

    def submit_direction(self, x: float, y: float, canvas_width: int):
        state = self._state
        if state.is_game_over:
            return
        tap_x, tap_y = tap_to_cell(x, y, canvas_width, state.grid_width)
        direction = map_tap_to_direction(state.direction, state.head, tap_x, tap_y)
        self._publish(replace(state, direction=direction))

    # --- Temporizador de ticks ---
    def current_interval(self) -> float:
        return tick_interval(len(self._state.snake), self.speed_tiers, self.fastest_interval)

    def update(self, delta_time: float) -> bool:
        """
        Avanza el temporizador `delta_time` segundos.

        Devuelve True si en esta llamada se aplicó un tick. Como mucho se aplica
        uno por llamada; el tiempo que sobra tras un tick cuenta para el
        siguiente. Si la sesión no está en marcha se descarta el tiempo
        acumulado, de modo que una pausa o un reinicio a mitad de la espera
        cancelan el tick pendiente.
        """
        if self._state.run_mode != RunMode.RUNNING:
            self._elapsed = 0.0
            return False

        self._elapsed += delta_time
        interval = self.current_interval()
        if self._elapsed < interval:
            return False

        # El sobrante pasa al siguiente tick para no perder el ritmo entre frames
        self._elapsed = min(self._elapsed - interval, interval)
        # Con game over el tick sigue llegando pero advance no cambia nada
        self._publish(advance(self._state, self.rng))
        return True

    def tick(self):
        """Aplica un tick inmediatamente si la sesión está en marcha."""
        return self.update(self.current_interval())

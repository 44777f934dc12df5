"""
Motor de estado de la calculadora.

Este módulo provee la clase CalculatorEngine, que recibe la entrada
tecla a tecla, mantiene la ecuación pendiente y la evalúa de izquierda
a derecha. La interfaz gráfica solo invoca sus operaciones y dibuja el
estado observable.

Contrato de interfaz:
    - input_digit(token), input_operator(op), equals(), percent(),
      clear(), backspace(), clear_history()
    - display, equation, finished, history: propiedades de solo lectura
    - snapshot() -> CalculatorState
    - add_listener(callback) / remove_listener(callback)
"""

import logging
from dataclasses import dataclass

from formula_evaluator import LeftToRightEvaluator, format_number, parse_number


logger = logging.getLogger(__name__)

HISTORY_LIMIT = 50

OPERATORS = ("+", "-", "×", "÷")
OPERATOR_ALIASES = {"*": "×", "/": "÷"}
DIGIT_TOKENS = "0123456789."

ERROR_TEXT = "Error"


@dataclass(frozen=True)
class HistoryEntry:
    """Cálculo completado: ecuación completa y su resultado."""

    equation: str
    result: str


@dataclass(frozen=True)
class CalculatorState:
    """Fotografía inmutable del estado que dibuja la interfaz."""

    display: str
    equation: str
    finished: bool
    history: tuple


class CalculatorEngine:
    """Máquina de estados de la calculadora secuencial."""

    def __init__(self, history_limit: int = HISTORY_LIMIT, evaluator=None):
        if history_limit < 1:
            raise ValueError("El historial debe admitir al menos una entrada")

        self._evaluator = evaluator if evaluator is not None else LeftToRightEvaluator()
        self._history_limit = history_limit
        self._history: list[HistoryEntry] = []
        self._listeners = []

        self._display = "0"
        # Pares (operando, operador) ya confirmados
        self._pending: list[tuple[str, str]] = []
        self._finished = False

    # ── Estado observable ────────────────────────────────────────

    @property
    def display(self) -> str:
        return self._display

    @property
    def equation(self) -> str:
        return "".join(f"{operand} {op} " for operand, op in self._pending)

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def history(self) -> tuple:
        return tuple(self._history)

    @property
    def history_limit(self) -> int:
        return self._history_limit

    def snapshot(self) -> CalculatorState:
        return CalculatorState(
            display=self._display,
            equation=self.equation,
            finished=self._finished,
            history=self.history,
        )

    # ── Suscriptores ─────────────────────────────────────────────

    def add_listener(self, callback):
        """Registra ``callback(engine)``, llamado tras cada operación."""
        self._listeners.append(callback)

    def remove_listener(self, callback):
        self._listeners.remove(callback)

    def _notify(self):
        for callback in list(self._listeners):
            callback(self)

    # ── Entrada ──────────────────────────────────────────────────

    def input_digit(self, token: str):
        if len(token) != 1 or token not in DIGIT_TOKENS:
            raise ValueError(f"Dígito no válido: {token!r}")

        if self._finished:
            self._display = token
            self._finished = False
        elif self._display in ("0", ERROR_TEXT):
            self._display = token
        elif token == "." and "." in self._display:
            logger.debug("Segundo punto decimal ignorado en %r", self._display)
        else:
            self._display += token

        self._notify()

    def input_operator(self, op: str):
        op = OPERATOR_ALIASES.get(op, op)
        if op not in OPERATORS:
            raise ValueError(f"Operador no válido: {op!r}")

        if self._finished:
            # Encadena una operación nueva sobre el último resultado
            self._pending = [(self._display, op)]
            self._finished = False
            self._display = "0"
        elif self._display == "0" and self._pending:
            # Operadores consecutivos: gana el último
            operand, _ = self._pending[-1]
            self._pending[-1] = (operand, op)
        else:
            self._pending.append((self._display, op))
            self._display = "0"

        self._notify()

    def equals(self):
        if not self._pending:
            self._notify()
            return

        full_equation = self.equation + self._display
        try:
            result = self._evaluator.evaluate(full_equation)
        except (ValueError, ArithmeticError, TypeError):
            logger.warning("No se pudo evaluar %r", full_equation, exc_info=True)
            self._display = ERROR_TEXT
            self._pending = []
        else:
            logger.debug("%s = %s", full_equation, result)
            self._push_history(HistoryEntry(full_equation, result))
            self._display = result
            self._pending = []
            self._finished = True

        self._notify()

    def percent(self):
        value = parse_number(self._display)
        if value is not None:
            self._display = format_number(value / 100)
        self._notify()

    def clear(self):
        self._display = "0"
        self._pending = []
        self._finished = False
        self._notify()

    def backspace(self):
        if not self._finished:
            if len(self._display) > 1:
                self._display = self._display[:-1]
            else:
                self._display = "0"
        self._notify()

    # ── Historial ────────────────────────────────────────────────

    def clear_history(self):
        self._history.clear()
        self._notify()

    def _push_history(self, entry: HistoryEntry):
        self._history.insert(0, entry)
        if len(self._history) > self._history_limit:
            evicted = self._history[self._history_limit:]
            del self._history[self._history_limit:]
            logger.debug("Historial lleno, se descartan %d entradas", len(evicted))

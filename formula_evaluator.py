"""Evaluación secuencial (izquierda a derecha) de ecuaciones de la calculadora."""

import logging
import math
import operator
import re
from decimal import ROUND_HALF_UP, Context, Decimal


logger = logging.getLogger(__name__)

RESULT_DECIMALS = 8

# Dígitos enteros del mayor float finito (~1.8e308)
FLOAT_INTEGER_DIGITS = 309

# Límites en los que la representación pasa a notación exponencial
PLAIN_LOWER_LIMIT = 1e-6
PLAIN_UPPER_LIMIT = 1e21

_NUMBER_PREFIX_RE = re.compile(
    r"^\s*(?P<sign>[+-]?)(?:(?P<inf>Infinity|∞)"
    r"|(?P<num>(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)


def parse_number(text: str):
    """Interpreta el prefijo numérico de ``text`` o devuelve None.

    Es tolerante como un ``parseFloat``: ``"1.5abc"`` vale 1.5 y el
    símbolo ``∞`` se acepta para poder encadenar un resultado infinito.
    """
    match = _NUMBER_PREFIX_RE.match(text)
    if match is None:
        return None

    sign = -1.0 if match.group("sign") == "-" else 1.0
    if match.group("inf"):
        return sign * math.inf
    return sign * float(match.group("num"))


def format_number(value: float) -> str:
    """Representación decimal más corta del valor, sin ceros sobrantes."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"
    if value == 0:
        return "0"

    shortest = Decimal(repr(value))

    if PLAIN_LOWER_LIMIT <= abs(value) < PLAIN_UPPER_LIMIT:
        text = format(shortest, "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text

    sign, digits, _ = shortest.as_tuple()
    exponent = shortest.adjusted()
    digits = "".join(str(d) for d in digits).rstrip("0") or "0"
    mantissa = digits[0]
    if len(digits) > 1:
        mantissa += "." + digits[1:]
    exp_sign = "+" if exponent >= 0 else "-"
    return f"{'-' if sign else ''}{mantissa}e{exp_sign}{abs(exponent)}"


class FloatArithmeticProvider:
    """Provee las operaciones binarias de la calculadora sobre float."""

    @staticmethod
    def _divide(left: float, right: float) -> float:
        # La división por cero da 0, nunca ∞ ni NaN
        if right == 0:
            return 0.0
        return left / right

    def build_operations(self) -> dict:
        return {
            "+": operator.add,
            "-": operator.sub,
            "×": operator.mul,
            "÷": self._divide,
        }


class LeftToRightEvaluator:
    """Pliega ``número operador número ...`` de izquierda a derecha.

    No hay precedencia: ``2 + 3 × 4`` vale 20. Los operandos que no se
    pueden interpretar se saltan junto con su operador, por lo que la
    evaluación nunca lanza excepciones.
    """

    def __init__(self, provider: FloatArithmeticProvider = None,
                 decimals: int = RESULT_DECIMALS):
        self._provider = provider if provider is not None else FloatArithmeticProvider()
        self._decimals = decimals

    def evaluate(self, expression: str) -> str:
        parts = expression.strip().split(" ")
        if len(parts) < 3:
            return parts[0]

        first = parse_number(parts[0])
        result = first if first is not None else math.nan
        operations = self._provider.build_operations()

        for i in range(1, len(parts), 2):
            op = parts[i]
            operand = parse_number(parts[i + 1]) if i + 1 < len(parts) else None
            if operand is None:
                logger.debug("Operando inválido tras %r, se omite", op)
                continue

            fn = operations.get(op)
            if fn is None:
                logger.debug("Operador desconocido %r, se omite", op)
                continue
            result = fn(result, operand)

        return self._format_result(result)

    def _format_result(self, value: float) -> str:
        if math.isfinite(value):
            value = self._round_half_up(value)
        return format_number(value)

    def _round_half_up(self, value: float) -> float:
        # Los empates se alejan del cero: 0.001953125 -> 0.00195313
        context = Context(prec=FLOAT_INTEGER_DIGITS + self._decimals)
        quantum = Decimal(1).scaleb(-self._decimals)
        exact = Decimal(value)
        return float(exact.quantize(quantum, rounding=ROUND_HALF_UP, context=context))

import pytest

from calculator_engine import CalculatorEngine


def _press(engine, keys):
    """Pulsa teclas separadas por espacios: dígitos, operadores, '=', '%', 'C', '<'."""
    for key in keys.split():
        if key == "=":
            engine.equals()
        elif key == "%":
            engine.percent()
        elif key == "C":
            engine.clear()
        elif key == "<":
            engine.backspace()
        elif key in ("+", "-", "×", "÷", "*", "/"):
            engine.input_operator(key)
        else:
            for char in key:
                engine.input_digit(char)
    return engine


@pytest.fixture
def engine():
    return CalculatorEngine()


@pytest.fixture
def press():
    return _press

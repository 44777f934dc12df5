"""Punto de entrada de la calculadora."""

import logging
import os
import tkinter as tk

from calculator_engine import CalculatorEngine
from calculator_ui import CalculatorApp


HISTORY_LIMIT = 50
WINDOW_GEOMETRY = "340x620"
WINDOW_MIN_SIZE = (320, 560)


def _setup_logging():
    level_name = os.getenv("CALC_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    logger = logging.getLogger()
    logger.setLevel(level)

    if logger.handlers:
        return logger  # ya configurado

    fmt = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(fmt)
    logger.addHandler(handler)
    return logger


def main():
    log = _setup_logging()

    root = tk.Tk()
    root.geometry(WINDOW_GEOMETRY)
    root.minsize(*WINDOW_MIN_SIZE)

    engine = CalculatorEngine(history_limit=HISTORY_LIMIT)
    CalculatorApp(root, engine=engine)
    log.info("Calculadora iniciada (historial de %d entradas)", HISTORY_LIMIT)
    root.mainloop()


if __name__ == "__main__":
    main()

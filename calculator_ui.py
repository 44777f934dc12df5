"""
Interfaz gráfica de la calculadora.

Usa tkinter. Toda la lógica vive en CalculatorEngine; la ventana solo
traduce pulsaciones a operaciones del motor y vuelve a dibujar su
estado cada vez que este notifica un cambio.
"""

import logging
import tkinter as tk
from tkinter import font as tkfont

from calculator_engine import CalculatorEngine


logger = logging.getLogger(__name__)


class CalculatorApp:
    """Ventana principal de la calculadora."""

    # ── Paleta de colores ────────────────────────────────────────
    C = {
        "bg":         "#FDF2F8",
        "display_bg": "#FCE7F3",
        "num":        "#FBCFE8",
        "num_fg":     "#DB2777",
        "op":         "#F472B6",
        "op_fg":      "#FFFFFF",
        "special":    "#F9A8D4",
        "special_fg": "#BE185D",
        "equals":     "#EC4899",
        "equals_fg":  "#FFFFFF",
        "expr_fg":    "#F9A8D4",
        "result_fg":  "#DB2777",
        "history_bg": "#FFFFFF",
        "history_fg": "#9D174D",
    }

    # ── Definiciones del teclado ─────────────────────────────────
    #  Cada fila es una lista de (texto, acción, tipo_color)
    #  tipo_color: "num", "op", "special", "equals"

    KEYPAD = [
        [("%", "percent", "special"), ("AC", "clear", "special"),
         ("÷", "op:÷", "op"), ("×", "op:×", "op")],

        [("7", "digit:7", "num"), ("8", "digit:8", "num"),
         ("9", "digit:9", "num"), ("-", "op:-", "op")],

        [("4", "digit:4", "num"), ("5", "digit:5", "num"),
         ("6", "digit:6", "num"), ("+", "op:+", "op")],

        [("1", "digit:1", "num"), ("2", "digit:2", "num"),
         ("3", "digit:3", "num"), ("=", "equals", "equals")],

        [("0", "digit:0", "num"), (".", "digit:.", "num")],
    ]

    # Teclas físicas → acción
    KEY_BINDINGS = {
        "<Return>": "equals",
        "<KP_Enter>": "equals",
        "<Escape>": "clear",
        "<BackSpace>": "backspace",
    }
    CHAR_ACTIONS = {
        "=": "equals",
        "%": "percent",
        ",": "digit:.",
        "+": "op:+",
        "-": "op:-",
        "*": "op:*",
        "x": "op:×",
        "/": "op:/",
        "h": "history",
    }

    # ────────────────────────────────────────────────────────────

    def __init__(self, root: tk.Tk, engine=None):
        self.root = root
        self.root.title("Calculadora")
        self.root.configure(bg=self.C["bg"])
        self.root.resizable(False, False)

        self.engine = engine if engine is not None else CalculatorEngine()
        self._history_visible = False

        self._init_fonts()
        self._create_display()
        self._create_keypad()
        self._create_history_panel()
        self._bind_keyboard()

        self.engine.add_listener(self._render)
        self._render(self.engine)

    # ── Fuentes ──────────────────────────────────────────────────

    def _init_fonts(self):
        self._f_expr   = tkfont.Font(family="Consolas", size=13)
        self._f_result = tkfont.Font(family="Consolas", size=28, weight="bold")
        self._f_btn    = tkfont.Font(family="Segoe UI", size=16, weight="bold")
        self._f_small  = tkfont.Font(family="Segoe UI", size=11)

    # ── Pantalla ─────────────────────────────────────────────────

    def _create_display(self):
        frame = tk.Frame(self.root, bg=self.C["display_bg"], padx=12, pady=8)
        frame.pack(fill="x", padx=6, pady=(6, 2))

        self.equation_var = tk.StringVar()
        tk.Label(
            frame, textvariable=self.equation_var, anchor="e",
            font=self._f_expr, bg=self.C["display_bg"], fg=self.C["expr_fg"],
        ).pack(fill="x", pady=(4, 0))

        self.display_var = tk.StringVar(value="0")
        tk.Label(
            frame, textvariable=self.display_var, anchor="e",
            font=self._f_result, bg=self.C["display_bg"],
            fg=self.C["result_fg"],
        ).pack(fill="x", pady=(2, 4))

        row = tk.Frame(self.root, bg=self.C["bg"])
        row.pack(fill="x", padx=6, pady=2)

        tk.Button(
            row, text="⌫", font=self._f_btn,
            bg=self.C["special"], fg=self.C["special_fg"],
            activebackground=self.C["op"], relief="flat", cursor="hand2",
            command=lambda: self._on_key("backspace"), width=4,
        ).pack(side="left")

        self.history_btn = tk.Button(
            row, text="Historial", font=self._f_small,
            bg=self.C["special"], fg=self.C["special_fg"],
            activebackground=self.C["op"], relief="flat", cursor="hand2",
            command=self._toggle_history, padx=8,
        )
        self.history_btn.pack(side="right")

    # ── Teclado ──────────────────────────────────────────────────

    def _create_keypad(self):
        frame = tk.Frame(self.root, bg=self.C["bg"])
        frame.pack(fill="both", expand=True, padx=6, pady=(2, 6))

        max_cols = max(len(row) for row in self.KEYPAD)
        for c in range(max_cols):
            frame.columnconfigure(c, weight=1, uniform="key")

        for r, row_def in enumerate(self.KEYPAD):
            spans = self._compute_spans(len(row_def), max_cols)
            col_pos = 0
            for idx, (text, action, kind) in enumerate(row_def):
                btn = tk.Button(
                    frame, text=text, font=self._f_btn,
                    bg=self.C[kind], fg=self.C[f"{kind}_fg"],
                    activebackground=self.C["special"], relief="flat",
                    command=lambda a=action: self._on_key(a),
                )
                btn.grid(row=r, column=col_pos, columnspan=spans[idx],
                         sticky="nsew", padx=2, pady=2, ipady=10)
                col_pos += spans[idx]

        for r in range(len(self.KEYPAD)):
            frame.rowconfigure(r, weight=1)

    @staticmethod
    def _compute_spans(cols_in_row: int, max_cols: int) -> list[int]:
        """Reparte max_cols entre cols_in_row botones."""
        base, extra = divmod(max_cols, cols_in_row)
        spans = [base] * cols_in_row
        # Las columnas sobrantes van al primer botón (el '0')
        spans[0] += extra
        return spans

    # ── Historial ────────────────────────────────────────────────

    def _create_history_panel(self):
        self.history_frame = tk.Frame(self.root, bg=self.C["history_bg"],
                                      padx=8, pady=6)

        self.history_list = tk.Listbox(
            self.history_frame, font=self._f_small, height=8,
            bg=self.C["history_bg"], fg=self.C["history_fg"],
            relief="flat", highlightthickness=0, activestyle="none",
        )
        self.history_list.pack(fill="both", expand=True)

        tk.Button(
            self.history_frame, text="Borrar", font=self._f_small,
            bg=self.C["special"], fg=self.C["special_fg"],
            activebackground=self.C["op"], relief="flat", cursor="hand2",
            command=self.engine.clear_history,
        ).pack(side="right", pady=(4, 0))

    def _toggle_history(self):
        self._history_visible = not self._history_visible
        if self._history_visible:
            self.history_frame.pack(fill="both", padx=6, pady=(0, 6))
        else:
            self.history_frame.pack_forget()

    # ── Atajos de teclado ────────────────────────────────────────

    def _bind_keyboard(self):
        for sequence, action in self.KEY_BINDINGS.items():
            self.root.bind(sequence, lambda _e, a=action: self._on_key(a))
        self.root.bind("<Key>", self._on_char)

    def _on_char(self, event):
        char = event.char
        if not char:
            return
        if char in "0123456789.":
            self._on_key(f"digit:{char}")
        elif char in self.CHAR_ACTIONS:
            self._on_key(self.CHAR_ACTIONS[char])

    # ── Acciones ─────────────────────────────────────────────────

    def _on_key(self, action: str):
        if action == "clear":
            self.engine.clear()
        elif action == "backspace":
            self.engine.backspace()
        elif action == "equals":
            self.engine.equals()
        elif action == "percent":
            self.engine.percent()
        elif action == "history":
            self._toggle_history()
        elif action.startswith("digit:"):
            self.engine.input_digit(action[6:])
        elif action.startswith("op:"):
            self.engine.input_operator(action[3:])
        else:
            logger.debug("Acción desconocida: %s", action)

    # ── Dibujo ───────────────────────────────────────────────────

    def _render(self, engine):
        state = engine.snapshot()
        self.display_var.set(state.display)
        self.equation_var.set(state.equation)

        self.history_list.delete(0, tk.END)
        for entry in state.history:
            self.history_list.insert(tk.END, f"{entry.equation} = {entry.result}")

"""
Interfaz gráfica de la calculadora.

Usa tkinter. La interfaz no interpreta nada: cada botón envía su token
a la sesión y la pantalla se redibuja a partir de la vista que la
sesión publica tras cada pulsación.
"""

import tkinter as tk
from tkinter import font as tkfont

from calculator_session import CalculatorSession
from calculator_state import HISTORY_LIMIT
from keyboard_input import KeyboardBinding
from number_formatter import MAX_DISPLAY_LENGTH


# ═════════════════════════════════════════════════════════════════
#  Widget: pantalla de resultado
# ═════════════════════════════════════════════════════════════════

class ResultDisplay:
    """Entry de solo lectura que mantiene visible el final del número."""

    VISIBLE_CHARS = MAX_DISPLAY_LENGTH + 1

    def __init__(self, parent, **kw):
        self._var = tk.StringVar(value="0")
        kw.setdefault("width", self.VISIBLE_CHARS)
        self._entry = tk.Entry(parent, textvariable=self._var,
                               state="readonly", **kw)

    @property
    def widget(self):
        return self._entry

    def set_text(self, text: str):
        self._var.set(text)
        self._entry.after(0, self._scroll_to_end)

    def get_text(self) -> str:
        return self._var.get()

    def _scroll_to_end(self):
        self._entry.icursor(tk.END)
        self._entry.xview_moveto(1.0)


# ═════════════════════════════════════════════════════════════════
#  Aplicación principal
# ═════════════════════════════════════════════════════════════════

class CalculatorApp:
    """Ventana principal de la calculadora."""

    # ── Paleta de colores ────────────────────────────────────────
    C = {
        "bg":         "#1E1E2E",
        "display_bg": "#181825",
        "num":        "#313244",
        "num_fg":     "#CDD6F4",
        "op":         "#FAB387",
        "op_fg":      "#1E1E2E",
        "func":       "#CBA6F7",
        "func_fg":    "#1E1E2E",
        "mod":        "#89B4FA",
        "mod_fg":     "#1E1E2E",
        "clear":      "#F38BA8",
        "clear_fg":   "#1E1E2E",
        "equals":     "#A6E3A1",
        "equals_fg":  "#1E1E2E",
        "history_fg": "#A6ADC8",
        "result_fg":  "#CDD6F4",
    }

    # ── Definición del teclado ───────────────────────────────────
    #  Cada fila es una lista de (texto, token, tipo_color)

    KEYPAD = [
        [("C", "C", "clear"), ("±", "±", "mod"),
         ("%", "%", "mod"), ("DEL", "DEL", "clear")],

        [("√", "√", "func"), ("x²", "x²", "func"),
         ("1/x", "1/x", "func"), ("÷", "÷", "op")],

        [("7", "7", "num"), ("8", "8", "num"),
         ("9", "9", "num"), ("×", "×", "op")],

        [("4", "4", "num"), ("5", "5", "num"),
         ("6", "6", "num"), ("-", "-", "op")],

        [("1", "1", "num"), ("2", "2", "num"),
         ("3", "3", "num"), ("+", "+", "op")],

        [("0", "0", "num"), (".", ".", "num"), ("=", "=", "equals")],
    ]

    # ────────────────────────────────────────────────────────────

    def __init__(self, root: tk.Tk, session=None):
        self.root = root
        self.root.title("Calculadora")
        self.root.configure(bg=self.C["bg"])
        self.root.resizable(False, False)

        self.session = session if session is not None else CalculatorSession()

        self._init_fonts()
        self._create_display()
        self._create_history()
        self._create_keypad()

        self._unsubscribe = self.session.subscribe(self.render)

    # ── Fuentes ──────────────────────────────────────────────────

    def _init_fonts(self):
        self._f_title   = tkfont.Font(family="Segoe UI", size=13, weight="bold")
        self._f_result  = tkfont.Font(family="Consolas", size=24)
        self._f_history = tkfont.Font(family="Consolas", size=11)
        self._f_btn     = tkfont.Font(family="Segoe UI", size=15)

    # ── Pantalla ─────────────────────────────────────────────────

    def _create_display(self):
        tk.Label(
            self.root, text="Calculadora", font=self._f_title,
            bg=self.C["bg"], fg=self.C["result_fg"], anchor="w",
        ).pack(fill="x", padx=10, pady=(8, 4))

        frame = tk.Frame(self.root, bg=self.C["display_bg"], padx=12, pady=8)
        frame.pack(fill="x", padx=6, pady=(2, 2))

        self.result_display = ResultDisplay(
            frame,
            font=self._f_result, bg=self.C["display_bg"],
            fg=self.C["result_fg"],
            readonlybackground=self.C["display_bg"],
            relief="flat", justify="right", bd=0,
        )
        self.result_display.widget.pack(fill="x")

    # ── Historial ────────────────────────────────────────────────

    def _create_history(self):
        self.history_list = tk.Listbox(
            self.root, height=HISTORY_LIMIT, font=self._f_history,
            bg=self.C["display_bg"], fg=self.C["history_fg"],
            relief="flat", bd=0, highlightthickness=0,
            justify="right", activestyle="none", takefocus=0,
        )
        self.history_list.pack(fill="x", padx=6, pady=(2, 2))

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
            for idx, (text, token, kind) in enumerate(row_def):
                btn = tk.Button(
                    frame, text=text, font=self._f_btn,
                    bg=self.C[kind], fg=self.C[f"{kind}_fg"],
                    activebackground=self.C["num"], relief="flat",
                    command=lambda t=token: self.session.press(t),
                )
                btn.grid(row=r, column=col_pos, columnspan=spans[idx],
                         sticky="nsew", padx=2, pady=2, ipady=8)
                col_pos += spans[idx]

        for r in range(len(self.KEYPAD)):
            frame.rowconfigure(r, weight=1)

    @staticmethod
    def _compute_spans(cols_in_row: int, max_cols: int) -> list[int]:
        """Reparte max_cols entre cols_in_row botones."""
        base, extra = divmod(max_cols, cols_in_row)
        spans = [base] * cols_in_row
        # Las columnas sobrantes van al último botón ('=')
        spans[-1] += extra
        return spans

    # ── Teclado físico ───────────────────────────────────────────

    def keyboard(self) -> KeyboardBinding:
        """Enlace del teclado para usar en un bloque ``with``."""
        return KeyboardBinding(self.root, self.session.press)

    # ── Renderizado ──────────────────────────────────────────────

    def render(self, view):
        self.result_display.set_text(view.display)
        self.history_list.delete(0, tk.END)
        for entry in view.history:
            self.history_list.insert(tk.END, entry)

    def close(self):
        self._unsubscribe()
        self.root.quit()

"""Punto de entrada de la calculadora."""

import logging
import os
import tkinter as tk

from calculator_session import CalculatorSession
from calculator_ui import CalculatorApp


WINDOW_GEOMETRY = "360x560"
LOG_LEVEL = os.getenv("CALCULATOR_LOG_LEVEL", "WARNING").upper()


def main():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    root = tk.Tk()
    root.geometry(WINDOW_GEOMETRY)
    app = CalculatorApp(root, session=CalculatorSession())
    root.protocol("WM_DELETE_WINDOW", app.close)

    try:
        with app.keyboard():
            root.mainloop()
    finally:
        root.destroy()


if __name__ == "__main__":
    main()

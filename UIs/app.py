from tkinter import ttk, messagebox, filedialog

from logics.calculator import Calculator
from logics.file_handler import export_history, load_history
from logics.input_map import handle_button, handle_key

from UIs.widgets import DisplayPanel, HistoryList


# (label, button name) rows of the keypad
KEYPAD = [
    [("C", 'clear'), ("⌫", 'backspace'), ("±", 'sign'), ("÷", 'divide')],
    [("7", '7'), ("8", '8'), ("9", '9'), ("×", 'multiply')],
    [("4", '4'), ("5", '5'), ("6", '6'), ("−", 'subtract')],
    [("1", '1'), ("2", '2'), ("3", '3'), ("+", 'add')],
    [("0", '0'), (".", '.'), ("=", 'equals')],
]


class CalculatorApp:
    """Main window: readout, keypad and calculation history."""

    def __init__(self, root):
        self.root = root
        self.root.title("NuCalc")
        self.root.geometry("560x420")

        self.calculator = Calculator(listener=self._render)

        self._build()
        self.root.bind('<Key>', self._on_key)
        self._render(self.calculator.snapshot())

    def _build(self):
        left = ttk.Frame(self.root)
        left.pack(side='left', fill='both', expand=True, padx=8, pady=8)

        self.panel = DisplayPanel(left)
        self.panel.pack(fill='x')

        keypad = ttk.Frame(left)
        keypad.pack(fill='both', expand=True, pady=(6, 0))
        for r, row in enumerate(KEYPAD):
            keypad.grid_rowconfigure(r, weight=1)
            for c, (label, name) in enumerate(row):
                # "=" spans the last two columns of the bottom row
                span = 2 if name == 'equals' else 1
                ttk.Button(
                    keypad, text=label, takefocus=False,
                    command=lambda n=name: handle_button(self.calculator, n),
                ).grid(row=r, column=c, columnspan=span, sticky='nsew', padx=2, pady=2)
        for c in range(4):
            keypad.grid_columnconfigure(c, weight=1, uniform='col')

        right = ttk.Frame(self.root)
        right.pack(side='left', fill='both', expand=True, padx=(0, 8), pady=8)

        self.history = HistoryList(right, title="History")
        self.history.pack(fill='both', expand=True)

        buttons = ttk.Frame(right)
        buttons.pack(fill='x', pady=(6, 0))
        ttk.Button(buttons, text="Export...", command=self._on_export).pack(side='left')
        ttk.Button(buttons, text="Open...", command=self._on_open).pack(side='left', padx=5)

    # ── Events ──────────────────────────────────────────────

    def _on_key(self, event):
        # Printable keys arrive in event.char, named keys only in event.keysym
        key = event.char if event.char and event.char.isprintable() else event.keysym
        if handle_key(self.calculator, key):
            return 'break'
        return None

    def _render(self, snapshot):
        self.panel.render(snapshot)
        self.history.set_entries(self.calculator.history)

    # ── File callbacks ──────────────────────────────────────

    def _on_export(self):
        if not self.calculator.history:
            messagebox.showerror("Export", "No calculations to export yet.")
            return

        path = filedialog.asksaveasfilename(
            defaultextension=".xlsx",
            filetypes=[("Excel", "*.xlsx"), ("CSV", "*.csv")],
        )
        if path:
            try:
                export_history(self.calculator.history, path)
                messagebox.showinfo("Export", f"Saved: {path}")
            except (OSError, ValueError) as e:
                messagebox.showerror("Export failed", str(e))

    def _on_open(self):
        path = filedialog.askopenfilename(
            filetypes=[("Excel", "*.xlsx"), ("CSV", "*.csv")],
        )
        if path:
            try:
                entries = load_history(path)
            except (OSError, ValueError) as e:
                messagebox.showerror("Open failed", str(e))
                return
            self.calculator.history = entries + self.calculator.history
            self.history.set_entries(self.calculator.history)

import tkinter as tk
from tkinter import ttk


ERROR_FG = '#c62828'
NORMAL_FG = '#212121'


class DisplayPanel(ttk.Frame):
    """
    The calculator's readout: previous operand and pending operation on a
    small line, the main display, and an error line beneath it.

    Args:
        parent: Parent widget.
        font_size: Point size of the main display.
    """

    def __init__(self, parent, *, font_size=26):
        super().__init__(parent, padding=(8, 6))

        top = ttk.Frame(self)
        top.pack(fill='x')
        self._previous_var = tk.StringVar()
        self._operation_var = tk.StringVar()
        tk.Label(top, textvariable=self._operation_var, fg='gray', width=2, anchor='e').pack(side='right')
        tk.Label(top, textvariable=self._previous_var, fg='gray', anchor='e').pack(side='right', fill='x', expand=True)

        self._display_var = tk.StringVar(value="0")
        self._display = tk.Label(
            self, textvariable=self._display_var, anchor='e',
            font=("Arial", font_size, "bold"), fg=NORMAL_FG,
        )
        self._display.pack(fill='x')

        self._error_var = tk.StringVar()
        tk.Label(self, textvariable=self._error_var, fg=ERROR_FG, anchor='e').pack(fill='x')

    def render(self, snapshot):
        """Show a CalculatorSnapshot; the display turns red while an error is active."""
        self._display_var.set(snapshot.display)
        self._previous_var.set(snapshot.previous_operand or "")
        self._operation_var.set(snapshot.operation or "")
        self._error_var.set(snapshot.error or "")
        self._display.config(fg=ERROR_FG if snapshot.has_error else NORMAL_FG)


class HistoryList(ttk.LabelFrame):
    """
    A labeled frame with a Listbox of completed calculations.

    Example:
        history = HistoryList(frame, title="History")
        history.pack(fill='both', expand=True)
        history.set_entries(calculator.history)
    """

    def __init__(self, parent, *, title, height=12):
        super().__init__(parent, text=title, padding=5)

        lb_frame = ttk.Frame(self)
        lb_frame.pack(fill='both', expand=True)
        self._listbox = tk.Listbox(lb_frame, height=height, exportselection=False)
        scrollbar = ttk.Scrollbar(lb_frame, command=self._listbox.yview)
        self._listbox.configure(yscrollcommand=scrollbar.set)
        scrollbar.pack(side='right', fill='y')
        self._listbox.pack(fill='both', expand=True)

    def set_entries(self, entries):
        """Replace the list with tape entries and scroll to the newest."""
        self._listbox.delete(0, tk.END)
        for entry in entries:
            self._listbox.insert(tk.END, f"{entry['expression']} = {entry['result']}")
        if entries:
            self._listbox.see(tk.END)

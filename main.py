import tkinter as tk
import traceback

from UIs.app import CalculatorApp


def main():
    try:
        print("Initializing GUI...")
        root = tk.Tk()
        app = CalculatorApp(root)
        print("GUI ready. Entering mainloop...")
        root.mainloop()
    except Exception as e:
        print("ERROR:", str(e))
        traceback.print_exc()
        raise


if __name__ == "__main__":
    main()

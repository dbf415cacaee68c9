"""Desktop form for generating 4x6 label PDFs."""

from __future__ import annotations

import tkinter as tk
from tkinter import messagebox, ttk
from typing import Mapping

from label_form import CLEARED_STATUS, READY_STATUS, LabelFormController

WINDOW_TITLE = 'Label Printer - 4"x6" PDF Generator'
WINDOW_SIZE = "500x700"


class LabelPrinterApp:
    def __init__(self, root: tk.Tk, controller: LabelFormController) -> None:
        self.root = root
        self.controller = controller
        self.status_var = tk.StringVar(value=READY_STATUS)
        self.entries: dict[str, tk.StringVar] = {}
        self.text_boxes: dict[str, tk.Text] = {}

        root.title(WINDOW_TITLE)
        root.geometry(WINDOW_SIZE)
        self.build_gui()
        self.set_values(controller.initial_values())

    def build_gui(self) -> None:
        frm = ttk.Frame(self.root, padding=8)
        frm.pack(fill=tk.BOTH, expand=True)

        for field in self.controller.variant.form_fields():
            ttk.Label(frm, text=field.label).pack(anchor=tk.W)
            if field.multiline:
                box = tk.Text(frm, height=5, wrap=tk.WORD)
                box.pack(fill=tk.X, padx=4, pady=4)
                self.text_boxes[field.name] = box
            else:
                var = tk.StringVar()
                ttk.Entry(frm, textvariable=var).pack(fill=tk.X)
                self.entries[field.name] = var

        btns = ttk.Frame(frm)
        btns.pack(fill=tk.X, pady=8)
        ttk.Button(btns, text="Generate PDF", command=self.generate_pdf).pack(
            side=tk.LEFT, padx=4
        )
        ttk.Button(btns, text="Clear Fields", command=self.clear_fields).pack(
            side=tk.LEFT, padx=4
        )

        ttk.Label(frm, textvariable=self.status_var, wraplength=460).pack(
            anchor=tk.W
        )

    def values(self) -> dict[str, str]:
        values = {name: var.get() for name, var in self.entries.items()}
        for name, box in self.text_boxes.items():
            values[name] = box.get("1.0", "end-1c")
        return values

    def set_values(self, values: Mapping[str, str]) -> None:
        for name, var in self.entries.items():
            var.set(values.get(name, ""))
        for name, box in self.text_boxes.items():
            box.delete("1.0", tk.END)
            box.insert("1.0", values.get(name, ""))

    def generate_pdf(self) -> None:
        outcome = self.controller.generate(self.values())
        self.status_var.set(outcome.status)
        if outcome.ok:
            messagebox.showinfo("Success", outcome.dialog, parent=self.root)
        else:
            messagebox.showerror("Error", outcome.dialog, parent=self.root)

    def clear_fields(self) -> None:
        self.set_values(self.controller.cleared_values())
        self.status_var.set(CLEARED_STATUS)


def run_gui(controller: LabelFormController) -> None:
    """Open the form window and block until it is closed."""

    root = tk.Tk()
    LabelPrinterApp(root, controller)
    root.mainloop()

# app.py
# CustomTkinter step-through viewer for the KMP trace (dark theme).
# - Run a traced search for a text/pattern pair.
# - Replay the trace frame by frame (buttons or Left/Right keys).
# - Narration & event log panes.

from __future__ import annotations
from typing import Optional

import tkinter.messagebox as mb
import customtkinter as ctk

from kmptrace.engine import match
from kmptrace.models import MatchResult
from kmpweb.textview import render_frame, render_header


class TraceViewerApp(ctk.CTk):
    """Dark-themed GUI that runs the KMP engine and replays its steps."""

    def __init__(self) -> None:
        super().__init__()

        # Theme
        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        # Window
        self.title("KMP Trace Viewer")
        self.geometry("960x680")
        self.minsize(820, 560)

        # State
        self._result: Optional[MatchResult] = None
        self._text: str = ""
        self._pattern: str = ""
        self._cursor: int = 0

        # Fonts
        self.font_title = ctk.CTkFont(size=18, weight="bold")
        self.font_label = ctk.CTkFont(size=13)
        self.font_mono = ctk.CTkFont(family="Cascadia Mono, Menlo, Consolas, Courier New", size=13)

        # Layout grid
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(3, weight=1)  # frame
        self.grid_rowconfigure(5, weight=1)  # log

        # Build UI
        self._build_header()
        self._build_inputs()
        self._build_nav()
        self._build_frame()
        self._build_log()

        self.bind("<Left>", lambda _ev: self._go(self._cursor - 1))
        self.bind("<Right>", lambda _ev: self._go(self._cursor + 1))
        self._set_status("Ready")

    # --------- UI sections ---------

    def _build_header(self) -> None:
        header = ctk.CTkFrame(self, corner_radius=10)
        header.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 6))
        header.grid_columnconfigure(0, weight=1)

        title = ctk.CTkLabel(header, text="KMP Trace Viewer", font=self.font_title)
        title.grid(row=0, column=0, sticky="w", padx=12, pady=10)

    def _build_inputs(self) -> None:
        box = ctk.CTkFrame(self, corner_radius=10)
        box.grid(row=1, column=0, sticky="ew", padx=12, pady=6)
        box.grid_columnconfigure(1, weight=3)
        box.grid_columnconfigure(3, weight=1)

        ctk.CTkLabel(box, text="Text:", font=self.font_label).grid(row=0, column=0, padx=(12, 6), pady=10)
        self.entry_text = ctk.CTkEntry(box, placeholder_text="Text to search in…")
        self.entry_text.grid(row=0, column=1, sticky="ew", padx=(0, 12), pady=10)

        ctk.CTkLabel(box, text="Pattern:", font=self.font_label).grid(row=0, column=2, padx=(0, 6), pady=10)
        self.entry_pattern = ctk.CTkEntry(box, placeholder_text="Pattern…")
        self.entry_pattern.grid(row=0, column=3, sticky="ew", padx=(0, 12), pady=10)

        btn_run = ctk.CTkButton(box, text="Run", width=80, command=self._run)
        btn_run.grid(row=0, column=4, padx=(0, 12), pady=10)
        self.entry_pattern.bind("<Return>", lambda _ev: self._run())

    def _build_nav(self) -> None:
        bar = ctk.CTkFrame(self, corner_radius=10)
        bar.grid(row=2, column=0, sticky="ew", padx=12, pady=6)
        bar.grid_columnconfigure(4, weight=1)

        buttons = (
            ("« First", lambda: self._go(0)),
            ("‹ Prev", lambda: self._go(self._cursor - 1)),
            ("Next ›", lambda: self._go(self._cursor + 1)),
            ("Last »", lambda: self._go(self._last_index())),
        )
        for col, (label, cmd) in enumerate(buttons):
            ctk.CTkButton(bar, text=label, width=80, command=cmd).grid(
                row=0, column=col, padx=(12 if col == 0 else 0, 6), pady=10
            )

        self.lbl_status = ctk.CTkLabel(bar, text="Status: —", anchor="e")
        self.lbl_status.grid(row=0, column=4, sticky="e", padx=12, pady=10)

    def _build_frame(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=3, column=0, sticky="nsew", padx=12, pady=(6, 6))
        frame.grid_columnconfigure(0, weight=1)
        frame.grid_rowconfigure(1, weight=1)

        ctk.CTkLabel(frame, text="Frame", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=(10, 2)
        )

        self.txt_frame = ctk.CTkTextbox(frame, wrap="none", font=self.font_mono)
        self.txt_frame.grid(row=1, column=0, sticky="nsew", padx=12, pady=(0, 12))
        self._set_frame("(no trace yet: enter a text and a pattern, then press Run)")

    def _build_log(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=5, column=0, sticky="nsew", padx=12, pady=(6, 12))
        frame.grid_columnconfigure(0, weight=1)
        frame.grid_rowconfigure(1, weight=1)

        ctk.CTkLabel(frame, text="Event log", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=(10, 2)
        )

        self.txt_log = ctk.CTkTextbox(frame, height=110, wrap="word", font=ctk.CTkFont(size=12))
        self.txt_log.grid(row=1, column=0, sticky="nsew", padx=12, pady=(0, 12))
        self._log("GUI ready.")

    # --------- run & replay ---------

    def _run(self) -> None:
        text = self.entry_text.get()
        pattern = self.entry_pattern.get()
        result = match(text, pattern)
        if result.error is not None:
            self._result = None
            self._set_status("Input error.")
            self._set_frame("")
            self._log(f"ERROR: {result.error.message}")
            mb.showerror("Input error", result.error.message)
            return

        self._result, self._text, self._pattern = result, text, pattern
        found = ", ".join(str(p) for p in result.positions) if result.found else "none"
        self._log(f"Trace ready: {len(result.steps)} steps, {result.comparisons} comparisons, matches at {found}.")
        self._go(0)

    def _last_index(self) -> int:
        return len(self._result.steps) - 1 if self._result else 0

    def _go(self, k: int) -> None:
        if not self._result:
            return
        self._cursor = max(0, min(self._last_index(), k))
        step = self._result.steps[self._cursor]
        total = len(self._result.steps)
        body = "\n".join((
            render_header(self._cursor + 1, total, step),
            "",
            render_frame(self._text, self._pattern, step),
            "",
            "failure  " + " ".join(f"{v:>2}" for v in self._result.failure_function),
            "",
            step.status,
        ))
        self._set_frame(body)
        self._set_status(f"step {self._cursor + 1} / {total}")

    # --------- misc UI helpers ---------

    def _set_status(self, text: str) -> None:
        self.lbl_status.configure(text=f"Status: {text}")

    def _set_frame(self, text: str) -> None:
        self.txt_frame.configure(state="normal")
        self.txt_frame.delete("0.0", "end")
        if text:
            self.txt_frame.insert("end", text)
        self.txt_frame.configure(state="disabled")

    def _log(self, msg: str) -> None:
        self.txt_log.insert("end", msg + "\n")
        self.txt_log.see("end")


if __name__ == "__main__":
    app = TraceViewerApp()
    app.mainloop()

# app.py
# CustomTkinter viewer for essay comparisons (dark theme).
# - Open a submission JSON exported from the scoring backend.
# - Pick an improved band; both panels are rebuilt.
# - Hover a sentence: it and the sentence at the same position opposite light up.

from __future__ import annotations
import json
import threading
from typing import Dict, Optional

import tkinter.filedialog as fd
import tkinter.messagebox as mb
import customtkinter as ctk

from essaysync import config as CFG
from essaysync.engine import Comparison
from essaysync.models import Handle, Paragraph
from essaysync.sentences import active_sentence_color, sentence_color
from essaysync.submission import Submission


# -------------------- small helpers --------------------

def shorten_path(p: str, max_chars: int = 60) -> str:
    """Shorten long paths neatly for labels."""
    if len(p) <= max_chars:
        return p
    keep = max_chars // 2 - 3
    return p[:keep] + "..." + p[-keep:]


def load_submission(path: str) -> Submission:
    with open(path, "r", encoding="utf-8") as f:
        return Submission.from_dict(json.load(f))


# -------------------- main app --------------------

class ComparisonApp(ctk.CTk):
    """Dark-themed viewer: original essay on the left, improved band on the right."""

    def __init__(self) -> None:
        super().__init__()

        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        self.title("Essay Comparison")
        self.geometry("1100x720")
        self.minsize(900, 560)

        # State
        self._comparison: Optional[Comparison] = None
        self._unsubscribe = None
        self._loading_thread: Optional[threading.Thread] = None
        self._handles: Dict[str, Handle] = {}   # element id -> handle

        self.font_title = ctk.CTkFont(size=18, weight="bold")
        self.font_label = ctk.CTkFont(size=13)
        self.font_text = ctk.CTkFont(size=14)

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(2, weight=1)  # panels
        self.grid_rowconfigure(3, weight=0)  # log

        self._build_header()
        self._build_source_bar()
        self._build_panels()
        self._build_log()

        self._set_status("Ready")
        self.protocol("WM_DELETE_WINDOW", self._on_close)

    # --------- UI sections ---------

    def _build_header(self) -> None:
        header = ctk.CTkFrame(self, corner_radius=10)
        header.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 6))
        header.grid_columnconfigure(0, weight=1)
        ctk.CTkLabel(header, text="Essay Comparison", font=self.font_title).grid(
            row=0, column=0, sticky="w", padx=12, pady=10
        )

    def _build_source_bar(self) -> None:
        bar = ctk.CTkFrame(self, corner_radius=10)
        bar.grid(row=1, column=0, sticky="ew", padx=12, pady=6)
        bar.grid_columnconfigure(2, weight=1)

        ctk.CTkButton(bar, text="Open Submission", command=self._choose_file).grid(
            row=0, column=0, padx=(12, 6), pady=10
        )

        self.band_picker = ctk.CTkSegmentedButton(
            bar, values=[f"Band {b}" for b in CFG.BANDS], command=self._on_band_picked
        )
        self.band_picker.grid(row=0, column=1, padx=6, pady=10)
        self.band_picker.configure(state="disabled")

        self.lbl_source = ctk.CTkLabel(bar, text="No submission loaded", anchor="w", font=self.font_label)
        self.lbl_source.grid(row=0, column=2, sticky="ew", padx=6, pady=10)

        self.progress = ctk.CTkProgressBar(bar, mode="indeterminate", determinate_speed=1.2)
        self.progress.grid(row=0, column=3, sticky="e", padx=(0, 6), pady=10)

        self.lbl_status = ctk.CTkLabel(bar, text="Status: —", anchor="e")
        self.lbl_status.grid(row=0, column=4, sticky="e", padx=12, pady=10)

    def _build_panels(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=2, column=0, sticky="nsew", padx=12, pady=6)
        frame.grid_columnconfigure((0, 1), weight=1, uniform="panel")
        frame.grid_rowconfigure(1, weight=1)

        self.panels: Dict[str, ctk.CTkTextbox] = {}
        for col, (side, title) in enumerate(((CFG.ORIGINAL, "Your essay"), (CFG.IMPROVED, "Improved"))):
            ctk.CTkLabel(frame, text=title, font=self.font_label).grid(
                row=0, column=col, sticky="w", padx=12, pady=(10, 2)
            )
            box = ctk.CTkTextbox(frame, wrap="word", font=self.font_text)
            box.grid(row=1, column=col, sticky="nsew", padx=12, pady=(0, 12))
            box.configure(state="disabled")
            self.panels[side] = box

    def _build_log(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=3, column=0, sticky="nsew", padx=12, pady=(6, 12))
        frame.grid_columnconfigure(0, weight=1)

        self.txt_log = ctk.CTkTextbox(frame, height=90, wrap="word", font=ctk.CTkFont(size=12))
        self.txt_log.grid(row=0, column=0, sticky="nsew", padx=12, pady=12)
        self._log("Viewer ready. Open a submission JSON to begin.")

    # --------- loading (threaded) ---------

    def _choose_file(self) -> None:
        path = fd.askopenfilename(
            title="Choose submission JSON",
            filetypes=[("JSON", "*.json"), ("All files", "*.*")],
        )
        if not path:
            return
        if self._loading_thread and self._loading_thread.is_alive():
            mb.showinfo("Loading", "A submission is already loading. Please wait.")
            return
        self.lbl_source.configure(text=shorten_path(path))
        self._set_status("Loading…")
        self.progress.start()
        self._loading_thread = threading.Thread(target=self._load_worker, args=(path,), daemon=True)
        self._loading_thread.start()

    def _load_worker(self, path: str) -> None:
        try:
            submission = load_submission(path)
        except (OSError, ValueError) as exc:
            self.after(0, lambda e=exc: self._on_load_error(e))
            return
        self.after(0, lambda s=submission: self._on_load_ok(s))

    def _on_load_ok(self, submission: Submission) -> None:
        self.progress.stop()
        if self._unsubscribe:
            self._unsubscribe()
        self._comparison = Comparison(submission)
        self._unsubscribe = self._comparison.channel.subscribe(self._on_active_changed)

        bands = self._comparison.bands
        if bands:
            self.band_picker.configure(state="normal", values=[f"Band {b}" for b in bands])
            self.band_picker.set(f"Band {self._comparison.band}")
        else:
            self.band_picker.configure(state="disabled")
        self._set_status(f"Score {submission.score:.1f} • status {submission.status}")
        self._log(f"Loaded submission {submission.id or '?'} (bands: {bands or 'none'}).")
        self._render()

    def _on_load_error(self, exc: Exception) -> None:
        self.progress.stop()
        self._set_status("Error while loading submission.")
        self._log(f"ERROR: {exc!r}")
        mb.showerror("Load error", "Failed to read submission.\nSee event log for details.")

    # --------- rendering ---------

    def _on_band_picked(self, value: str) -> None:
        if not self._comparison:
            return
        band = int(value.split()[-1])
        self._comparison.select_band(band)
        self._log(f"Switched to band {band}.")
        self._render()

    def _render(self) -> None:
        if not self._comparison:
            return
        self._handles.clear()
        for box in self.panels.values():
            box.configure(state="normal")
            box.delete("0.0", "end")

        for paragraph in self._comparison.paragraphs():
            self._render_paragraph(paragraph)

        for box in self.panels.values():
            box.configure(state="disabled")

    def _render_paragraph(self, paragraph: Paragraph) -> None:
        box = self.panels[paragraph.side]
        box.insert("end", f"{paragraph.role}\n", "heading")
        sentences = paragraph.sentences
        if not sentences:
            box.insert("end", "—")
        for s in sentences:
            handle = paragraph.handle(s.index)
            tag = handle.element_id
            self._handles[tag] = handle
            box.insert("end", s.text, tag)
            box.insert("end", " ")
            box.tag_config(tag, background=sentence_color(s.index), foreground="#0b0f14")
            box.tag_bind(tag, "<Enter>", lambda _ev, h=handle: self._comparison.hover(h))
            box.tag_bind(tag, "<Leave>", lambda _ev: self._comparison.leave())
        box.insert("end", "\n\n")

    def _on_active_changed(self, _active: Optional[Handle]) -> None:
        if not self._comparison:
            return
        for tag, handle in self._handles.items():
            on = self._comparison.is_highlighted(handle)
            color = active_sentence_color(handle.index) if on else sentence_color(handle.index)
            self.panels[handle.side].tag_config(
                tag, background=color, foreground="#ffffff" if on else "#0b0f14"
            )

    # --------- misc UI helpers ---------

    def _set_status(self, text: str) -> None:
        self.lbl_status.configure(text=f"Status: {text}")

    def _log(self, msg: str) -> None:
        self.txt_log.insert("end", msg + "\n")
        self.txt_log.see("end")

    # --------- lifecycle ---------

    def _on_close(self) -> None:
        if self._unsubscribe:
            self._unsubscribe()
        self.destroy()


if __name__ == "__main__":
    app = ComparisonApp()
    app.mainloop()

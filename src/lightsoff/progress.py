from __future__ import annotations

import sys


class ProgressBar:
    """Console progress sink: ``bar(label, percent)`` redraws one line.

    Repeated percents are ignored; reaching 100 ends the line and resets
    the bar so it can be reused for the next stage.
    """

    def __init__(self, message_width: int = 30, bar_length: int = 50, stream=None):
        self.message_width = message_width
        self.bar_length = bar_length
        self.stream = stream
        self.prev_percent = -1

    def __call__(self, label: str, percent: int) -> None:
        if percent == self.prev_percent:
            return
        self.prev_percent = percent

        stream = self.stream if self.stream is not None else sys.stdout
        filled = percent * self.bar_length // 100
        progress_line = (
            f"\r{label:<{self.message_width}}"
            f"[{'#' * filled}{' ' * (self.bar_length - filled)}] {percent}%"
        )
        print(progress_line, end="", file=stream, flush=True)
        if percent == 100:
            print(file=stream)  # Final newline
            self.prev_percent = -1

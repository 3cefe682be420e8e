# wander/logging_utils.py
import logging
import os
import sys
from typing import Optional

FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

def setup_logging(level: int = logging.WARNING, log_file: Optional[str] = None,
                  stream: Optional[object] = None) -> logging.Logger:
    """
    Configure the root logger:
    - one stream handler (stderr by default, reused on repeated calls)
    - an optional append-mode file handler for log_file
    Event lines of a run are not written here; they go to the navigator's sink.
    """
    if stream is None:
        stream = sys.stderr
    fmt = logging.Formatter(FORMAT)
    root = logging.getLogger()
    root.setLevel(level)

    sh = next((h for h in root.handlers if type(h) is logging.StreamHandler), None)
    if sh is None:
        sh = logging.StreamHandler(stream=stream)
        sh.setFormatter(fmt)
        root.addHandler(sh)
    sh.setLevel(level)

    if log_file:
        path = os.path.abspath(log_file)
        if not any(isinstance(h, logging.FileHandler) and h.baseFilename == path for h in root.handlers):
            os.makedirs(os.path.dirname(path), exist_ok=True)
            fh = logging.FileHandler(path, mode="a")
            fh.setLevel(level)
            fh.setFormatter(fmt)
            root.addHandler(fh)
    return root

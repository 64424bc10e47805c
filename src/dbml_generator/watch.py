from __future__ import annotations
import logging
from pathlib import Path
import time
from typing import Callable

from watchdog.observers import Observer
from watchdog.events import FileSystemEventHandler

from dbml_generator.errors import DBMLGenerationError

logger = logging.getLogger(__name__)


class Handler(FileSystemEventHandler):
    def __init__(self, input_path: Path, regenerate: Callable[[], object], debounce: float = 0.8):
        self.input_path = input_path.resolve()
        self.regenerate = regenerate
        self.debounce = debounce
        self._last = 0.0

    def on_any_event(self, event):
        if event.is_directory:
            return
        paths = [event.src_path, getattr(event, "dest_path", "")]
        if not any(p and Path(p).resolve() == self.input_path for p in paths):
            return

        # 저장 시 이벤트가 여러 번 오므로 간단 debounce
        now = time.time()
        if now - self._last < self.debounce:
            return
        self._last = now

        try:
            self.regenerate()
        except (DBMLGenerationError, OSError) as e:
            # 편집 중인 파일이 잠시 깨져 있을 수 있으니 감시는 계속한다
            logger.error("Regeneration failed: %s", e)


def watch_file(input_path: Path, regenerate: Callable[[], object]) -> None:
    handler = Handler(input_path, regenerate)
    obs = Observer()
    obs.schedule(handler, str(input_path.resolve().parent), recursive=False)
    obs.start()
    try:
        while True:
            time.sleep(1)
    finally:
        obs.stop()
        obs.join()

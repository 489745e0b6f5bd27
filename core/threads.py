# core/threads.py
import logging

from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal

from app.errors import TextLoadError
from utils.file_handler import read_text_file

log = logging.getLogger(__name__)


class TextLoadWorkerSignals(QObject):
    loaded = Signal(str)
    failed = Signal(str)


class TextLoadWorker(QRunnable):
    def __init__(self, path: str):
        super().__init__()
        self.path = path
        self.signals = TextLoadWorkerSignals()

    def run(self):
        try:
            data = read_text_file(self.path)
        except TextLoadError as e:
            log.warning("%s", e)
            self.signals.failed.emit(str(e))
            return
        log.info("Loaded %d characters from %s", len(data), self.path)
        self.signals.loaded.emit(data)


class Workers:
    pool = QThreadPool.globalInstance()

"""Worker threads for copying picked images into private storage."""
import logging

from PyQt6.QtCore import QThread, pyqtSignal

from core.images import copy_image_to_private_storage, discard_image


class ImageCopyWorker(QThread):
    """Copy a picked image off the UI thread."""
    copyFinished = pyqtSignal(str)
    copyFailed = pyqtSignal(str)

    def __init__(self, source_path):
        super().__init__()
        self.source_path = source_path

    def run(self):
        """Emit the new photo reference or an error message."""
        try:
            photo_ref = copy_image_to_private_storage(self.source_path)
        except Exception as exc:
            logging.error("Image copy crashed", exc_info=True)
            self.copyFailed.emit(f"Copy failed ({exc})")
            return
        if photo_ref is None:
            self.copyFailed.emit("Copy failed")
            return
        self.copyFinished.emit(photo_ref)


class ThreadedImageStore:
    """Image store whose copy runs in an ImageCopyWorker.

    Results come back through queued signals, so callbacks run on the
    thread that requested the copy.
    """

    def __init__(self):
        self._workers = []

    def copy_to_private_storage(self, handle, callback):
        worker = ImageCopyWorker(handle)
        worker.copyFinished.connect(callback)
        worker.copyFailed.connect(lambda _message: callback(None))
        worker.finished.connect(lambda: self._release(worker))
        self._workers.append(worker)
        worker.start()
        return worker

    def discard(self, photo_ref):
        return discard_image(photo_ref)

    def _release(self, worker):
        if worker in self._workers:
            self._workers.remove(worker)
        worker.deleteLater()

    def wait_all(self, msecs=None):
        """Block until running copies finish. None waits without a limit."""
        for worker in list(self._workers):
            finished = worker.wait() if msecs is None else worker.wait(msecs)
            if not finished:
                logging.warning("Image copy worker did not exit within %d ms", msecs)

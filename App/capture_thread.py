"""Camera capture for the live stylizer."""

import logging
from pathlib import Path
from typing import Optional

import cv2
import numpy as np
from PIL import Image
from PyQt6.QtCore import QMutex, QMutexLocker, QThread, pyqtSignal

from models import CameraState, empty_grid
from stylizer.utils import bgr_to_grid, image_to_grid

logger = logging.getLogger(__name__)


class StaticFrameSource:
    """Frame source that serves one still image on every request."""

    def __init__(self, file_path: str | Path):
        try:
            with Image.open(file_path) as image:
                self.grid = image_to_grid(image)
        except Exception as e:
            raise ValueError(f"Failed to load image: {e}") from e

    def read(self) -> np.ndarray:
        return self.grid


class CaptureThread(QThread):
    """Background thread reading camera frames to avoid blocking GUI."""

    state_changed = pyqtSignal(CameraState)
    error_occurred = pyqtSignal(str)

    def __init__(self, camera_index: int = 0, retry_interval: float = 1.0):
        super().__init__()
        self.camera_index = camera_index
        self.retry_interval = retry_interval  # seconds between reopen attempts
        self.capture: Optional[cv2.VideoCapture] = None

        self.running = True
        self.paused = False

        # Latest frame, shared with the GUI thread
        self._latest = empty_grid()
        self._frame_lock = QMutex()

    # -------------------------------------------------------------

    def run(self):
        try:
            while self.running:
                if not self._ensure_open():
                    self.msleep(int(self.retry_interval * 1000))
                    continue

                if self.paused:
                    self.msleep(50)
                    continue

                self._read_frame()

        finally:
            self._release()
            self.state_changed.emit(CameraState.STOPPED)

    # -------------------------------------------------------------
    # Device handling
    # -------------------------------------------------------------

    def _ensure_open(self) -> bool:
        """Open (or reopen) the device; False if it is not available yet."""
        if self.capture is not None and self.capture.isOpened():
            return True

        self._release()
        self.state_changed.emit(CameraState.OPENING)

        capture = cv2.VideoCapture(self.camera_index)
        if not capture.isOpened():
            capture.release()
            self.error_occurred.emit(
                f"Error starting camera {self.camera_index} - will retry."
            )
            self.state_changed.emit(CameraState.ERROR)
            return False

        self.capture = capture
        logger.info("Opened camera %d", self.camera_index)
        self.state_changed.emit(CameraState.PAUSED if self.paused else CameraState.RUNNING)
        return True

    def _read_frame(self):
        ok, frame = self.capture.read()

        if not ok:
            # Dead stream: drop the device and reopen after a back-off
            self.error_occurred.emit(f"Camera {self.camera_index} stopped delivering frames")
            self.state_changed.emit(CameraState.ERROR)
            self._release()
            self.msleep(int(self.retry_interval * 1000))
            return

        grid = bgr_to_grid(frame)
        with QMutexLocker(self._frame_lock):
            self._latest = grid

    def _release(self):
        if self.capture is not None:
            self.capture.release()
            self.capture = None

    # -------------------------------------------------------------
    # API methods
    # -------------------------------------------------------------

    def read(self) -> np.ndarray:
        """Latest captured grid (empty until the first frame arrives)."""
        with QMutexLocker(self._frame_lock):
            return self._latest

    def pause(self):
        self.paused = True
        self.state_changed.emit(CameraState.PAUSED)

    def resume(self):
        self.paused = False
        self.state_changed.emit(CameraState.RUNNING)

    def stop(self):
        self.running = False

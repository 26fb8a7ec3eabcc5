"""Main application window for the live stylizer."""

import logging
from typing import Optional

from PyQt6.QtCore import QTimer
from PyQt6.QtWidgets import (
    QFileDialog,
    QLabel,
    QMainWindow,
    QMessageBox,
    QToolBar,
)

from capture_thread import CaptureThread, StaticFrameSource
from config_manager import ConfigManager
from models import CameraState, StylizedFrame, StylizeMode, StylizerConfig
from stylizer import FrameStylizer, save_frame
from ui.canvas import StylizedCanvas
from ui.styles import FONTS, SIZES, mode_button_stylesheet, status_stylesheet
from ui.widgets import WidgetFactory

logger = logging.getLogger(__name__)

MODE_LABELS = {
    StylizeMode.SQUARE: "Square",
    StylizeMode.CIRCLE: "Circle",
    StylizeMode.VORONOI: "Voronoi",
}


class StylizerWindow(QMainWindow):
    """Main application window: live camera feed, stylized."""

    def __init__(
        self,
        config_manager: Optional[ConfigManager] = None,
        static_source: Optional[StaticFrameSource] = None,
        config: Optional[StylizerConfig] = None,
    ):
        super().__init__()
        self.setWindowTitle("Camera Stylizer")
        self.setMinimumSize(*SIZES.WINDOW_MIN_SIZE)

        # Application state
        self.config_manager = config_manager or ConfigManager()
        self.config = config or self.config_manager.load()
        self.stylizer = FrameStylizer(self.config)
        self.static_source = static_source
        self.capture_thread: Optional[CaptureThread] = None
        self.last_frame: Optional[StylizedFrame] = None
        self.paused = False

        self._setup_ui()
        self._connect_signals()
        self._update_mode_buttons()

        # AIDEV-NOTE: One processing tick per timer shot; each tick runs
        # to completion before the next is scheduled
        self.tick_timer = QTimer(self)
        self.tick_timer.timeout.connect(self._tick)

        if self.static_source is None:
            self._start_capture()
        self.tick_timer.start(self.config.frame_interval_ms)

    def _setup_ui(self):
        """Initialize the user interface."""
        self.canvas = StylizedCanvas()
        self.canvas.mirror = self.config.mirror and self.static_source is None
        self.setCentralWidget(self.canvas)

        self._create_toolbar()

        self.camera_status = QLabel("●")
        self.camera_status.setFont(FONTS.STATUS_INDICATOR)
        self.camera_status.setStyleSheet(status_stylesheet(CameraState.STOPPED))
        self.statusBar().addPermanentWidget(self.camera_status)

    def _create_toolbar(self):
        """Create the toolbar with mode, palette and capture controls."""
        toolbar = QToolBar("Controls")
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        self.mode_buttons = {}
        for mode, label in MODE_LABELS.items():
            button = WidgetFactory.create_button(label, f"{label} style")
            toolbar.addWidget(button)
            self.mode_buttons[mode] = button

        toolbar.addSeparator()

        self.palette_btn = WidgetFactory.create_button(
            "Palette", "Quantize blocks to the pop-art palette", checkable=True
        )
        self.palette_btn.setChecked(self.config.use_palette)
        toolbar.addWidget(self.palette_btn)

        self.block_size_spin = WidgetFactory.create_int_spinbox(
            1, 64, self.config.block_size, " px", tooltip="Block size"
        )
        toolbar.addWidget(QLabel(" Block: "))
        toolbar.addWidget(self.block_size_spin)

        toolbar.addSeparator()

        self.pause_btn = WidgetFactory.create_button("Pause", checkable=True)
        self.switch_btn = WidgetFactory.create_button("Switch Camera")
        self.switch_btn.setEnabled(self.static_source is None)
        self.save_btn = WidgetFactory.create_button("Save Image")

        toolbar.addWidget(self.pause_btn)
        toolbar.addWidget(self.switch_btn)
        toolbar.addWidget(self.save_btn)

    def _connect_signals(self):
        """Connect UI signals to handlers."""
        for mode, button in self.mode_buttons.items():
            button.clicked.connect(lambda _checked, m=mode: self._set_mode(m))

        self.palette_btn.toggled.connect(self._toggle_palette)
        self.block_size_spin.valueChanged.connect(self._set_block_size)
        self.pause_btn.toggled.connect(self._toggle_pause)
        self.switch_btn.clicked.connect(self._switch_camera)
        self.save_btn.clicked.connect(self._save_image)

    # -------------------------------------------------------------
    # Capture
    # -------------------------------------------------------------

    def _start_capture(self):
        """Start (or restart) the capture thread for the configured camera."""
        self._stop_capture()

        self.capture_thread = CaptureThread(self.config.camera_index)
        self.capture_thread.state_changed.connect(self._on_camera_state)
        self.capture_thread.error_occurred.connect(self._on_camera_error)
        if self.paused:
            self.capture_thread.pause()
        self.capture_thread.start()

    def _stop_capture(self):
        if self.capture_thread is not None:
            self.capture_thread.stop()
            self.capture_thread.wait()
            self.capture_thread = None

    def _on_camera_state(self, state: CameraState):
        self.camera_status.setStyleSheet(status_stylesheet(state))
        self.camera_status.setToolTip(state.value)

    def _on_camera_error(self, message: str):
        logger.warning(message)
        self.statusBar().showMessage(message, 3000)

    # -------------------------------------------------------------
    # Processing tick
    # -------------------------------------------------------------

    def _tick(self):
        """Run one stylization pass on the newest grid."""
        if self.paused:
            return

        source = self.static_source or self.capture_thread
        if source is None:
            return

        frame = self.stylizer.process(source.read(), self.config.mode)
        self.last_frame = frame
        self.canvas.set_frame(frame)

        if frame.mode == StylizeMode.VORONOI and not frame.is_empty:
            self.statusBar().showMessage(f"{frame.cell_count} cells")

    # -------------------------------------------------------------
    # Controls
    # -------------------------------------------------------------

    def _set_mode(self, mode: StylizeMode):
        self.config.mode = mode
        self._update_mode_buttons()
        self.statusBar().clearMessage()

    def _update_mode_buttons(self):
        for mode, button in self.mode_buttons.items():
            button.setStyleSheet(mode_button_stylesheet(mode == self.config.mode))

        # Palette and block size only apply to block styles
        block_mode = self.config.mode != StylizeMode.VORONOI
        self.palette_btn.setEnabled(block_mode)
        self.block_size_spin.setEnabled(block_mode)

    def _toggle_palette(self, checked: bool):
        self.config.use_palette = checked

    def _set_block_size(self, value: int):
        self.config.block_size = value

    def _toggle_pause(self, checked: bool):
        self.paused = checked
        self.pause_btn.setText("Resume" if checked else "Pause")

        if self.capture_thread is not None:
            if checked:
                self.capture_thread.pause()
            else:
                self.capture_thread.resume()

    def _switch_camera(self):
        """Cycle to the next device index."""
        self.config.camera_index = (self.config.camera_index + 1) % 4
        self.statusBar().showMessage(f"Switching to camera {self.config.camera_index}", 2000)
        self._start_capture()

    def _save_image(self):
        """Export the last stylized frame as SVG or PNG."""
        if self.last_frame is None or self.last_frame.is_empty:
            QMessageBox.information(self, "Save Image", "No frame to save yet.")
            return

        file_path, _ = QFileDialog.getSaveFileName(
            self,
            "Save Stylized Image",
            f"stylized_{self.last_frame.mode.value}.png",
            "PNG Image (*.png);;SVG Image (*.svg);;JPEG Image (*.jpg)",
        )
        if not file_path:
            return

        try:
            saved = save_frame(self.last_frame, file_path)
        except (ValueError, OSError) as e:
            QMessageBox.warning(self, "Save Image", f"Could not save image: {e}")
            return

        self.statusBar().showMessage(f"Saved {saved}", 3000)

    # -------------------------------------------------------------

    def closeEvent(self, event):
        """Stop capture and persist settings on exit."""
        self.tick_timer.stop()
        self._stop_capture()

        ok, error = self.config_manager.save(self.config)
        if not ok:
            logger.warning("Could not save config: %s", error)

        super().closeEvent(event)

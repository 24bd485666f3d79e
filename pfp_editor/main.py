import sys
import logging

# PyQt5 import/s
from PyQt5 import QtWidgets
from PyQt5.QtWidgets import QMainWindow, QWidget, QHBoxLayout, QVBoxLayout, QSplitter, QPushButton, QLabel, QMessageBox
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QPalette, QColor

# Component imports
from pfp_editor.components.asset_sidebar import AssetSidebar
from pfp_editor.components.canvas_widget import CanvasWidget
from pfp_editor.components.property_sidebar import PropertySidebar

from pfp_editor.models.editor_state import EditorState

# Utility imports
from pfp_editor.utils.logger import configure_logging, set_main_window
from pfp_editor.utils.path_resolver import get_assets_dir, check_assets_exist

# Service imports
from pfp_editor.services.asset_loader import AssetLoadWorker

# Action imports
from pfp_editor.actions.file_actions import FileActions

# Mixin imports
from pfp_editor.window.config_mixin import ConfigMixin

logger = logging.getLogger(__name__)


class PfpEditor(ConfigMixin, QMainWindow):
    def __init__(self, config_dir=None, assets_dir=None, load_assets=True):
        """
        Args:
            config_dir: Directory holding config.json (defaults to ~/.p33l_pfp)
            assets_dir: Explicit assets directory, overriding config and environment
            load_assets: Start the background asset load immediately
        """
        super().__init__()
        self.setWindowTitle("P33L PFP Editor")
        self.resize(1100, 640)

        self._init_config(config_dir)

        # Single source of truth for images, selection and transforms
        self.state = EditorState()
        self.state.add_listener(self._update_actions)

        set_main_window(self)

        self.file_actions = FileActions(self)
        self.asset_worker = None

        self.setup_ui()
        self._update_actions()

        if load_assets:
            self.start_asset_load(assets_dir)

    # ============= UI Setup =============

    def setup_ui(self):
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QHBoxLayout(central_widget)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        splitter = QSplitter(Qt.Horizontal)

        # Left sidebar - hat and frame pickers
        self.left_sidebar = AssetSidebar(self.state)
        splitter.addWidget(self.left_sidebar)

        # Center - canvas with open/export buttons underneath
        center = QWidget()
        center_layout = QVBoxLayout(center)
        self.canvas_widget = CanvasWidget(self.state)
        center_layout.addWidget(self.canvas_widget, 1)

        button_row = QHBoxLayout()
        self.open_button = QPushButton("Upload Picture")
        self.open_button.clicked.connect(self.file_actions.open_image)
        self.export_button = QPushButton("Download PFP")
        self.export_button.clicked.connect(self.file_actions.export_png)
        button_row.addWidget(self.open_button)
        button_row.addWidget(self.export_button)
        center_layout.addLayout(button_row)
        splitter.addWidget(center)

        # Right sidebar - numeric controls
        self.right_sidebar = PropertySidebar(self.state)
        splitter.addWidget(self.right_sidebar)

        splitter.setSizes([260, 540, 300])
        splitter.setCollapsible(0, False)
        splitter.setCollapsible(1, False)
        splitter.setCollapsible(2, False)

        main_layout.addWidget(splitter)

        # Status bar at bottom with left and right sections
        self.status_left = QLabel("Loading assets...")
        self.status_right = QLabel("")
        self.statusBar().addWidget(self.status_left, 1)
        self.statusBar().addPermanentWidget(self.status_right)

        self.canvas_widget.baseImageLoaded.connect(self._on_base_image_loaded)

    def _update_actions(self):
        """Export needs a loaded picture (and so a rendered frame)"""
        if hasattr(self, 'export_button'):
            self.export_button.setEnabled(self.state.can_render)

    def _on_base_image_loaded(self, path):
        image = self.state.base_image
        self.status_left.setText(f"Loaded {path}")
        self.status_right.setText(f"{image.width} x {image.height}")

    # ============= Assets =============

    def start_asset_load(self, assets_dir=None):
        """Decode the hat and frame set on a worker thread"""
        assets_dir = get_assets_dir(assets_dir or self.assets_dir)
        logger.info("Loading assets from %s", assets_dir)
        all_exist, missing = check_assets_exist(assets_dir)
        if not all_exist:
            # The worker still runs and reports the first failure
            logger.warning("Missing assets: %s", ", ".join(missing))
        self.asset_worker = AssetLoadWorker(assets_dir, self)
        self.asset_worker.loaded.connect(self._on_assets_loaded)
        self.asset_worker.start()
        return self.asset_worker

    def _on_assets_loaded(self, success, message):
        self.asset_worker.install_into(self.state)
        if success:
            self.status_left.setText("Ready")
            return
        self.status_left.setText("Failed to load assets")
        QMessageBox.warning(self, "Assets Missing", message)

    # ============= Teardown =============

    def closeEvent(self, event):
        self.canvas_widget.shutdown()
        if self.asset_worker is not None:
            self.asset_worker.wait()
        super().closeEvent(event)


def main():
    """Main entry point for the P33L PFP editor"""
    configure_logging()
    app = QtWidgets.QApplication(sys.argv)

    app.setStyle("Fusion")

    palette = QPalette()
    palette.setColor(QPalette.Highlight, QColor(59, 130, 246))
    palette.setColor(QPalette.HighlightedText, Qt.white)
    app.setPalette(palette)

    window = PfpEditor()
    window.show()
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())

import sys
import logging
import signal

from PySide6 import QtAsyncio
from PySide6.QtGui import QColor, QPalette
from PySide6.QtWidgets import QApplication

from exam_submission import __version__
from exam_submission.config import get_settings
from exam_submission.presentation.services.file_selector import QtFileSelector
from exam_submission.presentation.viewmodels.main_vm import MainViewModel
from exam_submission.presentation.views.main_window import MainWindow
from exam_submission.submission_core.application.dispatcher import SubmissionStore
from exam_submission.submission_core.application.reducer import init
from exam_submission.submission_core.infrastructure.config_loader import FileConfigLoader
from exam_submission.submission_core.infrastructure.exam_writer import FileExamWriter
from exam_submission.submission_core.infrastructure.logging import setup_logging

logger = logging.getLogger(__name__)

def handle_sigint(signum, frame):
    """Handles KeyboardInterrupt (Ctrl+C)."""
    logger.info("Received SIGINT (Ctrl+C). Exiting...")
    QApplication.quit()

def apply_dark_palette(app: QApplication):
    app.setStyle("Fusion")
    palette = QPalette()
    palette.setColor(QPalette.ColorRole.Window, QColor(32, 32, 32))
    palette.setColor(QPalette.ColorRole.WindowText, QColor(230, 230, 230))
    palette.setColor(QPalette.ColorRole.Base, QColor(45, 45, 45))
    palette.setColor(QPalette.ColorRole.Text, QColor(230, 230, 230))
    palette.setColor(QPalette.ColorRole.Button, QColor(55, 55, 55))
    palette.setColor(QPalette.ColorRole.ButtonText, QColor(230, 230, 230))
    palette.setColor(QPalette.ColorRole.Highlight, QColor(42, 130, 218))
    palette.setColor(QPalette.ColorGroup.Disabled, QPalette.ColorRole.ButtonText, QColor(120, 120, 120))
    app.setPalette(palette)

async def run_store(store: SubmissionStore, config_path: str):
    _, effect = init(config_path)
    store.start(effect)
    await store.run()

def main():
    """
    Main entry point for the application.
    Bootstraps the QApplication and the main window with MVVM dependencies.
    """
    signal.signal(signal.SIGINT, handle_sigint)

    try:
        # 1. Load Configuration
        try:
            settings = get_settings()
        except Exception as e:
            logging.basicConfig(level=logging.INFO)
            logger.critical(f"Failed to load configuration: {e}")
            sys.exit(1)

        setup_logging(settings.env.value, settings.log_level)
        logger.info(f"Configuration loaded successfully. Environment: {settings.env.value}")

        # 2. Initialize Application
        app = QApplication(sys.argv)
        app.setApplicationName("ExamSubmission")
        app.setApplicationVersion(__version__)
        if settings.ui.dark_theme:
            apply_dark_palette(app)

        # 3. Initialize Dependencies (Services)
        logger.info("Initializing services...")
        file_selector = QtFileSelector(settings.submission.name_filter)
        store = SubmissionStore(
            config_loader=FileConfigLoader(),
            file_selector=file_selector,
            exam_writer=FileExamWriter(suffix=settings.submission.artifact_suffix),
        )

        # 4. Initialize ViewModel
        logger.info("Initializing ViewModel...")
        main_vm = MainViewModel(store)

        # 5. Initialize View (Window)
        logger.info("Initializing View...")
        window = MainWindow(
            main_vm,
            settings.ui.window_title,
            settings.ui.width,
            settings.ui.height,
        )
        file_selector.set_parent(window)
        window.show()

        # 6. Execute: the asyncio loop is the Qt event loop; it stops with the last window
        QtAsyncio.run(run_store(store, str(settings.submission.config_path)), keep_running=True, quit_qapp=True)

    except Exception as e:
        logger.critical(f"Application failed to start: {e}", exc_info=True)
        sys.exit(1)

if __name__ == "__main__":
    main()

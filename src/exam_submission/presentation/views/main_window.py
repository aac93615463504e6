from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QLineEdit, QPushButton, QVBoxLayout, QWidget

from exam_submission.presentation.resources.strings import UIStrings
from exam_submission.presentation.viewmodels.main_vm import MainViewModel
from exam_submission.submission_core.domain.models import State

class MainWindow(QWidget):
    """
    Paints the ViewModel's state and forwards user interaction to it.
    """

    def __init__(self, view_model: MainViewModel, title: str, width: int, height: int):
        super().__init__()
        self._vm = view_model
        self.setWindowTitle(title)
        self.resize(width, height)

        self.header_label = QLabel(UIStrings.LBL_HEADER)
        self.status_label = QLabel()
        self.status_label.setWordWrap(True)
        self.name_label = QLabel(UIStrings.LBL_NAME)
        self.name_edit = QLineEdit()
        self.name_edit.setFixedWidth(200)
        self.upload_button = QPushButton(UIStrings.BTN_UPLOAD)
        self.upload_button.setFixedSize(200, 50)
        self.submit_button = QPushButton(UIStrings.BTN_SUBMIT)
        self.submit_button.setFixedWidth(120)

        layout = QVBoxLayout(self)
        layout.setSpacing(20)
        layout.setContentsMargins(30, 30, 30, 30)
        layout.addStretch()
        for label in (self.header_label, self.status_label):
            label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            font = label.font()
            font.setPointSize(16)
            label.setFont(font)
            layout.addWidget(label, alignment=Qt.AlignmentFlag.AlignHCenter)
        for widget in (self.name_label, self.name_edit, self.upload_button, self.submit_button):
            layout.addWidget(widget, alignment=Qt.AlignmentFlag.AlignHCenter)
        layout.addStretch()

        self.name_edit.textChanged.connect(self._vm.set_user_name)
        self.upload_button.clicked.connect(self._vm.pick_file)
        self.submit_button.clicked.connect(self._vm.submit)
        self._vm.state_changed.connect(self.render)

        self.render(self._vm.state)

    def render(self, state: State):
        self.status_label.setText(state.status_text)
        self.upload_button.setText(self._vm.upload_label or UIStrings.BTN_UPLOAD)
        self.submit_button.setEnabled(self._vm.can_submit)

    def closeEvent(self, event):
        self._vm.shutdown()
        super().closeEvent(event)

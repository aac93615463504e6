import asyncio
from pathlib import Path
from typing import Optional

from PySide6.QtWidgets import QFileDialog, QWidget

from exam_submission.submission_core.domain.errors import SelectionError
from exam_submission.submission_core.domain.models import FileSpec
from exam_submission.presentation.resources.strings import UIStrings


class QtFileSelector:
    """
    Native file picker restricted to the configured extension filter.
    """
    def __init__(self, name_filter: str, parent: Optional[QWidget] = None, encoding: str = "utf-8"):
        self._name_filter = name_filter
        self._parent = parent
        self._encoding = encoding

    def set_parent(self, parent: QWidget) -> None:
        self._parent = parent

    async def select(self) -> FileSpec:
        # Modal dialog: runs a nested Qt event loop on the GUI thread
        paths, _ = QFileDialog.getOpenFileNames(
            self._parent, UIStrings.TITLE_SELECT_FILE, "", self._name_filter
        )
        if len(paths) != 1:
            raise SelectionError(len(paths))

        path = Path(paths[0])
        contents = await asyncio.to_thread(path.read_text, encoding=self._encoding)
        return FileSpec(name=path.name, contents=contents)

class SelectionError(Exception):
    """
    Raised by a file selector when the user did not choose exactly one file.
    """
    def __init__(self, count: int):
        super().__init__(f"Expected exactly one file, got {count}")
        self.count = count


class SubmissionWriteError(Exception):
    """
    Raised by an exam writer when a submission cannot be persisted.
    """

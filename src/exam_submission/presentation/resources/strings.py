"""
Centralized storage for user-facing labels in the Presentation Layer.
Status line texts come from the core (StatusMessages).
"""

class UIStrings:
    # Labels
    LBL_HEADER = "CS 131 Exam Submission"
    LBL_NAME = "Name:"

    # Dialog Titles
    TITLE_SELECT_FILE = "Select Python File to Submit"

    # Button Labels
    BTN_UPLOAD = "Upload File..."
    BTN_SUBMIT = "Submit"

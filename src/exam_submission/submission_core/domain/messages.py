"""
User-visible status line texts produced by the reducer and the dispatcher.
"""

class StatusMessages:
    INITIAL = "Please enter your name and upload a file."
    INPUT_FILE = "Please input a file."
    INPUT_NAME = "Please input a Name."
    READY = "Ready To Submit."

    SUBMIT_SUCCEEDED = "Exam Submitted Successfully. You may close the window."
    SUBMIT_FAILED = (
        "Something went wrong. Try to submit in a little bit. "
        "If this continues to occur, please contact the instructor."
    )

    CONFIG_LOAD_FAILED = "Unable to read submission configuration: {}"
    SELECTION_FAILED = "Please select exactly one file."
    FILE_UNREADABLE = "The selected file could not be read as text. Please choose another file."

class MSAPIDException(Exception):
    pass

class InputUnreadableException(MSAPIDException):
    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Unable to read alignment \"{path}\": {reason}")

class LengthMismatchException(MSAPIDException):
    def __init__(self, header: str, actual_length: int, expected_length: int):
        self.header = header
        self.actual_length = actual_length
        self.expected_length = expected_length
        super().__init__(f"Expected length of {expected_length}, but got {actual_length} for sequence \"{header}\".")

class WCAGAnalysisError(Exception):
    """Base error for the analysis pipeline; str(exc) is the user-facing message."""

    status_code = 500


class InvalidURLError(WCAGAnalysisError):
    status_code = 400

    def __init__(self, message: str = "Invalid URL provided"):
        super().__init__(message)


class AuditError(WCAGAnalysisError):
    status_code = 500

    def __init__(self, error_text: str):
        self.error_text = error_text
        super().__init__(f"Error during WCAG analysis: {error_text}")

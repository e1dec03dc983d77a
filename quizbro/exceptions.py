"""
Error taxonomy shared by services and API handlers
"""


class QuizBroError(Exception):
    """Base error rendered to clients as {"error": ..., "message": ...}"""
    
    status_code = 500
    error = "quiz_bro_error"
    
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MalformedInput(QuizBroError):
    """A stored record is missing a required field or failed schema validation"""
    status_code = 500
    error = "malformed_input"


class UpstreamFailure(QuizBroError):
    """A query against the record store failed"""
    status_code = 502
    error = "upstream_failure"


class AuthenticationFailed(QuizBroError):
    status_code = 401
    error = "authentication_failed"


class PermissionDenied(QuizBroError):
    status_code = 403
    error = "permission_denied"


class NotFound(QuizBroError):
    status_code = 404
    error = "not_found"


class QuizNotAvailable(QuizBroError):
    """Quiz is unpublished or scheduled for later"""
    status_code = 403
    error = "quiz_not_available"


class AlreadyAttempted(QuizBroError):
    """Student already has a response for this quiz"""
    status_code = 409
    error = "already_attempted"

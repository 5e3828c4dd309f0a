"""
Error handling for the source window command.

This module provides:
- The exception hierarchy raised by the source command
- Error categorization and severity levels
- Structured error responses with recovery suggestions
- Integration with the logging system
"""

import logging
import traceback
from enum import Enum
from typing import Dict, Any, Optional, List
from dataclasses import dataclass
from datetime import datetime


class SourceCommandError(Exception):
    """Base exception for failures of the source command."""
    pass


class NoActiveFrameError(SourceCommandError):
    """Exception raised when no stack frame is currently selected."""

    def __init__(self):
        super().__init__("No active stack frame")


class InvalidLowerBoundError(SourceCommandError):
    """Exception raised when the lower bound argument is not an integer."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid lower bound value '{token}'")


class InvalidUpperBoundError(SourceCommandError):
    """Exception raised when the upper bound argument is not an integer."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid upper bound value '{token}'")


class NoSourceInfoError(SourceCommandError):
    """Exception raised when the active frame carries no file or line."""

    def __init__(self):
        super().__init__("No source information available")


class SourceFileNotFoundError(SourceCommandError):
    """Exception raised when the resolved source file does not exist."""

    def __init__(self, file_path: str):
        self.file_path = file_path
        super().__init__(f"Source file '{file_path}' not found")


class SourceFileUnreadableError(SourceCommandError):
    """Exception raised when the source file cannot be opened or read."""

    def __init__(self, file_path: str, cause: Exception):
        self.file_path = file_path
        self.cause = cause
        super().__init__(f"Could not open source file '{file_path}': {cause}")


class ErrorSeverity(Enum):
    """Error severity levels."""
    LOW = "low"           # Command aborted, session continues
    MEDIUM = "medium"     # Unexpected failure, session continues
    HIGH = "high"         # Session state is questionable
    CRITICAL = "critical" # Session cannot continue


class ErrorCategory(Enum):
    """Error categories for better organization and handling."""
    VALIDATION = "validation"      # Command argument errors
    SESSION = "session"            # Missing frame or debug information
    FILE_SYSTEM = "file_system"    # Source file access errors
    UNKNOWN = "unknown"            # Unclassified errors


_CATEGORY_BY_ERROR = {
    NoActiveFrameError: ErrorCategory.SESSION,
    NoSourceInfoError: ErrorCategory.SESSION,
    InvalidLowerBoundError: ErrorCategory.VALIDATION,
    InvalidUpperBoundError: ErrorCategory.VALIDATION,
    SourceFileNotFoundError: ErrorCategory.FILE_SYSTEM,
    SourceFileUnreadableError: ErrorCategory.FILE_SYSTEM,
}

_RECOVERY_BY_ERROR = {
    NoActiveFrameError: ["Select a stack frame or continue execution until the debuggee stops"],
    NoSourceInfoError: ["The frame has no debug information; select a frame with source"],
    InvalidLowerBoundError: ["Retry with integer arguments: source|src [lower] [upper]"],
    InvalidUpperBoundError: ["Retry with integer arguments: source|src [lower] [upper]"],
    SourceFileNotFoundError: ["Check that the source file still exists at the reported path"],
    SourceFileUnreadableError: ["Check file permissions and that the path is a regular file"],
}


@dataclass
class ErrorContext:
    """Context information for error reporting."""
    component: str                    # Component where error occurred
    operation: str                   # Operation being performed
    file_path: Optional[str] = None  # Source file if applicable
    line_number: Optional[int] = None # Execution line if applicable
    additional_data: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert context to dictionary."""
        return {
            "component": self.component,
            "operation": self.operation,
            "file_path": self.file_path,
            "line_number": self.line_number,
            "additional_data": self.additional_data or {}
        }


@dataclass
class ErrorResponse:
    """Structured error response."""
    error: bool
    error_type: str
    category: ErrorCategory
    severity: ErrorSeverity
    message: str
    context: ErrorContext
    timestamp: datetime
    recovery_suggestions: List[str]
    actionable_guidance: List[str]
    original_exception: Optional[Exception] = None
    stack_trace: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert error response to dictionary."""
        return {
            "error": self.error,
            "error_type": self.error_type,
            "category": self.category.value,
            "severity": self.severity.value,
            "message": self.message,
            "context": self.context.to_dict(),
            "timestamp": self.timestamp.isoformat(),
            "recovery_suggestions": self.recovery_suggestions,
            "actionable_guidance": self.actionable_guidance,
            "stack_trace": self.stack_trace
        }


class ErrorHandler:
    """
    Centralized error handling.

    Turns exceptions into structured responses with a category, a severity
    and recovery suggestions, and logs them.
    """

    def __init__(self, logger_name: str = "source_window"):
        """Initialize the error handler."""
        self.logger = logging.getLogger(logger_name)

    def handle_error(
        self,
        error: Exception,
        context: ErrorContext,
        category: Optional[ErrorCategory] = None,
        severity: ErrorSeverity = ErrorSeverity.LOW,
        include_stack_trace: bool = False
    ) -> ErrorResponse:
        """
        Handle an error with full context and structured response.

        Args:
            error: The exception that occurred
            context: Context information about where the error occurred
            category: Error category (auto-detected if not provided)
            severity: Error severity (command failures are low)
            include_stack_trace: Whether to include stack trace in response

        Returns:
            Structured error response
        """
        if category is None:
            category = self._categorize_error(error)

        error_response = ErrorResponse(
            error=True,
            error_type=type(error).__name__,
            category=category,
            severity=severity,
            message=str(error),
            context=context,
            timestamp=datetime.now(),
            recovery_suggestions=self._generate_recovery_suggestions(error, category),
            actionable_guidance=self._generate_actionable_guidance(category),
            original_exception=error,
            stack_trace=traceback.format_exc() if include_stack_trace else None
        )

        self._log_error(error_response)

        return error_response

    def handle_command_error(self, error: SourceCommandError, context: ErrorContext) -> ErrorResponse:
        """
        Handle a failure of the source command.

        These abort a single invocation and never end the debugger session,
        so they are always low severity.
        """
        if isinstance(error, (SourceFileNotFoundError, SourceFileUnreadableError)):
            context.file_path = context.file_path or error.file_path
        return self.handle_error(error, context)

    def _categorize_error(self, error: Exception) -> ErrorCategory:
        """Auto-detect error category based on exception type."""
        for error_type, category in _CATEGORY_BY_ERROR.items():
            if isinstance(error, error_type):
                return category
        if isinstance(error, OSError):
            return ErrorCategory.FILE_SYSTEM
        if isinstance(error, ValueError):
            return ErrorCategory.VALIDATION
        return ErrorCategory.UNKNOWN

    def _generate_recovery_suggestions(self, error: Exception, category: ErrorCategory) -> List[str]:
        """Generate recovery suggestions based on error type and category."""
        for error_type, suggestions in _RECOVERY_BY_ERROR.items():
            if isinstance(error, error_type):
                return list(suggestions)

        if category == ErrorCategory.FILE_SYSTEM:
            return ["Check file/directory permissions", "Verify file paths exist"]
        return ["Check application logs for more details"]

    def _generate_actionable_guidance(self, category: ErrorCategory) -> List[str]:
        """Generate actionable guidance for resolving the error."""
        if category == ErrorCategory.VALIDATION:
            return ["Run 'source --help' for the command syntax"]
        if category == ErrorCategory.SESSION:
            return ["Stop the debuggee at a breakpoint in code with debug information"]
        if category == ErrorCategory.FILE_SYSTEM:
            return [
                "Run 'ls -la' on the source path to check it exists and is readable",
                "Rebuild the debuggee if the source tree moved"
            ]
        return ["Re-run with --debug for more details"]

    def _log_error(self, error_response: ErrorResponse) -> None:
        """Log the error using appropriate log level based on severity."""
        log_message = f"[{error_response.category.value.upper()}] {error_response.message}"
        log_context = f"Component: {error_response.context.component}, Operation: {error_response.context.operation}"

        if error_response.severity == ErrorSeverity.CRITICAL:
            self.logger.critical(f"{log_message} | {log_context}")
        elif error_response.severity == ErrorSeverity.HIGH:
            self.logger.error(f"{log_message} | {log_context}")
        elif error_response.severity == ErrorSeverity.MEDIUM:
            self.logger.warning(f"{log_message} | {log_context}")
        else:
            self.logger.info(f"{log_message} | {log_context}")

        if error_response.severity in [ErrorSeverity.HIGH, ErrorSeverity.CRITICAL] and error_response.stack_trace:
            self.logger.debug(f"Stack trace: {error_response.stack_trace}")

from .grading_service import AssessmentGradingService, SubmissionOutcome
from .review import build_submission_review
from .student_view import build_student_view

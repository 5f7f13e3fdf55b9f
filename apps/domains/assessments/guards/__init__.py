from .grading_contract import AssessmentGradingGuard

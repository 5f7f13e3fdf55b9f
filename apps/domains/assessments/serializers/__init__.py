from .assessment_authoring import (
    AssessmentAuthoringSerializer,
    ChoiceAuthoringSerializer,
    PassageAuthoringSerializer,
    QuestionAuthoringSerializer,
)
from .assessment_input import (
    AssessmentInputSerializer,
    ChoiceInputSerializer,
    PassageInputSerializer,
    QuestionInputSerializer,
    StudentAnswerSerializer,
    SubmitAnswersSerializer,
)
from .fields import IdField
from .grade_result import (
    AnswerRecordSerializer,
    CompletenessReportSerializer,
    GradeResultSerializer,
    SubmissionOutcomeSerializer,
)
from .review import SubmissionReviewSerializer
from .student_view import StudentAssessmentSerializer

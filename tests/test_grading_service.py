import logging

import pytest
from django.core.exceptions import ValidationError as DjangoValidationError
from django.test import override_settings
from rest_framework.exceptions import ValidationError as DRFValidationError

from apps.domains.assessments.exceptions import IncompleteSubmissionError
from apps.domains.assessments.guards import AssessmentGradingGuard
from apps.domains.assessments.serializers import SubmissionOutcomeSerializer
from apps.domains.assessments.services import AssessmentGradingService

SERVICE_LOGGER = "apps.domains.assessments.services.grading_service"
GUARD_LOGGER = "apps.domains.assessments.guards.grading_contract"


@pytest.fixture
def no_correct_choice_test():
    return {
        "id": 30,
        "passages": [
            {"questions": [
                {"id": "q1", "choices": [{"id": "a", "isCorrect": True}]},
                {"id": "q2", "choices": [{"id": "a", "isCorrect": False}, {"id": "b", "isCorrect": False}]},
            ]}
        ],
    }


class TestAssessmentGradingService:
    def test_grade(self, reading_test, reading_answers):
        outcome = AssessmentGradingService().grade(reading_test, reading_answers)

        assert outcome.score == 1
        assert outcome.total_questions == 3
        assert outcome.percentage == "33.33"
        assert outcome.message == "You scored 1 out of 3 (33.33%)"
        assert len(outcome.answer_records) == 3
        assert outcome.completeness.is_valid is True

    def test_empty_assessment_has_zero_percentage(self):
        outcome = AssessmentGradingService().grade({"passages": []}, [])

        assert outcome.percentage == "0.00"
        assert outcome.message == "You scored 0 out of 0 (0.00%)"

    def test_incomplete_submission_is_graded_by_default(self, numeric_test):
        outcome = AssessmentGradingService().grade(numeric_test, [{"questionId": 101, "choiceId": 5}])

        assert outcome.completeness.is_valid is False
        assert outcome.completeness.missing_questions == ("102",)
        assert outcome.score == 1
        assert outcome.answer_records[1].is_correct is False

    def test_require_complete(self, numeric_test):
        service = AssessmentGradingService(require_complete=True)

        with pytest.raises(IncompleteSubmissionError) as exc_info:
            service.grade(numeric_test, [{"questionId": 101, "choiceId": 5}])

        error = exc_info.value
        assert error.missing_questions == ("102",)
        assert error.code == "submission_incomplete"
        assert error.http_status == 400
        assert "1 question(s)" in error.message

    def test_require_complete_from_settings(self, numeric_test):
        with override_settings(ASSESSMENT_GRADING={"REQUIRE_COMPLETE_SUBMISSION": True}):
            service = AssessmentGradingService()

        assert service.require_complete is True
        assert service.percentage_decimals == 2

        with pytest.raises(IncompleteSubmissionError):
            service.grade(numeric_test, [])

    def test_complete_submission_passes_when_required(self, numeric_test):
        answers = [{"questionId": 101, "choiceId": 6}, {"questionId": 102, "choiceId": None}]

        outcome = AssessmentGradingService(require_complete=True).grade(numeric_test, answers)

        assert outcome.score == 0

    def test_message_percentage_rounds_half_up(self):
        assessment = {
            "passages": [
                {"questions": [{"id": f"q{i}", "choices": [{"id": "a", "isCorrect": True}]} for i in range(32)]}
            ]
        }
        answers = [{"questionId": f"q{i}", "choiceId": "a"} for i in range(5)]

        outcome = AssessmentGradingService().grade(assessment, answers)

        assert outcome.message == "You scored 5 out of 32 (15.63%)"

    def test_percentage_decimals(self, reading_test, reading_answers):
        outcome = AssessmentGradingService(percentage_decimals=1).grade(reading_test, reading_answers)

        assert outcome.percentage == "33.3"

    def test_unknown_question_ids_are_logged_not_returned(self, reading_test, caplog):
        caplog.set_level(logging.INFO, logger=SERVICE_LOGGER)
        answers = [{"questionId": "q1", "choiceId": "c1a"}, {"questionId": "ghost", "choiceId": "x"}]

        outcome = AssessmentGradingService().grade(reading_test, answers)

        assert "ghost" not in [r.question_id for r in outcome.answer_records]
        assert "ignored 1 answer(s)" in caplog.text

    def test_score_is_logged(self, reading_test, reading_answers, caplog):
        caplog.set_level(logging.INFO, logger=SERVICE_LOGGER)

        AssessmentGradingService().grade(reading_test, reading_answers)

        assert "assessment_id=10 score=1/3" in caplog.text

    def test_missing_correct_choice_warns_and_grades(self, no_correct_choice_test, caplog):
        caplog.set_level(logging.WARNING, logger=GUARD_LOGGER)
        answers = [{"questionId": "q1", "choiceId": "a"}, {"questionId": "q2", "choiceId": "a"}]

        outcome = AssessmentGradingService().grade(no_correct_choice_test, answers)

        assert outcome.score == 1
        assert "question q2 has 0 correct choices" in caplog.text

    def test_strict_answer_key_rejects(self, no_correct_choice_test):
        service = AssessmentGradingService(guard=AssessmentGradingGuard(strict=True))

        with pytest.raises(DjangoValidationError):
            service.grade(no_correct_choice_test, [])

    def test_same_input_same_outcome(self, reading_test, reading_answers):
        service = AssessmentGradingService()

        assert service.grade(reading_test, reading_answers) == service.grade(reading_test, reading_answers)


class TestGradePayload:
    def test_valid_payload(self, numeric_test):
        payload = {"answers": [{"questionId": "101", "choiceId": "5"}, {"questionId": "102", "choiceId": "8"}]}

        outcome = AssessmentGradingService().grade_payload(numeric_test, payload)

        assert outcome.score == 2
        assert outcome.message == "You scored 2 out of 2 (100.00%)"

    def test_empty_answers_rejected(self, numeric_test):
        with pytest.raises(DRFValidationError):
            AssessmentGradingService().grade_payload(numeric_test, {"answers": []})

    def test_malformed_assessment_rejected(self, reading_answers):
        with pytest.raises(DRFValidationError):
            AssessmentGradingService().grade_payload({"passages": [{"title": "x"}]}, {"answers": reading_answers})

    def test_outcome_serializer(self, reading_test, reading_answers):
        outcome = AssessmentGradingService().grade(reading_test, reading_answers)

        data = SubmissionOutcomeSerializer(outcome).data

        assert data["score"] == 1
        assert data["totalQuestions"] == 3
        assert data["percentage"] == "33.33"
        assert data["message"] == "You scored 1 out of 3 (33.33%)"
        assert data["answerRecords"][2] == {"questionId": "q3", "choiceId": None, "isCorrect": False}


class TestAssessmentGradingGuard:
    def test_clean_assessment(self, reading_test):
        assert AssessmentGradingGuard().validate_for_grading(reading_test) == []

    def test_duplicate_question_ids(self):
        assessment = {
            "passages": [
                {"questions": [{"id": 1, "choices": [{"id": 1, "isCorrect": True}]}]},
                {"questions": [{"id": "1", "choices": [{"id": 2, "isCorrect": True}]}]},
            ]
        }

        problems = AssessmentGradingGuard().validate_for_grading(assessment)

        assert problems == ["question id 1 appears 2 times"]

    def test_multiple_correct_choices(self):
        assessment = {
            "passages": [
                {"questions": [{"id": "q1", "choices": [{"id": "a", "isCorrect": True}, {"id": "b", "isCorrect": True}]}]}
            ]
        }

        problems = AssessmentGradingGuard().validate_for_grading(assessment)

        assert problems == ["question q1 has 2 correct choices (expected 1)"]

    def test_strict_from_settings(self, no_correct_choice_test):
        with override_settings(ASSESSMENT_GRADING={"STRICT_ANSWER_KEY": True}):
            with pytest.raises(DjangoValidationError):
                AssessmentGradingGuard().validate_for_grading(no_correct_choice_test)

    def test_strict_argument_overrides_instance(self, no_correct_choice_test):
        guard = AssessmentGradingGuard(strict=True)

        problems = guard.validate_for_grading(no_correct_choice_test, strict=False)

        assert len(problems) == 1

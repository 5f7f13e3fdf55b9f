# PATH: apps/domains/assessments/serializers/grade_result.py
from __future__ import annotations

from rest_framework import serializers


class AnswerRecordSerializer(serializers.Serializer):
    """
    문항별 채점 레코드 (호출 측이 답안 row 로 저장)
    """
    questionId = serializers.CharField(source="question_id")
    choiceId = serializers.CharField(source="choice_id", allow_null=True)
    isCorrect = serializers.BooleanField(source="is_correct")


class GradeResultSerializer(serializers.Serializer):
    score = serializers.IntegerField()
    totalQuestions = serializers.IntegerField(source="total_questions")
    answerRecords = AnswerRecordSerializer(source="answer_records", many=True)


class CompletenessReportSerializer(serializers.Serializer):
    isValid = serializers.BooleanField(source="is_valid")
    missingQuestions = serializers.ListField(source="missing_questions", child=serializers.CharField())
    totalQuestions = serializers.IntegerField(source="total_questions")
    answeredQuestions = serializers.IntegerField(source="answered_questions")


class SubmissionOutcomeSerializer(serializers.Serializer):
    """
    ✅ 학생 제출 응답: 점수 + 정답률 + 안내 문구 + 문항별 레코드
    """
    score = serializers.IntegerField(source="result.score")
    totalQuestions = serializers.IntegerField(source="result.total_questions")
    percentage = serializers.CharField()
    message = serializers.CharField()
    answerRecords = AnswerRecordSerializer(source="result.answer_records", many=True)

# PATH: apps/domains/assessments/serializers/review.py
from __future__ import annotations

from rest_framework import serializers


class ReviewChoiceSerializer(serializers.Serializer):
    id = serializers.CharField()
    text = serializers.CharField()
    isCorrect = serializers.BooleanField(source="is_correct")
    isSelected = serializers.BooleanField(source="is_selected")


class ReviewPassageSerializer(serializers.Serializer):
    id = serializers.CharField(allow_null=True)
    title = serializers.CharField()
    content = serializers.CharField()
    imageURL = serializers.CharField(source="image_url", allow_null=True)
    order = serializers.IntegerField(allow_null=True)


class AnswerReviewSerializer(serializers.Serializer):
    questionId = serializers.CharField(source="question_id")
    questionText = serializers.CharField(source="question_text")
    selectedChoiceId = serializers.CharField(source="selected_choice_id", allow_null=True)
    selectedChoiceText = serializers.CharField(source="selected_choice_text")
    isCorrect = serializers.BooleanField(source="is_correct")
    passage = ReviewPassageSerializer(allow_null=True)
    allChoices = ReviewChoiceSerializer(source="all_choices", many=True)


class SubmissionReviewSerializer(serializers.Serializer):
    """
    제출 후 상세 리뷰 (문항별 선택/정답 + 지문)
    """
    assessmentId = serializers.CharField(source="assessment_id", allow_null=True)
    assessmentTitle = serializers.CharField(source="assessment_title")
    score = serializers.IntegerField()
    totalQuestions = serializers.IntegerField(source="total_questions")
    percentage = serializers.CharField()
    answers = AnswerReviewSerializer(many=True)

# PATH: apps/domains/assessments/serializers/assessment_authoring.py
from __future__ import annotations

from rest_framework import serializers

from apps.domains.assessments.conf import grading_setting


class ChoiceAuthoringSerializer(serializers.Serializer):
    choiceText = serializers.CharField(
        source="text",
        error_messages={"required": "Choice text is required"},
    )
    isCorrect = serializers.BooleanField(
        source="is_correct",
        error_messages={"required": "isCorrect flag is required"},
    )
    order = serializers.IntegerField(required=False, allow_null=True, min_value=0, max_value=3)


class QuestionAuthoringSerializer(serializers.Serializer):
    questionText = serializers.CharField(
        source="text",
        error_messages={"required": "Question text is required"},
    )
    order = serializers.IntegerField(required=False, allow_null=True, min_value=0)
    choices = ChoiceAuthoringSerializer(
        many=True,
        error_messages={"required": "Choices are required"},
    )

    def validate_choices(self, value):
        expected = int(grading_setting("CHOICES_PER_QUESTION"))
        if len(value) != expected:
            raise serializers.ValidationError(f"Each question must have exactly {expected} choices")

        # 채점 코어는 정답 0개를 "항상 오답"으로 처리할 뿐 막지 않는다.
        # 출제 시점에 정확히 1개를 강제.
        correct_count = sum(1 for c in value if c.get("is_correct"))
        if correct_count != 1:
            raise serializers.ValidationError("Each question must have exactly one correct answer")
        return value


class PassageAuthoringSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=255, required=False, allow_blank=True, allow_null=True)
    content = serializers.CharField(error_messages={"required": "Passage content is required"})
    imageURL = serializers.URLField(
        source="image_url",
        required=False,
        allow_blank=True,
        allow_null=True,
        error_messages={"invalid": "Image URL must be a valid URL"},
    )
    order = serializers.IntegerField(required=False, allow_null=True, min_value=0)
    questions = QuestionAuthoringSerializer(
        many=True,
        error_messages={"required": "Questions are required"},
    )

    def validate_questions(self, value):
        if not value:
            raise serializers.ValidationError("Each passage must have at least one question")
        return value


class AssessmentAuthoringSerializer(serializers.Serializer):
    """
    관리자 출제(test / homework 생성·수정) 입력 검증

    - 저장은 하지 않는다 (ORM 레이어 책임)
    - 문항당 선지 수 / 최대 시간은 ASSESSMENT_GRADING 설정값
    """

    title = serializers.CharField(
        min_length=3,
        max_length=255,
        error_messages={
            "min_length": "Title must be at least 3 characters long",
            "max_length": "Title cannot exceed 255 characters",
            "required": "Title is required",
        },
    )
    instructions = serializers.CharField(
        max_length=2000,
        required=False,
        allow_blank=True,
        allow_null=True,
        error_messages={"max_length": "Instructions cannot exceed 2000 characters"},
    )
    duration = serializers.IntegerField(
        required=False,
        allow_null=True,
        min_value=1,
        error_messages={
            "min_value": "Duration must be at least 1 minute",
            "invalid": "Duration must be a whole number",
        },
    )
    passages = PassageAuthoringSerializer(
        many=True,
        error_messages={"required": "Passages are required"},
    )

    def validate_duration(self, value):
        if value is None:
            return value
        max_minutes = int(grading_setting("MAX_DURATION_MINUTES"))
        if value > max_minutes:
            raise serializers.ValidationError(f"Duration cannot exceed {max_minutes} minutes")
        return value

    def validate_passages(self, value):
        if not value:
            raise serializers.ValidationError("Assessment must have at least one passage")
        return value

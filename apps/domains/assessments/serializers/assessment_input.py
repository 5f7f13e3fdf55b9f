# PATH: apps/domains/assessments/serializers/assessment_input.py
from __future__ import annotations

from typing import Tuple

from rest_framework import serializers

from academy.domain.assessments.entities import Assessment, StudentAnswer

from .fields import IdField


class ChoiceInputSerializer(serializers.Serializer):
    id = IdField()
    isCorrect = serializers.BooleanField(source="is_correct", default=False)
    choiceText = serializers.CharField(source="text", required=False, allow_blank=True, allow_null=True)
    order = serializers.IntegerField(required=False, allow_null=True)


class QuestionInputSerializer(serializers.Serializer):
    id = IdField()
    questionText = serializers.CharField(source="text", required=False, allow_blank=True, allow_null=True)
    order = serializers.IntegerField(required=False, allow_null=True)
    choices = ChoiceInputSerializer(many=True)


class PassageInputSerializer(serializers.Serializer):
    id = IdField(required=False, allow_null=True)
    title = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    content = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    imageURL = serializers.CharField(source="image_url", required=False, allow_blank=True, allow_null=True)
    order = serializers.IntegerField(required=False, allow_null=True)
    questions = QuestionInputSerializer(many=True)


class AssessmentInputSerializer(serializers.Serializer):
    """
    채점 직전 assessment 구조 검증

    ✅ 의도:
    - 채점 코어는 구조 검증을 하지 않는다 (깨진 입력이면 그냥 터진다)
    - 그래서 DB/JSON 에서 읽은 assessment 는 여기서 먼저 모양을 확인
    - 정답 개수 같은 "출제 품질"은 여기서 보지 않는다 (guards / authoring 책임)
    """

    id = IdField(required=False, allow_null=True)
    title = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    instructions = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    duration = serializers.IntegerField(required=False, allow_null=True, min_value=0)
    passages = PassageInputSerializer(many=True)

    def to_entity(self) -> Assessment:
        return Assessment.from_dict(self.validated_data)


class StudentAnswerSerializer(serializers.Serializer):
    questionId = IdField(source="question_id")
    # null / "" / 키 없음 = 미응답
    choiceId = IdField(source="choice_id", required=False, allow_null=True)


class SubmitAnswersSerializer(serializers.Serializer):
    answers = StudentAnswerSerializer(many=True)

    def validate_answers(self, value):
        if not value:
            raise serializers.ValidationError("Answers array is required and must not be empty")
        return value

    def to_entities(self) -> Tuple[StudentAnswer, ...]:
        return tuple(StudentAnswer.from_dict(a) for a in self.validated_data["answers"])

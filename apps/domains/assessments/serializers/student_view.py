# PATH: apps/domains/assessments/serializers/student_view.py
from __future__ import annotations

from rest_framework import serializers


class StudentChoiceSerializer(serializers.Serializer):
    # isCorrect 는 절대 내려보내지 않는다
    id = serializers.CharField()
    choiceText = serializers.CharField(source="text")
    order = serializers.IntegerField(allow_null=True)


class StudentQuestionSerializer(serializers.Serializer):
    id = serializers.CharField()
    questionText = serializers.CharField(source="text")
    order = serializers.IntegerField(allow_null=True)
    choices = StudentChoiceSerializer(many=True)


class StudentPassageSerializer(serializers.Serializer):
    id = serializers.CharField(allow_null=True)
    title = serializers.CharField()
    content = serializers.CharField()
    imageURL = serializers.CharField(source="image_url", allow_null=True)
    order = serializers.IntegerField(allow_null=True)
    questions = StudentQuestionSerializer(many=True)


class StudentAssessmentSerializer(serializers.Serializer):
    """
    학생 응시 화면용 assessment (정답 정보 제거)
    """
    id = serializers.CharField(allow_null=True)
    title = serializers.CharField()
    instructions = serializers.CharField()
    duration = serializers.IntegerField(allow_null=True)
    type = serializers.CharField(source="kind")
    passages = StudentPassageSerializer(many=True)
    totalQuestions = serializers.IntegerField(source="question_count")

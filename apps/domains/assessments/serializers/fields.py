# PATH: apps/domains/assessments/serializers/fields.py
from __future__ import annotations

from rest_framework import serializers

from academy.domain.assessments.errors import MalformedAssessmentError
from academy.domain.assessments.ids import normalize_id


class IdField(serializers.Field):
    """
    문항/선지 id 필드

    - JSON(str) / DB(int) 어느 쪽이 와도 normalize_id 로 같은 문자열 키
    - bool, dict, list 는 거부
    """

    default_error_messages = {
        "invalid": "A valid id (string or integer) is required.",
        "blank": "This field may not be blank.",
    }

    def to_internal_value(self, data):
        if isinstance(data, bool) or not isinstance(data, (str, int, float)):
            self.fail("invalid")
        try:
            key = normalize_id(data)
        except MalformedAssessmentError:
            self.fail("invalid")
        if key is None:
            if self.allow_null:
                return None
            self.fail("blank")
        return key

    def to_representation(self, value):
        return str(value)

import copy
import os

import django
import pytest

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "apps.api.config.settings.test")
django.setup()


READING_TEST = {
    "id": 10,
    "title": "SAT Reading Practice 1",
    "instructions": "Read each passage and answer the questions.",
    "duration": 30,
    "passages": [
        {
            "id": 1,
            "title": "Passage 1",
            "content": "The first passage content.",
            "imageURL": None,
            "order": 0,
            "questions": [
                {
                    "id": "q1",
                    "questionText": "Question 1?",
                    "order": 0,
                    "choices": [
                        {"id": "c1a", "choiceText": "A", "isCorrect": True, "order": 0},
                        {"id": "c1b", "choiceText": "B", "isCorrect": False, "order": 1},
                    ],
                },
                {
                    "id": "q2",
                    "questionText": "Question 2?",
                    "order": 1,
                    "choices": [
                        {"id": "c2a", "choiceText": "A", "isCorrect": False, "order": 0},
                        {"id": "c2b", "choiceText": "B", "isCorrect": True, "order": 1},
                        {"id": "c2x", "choiceText": "X", "isCorrect": False, "order": 2},
                    ],
                },
                {
                    "id": "q3",
                    "questionText": "Question 3?",
                    "order": 2,
                    "choices": [
                        {"id": "c3a", "choiceText": "A", "isCorrect": False, "order": 0},
                        {"id": "c3c", "choiceText": "C", "isCorrect": True, "order": 1},
                    ],
                },
            ],
        }
    ],
}


@pytest.fixture
def reading_test():
    return copy.deepcopy(READING_TEST)


@pytest.fixture
def reading_answers():
    return [
        {"questionId": "q1", "choiceId": "c1a"},
        {"questionId": "q2", "choiceId": "c2x"},
        {"questionId": "q3", "choiceId": None},
    ]


@pytest.fixture
def numeric_test():
    """DB 드라이버에서 읽은 것처럼 id 가 전부 int 인 assessment (2 passages)."""
    return {
        "id": 20,
        "title": "Math Homework",
        "duration": None,
        "passages": [
            {
                "id": 1,
                "questions": [
                    {"id": 101, "choices": [{"id": 5, "isCorrect": True}, {"id": 6, "isCorrect": False}]},
                ],
            },
            {
                "id": 2,
                "questions": [
                    {"id": 102, "choices": [{"id": 7, "isCorrect": False}, {"id": 8, "isCorrect": True}]},
                ],
            },
        ],
    }

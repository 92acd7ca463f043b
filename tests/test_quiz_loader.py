import json

import pytest

from sciquest.core.errors import QuizImportError, QuizLoadError
from sciquest.core.models import QuestionKind, QuizVariant
from sciquest.core.quiz_importer import parse_quiz_text
from sciquest.core.quiz_loader import QuizDirectoryLoader, map_quiz_payload

_API_PAYLOAD = {
    "id": 12,
    "title": "Earth and Space",
    "type": "Board Game",
    "questions": [
        {
            "id": "3",
            "type": "multiple-choice",
            "question": "Closest planet to the sun?",
            "options": ["Mercury", "Venus"],
            "answer": "Mercury",
            "points": 2,
            "timeLimit": 20,
            "category": "Earth and Space",
        },
        {
            "id": 4,
            "type": "identification",
            "question": "What causes the phases of the moon?",
            "answer": "Position of Moon/Earth/Sun",
            "points": 0,
            "timeLimit": None,
            "imageUrl": "",
        },
    ],
}

_TEXT_QUIZ = """TOPIC: Living Things
VARIANT: Card Game
TEAM: Ana, Ben

Q: Which organ pumps blood?
A: Lungs
B: Heart
ANSWER: B
TIMELIMIT: 15

---

Q: Process plants use to make food
   from sunlight?
ANSWER: Photosynthesis
POINTS: 3
CATEGORY: Living Things and Their Environment
IMAGE: leaf.png
"""


class TestMapQuizPayload:
    def test_maps_api_shape(self):
        quiz = map_quiz_payload(_API_PAYLOAD)
        assert quiz.id == "12"
        assert quiz.topic == "Earth and Space"
        assert quiz.variant is QuizVariant.BOARD_GAME
        first, second = quiz.questions
        assert first.id == 3
        assert first.kind is QuestionKind.CHOICE
        assert first.options == ["Mercury", "Venus"]
        assert first.points == 2
        assert first.time_limit_seconds == 20

    def test_applies_defaults(self):
        second = map_quiz_payload(_API_PAYLOAD).questions[1]
        assert second.kind is QuestionKind.FREE_TEXT
        assert second.options == []
        assert second.points == 1
        assert second.time_limit_seconds == 30
        assert second.category == ""
        assert second.image_ref is None

    def test_unknown_type_plays_as_normal(self):
        quiz = map_quiz_payload({"id": "x", "type": "Puzzle", "questions": []})
        assert quiz.variant is QuizVariant.NORMAL

    def test_team_members_override_payload(self):
        payload = dict(_API_PAYLOAD, teamMembers=["Zed"])
        assert map_quiz_payload(payload).team_members == ["Zed"]
        assert map_quiz_payload(payload, team_members=["Ana"]).team_members == ["Ana"]

    def test_null_fields_take_defaults(self):
        quiz = map_quiz_payload(
            {
                "id": 1,
                "title": None,
                "type": "Normal",
                "questions": [
                    {"id": 1, "type": "identification", "question": "Q?", "options": None, "answer": None},
                ],
            }
        )
        assert quiz.topic == ""
        question = quiz.questions[0]
        assert question.answer == ""
        assert question.options == []
        assert question.kind is QuestionKind.FREE_TEXT

    def test_null_question_list_is_an_empty_quiz(self):
        quiz = map_quiz_payload({"id": "empty", "type": None, "questions": None})
        assert quiz.questions == []
        assert quiz.variant is QuizVariant.NORMAL

    def test_duplicate_question_ids_are_rejected(self):
        payload = {
            "id": 5,
            "questions": [
                {"id": 1, "question": "First?", "answer": "a"},
                {"id": "1", "question": "Second?", "answer": "b"},
            ],
        }
        with pytest.raises(QuizLoadError, match="repeats question id 1"):
            map_quiz_payload(payload)

    def test_display_title_names_topic_and_variant(self):
        assert map_quiz_payload(_API_PAYLOAD).display_title == "Earth and Space (Board Game)"
        untitled = map_quiz_payload({"id": "x", "type": "Card Game", "questions": []})
        assert untitled.display_title == "Card Game"

    def test_malformed_payload_is_a_load_error(self):
        with pytest.raises(QuizLoadError):
            map_quiz_payload({"title": "no id", "questions": [{"question": "?"}]})


class TestParseQuizText:
    def test_parses_header_and_blocks(self):
        quiz = parse_quiz_text(_TEXT_QUIZ, quiz_id="bio")
        assert quiz.id == "bio"
        assert quiz.topic == "Living Things"
        assert quiz.variant is QuizVariant.CARD_GAME
        assert quiz.team_members == ["Ana", "Ben"]

        choice, free_text = quiz.questions
        assert choice.kind is QuestionKind.CHOICE
        assert choice.answer == "Heart"
        assert choice.time_limit_seconds == 15
        assert free_text.kind is QuestionKind.FREE_TEXT
        assert free_text.prompt == "Process plants use to make food\nfrom sunlight?"
        assert free_text.points == 3
        assert free_text.image_ref == "leaf.png"
        assert [q.id for q in quiz.questions] == [1, 2]

    def test_defaults_without_header(self):
        quiz = parse_quiz_text("Q: Hottest planet?\nANSWER: Venus\n", quiz_id="solo")
        assert quiz.topic == "solo"
        assert quiz.variant is QuizVariant.NORMAL
        assert quiz.team_members is None
        assert quiz.questions[0].time_limit_seconds is None

    @pytest.mark.parametrize(
        "text",
        [
            "Q: Missing answer?\n",
            "Q: Bad letter\nA: One\nB: Two\nANSWER: C\n",
            "Q: Gap\nA: One\nC: Three\nANSWER: A\n",
            "Q: Single option\nA: Only\nANSWER: A\n",
            "Q: Bad limit\nANSWER: x\nTIMELIMIT: soon\n",
            "VARIANT: Arcade\n\nQ: ?\nANSWER: x\n",
            "stray text\n",
        ],
    )
    def test_rejects_malformed_blocks(self, text):
        with pytest.raises(QuizImportError):
            parse_quiz_text(text, quiz_id="bad")


class TestQuizDirectoryLoader:
    def test_loads_json_and_text(self, tmp_path):
        (tmp_path / "space.json").write_text(json.dumps(_API_PAYLOAD), encoding="utf-8")
        (tmp_path / "bio.txt").write_text(_TEXT_QUIZ, encoding="utf-8")
        loader = QuizDirectoryLoader(tmp_path)

        assert loader.load_quiz("space").variant is QuizVariant.BOARD_GAME
        assert loader.load_quiz("bio").topic == "Living Things"

    def test_team_members_are_applied(self, tmp_path):
        (tmp_path / "bio.txt").write_text(_TEXT_QUIZ, encoding="utf-8")
        loader = QuizDirectoryLoader(tmp_path, team_members=["Cy"])
        assert loader.load_quiz("bio").team_members == ["Cy"]

    @pytest.mark.parametrize("quiz_id", ["", "../etc", "a b"])
    def test_invalid_ids_fail(self, tmp_path, quiz_id):
        with pytest.raises(QuizLoadError):
            QuizDirectoryLoader(tmp_path).load_quiz(quiz_id)

    def test_missing_quiz_fails(self, tmp_path):
        with pytest.raises(QuizLoadError, match="not found"):
            QuizDirectoryLoader(tmp_path).load_quiz("nope")

    def test_malformed_json_fails(self, tmp_path):
        (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(QuizLoadError):
            QuizDirectoryLoader(tmp_path).load_quiz("broken")

    def test_json_array_fails(self, tmp_path):
        (tmp_path / "list.json").write_text("[]", encoding="utf-8")
        with pytest.raises(QuizLoadError):
            QuizDirectoryLoader(tmp_path).load_quiz("list")

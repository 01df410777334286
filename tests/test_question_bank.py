import random

import pytest

from edugames.question_bank import QuestionBank

CSV_ROWS = "\n".join(
    [
        "History,Who built the Taj Mahal?,Akbar,Babur,Shah Jahan,Aurangzeb,2",
        "History,Year of independence?,1942,1947,1950,1857,1",
        "Biology,Which part makes food?,Root,Stem,Flower,Leaf,3",
        "Biology,too short,a,b",
        "Biology,bad index,a,b,c,d,two",
        "",
    ]
)


@pytest.fixture
def bank(tmp_path) -> QuestionBank:
    path = tmp_path / "questions.csv"
    path.write_text(CSV_ROWS, encoding="utf-8")
    qb = QuestionBank()
    assert qb.load(path) == 2
    return qb


def test_load_skips_malformed_rows(bank):
    assert sorted(bank.subjects) == ["Biology", "History"]
    for _ in range(10):
        q = bank.random_question("Biology")
        assert q.question == "Which part makes food?"
        assert q.options == ["Root", "Stem", "Flower", "Leaf"]
        assert q.answer == 3


def test_known_subject_stays_in_subject(bank):
    for _ in range(10):
        assert bank.random_question("History").subject == "History"


def test_unknown_subject_falls_back_to_a_known_one(bank):
    q = bank.random_question("Cooking", random.Random(4))
    assert q.subject in {"History", "Biology"}
    assert len(q.options) == 4


def test_missing_subject_picks_any(bank):
    assert bank.random_question(None).subject in {"History", "Biology"}


def test_missing_file_leaves_table_empty(tmp_path):
    qb = QuestionBank()
    assert qb.load(tmp_path / "nope.csv") == 0
    q = qb.random_question("History")
    assert q.question == "Error: Database empty."
    assert q.options is None
    assert q.answer is None

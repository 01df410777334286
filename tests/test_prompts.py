import json
import random

import pytest

from edugames.prompts import build_explain_prompt, build_prompt, escape_for_envelope
from edugames.topics import TOPIC_CATALOG


def test_escaped_text_parses_back_inside_a_json_string():
    text = 'He said "5\\2"\nok'
    escaped = escape_for_envelope(text)
    assert "\n" not in escaped
    assert json.loads('"' + escaped + '"') == 'He said "5\\2" ok'


def test_line_break_runs_collapse_to_one_space():
    assert escape_for_envelope("a\r\n\nb") == "a b"


def test_plain_text_is_unchanged():
    assert escape_for_envelope("Fractions") == "Fractions"


def test_build_prompt_names_subtopic_and_shape():
    instruction, subtopic = build_prompt("Biology", "Easy", random.Random(3))
    assert subtopic in TOPIC_CATALOG["Biology"]
    assert subtopic in instruction
    assert "Easy" in instruction
    assert '"wrong"' in instruction and "exactly 3" in instruction
    assert "\n" not in instruction


def test_build_prompt_unknown_subject_uses_subject():
    instruction, subtopic = build_prompt("Astronomy", "Hard")
    assert subtopic == "Astronomy"
    assert '"Astronomy"' in instruction


def test_explain_prompt_escapes_user_text():
    prompt = build_explain_prompt('Is "x" > 2?', "no", "yes")
    assert '\\"x\\"' in prompt
    assert '"no"' in prompt and '"yes"' in prompt


@pytest.mark.parametrize(
    "text",
    [
        'He said "5\\2"\nok',
        'a "b" \\ c',
        "two \\\\x backslashes",
        'ends with a backslash \\',
        'already \\"escaped\\" and \\\\ kept',
    ],
)
def test_escaping_twice_changes_nothing(text):
    once = escape_for_envelope(text)
    assert escape_for_envelope(once) == once
    json.loads('"' + once + '"')


def test_existing_escape_pairs_are_kept():
    assert escape_for_envelope('a \\"b\\" \\\\ c') == 'a \\"b\\" \\\\ c'
    assert escape_for_envelope('a "b" \\ c') == 'a \\"b\\" \\\\ c'

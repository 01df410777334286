# edugames/prompts.py
import random
import re
from typing import Optional, Tuple

from edugames.topics import pick_subtopic

_LINE_BREAKS = re.compile(r"[\r\n]+")
_CONTROL_CHARS = re.compile(r"[\x00-\x1f]")
# scanned left to right: an existing \\ or \" pair, else a lone \ or a bare "
_ESCAPE_TOKEN = re.compile(r'\\[\\"]|\\|"')


def _escape_token(match) -> str:
    token = match.group(0)
    if len(token) == 2:
        return token
    return "\\" + token


def escape_for_envelope(text: str) -> str:
    """Make ``text`` safe to sit inside a double-quoted JSON string value.

    Line breaks collapse to a single space. Lone backslashes and bare quotes
    are escaped, while ``\\\\`` and ``\\"`` pairs are kept as they are, so
    feeding the output back in returns it unchanged.
    """
    text = _LINE_BREAKS.sub(" ", text)
    text = _CONTROL_CHARS.sub(" ", text)
    return _ESCAPE_TOKEN.sub(_escape_token, text)


def build_prompt(subject: str, difficulty: str, rng: Optional[random.Random] = None) -> Tuple[str, str]:
    """Build the question-generation instruction.

    Returns ``(instruction, subtopic)``. A new subtopic is drawn on every call
    so retries get a fresh theme.
    """
    subtopic = pick_subtopic(subject, rng)
    topic = escape_for_envelope(subtopic)
    level = escape_for_envelope(difficulty)
    instruction = (
        f'Generate one {level} difficulty multiple-choice quiz question about "{topic}". '
        'Respond with a single JSON object and nothing else, in exactly this shape: '
        '{"q": "the question", "correct": "the correct answer", '
        '"wrong": ["wrong answer 1", "wrong answer 2", "wrong answer 3"]}. '
        'The "wrong" array must contain exactly 3 incorrect answers. '
        'All four answers must be short and written in the same style and format, '
        'for example the same unit or the same number format.'
    )
    return instruction, subtopic


def build_explain_prompt(question: str, wrong_choice: str, correct_choice: str) -> str:
    return (
        f'A student answered the quiz question "{escape_for_envelope(question)}" '
        f'with "{escape_for_envelope(wrong_choice)}", but the correct answer is '
        f'"{escape_for_envelope(correct_choice)}". '
        'In two or three friendly sentences, explain why the correct answer is right '
        'and why the student\'s answer is wrong. Reply with plain text only.'
    )

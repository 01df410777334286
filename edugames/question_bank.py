# edugames/question_bank.py
import csv
import logging
import os
import random
from pathlib import Path
from typing import Dict, List, Optional, Union

from edugames.schemas import BankQuestion

logger = logging.getLogger(__name__)

QUESTIONS_CSV = os.environ.get("QUESTIONS_CSV", "questions.csv")

# subject,question,opt1,opt2,opt3,opt4,answer_index
_ROW_FIELDS = 7


class QuestionBank:
    """Flat-file question table keyed by subject, loaded once at startup."""

    def __init__(self):
        self._by_subject: Dict[str, List[BankQuestion]] = {}

    @property
    def subjects(self) -> List[str]:
        return list(self._by_subject)

    def load(self, path: Union[str, Path] = QUESTIONS_CSV) -> int:
        """Replace the table with the rows in ``path``. Returns the subject count."""
        by_subject: Dict[str, List[BankQuestion]] = {}
        p = Path(path)
        if not p.is_file():
            logger.warning("%s not found! Question table will be empty.", p)
            self._by_subject = by_subject
            return 0

        with p.open("r", encoding="utf-8", newline="") as f:
            for row in csv.reader(f):
                if len(row) < _ROW_FIELDS:
                    continue
                try:
                    answer = int(row[6])
                except ValueError:
                    # Skip rows with a malformed answer index
                    continue
                subject = row[0]
                by_subject.setdefault(subject, []).append(
                    BankQuestion(subject=subject, question=row[1], options=row[2:6], answer=answer)
                )

        self._by_subject = by_subject
        logger.info("Question table loaded with %d subjects from %s", len(by_subject), p)
        return len(by_subject)

    def random_question(self, subject: Optional[str] = None, rng: Optional[random.Random] = None) -> BankQuestion:
        """Pick a random question for ``subject``.

        Unknown or empty subjects fall back to a random known subject.
        """
        rng = rng or random
        if not self._by_subject:
            return BankQuestion(question="Error: Database empty.")

        if not self._by_subject.get(subject or ""):
            subject = rng.choice(self.subjects)
        return rng.choice(self._by_subject[subject])


question_bank = QuestionBank()

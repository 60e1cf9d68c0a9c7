import logging
import random
import re
from typing import List, Optional, Tuple

from schemas import Question

logger = logging.getLogger(__name__)

# Leading "$" / question number of a header with no ". " separator
_NUMBER_PREFIX = re.compile(r"^[$0-9]*")


def is_question_line(line: str) -> bool:
    return line.startswith("$") or (line[:1].isascii() and line[:1].isdigit())


def split_header(header: str) -> str:
    """Returns the question text of a header like "$1. What is ...?"."""
    _, sep, rest = header.partition(". ")
    if not sep:
        rest = _NUMBER_PREFIX.sub("", header, count=1)
    return rest.strip()


def extract_answers(fields: List[str]) -> Tuple[List[str], List[int]]:
    """Trims answer fields, records the "#"-marked ones and strips the marker."""
    answers = []
    correct = []
    for index, field in enumerate(fields):
        field = field.strip()
        if "#" in field:
            correct.append(index)
        answers.append(field.replace("#", ""))
    return answers, correct


class ResponseParser:
    """
    Turns a model reply of the form

        $1. What is the capital of France?|Paris#|London|Berlin|Madrid

    into Question objects with shuffled answers. Lines that do not start with
    "$" or a digit are skipped. Never raises on malformed lines.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        # Anything with randint(a, b) will do
        self.rng = rng if rng is not None else random.Random()

    def parse(self, raw: str) -> List[Question]:
        questions = []
        for line in raw.split("\n"):
            if is_question_line(line):
                questions.append(self.parse_line(line))
        logger.debug("Parsed %d questions from %d characters", len(questions), len(raw))
        return questions

    def parse_line(self, line: str) -> Question:
        header, *fields = line.split("|")
        answers, correct = extract_answers(fields)
        self.shuffle(answers, correct)
        return Question(
            question=split_header(header),
            answers=answers,
            correctAnswerPositions=correct,
        )

    def shuffle(self, answers: List[str], correct: List[int]) -> None:
        """Fisher-Yates in place; correct positions follow their answers."""
        for i in range(len(answers) - 1, 0, -1):
            j = self.rng.randint(0, i)
            if i == j:
                continue
            answers[i], answers[j] = answers[j], answers[i]
            for k, position in enumerate(correct):
                if position == i:
                    correct[k] = j
                elif position == j:
                    correct[k] = i


def parse_questions(raw: str, rng: Optional[random.Random] = None) -> List[Question]:
    return ResponseParser(rng).parse(raw)

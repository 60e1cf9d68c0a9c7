from typing import List

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Language(BaseModel):
    name: str = Field(..., min_length=1, description='Display name, e.g. "English - en"')


class QuizForm(BaseModel):
    subject: str = Field(..., min_length=1, description="Topic of the quiz")
    amountOfQuestions: int = Field(..., gt=0, description="Number of questions to generate")
    language: Language

    @property
    def language_name(self) -> str:
        """Language name without the trailing code ("English - en" -> "English")."""
        return self.language.name.split(" - ")[0]


class Question(BaseModel):
    model_config = ConfigDict(frozen=True)

    question: str
    answers: List[str] = Field(default_factory=list)
    correctAnswerPositions: List[int] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_positions(self):
        for position in self.correctAnswerPositions:
            if not 0 <= position < len(self.answers):
                raise ValueError(f"correct answer position {position} out of range for {len(self.answers)} answers")
        return self

    @property
    def correct_answers(self) -> List[str]:
        return [self.answers[position] for position in self.correctAnswerPositions]


class ParsedResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    questions: List[Question]
    requestMessage: str
    responseMessage: str

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text, func
from database import Base

class QuizForm(Base):
    __tablename__ = "quiz_forms"

    id = Column(Integer, primary_key=True, index=True)
    subject = Column(String, nullable=False)
    amount_of_questions = Column(Integer, nullable=False)
    language = Column(String, nullable=False)
    created_at = Column(DateTime, server_default=func.now())

class QuizResult(Base):
    __tablename__ = "quiz_results"

    id = Column(Integer, primary_key=True, index=True)
    form_id = Column(Integer, ForeignKey("quiz_forms.id"), nullable=True)
    questions = Column(Text, nullable=False)
    request_message = Column(Text, nullable=False)
    response_message = Column(Text, nullable=False)
    created_at = Column(DateTime, server_default=func.now())

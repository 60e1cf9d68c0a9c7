from fastapi import FastAPI, HTTPException, Depends
from fastapi.middleware.cors import CORSMiddleware
import json, logging, random
from sqlalchemy.orm import Session
from database import Base, engine, get_db
from models import QuizForm as QuizFormRecord, QuizResult
from schemas import QuizForm, ParsedResult
from config import Settings, get_settings
from logging_config import setup_logging
from llm import LLMError, build_prompt, create_client, request_questions
from quiz_parser import ResponseParser
from report import write_pdf_report, write_text_report
from archive import ArchiveClient, ArchiveError

settings = get_settings()
setup_logging(level=settings.log_level, log_dir=settings.log_dir)
logger = logging.getLogger(__name__)

# ---------------- Database Setup ----------------
Base.metadata.create_all(bind=engine)

# ---------------- FastAPI Setup ----------------
app = FastAPI(title="Quiz Generator")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

if not settings.openai_api_key:
    logger.warning("OPENAI_API_KEY not found in environment!")

# ---------------- Dependencies ----------------
def get_llm_client(settings: Settings = Depends(get_settings)):
    if not settings.openai_api_key:
        yield None
        return
    client = create_client(settings.openai_api_key)
    try:
        yield client
    finally:
        client.close()

def get_archive_client(settings: Settings = Depends(get_settings)):
    archiver = ArchiveClient(settings.archive_url, timeout=settings.archive_timeout)
    try:
        yield archiver
    finally:
        archiver.close()

def get_rng():
    # One generator per request, nothing shared between handlers
    return random.Random()

# ---------------- Endpoints ----------------
@app.get("/")
def root(settings: Settings = Depends(get_settings)):
    return {"status": "Backend running", "api_key_set": bool(settings.openai_api_key)}

@app.post("/api/questions", response_model=ParsedResult)
def generate_questions(
    form: QuizForm,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    client=Depends(get_llm_client),
    archiver: ArchiveClient = Depends(get_archive_client),
    rng: random.Random = Depends(get_rng),
):
    # ---------------- Save form ----------------
    form_record = QuizFormRecord(
        subject=form.subject,
        amount_of_questions=form.amountOfQuestions,
        language=form.language.name,
    )
    db.add(form_record)
    db.commit()
    db.refresh(form_record)
    logger.info("Saved quiz form %s (%s, %d questions)", form_record.id, form.subject, form.amountOfQuestions)

    if client is None:
        raise HTTPException(500, "API not configured")

    # ---------------- Ask the model ----------------
    message = build_prompt(form.subject, form.amountOfQuestions, form.language_name)
    logger.info("Sending message:\n%s", message)

    try:
        reply = request_questions(client, message, model=settings.openai_model)
    except LLMError as e:
        logger.error("Question generation failed: %s", e)
        raise HTTPException(502, str(e))
    logger.debug("Raw reply:\n%s", reply)

    # ---------------- Parse ----------------
    questions = ResponseParser(rng).parse(reply)
    logger.info("Parsed %d questions", len(questions))
    result = ParsedResult(questions=questions, requestMessage=message, responseMessage=reply)

    # ---------------- Save result ----------------
    record = QuizResult(
        form_id=form_record.id,
        questions=json.dumps([q.model_dump() for q in result.questions]),
        request_message=result.requestMessage,
        response_message=result.responseMessage,
    )
    db.add(record)
    db.commit()
    db.refresh(record)
    logger.info("Saved quiz result %s", record.id)

    # ---------------- Reports ----------------
    try:
        write_text_report(result.questions, settings.output_dir)
        write_pdf_report(result.questions, settings.output_dir)
    except Exception:
        # not fatal either, same as the archive step
        logger.exception("Failed to write reports for quiz result %s", record.id)

    # ---------------- Archive ----------------
    try:
        archiver.send(result)
    except ArchiveError as e:
        # not fatal, the result is already persisted
        logger.error("%s", e)

    return result

# ---------------- History Endpoint ----------------
def _result_to_dict(r: QuizResult):
    return {
        "id": r.id,
        "form_id": r.form_id,
        "created_at": str(r.created_at),
        "questions": json.loads(r.questions),
        "requestMessage": r.request_message,
        "responseMessage": r.response_message,
    }

@app.get("/history")
def get_history(db: Session = Depends(get_db)):
    records = db.query(QuizResult).order_by(QuizResult.id.desc()).all()
    return [_result_to_dict(r) for r in records]

@app.get("/quiz/{result_id}")
def get_quiz_detail(result_id: int, db: Session = Depends(get_db)):
    record = db.query(QuizResult).filter(QuizResult.id == result_id).first()
    if not record:
        raise HTTPException(404, "Quiz not found")
    return _result_to_dict(record)

import logging

from openai import OpenAI, OpenAIError

logger = logging.getLogger(__name__)


class LLMError(Exception):
    """The language model could not produce a reply."""


def build_prompt(subject, amount_of_questions, language_name):
    return f"""I want to make a quiz about {subject}.
I want {amount_of_questions} questions, with 4 answers per question.
The questions should be in {language_name}.
Please give me 1 correct answer for each question.
The question can not be longer than 120 characters, and the answers can not be longer than 75 characters.
Format: Question|Answer1|Answer2|Answer3|Answer4
A # mark indicates the correct answer.
Each question and its answers should be on a single line.
Before each question, please write the question number with a $ sign in front.
Example response:
"$1. What is the capital of France?|Paris#|London|Berlin|Madrid
$2. How many letters are in the english alphabet?|30|24|28|26#\""""


def create_client(api_key):
    return OpenAI(api_key=api_key)


def request_questions(client, message, model="gpt-3.5-turbo"):
    """Sends the prompt as a single user message and returns the reply text."""
    try:
        completion = client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": message}],
        )
    except OpenAIError as e:
        raise LLMError(f"Language model request failed: {e}") from e

    if not completion.choices or not completion.choices[0].message.content:
        raise LLMError("Language model returned an empty reply")

    result = completion.choices[0].message.content
    logger.info("Got response from %s (%d characters)", model, len(result))
    return result

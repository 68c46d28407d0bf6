"""
Study material prompt templates.

Defines the quiz, flashcard and document chat prompts used by the analysis
endpoint, and the tutor prompt for free conversation. Document content is always passed as a template variable, so
braces inside extracted text never break formatting.

Dependencies: langchain_core.prompts
System role: Prompt templates for study material generation
"""

from collections.abc import Sequence

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage
from langchain_core.prompts import ChatPromptTemplate, MessagesPlaceholder

from backend.boundary.db.models.analysis_result_model import AnalysisAction
from backend.core.exceptions import ValidationError

QUIZ_SYSTEM_PROMPT = """You are an experienced educational assessment writer. Read the document content you are given and write a quiz that checks real understanding of it.

## Analysis
1. Identify the key concepts, theories, formulas and facts
2. Work out how the ideas relate to one another
3. Judge how demanding the material is
4. Pick out details that show comprehension

## Question guidelines
- Test understanding rather than recall
- Include questions that apply concepts to new situations
- Mix difficulty: roughly 30% easy, 50% medium, 20% hard
- Every question must be answerable from the document
- Use plausible distractors for multiple choice questions

## Response format

**COMPREHENSIVE QUIZ: {file_name}**

**DOCUMENT ANALYSIS:**
- Main topics covered: [3-5 key topics]
- Difficulty level: [Beginner/Intermediate/Advanced]
- Key concepts: [important concepts]

**MULTIPLE CHOICE QUESTIONS:** 6-8 questions, each with options a) to d),
then **Answer:**, **Explanation:** referring to the document, and **Difficulty:**

**TRUE/FALSE QUESTIONS:** 4-5 statements, each with **Answer:**,
**Explanation:** and **Difficulty:**

**SHORT ANSWER QUESTIONS:** 3-4 questions, each with **Sample Answer:**,
**Key Points:** and **Difficulty:**

**ESSAY QUESTION:** one question that combines several concepts, with
**Sample Answer:**, **Grading Criteria:** and **Difficulty: Hard**"""

QUIZ_USER_PROMPT = """Analyze this content from "{file_name}" and write a quiz that tests deep understanding of the material: its main concepts, how they relate, and how they are applied.

DOCUMENT CONTENT:
{content}

Base every question on the content above so it can be answered from the document alone."""

FLASHCARDS_SYSTEM_PROMPT = """You are an educational content writer. Create flashcards from the document content you are given.

Use this format:

**FLASHCARDS: {file_name}**

**Card 1:**
FRONT: A short question or term
BACK: A complete answer or definition

**Card 2:**
FRONT: Another question or concept
BACK: A detailed explanation

Cover definitions, formulas, important facts and the relationships between concepts. Write at least 10 flashcards on the most important topics."""

FLASHCARDS_USER_PROMPT = """Create study flashcards from this content of "{file_name}":

{content}"""

CHAT_SYSTEM_PROMPT = """You are an AI tutor who helps students understand academic documents. You have the content of "{file_name}" and answer questions about it.

Answer accurately from the document content. When a question goes beyond what the document covers, say so and offer help with what it does cover.

Quote the relevant parts of the document where useful and keep explanations clear and educational."""

CHAT_QUESTION_PROMPT = """Based on the document "{file_name}", answer this question: {query}

Relevant document content:
{content}"""

CHAT_OVERVIEW_PROMPT = """Analyze the document "{file_name}" and give educational insights about it:

{content}"""

TUTOR_SYSTEM_PROMPT = """You are an AI tutor helping students with their academic questions.

You should:
- Give step-by-step explanations
- Use clear, educational language
- Offer examples when they help
- Encourage learning and understanding over handing out answers
- Ask follow-up questions to check comprehension
- Cite the concept, theorem or source you rely on when referencing specific ideas"""

TUTOR_PROMPT = ChatPromptTemplate.from_messages([
    ("system", TUTOR_SYSTEM_PROMPT),
    MessagesPlaceholder("history"),
])

TUTOR_ROLES = {"user": HumanMessage, "assistant": AIMessage}

PROMPTS: dict[AnalysisAction, ChatPromptTemplate] = {
    AnalysisAction.QUIZ: ChatPromptTemplate.from_messages([
        ("system", QUIZ_SYSTEM_PROMPT),
        ("human", QUIZ_USER_PROMPT),
    ]),
    AnalysisAction.FLASHCARDS: ChatPromptTemplate.from_messages([
        ("system", FLASHCARDS_SYSTEM_PROMPT),
        ("human", FLASHCARDS_USER_PROMPT),
    ]),
}

CHAT_PROMPTS = {
    True: ChatPromptTemplate.from_messages([
        ("system", CHAT_SYSTEM_PROMPT),
        ("human", CHAT_QUESTION_PROMPT),
    ]),
    False: ChatPromptTemplate.from_messages([
        ("system", CHAT_SYSTEM_PROMPT),
        ("human", CHAT_OVERVIEW_PROMPT),
    ]),
}


def parse_action(action: str | AnalysisAction) -> AnalysisAction:
    """
    Resolve an action name.

    Raises:
        ValidationError: Unknown action
    """
    try:
        return AnalysisAction(action)
    except ValueError:
        raise ValidationError(
            "Valid action type (quiz, flashcards, chat) is required",
            field="action",
            details={"action": str(action)},
        )


def build_prompts(
    action: str | AnalysisAction,
    file_name: str,
    content: str,
    query: str | None = None,
) -> list[BaseMessage]:
    """
    Render the system and user messages for an analysis action.

    Args:
        action: quiz, flashcards or chat
        file_name: Display name of the document
        content: Retrieved context or full extracted text
        query: Student question (chat only); without it chat gives an overview

    Returns:
        list[BaseMessage]: System message followed by the user message

    Raises:
        ValidationError: Unknown action
    """
    resolved = parse_action(action)
    if resolved is AnalysisAction.CHAT:
        has_query = bool(query and query.strip())
        template = CHAT_PROMPTS[has_query]
    else:
        template = PROMPTS[resolved]

    values = {"file_name": file_name, "content": content, "query": query or ""}
    return template.format_messages(
        **{key: value for key, value in values.items() if key in template.input_variables}
    )


def build_tutor_messages(history: Sequence[tuple[str, str]]) -> list[BaseMessage]:
    """
    Render the tutor system prompt followed by the conversation so far.

    Turn content is wrapped in messages before it reaches the template, so
    student text is never treated as a format string.

    Args:
        history: (role, content) pairs in conversation order; role is
            "user" or "assistant"

    Returns:
        list[BaseMessage]: System message followed by one message per turn

    Raises:
        ValidationError: Empty history or unknown role
    """
    if not history:
        raise ValidationError("At least one message is required", field="messages")

    turns = []
    for role, content in history:
        message_class = TUTOR_ROLES.get(role)
        if message_class is None:
            raise ValidationError(
                f"Unknown message role: {role}",
                field="messages",
                details={"roles": sorted(TUTOR_ROLES)},
            )
        turns.append(message_class(content=content))
    return TUTOR_PROMPT.format_messages(history=turns)

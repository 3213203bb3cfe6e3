"""
Prompt templates for answer generation, translation and content creation.

Subject personas are picked by keyword when retrieval found nothing
relevant; otherwise the grounded tutor prompt carries the retrieved
context verbatim.

Dependencies: langchain_core.prompts
System role: Prompt templates for every generative call
"""

from langchain_core.prompts import ChatPromptTemplate

GROUNDED_SYSTEM_PROMPT = (
    "You are an expert educational tutor. Use this context to provide accurate, "
    "detailed educational answers. Explain concepts clearly and provide examples "
    "when helpful.\n\nContext: {context}"
)

SUBJECT_PERSONAS: list[tuple[tuple[str, ...], str]] = [
    (
        ("photosynthesis", "plant", "biology"),
        "You are an expert biology tutor. The student is asking about biological concepts. "
        "Provide a comprehensive, educational answer with clear explanations and examples.",
    ),
    (
        ("chemistry", "chemical", "molecule"),
        "You are an expert chemistry tutor. The student is asking about chemical concepts. "
        "Provide a detailed, educational explanation with examples and applications.",
    ),
    (
        ("physics", "force", "energy"),
        "You are an expert physics tutor. The student is asking about physics concepts. "
        "Provide clear explanations with examples and real-world applications.",
    ),
    (
        ("math", "calculus", "algebra"),
        "You are an expert mathematics tutor. The student is asking about mathematical concepts. "
        "Provide step-by-step explanations with examples.",
    ),
    (
        ("history", "war", "historical"),
        "You are an expert history tutor. The student is asking about historical events or "
        "concepts. Provide comprehensive context and analysis.",
    ),
]

DEFAULT_PERSONA = (
    "You are a knowledgeable educational tutor. The student is asking about a topic not in "
    "your specialized knowledge base. Provide the best educational answer you can with clear "
    "explanations and encourage further learning."
)

LANGUAGE_INSTRUCTION = (
    "\n\nAnswer the question in {language_name}. "
    "Keep your response in {language_name} throughout."
)

DOCUMENT_SYSTEM_PROMPT = (
    "You are an expert tutor helping students understand the document '{document_title}'. \n"
    "Use the following context from the document to answer the question accurately and clearly.\n\n"
    "Context from document:\n{context}\n\n"
    "Answer the question based on this context. If the context doesn't contain enough "
    "information, say so."
)

CONTENT_GENERATION_PROMPT = ChatPromptTemplate.from_messages([
    (
        "system",
        "You are an expert educator. Provide concise, accurate educational content for "
        "students. Focus on key concepts, definitions, and practical applications.",
    ),
    (
        "human",
        "Explain {topic} in {subject} in 2-3 paragraphs suitable for students. Include key "
        "concepts, important details, and why it matters. Make it educational and engaging.",
    ),
])

LANGUAGE_DETECTION_PROMPT = ChatPromptTemplate.from_messages([
    (
        "human",
        "Detect the language of this text and respond with just the ISO 639-1 language code "
        "(e.g., 'en', 'es', 'fr', 'hi', 'de'): \"{text}\"",
    ),
])

TRANSLATION_PROMPT = ChatPromptTemplate.from_messages([
    (
        "human",
        "Translate this text from {source_language} to {target_language}. Provide only the "
        "translation without any additional text:\n\n{text}",
    ),
])


def select_persona(question: str) -> str:
    """Pick the subject persona whose keywords appear in the question."""
    lowered = question.lower()
    for keywords, persona in SUBJECT_PERSONAS:
        if any(keyword in lowered for keyword in keywords):
            return persona
    return DEFAULT_PERSONA


def _with_question(system_template: str) -> ChatPromptTemplate:
    return ChatPromptTemplate.from_messages([
        ("system", system_template),
        ("human", "{question}"),
    ])


def get_answer_prompt(grounded: bool, translate_to: str | None = None) -> ChatPromptTemplate:
    """
    Build the answer prompt.

    Args:
        grounded: Use the context-carrying tutor prompt; otherwise the
            persona is passed in as the {persona} variable
        translate_to: Language name the answer must be written in

    Returns:
        ChatPromptTemplate expecting question, plus context or persona
        (and language_name when translate_to is set)
    """
    system = GROUNDED_SYSTEM_PROMPT if grounded else "{persona}"
    if translate_to:
        system += LANGUAGE_INSTRUCTION
    return _with_question(system)


def get_document_prompt() -> ChatPromptTemplate:
    """Prompt for questions scoped to one uploaded document."""
    return _with_question(DOCUMENT_SYSTEM_PROMPT)

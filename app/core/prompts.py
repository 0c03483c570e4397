"""
Centralized configuration for LLM Prompts.

This module contains all system instructions and prompt templates used across the application.
Prompts are grouped by domain (Service) for better discoverability and context.
"""


class SummarizationPrompts:
    """Prompts for the Article Summarization Service.

    The system instruction itself comes from the base language profile.
    """

    # Appended to the system instruction when the summary will be translated afterwards
    TRANSLATE_LATER = "Generate the summary in English first, it will be translated afterward."

    USER = """{length_instruction}

Please summarize this news article:

{article}"""


class TranslationPrompts:
    """Prompts for the Summary Translation Service."""

    SYSTEM = (
        "You are a professional translator. Provide accurate translations while "
        "maintaining the original format and style."
    )

    USER = """{translation_instruction}

{summary}"""

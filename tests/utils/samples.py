"""
Canned article text and model outputs shared across tests.
"""
from app.core.providers.llm_provider import LLMResponse


SAMPLE_ARTICLE = (
    "The city council approved a new transit plan on Tuesday. "
    "The plan adds three bus lines and extends light rail service to the airport. "
    "Officials expect construction to begin next spring."
)

BASE_SUMMARY = "- Council approved a transit plan\n- Three new bus lines\n- Rail extended to airport"
TRANSLATED_SUMMARY = "- Stadtrat billigt Verkehrsplan\n- Drei neue Buslinien\n- Bahn bis zum Flughafen"


def make_response(content: str) -> LLMResponse:
    return LLMResponse(content=content, model="test-model")

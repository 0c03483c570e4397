"""
Static language and summary-length registries.

Both registries are immutable process-wide lookup tables. Unknown keys are a
validation failure; there is no fallback to a default profile.
"""
from types import MappingProxyType
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict

from app.core.exceptions import ValidationError


BASE_LANGUAGE = "english"
DEFAULT_LENGTH = "medium"


class LanguageProfile(BaseModel):
    """Steering text for one output language."""

    key: str
    name: str
    code: str
    summarizer_instruction: str
    translation_instruction: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_base(self) -> bool:
        return self.translation_instruction is None


class LengthProfile(BaseModel):
    """Bullet-count directive and output ceiling for one length tier."""

    key: str
    instruction: str
    max_tokens: int

    model_config = ConfigDict(frozen=True)


def _translate_to(target: str, extra: str = "") -> str:
    return (
        f"Translate the following text to {target}, maintaining the bullet point format "
        f"and ensuring the translation is natural and fluent{extra}:"
    )


_LANGUAGES = [
    LanguageProfile(
        key="english",
        name="English",
        code="en",
        summarizer_instruction=(
            "You are a professional news summarizer. Create concise, accurate summaries "
            "that capture the main points while maintaining context and key details. "
            "Format the summary in a clear, readable way with bullet points for key takeaways."
        ),
    ),
    LanguageProfile(
        key="bosnian",
        name="Bosnian/Serbian/Croatian",
        code="bs",
        summarizer_instruction=(
            "Vi ste profesionalni rezimator vijesti. Kreirajte sažete, precizne sažetke koji "
            "obuhvataju glavne tačke uz očuvanje konteksta i ključnih detalja. Formatirajte "
            "sažetak na jasan, čitljiv način sa tačkama za ključne zaključke."
        ),
        translation_instruction=_translate_to("Bosnian/Serbian/Croatian (BSC)"),
    ),
    LanguageProfile(
        key="german",
        name="German",
        code="de",
        summarizer_instruction=(
            "Sie sind ein professioneller Nachrichtenzusammenfasser. Erstellen Sie prägnante, "
            "genaue Zusammenfassungen, die die Hauptpunkte erfassen und dabei Kontext und "
            "wichtige Details beibehalten. Formatieren Sie die Zusammenfassung übersichtlich "
            "mit Aufzählungspunkten für die wichtigsten Erkenntnisse."
        ),
        translation_instruction=_translate_to("German"),
    ),
    LanguageProfile(
        key="french",
        name="French",
        code="fr",
        summarizer_instruction=(
            "Vous êtes un résumeur professionnel d'actualités. Créez des résumés concis et "
            "précis qui capturent les points principaux tout en maintenant le contexte et les "
            "détails clés. Formatez le résumé de manière claire et lisible avec des puces pour "
            "les points essentiels."
        ),
        translation_instruction=_translate_to("French"),
    ),
    LanguageProfile(
        key="spanish",
        name="Spanish",
        code="es",
        summarizer_instruction=(
            "Eres un resumidor profesional de noticias. Crea resúmenes concisos y precisos que "
            "capturen los puntos principales mientras mantienes el contexto y los detalles "
            "clave. Formatea el resumen de manera clara y legible con viñetas para los puntos clave."
        ),
        translation_instruction=_translate_to("Spanish"),
    ),
    LanguageProfile(
        key="italian",
        name="Italian",
        code="it",
        summarizer_instruction=(
            "Sei un riassuntore professionale di notizie. Crea riassunti concisi e accurati che "
            "catturino i punti principali mantenendo il contesto e i dettagli chiave. Formatta "
            "il riassunto in modo chiaro e leggibile con punti elenco per i punti chiave."
        ),
        translation_instruction=_translate_to("Italian"),
    ),
    LanguageProfile(
        key="turkish",
        name="Turkish",
        code="tr",
        summarizer_instruction=(
            "Profesyonel bir haber özetleyicisisiniz. Bağlamı ve önemli detayları korurken ana "
            "noktaları yakalayan özlü, doğru özetler oluşturun. Özeti, önemli noktalar için "
            "madde işaretleriyle net ve okunabilir bir şekilde biçimlendirin."
        ),
        translation_instruction=_translate_to("Turkish"),
    ),
    LanguageProfile(
        key="chinese",
        name="Chinese (Simplified)",
        code="zh",
        summarizer_instruction=(
            "您是一位专业的新闻摘要员。创建简洁、准确的摘要，在保持上下文和关键细节的同时捕捉要点。"
            "使用项目符号清晰、易读地格式化摘要以突出关键要点。"
        ),
        translation_instruction=_translate_to("Chinese (Simplified)"),
    ),
    LanguageProfile(
        key="russian",
        name="Russian",
        code="ru",
        summarizer_instruction=(
            "Вы профессиональный составитель новостных сводок. Создавайте краткие, точные "
            "сводки, которые отражают основные моменты, сохраняя контекст и ключевые детали. "
            "Форматируйте сводку четко и разборчиво, используя маркированные пункты для "
            "ключевых моментов."
        ),
        translation_instruction=_translate_to("Russian"),
    ),
    LanguageProfile(
        key="arabic",
        name="Arabic",
        code="ar",
        summarizer_instruction=(
            "أنت ملخص أخبار محترف. قم بإنشاء ملخصات موجزة ودقيقة تلتقط النقاط الرئيسية مع الحفاظ "
            "على السياق والتفاصيل الأساسية. قم بتنسيق الملخص بطريقة واضحة وسهلة القراءة مع نقاط "
            "رئيسية للنقاط الأساسية."
        ),
        translation_instruction=_translate_to(
            "Arabic", ". Ensure proper right-to-left formatting"
        ),
    ),
]

_LENGTHS = [
    LengthProfile(
        key="short",
        instruction=(
            "Create a very brief summary in 2-3 bullet points, focusing only on the most "
            "crucial information."
        ),
        max_tokens=200,
    ),
    LengthProfile(
        key="medium",
        instruction=(
            "Provide a balanced summary with 4-5 bullet points, covering the main points and "
            "key supporting details."
        ),
        max_tokens=350,
    ),
    LengthProfile(
        key="detailed",
        instruction=(
            "Create a comprehensive summary with 6-8 bullet points, including main points, "
            "supporting details, and relevant context."
        ),
        max_tokens=500,
    ),
]

LANGUAGES: Mapping[str, LanguageProfile] = MappingProxyType({p.key: p for p in _LANGUAGES})
LENGTHS: Mapping[str, LengthProfile] = MappingProxyType({p.key: p for p in _LENGTHS})


def get_language_profile(key: Any) -> LanguageProfile:
    """Resolve a language key, raising ValidationError when unknown."""
    profile = LANGUAGES.get(key) if isinstance(key, str) else None
    if profile is None:
        raise ValidationError("Invalid language selected")
    return profile


def get_length_profile(key: Any) -> LengthProfile:
    """Resolve a length tier key, raising ValidationError when unknown."""
    profile = LENGTHS.get(key) if isinstance(key, str) else None
    if profile is None:
        raise ValidationError("Invalid summary length selected")
    return profile

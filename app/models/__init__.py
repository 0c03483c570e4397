from .api import SummarizeRequest, SummarizeResponse, MessageResponse, LanguageOption, LengthOption
from .article import ExtractedArticle
from .enums import LLMRole, LLMProviderType, PipelineStage

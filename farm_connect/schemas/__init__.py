from .models import (
    ChatMessageRequest,
    ConversationMessage,
    CropSuggestion,
    CurrentWeather,
    DailyForecast,
    DiagnosisResult,
    FertilizerApplication,
    FertilizerPlan,
    FieldInfo,
    FinancialNeed,
    ImageInput,
    MarketPrice,
    MediatorSnapshot,
    PanelError,
    PanelInfo,
    PanelSubmission,
    Scheme,
    SchemeLink,
    SessionView,
    WeatherData,
)

__all__ = [
    "ChatMessageRequest",
    "ConversationMessage",
    "CropSuggestion",
    "CurrentWeather",
    "DailyForecast",
    "DiagnosisResult",
    "FertilizerApplication",
    "FertilizerPlan",
    "FieldInfo",
    "FinancialNeed",
    "ImageInput",
    "MarketPrice",
    "MediatorSnapshot",
    "PanelError",
    "PanelInfo",
    "PanelSubmission",
    "Scheme",
    "SchemeLink",
    "SessionView",
    "WeatherData",
]

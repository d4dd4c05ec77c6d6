from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base for payloads exchanged with the model and the browser (camelCase on the wire)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ReferenceModel(WireModel):
    """Immutable record bundled with the application."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )


class ImageInput(BaseModel):
    """User-supplied image, base64-encoded for transport."""

    mime_type: str = "image/jpeg"
    data: str

    @property
    def data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"


# ---- structured panel results ----


class DiagnosisResult(WireModel):
    is_healthy: bool = Field(..., description="Is the plant in the image healthy?")
    disease_name: str = Field(
        ...,
        description="The common name of the disease. If healthy, this should be 'Healthy'.",
    )
    description: str = Field(
        ..., description="A detailed description of the disease, its symptoms, and causes."
    )
    treatment: List[str] = Field(
        default_factory=list,
        description="A list of actionable treatment steps or recommendations.",
    )


class FertilizerApplication(WireModel):
    stage: str = Field(
        ...,
        description="The crop growth stage for this application (e.g., Basal Dose, Tillering Stage, Flowering Stage).",
    )
    fertilizer: str = Field(
        ..., description="The name of the fertilizer to apply (e.g., Urea, DAP, MOP)."
    )
    amount: str = Field(
        ...,
        description="The recommended amount of fertilizer to apply, including units (e.g., '50 kg/acre').",
    )


class FertilizerPlan(WireModel):
    npk_ratio: str = Field(
        ...,
        description="The recommended N:P:K ratio for the crop at its current stage based on soil data.",
    )
    recommendations: List[FertilizerApplication] = Field(
        default_factory=list,
        description="A list of fertilizer application recommendations.",
    )
    notes: List[str] = Field(
        default_factory=list,
        description="Additional important notes or advice, such as application methods or precautions.",
    )
    organic_alternatives: List[str] = Field(
        default_factory=list,
        description="A list of organic alternatives to chemical fertilizers (e.g., 'Compost', 'Vermi-compost', 'Neem Cake').",
    )


class CropSuggestion(WireModel):
    crop_name: str = Field(..., description="The name of the recommended crop.")
    reasoning: str = Field(
        ...,
        description="A detailed explanation of why this crop is suitable, considering soil, climate, and market factors.",
    )
    estimated_profitability: str = Field(
        ...,
        description="An estimation of the crop's market profitability (e.g., 'High', 'Medium', 'Low').",
    )
    suitable_regions: List[str] = Field(
        default_factory=list,
        description="Specific regions or districts in the provided state/location where this crop grows best.",
    )


# ---- reference data ----


class SchemeLink(ReferenceModel):
    url: str
    text: str


class Scheme(ReferenceModel):
    name: str
    benefit: str
    eligibility: str
    apply_process: List[str] = Field(default_factory=list)
    link: Optional[SchemeLink] = None


class MarketPrice(ReferenceModel):
    crop: str
    variety: str
    market: str
    price: float = Field(..., description="Modal price in INR per quintal.")
    change: float = Field(..., description="Day-over-day change in percent.")


class CurrentWeather(ReferenceModel):
    temp: float
    condition: str
    wind_speed: float
    humidity: float


class DailyForecast(ReferenceModel):
    day: str
    temp_max: float
    temp_min: float
    condition: str


class WeatherData(ReferenceModel):
    location: str
    current: CurrentWeather
    forecast: List[DailyForecast] = Field(default_factory=list)


class FinancialNeed(ReferenceModel):
    title: str
    description: str


# ---- mediator state ----


ErrorKind = Literal["validation", "remote", "invalid_response", "unavailable"]
MediatorStatusName = Literal["idle", "pending", "resolved", "failed", "unavailable"]


class PanelError(BaseModel):
    """User-facing error with a machine-readable kind."""

    kind: ErrorKind
    message: str


class MediatorSnapshot(BaseModel):
    panel: str
    status: MediatorStatusName
    result: Optional[Any] = None
    error: Optional[PanelError] = None


class ConversationMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Literal["user", "assistant"]
    text: str


SessionStatusName = Literal["ready", "pending", "unavailable"]


class SessionView(BaseModel):
    session_id: str
    assistant: str
    status: SessionStatusName
    messages: List[ConversationMessage] = Field(default_factory=list)


# ---- HTTP payloads ----


class PanelSubmission(BaseModel):
    """Form values posted by a panel."""

    fields: Dict[str, Any] = Field(default_factory=dict)


class FieldInfo(BaseModel):
    name: str
    label: str
    required: bool
    numeric: bool = False


class PanelInfo(BaseModel):
    name: str
    title: str
    fields: List[FieldInfo]
    structured: bool


class ChatMessageRequest(BaseModel):
    message: str

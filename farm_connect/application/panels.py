"""Panel declarations: form fields, prompt construction and result shape."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from ..data.weather import mock_weather
from ..domain.fields import FieldSpec
from ..mediators.request import PanelSpec, Prompt
from ..prompts import panels as prompts
from ..schemas.models import (
    CropSuggestion,
    DiagnosisResult,
    FertilizerPlan,
    FieldInfo,
    PanelInfo,
)
from .images import coerce_image


CROP_DOCTOR = "crop_doctor"
WEATHER_ADVISORY = "weather_advisory"
FINANCIAL_ADVICE = "financial_advice"
FERTILIZER = "fertilizer"
PRICE_FORECAST = "price_forecast"
CROP_RECOMMENDATION = "crop_recommendation"


def _crop_doctor_prompt(fields: Mapping[str, Any]) -> Prompt:
    return Prompt(
        text=prompts.build_diagnosis_prompt(),
        images=(coerce_image(fields["image"]),),
    )


def _weather_advisory_prompt(fields: Mapping[str, Any]) -> Prompt:
    weather = mock_weather(fields["location"])
    return Prompt(text=prompts.build_weather_advisory_prompt(weather, fields["crop"]))


def _financial_advice_prompt(fields: Mapping[str, Any]) -> Prompt:
    return Prompt(
        text=prompts.build_financial_advice_prompt(
            fields["crop"],
            fields["land_size"],
            fields["financial_need"],
            fields.get("details") or "",
        )
    )


def _fertilizer_prompt(fields: Mapping[str, Any]) -> Prompt:
    return Prompt(
        text=prompts.build_fertilizer_prompt(
            fields["crop"],
            fields["nitrogen"],
            fields["phosphorus"],
            fields["potassium"],
        )
    )


def _price_forecast_prompt(fields: Mapping[str, Any]) -> Prompt:
    return Prompt(text=prompts.build_price_forecast_prompt(fields["crop"]))


def _crop_recommendation_prompt(fields: Mapping[str, Any]) -> Prompt:
    return Prompt(
        text=prompts.build_crop_recommendation_prompt(
            fields["location"], fields["soil_type"], fields["annual_rainfall"]
        )
    )


_PANELS = (
    PanelSpec(
        name=CROP_DOCTOR,
        title="Crop Doctor AI",
        fields=(FieldSpec("image", "Plant image"),),
        build_prompt=_crop_doctor_prompt,
        result_type=DiagnosisResult,
        temperature=0.2,
        failure_message=(
            "Failed to get a diagnosis from the AI. The image might be unclear "
            "or the content could not be processed."
        ),
        missing_message="Please provide an image of the plant to diagnose.",
    ),
    PanelSpec(
        name=WEATHER_ADVISORY,
        title="Weather Alerts & AI Advisory",
        fields=(
            FieldSpec("location", "Location"),
            FieldSpec("crop", "Crop"),
        ),
        build_prompt=_weather_advisory_prompt,
        failure_message="Failed to get a weather advisory from the AI.",
    ),
    PanelSpec(
        name=FINANCIAL_ADVICE,
        title="Financial Needs for Farmers",
        fields=(
            FieldSpec("crop", "Crop"),
            FieldSpec("land_size", "Land Size (acres)", numeric=True),
            FieldSpec("financial_need", "Primary Financial Need"),
            FieldSpec("details", "Additional Details", required=False),
        ),
        build_prompt=_financial_advice_prompt,
        temperature=0.3,
        failure_message="Failed to get a financial plan from the AI.",
        missing_message=(
            "Please fill in all required fields: Crop, Land Size, and Financial Need."
        ),
    ),
    PanelSpec(
        name=FERTILIZER,
        title="Fertilizer Optimizer AI",
        fields=(
            FieldSpec("crop", "Crop"),
            FieldSpec("nitrogen", "Nitrogen (N)", numeric=True),
            FieldSpec("phosphorus", "Phosphorus (P)", numeric=True),
            FieldSpec("potassium", "Potassium (K)", numeric=True),
        ),
        build_prompt=_fertilizer_prompt,
        result_type=FertilizerPlan,
        temperature=0.2,
        failure_message=(
            "Failed to get a fertilizer recommendation from the AI. "
            "Please check the input values."
        ),
    ),
    PanelSpec(
        name=PRICE_FORECAST,
        title="Market Access & Price Trends",
        fields=(FieldSpec("crop", "Crop"),),
        build_prompt=_price_forecast_prompt,
        temperature=0.4,
        failure_message="Failed to get a price forecast from the AI.",
    ),
    PanelSpec(
        name=CROP_RECOMMENDATION,
        title="AI Crop Recommendation",
        fields=(
            FieldSpec("location", "Location (State/District)"),
            FieldSpec("soil_type", "Soil Type"),
            FieldSpec("annual_rainfall", "Average Annual Rainfall (mm)", numeric=True),
        ),
        build_prompt=_crop_recommendation_prompt,
        result_type=List[CropSuggestion],
        temperature=0.3,
        failure_message=(
            "Failed to get a crop recommendation from the AI. "
            "Please check the input values."
        ),
    ),
)
_PANEL_INDEX: Dict[str, PanelSpec] = {spec.name: spec for spec in _PANELS}


def list_panel_specs() -> List[PanelSpec]:
    return list(_PANELS)


def get_panel_spec(name: str) -> Optional[PanelSpec]:
    return _PANEL_INDEX.get(name)


def describe_panel(spec: PanelSpec) -> PanelInfo:
    return PanelInfo(
        name=spec.name,
        title=spec.title,
        structured=spec.structured,
        fields=[
            FieldInfo(
                name=field.name,
                label=field.label,
                required=field.required,
                numeric=field.numeric,
            )
            for field in spec.fields
        ],
    )

from __future__ import annotations

from ..schemas.models import WeatherData


DIAGNOSIS_PROMPT = """Analyze this image of a plant leaf.
1. Identify if the plant is healthy or has a disease.
2. If diseased, identify the specific disease.
3. Provide a detailed description of the disease.
4. Suggest a list of actionable treatment methods.
5. If the image is not a plant or the quality is too poor, indicate that in the description.
Return the result in the specified JSON format. For healthy plants, diseaseName should be 'Healthy' and treatment can be an empty array or suggest preventive care."""


def _format_number(value: float) -> str:
    return f"{value:g}"


def build_diagnosis_prompt() -> str:
    return DIAGNOSIS_PROMPT


def build_weather_advisory_prompt(weather: WeatherData, crop: str) -> str:
    forecast_lines = "\n".join(
        f"  - {day.day}: {_format_number(day.temp_min)}°C - "
        f"{_format_number(day.temp_max)}°C, {day.condition}"
        for day in weather.forecast
    )
    return (
        "You are an expert agricultural advisor. Based on the following weather data "
        f"for {weather.location}, provide a concise, actionable farming advisory for "
        f"{crop} crops. Focus on irrigation, potential pest/disease risks, and any "
        f"necessary crop protection measures for the next {len(weather.forecast)} days.\n\n"
        "Weather Data:\n"
        f"- Current Temperature: {_format_number(weather.current.temp)}°C\n"
        f"- Current Condition: {weather.current.condition}\n"
        f"- Humidity: {_format_number(weather.current.humidity)}%\n"
        f"- Wind Speed: {_format_number(weather.current.wind_speed)} km/h\n"
        f"- {len(weather.forecast)}-Day Forecast:\n"
        f"{forecast_lines}\n\n"
        "Provide the advisory in a clear, easy-to-read format."
    )


def build_financial_advice_prompt(
    crop: str, land_size: float, financial_need: str, details: str = ""
) -> str:
    return f"""You are an expert financial advisor for Indian farmers, named "Farm Connect AI Advisor".

A farmer has provided the following details:
- Crop: {crop}
- Land Size: {_format_number(land_size)} acres
- Primary Financial Need: {financial_need}
- Additional Details: {details or 'None'}

Based on this information, provide a personalized financial plan. Your plan should include:
1.  **Recommended Government Schemes:** Suggest 2-3 specific central or state-level schemes that are most relevant. For each scheme, briefly explain the benefit and why it fits the farmer's needs. Use schemes like PM-KISAN, PMFBY, KCC, PM-KUSUM, etc.
2.  **Suitable Loan Products:** Recommend the type of loan they should consider (e.g., Kisan Credit Card for working capital, term loan for equipment). Explain why.
3.  **Actionable Steps:** Provide a clear, step-by-step list of what the farmer should do next (e.g., '1. Visit your nearest bank branch...', '2. Prepare documents like Aadhaar and land records...').
4.  **Risk Management Advice:** Briefly mention the importance of crop insurance (like PMFBY) if applicable.

Format your response in clear, simple language that is easy for a farmer to understand. Use headings and bullet points."""


def build_fertilizer_prompt(
    crop: str, nitrogen: float, phosphorus: float, potassium: float
) -> str:
    return f"""You are an expert agronomist AI. A farmer needs a fertilizer recommendation.

Crop: {crop}
Soil Test Results:
- Nitrogen (N): {_format_number(nitrogen)} kg/ha
- Phosphorus (P): {_format_number(phosphorus)} kg/ha
- Potassium (K): {_format_number(potassium)} kg/ha

Provide a detailed fertilizer plan tailored to these conditions. The plan should include:
1.  A recommended N:P:K ratio.
2.  Specific fertilizer recommendations (like Urea, DAP, MOP) with amounts per acre.
3.  Application divided by crop stages (e.g., Basal, Tillering, Flowering).
4.  Important notes about application techniques.
5.  Suggestions for organic alternatives.

Return the result in the specified JSON format."""


def build_price_forecast_prompt(crop: str) -> str:
    return f"""You are an expert agricultural market analyst. Provide a short-term (2-4 weeks) market price trend forecast for {crop} in India.

Your analysis should consider the following factors:
- Current supply and demand dynamics.
- Recent weather patterns affecting the crop.
- Government policies or announcements (e.g., MSP, import/export duties).
- Festive season demand, if applicable.

Provide a concise summary with a clear trend prediction (e.g., "Prices are expected to rise slightly," "Prices likely to remain stable," "A downward correction is anticipated"). Conclude with one or two key reasons for your forecast.

Format the response in a clear, easy-to-read paragraph."""


def build_crop_recommendation_prompt(
    location: str, soil_type: str, annual_rainfall: float
) -> str:
    return f"""You are an expert agricultural scientist specializing in Indian farming conditions. A farmer needs a crop recommendation based on the following data:
- Location (State/District): {location}
- Soil Type: {soil_type}
- Average Annual Rainfall (mm): {_format_number(annual_rainfall)}

Based on this information, provide a list of 3-5 suitable crops. For each crop, explain the reasoning, estimate its profitability, and list specific suitable regions within the given location. Consider factors like climate suitability, soil compatibility, water requirements, market demand (referencing Indian markets), and resistance to common local pests.

Return the result as a JSON array matching the provided schema."""

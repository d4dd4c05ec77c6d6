import asyncio
import json
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from farm_connect.application.panels import (
    CROP_DOCTOR,
    CROP_RECOMMENDATION,
    FERTILIZER,
    FINANCIAL_ADVICE,
    PRICE_FORECAST,
    WEATHER_ADVISORY,
    get_panel_spec,
)
from farm_connect.domain.errors import MediatorBusyError
from farm_connect.mediators import MediatorStatus, RequestMediator
from farm_connect.schemas import CropSuggestion, DiagnosisResult, FertilizerPlan, PanelError


class StubBackend:
    def __init__(self, reply="", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def _answer(self):
        if self.error is not None:
            raise self.error
        return self.reply

    async def generate_text(self, prompt, *, temperature=None):
        self.calls.append({"kind": "text", "prompt": prompt, "temperature": temperature})
        return self._answer()

    async def generate_structured(self, prompt, *, schema, images=(), temperature=None):
        self.calls.append(
            {
                "kind": "structured",
                "prompt": prompt,
                "schema": schema,
                "images": tuple(images),
                "temperature": temperature,
            }
        )
        return self._answer()

    async def continue_chat(self, *, system_instruction, history, message):
        raise AssertionError("panels never chat")


class BlockingBackend(StubBackend):
    def __init__(self, reply="done"):
        super().__init__(reply=reply)
        self.release = asyncio.Event()

    async def generate_text(self, prompt, *, temperature=None):
        self.calls.append({"kind": "text", "prompt": prompt, "temperature": temperature})
        await self.release.wait()
        return self.reply


FERTILIZER_PAYLOAD = {
    "npkRatio": "3:1.5:1",
    "recommendations": [
        {"stage": "Basal Dose", "fertilizer": "DAP", "amount": "50 kg/acre"},
        {"stage": "Tillering Stage", "fertilizer": "Urea", "amount": "40 kg/acre"},
    ],
    "notes": ["Apply urea in split doses."],
    "organicAlternatives": ["Vermi-compost", "Neem Cake"],
}

FERTILIZER_FIELDS = {"crop": "Wheat", "nitrogen": "120", "phosphorus": "60", "potassium": "40"}


def _mediator(panel, backend):
    return RequestMediator(get_panel_spec(panel), backend)


class RequestMediatorTests(unittest.IsolatedAsyncioTestCase):
    async def test_starts_idle(self) -> None:
        mediator = _mediator(FERTILIZER, StubBackend())
        snapshot = mediator.snapshot()
        self.assertEqual(snapshot.status, "idle")
        self.assertIsNone(snapshot.result)
        self.assertIsNone(snapshot.error)

    async def test_missing_field_fails_without_remote_call(self) -> None:
        backend = StubBackend(reply=json.dumps(FERTILIZER_PAYLOAD))
        mediator = _mediator(FERTILIZER, backend)
        outcome = await mediator.submit({**FERTILIZER_FIELDS, "nitrogen": ""})
        self.assertIsInstance(outcome, PanelError)
        self.assertEqual(outcome.kind, "validation")
        self.assertEqual(outcome.message, "Please fill in all required fields.")
        self.assertEqual(mediator.status, MediatorStatus.FAILED)
        self.assertEqual(backend.calls, [])

    async def test_non_numeric_field_fails_without_remote_call(self) -> None:
        backend = StubBackend()
        mediator = _mediator(FERTILIZER, backend)
        outcome = await mediator.submit({**FERTILIZER_FIELDS, "potassium": "plenty"})
        self.assertEqual(outcome.kind, "validation")
        self.assertEqual(backend.calls, [])

    async def test_fertilizer_plan_resolves(self) -> None:
        backend = StubBackend(reply="```json\n" + json.dumps(FERTILIZER_PAYLOAD) + "\n```")
        mediator = _mediator(FERTILIZER, backend)
        result = await mediator.submit(FERTILIZER_FIELDS)

        self.assertIsInstance(result, FertilizerPlan)
        self.assertEqual(result.model_dump(by_alias=True), FERTILIZER_PAYLOAD)
        self.assertEqual(mediator.status, MediatorStatus.RESOLVED)
        self.assertIsNone(mediator.error)
        self.assertEqual(len(backend.calls), 1)
        call = backend.calls[0]
        self.assertEqual(call["kind"], "structured")
        self.assertEqual(call["temperature"], 0.2)
        self.assertIn("Wheat", call["prompt"])
        self.assertIn("Nitrogen (N): 120 kg/ha", call["prompt"])
        self.assertIn("npkRatio", call["schema"]["properties"])
        self.assertEqual(mediator.last_request["nitrogen"], 120.0)

    async def test_unparseable_reply_is_invalid_response(self) -> None:
        backend = StubBackend(reply="I recommend plenty of urea.")
        mediator = _mediator(FERTILIZER, backend)
        outcome = await mediator.submit(FERTILIZER_FIELDS)
        self.assertEqual(outcome.kind, "invalid_response")
        self.assertEqual(outcome.message, get_panel_spec(FERTILIZER).failure_message)
        self.assertIsNone(mediator.result)

    async def test_schema_mismatch_is_invalid_response(self) -> None:
        backend = StubBackend(reply=json.dumps({"notes": ["missing ratio"]}))
        mediator = _mediator(FERTILIZER, backend)
        outcome = await mediator.submit(FERTILIZER_FIELDS)
        self.assertEqual(outcome.kind, "invalid_response")
        self.assertEqual(mediator.status, MediatorStatus.FAILED)

    async def test_remote_failure_never_leaves_pending(self) -> None:
        backend = StubBackend(error=RuntimeError("connection reset"))
        mediator = _mediator(PRICE_FORECAST, backend)
        outcome = await mediator.submit({"crop": "Onion"})
        self.assertEqual(outcome.kind, "remote")
        self.assertEqual(outcome.message, "Failed to get a price forecast from the AI.")
        self.assertEqual(mediator.status, MediatorStatus.FAILED)
        self.assertEqual(len(backend.calls), 1)

    async def test_text_reply_is_stripped(self) -> None:
        backend = StubBackend(reply="  Prices should firm up next month.\n")
        mediator = _mediator(PRICE_FORECAST, backend)
        result = await mediator.submit({"crop": "Onion"})
        self.assertEqual(result, "Prices should firm up next month.")
        self.assertEqual(backend.calls[0]["temperature"], 0.4)

    async def test_new_submission_clears_previous_error(self) -> None:
        backend = StubBackend(error=RuntimeError("down"))
        mediator = _mediator(PRICE_FORECAST, backend)
        await mediator.submit({"crop": "Rice"})
        self.assertIsNotNone(mediator.error)

        backend.error = None
        backend.reply = "Stable."
        await mediator.submit({"crop": "Rice"})
        self.assertIsNone(mediator.error)
        self.assertEqual(mediator.result, "Stable.")

    async def test_new_submission_clears_previous_result(self) -> None:
        backend = StubBackend(reply="Stable.")
        mediator = _mediator(PRICE_FORECAST, backend)
        await mediator.submit({"crop": "Rice"})
        await mediator.submit({"crop": ""})
        self.assertIsNone(mediator.result)
        self.assertEqual(mediator.error.kind, "validation")

    async def test_second_submit_while_pending_is_rejected(self) -> None:
        backend = BlockingBackend(reply="Prices rising.")
        mediator = _mediator(PRICE_FORECAST, backend)
        first = asyncio.create_task(mediator.submit({"crop": "Tomato"}))
        await asyncio.sleep(0)
        self.assertEqual(mediator.status, MediatorStatus.PENDING)

        with self.assertRaises(MediatorBusyError):
            await mediator.submit({"crop": "Tomato"})
        self.assertEqual(len(backend.calls), 1)

        backend.release.set()
        self.assertEqual(await first, "Prices rising.")
        self.assertEqual(mediator.status, MediatorStatus.RESOLVED)

    async def test_unavailable_mediator_never_calls_backend(self) -> None:
        mediator = RequestMediator(get_panel_spec(FERTILIZER), None)
        self.assertEqual(mediator.status, MediatorStatus.UNAVAILABLE)
        outcome = await mediator.submit(FERTILIZER_FIELDS)
        self.assertEqual(outcome.kind, "unavailable")
        self.assertEqual(mediator.status, MediatorStatus.UNAVAILABLE)


class PanelTests(unittest.IsolatedAsyncioTestCase):
    async def test_crop_doctor_without_image(self) -> None:
        backend = StubBackend()
        mediator = _mediator(CROP_DOCTOR, backend)
        outcome = await mediator.submit({})
        self.assertEqual(outcome.kind, "validation")
        self.assertEqual(outcome.message, "Please provide an image of the plant to diagnose.")
        self.assertEqual(backend.calls, [])

    async def test_crop_doctor_sends_image(self) -> None:
        payload = {
            "isHealthy": False,
            "diseaseName": "Leaf Blast",
            "description": "Spindle-shaped lesions on the leaves.",
            "treatment": ["Spray tricyclazole."],
        }
        backend = StubBackend(reply=json.dumps(payload))
        mediator = _mediator(CROP_DOCTOR, backend)
        result = await mediator.submit({"image": b"\xff\xd8\xff\xe0fake-jpeg"})

        self.assertIsInstance(result, DiagnosisResult)
        self.assertFalse(result.is_healthy)
        self.assertEqual(result.disease_name, "Leaf Blast")
        images = backend.calls[0]["images"]
        self.assertEqual(len(images), 1)
        self.assertEqual(images[0].mime_type, "image/jpeg")

    async def test_crop_doctor_accepts_data_url(self) -> None:
        backend = StubBackend(
            reply='{"isHealthy": true, "diseaseName": "Healthy", "description": "Looks fine."}'
        )
        mediator = _mediator(CROP_DOCTOR, backend)
        result = await mediator.submit({"image": "data:image/png;base64,iVBORw0KGgo="})
        self.assertTrue(result.is_healthy)
        self.assertEqual(result.treatment, [])
        self.assertEqual(backend.calls[0]["images"][0].mime_type, "image/png")

    async def test_weather_advisory_embeds_forecast(self) -> None:
        backend = StubBackend(reply="Irrigate lightly before Wednesday.")
        mediator = _mediator(WEATHER_ADVISORY, backend)
        await mediator.submit({"location": "Guntur", "crop": "Chilli"})
        prompt = backend.calls[0]["prompt"]
        self.assertIn("Guntur", prompt)
        self.assertIn("Chilli", prompt)
        self.assertIn("Thunderstorm", prompt)

    async def test_financial_advice_details_are_optional(self) -> None:
        backend = StubBackend(reply="Apply for a Kisan Credit Card.")
        mediator = _mediator(FINANCIAL_ADVICE, backend)
        await mediator.submit(
            {"crop": "Cotton", "land_size": "2.5", "financial_need": "Crop Production Finance"}
        )
        prompt = backend.calls[0]["prompt"]
        self.assertIn("Land Size: 2.5 acres", prompt)
        self.assertIn("Additional Details: None", prompt)
        self.assertEqual(backend.calls[0]["temperature"], 0.3)

    async def test_financial_advice_missing_message(self) -> None:
        mediator = _mediator(FINANCIAL_ADVICE, StubBackend())
        outcome = await mediator.submit({"crop": "Cotton"})
        self.assertEqual(
            outcome.message,
            "Please fill in all required fields: Crop, Land Size, and Financial Need.",
        )

    async def test_crop_recommendation_returns_list(self) -> None:
        payload = [
            {
                "cropName": "Cotton",
                "reasoning": "Black soil retains moisture.",
                "estimatedProfitability": "High",
                "suitableRegions": ["Guntur"],
            },
            {
                "cropName": "Red Gram",
                "reasoning": "Tolerates dry spells.",
                "estimatedProfitability": "Medium",
            },
        ]
        backend = StubBackend(reply=json.dumps(payload))
        mediator = _mediator(CROP_RECOMMENDATION, backend)
        result = await mediator.submit(
            {"location": "Andhra Pradesh", "soil_type": "Black (Regur)", "annual_rainfall": 800}
        )
        self.assertEqual(len(result), 2)
        self.assertIsInstance(result[0], CropSuggestion)
        self.assertEqual(result[1].suitable_regions, [])
        self.assertEqual(backend.calls[0]["schema"]["type"], "array")


if __name__ == "__main__":
    unittest.main()

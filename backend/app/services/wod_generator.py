"""
WOD (workout of the day) generator backed by Gemini with JSON output.
Fields the model leaves out fall back to the request values or empty defaults.
"""
import google.generativeai as genai

from app.config import settings
from app.schemas.wod import WodRequest, WodResponse, WodScaling
from app.services.gemini_common import parse_json_reply, run_generate_content

DEFAULT_WOD_NAME = "Custom WOD"

GENERATION_CONFIG = {
    "temperature": 0.8,
    "top_p": 0.95,
    "max_output_tokens": 1024,
    "response_mime_type": "application/json",
}

SYSTEM_PROMPT = """You are a CrossFit coach who writes WODs (workouts of the day). You know every CrossFit movement, training pattern and scaling method.

Output ONLY a JSON object with exactly these fields:
- type: the workout format (AMRAP, EMOM, For Time, ...)
- name: a creative name for the WOD
- description: the full workout with reps, loads, rounds and time caps
- movements: list of the movements used
- tips: 2-3 technique tips
- scaling: object with beginner, intermediate and advanced versions
No markdown, no explanations."""


def build_prompt(body: WodRequest) -> str:
    lines = [
        "Create a CrossFit WOD with these characteristics:",
        f"- Type: {body.type}",
        f"- Estimated duration: {body.duration} minutes",
        f"- Difficulty level: {body.level}",
    ]
    if body.focus:
        lines.append(f"- Focus: {body.focus}")
    if body.equipment:
        lines.append(f"- Available equipment: {', '.join(body.equipment)}")
    return "\n".join(lines)


def _str_list(value) -> list[str]:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value if item]


def wod_from_reply(data: dict, body: WodRequest) -> WodResponse:
    scaling = data.get("scaling") if isinstance(data.get("scaling"), dict) else {}
    return WodResponse(
        type=str(data.get("type") or body.type),
        name=str(data.get("name") or DEFAULT_WOD_NAME),
        description=str(data.get("description") or ""),
        movements=_str_list(data.get("movements")),
        tips=_str_list(data.get("tips")),
        scaling=WodScaling(
            beginner=str(scaling.get("beginner") or ""),
            intermediate=str(scaling.get("intermediate") or ""),
            advanced=str(scaling.get("advanced") or ""),
        ),
    )


async def generate_wod(body: WodRequest) -> WodResponse:
    """Ask Gemini for a WOD. Raises ValueError on an empty or non-JSON reply."""
    model = genai.GenerativeModel(
        settings.gemini_model,
        generation_config=GENERATION_CONFIG,
        system_instruction=SYSTEM_PROMPT,
    )
    response = await run_generate_content(model, [build_prompt(body)])
    return wod_from_reply(parse_json_reply(response), body)

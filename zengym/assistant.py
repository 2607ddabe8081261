# backend/zengym/assistant.py
"""
"Zen", the fitness assistant.

Questions go to the OpenAI chat completions API first. Any failure there
(missing key, timeout, auth, rate limit, empty reply) falls back to a
canned answer picked by keyword, so `ask` always returns a string.
"""
import logging
from typing import Optional

from openai import OpenAI

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are Zen, a fitness and nutrition AI assistant for ZenGym. You provide helpful, encouraging advice about:
- Workout routines and exercises
- Nutrition and meal planning
- Fitness goals and motivation
- Healthy lifestyle tips

Keep responses concise (under 200 words), practical, and motivating. Always encourage users to consult healthcare professionals for medical advice."""

MAX_TOKENS = 300
TEMPERATURE = 0.7

FALLBACK_RESPONSES = {
    "nutrition": (
        "For a high-protein breakfast, try Greek yogurt with berries and granola, "
        "or scrambled eggs with spinach and whole grain toast. These provide sustained "
        "energy and help with muscle recovery. Aim for 20-25g of protein to kickstart "
        "your metabolism!"
    ),
    "calories": (
        "For someone who's 160lbs and lifting 3x/week, aim for around 2,200-2,400 "
        "calories daily for maintenance, or 2,000-2,200 for gradual fat loss. Focus on "
        "0.8-1g protein per lb of body weight (128-160g daily). Adjust based on your "
        "energy levels and progress!"
    ),
    "routine": (
        "Here's a quick 20-minute core routine:\n"
        "• Plank holds (3x 30-60 seconds)\n"
        "• Russian twists (3x 20 reps)\n"
        "• Mountain climbers (3x 30 seconds)\n"
        "• Dead bugs (3x 10 each side)\n"
        "• Bicycle crunches (3x 15 each side)\n"
        "Rest 30 seconds between exercises. Focus on form over speed!"
    ),
    "recovery": (
        "Post-workout, eat within 30-60 minutes! Try chocolate milk, protein shake with "
        "banana, or grilled chicken with sweet potato. Aim for 3:1 or 4:1 carb-to-protein "
        "ratio to replenish glycogen and support muscle repair. Don't forget to hydrate!"
    ),
    "motivation": (
        "Rest days are growth days! Your muscles repair and get stronger during recovery. "
        "Try light activities like walking, yoga, or stretching. Remember: consistency "
        "beats intensity. Every small step forward is progress worth celebrating!"
    ),
    "default": (
        "Great question! As your fitness companion, I recommend focusing on proper form, "
        "consistent nutrition, and adequate rest. Every fitness journey is unique - listen "
        "to your body and celebrate small wins. For personalized advice, consider "
        "consulting a fitness professional!"
    ),
}

# First match wins. Recovery sits ahead of routine because "post-workout"
# contains "workout".
CATEGORY_KEYWORDS = (
    ("recovery", ("recovery", "post-workout", "muscle")),
    ("nutrition", ("breakfast", "protein")),
    ("calories", ("calorie", "weight", "lifting")),
    ("routine", ("workout", "exercise", "core")),
    ("motivation", ("motivation", "rest day", "rest-day")),
)


def classify_question(question: str) -> str:
    lower_q = (question or "").lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(k in lower_q for k in keywords):
            return category
    return "default"


def fallback_answer(question: str) -> str:
    return FALLBACK_RESPONSES[classify_question(question)]


class AnswerProvider:
    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = "gpt-4o",
        timeout: float = 20.0,
        client=None,
    ):
        self.model = model
        self.client = client
        if self.client is None and api_key:
            self.client = OpenAI(api_key=api_key, timeout=timeout, max_retries=0)

    @classmethod
    def from_config(cls, config):
        return cls(
            api_key=config.get("OPENAI_API_KEY"),
            model=config.get("OPENAI_MODEL", "gpt-4o"),
            timeout=config.get("OPENAI_TIMEOUT_SECONDS", 20.0),
        )

    def ask(self, question: str) -> str:
        if self.client is None:
            return fallback_answer(question)

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": question},
                ],
                max_tokens=MAX_TOKENS,
                temperature=TEMPERATURE,
            )
            content = response.choices[0].message.content
        except Exception as e:
            logger.warning("OpenAI request failed, using fallback answer: %s", e)
            return fallback_answer(question)

        if not content or not content.strip():
            return fallback_answer(question)
        return content.strip()

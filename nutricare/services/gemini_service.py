# gemini_service.py
import copy
import json
import logging
import re
import time

import google.generativeai as genai

from nutricare.data.fallback_plan import FALLBACK_DIET_PLAN

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-1.5-flash"

CHAT_FALLBACK = (
    "**For personalized advice**, consult your healthcare provider. "
    "**I provide general guidance only** based on evidence-based nutrition information."
)

FENCED_JSON = re.compile(r"```json\s*([\s\S]*?)\s*```")
BARE_OBJECT = re.compile(r"\{[\s\S]*\}")


class GenerationError(Exception):
    """The model could not be reached or returned nothing usable."""


# -----------------------------
# Prompt templates
# -----------------------------
DIET_PLAN_PROMPT = """You are an expert nutritionist specializing in maternal health and pregnancy nutrition for Gujarati women. Generate a comprehensive, personalized diet plan specifically tailored for Gujarati cuisine and dietary preferences.

IMPORTANT GUJARATI DIETARY CONSIDERATIONS:
- This diet plan is specifically for Gujarati women
- In Gujarat, eggs are considered non-vegetarian
- If user is vegetarian, DO NOT include eggs in any meals
- If user is non-vegetarian, you can include eggs and other non-veg options
- Focus on traditional Gujarati foods and cooking methods
- Include popular Gujarati dishes like dhokla, thepla, kadhi, dal, roti, etc.
- Consider Gujarati meal timing and eating habits

HEALTH PROFILE:
- Age: {age} years
- Height: {height} cm, Weight: {weight} kg, BMI: {bmi}
- Pregnancy Stage: {trimester} trimester
- Multiple Pregnancy: {multiple}
- High Risk: {high_risk}

MEDICAL DATA:
- Hemoglobin: {hemoglobin} g/dL (Normal: 11.0-15.0 g/dL)
- Blood Sugar: {blood_sugar} mg/dL (Normal: 70-100 mg/dL)
- Blood Pressure: {systolic}/{diastolic} mmHg
- Medical History: {medical_history}

VITAMIN & MINERAL LEVELS:
- Vitamin D: {vitamin_d} ng/mL (Normal: 30-100 ng/mL)
- Vitamin B12: {vitamin_b12} pg/mL (Normal: 200-900 pg/mL)
- Vitamin A: {vitamin_a} mg/L (Normal: 0.3-0.7 mg/L)
- Vitamin C: {vitamin_c} mg/dL (Normal: 0.4-2.0 mg/dL)
- Calcium: {calcium} mg/dL (Normal: 8.5-10.5 mg/dL)
- Serum Ferritin: {ferritin} ng/mL (Normal: 15-150 ng/mL)

DIETARY PREFERENCES:
- Diet Type: {diet} (IMPORTANT: If vegetarian, NO eggs. If non-vegetarian, can include eggs)
- Food Allergies: {allergies}
- Religious/Cultural Restrictions: {restrictions}
{preferences}
LIFESTYLE:
- Activity Level: {activity}
- Sleep: {sleep} hours/night
- Water Intake: {water} liters/day
- Current Supplements: {supplements}

ADDITIONAL NOTES: {notes}

Please generate a comprehensive 7-day Gujarati diet plan and return only a JSON object like this:
{{
  "overallScore": 85,
  "recommendations": ["..."],
  "nutritionalInsights": {{
    "strengths": ["..."],
    "concerns": ["..."],
    "priorities": ["..."]
  }},
  "weeklyMealPlan": {{
    "monday": {{
      "breakfast": {{"name": "...", "calories": 320, "nutrients": ["Iron"], "ingredients": ["..."], "instructions": "..."}},
      "lunch": {{"name": "...", "calories": 480, "nutrients": ["Protein"], "ingredients": ["..."], "instructions": "..."}},
      "dinner": {{"name": "...", "calories": 520, "nutrients": ["Calcium"], "ingredients": ["..."], "instructions": "..."}},
      "snacks": [{{"name": "...", "calories": 180, "nutrients": ["Protein"], "time": "10:00 AM"}}]
    }}
  }},
  "supplements": ["..."],
  "restrictions": ["..."],
  "dailyTargets": {{"calories": 2200, "protein": 75, "iron": 27, "calcium": 1000, "folate": 600, "vitaminD": 600}}
}}

GUJARATI DIETARY GUIDELINES:
1. Focus on traditional Gujarati foods: roti, dal, sabzi, kadhi, thepla, dhokla
2. Include iron-rich Gujarati foods: bajra, jowar, ragi, green leafy vegetables
3. Use calcium-rich foods: curd, paneer, sesame seeds, ragi
4. Include protein sources: dal, legumes, paneer, curd
5. Consider Gujarati meal timing: breakfast (8-9 AM), lunch (1-2 PM), dinner (8-9 PM)
6. Include traditional snacks: dhokla, thepla, roasted chana, fruits
7. Use Gujarati cooking methods: steaming, roasting, slow cooking
8. Include probiotic foods: curd, kadhi, fermented foods
9. Consider seasonal availability of Gujarati vegetables
10. Respect dietary preferences: NO eggs for vegetarians, can include for non-vegetarians

Generate a complete 7-day meal plan with breakfast, lunch, dinner, and 2-3 snacks per day. Make sure all nutritional targets are met and the plan is safe for pregnancy. Include traditional Gujarati dishes and cooking methods."""

CHAT_PROMPT = """You are a certified nutrition expert specializing in pregnancy and lactation. Provide ONLY evidence-based, medically accurate information.

CRITICAL GUIDELINES:
1. Keep responses to EXACTLY 2-3 lines maximum
2. Use **bold text** for key terms only
3. Provide ONLY medically proven facts
4. If unsure about accuracy, say "Consult your healthcare provider"
5. Focus on safety and evidence-based recommendations
6. Avoid speculation or unproven claims
7. Be direct and factual - no lengthy explanations
8. ALWAYS provide a helpful response - never say "I can't help" or similar

User question: {question}

Provide a brief, accurate response (2-3 lines only):"""


def _join(values):
    return ", ".join(values) if values else "None"


def _preferences_block(preferences):
    if not preferences:
        return ""
    lines = []
    if preferences.get("cuisinePreference"):
        lines.append(f"- Cuisine Preference: {_join(preferences['cuisinePreference'])}")
    if preferences.get("mealCount"):
        lines.append(f"- Meals Per Day: {preferences['mealCount']}")
    if preferences.get("calorieTarget"):
        lines.append(f"- Calorie Target: {preferences['calorieTarget']} kcal/day")
    return "\n".join(lines) + "\n" if lines else ""


def build_diet_plan_prompt(health_data: dict, preferences: dict = None) -> str:
    h = health_data
    bp = h.get("bloodPressure") or {}
    iron = h.get("ironLevels") or {}
    if h.get("isMultiple"):
        multiple = f"Yes ({h.get('multipleType')})"
    else:
        multiple = "No"
    return DIET_PLAN_PROMPT.format(
        age=h.get("age"),
        height=h.get("height"),
        weight=h.get("weight"),
        bmi=h.get("bmi"),
        trimester=h.get("trimester"),
        multiple=multiple,
        high_risk="Yes" if h.get("isHighRisk") else "No",
        hemoglobin=h.get("hemoglobinLevel"),
        blood_sugar=h.get("bloodSugar"),
        systolic=bp.get("systolic"),
        diastolic=bp.get("diastolic"),
        medical_history=_join(h.get("medicalHistory")),
        vitamin_d=h.get("vitaminD"),
        vitamin_b12=h.get("vitaminB12"),
        vitamin_a=h.get("vitaminA"),
        vitamin_c=h.get("vitaminC"),
        calcium=h.get("calcium"),
        ferritin=iron.get("serumFerritin", h.get("serumFerritin")),
        diet=h.get("dietPreference"),
        allergies=_join(h.get("foodAllergies")),
        restrictions=_join(h.get("religiousCulturalRestrictions")),
        preferences=_preferences_block(preferences),
        activity=h.get("activityLevel"),
        sleep=h.get("sleepHours"),
        water=h.get("waterIntake"),
        supplements=_join(h.get("currentSupplements")),
        notes=h.get("notes") or "None",
    )


def parse_plan_response(text: str) -> dict:
    """
    Pull the JSON plan out of a model reply.

    The model often wraps JSON in a markdown fence; both fenced and bare objects
    are accepted. Anything unparseable yields a copy of the fallback plan.
    """
    match = FENCED_JSON.search(text or "") or BARE_OBJECT.search(text or "")
    if match:
        raw = match.group(1) if match.groups() else match.group(0)
        try:
            plan = json.loads(raw)
            if isinstance(plan, dict):
                return plan
        except json.JSONDecodeError as e:
            logger.warning("Could not decode diet plan JSON: %s", e)
    else:
        logger.warning("No JSON object found in diet plan response")
    return copy.deepcopy(FALLBACK_DIET_PLAN)


class GeminiService:
    def __init__(self, api_key=None, model_name=DEFAULT_MODEL):
        if api_key:
            genai.configure(api_key=api_key)
        self.model_name = model_name
        self._model = None

    @property
    def model(self):
        if self._model is None:
            self._model = genai.GenerativeModel(self.model_name)
        return self._model

    def _generate(self, prompt: str) -> str:
        response = self.model.generate_content(prompt)
        return (response.text or "").strip()

    def generate_diet_plan(self, health_data: dict, preferences: dict = None, user_id: str = None) -> dict:
        prompt = build_diet_plan_prompt(health_data, preferences)
        try:
            text = self._generate(prompt)
        except Exception as e:
            logger.error("Error generating diet plan with Gemini: %s", e)
            raise GenerationError("Failed to generate diet plan") from e

        plan = parse_plan_response(text)
        return {
            "id": f"plan_{int(time.time() * 1000)}",
            "userId": user_id or health_data.get("userId"),
            "healthEntryId": health_data.get("id") or "",
            "generatedAt": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime()),
            **plan,
        }

    def answer_question(self, question: str) -> str:
        try:
            text = self._generate(CHAT_PROMPT.format(question=question))
        except Exception as e:
            logger.error("Gemini error: %s", e)
            return CHAT_FALLBACK
        return text or CHAT_FALLBACK

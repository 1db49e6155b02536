from datetime import datetime

PLAN_TYPES = ("ai_generated", "custom")

# fields copied verbatim from a generated plan
PLAN_FIELDS = (
    "overallScore", "recommendations", "nutritionalInsights", "weeklyMealPlan",
    "supplements", "restrictions", "dailyTargets",
)


class Plan:
    def __init__(self, user_id, data):
        self.user_id = user_id
        self.health_entry_id = data.get("healthEntryId") or None
        plan_type = data.get("planType", "ai_generated")
        self.plan_type = plan_type if plan_type in PLAN_TYPES else "ai_generated"
        self.fields = {k: data[k] for k in PLAN_FIELDS if k in data}
        self.fields.setdefault("overallScore", 0)
        self.fields.setdefault("weeklyMealPlan", {})
        self.generated_id = data.get("id")
        self.created_at = datetime.utcnow()

    def to_dict(self):
        return {
            "userId": self.user_id,
            "healthEntryId": self.health_entry_id,
            "generatedId": self.generated_id,
            "planType": self.plan_type,
            "status": "active",
            "isActive": True,
            "analysisDate": self.created_at,
            **self.fields,
            "createdAt": self.created_at,
            "updatedAt": self.created_at,
        }
